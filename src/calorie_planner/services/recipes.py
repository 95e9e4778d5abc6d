"""Composite food creation from master and manual ingredient lines."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_planner.domain.calories import round_kcal
from calorie_planner.domain.errors import NotFoundError, ValidationError
from calorie_planner.domain.foods import (
    COMPOSITE_KINDS,
    COMPOSITE_UNIT,
    CompositeFood,
    FoodItem,
    FoodKind,
    ManualEntry,
    MasterRef,
    RecipeLine,
    RecipeLineView,
    RecipeSource,
    display_name,
)
from calorie_planner.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for composite items and their lines."""

    def create_composite(
        self,
        parent: FoodItem,
        lines: list[tuple[RecipeSource, int]],
    ) -> tuple[FoodItem, list[RecipeLine]]:
        """Persist the parent, its lines and their summed calories atomically.

        The parent is inserted with zero calories, every line is bound to it
        and the parent total is then set to the sum of line calories, all in
        one transaction.
        """

    def list_lines(self, parent_food_id: UUID) -> list[RecipeLine]:
        """Return the lines of a composite item."""


@dataclass
class RecipeComposer:
    """Builds composite catalog items and computes their calories."""

    catalog: FoodCatalog
    repository: RecipeRepository

    def create_composite(
        self,
        owner_id: UUID,
        name: str,
        kind: FoodKind | str,
        lines: Sequence[object],
    ) -> CompositeFood:
        """Create a DISH or MEAL_SET from ingredient lines."""
        composite_kind = _validate_kind(kind)
        sources = [_validate_line(line) for line in lines]

        master_ids = [
            source.food_item_id for source in sources if isinstance(source, MasterRef)
        ]
        masters = self.catalog.resolve_available(master_ids, owner_id)
        missing = [
            food_id for food_id in dict.fromkeys(master_ids) if food_id not in masters
        ]
        if missing:
            _logger.warning(
                "Composite rejected, unavailable ingredients: owner_id=%s missing=%s",
                owner_id,
                missing,
            )
            raise NotFoundError("FoodItem", missing)

        contributions = [
            (source, line_calories(source, masters)) for source in sources
        ]
        parent = FoodItem(
            id=None,
            user_id=owner_id,
            name=name,
            calories=0,
            unit=COMPOSITE_UNIT,
            kind=composite_kind,
        )
        item, saved_lines = self.repository.create_composite(parent, contributions)
        _logger.info(
            "Composite created: food_id=%s kind=%s lines=%s calories=%s",
            item.id,
            item.kind,
            len(saved_lines),
            item.calories,
        )
        return CompositeFood(item=item, lines=_views(saved_lines, masters))

    def get_composite(self, food_id: UUID, user_id: UUID) -> CompositeFood:
        """Return a composite item with its lines and display names."""
        item = self.catalog.get_available(food_id, user_id)
        lines = self.repository.list_lines(food_id)
        masters = self.catalog.resolve_many(
            line.source.food_item_id
            for line in lines
            if isinstance(line.source, MasterRef)
        )
        return CompositeFood(item=item, lines=_views(lines, masters))


def line_calories(source: RecipeSource, masters: Mapping[UUID, FoodItem]) -> int:
    """Calories contributed by one line, rounded per line."""
    if isinstance(source, MasterRef):
        return round_kcal(masters[source.food_item_id].calories * source.amount)
    return source.calories or 0


def parse_recipe_line(payload: Mapping[str, object]) -> RecipeSource:
    """Build a recipe line from loose fields.

    Exactly one of ``food_item_id`` or the manual fields (``manual_name``,
    ``manual_calories``) must be given.
    """
    food_item_id = payload.get("food_item_id")
    manual_name = _blank_to_none(payload.get("manual_name"))
    manual_calories = payload.get("manual_calories")
    has_manual = manual_name is not None or manual_calories is not None

    if food_item_id is not None and has_manual:
        raise ValidationError("Recipe line cannot be both a master and a manual entry")
    if food_item_id is not None:
        amount = payload.get("amount")
        return MasterRef(
            food_item_id=_parse_uuid(food_item_id),
            amount=1.0 if amount is None else _to_float(amount),
        )
    if has_manual:
        return ManualEntry(
            name=manual_name,
            calories=None if manual_calories is None else _to_int(manual_calories),
        )
    raise ValidationError("Recipe line needs a food item id or manual details")


def _validate_kind(kind: FoodKind | str) -> FoodKind:
    try:
        resolved = FoodKind(kind)
    except ValueError as exc:
        raise ValidationError(f"Unknown food kind: {kind}") from exc
    if resolved not in COMPOSITE_KINDS:
        raise ValidationError(f"Composite kind must be DISH or MEAL_SET, got {kind}")
    return resolved


def _validate_line(line: object) -> RecipeSource:
    if isinstance(line, MasterRef):
        if not isinstance(line.food_item_id, UUID):
            raise ValidationError("Master reference requires a food item id")
        if not isinstance(line.amount, int | float):
            raise ValidationError("Master reference amount must be a number")
        return line
    if isinstance(line, ManualEntry):
        entry = ManualEntry(name=_blank_to_none(line.name), calories=line.calories)
        if entry.name is None and entry.calories is None:
            raise ValidationError("Manual entry requires a name or calories")
        if entry.calories is not None and entry.calories < 0:
            raise ValidationError("Manual entry calories cannot be negative")
        return entry
    if isinstance(line, Mapping):
        return _validate_line(parse_recipe_line(line))
    raise ValidationError(f"Unsupported recipe line: {line!r}")


def _views(
    lines: list[RecipeLine], masters: Mapping[UUID, FoodItem]
) -> list[RecipeLineView]:
    views = []
    for line in lines:
        master = (
            masters.get(line.source.food_item_id)
            if isinstance(line.source, MasterRef)
            else None
        )
        views.append(
            RecipeLineView(line=line, display_name=display_name(line.source, master))
        )
    return views


def _parse_uuid(value: object) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid food item id: {value}") from exc


def _to_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid amount: {value}") from exc


def _to_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid calories: {value}") from exc


def _blank_to_none(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
