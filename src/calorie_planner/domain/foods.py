"""Domain models for the food catalog and composite recipes."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID

MANUAL_AMOUNT = 1.0
DEFAULT_INGREDIENT_UNIT = "serving"
COMPOSITE_UNIT = "portion"


class FoodKind(StrEnum):
    """Kind of catalog item."""

    INGREDIENT = "INGREDIENT"
    DISH = "DISH"
    MEAL_SET = "MEAL_SET"


COMPOSITE_KINDS = frozenset({FoodKind.DISH, FoodKind.MEAL_SET})


@dataclass(frozen=True)
class FoodItem:
    """Catalog item; calories are per one unit.

    A missing ``user_id`` marks a global system item shared by every user.
    """

    id: UUID | None
    user_id: UUID | None
    name: str
    calories: int
    unit: str
    kind: FoodKind
    created_at: datetime | None = None

    @property
    def is_global(self) -> bool:
        return self.user_id is None

    def is_available_to(self, user_id: UUID) -> bool:
        """Global items are usable by everyone, private ones by their owner."""
        return self.is_global or self.user_id == user_id


@dataclass(frozen=True)
class MasterRef:
    """Ingredient line pointing at a catalog item by id."""

    food_item_id: UUID
    amount: float = 1.0


@dataclass(frozen=True)
class ManualEntry:
    """Ingredient line typed in by the user with no catalog link."""

    name: str | None
    calories: int | None = None

    @property
    def amount(self) -> float:
        return MANUAL_AMOUNT


RecipeSource = MasterRef | ManualEntry


@dataclass(frozen=True)
class RecipeLine:
    """Persisted ingredient contribution of a composite item."""

    id: UUID
    parent_food_id: UUID
    source: RecipeSource
    calories: int

    @property
    def amount(self) -> float:
        return self.source.amount


@dataclass(frozen=True)
class RecipeLineView:
    """Recipe line with its resolved display name."""

    line: RecipeLine
    display_name: str | None


@dataclass(frozen=True)
class CompositeFood:
    """Composite catalog item together with its lines."""

    item: FoodItem
    lines: list[RecipeLineView]


def display_name(source: RecipeSource, master: FoodItem | None) -> str | None:
    """Return the master item's name when present, else the manual name."""
    if master is not None:
        return master.name
    if isinstance(source, ManualEntry):
        return source.name
    return None
