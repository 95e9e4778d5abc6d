"""Services for the master food catalog."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_planner.domain.errors import NotFoundError, PermissionDeniedError
from calorie_planner.domain.foods import DEFAULT_INGREDIENT_UNIT, FoodItem, FoodKind

_logger = logging.getLogger(__name__)


class FoodCatalogRepository(Protocol):
    """Persistence interface for catalog items."""

    def list_available(self, user_id: UUID) -> list[FoodItem]:
        """Return global items and the user's items in stable order."""

    def list_owned(self, user_id: UUID) -> list[FoodItem]:
        """Return only the items owned by the user."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return an item by id, if present."""

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the items found for the given ids."""

    def create_food(self, item: FoodItem) -> FoodItem:
        """Insert an item and return it with its identity."""

    def update_food(self, item: FoodItem) -> FoodItem:
        """Update an existing item and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete an item by id."""


@dataclass
class FoodCatalog:
    """Application service for catalog lookups and writes."""

    repository: FoodCatalogRepository

    def list_available(self, user_id: UUID) -> list[FoodItem]:
        """Return every item the user may pick from."""
        return self.repository.list_available(user_id)

    def list_owned(self, user_id: UUID) -> list[FoodItem]:
        """Return the user's own items."""
        return self.repository.list_owned(user_id)

    def resolve_many(self, ids: Iterable[UUID]) -> dict[UUID, FoodItem]:
        """Batch lookup; ids that do not exist are left out of the result."""
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return {}
        return {
            item.id: item
            for item in self.repository.get_foods(unique_ids)
            if item.id is not None
        }

    def resolve_available(
        self, ids: Iterable[UUID], user_id: UUID
    ) -> dict[UUID, FoodItem]:
        """Batch lookup limited to global items and the user's own."""
        return {
            food_id: item
            for food_id, item in self.resolve_many(ids).items()
            if item.is_available_to(user_id)
        }

    def get(self, food_id: UUID) -> FoodItem:
        """Return an item or raise NotFoundError."""
        item = self.repository.get_food(food_id)
        if item is None:
            raise NotFoundError("FoodItem", [food_id])
        return item

    def get_available(self, food_id: UUID, user_id: UUID) -> FoodItem:
        """Return an item the user may use; other users' items are not found."""
        item = self.repository.get_food(food_id)
        if item is None or not item.is_available_to(user_id):
            raise NotFoundError("FoodItem", [food_id])
        return item

    def save(self, item: FoodItem) -> FoodItem:
        """Insert a new item or update an existing one."""
        if item.id is None:
            return self.repository.create_food(item)
        return self.repository.update_food(item)

    def create_ingredient(
        self,
        user_id: UUID,
        name: str,
        calories: int,
        unit: str = DEFAULT_INGREDIENT_UNIT,
    ) -> FoodItem:
        """Create a user-owned ingredient."""
        return self.save(
            FoodItem(
                id=None,
                user_id=user_id,
                name=name,
                calories=calories,
                unit=unit,
                kind=FoodKind.INGREDIENT,
            )
        )

    def remove(self, food_id: UUID, user_id: UUID) -> None:
        """Delete a user's own item; global items are read-only."""
        item = self.get(food_id)
        if item.user_id != user_id:
            _logger.warning(
                "Rejected food removal: food_id=%s user_id=%s", food_id, user_id
            )
            raise PermissionDeniedError("FoodItem", food_id, user_id)
        self.repository.delete_food(food_id)
