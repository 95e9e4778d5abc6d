"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from calorie_planner.domain.foods import FoodItem, FoodKind
from calorie_planner.services.catalog import FoodCatalogRepository

_COLUMNS = "id, user_id, name, calories, unit, kind, created_at"


@dataclass
class SupabaseFoodRepository(FoodCatalogRepository):
    """Supabase-backed repository for catalog items."""

    client: Client

    def list_available(self, user_id: UUID) -> list[FoodItem]:
        """Return global items and the user's items, oldest first."""
        response = (
            self.client.table("food_items")
            .select(_COLUMNS)
            .or_(f"user_id.is.null,user_id.eq.{user_id}")
            .order("created_at", desc=False)
            .order("id", desc=False)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def list_owned(self, user_id: UUID) -> list[FoodItem]:
        """Return items owned by the user."""
        response = (
            self.client.table("food_items")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .order("id", desc=False)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return an item by id, if present."""
        response = (
            self.client.table("food_items")
            .select(_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the items found for the given ids."""
        if not food_ids:
            return []
        response = (
            self.client.table("food_items")
            .select(_COLUMNS)
            .in_("id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def create_food(self, item: FoodItem) -> FoodItem:
        """Insert an item and return it with its identity."""
        response = self.client.table("food_items").insert(_payload(item)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return parse_food(response.data[0])

    def update_food(self, item: FoodItem) -> FoodItem:
        """Update an item and return it."""
        response = (
            self.client.table("food_items")
            .update(_payload(item))
            .eq("id", str(item.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food item")
        return parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete an item by id."""
        self.client.table("food_items").delete().eq("id", str(food_id)).execute()


def _payload(item: FoodItem) -> dict[str, object]:
    return {
        "user_id": str(item.user_id) if item.user_id else None,
        "name": item.name,
        "calories": item.calories,
        "unit": item.unit,
        "kind": item.kind.value,
    }


def parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food_items row into a domain model."""
    created_raw = row.get("created_at")
    return FoodItem(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])) if row.get("user_id") else None,
        name=str(row.get("name", "")),
        calories=int(row.get("calories") or 0),
        unit=str(row.get("unit") or ""),
        kind=FoodKind(str(row.get("kind") or FoodKind.INGREDIENT)),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
