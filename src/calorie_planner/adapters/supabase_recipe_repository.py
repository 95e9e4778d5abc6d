"""Supabase implementation for composite items and recipe lines."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_planner.adapters.supabase_food_repository import parse_food
from calorie_planner.domain.foods import (
    FoodItem,
    ManualEntry,
    MasterRef,
    RecipeLine,
    RecipeSource,
)
from calorie_planner.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes.

    Composite creation goes through the ``create_composite_food`` Postgres
    function so the parent row, its lines and the final total commit together.
    """

    client: Client

    def create_composite(
        self,
        parent: FoodItem,
        lines: list[tuple[RecipeSource, int]],
    ) -> tuple[FoodItem, list[RecipeLine]]:
        """Create the parent item and its lines in one transaction."""
        response = self.client.rpc(
            "create_composite_food",
            {
                "p_user_id": str(parent.user_id) if parent.user_id else None,
                "p_name": parent.name,
                "p_kind": parent.kind.value,
                "p_unit": parent.unit,
                "p_lines": [
                    _line_payload(source, calories) for source, calories in lines
                ],
            },
        ).execute()
        if not response.data:
            raise RuntimeError("Failed to create composite food")
        data = response.data
        if isinstance(data, list):
            data = data[0]
        item = parse_food(data["food"])
        return item, [parse_line(row) for row in data.get("lines") or []]

    def list_lines(self, parent_food_id: UUID) -> list[RecipeLine]:
        """Return the lines of a composite item in insertion order."""
        response = (
            self.client.table("recipe_lines")
            .select(
                "id, parent_food_id, child_food_id, manual_name, manual_calories, "
                "amount, calories, position"
            )
            .eq("parent_food_id", str(parent_food_id))
            .order("position", desc=False)
            .execute()
        )
        return [parse_line(row) for row in response.data or []]


def _line_payload(source: RecipeSource, calories: int) -> dict[str, object]:
    if isinstance(source, MasterRef):
        return {
            "child_food_id": str(source.food_item_id),
            "manual_name": None,
            "manual_calories": None,
            "amount": source.amount,
            "calories": calories,
        }
    return {
        "child_food_id": None,
        "manual_name": source.name,
        "manual_calories": source.calories,
        "amount": source.amount,
        "calories": calories,
    }


def parse_line(row: dict[str, object]) -> RecipeLine:
    """Parse a recipe_lines row into a domain model."""
    source: RecipeSource
    if row.get("child_food_id"):
        amount = row.get("amount")
        source = MasterRef(
            food_item_id=UUID(str(row["child_food_id"])),
            amount=1.0 if amount is None else float(amount),
        )
    else:
        manual_calories = row.get("manual_calories")
        source = ManualEntry(
            name=row.get("manual_name"),
            calories=None if manual_calories is None else int(manual_calories),
        )
    return RecipeLine(
        id=UUID(str(row["id"])),
        parent_food_id=UUID(str(row["parent_food_id"])),
        source=source,
        calories=int(row.get("calories") or 0),
    )
