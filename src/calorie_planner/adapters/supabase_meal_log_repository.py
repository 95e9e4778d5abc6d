"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from calorie_planner.domain.meals import MealLogEntry
from calorie_planner.services.meals import MealLogRepository

_COLUMNS = "id, user_id, food_item_id, name, calories, amount, eaten_at"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_item_id: UUID | None,
        name: str,
        calories: int,
        amount: float,
        eaten_at: datetime,
    ) -> MealLogEntry:
        """Insert a meal log row and return it."""
        response = (
            self.client.table("meal_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_item_id": str(food_item_id) if food_item_id else None,
                    "name": name,
                    "calories": calories,
                    "amount": amount,
                    "eaten_at": eaten_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_entry(response.data[0])

    def get_entry(self, log_id: UUID) -> MealLogEntry | None:
        """Return a meal log row by id."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return meal logs in the time range."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("eaten_at", start.isoformat())
            .lt("eaten_at", end.isoformat())
            .order("eaten_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, log_id: UUID) -> None:
        """Delete a meal log row."""
        self.client.table("meal_logs").delete().eq("id", str(log_id)).execute()


def _parse_entry(row: dict[str, object]) -> MealLogEntry:
    food_item_raw = row.get("food_item_id")
    amount_raw = row.get("amount")
    return MealLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_item_id=UUID(str(food_item_raw)) if food_item_raw else None,
        name=str(row.get("name", "")),
        calories=int(row.get("calories") or 0),
        amount=1.0 if amount_raw is None else float(amount_raw),
        eaten_at=datetime.fromisoformat(str(row["eaten_at"])),
    )
