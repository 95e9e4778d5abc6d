"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealLogEntry:
    """A logged meal with name and calories copied at creation time.

    ``food_item_id`` is informational only and may point at an item that no
    longer exists.
    """

    id: UUID
    user_id: UUID
    food_item_id: UUID | None
    name: str
    calories: int
    amount: float
    eaten_at: datetime


@dataclass(frozen=True)
class DailyProgress:
    """Calorie intake for today against the user's target."""

    target_calories: int
    current_calories: int
    remaining_calories: int
    progress_percent: int
    entries: list[MealLogEntry]
