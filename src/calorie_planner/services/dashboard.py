"""Daily intake summary against the cached target."""

from dataclasses import dataclass
from uuid import UUID

from calorie_planner.domain.meals import DailyProgress
from calorie_planner.services.meals import MealLedger
from calorie_planner.services.profiles import ProfileCoordinator

MAX_PROGRESS_PERCENT = 100


@dataclass
class DailyDashboard:
    """Combines today's meals with the user's target calories."""

    meal_ledger: MealLedger
    profile_coordinator: ProfileCoordinator

    def today(self, user_id: UUID) -> DailyProgress:
        """Return today's totals, remaining calories and capped progress."""
        entries = self.meal_ledger.list_today(user_id)
        target = self.profile_coordinator.get_profile(user_id).target_calories
        current = sum(entry.calories for entry in entries)
        progress = 0
        if target > 0:
            progress = min(int(current / target * 100), MAX_PROGRESS_PERCENT)
        return DailyProgress(
            target_calories=target,
            current_calories=current,
            remaining_calories=target - current,
            progress_percent=progress,
            entries=entries,
        )
