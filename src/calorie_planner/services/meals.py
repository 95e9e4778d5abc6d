"""Meal ledger service with snapshot semantics."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_planner.domain.calories import round_kcal
from calorie_planner.domain.errors import NotFoundError, PermissionDeniedError
from calorie_planner.domain.foods import MANUAL_AMOUNT
from calorie_planner.domain.meals import MealLogEntry
from calorie_planner.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal log entries."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_item_id: UUID | None,
        name: str,
        calories: int,
        amount: float,
        eaten_at: datetime,
    ) -> MealLogEntry:
        """Insert a meal log entry and return it."""

    def get_entry(self, log_id: UUID) -> MealLogEntry | None:
        """Return an entry by id, if present."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return entries with start <= eaten_at < end, oldest first."""

    def delete_entry(self, log_id: UUID) -> None:
        """Delete an entry by id."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class MealLedger:
    """Records meals, copying name and calories at creation time."""

    catalog: FoodCatalog
    repository: MealLogRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now

    def record_from_master(
        self, user_id: UUID, food_item_id: UUID, amount: float
    ) -> MealLogEntry:
        """Log a catalog item scaled by ``amount``."""
        item = self.catalog.get_available(food_item_id, user_id)
        return self.repository.create_entry(
            user_id=user_id,
            food_item_id=item.id,
            name=item.name,
            calories=round_kcal(item.calories * amount),
            amount=amount,
            eaten_at=self.clock(),
        )

    def record_manual(self, user_id: UUID, name: str, calories: int) -> MealLogEntry:
        """Log an ad-hoc meal with no catalog reference."""
        return self.repository.create_entry(
            user_id=user_id,
            food_item_id=None,
            name=name,
            calories=calories,
            amount=MANUAL_AMOUNT,
            eaten_at=self.clock(),
        )

    def list_today(self, user_id: UUID) -> list[MealLogEntry]:
        """Return the user's entries for the current calendar day."""
        start, end = self.today_bounds()
        return self.repository.list_entries(user_id, start, end)

    def today_bounds(self) -> tuple[datetime, datetime]:
        """Return the UTC start and exclusive end of the current day."""
        tz = ZoneInfo(self.timezone_name)
        now = self.clock().astimezone(tz)
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        return start.astimezone(UTC), end.astimezone(UTC)

    def delete(self, log_id: UUID, user_id: UUID) -> None:
        """Delete an entry owned by ``user_id``."""
        entry = self.repository.get_entry(log_id)
        if entry is None:
            raise NotFoundError("MealLogEntry", [log_id])
        if entry.user_id != user_id:
            _logger.warning(
                "Rejected meal log deletion: log_id=%s user_id=%s", log_id, user_id
            )
            raise PermissionDeniedError("MealLogEntry", log_id, user_id)
        self.repository.delete_entry(log_id)
