"""Body-weight tracking service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_planner.domain.weights import WeightChart, WeightPoint, WeightSample


class WeightRepository(Protocol):
    """Persistence interface for weight samples."""

    def upsert_sample(
        self, user_id: UUID, sample_date: date, weight: float
    ) -> WeightSample:
        """Insert or overwrite the sample for (user, date)."""

    def get_sample(self, user_id: UUID, sample_date: date) -> WeightSample | None:
        """Return the sample for an exact date, if present."""

    def get_latest(self, user_id: UUID) -> WeightSample | None:
        """Return the sample with the greatest date."""

    def list_samples(self, user_id: UUID) -> list[WeightSample]:
        """Return all samples ascending by date."""


@dataclass
class WeightTracker:
    """Service for per-day weight samples."""

    repository: WeightRepository

    def record_sample(
        self, user_id: UUID, sample_date: date, weight: float
    ) -> WeightSample:
        """Store the day's weight, replacing any earlier value for that day."""
        return self.repository.upsert_sample(user_id, sample_date, weight)

    def latest(self, user_id: UUID) -> WeightSample | None:
        """Return the most recent sample by date."""
        return self.repository.get_latest(user_id)

    def history(self, user_id: UUID) -> list[WeightPoint]:
        """Return (date, weight) points ascending by date."""
        return [
            WeightPoint(sample_date=sample.sample_date, weight=sample.weight)
            for sample in self.repository.list_samples(user_id)
        ]

    def by_date(self, user_id: UUID, sample_date: date) -> float | None:
        """Return the weight recorded for an exact date."""
        sample = self.repository.get_sample(user_id, sample_date)
        return sample.weight if sample else None

    def chart(self, user_id: UUID) -> WeightChart:
        """Return ``M/D`` labels and weights for graphing."""
        points = self.history(user_id)
        return WeightChart(
            labels=[f"{p.sample_date.month}/{p.sample_date.day}" for p in points],
            values=[p.weight for p in points],
        )
