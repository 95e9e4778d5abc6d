"""Domain models for body-weight tracking."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class WeightSample:
    """The single weight sample of a user for one day."""

    id: UUID
    user_id: UUID
    sample_date: date
    weight: float


@dataclass(frozen=True)
class WeightPoint:
    """Date and weight pair for charting."""

    sample_date: date
    weight: float


@dataclass(frozen=True)
class WeightChart:
    """Chart-ready weight series."""

    labels: list[str]
    values: list[float]
