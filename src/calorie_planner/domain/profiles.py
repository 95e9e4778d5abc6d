"""Domain models for body profiles and metabolism results."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class Gender(StrEnum):
    """Biological sex used by the Mifflin-St Jeor formula."""

    MALE = "MALE"
    FEMALE = "FEMALE"

    @classmethod
    def parse(cls, raw: object) -> "Gender | None":
        """Parse a loose gender value, returning None when unrecognised."""
        if raw is None or isinstance(raw, Gender):
            return raw
        value = str(raw).strip().upper()
        if value in {"MALE", "M", "男性"}:
            return cls.MALE
        if value in {"FEMALE", "F", "女性"}:
            return cls.FEMALE
        return None


class ActivityLevel(StrEnum):
    """Self-reported daily activity level."""

    LOW = "LOW"
    MID = "MID"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, raw: object) -> "ActivityLevel | None":
        """Parse a loose activity level, returning None when unrecognised."""
        if raw is None or isinstance(raw, ActivityLevel):
            return raw
        try:
            return cls(str(raw).strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class UserProfile:
    """Body profile of a user with the cached daily calorie target.

    ``version`` is bumped by every stored write and guards concurrent
    read-modify-write cycles.
    """

    user_id: UUID
    height_cm: float | None
    age_years: int | None
    gender: Gender | None
    activity_level: ActivityLevel | None
    target_calories: int
    version: int = 0


@dataclass(frozen=True)
class BodyMetrics:
    """Inputs to the metabolism calculation."""

    height_cm: float | None
    weight_kg: float | None
    age_years: int | None
    gender: Gender | None
    activity_level: ActivityLevel | None

    @property
    def is_complete(self) -> bool:
        return (
            self.height_cm is not None
            and self.weight_kg is not None
            and self.age_years is not None
        )


@dataclass(frozen=True)
class MetabolismResult:
    """BMR, TDEE and target calories for a body profile."""

    bmr: float
    tdee: float
    target_calories: int
    advice: str
