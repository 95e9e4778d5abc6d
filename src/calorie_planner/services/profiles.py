"""Profile coordination keeping the cached calorie target current."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_planner.domain.errors import ConcurrentUpdateError
from calorie_planner.domain.profiles import (
    ActivityLevel,
    BodyMetrics,
    Gender,
    MetabolismResult,
    UserProfile,
)
from calorie_planner.domain.weights import WeightSample
from calorie_planner.services.metabolism import (
    DEFAULT_TARGET_CALORIES,
    MetabolismEngine,
)
from calorie_planner.services.weights import WeightTracker

_logger = logging.getLogger(__name__)

MAX_SAVE_ATTEMPTS = 5


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if present."""

    def create_profile(self, user_id: UUID, target_calories: int) -> UserProfile:
        """Create an empty profile carrying the given target."""

    def save_profile(self, profile: UserProfile) -> UserProfile | None:
        """Write body fields and target calories in one row update.

        The update applies only while the stored version still equals
        ``profile.version`` and bumps it; otherwise nothing is written and
        None is returned.
        """


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ProfileCoordinator:
    """Recomputes target calories on every profile or weight write."""

    repository: ProfileRepository
    weight_tracker: WeightTracker
    engine: MetabolismEngine
    default_target_calories: int = DEFAULT_TARGET_CALORIES
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now
    max_save_attempts: int = MAX_SAVE_ATTEMPTS

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the profile, creating an empty one on first access."""
        return self.ensure_profile(user_id)

    def ensure_profile(self, user_id: UUID) -> UserProfile:
        """Ensure a profile row exists for the user and return it."""
        existing = self.repository.get_profile(user_id)
        if existing:
            return existing
        return self.repository.create_profile(user_id, self.default_target_calories)

    def on_profile_saved(  # noqa: PLR0913
        self,
        user_id: UUID,
        height_cm: float | None,
        age_years: int | None,
        gender: Gender | str | None,
        activity_level: ActivityLevel | str | None,
    ) -> UserProfile:
        """Persist body fields together with the recomputed target."""
        fields = {
            "height_cm": height_cm,
            "age_years": age_years,
            "gender": Gender.parse(gender),
            "activity_level": ActivityLevel.parse(activity_level),
        }
        saved = self._save_with_target(
            user_id, lambda current: replace(current, **fields)
        )
        _logger.info(
            "Profile saved: user_id=%s target_calories=%s",
            user_id,
            saved.target_calories,
        )
        return saved

    def on_weight_recorded(
        self, user_id: UUID, sample_date: date, weight: float
    ) -> UserProfile:
        """Record a weight sample, then refresh the target from the latest one."""
        self.weight_tracker.record_sample(user_id, sample_date, weight)
        saved = self._save_with_target(user_id, lambda current: current)
        _logger.info(
            "Weight recorded: user_id=%s date=%s target_calories=%s",
            user_id,
            sample_date,
            saved.target_calories,
        )
        return saved

    def _save_with_target(
        self, user_id: UUID, apply: Callable[[UserProfile], UserProfile]
    ) -> UserProfile:
        # The latest weight is read after the profile, so a write that lands
        # in between bumps the version and forces another pass.
        for attempt in range(1, self.max_save_attempts + 1):
            updated = apply(self.ensure_profile(user_id))
            target = self.target_for(updated, self.weight_tracker.latest(user_id))
            saved = self.repository.save_profile(
                replace(updated, target_calories=target)
            )
            if saved is not None:
                return saved
            _logger.info(
                "Profile changed concurrently: user_id=%s attempt=%s",
                user_id,
                attempt,
            )
        _logger.warning(
            "Profile save abandoned: user_id=%s attempts=%s",
            user_id,
            self.max_save_attempts,
        )
        raise ConcurrentUpdateError("UserProfile", user_id, self.max_save_attempts)

    def save_initial_profile(  # noqa: PLR0913
        self,
        user_id: UUID,
        height_cm: float,
        weight_kg: float,
        age_years: int,
        gender: Gender | str | None,
        activity_level: ActivityLevel | str | None,
    ) -> UserProfile:
        """First-time setup: today's weight sample plus the body profile."""
        today = self.clock().astimezone(ZoneInfo(self.timezone_name)).date()
        self.weight_tracker.record_sample(user_id, today, weight_kg)
        return self.on_profile_saved(
            user_id, height_cm, age_years, gender, activity_level
        )

    def is_profile_completed(self, user_id: UUID) -> bool:
        """True when height is set and at least one weight sample exists."""
        profile = self.repository.get_profile(user_id)
        if profile is None or profile.height_cm is None:
            return False
        return self.weight_tracker.latest(user_id) is not None

    def metabolism(self, user_id: UUID) -> MetabolismResult | None:
        """Full BMR/TDEE breakdown, or None while the profile is incomplete."""
        metrics = _metrics(
            self.ensure_profile(user_id), self.weight_tracker.latest(user_id)
        )
        if not metrics.is_complete:
            return None
        return self.engine.compute(metrics)

    def target_for(self, profile: UserProfile, latest: WeightSample | None) -> int:
        """Target calories for a profile, or the default when incomplete."""
        metrics = _metrics(profile, latest)
        if not metrics.is_complete:
            return self.default_target_calories
        return self.engine.compute(metrics).target_calories


def _metrics(profile: UserProfile, latest: WeightSample | None) -> BodyMetrics:
    return BodyMetrics(
        height_cm=profile.height_cm,
        weight_kg=latest.weight if latest else None,
        age_years=profile.age_years,
        gender=profile.gender,
        activity_level=profile.activity_level,
    )
