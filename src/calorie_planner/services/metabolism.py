"""Metabolism calculations: BMR, TDEE and daily calorie target.

BMR uses the Mifflin-St Jeor equation::

    10 * weight_kg + 6.25 * height_cm - 5 * age_years + s

where ``s`` is +5 for men and -161 otherwise. TDEE scales BMR by an activity
factor and the target adds a fixed surplus for weight gain.
"""

from dataclasses import dataclass, field

from calorie_planner.domain.calories import round_kcal, round_tenth
from calorie_planner.domain.errors import InvalidStateError
from calorie_planner.domain.profiles import (
    ActivityLevel,
    BodyMetrics,
    Gender,
    MetabolismResult,
)

SURPLUS_CALORIES = 300
DEFAULT_TARGET_CALORIES = 2200

WEIGHT_MULTIPLIER = 10.0
HEIGHT_MULTIPLIER = 6.25
AGE_MULTIPLIER = 5.0
MALE_OFFSET = 5
FEMALE_OFFSET = -161

ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.LOW: 1.2,
    ActivityLevel.MID: 1.55,
    ActivityLevel.HIGH: 1.725,
}
DEFAULT_ACTIVITY_LEVEL = ActivityLevel.LOW


@dataclass(frozen=True)
class MetabolismEngine:
    """Pure calculator; holds only its constant table."""

    surplus_calories: int = SURPLUS_CALORIES
    activity_factors: dict[ActivityLevel, float] = field(
        default_factory=lambda: dict(ACTIVITY_FACTORS)
    )

    def compute(self, metrics: BodyMetrics) -> MetabolismResult:
        """Return BMR, TDEE and target calories for complete metrics."""
        if not metrics.is_complete:
            raise InvalidStateError("Height, weight and age are required")
        bmr = self.bmr(metrics)
        tdee = bmr * self.activity_factor(metrics.activity_level)
        target = round_kcal(tdee + self.surplus_calories)
        return MetabolismResult(
            bmr=round_tenth(bmr),
            tdee=round_tenth(tdee),
            target_calories=target,
            advice=f"Aim for about {target} kcal a day to gain weight.",
        )

    def bmr(self, metrics: BodyMetrics) -> float:
        """Basal metabolic rate (unrounded)."""
        if not metrics.is_complete:
            raise InvalidStateError("Height, weight and age are required")
        base = (
            WEIGHT_MULTIPLIER * metrics.weight_kg
            + HEIGHT_MULTIPLIER * metrics.height_cm
            - AGE_MULTIPLIER * metrics.age_years
        )
        offset = MALE_OFFSET if metrics.gender is Gender.MALE else FEMALE_OFFSET
        return base + offset

    def activity_factor(self, level: ActivityLevel | None) -> float:
        """Factor for a level; unset or unknown levels use the LOW factor."""
        if level is None or level not in self.activity_factors:
            return self.activity_factors[DEFAULT_ACTIVITY_LEVEL]
        return self.activity_factors[level]
