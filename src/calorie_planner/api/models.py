"""Pydantic request models for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from calorie_planner.domain.foods import FoodKind
from calorie_planner.domain.profiles import ActivityLevel, Gender


class IngredientPayload(BaseModel):
    """One recipe line: a catalog reference or manual details."""

    food_item_id: UUID | None = None
    amount: float | None = Field(default=None, gt=0)
    manual_name: str | None = None
    manual_calories: int | None = Field(default=None, ge=0)


class RecipeRequest(BaseModel):
    """Composite food creation payload."""

    name: str = Field(min_length=1)
    kind: FoodKind = FoodKind.DISH
    ingredients: list[IngredientPayload]


class IngredientRequest(BaseModel):
    """User-owned ingredient creation payload."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    unit: str = "serving"


class MasterMealRequest(BaseModel):
    """Meal logged from a catalog item."""

    food_item_id: UUID
    amount: float = Field(default=1.0, gt=0)


class ManualMealRequest(BaseModel):
    """Meal logged by hand."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)


class WeightRequest(BaseModel):
    """Weight sample for one day."""

    sample_date: date
    weight: float = Field(gt=0)


class BodyFieldsModel(BaseModel):
    """Shared parsing of gender and activity level.

    Gender aliases such as ``M`` or ``F`` are accepted and anything else is
    rejected. Unrecognised activity levels are kept as unset and use the
    lowest activity factor.
    """

    gender: Gender | None = None
    activity_level: ActivityLevel | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def parse_gender(cls, value: object) -> Gender | None:
        if value is None:
            return None
        gender = Gender.parse(value)
        if gender is None:
            raise ValueError(f"Unknown gender: {value}")
        return gender

    @field_validator("activity_level", mode="before")
    @classmethod
    def parse_activity_level(cls, value: object) -> ActivityLevel | None:
        return ActivityLevel.parse(value)


class ProfileRequest(BodyFieldsModel):
    """Body profile edit."""

    height_cm: float | None = Field(default=None, gt=0)
    age_years: int | None = Field(default=None, gt=0)


class InitialProfileRequest(BodyFieldsModel):
    """First-time profile setup including today's weight."""

    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    age_years: int = Field(gt=0)
    gender: Gender


class MetabolismRequest(BodyFieldsModel):
    """Ad-hoc BMR/TDEE calculation input."""

    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    age_years: int = Field(gt=0)
    gender: Gender
