"""Request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field

from calorie_tracker.domain.ai_providers import AIProvider
from calorie_tracker.domain.profile import ActivityLevel, Gender, UnitSystem


class TargetsRequest(BaseModel):
    """Biometric profile for a target calculation, in metric units."""

    gender: Gender | None = None
    age_years: int | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY


class ProfileValidationRequest(BaseModel):
    """Raw profile form input as typed by the user."""

    gender: Gender | None = None
    height: str | float | None = None
    weight: str | float | None = None
    unit_system: UnitSystem = UnitSystem.METRIC


class ProfileUpdateRequest(BaseModel):
    """Profile values entered in the active unit system."""

    gender: Gender | None = None
    date_of_birth: date | None = None
    height: float
    weight: float
    unit_system: UnitSystem = UnitSystem.METRIC


class GoalsRequest(BaseModel):
    """Daily goals adjusted by the user."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


class RecommendedGoalsRequest(BaseModel):
    """Options for recommending goals from the stored profile."""

    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    apply: bool = False


class SelectProviderRequest(BaseModel):
    """Provider to make active."""

    provider: AIProvider


class ApiKeyRequest(BaseModel):
    """API key for a provider."""

    api_key: str


class FoodEntryRequest(BaseModel):
    """A food to add to the daily log."""

    name: str = Field(min_length=1)
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    sugar_g: float = 0.0
    fibre_g: float = 0.0
    sodium_mg: float = 0.0
    amount: float = 0.0
    unit: str = "g"
    ai_generated: bool = False
    day: date | None = None
