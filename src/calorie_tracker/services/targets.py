"""Daily calorie and macro target calculation."""

import math
from dataclasses import dataclass

from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.profile import (
    DEFAULT_MACRO_SPLIT,
    ActivityLevel,
    Gender,
    MacroSplit,
    NutritionTargets,
    Profile,
)

MIN_AGE_YEARS = 13
MAX_AGE_YEARS = 120
MIN_HEIGHT_CM = 50.0
MAX_HEIGHT_CM = 300.0
MIN_WEIGHT_KG = 20.0
MAX_WEIGHT_KG = 500.0

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

_MALE_OFFSET = 5
_FEMALE_OFFSET = -161


@dataclass(frozen=True)
class TargetCalculator:
    """Mifflin-St Jeor based calorie and macro target calculator.

    The calculator is stateless. Invalid or incomplete profiles raise
    ``ValidationError`` before any arithmetic runs.
    """

    split: MacroSplit = DEFAULT_MACRO_SPLIT

    def compute_bmr(self, profile: Profile) -> float:
        """Return the basal metabolic rate in kcal/day."""
        _validate_profile(profile)
        offset = _MALE_OFFSET if profile.gender is Gender.MALE else _FEMALE_OFFSET
        return (
            10 * profile.weight_kg
            + 6.25 * profile.height_cm
            - 5 * profile.age_years
            + offset
        )

    def compute_tdee(
        self,
        profile: Profile,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
    ) -> int:
        """Return total daily energy expenditure rounded to whole kcal."""
        bmr = self.compute_bmr(profile)
        return round_half_away_from_zero(bmr * activity_level.multiplier)

    def derive_macros(
        self, calories: int, split: MacroSplit | None = None
    ) -> NutritionTargets:
        """Split a calorie target into protein, carb and fat grams."""
        resolved = split or self.split
        return NutritionTargets(
            calories=calories,
            protein_g=calories * resolved.protein / KCAL_PER_GRAM_PROTEIN,
            carbs_g=calories * resolved.carbs / KCAL_PER_GRAM_CARBS,
            fat_g=calories * resolved.fat / KCAL_PER_GRAM_FAT,
        )

    def calculate(
        self,
        profile: Profile,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
    ) -> NutritionTargets:
        """Return calorie and macro targets for a profile."""
        return self.derive_macros(self.compute_tdee(profile, activity_level))


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _validate_profile(profile: Profile) -> None:
    if profile.gender is None:
        raise ValidationError("gender", "required")
    if not isinstance(profile.gender, Gender):
        raise ValidationError("gender", "must be male or female")
    _check_range(
        "age_years", profile.age_years, MIN_AGE_YEARS, MAX_AGE_YEARS, "years"
    )
    _check_range(
        "height_cm", profile.height_cm, MIN_HEIGHT_CM, MAX_HEIGHT_CM, "cm"
    )
    _check_range(
        "weight_kg", profile.weight_kg, MIN_WEIGHT_KG, MAX_WEIGHT_KG, "kg"
    )


def _check_range(
    field: str, value: float | None, low: float, high: float, unit: str
) -> None:
    if value is None:
        raise ValidationError(field, "required")
    if not low <= value <= high:
        raise ValidationError(field, f"must be between {low:g}-{high:g} {unit}")
