"""Profile and nutrition target domain models."""

import math
from dataclasses import dataclass
from enum import Enum

from calorie_tracker.domain.errors import ValidationError

_SPLIT_TOLERANCE = 1e-9


class Gender(str, Enum):
    """Gender values supported by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity levels with their TDEE multipliers."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @property
    def multiplier(self) -> float:
        """Return the TDEE multiplier for this level."""
        return ACTIVITY_MULTIPLIERS[self]


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}


class UnitSystem(str, Enum):
    """Unit system used for input and display."""

    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class Profile:
    """Biometric profile supplied by the caller, always in metric units."""

    gender: Gender | None = None
    age_years: int | None = None
    height_cm: float | None = None
    weight_kg: float | None = None


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macronutrient targets."""

    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroSplit:
    """Share of calories allocated to each macronutrient.

    The three fractions must be non-negative and add up to 1.0, otherwise
    gram targets would not reconcile with the calorie target.
    """

    protein: float = 0.30
    carbs: float = 0.40
    fat: float = 0.30

    def __post_init__(self) -> None:
        for name in ("protein", "carbs", "fat"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise ValidationError("macro_split", f"{name} must be non-negative")
        total = self.protein + self.carbs + self.fat
        if abs(total - 1.0) > _SPLIT_TOLERANCE:
            raise ValidationError(
                "macro_split", f"fractions must sum to 1.0 (got {total:.6f})"
            )


DEFAULT_MACRO_SPLIT = MacroSplit()
