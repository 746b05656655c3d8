"""Domain models for stored profile settings and daily goals."""

from dataclasses import dataclass
from datetime import date

from calorie_tracker.domain.profile import Gender, UnitSystem


@dataclass(frozen=True)
class ProfileRecord:
    """Stored user profile. Height and weight are always metric."""

    gender: Gender | None
    date_of_birth: date | None
    height_cm: float | None
    weight_kg: float | None
    unit_system: UnitSystem = UnitSystem.METRIC


@dataclass(frozen=True)
class ProfileDisplay:
    """Profile values expressed in the unit system shown to the user."""

    gender: Gender | None
    date_of_birth: date | None
    height: float | None
    weight: float | None
    unit_system: UnitSystem


@dataclass(frozen=True)
class DailyGoals:
    """Daily calorie and macro goals accepted by the user."""

    calories: float = 2000.0
    protein_g: float = 50.0
    carbs_g: float = 250.0
    fat_g: float = 65.0
