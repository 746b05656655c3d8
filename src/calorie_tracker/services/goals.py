"""Profile settings and daily goal management."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.goals import DailyGoals, ProfileDisplay, ProfileRecord
from calorie_tracker.domain.profile import ActivityLevel, Gender, Profile, UnitSystem
from calorie_tracker.services.targets import (
    TargetCalculator,
    round_half_away_from_zero,
)
from calorie_tracker.services.units import (
    height_for_display,
    height_to_cm,
    weight_for_display,
    weight_to_kg,
)
from calorie_tracker.services.validation import HEIGHT_RANGES, WEIGHT_RANGES

MIN_CALORIE_GOAL = 1200.0
MAX_CALORIE_GOAL = 4000.0
CALORIE_ROUNDING_STEP = 50

PROTEIN_GOAL_RANGE = (20.0, 200.0)
CARBS_GOAL_RANGE = (50.0, 400.0)
FAT_GOAL_RANGE = (20.0, 150.0)

_logger = logging.getLogger(__name__)


class SettingsRepository(Protocol):
    """Persistence interface for profile settings and goals."""

    def get_profile(self) -> ProfileRecord | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: ProfileRecord) -> None:
        """Persist the profile."""

    def get_goals(self) -> DailyGoals | None:
        """Return the stored daily goals, if any."""

    def save_goals(self, goals: DailyGoals) -> None:
        """Persist the daily goals."""

    def is_onboarding_complete(self) -> bool:
        """Return True once onboarding has been completed."""

    def set_onboarding_complete(self, complete: bool) -> None:
        """Update the onboarding completion flag."""


@dataclass
class GoalsService:
    """Service for the stored profile and the goals derived from it."""

    repository: SettingsRepository
    calculator: TargetCalculator

    def save_profile_input(  # noqa: PLR0913
        self,
        gender: Gender | None,
        date_of_birth: date | None,
        height: float,
        weight: float,
        unit_system: UnitSystem,
    ) -> ProfileRecord:
        """Clamp entered values, convert them to metric and persist the profile."""
        height_range = HEIGHT_RANGES[unit_system]
        weight_range = WEIGHT_RANGES[unit_system]
        _require_finite("height", height)
        _require_finite("weight", weight)
        clamped_height = _clamp(height, height_range.low, height_range.high)
        clamped_weight = _clamp(weight, weight_range.low, weight_range.high)
        record = ProfileRecord(
            gender=gender,
            date_of_birth=date_of_birth,
            height_cm=height_to_cm(clamped_height, unit_system),
            weight_kg=weight_to_kg(clamped_weight, unit_system),
            unit_system=unit_system,
        )
        self.repository.save_profile(record)
        return record

    def set_unit_system(self, unit_system: UnitSystem) -> ProfileRecord:
        """Switch the display unit system without touching stored values."""
        record = self.repository.get_profile() or _empty_profile()
        updated = replace(record, unit_system=unit_system)
        self.repository.save_profile(updated)
        return updated

    def profile_for_display(
        self, unit_system: UnitSystem | None = None
    ) -> ProfileDisplay:
        """Return the stored profile in the requested (or stored) unit system."""
        record = self.repository.get_profile() or _empty_profile()
        resolved = unit_system or record.unit_system
        return ProfileDisplay(
            gender=record.gender,
            date_of_birth=record.date_of_birth,
            height=(
                None
                if record.height_cm is None
                else height_for_display(record.height_cm, resolved)
            ),
            weight=(
                None
                if record.weight_kg is None
                else weight_for_display(record.weight_kg, resolved)
            ),
            unit_system=resolved,
        )

    def current_profile(self, today: date | None = None) -> Profile:
        """Build a calculator profile from the stored record."""
        record = self.repository.get_profile() or _empty_profile()
        age = None
        if record.date_of_birth is not None:
            age = age_on(record.date_of_birth, today or date.today())
        return Profile(
            gender=record.gender,
            age_years=age,
            height_cm=record.height_cm,
            weight_kg=record.weight_kg,
        )

    def recommended_goals(
        self,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
        today: date | None = None,
    ) -> DailyGoals:
        """Return recommended goals without persisting them."""
        calories = self.calculator.compute_tdee(
            self.current_profile(today), activity_level
        )
        return self._goals_for_calories(calories)

    def apply_recommended_goals(
        self,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
        today: date | None = None,
    ) -> DailyGoals:
        """Round the recommended calories to the slider step and persist goals."""
        calories = self.calculator.compute_tdee(
            self.current_profile(today), activity_level
        )
        stepped = (
            round_half_away_from_zero(calories / CALORIE_ROUNDING_STEP)
            * CALORIE_ROUNDING_STEP
        )
        clamped = int(_clamp(stepped, MIN_CALORIE_GOAL, MAX_CALORIE_GOAL))
        goals = self._goals_for_calories(clamped)
        self.repository.save_goals(goals)
        _logger.info(
            "Applied recommended goals: tdee=%s calories=%s", calories, clamped
        )
        return goals

    def update_goals(self, goals: DailyGoals) -> DailyGoals:
        """Clamp goals into their adjustable ranges and persist them."""
        _require_finite("calories", goals.calories)
        _require_finite("protein_g", goals.protein_g)
        _require_finite("carbs_g", goals.carbs_g)
        _require_finite("fat_g", goals.fat_g)
        clamped = DailyGoals(
            calories=_clamp(goals.calories, MIN_CALORIE_GOAL, MAX_CALORIE_GOAL),
            protein_g=_clamp(goals.protein_g, *PROTEIN_GOAL_RANGE),
            carbs_g=_clamp(goals.carbs_g, *CARBS_GOAL_RANGE),
            fat_g=_clamp(goals.fat_g, *FAT_GOAL_RANGE),
        )
        self.repository.save_goals(clamped)
        return clamped

    def get_goals(self) -> DailyGoals:
        """Return stored goals or the defaults."""
        return self.repository.get_goals() or DailyGoals()

    def is_onboarding_complete(self) -> bool:
        """Return True once onboarding has been completed."""
        return self.repository.is_onboarding_complete()

    def complete_onboarding(self) -> None:
        """Mark onboarding as completed."""
        self.repository.set_onboarding_complete(True)

    def reset_onboarding(self) -> None:
        """Mark onboarding as not completed."""
        self.repository.set_onboarding_complete(False)

    def _goals_for_calories(self, calories: int) -> DailyGoals:
        targets = self.calculator.derive_macros(calories)
        return DailyGoals(
            calories=float(targets.calories),
            protein_g=float(round_half_away_from_zero(targets.protein_g)),
            carbs_g=float(round_half_away_from_zero(targets.carbs_g)),
            fat_g=float(round_half_away_from_zero(targets.fat_g)),
        )


def age_on(date_of_birth: date, today: date) -> int:
    """Return the age in whole years on the given day."""
    had_birthday = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (0 if had_birthday else 1)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _empty_profile() -> ProfileRecord:
    return ProfileRecord(
        gender=None, date_of_birth=None, height_cm=None, weight_kg=None
    )


def _require_finite(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValidationError(field, "must be a finite number")
