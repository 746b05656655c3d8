"""Per-field validation for profile input forms."""

import math
from dataclasses import dataclass

from calorie_tracker.domain.profile import Gender, UnitSystem
from calorie_tracker.services.targets import (
    MAX_AGE_YEARS,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_AGE_YEARS,
    MIN_HEIGHT_CM,
    MIN_WEIGHT_KG,
)

MIN_HEIGHT_INCHES = 20.0
MAX_HEIGHT_INCHES = 120.0
MIN_WEIGHT_LBS = 44.0
MAX_WEIGHT_LBS = 1100.0

INVALID_NUMBER_MESSAGE = "Please enter a valid number"
WHOLE_YEARS_MESSAGE = "Age must be a whole number of years"


@dataclass(frozen=True)
class FieldRange:
    """Inclusive valid range for a field in a given unit."""

    low: float
    high: float
    unit: str

    def contains(self, value: float) -> bool:
        """Return True when the value lies within the range."""
        return self.low <= value <= self.high


HEIGHT_RANGES: dict[UnitSystem, FieldRange] = {
    UnitSystem.METRIC: FieldRange(MIN_HEIGHT_CM, MAX_HEIGHT_CM, "cm"),
    UnitSystem.IMPERIAL: FieldRange(MIN_HEIGHT_INCHES, MAX_HEIGHT_INCHES, "inches"),
}

WEIGHT_RANGES: dict[UnitSystem, FieldRange] = {
    UnitSystem.METRIC: FieldRange(MIN_WEIGHT_KG, MAX_WEIGHT_KG, "kg"),
    UnitSystem.IMPERIAL: FieldRange(MIN_WEIGHT_LBS, MAX_WEIGHT_LBS, "lbs"),
}

AGE_RANGE = FieldRange(MIN_AGE_YEARS, MAX_AGE_YEARS, "years")


@dataclass(frozen=True)
class FieldValidation:
    """Validation outcome for a single form field."""

    field: str
    value: float | None
    is_valid: bool
    message: str | None = None


def validate_height(
    raw: str | float | None, unit_system: UnitSystem
) -> FieldValidation:
    """Validate a height entered in the active unit system."""
    return _validate_number("height", "Height", raw, HEIGHT_RANGES[unit_system])


def validate_weight(
    raw: str | float | None, unit_system: UnitSystem
) -> FieldValidation:
    """Validate a weight entered in the active unit system."""
    return _validate_number("weight", "Weight", raw, WEIGHT_RANGES[unit_system])


def validate_age(raw: str | int | None) -> FieldValidation:
    """Validate an age in whole years."""
    result = _validate_number("age", "Age", raw, AGE_RANGE)
    if result.value is not None and not result.value.is_integer():
        return FieldValidation(
            field="age",
            value=result.value,
            is_valid=False,
            message=WHOLE_YEARS_MESSAGE,
        )
    return result


@dataclass(frozen=True)
class ProfileFormValidation:
    """Combined validity of the profile entry form."""

    gender: Gender | None
    height: FieldValidation
    weight: FieldValidation

    @property
    def can_continue(self) -> bool:
        """Return True when every required field is valid."""
        return self.gender is not None and self.height.is_valid and self.weight.is_valid

    @property
    def messages(self) -> dict[str, str]:
        """Return validation messages keyed by field."""
        return {
            item.field: item.message
            for item in (self.height, self.weight)
            if item.message is not None
        }


def validate_profile_form(
    gender: Gender | None,
    height: str | float | None,
    weight: str | float | None,
    unit_system: UnitSystem,
) -> ProfileFormValidation:
    """Validate the profile form fields for the active unit system."""
    return ProfileFormValidation(
        gender=gender,
        height=validate_height(height, unit_system),
        weight=validate_weight(weight, unit_system),
    )


def parse_number(raw: str | float | None) -> float | None:
    """Parse user input into a float, returning None when it is not a number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        value = float(raw)
    else:
        try:
            value = float(raw.strip().replace(",", "."))
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def _validate_number(
    field: str, label: str, raw: str | float | None, valid_range: FieldRange
) -> FieldValidation:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return FieldValidation(field=field, value=None, is_valid=False)
    value = parse_number(raw)
    if value is None:
        return FieldValidation(
            field=field, value=None, is_valid=False, message=INVALID_NUMBER_MESSAGE
        )
    if not valid_range.contains(value):
        return FieldValidation(
            field=field,
            value=value,
            is_valid=False,
            message=(
                f"{label} must be between "
                f"{valid_range.low:g}-{valid_range.high:g} {valid_range.unit}"
            ),
        )
    return FieldValidation(field=field, value=value, is_valid=True)
