"""Unit conversion helpers.

Height and weight are stored in metric. Imperial values are converted on
write and derived on read, never stored.
"""

from calorie_tracker.domain.profile import UnitSystem

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * KG_PER_LB


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / KG_PER_LB


def height_to_cm(value: float, unit_system: UnitSystem) -> float:
    """Convert an entered height to centimeters."""
    if unit_system is UnitSystem.IMPERIAL:
        return inches_to_cm(value)
    return value


def weight_to_kg(value: float, unit_system: UnitSystem) -> float:
    """Convert an entered weight to kilograms."""
    if unit_system is UnitSystem.IMPERIAL:
        return lbs_to_kg(value)
    return value


def height_for_display(height_cm: float, unit_system: UnitSystem) -> float:
    """Return a stored height in the unit system shown to the user."""
    if unit_system is UnitSystem.IMPERIAL:
        return cm_to_inches(height_cm)
    return height_cm


def weight_for_display(weight_kg: float, unit_system: UnitSystem) -> float:
    """Return a stored weight in the unit system shown to the user."""
    if unit_system is UnitSystem.IMPERIAL:
        return kg_to_lbs(weight_kg)
    return weight_kg
