"""Tests for unit conversion helpers."""

import math

import pytest

from calorie_tracker.domain.profile import UnitSystem
from calorie_tracker.services.units import (
    cm_to_inches,
    height_for_display,
    height_to_cm,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
    weight_for_display,
    weight_to_kg,
)


def test_known_conversions() -> None:
    assert inches_to_cm(70) == pytest.approx(177.8)
    assert cm_to_inches(254) == pytest.approx(100)
    assert lbs_to_kg(100) == pytest.approx(45.3592)
    assert kg_to_lbs(0.453592) == pytest.approx(1)


@pytest.mark.parametrize("value", [0.5, 20, 44, 72.25, 120, 300, 1100, 98765.4321])
def test_round_trips(value: float) -> None:
    assert math.isclose(cm_to_inches(inches_to_cm(value)), value, rel_tol=1e-6)
    assert math.isclose(inches_to_cm(cm_to_inches(value)), value, rel_tol=1e-6)
    assert math.isclose(kg_to_lbs(lbs_to_kg(value)), value, rel_tol=1e-6)
    assert math.isclose(lbs_to_kg(kg_to_lbs(value)), value, rel_tol=1e-6)


def test_metric_values_pass_through() -> None:
    assert height_to_cm(180, UnitSystem.METRIC) == 180
    assert weight_to_kg(80, UnitSystem.METRIC) == 80
    assert height_for_display(180, UnitSystem.METRIC) == 180
    assert weight_for_display(80, UnitSystem.METRIC) == 80


def test_imperial_values_convert_on_write_and_read() -> None:
    stored_height = height_to_cm(70, UnitSystem.IMPERIAL)
    stored_weight = weight_to_kg(176, UnitSystem.IMPERIAL)

    assert stored_height == pytest.approx(177.8)
    assert stored_weight == pytest.approx(79.832192)
    assert height_for_display(stored_height, UnitSystem.IMPERIAL) == pytest.approx(70)
    assert weight_for_display(stored_weight, UnitSystem.IMPERIAL) == pytest.approx(176)
