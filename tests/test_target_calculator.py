"""Tests for the nutrition target calculator."""

import math

import pytest

from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.profile import (
    ActivityLevel,
    Gender,
    MacroSplit,
    Profile,
)
from calorie_tracker.services.targets import (
    TargetCalculator,
    round_half_away_from_zero,
)

MALE = Profile(gender=Gender.MALE, age_years=30, height_cm=180, weight_kg=80)
FEMALE = Profile(gender=Gender.FEMALE, age_years=25, height_cm=165, weight_kg=60)


def test_male_bmr_and_sedentary_tdee() -> None:
    calculator = TargetCalculator()

    assert calculator.compute_bmr(MALE) == 1780
    assert calculator.compute_tdee(MALE) == 2136


def test_female_bmr_and_sedentary_tdee() -> None:
    calculator = TargetCalculator()

    assert calculator.compute_bmr(FEMALE) == pytest.approx(1345.25)
    assert calculator.compute_tdee(FEMALE) == 1614


@pytest.mark.parametrize(
    ("level", "multiplier"),
    [
        (ActivityLevel.SEDENTARY, 1.2),
        (ActivityLevel.LIGHTLY_ACTIVE, 1.375),
        (ActivityLevel.MODERATELY_ACTIVE, 1.55),
        (ActivityLevel.VERY_ACTIVE, 1.725),
        (ActivityLevel.EXTRA_ACTIVE, 1.9),
    ],
)
def test_tdee_uses_activity_multiplier(level: ActivityLevel, multiplier: float) -> None:
    calculator = TargetCalculator()

    tdee = calculator.compute_tdee(FEMALE, level)

    assert level.multiplier == multiplier
    assert tdee == round_half_away_from_zero(1345.25 * multiplier)


def test_tdee_defaults_to_sedentary() -> None:
    calculator = TargetCalculator()

    assert calculator.compute_tdee(MALE) == calculator.compute_tdee(
        MALE, ActivityLevel.SEDENTARY
    )


def test_rounding_is_half_away_from_zero() -> None:
    assert round_half_away_from_zero(2.5) == 3
    assert round_half_away_from_zero(3.5) == 4
    assert round_half_away_from_zero(-2.5) == -3
    assert round_half_away_from_zero(1614.3) == 1614


def test_tdee_rounds_exact_half_away_from_zero() -> None:
    calculator = TargetCalculator()
    profile = Profile(gender=Gender.FEMALE, age_years=14, height_cm=100, weight_kg=45)

    # 450 + 625 - 70 - 161 = 844; 844 * 1.375 = 1160.5
    assert calculator.compute_bmr(profile) == 844
    assert calculator.compute_tdee(profile, ActivityLevel.LIGHTLY_ACTIVE) == 1161


def test_derive_macros_for_2000_calories() -> None:
    targets = TargetCalculator().derive_macros(2000)

    assert targets.calories == 2000
    assert targets.protein_g == pytest.approx(150)
    assert targets.carbs_g == pytest.approx(200)
    assert targets.fat_g == pytest.approx(600 / 9)


@pytest.mark.parametrize("calories", [1, 1200, 1614, 2136, 2999, 4000, 12345])
def test_macros_reconcile_with_calories(calories: int) -> None:
    targets = TargetCalculator().derive_macros(calories)

    total = targets.protein_g * 4 + targets.carbs_g * 4 + targets.fat_g * 9

    assert math.isclose(total, calories, rel_tol=1e-9)


def test_derive_macros_does_not_round() -> None:
    targets = TargetCalculator().derive_macros(2136)

    assert targets.fat_g == pytest.approx(2136 * 0.3 / 9)
    assert not float(targets.fat_g).is_integer()


def test_custom_split_must_sum_to_one() -> None:
    with pytest.raises(ValidationError) as exc_info:
        MacroSplit(protein=0.5, carbs=0.4, fat=0.3)

    assert exc_info.value.field == "macro_split"


def test_custom_split_rejects_negative_share() -> None:
    with pytest.raises(ValidationError):
        MacroSplit(protein=-0.1, carbs=0.8, fat=0.3)


def test_custom_split_is_used_for_macros() -> None:
    calculator = TargetCalculator(split=MacroSplit(protein=0.25, carbs=0.5, fat=0.25))

    targets = calculator.derive_macros(1800)

    assert targets.protein_g == pytest.approx(112.5)
    assert targets.carbs_g == pytest.approx(225)
    assert targets.fat_g == pytest.approx(50)


def test_calculate_combines_tdee_and_macros() -> None:
    targets = TargetCalculator().calculate(MALE)

    assert targets.calories == 2136
    assert targets.protein_g == pytest.approx(2136 * 0.3 / 4)


@pytest.mark.parametrize(
    ("profile", "field"),
    [
        (Profile(age_years=30, height_cm=180, weight_kg=80), "gender"),
        (Profile(gender=Gender.MALE, height_cm=180, weight_kg=80), "age_years"),
        (Profile(gender=Gender.MALE, age_years=30, weight_kg=80), "height_cm"),
        (Profile(gender=Gender.MALE, age_years=30, height_cm=180), "weight_kg"),
    ],
)
def test_missing_field_fails_closed(profile: Profile, field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        TargetCalculator().compute_bmr(profile)

    assert exc_info.value.field == field
    assert exc_info.value.reason == "required"


@pytest.mark.parametrize(
    ("changes", "field"),
    [
        ({"age_years": 12}, "age_years"),
        ({"age_years": 121}, "age_years"),
        ({"height_cm": 49.999}, "height_cm"),
        ({"height_cm": 300.001}, "height_cm"),
        ({"weight_kg": 19.9}, "weight_kg"),
        ({"weight_kg": 500.5}, "weight_kg"),
    ],
)
def test_out_of_range_field_fails(changes: dict[str, float], field: str) -> None:
    profile = Profile(
        gender=MALE.gender,
        age_years=changes.get("age_years", MALE.age_years),
        height_cm=changes.get("height_cm", MALE.height_cm),
        weight_kg=changes.get("weight_kg", MALE.weight_kg),
    )

    with pytest.raises(ValidationError) as exc_info:
        TargetCalculator().compute_tdee(profile)

    assert exc_info.value.field == field
    assert "must be between" in exc_info.value.reason


@pytest.mark.parametrize("height", [50, 300])
def test_height_bounds_are_inclusive(height: float) -> None:
    profile = Profile(gender=Gender.FEMALE, age_years=40, height_cm=height, weight_kg=70)

    assert isinstance(TargetCalculator().compute_bmr(profile), float)


def test_age_and_weight_bounds_are_inclusive() -> None:
    calculator = TargetCalculator()
    young = Profile(gender=Gender.MALE, age_years=13, height_cm=150, weight_kg=20)
    old = Profile(gender=Gender.FEMALE, age_years=120, height_cm=160, weight_kg=500)

    assert calculator.compute_bmr(young) == 10 * 20 + 6.25 * 150 - 5 * 13 + 5
    assert calculator.compute_bmr(old) == 10 * 500 + 6.25 * 160 - 5 * 120 - 161


def test_validation_error_message_names_range() -> None:
    profile = Profile(gender=Gender.MALE, age_years=30, height_cm=10, weight_kg=80)

    with pytest.raises(ValidationError) as exc_info:
        TargetCalculator().compute_bmr(profile)

    assert exc_info.value.reason == "must be between 50-300 cm"
    assert exc_info.value.to_dict() == {
        "field": "height_cm",
        "reason": "must be between 50-300 cm",
    }
