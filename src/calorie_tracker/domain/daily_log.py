"""Domain models for the daily food log and dashboard."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from calorie_tracker.domain.goals import DailyGoals


class CalorieStatus(str, Enum):
    """Band of the calorie ring on the dashboard."""

    ON_TRACK = "on_track"
    APPROACHING = "approaching"
    AT_LIMIT = "at_limit"
    OVER = "over"


@dataclass(frozen=True)
class FoodEntry:
    """A single food eaten on a given day, nutrition captured at entry time."""

    id: UUID
    day: date
    name: str
    timestamp: datetime
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


@dataclass(frozen=True)
class DailyTotals:
    """Nutrition summed over a day's entries."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    sugar_g: float = 0.0
    fibre_g: float = 0.0
    sodium_mg: float = 0.0

    @classmethod
    def from_entries(cls, entries: list[FoodEntry]) -> "DailyTotals":
        return cls(
            calories=sum(entry.calories for entry in entries),
            protein_g=sum(entry.protein_g for entry in entries),
            carbs_g=sum(entry.carbs_g for entry in entries),
            fat_g=sum(entry.fat_g for entry in entries),
            sugar_g=sum(entry.sugar_g for entry in entries),
            fibre_g=sum(entry.fibre_g for entry in entries),
            sodium_mg=sum(entry.sodium_mg for entry in entries),
        )


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount of one macro against its goal."""

    consumed_g: float
    target_g: float
    progress: float


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard shows for one day."""

    day: date
    entries: list[FoodEntry]
    totals: DailyTotals
    goals: DailyGoals
    calories_remaining: float
    calorie_progress: float
    status: CalorieStatus
    remaining_text: str
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
