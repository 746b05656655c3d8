"""Daily food log and dashboard summary."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from calorie_tracker.domain.daily_log import (
    CalorieStatus,
    DailyTotals,
    DashboardSummary,
    FoodEntry,
    MacroProgress,
)
from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.services.goals import GoalsService

APPROACHING_THRESHOLD = 0.7
AT_LIMIT_THRESHOLD = 0.9

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for food log entries."""

    def add(self, entry: FoodEntry) -> None:
        """Store an entry."""

    def list_for_day(self, day: date) -> list[FoodEntry]:
        """Return the entries logged on a day, oldest first."""

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry, returning True if it existed."""


def progress_ratio(consumed: float, target: float) -> float:
    """Return consumed / target capped at 1.0."""
    if target <= 0:
        return 1.0 if consumed > 0 else 0.0
    return min(consumed / target, 1.0)


def calorie_status(consumed: float, target: float) -> CalorieStatus:
    """Return the ring band for the uncapped share of the calorie goal."""
    if target <= 0:
        return CalorieStatus.OVER if consumed > 0 else CalorieStatus.ON_TRACK
    ratio = consumed / target
    if ratio < APPROACHING_THRESHOLD:
        return CalorieStatus.ON_TRACK
    if ratio < AT_LIMIT_THRESHOLD:
        return CalorieStatus.APPROACHING
    if ratio <= 1.0:
        return CalorieStatus.AT_LIMIT
    return CalorieStatus.OVER


def remaining_text(remaining: float) -> str:
    """Describe the calories left, or how far over the goal the day is."""
    if remaining >= 0:
        return f"{int(remaining)} kcal remaining"
    return f"{int(abs(remaining))} kcal over"


@dataclass
class DailyLogService:
    """Service for logging food and summarising a day against the goals."""

    repository: DailyLogRepository
    goals_service: GoalsService

    def add_entry(  # noqa: PLR0913
        self,
        name: str,
        calories: float,
        protein_g: float = 0.0,
        carbs_g: float = 0.0,
        fat_g: float = 0.0,
        sugar_g: float = 0.0,
        fibre_g: float = 0.0,
        sodium_mg: float = 0.0,
        amount: float = 0.0,
        unit: str = "g",
        ai_generated: bool = False,
        day: date | None = None,
    ) -> FoodEntry:
        """Log a food for a day (today by default)."""
        values = {
            "calories": calories,
            "protein_g": protein_g,
            "carbs_g": carbs_g,
            "fat_g": fat_g,
            "sugar_g": sugar_g,
            "fibre_g": fibre_g,
            "sodium_mg": sodium_mg,
            "amount": amount,
        }
        for field, value in values.items():
            if not math.isfinite(value) or value < 0:
                raise ValidationError(field, "must be a non-negative number")
        timestamp = datetime.now(tz=UTC)
        entry = FoodEntry(
            id=uuid4(),
            day=day or timestamp.date(),
            name=name,
            timestamp=timestamp,
            unit=unit,
            ai_generated=ai_generated,
            **values,
        )
        self.repository.add(entry)
        _logger.info("Logged food: day=%s calories=%s", entry.day, entry.calories)
        return entry

    def delete_entry(self, entry_id: UUID) -> bool:
        """Remove a logged food."""
        return self.repository.delete(entry_id)

    def entries_for(self, day: date) -> list[FoodEntry]:
        """Return the foods logged on a day."""
        return self.repository.list_for_day(day)

    def summary(self, day: date | None = None) -> DashboardSummary:
        """Summarise a day's intake against the current daily goals."""
        resolved = day or datetime.now(tz=UTC).date()
        entries = self.entries_for(resolved)
        totals = DailyTotals.from_entries(entries)
        goals = self.goals_service.get_goals()
        remaining = goals.calories - totals.calories
        return DashboardSummary(
            day=resolved,
            entries=entries,
            totals=totals,
            goals=goals,
            calories_remaining=remaining,
            calorie_progress=progress_ratio(totals.calories, goals.calories),
            status=calorie_status(totals.calories, goals.calories),
            remaining_text=remaining_text(remaining),
            protein=_macro(totals.protein_g, goals.protein_g),
            carbs=_macro(totals.carbs_g, goals.carbs_g),
            fat=_macro(totals.fat_g, goals.fat_g),
        )


def _macro(consumed: float, target: float) -> MacroProgress:
    return MacroProgress(
        consumed_g=consumed,
        target_g=target,
        progress=progress_ratio(consumed, target),
    )
