"""In-memory daily food log repository."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from calorie_tracker.domain.daily_log import FoodEntry
from calorie_tracker.services.daily_log import DailyLogRepository


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """Food log repository backed by a list."""

    _entries: list[FoodEntry]

    def __init__(self) -> None:
        self._entries = []

    def add(self, entry: FoodEntry) -> None:
        """Store an entry."""
        self._entries.append(entry)

    def list_for_day(self, day: date) -> list[FoodEntry]:
        """Return a day's entries in logging order."""
        return [entry for entry in self._entries if entry.day == day]

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry by id."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                return True
        return False
