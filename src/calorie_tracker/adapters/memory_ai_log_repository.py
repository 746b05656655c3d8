"""In-memory AI log repository."""

from dataclasses import dataclass
from uuid import UUID

from calorie_tracker.domain.ai_logs import AILogEntry
from calorie_tracker.services.ai_logs import AILogRepository


@dataclass
class InMemoryAILogRepository(AILogRepository):
    """AI log repository that keeps a bounded list of entries."""

    _entries: list[AILogEntry]
    max_entries: int

    def __init__(self, max_entries: int = 500) -> None:
        self._entries = []
        self.max_entries = max_entries

    def add(self, entry: AILogEntry) -> None:
        """Store an entry, dropping the oldest beyond the limit."""
        self._entries.append(entry)
        if len(self._entries) > self.max_entries:
            del self._entries[: len(self._entries) - self.max_entries]

    def list_entries(self) -> list[AILogEntry]:
        """Return all entries in insertion order."""
        return list(self._entries)

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry by id."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                return True
        return False

    def clear(self) -> int:
        """Delete all entries."""
        removed = len(self._entries)
        self._entries.clear()
        return removed
