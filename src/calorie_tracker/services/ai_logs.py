"""AI call log service."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from calorie_tracker.domain.ai_logs import AILogEntry


class AILogRepository(Protocol):
    """Persistence interface for AI log entries."""

    def add(self, entry: AILogEntry) -> None:
        """Store a log entry."""

    def list_entries(self) -> list[AILogEntry]:
        """Return all stored log entries."""

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry, returning True if it existed."""

    def clear(self) -> int:
        """Delete all entries and return how many were removed."""


@dataclass
class AILogService:
    """Service for recording and reviewing AI calls."""

    repository: AILogRepository

    def record(  # noqa: PLR0913
        self,
        request_type: str,
        provider: str,
        input_text: str,
        output: str,
        success: bool = True,
        error_message: str | None = None,
    ) -> AILogEntry:
        """Record an AI call."""
        entry = AILogEntry(
            id=uuid4(),
            timestamp=datetime.now(tz=UTC),
            request_type=request_type,
            provider=provider,
            input=input_text,
            output=output,
            success=success,
            error_message=error_message,
        )
        self.repository.add(entry)
        return entry

    def list_recent(self, limit: int | None = None) -> list[AILogEntry]:
        """Return log entries, newest first."""
        entries = sorted(
            self.repository.list_entries(),
            key=lambda entry: entry.timestamp,
            reverse=True,
        )
        if limit is not None:
            return entries[: max(limit, 0)]
        return entries

    def delete(self, entry_id: UUID) -> bool:
        """Delete a single log entry."""
        return self.repository.delete(entry_id)

    def clear_all(self) -> int:
        """Delete every log entry."""
        return self.repository.clear()
