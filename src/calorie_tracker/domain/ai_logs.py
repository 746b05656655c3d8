"""Domain models for the AI call log."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

_REQUEST_TYPE_NAMES = {
    "vitamin_analysis": "Vitamin Analysis",
    "food_estimate": "Food Estimate",
    "nutrition_label": "Label Scan",
    "connection_test": "Connection Test",
}


@dataclass(frozen=True)
class AILogEntry:
    """A single AI request and its raw response."""

    id: UUID
    timestamp: datetime
    request_type: str
    provider: str
    input: str
    output: str
    success: bool
    error_message: str | None = None

    @property
    def request_type_display_name(self) -> str:
        """Return a readable name for the request type."""
        return _REQUEST_TYPE_NAMES.get(self.request_type, self.request_type)
