"""Domain errors."""


class ValidationError(ValueError):
    """Raised when a required input is missing or outside its valid range."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def to_dict(self) -> dict[str, str]:
        """Return the error as a field/reason mapping."""
        return {"field": self.field, "reason": self.reason}
