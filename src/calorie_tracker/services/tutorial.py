"""Tutorial coach mark sequencing."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class CoachMark:
    """A single tutorial step pointing at part of the app."""

    id: str
    title: str
    message: str
    tab_index: int | None = None


DEFAULT_COACH_MARKS: tuple[CoachMark, ...] = (
    CoachMark(
        id="dashboard",
        title="Your Daily Progress",
        message="Track your calories here - the ring fills as you log food.",
        tab_index=0,
    ),
    CoachMark(
        id="add_food",
        title="Add Food",
        message=(
            "Tap here to log your meals. "
            "You can use AI, scan barcodes, or add food manually."
        ),
        tab_index=1,
    ),
    CoachMark(
        id="products",
        title="Search Products",
        message="Find saved products quickly by name.",
        tab_index=2,
    ),
    CoachMark(
        id="ai_logs",
        title="AI Logs",
        message="Review every AI request and response here.",
        tab_index=3,
    ),
    CoachMark(
        id="settings",
        title="Settings & Profile",
        message="Tap here to set your calorie goals and preferences.",
        tab_index=4,
    ),
)


class TutorialStateRepository(Protocol):
    """Persistence interface for tutorial flags."""

    def has_seen_tutorial(self) -> bool:
        """Return True once the tutorial was completed or skipped."""

    def set_seen_tutorial(self, seen: bool) -> None:
        """Update the seen flag."""

    def get_tip_version(self) -> int:
        """Return the current tip version."""

    def set_tip_version(self, version: int) -> None:
        """Persist the tip version."""


@dataclass
class TutorialService:
    """Linear walk through the configured coach marks."""

    repository: TutorialStateRepository
    coach_marks: tuple[CoachMark, ...] = DEFAULT_COACH_MARKS
    _index: int | None = field(default=None, init=False)

    @property
    def is_showing(self) -> bool:
        """Return True while a coach mark is on screen."""
        return self._index is not None

    @property
    def current(self) -> CoachMark | None:
        """Return the coach mark on screen, if any."""
        if self._index is None:
            return None
        return self.coach_marks[self._index]

    @property
    def total_steps(self) -> int:
        """Return the number of coach marks."""
        return len(self.coach_marks)

    @property
    def step_number(self) -> int | None:
        """Return the 1-based number of the current step."""
        if self._index is None:
            return None
        return self._index + 1

    @property
    def progress(self) -> float:
        """Return the completed fraction of the tutorial."""
        if self._index is None or not self.coach_marks:
            return 0.0
        return (self._index + 1) / len(self.coach_marks)

    def start(self) -> CoachMark | None:
        """Show the first coach mark."""
        if not self.coach_marks:
            return None
        self._index = 0
        return self.current

    def next_step(self) -> CoachMark | None:
        """Advance to the next coach mark, finishing after the last one."""
        if self._index is None:
            return None
        if self._index + 1 >= len(self.coach_marks):
            self._finish()
            return None
        self._index += 1
        return self.current

    def skip(self) -> None:
        """End the tutorial immediately."""
        self._finish()

    def reset(self) -> int:
        """Bump the tip version so every tip is treated as unseen again."""
        version = self.repository.get_tip_version() + 1
        self.repository.set_tip_version(version)
        self.repository.set_seen_tutorial(False)
        self._index = None
        return version

    def tip_id(self, base: str) -> str:
        """Return a versioned identifier for a tip."""
        return f"{base}_v{self.repository.get_tip_version()}"

    def _finish(self) -> None:
        self._index = None
        self.repository.set_seen_tutorial(True)
