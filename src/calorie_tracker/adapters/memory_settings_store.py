"""In-memory settings store for profile, goals, AI and tutorial settings."""

from dataclasses import dataclass

from calorie_tracker.domain.ai_providers import AIProvider
from calorie_tracker.domain.goals import DailyGoals, ProfileRecord
from calorie_tracker.services.ai_providers import AISettingsRepository
from calorie_tracker.services.goals import SettingsRepository
from calorie_tracker.services.tutorial import TutorialStateRepository


@dataclass
class InMemorySettingsStore(
    SettingsRepository, AISettingsRepository, TutorialStateRepository
):
    """Process-local key-value settings store."""

    _values: dict[str, object]

    def __init__(self) -> None:
        self._values = {}

    def get_profile(self) -> ProfileRecord | None:
        """Return the stored profile."""
        value = self._values.get("profile")
        return value if isinstance(value, ProfileRecord) else None

    def save_profile(self, profile: ProfileRecord) -> None:
        """Store the profile."""
        self._values["profile"] = profile

    def get_goals(self) -> DailyGoals | None:
        """Return the stored goals."""
        value = self._values.get("goals")
        return value if isinstance(value, DailyGoals) else None

    def save_goals(self, goals: DailyGoals) -> None:
        """Store the goals."""
        self._values["goals"] = goals

    def is_onboarding_complete(self) -> bool:
        """Return the onboarding flag."""
        return bool(self._values.get("has_completed_onboarding", False))

    def set_onboarding_complete(self, complete: bool) -> None:
        """Store the onboarding flag."""
        self._values["has_completed_onboarding"] = complete

    def get_selected_provider(self) -> AIProvider | None:
        """Return the selected AI provider."""
        value = self._values.get("selected_ai_provider")
        return value if isinstance(value, AIProvider) else None

    def set_selected_provider(self, provider: AIProvider) -> None:
        """Store the selected AI provider."""
        self._values["selected_ai_provider"] = provider

    def get_api_key(self, provider: AIProvider) -> str | None:
        """Return the API key stored for a provider."""
        value = self._values.get(provider.info.api_key_storage_key)
        return value if isinstance(value, str) else None

    def set_api_key(self, provider: AIProvider, api_key: str) -> None:
        """Store the API key for a provider."""
        self._values[provider.info.api_key_storage_key] = api_key

    def has_seen_tutorial(self) -> bool:
        """Return the tutorial seen flag."""
        return bool(self._values.get("has_seen_tutorial", False))

    def set_seen_tutorial(self, seen: bool) -> None:
        """Store the tutorial seen flag."""
        self._values["has_seen_tutorial"] = seen

    def get_tip_version(self) -> int:
        """Return the tip version."""
        value = self._values.get("tutorial_tip_version", 0)
        return value if isinstance(value, int) else 0

    def set_tip_version(self, version: int) -> None:
        """Store the tip version."""
        self._values["tutorial_tip_version"] = version

    def clear(self) -> None:
        """Remove every stored setting."""
        self._values.clear()
