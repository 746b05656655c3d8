"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_tracker.adapters.anthropic_connection_client import (
    AnthropicConnectionClient,
)
from calorie_tracker.adapters.gemini_connection_client import GeminiConnectionClient
from calorie_tracker.adapters.memory_ai_log_repository import InMemoryAILogRepository
from calorie_tracker.adapters.memory_daily_log_repository import (
    InMemoryDailyLogRepository,
)
from calorie_tracker.adapters.memory_settings_store import InMemorySettingsStore
from calorie_tracker.adapters.openai_connection_client import OpenAIConnectionClient
from calorie_tracker.config import Settings, parse_ai_provider
from calorie_tracker.domain.ai_providers import AIProvider
from calorie_tracker.services.ai_logs import AILogService
from calorie_tracker.services.ai_providers import AIProviderService
from calorie_tracker.services.daily_log import DailyLogService
from calorie_tracker.services.goals import GoalsService
from calorie_tracker.services.targets import TargetCalculator
from calorie_tracker.services.tutorial import TutorialService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator: TargetCalculator
    goals_service: GoalsService
    daily_log_service: DailyLogService
    ai_log_service: AILogService
    ai_provider_service: AIProviderService
    tutorial_service: TutorialService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    settings_store = InMemorySettingsStore()
    calculator = TargetCalculator()
    goals_service = GoalsService(repository=settings_store, calculator=calculator)
    daily_log_service = DailyLogService(
        repository=InMemoryDailyLogRepository(), goals_service=goals_service
    )
    ai_log_service = AILogService(
        InMemoryAILogRepository(max_entries=resolved_settings.ai_log_max_entries)
    )
    anthropic_client = AnthropicConnectionClient.create(
        base_url=resolved_settings.anthropic_base_url,
        api_version=resolved_settings.anthropic_version,
        timeout_seconds=resolved_settings.ai_request_timeout_seconds,
    )
    gemini_client = GeminiConnectionClient.create(
        base_url=resolved_settings.gemini_base_url,
        timeout_seconds=resolved_settings.ai_request_timeout_seconds,
    )
    openai_client = OpenAIConnectionClient.create(
        base_url=resolved_settings.openai_base_url,
        timeout_seconds=resolved_settings.ai_request_timeout_seconds,
    )
    ai_provider_service = AIProviderService(
        repository=settings_store,
        clients={
            AIProvider.CLAUDE: anthropic_client,
            AIProvider.GEMINI: gemini_client,
            AIProvider.OPENAI: openai_client,
        },
        log_service=ai_log_service,
        default_provider=parse_ai_provider(resolved_settings.default_ai_provider),
    )
    tutorial_service = TutorialService(repository=settings_store)

    async def close_resources() -> None:
        await anthropic_client.close()
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        calculator=calculator,
        goals_service=goals_service,
        daily_log_service=daily_log_service,
        ai_log_service=ai_log_service,
        ai_provider_service=ai_provider_service,
        tutorial_service=tutorial_service,
        close_resources=close_resources,
    )
