"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_tracker.adapters.memory_ai_log_repository import InMemoryAILogRepository
from calorie_tracker.adapters.memory_daily_log_repository import (
    InMemoryDailyLogRepository,
)
from calorie_tracker.adapters.memory_settings_store import InMemorySettingsStore
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.ai_providers import AIProvider, AIServiceError
from calorie_tracker.services.ai_logs import AILogService
from calorie_tracker.services.ai_providers import (
    AIConnectionClient,
    AIProviderService,
)
from calorie_tracker.services.daily_log import DailyLogService
from calorie_tracker.services.goals import GoalsService
from calorie_tracker.services.targets import TargetCalculator
from calorie_tracker.services.tutorial import TutorialService


@dataclass
class FakeConnectionClient(AIConnectionClient):
    """Fake connection client that records checked keys."""

    error: AIServiceError | None = None
    checked_keys: list[str] = field(default_factory=list)

    async def check(self, api_key: str) -> None:
        self.checked_keys.append(api_key)
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token")


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def calculator() -> TargetCalculator:
    return TargetCalculator()


@pytest.fixture
def goals_service(
    settings_store: InMemorySettingsStore, calculator: TargetCalculator
) -> GoalsService:
    return GoalsService(repository=settings_store, calculator=calculator)


@pytest.fixture
def daily_log_service(goals_service: GoalsService) -> DailyLogService:
    return DailyLogService(
        repository=InMemoryDailyLogRepository(), goals_service=goals_service
    )


@pytest.fixture
def ai_log_service() -> AILogService:
    return AILogService(InMemoryAILogRepository())


@pytest.fixture
def connection_clients() -> dict[AIProvider, FakeConnectionClient]:
    return {provider: FakeConnectionClient() for provider in AIProvider}


@pytest.fixture
def ai_provider_service(
    settings_store: InMemorySettingsStore,
    connection_clients: dict[AIProvider, FakeConnectionClient],
    ai_log_service: AILogService,
) -> AIProviderService:
    return AIProviderService(
        repository=settings_store,
        clients=dict(connection_clients),
        log_service=ai_log_service,
    )


@pytest.fixture
def tutorial_service(settings_store: InMemorySettingsStore) -> TutorialService:
    return TutorialService(repository=settings_store)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    calculator: TargetCalculator,
    goals_service: GoalsService,
    daily_log_service: DailyLogService,
    ai_log_service: AILogService,
    ai_provider_service: AIProviderService,
    tutorial_service: TutorialService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        calculator=calculator,
        goals_service=goals_service,
        daily_log_service=daily_log_service,
        ai_log_service=ai_log_service,
        ai_provider_service=ai_provider_service,
        tutorial_service=tutorial_service,
        close_resources=close_resources,
    )
