"""AI provider selection, API key storage and connectivity checks."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.ai_providers import (
    AIProvider,
    AIServiceError,
    AIServiceErrorKind,
)
from calorie_tracker.services.ai_logs import AILogService

CONNECTION_TEST_REQUEST_TYPE = "connection_test"
CONNECTION_OK_MESSAGE = "API key is valid!"

_logger = logging.getLogger(__name__)


class AISettingsRepository(Protocol):
    """Persistence interface for AI provider settings."""

    def get_selected_provider(self) -> AIProvider | None:
        """Return the selected provider, if one was chosen."""

    def set_selected_provider(self, provider: AIProvider) -> None:
        """Persist the selected provider."""

    def get_api_key(self, provider: AIProvider) -> str | None:
        """Return the stored API key for a provider."""

    def set_api_key(self, provider: AIProvider, api_key: str) -> None:
        """Persist the API key for a provider."""


class AIConnectionClient(Protocol):
    """Interface for checking that an API key can reach a provider."""

    async def check(self, api_key: str) -> None:
        """Raise AIServiceError when the provider rejects the key."""


@dataclass(frozen=True)
class ProviderStatus:
    """Configuration summary for a single provider."""

    provider: AIProvider
    display_name: str
    short_name: str
    description: str
    console_url: str
    is_configured: bool
    is_selected: bool


@dataclass(frozen=True)
class ConnectionTestResult:
    """Outcome of a provider connectivity check."""

    provider: AIProvider
    success: bool
    message: str
    error_kind: AIServiceErrorKind | None = None


@dataclass
class AIProviderService:
    """Service for AI provider selection, keys and connectivity checks."""

    repository: AISettingsRepository
    clients: dict[AIProvider, AIConnectionClient]
    log_service: AILogService
    default_provider: AIProvider = AIProvider.OPENAI

    def selected_provider(self) -> AIProvider:
        """Return the selected provider or the configured default."""
        return self.repository.get_selected_provider() or self.default_provider

    def select_provider(self, provider: AIProvider) -> None:
        """Persist the selected provider."""
        self.repository.set_selected_provider(provider)

    def get_api_key(self, provider: AIProvider) -> str:
        """Return the stored API key, or an empty string."""
        return self.repository.get_api_key(provider) or ""

    def set_api_key(self, provider: AIProvider, api_key: str) -> None:
        """Persist an API key with surrounding whitespace removed."""
        self.repository.set_api_key(provider, api_key.strip())

    def is_configured(self, provider: AIProvider | None = None) -> bool:
        """Return True when the provider has an API key."""
        return bool(self.get_api_key(provider or self.selected_provider()))

    @staticmethod
    def key_matches_prefix(provider: AIProvider, api_key: str) -> bool:
        """Return True when the key starts with the provider's usual prefix."""
        return api_key.strip().startswith(provider.info.api_key_prefix)

    def list_providers(self) -> list[ProviderStatus]:
        """Return a status summary for every provider."""
        selected = self.selected_provider()
        return [
            ProviderStatus(
                provider=provider,
                display_name=provider.info.display_name,
                short_name=provider.info.short_name,
                description=provider.info.description,
                console_url=provider.info.console_url,
                is_configured=self.is_configured(provider),
                is_selected=provider is selected,
            )
            for provider in AIProvider
        ]

    async def test_connection(
        self, provider: AIProvider | None = None
    ) -> ConnectionTestResult:
        """Check the stored API key against the provider."""
        resolved = provider or self.selected_provider()
        api_key = self.get_api_key(resolved)
        if not api_key:
            error = AIServiceError(AIServiceErrorKind.NOT_CONFIGURED)
            return ConnectionTestResult(
                provider=resolved,
                success=False,
                message=error.user_message,
                error_kind=error.kind,
            )

        client = self.clients[resolved]
        try:
            await client.check(api_key)
        except AIServiceError as exc:
            _logger.warning(
                "AI connection test failed: provider=%s kind=%s status=%s",
                resolved.value,
                exc.kind.value,
                exc.status_code,
            )
            self.log_service.record(
                request_type=CONNECTION_TEST_REQUEST_TYPE,
                provider=resolved.info.display_name,
                input_text="connectivity check",
                output=exc.detail or "",
                success=False,
                error_message=exc.user_message,
            )
            return ConnectionTestResult(
                provider=resolved,
                success=False,
                message=exc.user_message,
                error_kind=exc.kind,
            )

        _logger.info("AI connection test succeeded: provider=%s", resolved.value)
        self.log_service.record(
            request_type=CONNECTION_TEST_REQUEST_TYPE,
            provider=resolved.info.display_name,
            input_text="connectivity check",
            output="ok",
        )
        return ConnectionTestResult(
            provider=resolved, success=True, message=CONNECTION_OK_MESSAGE
        )
