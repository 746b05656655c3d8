"""Tests for AI provider configuration."""

import asyncio

from calorie_tracker.domain.ai_providers import (
    AIProvider,
    AIServiceError,
    AIServiceErrorKind,
)
from calorie_tracker.services.ai_logs import AILogService
from calorie_tracker.services.ai_providers import AIProviderService
from tests.conftest import FakeConnectionClient


def test_selected_provider_defaults_and_persists(
    ai_provider_service: AIProviderService,
) -> None:
    assert ai_provider_service.selected_provider() is AIProvider.OPENAI

    ai_provider_service.select_provider(AIProvider.CLAUDE)

    assert ai_provider_service.selected_provider() is AIProvider.CLAUDE


def test_api_keys_are_stored_per_provider(
    ai_provider_service: AIProviderService,
) -> None:
    ai_provider_service.set_api_key(AIProvider.GEMINI, "  AIzaSy-test  ")

    assert ai_provider_service.get_api_key(AIProvider.GEMINI) == "AIzaSy-test"
    assert ai_provider_service.get_api_key(AIProvider.CLAUDE) == ""
    assert ai_provider_service.is_configured(AIProvider.GEMINI)
    assert not ai_provider_service.is_configured(AIProvider.CLAUDE)


def test_is_configured_uses_selected_provider(
    ai_provider_service: AIProviderService,
) -> None:
    ai_provider_service.set_api_key(AIProvider.OPENAI, "sk-test")

    assert ai_provider_service.is_configured()

    ai_provider_service.select_provider(AIProvider.CLAUDE)

    assert not ai_provider_service.is_configured()


def test_key_prefix_check() -> None:
    assert AIProviderService.key_matches_prefix(AIProvider.CLAUDE, "sk-ant-abc")
    assert not AIProviderService.key_matches_prefix(AIProvider.CLAUDE, "sk-abc")
    assert AIProviderService.key_matches_prefix(AIProvider.GEMINI, "AIzaSy")
    assert AIProviderService.key_matches_prefix(AIProvider.OPENAI, " sk-proj-1")


def test_list_providers_reports_status(
    ai_provider_service: AIProviderService,
) -> None:
    ai_provider_service.set_api_key(AIProvider.CLAUDE, "sk-ant-abc")
    ai_provider_service.select_provider(AIProvider.CLAUDE)

    statuses = {
        status.provider: status for status in ai_provider_service.list_providers()
    }

    assert len(statuses) == len(list(AIProvider))
    assert statuses[AIProvider.CLAUDE].is_configured
    assert statuses[AIProvider.CLAUDE].is_selected
    assert statuses[AIProvider.OPENAI].display_name == "ChatGPT"
    assert not statuses[AIProvider.OPENAI].is_selected


def test_connection_without_key_is_not_configured(
    ai_provider_service: AIProviderService,
    connection_clients: dict[AIProvider, FakeConnectionClient],
    ai_log_service: AILogService,
) -> None:
    result = asyncio.run(ai_provider_service.test_connection(AIProvider.CLAUDE))

    assert not result.success
    assert result.error_kind is AIServiceErrorKind.NOT_CONFIGURED
    assert result.message == (
        "API key not configured. Please add your API key in Settings."
    )
    assert connection_clients[AIProvider.CLAUDE].checked_keys == []
    assert ai_log_service.list_recent() == []


def test_successful_connection_is_logged(
    ai_provider_service: AIProviderService,
    connection_clients: dict[AIProvider, FakeConnectionClient],
    ai_log_service: AILogService,
) -> None:
    ai_provider_service.set_api_key(AIProvider.OPENAI, "sk-good")

    result = asyncio.run(ai_provider_service.test_connection())

    assert result.success
    assert result.message == "API key is valid!"
    assert connection_clients[AIProvider.OPENAI].checked_keys == ["sk-good"]
    logs = ai_log_service.list_recent()
    assert len(logs) == 1
    assert logs[0].request_type == "connection_test"
    assert logs[0].provider == "ChatGPT"
    assert logs[0].success


def test_failed_connection_maps_error_message(
    ai_provider_service: AIProviderService,
    connection_clients: dict[AIProvider, FakeConnectionClient],
    ai_log_service: AILogService,
) -> None:
    connection_clients[AIProvider.GEMINI].error = AIServiceError(
        AIServiceErrorKind.RATE_LIMITED, "slow down", 429
    )
    ai_provider_service.set_api_key(AIProvider.GEMINI, "AIza-key")

    result = asyncio.run(ai_provider_service.test_connection(AIProvider.GEMINI))

    assert not result.success
    assert result.error_kind is AIServiceErrorKind.RATE_LIMITED
    assert result.message == "Rate limited. Please wait a moment and try again."
    entry = ai_log_service.list_recent()[0]
    assert not entry.success
    assert entry.output == "slow down"
    assert entry.error_message == result.message


def test_api_error_message_includes_status() -> None:
    error = AIServiceError(AIServiceErrorKind.API_ERROR, "Server exploded", 500)
    transport = AIServiceError(AIServiceErrorKind.API_ERROR, "connection refused")

    assert error.user_message == "API error (500): Server exploded"
    assert str(error) == "API error (500): Server exploded"
    assert transport.user_message == "API error: connection refused"
