"""AI provider configuration endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.models import (  # noqa: TC001
    ApiKeyRequest,
    SelectProviderRequest,
)
from calorie_tracker.domain.ai_providers import AIProvider  # noqa: TC001

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("/providers")
async def list_providers(request: Request) -> dict[str, object]:
    """Return every provider with its configuration status."""
    container: AppContainer = request.app.state.container
    service = container.ai_provider_service
    return {
        "selected": service.selected_provider(),
        "providers": [asdict(status) for status in service.list_providers()],
    }


@router.put("/providers/selected")
async def select_provider(
    payload: SelectProviderRequest, request: Request
) -> dict[str, object]:
    """Make a provider the active one."""
    container: AppContainer = request.app.state.container
    container.ai_provider_service.select_provider(payload.provider)
    return {"selected": payload.provider}


@router.put("/providers/{provider}/key")
async def set_api_key(
    provider: AIProvider, payload: ApiKeyRequest, request: Request
) -> dict[str, object]:
    """Store the API key for a provider."""
    container: AppContainer = request.app.state.container
    service = container.ai_provider_service
    service.set_api_key(provider, payload.api_key)
    return {
        "provider": provider,
        "is_configured": service.is_configured(provider),
        "matches_prefix": service.key_matches_prefix(provider, payload.api_key),
    }


@router.post("/providers/{provider}/test")
async def test_provider(provider: AIProvider, request: Request) -> dict[str, object]:
    """Check the stored API key against the provider."""
    container: AppContainer = request.app.state.container
    result = await container.ai_provider_service.test_connection(provider)
    return asdict(result)
