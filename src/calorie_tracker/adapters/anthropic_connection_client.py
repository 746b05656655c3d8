"""Anthropic API connectivity client."""

from dataclasses import dataclass

import httpx

from calorie_tracker.adapters.provider_errors import raise_for_provider_status
from calorie_tracker.domain.ai_providers import AIServiceError, AIServiceErrorKind
from calorie_tracker.services.ai_providers import AIConnectionClient


@dataclass
class AnthropicConnectionClient(AIConnectionClient):
    """HTTPX-backed key check against the Anthropic models endpoint."""

    base_url: str
    api_version: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, api_version: str, timeout_seconds: float = 15
    ) -> "AnthropicConnectionClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            api_version=api_version,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def check(self, api_key: str) -> None:
        """List models with the key to confirm it is accepted."""
        try:
            response = await self.http_client.get(
                f"{self.base_url}/v1/models",
                headers={
                    "x-api-key": api_key,
                    "anthropic-version": self.api_version,
                },
                params={"limit": 1},
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise AIServiceError(AIServiceErrorKind.API_ERROR, str(exc)) from exc
        raise_for_provider_status(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
