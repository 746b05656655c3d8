"""Google Gemini API connectivity client."""

from dataclasses import dataclass

import httpx

from calorie_tracker.adapters.provider_errors import raise_for_provider_status
from calorie_tracker.domain.ai_providers import AIServiceError, AIServiceErrorKind
from calorie_tracker.services.ai_providers import AIConnectionClient


@dataclass
class GeminiConnectionClient(AIConnectionClient):
    """HTTPX-backed key check against the Gemini models endpoint."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15
    ) -> "GeminiConnectionClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def check(self, api_key: str) -> None:
        """List models with the key to confirm it is accepted."""
        try:
            response = await self.http_client.get(
                f"{self.base_url}/v1beta/models",
                params={"key": api_key, "pageSize": 1},
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise AIServiceError(AIServiceErrorKind.API_ERROR, str(exc)) from exc
        raise_for_provider_status(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
