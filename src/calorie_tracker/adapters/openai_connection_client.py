"""OpenAI API connectivity client."""

from collections.abc import Callable
from dataclasses import dataclass

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from calorie_tracker.adapters.provider_errors import error_for_status
from calorie_tracker.domain.ai_providers import AIServiceError, AIServiceErrorKind
from calorie_tracker.services.ai_providers import AIConnectionClient


@dataclass
class OpenAIConnectionClient(AIConnectionClient):
    """Key check backed by the OpenAI SDK models endpoint."""

    client_factory: Callable[[str], AsyncOpenAI]

    @classmethod
    def create(
        cls, base_url: str | None = None, timeout_seconds: float = 15
    ) -> "OpenAIConnectionClient":
        """Create a client that builds an SDK session per checked key."""

        def factory(api_key: str) -> AsyncOpenAI:
            return AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_seconds,
                max_retries=0,
            )

        return cls(client_factory=factory)

    async def check(self, api_key: str) -> None:
        """List models with the key to confirm it is accepted."""
        client = self.client_factory(api_key)
        try:
            await client.models.list()
        except APIStatusError as exc:
            raise error_for_status(exc.status_code, exc.message) from exc
        except APIConnectionError as exc:
            raise AIServiceError(AIServiceErrorKind.API_ERROR, str(exc)) from exc
        finally:
            await client.close()
