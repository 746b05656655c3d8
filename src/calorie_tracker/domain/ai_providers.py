"""AI provider definitions and errors."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ProviderInfo:
    """Static metadata describing an AI provider."""

    display_name: str
    short_name: str
    description: str
    api_key_prefix: str
    console_url: str
    api_key_storage_key: str


class AIProvider(str, Enum):
    """Supported AI providers (single source of truth)."""

    CLAUDE = "claude"
    GEMINI = "gemini"
    OPENAI = "openai"

    @property
    def info(self) -> ProviderInfo:
        """Return metadata for the provider."""
        return _PROVIDER_INFO[self]


_PROVIDER_INFO: dict[AIProvider, ProviderInfo] = {
    AIProvider.CLAUDE: ProviderInfo(
        display_name="Claude",
        short_name="Claude",
        description="Anthropic Claude - Excellent at detailed analysis",
        api_key_prefix="sk-ant-",
        console_url="https://console.anthropic.com/",
        api_key_storage_key="claude_api_key",
    ),
    AIProvider.GEMINI: ProviderInfo(
        display_name="Gemini",
        short_name="Gemini",
        description="Google Gemini - Free tier (text only, images limited)",
        api_key_prefix="AI",
        console_url="https://aistudio.google.com/app/apikey",
        api_key_storage_key="gemini_api_key",
    ),
    AIProvider.OPENAI: ProviderInfo(
        display_name="ChatGPT",
        short_name="GPT",
        description="OpenAI ChatGPT - Most popular AI",
        api_key_prefix="sk-",
        console_url="https://platform.openai.com/api-keys",
        api_key_storage_key="openai_api_key",
    ),
}


class AIServiceErrorKind(str, Enum):
    """Categories of AI provider failures."""

    NOT_CONFIGURED = "not_configured"
    INVALID_API_KEY = "invalid_api_key"
    INVALID_RESPONSE = "invalid_response"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    API_ERROR = "api_error"


_ERROR_MESSAGES: dict[AIServiceErrorKind, str] = {
    AIServiceErrorKind.NOT_CONFIGURED: (
        "API key not configured. Please add your API key in Settings."
    ),
    AIServiceErrorKind.INVALID_API_KEY: "Invalid API key. Please check your API key.",
    AIServiceErrorKind.INVALID_RESPONSE: "Invalid response from API.",
    AIServiceErrorKind.RATE_LIMITED: (
        "Rate limited. Please wait a moment and try again."
    ),
    AIServiceErrorKind.QUOTA_EXCEEDED: "API quota exceeded. Please check your billing.",
}


class AIServiceError(Exception):
    """Raised when an AI provider call fails."""

    def __init__(
        self,
        kind: AIServiceErrorKind,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.detail = message
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        """Return a message suitable for showing to the user."""
        if self.kind is AIServiceErrorKind.API_ERROR:
            if self.status_code is None:
                return f"API error: {self.detail or 'request failed'}"
            return f"API error ({self.status_code}): {self.detail or 'unknown error'}"
        return _ERROR_MESSAGES[self.kind]
