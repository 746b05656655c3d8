"""Mapping of provider HTTP failures to AI service errors."""

import httpx

from calorie_tracker.domain.ai_providers import AIServiceError, AIServiceErrorKind

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_TOO_MANY_REQUESTS = 429

_QUOTA_MARKERS = ("quota", "billing", "resource_exhausted")
# Gemini rejects bad keys with a 400 rather than a 401.
_INVALID_KEY_MARKERS = ("api key not valid", "api_key_invalid")


def error_for_status(status_code: int, message: str) -> AIServiceError:
    """Return the AI service error for a failed HTTP status."""
    lowered = message.lower()
    if status_code in {HTTP_UNAUTHORIZED, HTTP_FORBIDDEN} or any(
        marker in lowered for marker in _INVALID_KEY_MARKERS
    ):
        return AIServiceError(
            AIServiceErrorKind.INVALID_API_KEY, message, status_code
        )
    if status_code == HTTP_TOO_MANY_REQUESTS:
        if any(marker in lowered for marker in _QUOTA_MARKERS):
            return AIServiceError(
                AIServiceErrorKind.QUOTA_EXCEEDED, message, status_code
            )
        return AIServiceError(AIServiceErrorKind.RATE_LIMITED, message, status_code)
    return AIServiceError(AIServiceErrorKind.API_ERROR, message, status_code)


def raise_for_provider_status(response: httpx.Response) -> None:
    """Raise an AI service error unless the response succeeded."""
    if response.is_success:
        return
    raise error_for_status(response.status_code, _error_message(response))


def _error_message(response: httpx.Response) -> str:
    """Extract the provider's error message from a response body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
    return response.text or response.reason_phrase
