"""Error taxonomy for the ElevenLabs client and the response classifier."""

import json
import math
from collections.abc import Mapping

import httpx

_MAX_MESSAGE_CHARS = 300


class ElevenLabsError(Exception):
    """Base exception for all client errors."""

    pass


class RequestError(ElevenLabsError):
    """Transport-level failure (DNS, TLS, timeout, reset) before any HTTP status.

    Transient; safe to retry with backoff.
    """

    def __init__(self, cause: BaseException):
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class AuthenticationError(ElevenLabsError):
    """HTTP 401. The API key is invalid; do not retry unmodified."""

    def __init__(self, message: str):
        super().__init__(f"Authentication failed: {message}")
        self.message = message


class RateLimitError(ElevenLabsError):
    """HTTP 429. Retry after ``retry_after`` seconds when known."""

    def __init__(self, message: str, retry_after: int | None = None):
        if retry_after is not None:
            text = f"Rate limit exceeded (retry in {retry_after}s): {message}"
        else:
            text = f"Rate limit exceeded: {message}"
        super().__init__(text)
        self.message = message
        self.retry_after = retry_after


class QuotaExceededError(ElevenLabsError):
    """HTTP 402. Not enough credits; needs billing action."""

    def __init__(self, message: str):
        super().__init__(f"Quota exceeded: {message}")
        self.message = message


class ApiError(ElevenLabsError):
    """Any other non-2xx status."""

    def __init__(self, status: int, message: str):
        super().__init__(f"API error ({status}): {message}")
        self.status = status
        self.message = message


class ParseError(ElevenLabsError):
    """A payload could not be decoded where structured data was expected."""

    def __init__(self, message: str):
        super().__init__(f"Failed to parse response: {message}")
        self.message = message


class ValidationError(ElevenLabsError):
    """A request was rejected at finalize time, before any network call."""

    def __init__(self, message: str):
        super().__init__(f"Validation error: {message}")
        self.message = message


def _short_message(text: str) -> str:
    compact = " ".join(text.split())
    if len(compact) <= _MAX_MESSAGE_CHARS:
        return compact
    return f"{compact[: _MAX_MESSAGE_CHARS - 3]}..."


def extract_error_message(body: str) -> str:
    """Pull a readable message out of an error body.

    ElevenLabs answers with ``{"detail": {"status": ..., "message": ...}}`` or
    ``{"detail": "..."}``; anything else is returned as plain text.
    """
    if not body.strip():
        return ""

    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return _short_message(body)

    if isinstance(payload, dict):
        detail = payload.get("detail", payload)
        if isinstance(detail, str) and detail.strip():
            return _short_message(detail)
        if isinstance(detail, dict):
            message = detail.get("message")
            if isinstance(message, str) and message.strip():
                return _short_message(message)

    return _short_message(body)


def parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    """Return the Retry-After header in whole seconds, if numeric."""
    if not headers:
        return None
    value = None
    for key, header_value in headers.items():
        if key.lower() == "retry-after":
            value = header_value
            break
    if value is None:
        return None
    try:
        seconds = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(seconds):
        return None
    return max(int(seconds), 0)


def classify_response(
    status: int,
    body: str,
    headers: Mapping[str, str] | None = None,
) -> ElevenLabsError:
    """Map a non-2xx HTTP response to exactly one error kind."""
    message = extract_error_message(body)

    if status == 401:
        return AuthenticationError(message or "Invalid API key")
    if status == 429:
        return RateLimitError(message or "Too many requests", parse_retry_after(headers))
    if status == 402:
        return QuotaExceededError(message or "Insufficient credits")
    return ApiError(status, message)


def classify_transport_error(exc: httpx.HTTPError | httpx.InvalidURL) -> RequestError:
    """Wrap a failure that happened before an HTTP status was known."""
    return RequestError(exc)
