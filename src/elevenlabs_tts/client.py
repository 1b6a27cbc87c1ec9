"""Async ElevenLabs text-to-speech client using the v1 REST API."""

import logging
from urllib.parse import quote

import httpx

from .builder import TextToSpeechBuilder
from .config import ClientConfig
from .core.messages.request import TtsRequest, TtsResponse
from .errors import classify_response, classify_transport_error

logger = logging.getLogger(__name__)


def _read_error_body(response: httpx.Response) -> str:
    """Best-effort text of an error response; empty if it cannot be decoded."""
    try:
        return response.text
    except (UnicodeDecodeError, LookupError):
        return ""


class ElevenLabsTTSClient:
    """
    Holds credentials and endpoint; sends finalized requests.

    The client keeps no per-call state, so one instance can serve many
    concurrent requests. Each call opens its own ``httpx.AsyncClient``.

    Usage:
        client = ElevenLabsTTSClient(api_key="your-key")
        audio = await client.text_to_speech("Hello, world!").voice(RACHEL).execute()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: ElevenLabs API key. Sourcing it (e.g. from the
                environment) is up to the caller.
            base_url: Override of the API base URL (testing, enterprise).
                Takes precedence over ``config.base_url``.
            config: Defaults and transport settings.
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``.
        """
        self.config = config or ClientConfig()
        self._api_key = api_key
        self.base_url = (base_url or self.config.base_url).rstrip("/")
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        api_key: str,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ElevenLabsTTSClient":
        return cls(api_key, config=config, transport=transport)

    def text_to_speech(self, text: str) -> TextToSpeechBuilder:
        """Start building a text-to-speech request."""
        return TextToSpeechBuilder(self, text)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "xi-api-key": self._api_key,
            "Content-Type": "application/json",
        }

    def _endpoint(self, request: TtsRequest) -> str:
        # voice IDs are opaque; keep them a single path segment
        return f"{self.base_url}/text-to-speech/{quote(request.voice_id, safe='')}"

    async def execute_request(self, request: TtsRequest) -> bytes:
        """
        Send one finalized request and return the audio bytes untouched.

        Raises:
            RequestError: On transport failure before an HTTP status.
            AuthenticationError, RateLimitError, QuotaExceededError, ApiError:
                On a non-2xx response.
        """
        response = await self.execute_request_with_metadata(request)
        return response.audio

    async def execute_request_with_metadata(self, request: TtsRequest) -> TtsResponse:
        """Send one finalized request; return audio plus response metadata."""
        url = self._endpoint(request)
        logger.debug(
            f"POST {url} model={request.model_id} "
            f"format={request.output_format} chars={len(request.text)}"
        )

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    headers=self._get_headers(),
                    params=request.query_params(),
                    json=request.to_body(),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as err:
            logger.warning(f"Request to {url} failed: {err!r}")
            raise classify_transport_error(err) from err

        if not response.is_success:
            error = classify_response(
                response.status_code,
                _read_error_body(response),
                response.headers,
            )
            logger.warning(f"ElevenLabs returned HTTP {response.status_code}: {error}")
            raise error

        audio = response.content
        logger.info(f"Received {len(audio)} bytes of audio for voice {request.voice_id}")
        return TtsResponse(
            audio=audio,
            request_id=response.headers.get("request-id"),
            content_type=response.headers.get("content-type"),
        )
