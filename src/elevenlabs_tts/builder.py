"""Chained builder that accumulates request options and finalizes them."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Self

import pydantic

from .core.constants import (
    DEFAULT_LANGUAGE_TEXT_NORMALIZATION,
    DEFAULT_TEXT_NORMALIZATION,
    DISCRETE_STABILITY_LEVELS,
    SettingsContract,
)
from .core.messages.request import TtsRequest, TtsResponse
from .core.messages.voice_settings import VoiceSettings
from .core.voices import StaticVoice
from .errors import ValidationError

if TYPE_CHECKING:
    from .client import ElevenLabsTTSClient

logger = logging.getLogger(__name__)


def _describe_validation_error(err: pydantic.ValidationError) -> str:
    parts = []
    for error in err.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def _request_id_list(request_ids: Iterable[str]) -> list[str]:
    # a bare string would otherwise be split into characters
    if isinstance(request_ids, str):
        raise TypeError("request ids must be an iterable of strings, not a single string")
    return list(request_ids)


class TextToSpeechBuilder:
    """
    Accumulates options for one text-to-speech request.

    Usage:
        audio = await (
            client.text_to_speech("Hello")
            .voice(ARNOLD)
            .model(TURBO_V2_5)
            .execute()
        )

    Setters overwrite earlier values for the same field. ``build()`` (or
    ``execute()``) finalizes the builder; it cannot be used afterwards.
    A builder belongs to a single caller and is not meant to be shared.
    """

    def __init__(self, client: "ElevenLabsTTSClient", text: str):
        self._client = client
        self._consumed = False
        self._text = text
        self._voice_id: str | None = None
        self._model_id: str | None = None
        self._output_format: str | None = None
        self._language_code: str | None = None
        self._seed: int | None = None
        self._previous_text: str | None = None
        self._next_text: str | None = None
        self._previous_request_ids: list[str] | None = None
        self._next_request_ids: list[str] | None = None
        self._apply_text_normalization: str | None = None
        self._apply_language_text_normalization: bool | None = None
        self._voice_settings: VoiceSettings | None = None
        self._settings_contract: SettingsContract | None = None

    def _ensure_open(self) -> None:
        if self._consumed:
            raise RuntimeError("TextToSpeechBuilder has already been finalized")

    def voice(self, voice: StaticVoice) -> Self:
        """Use a premade voice."""
        self._ensure_open()
        self._voice_id = voice.voice_id
        return self

    def voice_id(self, voice_id: str) -> Self:
        """Use a voice by ID (custom or cloned voices)."""
        self._ensure_open()
        self._voice_id = str(voice_id)
        return self

    def model(self, model_id: str) -> Self:
        self._ensure_open()
        self._model_id = str(model_id)
        return self

    def output_format(self, output_format: str) -> Self:
        self._ensure_open()
        self._output_format = str(output_format)
        return self

    def language_code(self, language_code: str) -> Self:
        """
        Enforce a language (ISO 639-1) for pronunciation.

        This does not translate: French audio needs French text.
        """
        self._ensure_open()
        self._language_code = language_code
        return self

    def voice_settings(self, settings: VoiceSettings) -> Self:
        self._ensure_open()
        self._voice_settings = settings
        return self

    def seed(self, seed: int) -> Self:
        """Best-effort deterministic sampling; must be in 0..4294967295."""
        self._ensure_open()
        self._seed = int(seed)
        return self

    def previous_text(self, previous_text: str) -> Self:
        self._ensure_open()
        self._previous_text = previous_text
        return self

    def next_text(self, next_text: str) -> Self:
        self._ensure_open()
        self._next_text = next_text
        return self

    def previous_request_ids(self, request_ids: Iterable[str]) -> Self:
        """Request ids generated before this one (at most 3).

        When both previous_text and previous_request_ids are sent, the provider
        ignores previous_text.
        """
        self._ensure_open()
        self._previous_request_ids = _request_id_list(request_ids)
        return self

    def next_request_ids(self, request_ids: Iterable[str]) -> Self:
        self._ensure_open()
        self._next_request_ids = _request_id_list(request_ids)
        return self

    def apply_text_normalization(self, mode: str) -> Self:
        """One of "auto", "on", "off"."""
        self._ensure_open()
        self._apply_text_normalization = str(mode)
        return self

    def apply_language_text_normalization(self, enabled: bool) -> Self:
        """Language-specific normalization (Japanese only). Adds latency."""
        self._ensure_open()
        self._apply_language_text_normalization = bool(enabled)
        return self

    def settings_contract(self, contract: SettingsContract | str) -> Self:
        """Override the client's stability policy for this request."""
        self._ensure_open()
        self._settings_contract = SettingsContract(contract)
        return self

    def build(self) -> TtsRequest:
        """
        Finalize into a validated ``TtsRequest``.

        Unset voice, model, output format, voice settings and normalization
        flags take their defaults; other optional fields stay unset. The
        builder is consumed even when validation fails.

        Raises:
            ValidationError: If the request breaks the API contract.
            RuntimeError: If the builder was already finalized.
        """
        self._ensure_open()
        self._consumed = True

        config = self._client.config
        settings = self._voice_settings or VoiceSettings.default()
        contract = self._settings_contract or config.settings_contract

        if contract == SettingsContract.DISCRETE and not settings.is_discrete_stability():
            raise ValidationError(
                f"stability must be one of {list(DISCRETE_STABILITY_LEVELS)} "
                f"under the {contract.value} settings contract, got {settings.stability}"
            )

        try:
            request = TtsRequest(
                text=self._text,
                voice_id=(
                    self._voice_id if self._voice_id is not None else config.default_voice_id
                ),
                model_id=(
                    self._model_id if self._model_id is not None else config.default_model_id
                ),
                output_format=(
                    self._output_format
                    if self._output_format is not None
                    else config.default_output_format
                ),
                language_code=self._language_code,
                seed=self._seed,
                previous_text=self._previous_text,
                next_text=self._next_text,
                previous_request_ids=self._previous_request_ids,
                next_request_ids=self._next_request_ids,
                apply_text_normalization=(
                    self._apply_text_normalization
                    if self._apply_text_normalization is not None
                    else DEFAULT_TEXT_NORMALIZATION
                ),
                apply_language_text_normalization=(
                    self._apply_language_text_normalization
                    if self._apply_language_text_normalization is not None
                    else DEFAULT_LANGUAGE_TEXT_NORMALIZATION
                ),
                voice_settings=settings,
            )
        except pydantic.ValidationError as err:
            raise ValidationError(_describe_validation_error(err)) from err

        logger.debug(f"Finalized request for voice {request.voice_id} ({request.model_id})")
        return request

    async def execute(self) -> bytes:
        """Finalize and send the request, returning the raw audio bytes."""
        request = self.build()
        return await self._client.execute_request(request)

    async def execute_with_metadata(self) -> TtsResponse:
        """Like ``execute`` but also returns the provider request id."""
        request = self.build()
        return await self._client.execute_request_with_metadata(request)
