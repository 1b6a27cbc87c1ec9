"""Finalized text-to-speech request and response models."""

import json
from dataclasses import dataclass
from typing import Annotated, Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...errors import ParseError
from ..constants import MAX_REQUEST_IDS, SEED_MAX, SEED_MIN
from .voice_settings import VoiceSettings

# Fields carried outside the JSON body: voice_id in the URL path,
# output_format as a query parameter.
_NON_BODY_FIELDS = {"voice_id", "output_format"}


class TtsRequest(BaseModel):
    """Validated request, ready to send.

    Optional fields left as None are omitted from the JSON body, never sent
    as null.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    voice_id: str = Field(exclude=True)
    model_id: str
    output_format: str | None = Field(default=None, exclude=True)
    # ISO 639-1; only Turbo v2.5 and Flash v2.5 support language enforcement
    language_code: str | None = None
    seed: Annotated[int, Field(ge=SEED_MIN, le=SEED_MAX)] | None = None
    previous_text: str | None = None
    next_text: str | None = None
    previous_request_ids: list[str] | None = None
    next_request_ids: list[str] | None = None
    apply_text_normalization: str | None = None
    apply_language_text_normalization: bool | None = None
    voice_settings: VoiceSettings = Field(default_factory=VoiceSettings)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be empty")
        return v

    @field_validator("voice_id", "model_id")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("identifier must not be empty")
        return v

    @field_validator("voice_id")
    @classmethod
    def validate_voice_path_segment(cls, v: str) -> str:
        # percent-encoding leaves dot segments intact
        if v in {".", ".."}:
            raise ValueError(f"{v!r} is not a valid voice id")
        return v

    @field_validator("previous_request_ids", "next_request_ids")
    @classmethod
    def validate_request_ids(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and len(v) > MAX_REQUEST_IDS:
            raise ValueError(
                f"A maximum of {MAX_REQUEST_IDS} request ids can be sent, received {len(v)}"
            )
        return v

    def to_body(self) -> dict[str, Any]:
        """JSON body as a dict, without None values or non-body fields."""
        return self.model_dump(exclude_none=True, exclude=_NON_BODY_FIELDS)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True, exclude=_NON_BODY_FIELDS)

    def query_params(self) -> dict[str, str]:
        if self.output_format is None:
            return {}
        return {"output_format": self.output_format}

    @classmethod
    def from_json(
        cls,
        raw: str | bytes,
        voice_id: str,
        output_format: str | None = None,
    ) -> "TtsRequest":
        """Rebuild a request from a serialized body.

        Raises:
            ParseError: If the payload is not valid JSON or not a valid body.
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise ParseError(str(err)) from err

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

        try:
            return cls.model_validate(
                {**data, "voice_id": voice_id, "output_format": output_format}
            )
        except pydantic.ValidationError as err:
            raise ParseError(str(err)) from err


@dataclass(frozen=True)
class TtsResponse:
    """Audio plus the response metadata worth keeping.

    ``request_id`` can be fed into ``previous_request_ids`` of a follow-up
    request to keep speech continuous across generations.
    """

    audio: bytes
    request_id: str | None = None
    content_type: str | None = None
