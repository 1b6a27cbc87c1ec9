"""Typed async client for the ElevenLabs text-to-speech API."""

from .builder import TextToSpeechBuilder
from .client import ElevenLabsTTSClient
from .config import ClientConfig
from .core import voices
from .core.constants import (
    API_KEY_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL_ID,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VOICE_ID,
    ElevenLabsModel,
    OutputFormat,
    SettingsContract,
    TextNormalization,
)
from .core.messages.request import TtsRequest, TtsResponse
from .core.messages.voice_settings import VoiceSettings
from .core.voices import StaticVoice, find_voice
from .errors import (
    ApiError,
    AuthenticationError,
    ElevenLabsError,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    ValidationError,
    classify_response,
    classify_transport_error,
)

__all__ = [
    "API_KEY_ENV",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL_ID",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_VOICE_ID",
    "ApiError",
    "AuthenticationError",
    "ClientConfig",
    "ElevenLabsError",
    "ElevenLabsModel",
    "ElevenLabsTTSClient",
    "OutputFormat",
    "ParseError",
    "QuotaExceededError",
    "RateLimitError",
    "RequestError",
    "SettingsContract",
    "StaticVoice",
    "TextNormalization",
    "TextToSpeechBuilder",
    "TtsRequest",
    "TtsResponse",
    "ValidationError",
    "VoiceSettings",
    "classify_response",
    "classify_transport_error",
    "find_voice",
    "voices",
]
