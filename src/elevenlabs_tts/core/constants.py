"""Shared constants for the ElevenLabs text-to-speech API."""

from enum import StrEnum

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"

# Read by caller-side code only (CLI, examples); the client never touches the environment.
API_KEY_ENV = "ELEVENLABS_API_KEY"

# A maximum of 3 request ids can be sent per direction.
MAX_REQUEST_IDS = 3

SEED_MIN = 0
SEED_MAX = 4294967295


class ElevenLabsModel(StrEnum):
    """Synthesis model identifiers."""

    ELEVEN_V3 = "eleven_v3"
    ELEVEN_FLASH_V2_5 = "eleven_flash_v2_5"
    ELEVEN_FLASH_V2 = "eleven_flash_v2"
    ELEVEN_TURBO_V2_5 = "eleven_turbo_v2_5"
    ELEVEN_TURBO_V2 = "eleven_turbo_v2"
    ELEVEN_MULTILINGUAL_V2 = "eleven_multilingual_v2"
    ELEVEN_MULTILINGUAL_V1 = "eleven_multilingual_v1"
    ELEVEN_MULTILINGUAL_STS_V2 = "eleven_multilingual_sts_v2"
    ELEVEN_ENGLISH_STS_V2 = "eleven_english_sts_v2"
    ELEVEN_MONOLINGUAL_V1 = "eleven_monolingual_v1"


# Short aliases
ELEVEN_V3 = ElevenLabsModel.ELEVEN_V3
FLASH_V2_5 = ElevenLabsModel.ELEVEN_FLASH_V2_5
FLASH_V2 = ElevenLabsModel.ELEVEN_FLASH_V2
TURBO_V2_5 = ElevenLabsModel.ELEVEN_TURBO_V2_5
TURBO_V2 = ElevenLabsModel.ELEVEN_TURBO_V2
MULTILINGUAL_V2 = ElevenLabsModel.ELEVEN_MULTILINGUAL_V2
MULTILINGUAL_V1 = ElevenLabsModel.ELEVEN_MULTILINGUAL_V1
MONOLINGUAL_V1 = ElevenLabsModel.ELEVEN_MONOLINGUAL_V1


class OutputFormat(StrEnum):
    """Audio encodings, formatted as codec_sample_rate[_bitrate].

    mp3_44100_192 requires the Creator tier, pcm_44100 the Pro tier.
    ulaw_8000 is the usual choice for Twilio.
    """

    MP3_22050_32 = "mp3_22050_32"
    MP3_44100_32 = "mp3_44100_32"
    MP3_44100_64 = "mp3_44100_64"
    MP3_44100_96 = "mp3_44100_96"
    MP3_44100_128 = "mp3_44100_128"
    MP3_44100_192 = "mp3_44100_192"
    PCM_8000 = "pcm_8000"
    PCM_16000 = "pcm_16000"
    PCM_22050 = "pcm_22050"
    PCM_24000 = "pcm_24000"
    PCM_44100 = "pcm_44100"
    PCM_48000 = "pcm_48000"
    ULAW_8000 = "ulaw_8000"
    ALAW_8000 = "alaw_8000"
    OPUS_48000_32 = "opus_48000_32"
    OPUS_48000_64 = "opus_48000_64"
    OPUS_48000_96 = "opus_48000_96"


class TextNormalization(StrEnum):
    """Modes for apply_text_normalization (spelling out numbers etc.)."""

    AUTO = "auto"
    ON = "on"
    OFF = "off"


class SettingsContract(StrEnum):
    """How stability is checked when a request is finalized.

    CONTINUOUS accepts any stability in [0, 1] (values are clamped on input).
    DISCRETE additionally requires stability to be one of 0.0 (creative),
    0.5 (natural) or 1.0 (robust), as eleven_v3 expects.
    """

    CONTINUOUS = "continuous"
    DISCRETE = "discrete"


DISCRETE_STABILITY_LEVELS = (0.0, 0.5, 1.0)

DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"  # Rachel
DEFAULT_MODEL_ID = ElevenLabsModel.ELEVEN_MULTILINGUAL_V2.value
DEFAULT_OUTPUT_FORMAT = OutputFormat.MP3_44100_128.value
DEFAULT_TEXT_NORMALIZATION = TextNormalization.AUTO.value
DEFAULT_LANGUAGE_TEXT_NORMALIZATION = False
