"""Per-request voice tuning parameters."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import DISCRETE_STABILITY_LEVELS

SPEED_MIN = 0.70
SPEED_MAX = 1.20


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, float(value)))


class VoiceSettings(BaseModel):
    """Voice settings overriding the stored settings of a voice for one request.

    Every numeric field is clamped into its valid range; out-of-range input is
    never rejected. Setters return a new instance.

    Attributes:
        stability: 0.0 (creative) .. 1.0 (robust). Higher is more stable but less expressive.
        similarity_boost: 0.0 .. 1.0. Higher stays closer to the original voice.
        style: 0.0 .. 1.0. Style exaggeration.
        use_speaker_boost: Boost similarity to the original speaker.
        speed: 0.70 .. 1.20, where 1.0 is normal speed.
    """

    model_config = ConfigDict(frozen=True)

    stability: float | None = 0.5
    similarity_boost: float | None = 0.8
    style: float | None = 0.0
    use_speaker_boost: bool | None = True
    speed: float | None = 1.0

    @field_validator("stability", "similarity_boost", "style")
    @classmethod
    def clamp_unit_interval(cls, v: float | None) -> float | None:
        if v is None:
            return None
        return _clamp(v, 0.0, 1.0)

    @field_validator("speed")
    @classmethod
    def clamp_speed(cls, v: float | None) -> float | None:
        if v is None:
            return None
        return _clamp(v, SPEED_MIN, SPEED_MAX)

    @classmethod
    def default(cls) -> "VoiceSettings":
        """Provider defaults: 0.5 / 0.8 / 0.0 / speaker boost on / 1.0."""
        return cls()

    @classmethod
    def new(
        cls,
        stability: float | None = None,
        similarity_boost: float | None = None,
        style: float | None = None,
        use_speaker_boost: bool | None = None,
        speed: float | None = None,
    ) -> "VoiceSettings":
        """Build settings from partial input, filling the gaps.

        Omitted values fall back to stability 0.5 (natural), similarity 0.75,
        style 0.0, speaker boost on and speed 1.0.
        """
        return cls(
            stability=0.5 if stability is None else stability,
            similarity_boost=0.75 if similarity_boost is None else similarity_boost,
            style=0.0 if style is None else style,
            use_speaker_boost=True if use_speaker_boost is None else use_speaker_boost,
            speed=1.0 if speed is None else speed,
        )

    def _replace(self, **changes: Any) -> "VoiceSettings":
        # model_copy(update=...) skips validation, so rebuild to keep clamping
        return type(self)(**{**self.model_dump(), **changes})

    def with_stability(self, stability: float) -> "VoiceSettings":
        return self._replace(stability=stability)

    def with_similarity_boost(self, similarity_boost: float) -> "VoiceSettings":
        return self._replace(similarity_boost=similarity_boost)

    def with_style(self, style: float) -> "VoiceSettings":
        return self._replace(style=style)

    def with_speaker_boost(self, enabled: bool) -> "VoiceSettings":
        return self._replace(use_speaker_boost=enabled)

    def with_speed(self, speed: float) -> "VoiceSettings":
        return self._replace(speed=speed)

    def is_discrete_stability(self) -> bool:
        """True if stability is unset or one of 0.0, 0.5, 1.0."""
        return self.stability is None or self.stability in DISCRETE_STABILITY_LEVELS
