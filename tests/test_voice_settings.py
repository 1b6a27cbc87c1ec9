"""Tests for VoiceSettings clamping, defaults and setters."""

import pydantic
import pytest

from elevenlabs_tts.core.messages.voice_settings import SPEED_MAX, SPEED_MIN, VoiceSettings


class TestVoiceSettingsDefaults:
    def test_default_values(self) -> None:
        settings = VoiceSettings.default()
        assert settings.stability == 0.5
        assert settings.similarity_boost == 0.8
        assert settings.style == 0.0
        assert settings.use_speaker_boost is True
        assert settings.speed == 1.0

    def test_plain_constructor_matches_default(self) -> None:
        assert VoiceSettings() == VoiceSettings.default()

    def test_new_fills_missing_values(self) -> None:
        settings = VoiceSettings.new(stability=1.0, similarity_boost=0.9)
        assert settings.stability == 1.0
        assert settings.similarity_boost == 0.9
        assert settings.style == 0.0
        assert settings.use_speaker_boost is True
        assert settings.speed == 1.0

    def test_new_without_arguments(self) -> None:
        settings = VoiceSettings.new()
        assert settings.stability == 0.5
        assert settings.similarity_boost == 0.75

    def test_is_frozen(self) -> None:
        settings = VoiceSettings()
        with pytest.raises(pydantic.ValidationError):
            settings.stability = 0.1  # type: ignore[misc]


class TestVoiceSettingsClamping:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-0.5, 0.0), (-100.0, 0.0), (1.5, 1.0), (42.0, 1.0), (0.3, 0.3)],
    )
    def test_unit_interval_fields_clamp(self, value: float, expected: float) -> None:
        settings = VoiceSettings.new(stability=value, similarity_boost=value, style=value)
        assert settings.stability == expected
        assert settings.similarity_boost == expected
        assert settings.style == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.1, SPEED_MIN), (0.0, SPEED_MIN), (2.0, SPEED_MAX), (1.21, SPEED_MAX), (0.9, 0.9)],
    )
    def test_speed_clamps(self, value: float, expected: float) -> None:
        assert VoiceSettings.new(speed=value).speed == expected
        assert VoiceSettings().with_speed(value).speed == expected

    def test_constructor_clamps(self) -> None:
        settings = VoiceSettings(stability=3.0, speed=5.0)
        assert settings.stability == 1.0
        assert settings.speed == SPEED_MAX

    def test_setters_clamp(self) -> None:
        settings = (
            VoiceSettings()
            .with_stability(-1.0)
            .with_similarity_boost(2.0)
            .with_style(7.0)
        )
        assert settings.stability == 0.0
        assert settings.similarity_boost == 1.0
        assert settings.style == 1.0

    def test_none_is_preserved(self) -> None:
        settings = VoiceSettings(style=None, speed=None)
        assert settings.style is None
        assert settings.speed is None


class TestVoiceSettingsSetters:
    def test_setter_returns_new_instance(self) -> None:
        original = VoiceSettings()
        changed = original.with_stability(1.0)
        assert changed is not original
        assert original.stability == 0.5
        assert changed.stability == 1.0

    def test_speaker_boost(self) -> None:
        assert VoiceSettings().with_speaker_boost(False).use_speaker_boost is False

    def test_setters_keep_other_fields(self) -> None:
        settings = VoiceSettings.new(stability=1.0, similarity_boost=0.9).with_speed(0.8)
        assert settings.stability == 1.0
        assert settings.similarity_boost == 0.9
        assert settings.speed == 0.8


class TestDiscreteStability:
    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
    def test_discrete_levels(self, value: float) -> None:
        assert VoiceSettings.new(stability=value).is_discrete_stability()

    def test_clamped_to_boundary_is_discrete(self) -> None:
        assert VoiceSettings.new(stability=7.0).is_discrete_stability()

    def test_continuous_value_is_not_discrete(self) -> None:
        assert not VoiceSettings.new(stability=0.3).is_discrete_stability()

    def test_unset_stability_is_discrete(self) -> None:
        assert VoiceSettings(stability=None).is_discrete_stability()
