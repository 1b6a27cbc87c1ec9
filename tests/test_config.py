"""Tests for ClientConfig loading and validation."""

import tempfile

import pytest
import yaml
from pydantic import ValidationError

from elevenlabs_tts.config import ClientConfig
from elevenlabs_tts.core.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL_ID,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VOICE_ID,
    SettingsContract,
)


class TestClientConfig:
    def test_default_config(self) -> None:
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds is None
        assert config.default_voice_id == DEFAULT_VOICE_ID
        assert config.default_model_id == DEFAULT_MODEL_ID
        assert config.default_output_format == DEFAULT_OUTPUT_FORMAT
        assert config.settings_contract == SettingsContract.CONTINUOUS
        assert not config.debug

    def test_from_yaml_none_returns_default(self) -> None:
        config = ClientConfig.from_yaml(None)
        assert config.base_url == DEFAULT_BASE_URL

    def test_from_yaml_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_yaml("/nonexistent/config.yaml")

    def test_from_yaml_valid_file(self) -> None:
        data = {
            "base_url": "https://enterprise.example/v1",
            "timeout_seconds": 30,
            "settings_contract": "discrete",
            "debug": True,
        }
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            config = ClientConfig.from_yaml(f.name)
            assert config.base_url == "https://enterprise.example/v1"
            assert config.timeout_seconds == 30.0
            assert config.settings_contract == SettingsContract.DISCRETE
            assert config.debug is True
            # Unspecified fields should use defaults
            assert config.default_voice_id == DEFAULT_VOICE_ID

    def test_from_yaml_empty_file(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = ClientConfig.from_yaml(f.name)
            assert config.base_url == DEFAULT_BASE_URL

    def test_from_yaml_invalid_types(self) -> None:
        data = {"timeout_seconds": "forever"}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            with pytest.raises(ValidationError):
                ClientConfig.from_yaml(f.name)

    def test_unknown_settings_contract_raises(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(settings_contract="fuzzy")
