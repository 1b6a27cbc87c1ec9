"""
Client configuration.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from .core.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL_ID,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VOICE_ID,
    SettingsContract,
)


class ClientConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    default_voice_id: str = DEFAULT_VOICE_ID
    default_model_id: str = DEFAULT_MODEL_ID
    default_output_format: str = DEFAULT_OUTPUT_FORMAT
    settings_contract: SettingsContract = SettingsContract.CONTINUOUS
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "ClientConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
