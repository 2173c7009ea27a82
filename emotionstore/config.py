# emotionstore/config.py
"""
Configuration for the emotion store.

Values are loaded from environment variables (via an optional .env file) and
validated with Pydantic. Everything here has a sensible default, so an
``EmotionStoreConfig()`` built in a bare environment is always valid.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

# Resolve .env relative to the project root (one level above emotionstore/),
# so the config works regardless of the caller's current working directory.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class EmotionStoreConfig(BaseSettings):
    """Defaults for newly created stores and the logging they emit."""

    # Strength given to emotions registered without an explicit value
    default_value: float = Field(0.5, alias="EMOTION_STORE_DEFAULT_VALUE")

    # What value_for_emotion() reports for an id that was never registered
    missing_value: float = Field(0.0, alias="EMOTION_STORE_MISSING_VALUE")

    log_level: str = Field("WARNING", alias="EMOTION_STORE_LOG_LEVEL")

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def validate_values(self) -> "EmotionStoreConfig":
        for name in ("default_value", "missing_value"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number.")
        return self

    @model_validator(mode="after")
    def normalize_log_level(self) -> "EmotionStoreConfig":
        level = str(self.log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                "EMOTION_STORE_LOG_LEVEL must be one of: "
                + ", ".join(sorted(_LOG_LEVELS))
                + "."
            )
        self.log_level = level
        return self

    @property
    def log_level_number(self) -> int:
        """The stdlib ``logging`` constant matching ``log_level``."""
        return getattr(logging, self.log_level)
