"""Tests for emotionstore/config.py — environment-driven settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from emotionstore.config import EmotionStoreConfig


class TestEmotionStoreConfigDefaults:

    def test_defaults(self, store_config):
        assert store_config.default_value == 0.5
        assert store_config.missing_value == 0.0
        assert store_config.log_level == "WARNING"
        assert store_config.log_level_number == logging.WARNING

    def test_field_names_accepted(self):
        config = EmotionStoreConfig(_env_file=None, default_value=0.1, missing_value=-1.0)
        assert config.default_value == pytest.approx(0.1)
        assert config.missing_value == -1.0

    def test_aliases_accepted(self):
        config = EmotionStoreConfig(_env_file=None, EMOTION_STORE_DEFAULT_VALUE=0.9)
        assert config.default_value == pytest.approx(0.9)


class TestEmotionStoreConfigEnvironment:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("EMOTION_STORE_DEFAULT_VALUE", "0.75")
        monkeypatch.setenv("EMOTION_STORE_MISSING_VALUE", "-0.5")
        monkeypatch.setenv("EMOTION_STORE_LOG_LEVEL", "debug")
        config = EmotionStoreConfig(_env_file=None)
        assert config.default_value == pytest.approx(0.75)
        assert config.missing_value == pytest.approx(-0.5)
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("EMOTION_STORE_DEFAULT_VALUE=0.3\n")
        config = EmotionStoreConfig(_env_file=env_file)
        assert config.default_value == pytest.approx(0.3)

    def test_non_numeric_default_rejected(self, monkeypatch):
        monkeypatch.setenv("EMOTION_STORE_DEFAULT_VALUE", "strong")
        with pytest.raises(ValidationError):
            EmotionStoreConfig(_env_file=None)


class TestEmotionStoreConfigValidation:

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values_rejected(self, value):
        with pytest.raises(ValidationError):
            EmotionStoreConfig(_env_file=None, default_value=value)
        with pytest.raises(ValidationError):
            EmotionStoreConfig(_env_file=None, missing_value=value)

    def test_log_level_normalized(self):
        config = EmotionStoreConfig(_env_file=None, log_level="  info ")
        assert config.log_level == "INFO"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            EmotionStoreConfig(_env_file=None, log_level="chatty")
