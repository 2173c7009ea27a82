"""
Shared fixtures for the emotion store test suite.

Provides a config isolated from the process environment and a couple of
pre-built stores so individual test modules can focus on behavior.
"""

from __future__ import annotations

import pytest

from emotionstore.config import EmotionStoreConfig
from emotionstore.store import EmotionStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep EMOTION_STORE_* variables from the host out of every test."""
    for name in (
        "EMOTION_STORE_DEFAULT_VALUE",
        "EMOTION_STORE_MISSING_VALUE",
        "EMOTION_STORE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def store_config() -> EmotionStoreConfig:
    """EmotionStoreConfig that ignores any .env file on disk."""
    return EmotionStoreConfig(_env_file=None)


@pytest.fixture()
def store(store_config) -> EmotionStore:
    """An empty store with the stock 0.5 default."""
    return EmotionStore(config=store_config)


@pytest.fixture()
def paired_store(store) -> EmotionStore:
    """Three emotions at 0.5 with 1 -> 2 (-0.75) and 2 -> 3 (0.5)."""
    for emotion_id in (1, 2, 3):
        store.register_emotion(emotion_id)
    store.pair(1, 2, -0.75)
    store.pair(2, 3, 0.5)
    return store
