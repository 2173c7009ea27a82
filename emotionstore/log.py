"""Logging setup for applications embedding the emotion store."""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from emotionstore.config import EmotionStoreConfig

_logging_configured = False


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Configure structlog and standard-library logging.

    Safe to call more than once; later calls are no-ops unless ``force`` is
    set. ``level`` falls back to ``EMOTION_STORE_LOG_LEVEL`` (WARNING).
    """
    global _logging_configured  # noqa: PLW0603
    if _logging_configured and not force:
        return

    if level is None:
        level = EmotionStoreConfig().log_level
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    _logging_configured = True

    logging.basicConfig(format="%(message)s", level=numeric_level)
    logging.getLogger("emotionstore").setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
