"""
Emotion Store — a small in-memory map of emotions to strengths.

Emotions are integer ids with a float strength. Emotions can be paired so that
an update to one is passed on, scaled by a ratio, to the emotions it is paired
with. Propagation goes exactly one hop.
"""

from emotionstore.config import EmotionStoreConfig
from emotionstore.emotion import Emotion, Relation
from emotionstore.log import configure_logging
from emotionstore.store import EmotionStore, UnknownEmotionError

__version__ = "0.1.0"

# Route store events through stdlib logging at EMOTION_STORE_LOG_LEVEL, so an
# unconfigured embedding application sees nothing below WARNING.
configure_logging()

__all__ = [
    "EmotionStore",
    "EmotionStoreConfig",
    "Emotion",
    "Relation",
    "UnknownEmotionError",
    "configure_logging",
]
