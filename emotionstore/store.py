"""
Emotion Store — integer-keyed emotions with weighted pairings.

The store maps integer ids to Emotion records, each carrying a float strength.
Emotions registered without an explicit value take the store's current default.

Emotions can be paired: a directed, weighted relation from one emotion to
another. Updating the source by some delta also moves every directly paired
target by ``delta * ratio``. Propagation stops after that single hop; the
targets' own pairings are never triggered, so cycles cannot recurse.

Relations live in one adjacency mapping keyed by id (source -> target ->
Relation) and are resolved through the store's id mapping on every update.
Re-registering an id replaces the record and drops every relation touching it,
both outgoing and incoming.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import structlog

from emotionstore.config import EmotionStoreConfig
from emotionstore.emotion import Emotion, Relation

logger = structlog.get_logger(__name__)


class UnknownEmotionError(ValueError):
    """Raised when an operation names an emotion id that was never registered."""

    def __init__(self, emotion_id: int, operation: str = ""):
        self.emotion_id = emotion_id
        self.operation = operation
        where = f" ({operation})" if operation else ""
        super().__init__(f"Emotion {emotion_id!r} is not registered{where}.")


class EmotionStore:
    """
    An in-memory map of emotion ids to strengths, with one-hop pairings.

    The store owns every record it creates. It is not thread-safe: callers
    sharing a store across threads must hold one lock around each call.

    Usage:
        store = EmotionStore(default_value=0.5)
        store.register_emotion(1)
        store.register_emotion(2)
        store.pair(1, 2, -0.75)
        store.update_value(1, 0.2)   # 1 -> 0.7, 2 -> 0.35
    """

    def __init__(
        self,
        emotions: Optional[Iterable[int]] = None,
        default_value: Optional[float] = None,
        config: Optional[EmotionStoreConfig] = None,
    ):
        self._config = config if config is not None else EmotionStoreConfig()
        self._default_value = (
            self._config.default_value if default_value is None else float(default_value)
        )
        self._emotions: dict[int, Emotion] = {}
        self._relations: dict[int, dict[int, Relation]] = {}

        for emotion_id in emotions or ():
            self.register_emotion(emotion_id, self._default_value)

        logger.info(
            "emotion_store.initialized",
            default_value=self._default_value,
            emotions=len(self._emotions),
        )

    # ------------------------------------------------------------------
    # Registration and defaults
    # ------------------------------------------------------------------

    @property
    def default_value(self) -> float:
        return self._default_value

    def set_default_value(self, value: float) -> None:
        """
        Set the value used by future registrations that omit one.

        Emotions already in the store keep whatever value they have.
        """
        self._default_value = float(value)
        logger.debug("emotion_store.default_changed", default_value=self._default_value)

    def register_emotion(self, emotion_id: int, value: Optional[float] = None) -> Emotion:
        """
        Store a fresh record for ``emotion_id``.

        Without ``value`` the record takes the default in effect right now.
        An existing record under the same id is replaced outright: its value
        is lost and every relation from or to it is dropped.
        """
        if value is None:
            value = self._default_value
        if emotion_id in self._emotions:
            dropped = self._drop_relations(emotion_id)
            logger.warning(
                "emotion_store.replaced",
                emotion_id=emotion_id,
                previous_value=self._emotions[emotion_id].value,
                dropped_relations=dropped,
            )

        emotion = Emotion(emotion_id=emotion_id, value=float(value))
        self._emotions[emotion_id] = emotion
        logger.debug("emotion_store.registered", emotion_id=emotion_id, value=emotion.value)
        return emotion

    def _drop_relations(self, emotion_id: int) -> int:
        dropped = len(self._relations.pop(emotion_id, {}))
        for targets in self._relations.values():
            if targets.pop(emotion_id, None) is not None:
                dropped += 1
        return dropped

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_emotion(self, emotion_id: int) -> bool:
        """Whether ``emotion_id`` is registered, regardless of its value."""
        return emotion_id in self._emotions

    def __contains__(self, emotion_id: object) -> bool:
        return emotion_id in self._emotions

    def __len__(self) -> int:
        return len(self._emotions)

    def __iter__(self) -> Iterator[int]:
        return iter(self._emotions)

    @property
    def emotion_ids(self) -> list[int]:
        return list(self._emotions)

    def get_emotion(self, emotion_id: int) -> Emotion:
        return self._require(emotion_id, "get_emotion")

    def value_for_emotion(self, emotion_id: int, default: Optional[float] = None) -> float:
        """
        Return the value stored for ``emotion_id``.

        An unregistered id reads as ``default``, or the configured missing
        value (0.0 unless overridden). That makes "absent" and "zero" look
        alike; use has_emotion() when the difference matters.
        """
        emotion = self._emotions.get(emotion_id)
        if emotion is None:
            return self._config.missing_value if default is None else float(default)
        return emotion.value

    def relations_for(self, emotion_id: int) -> dict[int, float]:
        """Outgoing pairings of ``emotion_id`` as ``{target_id: ratio}``."""
        self._require(emotion_id, "relations_for")
        return {
            target_id: relation.ratio
            for target_id, relation in self._relations.get(emotion_id, {}).items()
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_value(self, emotion_id: int, value: float) -> None:
        """Overwrite the value of ``emotion_id`` without touching its pairings."""
        emotion = self._require(emotion_id, "set_value")
        emotion.value = float(value)
        logger.debug("emotion_store.value_set", emotion_id=emotion_id, value=emotion.value)

    def update_value(self, emotion_id: int, delta: float) -> float:
        """
        Add ``delta`` to ``emotion_id`` and push it one hop along its pairings.

        Each directly paired target receives ``delta * ratio``, applied to the
        target's value directly. The targets' own pairings are not followed.
        Returns the source emotion's new value.
        """
        emotion = self._require(emotion_id, "update_value")
        emotion.adjust(delta)

        relations = self._relations.get(emotion_id, {})
        for relation in relations.values():
            self._emotions[relation.target_id].adjust(relation.propagated(delta))

        logger.debug(
            "emotion_store.updated",
            emotion_id=emotion_id,
            delta=delta,
            value=emotion.value,
            propagated_to=len(relations),
        )
        return emotion.value

    def pair(self, source_id: int, target_id: int, ratio: float) -> Relation:
        """
        Link ``source_id`` to ``target_id`` with weight ``ratio``.

        The link is one-way. Pairing the same two ids again replaces the
        earlier ratio instead of adding a second link.
        """
        self._require(source_id, "pair")
        self._require(target_id, "pair")

        relation = Relation(source_id=source_id, target_id=target_id, ratio=float(ratio))
        self._relations.setdefault(source_id, {})[target_id] = relation
        logger.debug(
            "emotion_store.paired",
            source_id=source_id,
            target_id=target_id,
            ratio=relation.ratio,
        )
        return relation

    def _require(self, emotion_id: int, operation: str) -> Emotion:
        emotion = self._emotions.get(emotion_id)
        if emotion is None:
            logger.debug(
                "emotion_store.unknown_emotion",
                emotion_id=emotion_id,
                operation=operation,
            )
            raise UnknownEmotionError(emotion_id, operation)
        return emotion
