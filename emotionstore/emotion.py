"""
Emotion records and the relations between them.

An emotion here is only a flavor word: an integer id tied to a float
"strength". A record knows its own id and value. The directed, weighted
relations between records are owned by the store and addressed by id, so a
record never holds a reference to another record.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Emotion:
    """
    A single registered emotion.

    Identity is the id alone: two records with the same id compare equal and
    hash the same regardless of their current values.
    """
    emotion_id: int
    value: float

    def adjust(self, delta: float) -> float:
        """Add ``delta`` to this emotion's value and return the new value."""
        self.value += delta
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Emotion):
            return NotImplemented
        return self.emotion_id == other.emotion_id

    def __hash__(self) -> int:
        return hash(self.emotion_id)


@dataclass
class Relation:
    """
    A directed, weighted edge between two emotions.

    When the source emotion is updated by some delta, the target receives
    ``delta * ratio``. The ratio may be negative, zero, or larger than one.
    """
    source_id: int
    target_id: int
    ratio: float = 1.0

    @property
    def edge_id(self) -> tuple[int, int]:
        return (self.source_id, self.target_id)

    def propagated(self, delta: float) -> float:
        """The share of ``delta`` this relation passes on to its target."""
        return delta * self.ratio
