from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WordStatus(Enum):
    """Classification of a single step of a WordIterator."""

    END_OF_TEXT = "end_of_text"
    SKIPPABLE = "skippable"
    WORD = "word"


class EngineState(Enum):
    """Outcome of lazily preparing the iterators of a SegmentationEngine."""

    READY = "ready"
    UNAVAILABLE = "unavailable"


@dataclass(slots=True, frozen=True)
class WordResult:
    """One step of a WordIterator: the run text and its offsets in the buffer."""

    status: WordStatus
    text: str = ""
    start: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(slots=True, eq=False)
class WordOccurrence:
    """
    A word seen at a given offset, and how often it was seen there.

    Two occurrences are the same entity when ``location`` and ``text`` match;
    ``length`` does not take part in the comparison.
    """

    text: str
    location: int
    length: int
    misspelled_count: int = 0
    contraction_words: list[str] = field(default_factory=list)

    @property
    def key(self) -> tuple[int, str]:
        return (self.location, self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordOccurrence):
            return NotImplemented
        return self.key == other.key

    __hash__ = None  # type: ignore[assignment]
