from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Set, Tuple

from .char_attributes import BoundaryRules
from .models import EngineState, WordOccurrence, WordStatus
from .word_iterator import WordIterator

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import SegmenterConfig

LOGGER = logging.getLogger(__name__)


class SegmentationEngine:
    """
    Extracts spell-check candidates from text for one language.

    Two word iterators share the same BoundaryRules: the text iterator keeps
    contractions such as "in'n'out" whole, the contraction iterator splits
    them so that a concatenation of valid words can still be accepted.
    Instances are not thread-safe.
    """

    def __init__(self, extra_mid_letters: str = "", skip_numeric: bool = True) -> None:
        self._rules = BoundaryRules(
            language="", extra_mid_letters=extra_mid_letters, skip_numeric=skip_numeric
        )
        self._text_iterator = WordIterator()
        self._contraction_iterator = WordIterator()
        self._language = ""
        self._state: EngineState | None = None

    @property
    def language(self) -> str:
        return self._language

    @property
    def rules(self) -> BoundaryRules:
        return self._rules

    @property
    def state(self) -> EngineState | None:
        """Result of the last initialization attempt, None until first use."""
        return self._state

    def init(self, language: str) -> None:
        """Switch to ``language``; the iterators are rebuilt on next use."""
        self._rules.set_default_language(language)
        self._text_iterator.reset()
        self._contraction_iterator.reset()
        self._state = None
        self._language = language
        LOGGER.debug("Segmentation engine configured for %r", language)

    def initialize_if_needed(self) -> bool:
        return True

    def is_enabled(self) -> bool:
        return True

    def spell_check_text(self, text: str, occurrences: List[WordOccurrence]) -> Set[str]:
        """
        Collect the distinct words of ``text`` and record where they occur.

        ``occurrences`` belongs to the caller and is only ever appended to: a
        word already recorded at the same offset has its ``misspelled_count``
        incremented instead. Sub-words of contractions are returned alongside
        the contraction itself. When the language has no usable word
        boundaries the result is empty, so nothing is reported as misspelled.
        """
        if self.prepare() is EngineState.UNAVAILABLE:
            return set()

        words: Set[str] = set()
        index: dict[tuple[int, str], WordOccurrence] = {}
        for existing in occurrences:
            index.setdefault(existing.key, existing)

        self._text_iterator.set_text(text)
        while True:
            result = self._text_iterator.get_next_word()
            if result.status is WordStatus.END_OF_TEXT:
                break
            if result.status is WordStatus.SKIPPABLE:
                continue

            occurrence = index.get((result.start, result.text))
            if occurrence is not None:
                occurrence.misspelled_count += 1
            else:
                occurrence = WordOccurrence(
                    text=result.text,
                    location=result.start,
                    length=result.length,
                    misspelled_count=1,
                )
                occurrences.append(occurrence)
                index[occurrence.key] = occurrence
            words.add(result.text)

            # A token such as "hello:hello" may not be in the dictionary while
            # each of its parts is.
            is_contraction, sub_words = self.is_contraction(result.text)
            if is_contraction:
                words.update(sub_words)
                if not occurrence.contraction_words:
                    occurrence.contraction_words = sub_words
        return words

    def is_contraction(self, token: str) -> Tuple[bool, List[str]]:
        """Split ``token`` on every mid-word punctuation mark; True for 2+ parts."""
        assert self._contraction_iterator.is_initialized, (
            "contraction iterator must be initialized before splitting tokens"
        )
        self._contraction_iterator.set_text(token)
        sub_words = [result.text for result in self._contraction_iterator.words()]
        return len(sub_words) > 1, sub_words

    def prepare(self) -> EngineState:
        """Initialize both iterators if needed; UNAVAILABLE when either cannot be built."""
        iterators = (
            ("text", self._text_iterator, True),
            ("contraction", self._contraction_iterator, False),
        )
        for name, iterator, allow_contraction in iterators:
            if iterator.is_initialized:
                continue
            if not iterator.initialize(self._rules, allow_contraction):
                # Report the text as spelled correctly rather than failing.
                LOGGER.debug(
                    "Failed to initialize %s iterator for %r", name, self._language
                )
                self._state = EngineState.UNAVAILABLE
                return self._state
        self._state = EngineState.READY
        return self._state


def build_engine_from_config(config: "SegmenterConfig") -> SegmentationEngine:
    """Convenience helper to build an initialized engine from SegmenterConfig."""
    engine = SegmentationEngine(
        extra_mid_letters=config.extra_mid_letters,
        skip_numeric=config.skip_numeric,
    )
    engine.init(config.language)
    return engine
