from __future__ import annotations

import logging
from typing import Iterator

import regex

from .char_attributes import BoundaryRules, BoundaryRulesError
from .models import WordResult, WordStatus

LOGGER = logging.getLogger(__name__)

END_OF_TEXT = WordResult(status=WordStatus.END_OF_TEXT)


class WordIteratorError(RuntimeError):
    """Raised when text is bound to an iterator that was never initialized."""


class WordIterator:
    """
    Forward-only cursor that splits a text buffer into words and skippable runs.

    The scanning table is compiled once by ``initialize`` and reused for every
    buffer bound with ``set_text``. Each ``set_text`` starts a new scan; a scan
    cannot be rewound.
    """

    def __init__(self) -> None:
        self._rules: BoundaryRules | None = None
        self._pattern: regex.Pattern[str] | None = None
        self._allow_contraction = False
        self._matches: Iterator[regex.Match[str]] | None = None

    @property
    def is_initialized(self) -> bool:
        return self._pattern is not None

    @property
    def allow_contraction(self) -> bool:
        return self._allow_contraction

    def initialize(self, rules: BoundaryRules, allow_contraction: bool) -> bool:
        """Compile the scanning table for ``rules``; False when it cannot be built."""
        try:
            pattern = rules.compile_pattern(allow_contraction)
        except BoundaryRulesError as exc:
            LOGGER.debug("Word iterator initialization failed: %s", exc)
            return False
        self._rules = rules
        self._pattern = pattern
        self._allow_contraction = allow_contraction
        self._matches = None
        return True

    def reset(self) -> None:
        """Drop the scanning table so the next use has to initialize again."""
        self._rules = None
        self._pattern = None
        self._matches = None

    def set_text(self, text: str) -> None:
        """Bind ``text`` and move the cursor to its start."""
        if self._pattern is None:
            raise WordIteratorError("WordIterator.set_text called before initialize.")
        self._matches = self._pattern.finditer(text)

    def get_next_word(self) -> WordResult:
        """Advance to the next run of the bound text."""
        if self._matches is None or self._rules is None:
            return END_OF_TEXT
        match = next(self._matches, None)
        if match is None:
            self._matches = None
            return END_OF_TEXT

        raw = match.group()
        start, end = match.span()
        if match.lastgroup == "word":
            word = self._rules.normalize_word(raw)
            # Sub-words of a contraction keep their digits so they rebuild the token.
            skip_numeric = self._allow_contraction and self._rules.skip_numeric
            if word and not (skip_numeric and self._rules.is_numeric(word)):
                return WordResult(WordStatus.WORD, word, start, end - start)
        return WordResult(WordStatus.SKIPPABLE, raw, start, end - start)

    def words(self) -> Iterator[WordResult]:
        """Yield the remaining words of the bound text, skipping everything else."""
        while True:
            result = self.get_next_word()
            if result.status is WordStatus.END_OF_TEXT:
                return
            if result.status is WordStatus.WORD:
                yield result
