from __future__ import annotations

import logging
import unicodedata
from functools import lru_cache

import regex

LOGGER = logging.getLogger(__name__)

DEFAULT_SCRIPT = "Latin"

# Letters, marks, digits and connector punctuation ("_") never break a word.
WORD_CHARS = r"\p{L}\p{M}\p{N}\p{Pc}"

# Characters that join two letter runs into one word when contractions are
# kept whole ("don't", "hello:hello", "e.g", "well-known").
BASE_MID_LETTERS = "'’ʼ:·.-‐"

HEBREW_MID_LETTERS = '"\u05f3\u05f4'

LANGUAGE_MID_LETTERS = dict.fromkeys(("he", "iw", "yi"), HEBREW_MID_LETTERS)

LANGUAGE_SCRIPTS = {
    **dict.fromkeys(
        ("ru", "uk", "be", "bg", "mk", "sr", "kk", "ky", "mn", "tg", "tt", "ba"),
        "Cyrillic",
    ),
    "el": "Greek",
    **dict.fromkeys(("he", "iw", "yi"), "Hebrew"),
    **dict.fromkeys(("ar", "fa", "ur", "ps", "ug"), "Arabic"),
    "hy": "Armenian",
    "ka": "Georgian",
    "ko": "Hangul",
    **dict.fromkeys(("hi", "mr", "ne", "sa"), "Devanagari"),
    **dict.fromkeys(("bn", "as"), "Bengali"),
    "ta": "Tamil",
    "te": "Telugu",
    "gu": "Gujarati",
    "kn": "Kannada",
    "ml": "Malayalam",
    "pa": "Gurmukhi",
    "th": "Thai",
    "lo": "Lao",
    "km": "Khmer",
    "si": "Sinhala",
    "am": "Ethiopic",
}

SCRIPT_CODES = {
    "Latn": "Latin",
    "Cyrl": "Cyrillic",
    "Grek": "Greek",
    "Hebr": "Hebrew",
    "Arab": "Arabic",
    "Armn": "Armenian",
    "Geor": "Georgian",
    "Hang": "Hangul",
    "Kore": "Hangul",
    "Deva": "Devanagari",
    "Beng": "Bengali",
    "Taml": "Tamil",
    "Telu": "Telugu",
    "Gujr": "Gujarati",
    "Knda": "Kannada",
    "Mlym": "Malayalam",
    "Guru": "Gurmukhi",
    "Thai": "Thai",
    "Laoo": "Lao",
    "Khmr": "Khmer",
    "Sinh": "Sinhala",
    "Ethi": "Ethiopic",
}

# Characters removed from a word before it is handed to the dictionary.
# Scripts not listed here keep their own letters plus Common/Inherited ones.
SCRIPT_DROP_CLASSES = {
    # Keep consonants and geresh/gershayim, drop niqqud and cantillation.
    "Hebrew": "[^\u05d0-\u05ea\u05f3\u05f4'\"]",
    # Keep letters, drop tashkeel and tatweel.
    "Arabic": "[^\u0621-\u063a\u0641-\u064a]",
}


class BoundaryRulesError(RuntimeError):
    """Raised when no scanning table can be built for the configured language."""


class BoundaryRules:
    """
    Character classification for one language: which characters form words,
    which punctuation may glue two words together, and how a raw word is
    normalized before a dictionary lookup.

    The lenient (contractions kept whole) and strict (split on every
    mid-letter) scanning tables come from the same configuration, so both
    iterators of an engine always agree on the punctuation classes.
    """

    def __init__(
        self,
        language: str = "en-US",
        extra_mid_letters: str = "",
        skip_numeric: bool = True,
    ) -> None:
        self.extra_mid_letters = extra_mid_letters
        self.skip_numeric = skip_numeric
        self._language = ""
        self._primary = ""
        self._script: str | None = None
        self.set_default_language(language)

    @property
    def language(self) -> str:
        return self._language

    @property
    def script(self) -> str | None:
        """Unicode script name, or None when the tag could not be parsed."""
        return self._script

    @property
    def mid_letters(self) -> str:
        extras = LANGUAGE_MID_LETTERS.get(self._primary, "") + self.extra_mid_letters
        merged = BASE_MID_LETTERS
        for char in extras:
            if char not in merged:
                merged += char
        return merged

    def set_default_language(self, language: str) -> None:
        """Select the language whose script drives word boundaries."""
        self._language = language
        self._primary, self._script = _resolve_script(language)
        LOGGER.debug("Language %r resolved to script %r", language, self._script)

    def compile_pattern(self, allow_contraction: bool) -> regex.Pattern[str]:
        """Build the scanning table; raises BoundaryRulesError on failure."""
        if self._script is None:
            raise BoundaryRulesError(f"Unsupported language tag {self._language!r}.")
        _drop_pattern(self._script)
        word = f"[{WORD_CHARS}]+"
        if allow_contraction:
            word = f"{word}(?:[{_escape_class(self.mid_letters)}][{WORD_CHARS}]+)*"
        try:
            return regex.compile(
                f"(?P<word>{word})|(?P<skip>[^{WORD_CHARS}]+)", regex.UNICODE
            )
        except regex.error as exc:
            raise BoundaryRulesError(
                f"Cannot build word boundaries for {self._language!r}: {exc}"
            ) from exc

    def normalize_word(self, raw: str) -> str:
        """Return the dictionary form of a raw word, possibly empty."""
        if self._script is None:
            return ""
        normalized = unicodedata.normalize("NFKC", raw)
        if self._script == "Hangul":
            # Hangul dictionaries are keyed on conjoining jamo.
            normalized = unicodedata.normalize("NFD", normalized)
        return _drop_pattern(self._script).sub("", normalized)

    def is_numeric(self, word: str) -> bool:
        return not regex.search(r"\p{L}", word)


def _resolve_script(language: str) -> tuple[str, str | None]:
    parts = [part for part in regex.split(r"[-_]", language.strip()) if part]
    if not parts or not parts[0].isalpha():
        return "", None
    primary = parts[0].lower()
    for subtag in parts[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            code = subtag.title()
            return primary, SCRIPT_CODES.get(code, code)
    return primary, LANGUAGE_SCRIPTS.get(primary, DEFAULT_SCRIPT)


@lru_cache(maxsize=None)
def _drop_pattern(script: str) -> regex.Pattern[str]:
    source = SCRIPT_DROP_CLASSES.get(
        script,
        rf"[^\p{{Script={script}}}\p{{Script=Common}}\p{{Script=Inherited}}]",
    )
    try:
        return regex.compile(source, regex.UNICODE)
    except regex.error as exc:
        raise BoundaryRulesError(f"Unknown script {script!r}: {exc}") from exc


def _escape_class(chars: str) -> str:
    return "".join(
        f"\\u{ord(char):04x}" if ord(char) <= 0xFFFF else f"\\U{ord(char):08x}"
        for char in chars
    )
