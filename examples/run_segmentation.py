"""
Tiny helper script showing how occurrences accumulate across calls.
"""

from __future__ import annotations

from spellcheck_segmenter.config import SegmenterConfig
from spellcheck_segmenter.engine import build_engine_from_config
from spellcheck_segmenter.models import WordOccurrence


def main() -> None:
    engine = build_engine_from_config(SegmenterConfig(language="en-US"))
    occurrences: list[WordOccurrence] = []
    samples = [
        "We grabbed burgers at in'n'out before the hello:hello meetup.",
        "We grabbed fries at in'n'out after the show.",
    ]

    for sample in samples:
        words = engine.spell_check_text(sample, occurrences)
        print("-" * 40)
        print(sample)
        print(f"Candidate words: {sorted(words)}")

    print("-" * 40)
    for occurrence in occurrences:
        print(
            f"{occurrence.location:>4} {occurrence.text!r} "
            f"x{occurrence.misspelled_count} {occurrence.contraction_words}"
        )


if __name__ == "__main__":
    main()
