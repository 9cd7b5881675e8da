"""
spellcheck_segmenter package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .char_attributes import BoundaryRules, BoundaryRulesError
from .config import SegmenterConfig, config_from_dict, config_from_yaml, load_config
from .engine import SegmentationEngine, build_engine_from_config
from .models import EngineState, WordOccurrence, WordResult, WordStatus
from .word_iterator import WordIterator, WordIteratorError

__all__ = [
    "BoundaryRules",
    "BoundaryRulesError",
    "SegmenterConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "SegmentationEngine",
    "build_engine_from_config",
    "EngineState",
    "WordOccurrence",
    "WordResult",
    "WordStatus",
    "WordIterator",
    "WordIteratorError",
]

__version__ = "0.1.0"
