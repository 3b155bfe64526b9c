"""
Free-text coordinate parsing.
"""

from coordparse.core.parsers.registry import (
    PATTERN_REGISTRY,
    PatternEntry,
    coordinate_from_string,
    default_target,
    iter_candidates,
    normalize_text,
    recognize_coordinate,
)

__all__ = [
    "PATTERN_REGISTRY",
    "PatternEntry",
    "coordinate_from_string",
    "default_target",
    "iter_candidates",
    "normalize_text",
    "recognize_coordinate",
]
