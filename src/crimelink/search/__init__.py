"""Similarity search of one scene against a collection of scenes."""

from crimelink.search.similarity import (
    DEFAULT_THRESHOLD,
    find_similar,
    is_same_scene,
    validate_threshold,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "find_similar",
    "is_same_scene",
    "validate_threshold",
]
