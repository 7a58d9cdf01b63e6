"""Fuzzy header matching against the import field tables."""

from .normalize import normalize
from .matcher import AutoMatcher, ColumnMapping, HeaderMapping, match_headers

__all__ = [
    "normalize",
    "AutoMatcher",
    "ColumnMapping",
    "HeaderMapping",
    "match_headers",
]
