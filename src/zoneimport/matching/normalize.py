"""Header and field name canonicalization."""

import re
from typing import Pattern

SEPARATOR_PATTERN: Pattern = re.compile(r"[_\-\s]+")


def normalize(name: str) -> str:
    """
    Normalize a header, field key, label or alias for matching.

    Lowercases and removes every underscore, hyphen and whitespace run, so
    "Front Setback", "front_setback" and "FrontSetback" all become
    "frontsetback". Other punctuation (dots included) is kept.

    Args:
        name: The text to normalize

    Returns:
        Normalized token
    """
    return SEPARATOR_PATTERN.sub("", name.lower())
