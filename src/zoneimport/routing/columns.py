"""Column mapping helpers shared by the routers."""

import re
from typing import Any, Mapping, Optional, Pattern

from .models import UNSET_KEYS

COLUMN_INDEX_PATTERN: Pattern = re.compile(r"-?[0-9]+")


def mapped_columns(mapping: Mapping[Any, Optional[str]]) -> list[tuple[int, str]]:
    """
    Return the (column index, field key) pairs that carry a field key.

    Unset entries and keys that are not column indices are dropped. Pairs
    are ordered by ascending column index, so a later column overwrites an
    earlier one that targets the same location.
    """
    columns = []
    for raw_index, field_key in mapping.items():
        if field_key in UNSET_KEYS:
            continue
        if isinstance(raw_index, int):
            index = raw_index
        elif isinstance(raw_index, str) and COLUMN_INDEX_PATTERN.fullmatch(raw_index):
            index = int(raw_index)
        else:
            continue
        columns.append((index, field_key))
    return sorted(columns, key=lambda pair: pair[0])
