"""Route a mapped CSV row into district parameter dot-path values."""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from .columns import mapped_columns
from .models import DistrictRoutingResult, DistrictValue, SkipReason, SkipRecord
from .numbers import parse_number, parse_permitted

logger = logging.getLogger(__name__)

PERMITTED_SUFFIX = ".permitted"


def route_district(
    row: Sequence[str],
    mapping: Mapping[Any, Optional[str]],
    row_index: int = 0,
) -> DistrictRoutingResult:
    """
    Convert one data row into flat (dot-path, value) assignments.

    Keys ending in ``.permitted`` take a boolean: true for "true", "yes",
    "1", "y" or "permitted" (any case), false for any other non-empty text.
    Every other key takes a number and is left out when the cell has none.
    The nested tree is never built here; callers apply each value with
    their own setter.

    Args:
        row: One tokenized data row
        mapping: Column index -> district dot-path key
        row_index: Row number reported in skip records

    Returns:
        DistrictRoutingResult with values in column order and skip records
    """
    result = DistrictRoutingResult()

    for index, path in mapped_columns(mapping):
        if index < 0 or index >= len(row):
            result.skips.append(
                SkipRecord(row=row_index, column=index, field_key=path, reason=SkipReason.OUT_OF_RANGE)
            )
            continue

        raw_value = row[index].strip()
        if raw_value == "":
            result.skips.append(
                SkipRecord(row=row_index, column=index, field_key=path, reason=SkipReason.EMPTY_CELL)
            )
            continue

        if path.endswith(PERMITTED_SUFFIX):
            result.values.append(DistrictValue(path=path, value=parse_permitted(raw_value)))
            continue

        number = parse_number(raw_value)
        if number is None:
            result.skips.append(
                SkipRecord(
                    row=row_index,
                    column=index,
                    field_key=path,
                    reason=SkipReason.NOT_NUMERIC,
                    value=raw_value,
                )
            )
            continue

        result.values.append(DistrictValue(path=path, value=number))

    logger.debug(f"District row {row_index}: {len(result.values)} value(s), {len(result.skips)} skipped")
    return result


def apply_district_mapping(
    row: Sequence[str], mapping: Mapping[Any, Optional[str]]
) -> list[tuple[str, Union[bool, float]]]:
    """Route one district row into (dot-path, value) pairs, discarding diagnostics."""
    return route_district(row, mapping).as_pairs()
