"""Route mapped CSV rows into nested lot records."""

import logging
from typing import Any, Mapping, Optional, Sequence

from ..schema import LOT_FIELDS_BY_KEY
from .columns import mapped_columns
from .models import LotRoutingResult, SkipReason, SkipRecord
from .numbers import parse_number

logger = logging.getLogger(__name__)


def _write(record: dict[str, Any], target: Sequence[str], value: float) -> None:
    node = record
    for segment in target[:-1]:
        node = node.setdefault(segment, {})
    node[target[-1]] = value


def route_lots(rows: Sequence[Sequence[str]], mapping: Mapping[Any, Optional[str]]) -> LotRoutingResult:
    """
    Build one nested lot record per data row.

    Each mapped cell is parsed as a number and written to its field's fixed
    location (lotWidth at the top level, setbacks under
    ``setbacks.principal``, building dimensions under
    ``buildings.principal`` and accessory dimensions under
    ``buildings.accessory``). Blank rows are skipped, and rows that yield no
    value at all are left out of the result, so the record list can be
    shorter than ``rows``.

    Args:
        rows: Tokenized data rows
        mapping: Column index -> lot field key (None or "skip" for unmapped)

    Returns:
        LotRoutingResult with records and a skip record per discarded cell
    """
    columns = mapped_columns(mapping)
    result = LotRoutingResult()

    for row_index, row in enumerate(rows):
        if all(cell.strip() == "" for cell in row):
            continue

        record: dict[str, Any] = {}
        for index, field_key in columns:
            if index < 0 or index >= len(row):
                result.skips.append(
                    SkipRecord(row=row_index, column=index, field_key=field_key, reason=SkipReason.OUT_OF_RANGE)
                )
                continue

            raw_value = row[index].strip()
            if raw_value == "":
                result.skips.append(
                    SkipRecord(row=row_index, column=index, field_key=field_key, reason=SkipReason.EMPTY_CELL)
                )
                continue

            field = LOT_FIELDS_BY_KEY.get(field_key)
            if field is None:
                result.skips.append(
                    SkipRecord(
                        row=row_index,
                        column=index,
                        field_key=field_key,
                        reason=SkipReason.UNKNOWN_FIELD,
                        value=raw_value,
                    )
                )
                continue

            value = parse_number(raw_value)
            if value is None:
                result.skips.append(
                    SkipRecord(
                        row=row_index,
                        column=index,
                        field_key=field_key,
                        reason=SkipReason.NOT_NUMERIC,
                        value=raw_value,
                    )
                )
                continue

            _write(record, field.target, value)

        if record:
            result.records.append(record)
        else:
            logger.debug(f"Row {row_index} produced no lot values")

    if result.skips:
        logger.debug(f"Skipped {len(result.skips)} mapped cell(s) while routing lots")
    return result


def apply_lot_mapping(rows: Sequence[Sequence[str]], mapping: Mapping[Any, Optional[str]]) -> list[dict[str, Any]]:
    """Route rows into lot records, discarding skip diagnostics."""
    return route_lots(rows, mapping).records


def lot_value(record: Mapping[str, Any], field_key: str) -> Optional[float]:
    """Read a lot field's value back out of a routed record, or None."""
    field = LOT_FIELDS_BY_KEY.get(field_key)
    if field is None:
        return None

    node: Any = record
    for segment in field.target:
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node
