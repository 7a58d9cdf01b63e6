"""Quote-aware CSV tokenizer.

A small state machine rather than the ``csv`` module: quoting is only
recognized at the start of a field, a quote anywhere else is literal, and
rows made entirely of blank cells are dropped wherever they appear.
"""

import logging
from typing import Optional, Sequence

from .models import ParsedCSV

logger = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ","
NEWLINE = "\n"
BYTE_ORDER_MARK = "\ufeff"

_NEEDS_QUOTING = (DELIMITER, QUOTE, "\n", "\r")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def tokenize(text: str) -> list[list[str]]:
    """
    Split normalized text into rows of raw (untrimmed) fields.

    Args:
        text: CSV text containing only LF line endings

    Returns:
        List of rows, each a list of field strings
    """
    records: list[list[str]] = []
    current: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        if in_quotes:
            if char == QUOTE:
                if i + 1 < length and text[i + 1] == QUOTE:
                    # Escaped quote
                    field.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(char)
            i += 1
            continue

        if char == QUOTE and not field:
            in_quotes = True
        elif char == DELIMITER:
            current.append("".join(field))
            field = []
        elif char == NEWLINE:
            current.append("".join(field))
            records.append(current)
            current = []
            field = []
        else:
            field.append(char)
        i += 1

    # Last row when the text has no trailing newline
    if field or current:
        current.append("".join(field))
        records.append(current)

    return records


def parse_csv(text: Optional[str]) -> ParsedCSV:
    """
    Parse CSV text into a header row and trimmed data rows.

    Blank rows (every cell empty after trimming) are dropped before the
    first surviving row is taken as the header. Never raises for malformed
    content: empty input yields an empty result and a header-only file
    yields headers with no rows. A leading byte order mark is removed.

    Args:
        text: Raw file content, already decoded

    Returns:
        ParsedCSV with headers and rows
    """
    if not text or not isinstance(text, str):
        return ParsedCSV()

    # Text decoded as plain utf-8 keeps the mark in front of the first header
    records = tokenize(normalize_line_endings(text.lstrip(BYTE_ORDER_MARK)))

    trimmed = [[cell.strip() for cell in record] for record in records]
    surviving = [record for record in trimmed if any(cell != "" for cell in record)]

    dropped = len(trimmed) - len(surviving)
    if dropped:
        logger.debug(f"Dropped {dropped} blank row(s)")

    if not surviving:
        return ParsedCSV()

    return ParsedCSV(headers=surviving[0], rows=surviving[1:])


def _quote(value: str) -> str:
    if any(token in value for token in _NEEDS_QUOTING):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def format_csv(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Serialize a header row and data rows back to CSV text.

    Fields are quoted only when they contain a delimiter, quote or line
    break. Every row, including the last, ends with a newline.
    """
    lines = [DELIMITER.join(_quote(h) for h in headers)]
    lines.extend(DELIMITER.join(_quote(cell) for cell in row) for row in rows)
    return NEWLINE.join(lines) + NEWLINE
