"""Two-pass header to field auto-matcher."""

import logging
from typing import Optional, Sequence

from ..schema import LotField, SchemaField
from .normalize import normalize

logger = logging.getLogger(__name__)

HeaderMapping = dict[str, Optional[str]]
ColumnMapping = dict[int, Optional[str]]


def _unique_headers(headers: Sequence[str]) -> list[str]:
    """Header texts in first-occurrence order; duplicates share one entry."""
    return list(dict.fromkeys(headers))


def _aliases(field: SchemaField) -> tuple[str, ...]:
    if isinstance(field, LotField):
        return field.aliases
    return ()


class AutoMatcher:
    """
    Suggest a field key for each CSV header against one field table.

    Matching runs two passes sharing a set of claimed field keys:

    1. Exact pass: the normalized header equals a field's normalized key or
       label.
    2. Alias pass: the normalized header equals one of a field's normalized
       aliases. Skipped for tables without aliases.

    Headers earlier in the file claim first, and fields earlier in the table
    win when a header could match several. Each pass takes the claimed set
    and returns a new one, so the passes can be run and inspected
    independently.
    """

    def __init__(self, fields: Sequence[SchemaField]):
        self.fields = tuple(fields)
        self._normalized_names = {
            field.key: (normalize(field.key), normalize(field.label)) for field in self.fields
        }
        self._normalized_aliases = {
            field.key: frozenset(normalize(alias) for alias in _aliases(field)) for field in self.fields
        }

    @property
    def has_aliases(self) -> bool:
        return any(isinstance(field, LotField) for field in self.fields)

    def exact_pass(
        self,
        headers: Sequence[str],
        claimed: frozenset[str] = frozenset(),
    ) -> tuple[HeaderMapping, frozenset[str]]:
        """
        Match headers against normalized field keys and labels.

        Args:
            headers: CSV header texts in file order
            claimed: Field keys already taken

        Returns:
            Tuple of (header -> field key or None, updated claimed set)
        """
        matches: HeaderMapping = {}
        for header in _unique_headers(headers):
            matches[header] = None
            normalized_header = normalize(header)

            for field in self.fields:
                if field.key in claimed:
                    continue
                if normalized_header in self._normalized_names[field.key]:
                    matches[header] = field.key
                    claimed = claimed | {field.key}
                    logger.debug(f"Exact match: '{header}' -> {field.key}")
                    break

        return matches, claimed

    def alias_pass(
        self,
        headers: Sequence[str],
        matches: HeaderMapping,
        claimed: frozenset[str],
    ) -> tuple[HeaderMapping, frozenset[str]]:
        """
        Match still-unmatched headers against field aliases.

        Args:
            headers: CSV header texts in file order
            matches: Result of the exact pass
            claimed: Field keys claimed so far

        Returns:
            Tuple of (updated header mapping, updated claimed set)
        """
        result = dict(matches)
        for header in _unique_headers(headers):
            if result.get(header) is not None:
                continue
            result[header] = None
            normalized_header = normalize(header)

            for field in self.fields:
                if field.key in claimed:
                    continue
                if normalized_header in self._normalized_aliases[field.key]:
                    result[header] = field.key
                    claimed = claimed | {field.key}
                    logger.debug(f"Alias match: '{header}' -> {field.key}")
                    break

        return result, claimed

    def match(self, headers: Sequence[str]) -> HeaderMapping:
        """
        Auto-match CSV headers to field keys.

        Args:
            headers: CSV header texts in file order

        Returns:
            Mapping of header text -> field key, or None when unmatched
        """
        matches, claimed = self.exact_pass(headers)
        if self.has_aliases:
            matches, claimed = self.alias_pass(headers, matches, claimed)

        logger.debug(f"Matched {len(claimed)} of {len(matches)} header(s)")
        return matches

    @staticmethod
    def to_column_mapping(headers: Sequence[str], header_mapping: HeaderMapping) -> ColumnMapping:
        """
        Convert a header-keyed mapping into a column-index-keyed one.

        When several columns share the same header text, only the first of
        them receives the field key.
        """
        mapping: ColumnMapping = {}
        seen: set[str] = set()
        for index, header in enumerate(headers):
            if header in seen:
                mapping[index] = None
                continue
            seen.add(header)
            mapping[index] = header_mapping.get(header)
        return mapping

    def match_columns(self, headers: Sequence[str]) -> ColumnMapping:
        """Auto-match headers and return the column-index-keyed mapping."""
        return self.to_column_mapping(headers, self.match(headers))


def match_headers(headers: Sequence[str], fields: Sequence[SchemaField]) -> HeaderMapping:
    """Auto-match headers against a field table."""
    return AutoMatcher(fields).match(headers)
