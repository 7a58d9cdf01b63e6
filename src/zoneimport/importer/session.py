"""Import session: the caller side of the parse, match and route steps."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..config import Settings, settings as default_settings
from ..matching import AutoMatcher, ColumnMapping, HeaderMapping
from ..parsing import parse_csv
from ..routing import (
    DistrictRoutingResult,
    DistrictValue,
    LotRoutingResult,
    lot_value,
    route_district,
    route_lots,
)
from ..schema import SchemaKind, SchemaField, fields_for, get_field
from .models import (
    ColumnIndexError,
    EmptyFileError,
    FileTooLargeError,
    NoDataRowsError,
    NothingToImportError,
    UnknownFieldError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

SKIP = "skip"


class ImportSession:
    """
    Holds one file's headers, rows and column mapping between import steps.

    The engine functions never raise on malformed content; this class turns
    their empty or partial results into user-facing errors, the way the
    import wizard reports them.
    """

    def __init__(
        self,
        schema: Union[SchemaKind, str] = SchemaKind.LOT,
        settings: Optional[Settings] = None,
    ):
        self.schema = SchemaKind(schema)
        self.settings = settings or default_settings
        self.fields: tuple[SchemaField, ...] = fields_for(self.schema)
        self.matcher = AutoMatcher(self.fields)
        self.reset()

    def reset(self) -> None:
        """Discard everything loaded into the session."""
        self.source_name: str = ""
        self.headers: list[str] = []
        self.rows: list[list[str]] = []
        self.header_mapping: HeaderMapping = {}
        self.mapping: ColumnMapping = {}

    # Loading

    def load_file(self, path: Union[str, Path]) -> ColumnMapping:
        """
        Validate, read and load a CSV file.

        Args:
            path: Path of the selected file

        Returns:
            The auto-matched column mapping
        """
        path = Path(path)

        if path.suffix.lower() not in self.settings.allowed_extensions:
            logger.warning(f"Rejected file with unsupported extension: {path.name}")
            raise UnsupportedFileTypeError("Please select a CSV file (.csv)")

        size = path.stat().st_size
        if size > self.settings.max_file_size_bytes:
            logger.warning(f"Rejected {path.name}: {size} bytes exceeds limit")
            raise FileTooLargeError(size, self.settings.max_file_size_bytes)

        text = path.read_text(encoding="utf-8-sig")
        return self.load_text(text, source_name=path.name)

    def load_text(self, text: str, source_name: str = "") -> ColumnMapping:
        """
        Parse CSV text and auto-match its headers.

        Raises:
            EmptyFileError: No header row survived parsing
            NoDataRowsError: Headers were found but no data rows

        Returns:
            The auto-matched column mapping
        """
        parsed = parse_csv(text)

        if parsed.is_empty:
            raise EmptyFileError("Could not parse CSV file. The file appears to be empty.")
        if not parsed.has_data:
            raise NoDataRowsError("CSV file has headers but no data rows.")

        self.source_name = source_name
        self.headers = parsed.headers
        self.rows = parsed.rows
        self.header_mapping = self.matcher.match(parsed.headers)
        self.mapping = self.matcher.to_column_mapping(parsed.headers, self.header_mapping)

        logger.info(
            f"Loaded {source_name or 'CSV text'}: {len(self.headers)} column(s), "
            f"{len(self.rows)} row(s), {self.mapped_count} auto-matched"
        )
        return dict(self.mapping)

    # Mapping

    def update_mapping(self, column_index: int, field_key: Optional[str]) -> ColumnMapping:
        """
        Point a column at a field, or unset it with None or "skip".

        A field held by another column is moved to this one.

        Raises:
            ColumnIndexError: The column does not exist
            UnknownFieldError: The schema has no such field
        """
        if column_index < 0 or column_index >= len(self.headers):
            raise ColumnIndexError(f"Column {column_index} does not exist")

        if field_key is None or field_key == SKIP:
            self.mapping[column_index] = None
            return dict(self.mapping)

        if get_field(self.schema, field_key) is None:
            raise UnknownFieldError(f"Unknown {self.schema.value} field: {field_key}")

        for index, key in self.mapping.items():
            if key == field_key and index != column_index:
                logger.info(f"Moving {field_key} from column {index} to column {column_index}")
                self.mapping[index] = None

        self.mapping[column_index] = field_key
        return dict(self.mapping)

    @property
    def mapped_count(self) -> int:
        return sum(1 for key in self.mapping.values() if key is not None)

    @property
    def mapped_field_keys(self) -> list[str]:
        """Mapped field keys in column order, without repeats."""
        keys: list[str] = []
        for index in sorted(self.mapping):
            key = self.mapping[index]
            if key is not None and key not in keys:
                keys.append(key)
        return keys

    def field_label(self, field_key: str) -> str:
        field = get_field(self.schema, field_key)
        return field.label if field else field_key

    # Lot output

    def preview_lots(self) -> LotRoutingResult:
        """Route all rows with the current mapping."""
        return route_lots(self.rows, self.mapping)

    def preview_table(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        """
        Tabulate routed lot records by mapped field key.

        Args:
            limit: Maximum number of records (defaults to settings.preview_row_limit)

        Returns:
            One dict per record, field key -> value or None
        """
        if limit is None:
            limit = self.settings.preview_row_limit
        keys = self.mapped_field_keys
        records = self.preview_lots().records[:limit]
        return [{key: lot_value(record, key) for key in keys} for record in records]

    def import_lots(self) -> list[dict[str, Any]]:
        """
        Produce the lot records to hand to the entity store.

        Raises:
            NothingToImportError: No row produced a value
        """
        records = self.preview_lots().records
        if not records:
            raise NothingToImportError("No valid data to import. Check your field mapping.")

        logger.info(f"Importing {len(records)} lot(s)")
        return records

    # District output

    def preview_district(self, row_index: int = 0) -> DistrictRoutingResult:
        """Route a single data row with the current mapping."""
        if row_index < 0 or row_index >= len(self.rows):
            return DistrictRoutingResult()
        return route_district(self.rows[row_index], self.mapping, row_index=row_index)

    def import_district(self, row_index: int = 0) -> list[DistrictValue]:
        """
        Produce the district values of one row for the parameter store.

        Raises:
            NothingToImportError: The row produced no value
        """
        values = self.preview_district(row_index).values
        if not values:
            raise NothingToImportError("No valid data to import. Check your field mapping.")

        logger.info(f"Importing {len(values)} district parameter(s) from row {row_index}")
        return values
