"""Import sessions tying the tokenizer, matcher and routers together."""

from .models import (
    ImportSessionError,
    UnsupportedFileTypeError,
    FileTooLargeError,
    EmptyFileError,
    NoDataRowsError,
    NothingToImportError,
    UnknownFieldError,
    ColumnIndexError,
)
from .nested import get_path, set_path, apply_district_values
from .session import ImportSession, SKIP

__all__ = [
    "ImportSessionError",
    "UnsupportedFileTypeError",
    "FileTooLargeError",
    "EmptyFileError",
    "NoDataRowsError",
    "NothingToImportError",
    "UnknownFieldError",
    "ColumnIndexError",
    "get_path",
    "set_path",
    "apply_district_values",
    "ImportSession",
    "SKIP",
]
