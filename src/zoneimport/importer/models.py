"""Exceptions raised by the import session."""


class ImportSessionError(Exception):
    """Base class for errors surfaced to the user during an import."""

    pass


class UnsupportedFileTypeError(ImportSessionError):
    """Exception raised when the selected file is not a CSV file."""

    pass


class FileTooLargeError(ImportSessionError):
    """Exception raised when the selected file exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File is too large. Maximum size is {_format_size(limit)}.")


class EmptyFileError(ImportSessionError):
    """Exception raised when nothing could be parsed from a file."""

    pass


class NoDataRowsError(ImportSessionError):
    """Exception raised when a file has a header row but no data rows."""

    pass


class NothingToImportError(ImportSessionError):
    """Exception raised when the current mapping routes no values."""

    pass


class UnknownFieldError(ImportSessionError):
    """Exception raised when a mapping targets a field the schema lacks."""

    pass


class ColumnIndexError(ImportSessionError):
    """Exception raised when a mapping targets a column the file lacks."""

    pass


def _format_size(size: int) -> str:
    megabytes = size / (1024 * 1024)
    if megabytes >= 1 and megabytes == int(megabytes):
        return f"{int(megabytes)}MB"
    if megabytes >= 1:
        return f"{megabytes:.1f}MB"
    return f"{size} bytes"
