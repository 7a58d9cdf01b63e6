"""Data models for tokenized CSV content."""

from pydantic import BaseModel, Field


class ParsedCSV(BaseModel):
    """Header row and data rows of a tokenized file.

    Cells are trimmed. Rows are aligned with headers by position only and
    may be shorter or longer than the header row.
    """

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when nothing survived tokenizing (no header row)."""
        return len(self.headers) == 0

    @property
    def has_data(self) -> bool:
        return len(self.rows) > 0
