"""CSV tokenizing for uploaded spreadsheets."""

from .models import ParsedCSV
from .tokenizer import parse_csv, format_csv, tokenize, normalize_line_endings

__all__ = [
    "ParsedCSV",
    "parse_csv",
    "format_csv",
    "tokenize",
    "normalize_line_endings",
]
