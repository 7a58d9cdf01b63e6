"""Data models for routed import output."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Values a mapped column may carry besides a field key
UNSET_KEYS = (None, "", "skip")

# "Infinity" is a valid cell; JSON output spells non-finite numbers as strings
JSON_FLOAT_CONFIG = ConfigDict(ser_json_inf_nan="strings")


class SkipReason(str, Enum):
    """Why a mapped cell contributed nothing."""

    OUT_OF_RANGE = "out_of_range"  # Column index beyond this row's cells
    EMPTY_CELL = "empty_cell"
    NOT_NUMERIC = "not_numeric"  # No leading number in the cell
    UNKNOWN_FIELD = "unknown_field"  # Field key not in the schema


class SkipRecord(BaseModel):
    """Diagnostic entry for a mapped cell that was discarded."""

    row: int  # 0-based data row index
    column: int
    field_key: Optional[str] = None
    reason: SkipReason
    value: Optional[str] = None


class DistrictValue(BaseModel):
    """A single dot-path assignment produced from a district row."""

    model_config = JSON_FLOAT_CONFIG

    path: str  # e.g. "lotAccess.rearAlley.permitted"
    value: Union[bool, float]

    def as_tuple(self) -> tuple[str, Union[bool, float]]:
        return (self.path, self.value)


class LotRoutingResult(BaseModel):
    """Nested lot records and the cells skipped while building them."""

    model_config = JSON_FLOAT_CONFIG

    records: list[dict[str, Any]] = Field(default_factory=list)
    skips: list[SkipRecord] = Field(default_factory=list)


class DistrictRoutingResult(BaseModel):
    """Dot-path values of one district row and the cells skipped."""

    model_config = JSON_FLOAT_CONFIG

    values: list[DistrictValue] = Field(default_factory=list)
    skips: list[SkipRecord] = Field(default_factory=list)

    def as_pairs(self) -> list[tuple[str, Union[bool, float]]]:
        return [value.as_tuple() for value in self.values]
