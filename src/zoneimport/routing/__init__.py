"""Routing of mapped CSV cells into lot records and district values."""

from .models import (
    SkipReason,
    SkipRecord,
    DistrictValue,
    LotRoutingResult,
    DistrictRoutingResult,
    JSON_FLOAT_CONFIG,
)
from .numbers import parse_number, parse_permitted, TRUTHY_VALUES
from .columns import mapped_columns
from .lot import route_lots, apply_lot_mapping, lot_value
from .district import route_district, apply_district_mapping

__all__ = [
    "SkipReason",
    "SkipRecord",
    "DistrictValue",
    "LotRoutingResult",
    "DistrictRoutingResult",
    "JSON_FLOAT_CONFIG",
    "parse_number",
    "parse_permitted",
    "TRUTHY_VALUES",
    "mapped_columns",
    "route_lots",
    "apply_lot_mapping",
    "lot_value",
    "route_district",
    "apply_district_mapping",
]
