"""Static field tables for the lot and district import schemas."""

from typing import Optional, Sequence

from .models import (
    SchemaKind,
    LotField,
    DistrictField,
    SchemaField,
    FieldDescriptor,
)
from .lot import LOT_FIELDS, LOT_FIELDS_BY_KEY
from .district import DISTRICT_FIELDS, DISTRICT_FIELDS_BY_KEY


def fields_for(kind: SchemaKind) -> tuple[SchemaField, ...]:
    """Return the field table for a schema kind, in declared order."""
    if SchemaKind(kind) == SchemaKind.LOT:
        return LOT_FIELDS
    return DISTRICT_FIELDS


def get_field(kind: SchemaKind, key: str) -> Optional[SchemaField]:
    """Look up a field by key, or None if the schema has no such field."""
    if SchemaKind(kind) == SchemaKind.LOT:
        return LOT_FIELDS_BY_KEY.get(key)
    return DISTRICT_FIELDS_BY_KEY.get(key)


def group_fields(fields: Sequence[SchemaField]) -> dict[str, list[SchemaField]]:
    """Group fields by their UI group, preserving first-seen group order."""
    groups: dict[str, list[SchemaField]] = {}
    for field in fields:
        groups.setdefault(field.group, []).append(field)
    return groups


__all__ = [
    "SchemaKind",
    "LotField",
    "DistrictField",
    "SchemaField",
    "FieldDescriptor",
    "LOT_FIELDS",
    "LOT_FIELDS_BY_KEY",
    "DISTRICT_FIELDS",
    "DISTRICT_FIELDS_BY_KEY",
    "fields_for",
    "get_field",
    "group_fields",
]
