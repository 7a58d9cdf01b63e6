"""Data models for the importable field tables."""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SchemaKind(str, Enum):
    """Target schema of an import."""

    LOT = "lot"  # Flat lot parameters routed into a nested lot record
    DISTRICT = "district"  # Min/max/permitted district parameters as dot-paths


class LotField(BaseModel):
    """An importable lot parameter with its aliases and fixed write location."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["lot"] = "lot"
    key: str
    label: str
    group: str
    aliases: tuple[str, ...] = ()
    target: tuple[str, ...]  # Nested location in the lot record, e.g. ("setbacks", "principal", "front")


class DistrictField(BaseModel):
    """An importable district parameter addressed by a dot-path key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["district"] = "district"
    key: str  # e.g. "setbacksPrincipal.front.min"
    label: str
    group: str
    value_type: Literal["number", "boolean"] = "number"


SchemaField = Union[LotField, DistrictField]


class FieldDescriptor(BaseModel):
    """Display metadata shared by both field kinds."""

    kind: str
    key: str
    label: str
    group: str
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def from_field(cls, field: SchemaField) -> "FieldDescriptor":
        aliases = list(field.aliases) if isinstance(field, LotField) else []
        return cls(kind=field.kind, key=field.key, label=field.label, group=field.group, aliases=aliases)
