"""API routes for zoneimport."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from ..importer import ImportSession, ImportSessionError
from ..matching import AutoMatcher
from ..parsing import parse_csv
from ..routing import JSON_FLOAT_CONFIG, DistrictValue, SkipRecord, route_district, route_lots
from ..schema import FieldDescriptor, SchemaKind, fields_for

logger = logging.getLogger(__name__)

router = APIRouter()


class ParseRequest(BaseModel):
    """Request to tokenize CSV text."""

    text: str


class ParseResponse(BaseModel):
    """Tokenized header row and data rows."""

    headers: list[str]
    rows: list[list[str]]


class MatchRequest(BaseModel):
    """Request to auto-match headers against a schema."""

    headers: list[str]
    schema_kind: SchemaKind = Field(default=SchemaKind.LOT, alias="schema")


class MatchResponse(BaseModel):
    """Header-keyed and column-index-keyed mappings."""

    header_mapping: dict[str, Optional[str]]
    column_mapping: dict[int, Optional[str]]


class LotRouteRequest(BaseModel):
    """Request to route rows into lot records."""

    rows: list[list[str]]
    mapping: dict[int, Optional[str]]


class LotRouteResponse(BaseModel):
    model_config = JSON_FLOAT_CONFIG

    records: list[dict[str, Any]]
    skips: list[SkipRecord]


class DistrictRouteRequest(BaseModel):
    """Request to route one row into district values."""

    row: list[str]
    mapping: dict[int, Optional[str]]
    row_index: int = 0


class DistrictRouteResponse(BaseModel):
    model_config = JSON_FLOAT_CONFIG

    values: list[DistrictValue]
    skips: list[SkipRecord]


class PreviewRequest(BaseModel):
    """Request to run the full import flow on CSV text."""

    text: str
    schema_kind: SchemaKind = Field(default=SchemaKind.LOT, alias="schema")
    mapping: Optional[dict[int, Optional[str]]] = None  # Overrides the auto-match when given
    row_index: int = 0  # District imports route a single row


class PreviewResponse(BaseModel):
    """Result of the full import flow."""

    model_config = JSON_FLOAT_CONFIG

    schema_kind: SchemaKind = Field(serialization_alias="schema")
    headers: list[str]
    row_count: int
    mapping: dict[int, Optional[str]]
    mapped_count: int
    records: list[dict[str, Any]] = Field(default_factory=list)
    values: list[DistrictValue] = Field(default_factory=list)
    skips: list[SkipRecord] = Field(default_factory=list)


def _json_response(model: BaseModel) -> Response:
    """Serialize a response model with pydantic so non-finite floats become strings."""
    return Response(content=model.model_dump_json(by_alias=True), media_type="application/json")


# Health and schema endpoints


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret configuration."""
    from ..config import settings

    config = {
        "max_file_size_bytes": settings.max_file_size_bytes,
        "allowed_extensions": settings.allowed_extensions,
        "preview_row_limit": settings.preview_row_limit,
        "schemas": [kind.value for kind in SchemaKind],
    }

    return {"status": "ok", "service": "zoneimport", "config": config}


@router.get("/schemas/{kind}/fields", response_model=list[FieldDescriptor])
async def list_fields(kind: str):
    """List the importable fields of a schema in declared order."""
    try:
        schema_kind = SchemaKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown schema: {kind}")
    return [FieldDescriptor.from_field(field) for field in fields_for(schema_kind)]


# Import endpoints


@router.post("/import/parse", response_model=ParseResponse)
async def parse(request: ParseRequest):
    """Tokenize CSV text into headers and rows."""
    parsed = parse_csv(request.text)
    return ParseResponse(headers=parsed.headers, rows=parsed.rows)


@router.post("/import/match", response_model=MatchResponse)
async def match(request: MatchRequest):
    """Auto-match headers to schema fields."""
    matcher = AutoMatcher(fields_for(request.schema_kind))
    header_mapping = matcher.match(request.headers)
    return MatchResponse(
        header_mapping=header_mapping,
        column_mapping=matcher.to_column_mapping(request.headers, header_mapping),
    )


@router.post("/import/lots", response_model=LotRouteResponse)
async def route_lot_rows(request: LotRouteRequest):
    """Route rows into nested lot records."""
    result = route_lots(request.rows, request.mapping)
    return _json_response(LotRouteResponse(records=result.records, skips=result.skips))


@router.post("/import/district", response_model=DistrictRouteResponse)
async def route_district_row(request: DistrictRouteRequest):
    """Route one row into district dot-path values."""
    result = route_district(request.row, request.mapping, row_index=request.row_index)
    return _json_response(DistrictRouteResponse(values=result.values, skips=result.skips))


@router.post("/import/preview", response_model=PreviewResponse, response_model_by_alias=True)
async def preview(request: PreviewRequest):
    """Parse, match and route CSV text in one call."""
    session = ImportSession(request.schema_kind)

    try:
        session.load_text(request.text)
        if request.mapping is not None:
            for index in range(len(session.headers)):
                session.update_mapping(index, request.mapping.get(index))

        response = PreviewResponse(
            schema_kind=session.schema,
            headers=session.headers,
            row_count=len(session.rows),
            mapping=session.mapping,
            mapped_count=session.mapped_count,
        )

        if session.schema == SchemaKind.LOT:
            response.records = session.import_lots()
            response.skips = session.preview_lots().skips
        else:
            result = session.preview_district(request.row_index)
            response.values = session.import_district(request.row_index)
            response.skips = result.skips
    except ImportSessionError as e:
        logger.warning(f"Import preview failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return _json_response(response)
