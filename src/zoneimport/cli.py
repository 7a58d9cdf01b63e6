"""Command-line interface for zoneimport."""

import argparse
import logging
import sys
from typing import Any, Optional

import uvicorn
from pydantic import BaseModel, Field

from .config import settings
from .routing import JSON_FLOAT_CONFIG, DistrictValue, SkipRecord


class InspectColumn(BaseModel):
    index: int
    header: str
    field: Optional[str] = None


class InspectReport(BaseModel):
    """Output of the inspect command."""

    model_config = JSON_FLOAT_CONFIG

    file: str = ""
    schema_kind: str = Field(serialization_alias="schema")
    columns: list[InspectColumn] = Field(default_factory=list)
    records: Optional[list[dict[str, Any]]] = None  # Lot imports only
    values: Optional[list[DistrictValue]] = None  # District imports only
    skips: list[SkipRecord] = Field(default_factory=list)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="zoneimport - CSV import for lot and district zoning parameters"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Parse, match and route a CSV file and print the result"
    )
    inspect_parser.add_argument("file", help="Path to the CSV file")
    inspect_parser.add_argument(
        "--schema", choices=["lot", "district"], default="lot", help="Target schema (default: lot)"
    )
    inspect_parser.add_argument(
        "--row", type=int, default=0, help="Data row to route for district imports (default: 0)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "inspect":
        sys.exit(run_inspect(args.file, args.schema, args.row))
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "zoneimport.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def run_inspect(path: str, schema: str, row: int) -> int:
    """Print the auto-matched mapping and routed output of a CSV file."""
    from .importer import ImportSession, ImportSessionError

    session = ImportSession(schema)
    try:
        session.load_file(path)
        report = InspectReport(
            file=session.source_name,
            schema_kind=session.schema.value,
            columns=[
                InspectColumn(index=index, header=header, field=session.mapping.get(index))
                for index, header in enumerate(session.headers)
            ],
        )
        if session.schema.value == "lot":
            result = session.preview_lots()
            report.records = session.import_lots()
        else:
            result = session.preview_district(row)
            report.values = session.import_district(row)
        report.skips = result.skips
    except (ImportSessionError, OSError) as e:
        print(f"Error: {e}")
        return 1

    unused = "values" if report.values is None else "records"
    print(report.model_dump_json(by_alias=True, exclude={unused}, indent=2))
    return 0


if __name__ == "__main__":
    main()
