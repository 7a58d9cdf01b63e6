"""Configuration management for zoneimport."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


def _parse_extensions() -> list[str]:
    """Parse accepted upload extensions from environment variable."""
    ext_env = os.getenv("ALLOWED_EXTENSIONS")
    if ext_env:
        extensions = [e.strip().lower() for e in ext_env.split(",") if e.strip()]
        if extensions:
            return [e if e.startswith(".") else f".{e}" for e in extensions]
    return [".csv"]


class Settings(BaseModel):
    """Application settings."""

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    # Upload constraints
    max_file_size_bytes: int = int(os.getenv("MAX_FILE_SIZE_BYTES", str(5 * 1024 * 1024)))
    allowed_extensions: list[str] = _parse_extensions()

    # Number of routed records shown in a preview table
    preview_row_limit: int = int(os.getenv("PREVIEW_ROW_LIMIT", "50"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
