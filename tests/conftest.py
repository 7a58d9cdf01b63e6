"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from zoneimport.config import Settings


@pytest.fixture
def mock_settings() -> Settings:
    """Create settings with test values."""
    return Settings(
        host="127.0.0.1",
        port=8000,
        debug=False,
        cors_allow_origins=["*"],
        max_file_size_bytes=1024,
        allowed_extensions=[".csv"],
        preview_row_limit=2,
        log_level="DEBUG",
    )


@pytest.fixture
def lot_csv() -> str:
    """A small lot file mixing exact, alias and unmatched headers."""
    return (
        "Name,Lot Width,lot_depth,Front Setback,bldg_width,Stories,Notes\n"
        "Lot A,50,100,20,30,2,corner lot\n"
        "Lot B,60.5,120,25,,3,\n"
        "\n"
        "Lot C,n/a,tbd,,,,\n"
    )


@pytest.fixture
def district_csv() -> str:
    """A district file with min/max and permitted columns."""
    return (
        "Lot Area Min,Lot Area Max,Rear Alley Access Permitted,Front Parking Permitted,BTZ Front\n"
        "5000,20000,Yes,maybe,80\n"
    )


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write text to a file in a temporary directory and return its path."""

    def _write(text: str, name: str = "lots.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
