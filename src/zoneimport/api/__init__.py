"""Web API for zoneimport."""

from .app import create_app

__all__ = ["create_app"]
