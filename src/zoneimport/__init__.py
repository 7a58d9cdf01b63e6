"""zoneimport - CSV import and field reconciliation for zoning parameters."""

__version__ = "0.1.0"
