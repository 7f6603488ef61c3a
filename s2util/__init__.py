"""Command line helpers for Google S2 cellids: cell lookup, parents listing and parents KML."""

__version__ = "2026.10.17"
