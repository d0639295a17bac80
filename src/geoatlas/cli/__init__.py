"""Command line interface for geoatlas."""
