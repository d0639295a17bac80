"""Core data model, indexing, and graph construction for geoatlas."""
