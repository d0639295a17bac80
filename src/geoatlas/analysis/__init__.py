"""Derived analyses over an asset snapshot: heatmaps, scenarios, search."""
