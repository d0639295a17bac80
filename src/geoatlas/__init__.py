"""
geoatlas - 5D Semantic Coordinate Graph and Association Engine.

Organizes geoscience graphic assets (maps, models, monitoring imagery) by
their semantic coordinates and derives views over a catalogue snapshot.

Key Components:
- core: Asset model, dimension index, graph builder, asset stores
- analysis: Heatmaps, scenario timelines, faceted search
- engine: Cached facade binding a store to the analyses

Usage:
    from geoatlas import CatalogEngine
    from geoatlas.core.storage import JsonAssetStore

    engine = CatalogEngine(JsonAssetStore(".geoatlas/assets.json"))
    graph = engine.graph("dimension-centric")
"""

__version__ = "0.1.0"

from .core.types import (
    Asset, Coordinates5D, Dimension, GraphEdge, GraphNode,
    HeatmapMatrix, ScenarioDefinition, StageGroup,
)
from .core.builder import GraphMode, build_graph
from .core.dimensions import build_dimension_index
from .analysis.heatmap import compute_heatmap
from .analysis.scenario import aggregate_by_scenario
from .engine import CatalogEngine

__all__ = [
    "__version__",
    "Asset",
    "CatalogEngine",
    "Coordinates5D",
    "Dimension",
    "GraphEdge",
    "GraphMode",
    "GraphNode",
    "HeatmapMatrix",
    "ScenarioDefinition",
    "StageGroup",
    "aggregate_by_scenario",
    "build_dimension_index",
    "build_graph",
    "compute_heatmap",
]
