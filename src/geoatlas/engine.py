"""
Catalogue engine facade.

Binds an asset store, configuration, and scenario library, and routes every
derived computation through the snapshot cache. Each call reads the store
once; nothing is written back.
"""

import logging
from typing import List, Optional, Sequence

from .analysis.heatmap import HeatmapAnalyzer, parse_facet
from .analysis.scenario import ScenarioLibrary, aggregate_by_scenario, available_objects, related_assets
from .config import GeoAtlasConfig
from .core.builder import GraphBuilder, parse_mode
from .core.cache import SnapshotCache
from .core.dimensions import DimensionIndex, resolve_dimensions
from .core.graph import AssetGraph
from .core.storage.base import AssetStore, snapshot_hash
from .core.types import Asset, HeatmapMatrix, StageGroup

logger = logging.getLogger(__name__)


class CatalogEngine:
    """
    Entry point for applications embedding geoatlas.

    Results for an unchanged snapshot are memoized. Every call hands out its
    own copy, so mutating a result never leaks into later calls.
    DimensionIndex exposes no mutators and is shared as is.
    """

    def __init__(
        self,
        store: AssetStore,
        config: Optional[GeoAtlasConfig] = None,
        scenarios: Optional[ScenarioLibrary] = None,
    ):
        self.store = store
        self.config = config or GeoAtlasConfig()
        self.scenarios = scenarios if scenarios is not None else ScenarioLibrary()
        self.cache = SnapshotCache(self.config.catalog.cache_size)
        self._builder = GraphBuilder(self.config.layout)
        self._heatmap = HeatmapAnalyzer(self.config.heatmap)

    def _snapshot(self):
        assets = self.store.get_all_assets()
        return assets, snapshot_hash(assets)

    def dimension_index(self, dimension_keys: Optional[Sequence[str]] = None) -> DimensionIndex:
        dimensions = resolve_dimensions(dimension_keys)
        assets, key = self._snapshot()
        return self.cache.get_or_compute(
            "dimension_index", key, dimensions,
            lambda: DimensionIndex(assets, dimensions),
        )

    def graph(self, mode: str) -> AssetGraph:
        graph_mode = parse_mode(mode)
        assets, key = self._snapshot()
        graph = self.cache.get_or_compute(
            "graph", key, graph_mode.value,
            lambda: self._builder.build(assets, graph_mode),
        )
        return graph.copy()

    def heatmap(
        self,
        focus_asset_id: str,
        facet_a: Optional[str] = None,
        facet_b: Optional[str] = None,
        strategy: Optional[str] = None,
        facet_a_values: Optional[Sequence[str]] = None,
        facet_b_values: Optional[Sequence[str]] = None,
    ) -> HeatmapMatrix:
        """
        Heatmap around a focus asset; axes default to the values in the snapshot.

        Raises:
            AssetNotFoundError: If the focus asset is not in the store.
            InvalidArgumentError: For an unknown facet or strategy.
        """
        focus = self.store.require_asset(focus_asset_id)
        fa = parse_facet(facet_a or self.config.heatmap.facet_a)
        fb = parse_facet(facet_b or self.config.heatmap.facet_b)
        assets, key = self._snapshot()

        if facet_a_values is None or facet_b_values is None:
            rows, columns = self._heatmap.default_axes(assets, fa, fb)
            facet_a_values = rows if facet_a_values is None else facet_a_values
            facet_b_values = columns if facet_b_values is None else facet_b_values

        args = (focus.id, fa, fb, strategy, tuple(facet_a_values), tuple(facet_b_values))
        matrix = self.cache.get_or_compute(
            "heatmap", key, args,
            lambda: self._heatmap.compute(
                assets, facet_a_values, facet_b_values, focus,
                facet_a=fa, facet_b=fb, strategy=strategy,
            ),
        )
        return matrix.model_copy(deep=True)

    def scenario(self, scenario_id: str, focal_object_id: Optional[str]) -> List[StageGroup]:
        definition = self.scenarios.get(scenario_id)
        assets, key = self._snapshot()
        groups = self.cache.get_or_compute(
            "scenario", key, (scenario_id, focal_object_id),
            lambda: aggregate_by_scenario(assets, definition, focal_object_id),
        )
        return [g.model_copy(deep=True) for g in groups]

    def related_assets(self, asset_id: str) -> List[Asset]:
        """
        Raises:
            AssetNotFoundError: If the asset is not in the store.
        """
        asset = self.store.require_asset(asset_id)
        return related_assets(self.store.get_all_assets(), asset)

    def available_objects(self) -> List[str]:
        return available_objects(self.store.get_all_assets())

    def assets(self) -> List[Asset]:
        return self.store.get_all_assets()
