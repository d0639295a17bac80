"""
Graph builder for the asset catalogue.

Two topologies are supported:

- ``object-centric``: a root with oilfield hubs on an inner ring and
  profession hubs on an outer ring; every asset hangs off its oilfield and
  its profession.
- ``dimension-centric``: a semantic core with one hub per 5D axis arranged as
  a pentagon, the distinct values of each axis clustered around their hub,
  and assets on the outer rim linked to every value they are mounted on.

Node ids are deterministic (``field-<oilfield>``, ``prof-<profession>``,
``axis-<key>``, ``dim-<key>-<value>``, asset id), so identical input always
yields the same topology. An asset whose id equals a hub id is placed under
``asset-<id>`` instead; duplicate asset ids raise InvalidArgumentError.
"""

import logging
import math
from enum import StrEnum
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import DIMENSION_ORDER, LayoutConfig
from .dimensions import DimensionIndex
from .exceptions import InvalidArgumentError
from .graph import AssetGraph
from .types import Asset, EdgeType, GraphEdge, GraphNode, NodeType, Position

logger = logging.getLogger(__name__)

ROOT_ID = "root"
SEMANTIC_CORE_ID = "semantic-core"
ASSET_PREFIX = "asset-"

DIMENSION_LABELS = {
    "object": "Object",
    "business": "Business",
    "work": "Work",
    "profession": "Profession",
    "process": "Process",
}


class GraphMode(StrEnum):
    OBJECT_CENTRIC = "object-centric"
    DIMENSION_CENTRIC = "dimension-centric"


def parse_mode(mode: object) -> GraphMode:
    """
    Raises:
        InvalidArgumentError: If mode is not a known topology.
    """
    try:
        return GraphMode(mode)
    except ValueError:
        raise InvalidArgumentError(
            f"Unrecognized graph mode: {mode!r}",
            {"allowed": [m.value for m in GraphMode]},
        ) from None


def oilfield_node_id(oilfield: str) -> str:
    return f"field-{oilfield}"


def profession_node_id(profession: str) -> str:
    return f"prof-{profession}"


def axis_node_id(dimension: str) -> str:
    return f"axis-{dimension}"


def dimension_node_id(dimension: str, value: str) -> str:
    return f"dim-{dimension}-{value}"


def _distinct(values) -> list:
    return list(dict.fromkeys(v for v in values if v))


def asset_node_ids(assets: Sequence[Asset], hub_ids: Iterable[str]) -> List[str]:
    """
    Node id for each asset, aligned with ``assets``.

    An asset id that equals a hub id gets an ``asset-`` prefix, repeated until
    it is free, so hubs are never displaced.
    """
    hubs = set(hub_ids)
    taken = hubs | {a.id for a in assets}
    node_ids = []
    for asset in assets:
        node_id = asset.id
        if node_id in hubs:
            node_id = f"{ASSET_PREFIX}{asset.id}"
            while node_id in taken:
                node_id = f"{ASSET_PREFIX}{node_id}"
            taken.add(node_id)
            logger.debug("Asset id %s collides with a hub, using %s", asset.id, node_id)
        node_ids.append(node_id)
    return node_ids


class GraphBuilder:
    """
    Builds an AssetGraph from an asset snapshot.

    The builder holds layout parameters only; it keeps no state between
    builds.
    """

    def __init__(self, layout: Optional[LayoutConfig] = None):
        self.layout = layout or LayoutConfig()

    def build(self, assets: Sequence[Asset], mode: object, index: Optional[DimensionIndex] = None) -> AssetGraph:
        graph_mode = parse_mode(mode)
        if graph_mode is GraphMode.OBJECT_CENTRIC:
            graph = self._build_object_centric(assets)
        else:
            graph = self._build_dimension_centric(assets, index or DimensionIndex(assets))

        logger.debug(
            "Built %s graph: %d nodes, %d links",
            graph_mode, graph.node_count, graph.edge_count,
        )
        return graph

    def _point(self, angle: float, radius: float) -> Position:
        return Position(
            x=self.layout.center_x + math.cos(angle) * radius,
            y=self.layout.center_y + math.sin(angle) * radius,
        )

    def _build_object_centric(self, assets: Sequence[Asset]) -> AssetGraph:
        layout = self.layout
        graph = AssetGraph(GraphMode.OBJECT_CENTRIC.value, replace_nodes=False)
        graph.add_node(GraphNode(
            id=ROOT_ID, type=NodeType.ROOT, label="Graphic Asset Library",
            position=Position(x=layout.center_x, y=layout.center_y),
        ))

        hubs: Dict[str, Position] = {}

        oilfields = _distinct(a.oilfield for a in assets)
        for i, field in enumerate(oilfields):
            node_id = oilfield_node_id(field)
            position = self._point(2 * math.pi * i / len(oilfields), layout.oilfield_radius)
            graph.add_node(GraphNode(id=node_id, type=NodeType.OILFIELD, label=field, position=position))
            graph.add_edge(GraphEdge(source=ROOT_ID, target=node_id, type=EdgeType.HIERARCHY))
            hubs[node_id] = position

        professions = _distinct(a.profession for a in assets)
        for i, prof in enumerate(professions):
            node_id = profession_node_id(prof)
            angle = 2 * math.pi * i / len(professions) + layout.profession_angle_offset
            position = self._point(angle, layout.profession_radius)
            graph.add_node(GraphNode(id=node_id, type=NodeType.PROFESSION, label=prof, position=position))
            graph.add_edge(GraphEdge(source=ROOT_ID, target=node_id, type=EdgeType.HIERARCHY))
            hubs[node_id] = position

        total = len(assets)
        node_ids = asset_node_ids(assets, graph.node_ids())
        for i, (asset, node_id) in enumerate(zip(assets, node_ids)):
            field_id = oilfield_node_id(asset.oilfield) if asset.oilfield else None
            prof_id = profession_node_id(asset.profession) if asset.profession else None
            anchor = self._blend(hubs.get(field_id), hubs.get(prof_id))

            angle = 2 * math.pi * i / total
            position = Position(
                x=anchor.x + math.cos(angle) * layout.jitter_radius,
                y=anchor.y + math.sin(angle) * layout.jitter_radius,
            )
            graph.add_node(GraphNode(
                id=node_id, type=NodeType.ASSET, label=asset.title or asset.id,
                position=position, asset=asset,
            ))

            for hub_id in (field_id, prof_id):
                if hub_id in hubs:
                    graph.add_edge(GraphEdge(source=node_id, target=hub_id, type=EdgeType.HIERARCHY))

        return graph

    def _blend(self, field: Optional[Position], prof: Optional[Position]) -> Position:
        if field is not None and prof is not None:
            w = self.layout.oilfield_weight
            return Position(x=field.x * w + prof.x * (1 - w), y=field.y * w + prof.y * (1 - w))
        if field is not None:
            return field
        if prof is not None:
            return prof
        return Position(x=self.layout.center_x, y=self.layout.center_y)

    def _build_dimension_centric(self, assets: Sequence[Asset], index: DimensionIndex) -> AssetGraph:
        layout = self.layout
        graph = AssetGraph(GraphMode.DIMENSION_CENTRIC.value, replace_nodes=False)
        graph.add_node(GraphNode(
            id=SEMANTIC_CORE_ID, type=NodeType.ROOT, label="5D Semantic Core",
            position=Position(x=layout.center_x, y=layout.center_y),
        ))

        axis_count = len(DIMENSION_ORDER)
        for i, dimension in enumerate(DIMENSION_ORDER):
            angle = 2 * math.pi * i / axis_count - math.pi / 2
            axis_id = axis_node_id(dimension.value)
            graph.add_node(GraphNode(
                id=axis_id, type=NodeType.AXIS_HUB, label=DIMENSION_LABELS[dimension.value],
                position=self._point(angle, layout.axis_radius),
            ))
            graph.add_edge(GraphEdge(source=SEMANTIC_CORE_ID, target=axis_id, type=EdgeType.AXIS))

            values = index.values(dimension)
            for j, value in enumerate(values):
                value_angle = angle + (j - (len(values) - 1) / 2) * layout.value_spread
                value_id = dimension_node_id(dimension.value, value)
                graph.add_node(GraphNode(
                    id=value_id, type=NodeType.SEMANTIC_DIM, label=value,
                    position=self._point(value_angle, layout.value_radius),
                ))
                graph.add_edge(GraphEdge(source=axis_id, target=value_id, type=EdgeType.HIERARCHY))

        total = len(assets)
        node_ids = asset_node_ids(assets, graph.node_ids())
        for i, (asset, node_id) in enumerate(zip(assets, node_ids)):
            graph.add_node(GraphNode(
                id=node_id, type=NodeType.ASSET, label=asset.title or asset.id,
                position=self._point(2 * math.pi * i / total, layout.asset_radius),
                asset=asset,
            ))
            for dimension in DIMENSION_ORDER:
                value = asset.dimension_value(dimension)
                if value:
                    graph.add_edge(GraphEdge(
                        source=node_id,
                        target=dimension_node_id(dimension.value, value),
                        type=EdgeType.SEMANTIC,
                    ))

        return graph


def build_graph(assets: Sequence[Asset], mode: object, layout: Optional[LayoutConfig] = None) -> AssetGraph:
    """
    Build the graph for one topology mode.

    Raises:
        InvalidArgumentError: If mode is not ``object-centric`` or ``dimension-centric``.
    """
    return GraphBuilder(layout).build(assets, mode)
