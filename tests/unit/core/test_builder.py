"""
Unit tests for the graph builder.
"""

import pytest

from geoatlas.config import LayoutConfig
from geoatlas.core.builder import (
    ROOT_ID, SEMANTIC_CORE_ID, GraphBuilder, GraphMode, build_graph, parse_mode,
)
from geoatlas.core.exceptions import InvalidArgumentError
from geoatlas.core.types import Dimension, EdgeType, NodeType


def _pairs(graph, edge_type=None):
    return [
        (e.source, e.target) for e in graph.links
        if edge_type is None or e.type == edge_type
    ]


class TestObjectCentric:
    def test_block_example(self, block_assets):
        graph = build_graph(block_assets, "object-centric")

        assert [n.id for n in graph.nodes] == [
            "root", "field-Saertu", "prof-Geology", "prof-Geophysics", "a1", "a2",
        ]
        assert _pairs(graph) == [
            ("root", "field-Saertu"),
            ("root", "prof-Geology"),
            ("root", "prof-Geophysics"),
            ("a1", "field-Saertu"),
            ("a1", "prof-Geology"),
            ("a2", "field-Saertu"),
            ("a2", "prof-Geophysics"),
        ]
        assert all(e.type == EdgeType.HIERARCHY for e in graph.links)

    def test_one_hub_per_distinct_value(self, catalogue):
        graph = build_graph(catalogue, GraphMode.OBJECT_CENTRIC)
        oilfields = {a.oilfield for a in catalogue}
        professions = {a.profession for a in catalogue}

        assert len(graph.get_nodes_by_type(NodeType.OILFIELD)) == len(oilfields)
        assert len(graph.get_nodes_by_type(NodeType.PROFESSION)) == len(professions)
        assert len(graph.get_nodes_by_type(NodeType.ASSET)) == len(catalogue)

    def test_each_asset_has_two_hierarchy_edges(self, catalogue):
        graph = build_graph(catalogue, "object-centric")
        for asset in catalogue:
            edges = graph.neighbors_of(asset.id)
            assert len(edges) == 2
            assert {e.target for e in edges} == {f"field-{asset.oilfield}", f"prof-{asset.profession}"}

    def test_asset_without_profession_keeps_node(self, asset_factory):
        assets = [asset_factory("x", oilfield="Saertu")]
        graph = build_graph(assets, "object-centric")
        assert graph.has_node("x")
        assert not graph.get_nodes_by_type(NodeType.PROFESSION)
        assert _pairs(graph) == [("root", "field-Saertu"), ("x", "field-Saertu")]

    def test_root_at_canvas_center(self, block_assets):
        layout = LayoutConfig(center_x=10, center_y=20)
        graph = GraphBuilder(layout).build(block_assets, "object-centric")
        root = graph.get_node(ROOT_ID)
        assert (root.position.x, root.position.y) == (10, 20)

    def test_positions_reproducible(self, catalogue):
        first = build_graph(catalogue, "object-centric").to_dict()
        second = build_graph(catalogue, "object-centric").to_dict()
        assert first == second

    def test_empty_collection(self):
        graph = build_graph([], "object-centric")
        assert [n.id for n in graph.nodes] == [ROOT_ID]
        assert graph.links == []


class TestDimensionCentric:
    def test_five_axis_hubs(self, block_assets):
        graph = build_graph(block_assets, "dimension-centric")
        hubs = graph.get_nodes_by_type(NodeType.AXIS_HUB)
        assert [h.id for h in hubs] == [f"axis-{d.value}" for d in Dimension]
        assert _pairs(graph, EdgeType.AXIS) == [(SEMANTIC_CORE_ID, h.id) for h in hubs]

    def test_value_nodes_and_semantic_edges(self, block_assets):
        graph = build_graph(block_assets, "dimension-centric")

        values = {n.id for n in graph.get_nodes_by_type(NodeType.SEMANTIC_DIM)}
        assert values == {
            "dim-object-Block1",
            "dim-business-CapacityBuild",
            "dim-profession-Geology",
            "dim-profession-Geophysics",
        }
        assert ("axis-object", "dim-object-Block1") in _pairs(graph, EdgeType.HIERARCHY)
        assert _pairs(graph, EdgeType.SEMANTIC) == [
            ("a1", "dim-object-Block1"),
            ("a1", "dim-profession-Geology"),
            ("a2", "dim-object-Block1"),
            ("a2", "dim-business-CapacityBuild"),
            ("a2", "dim-profession-Geophysics"),
        ]

    def test_one_semantic_edge_per_mounted_dimension(self, catalogue):
        graph = build_graph(catalogue, "dimension-centric")
        for asset in catalogue:
            semantic = [e for e in graph.neighbors_of(asset.id) if e.type == EdgeType.SEMANTIC]
            mounted = asset.coordinates_5d.mounted() if asset.coordinates_5d else {}
            assert len(semantic) == len(mounted)

    def test_unmounted_asset_is_isolated(self, catalogue):
        graph = build_graph(catalogue, "dimension-centric")
        assert graph.has_node("7")
        assert graph.neighbors_of("7") == []
        assert graph.get_stats()["orphans"] == 2

    def test_empty_collection_still_has_axes(self):
        graph = build_graph([], "dimension-centric")
        assert graph.node_count == 6
        assert graph.edge_count == 5


class TestHubIdCollisions:
    def test_asset_named_like_oilfield_hub(self, asset_factory):
        assets = [
            asset_factory("field-Saertu", oilfield="Saertu", profession="Geology"),
            asset_factory("a2", oilfield="Saertu", profession="Geology"),
        ]
        graph = build_graph(assets, "object-centric")

        hubs = graph.get_nodes_by_type(NodeType.OILFIELD)
        assert [h.id for h in hubs] == ["field-Saertu"]
        assert graph.get_node("asset-field-Saertu").asset.id == "field-Saertu"
        assert ("asset-field-Saertu", "field-Saertu") in _pairs(graph)
        assert all(e.source != e.target for e in graph.links)

    def test_asset_named_root(self, asset_factory):
        graph = build_graph([asset_factory("root", oilfield="F", profession="P")], "object-centric")
        assert graph.get_node(ROOT_ID).type == NodeType.ROOT
        assert graph.has_node("asset-root")

    def test_asset_named_like_axis_hub(self, asset_factory):
        assets = [asset_factory("axis-object", coordinates5D={"object": "B"})]
        graph = build_graph(assets, "dimension-centric")

        assert len(graph.get_nodes_by_type(NodeType.AXIS_HUB)) == 5
        assert _pairs(graph, EdgeType.SEMANTIC) == [("asset-axis-object", "dim-object-B")]

    def test_prefixed_id_skips_other_asset_ids(self, asset_factory):
        assets = [
            asset_factory("semantic-core"),
            asset_factory("asset-semantic-core"),
        ]
        graph = build_graph(assets, "dimension-centric")
        asset_ids = [n.id for n in graph.get_nodes_by_type(NodeType.ASSET)]
        assert asset_ids == ["asset-asset-semantic-core", "asset-semantic-core"]
        assert graph.get_node("asset-semantic-core").asset.id == "asset-semantic-core"

    def test_duplicate_asset_ids_rejected(self, asset_factory):
        assets = [asset_factory("x", oilfield="F"), asset_factory("x", oilfield="G")]
        with pytest.raises(InvalidArgumentError):
            build_graph(assets, "object-centric")


class TestParseMode:
    def test_known_modes(self):
        assert parse_mode("object-centric") is GraphMode.OBJECT_CENTRIC
        assert parse_mode(GraphMode.DIMENSION_CENTRIC) is GraphMode.DIMENSION_CENTRIC

    def test_unknown_mode(self, block_assets):
        with pytest.raises(InvalidArgumentError) as exc:
            build_graph(block_assets, "radial")
        assert exc.value.details["allowed"] == ["object-centric", "dimension-centric"]
