"""
Unit tests for the 5D dimension index.
"""

import pytest

from geoatlas.core.dimensions import DimensionIndex, build_dimension_index, resolve_dimensions
from geoatlas.core.exceptions import InvalidArgumentError
from geoatlas.core.types import Dimension


class TestBuildDimensionIndex:
    def test_object_values(self, block_assets):
        index = build_dimension_index(block_assets, ["object"])
        assert index.values(Dimension.OBJECT) == ["Block1"]
        assert index.assets_for(Dimension.OBJECT, "Block1") == block_assets

    def test_empty_values_excluded(self, block_assets):
        index = build_dimension_index(block_assets)
        assert index.values(Dimension.BUSINESS) == ["CapacityBuild"]
        assert index.values(Dimension.WORK) == []
        assert index.assets_for(Dimension.BUSINESS, "CapacityBuild") == [block_assets[1]]

    def test_first_seen_order(self, asset_factory):
        assets = [
            asset_factory("1", coordinates5D={"work": "Zeta"}),
            asset_factory("2", coordinates5D={"work": "Alpha"}),
            asset_factory("3", coordinates5D={"work": "Zeta"}),
        ]
        index = build_dimension_index(assets)
        assert index.values(Dimension.WORK) == ["Zeta", "Alpha"]
        assert index.value_counts(Dimension.WORK) == {"Zeta": 2, "Alpha": 1}

    def test_deterministic(self, catalogue):
        first = build_dimension_index(catalogue).as_dict()
        second = build_dimension_index(catalogue).as_dict()
        assert first == second
        assert list(first) == [d.value for d in Dimension]

    def test_assets_without_coordinates_never_indexed(self, catalogue):
        index = build_dimension_index(catalogue)
        unmounted = {a.id for a in catalogue if not a.dimension_value(Dimension.OBJECT)}
        assert unmounted == {"6", "7"}
        for value in index.values(Dimension.OBJECT):
            ids = {a.id for a in index.assets_for(Dimension.OBJECT, value)}
            assert not ids & unmounted

    def test_empty_collection(self):
        index = build_dimension_index([])
        assert len(index) == 0
        assert index.as_dict() == {d.value: {} for d in Dimension}

    def test_unknown_value_returns_empty(self, block_assets):
        index = build_dimension_index(block_assets)
        assert index.assets_for(Dimension.OBJECT, "Nowhere") == []


class TestResolveDimensions:
    def test_default_is_canonical_order(self):
        assert resolve_dimensions(None) == tuple(Dimension)

    def test_deduplicates(self):
        assert resolve_dimensions(["work", "object", "work"]) == (Dimension.WORK, Dimension.OBJECT)

    def test_unknown_key(self):
        with pytest.raises(InvalidArgumentError) as exc:
            resolve_dimensions(["colour"])
        assert "colour" in str(exc.value)

    def test_non_string_key(self):
        with pytest.raises(InvalidArgumentError):
            resolve_dimensions([3])

    def test_unindexed_dimension_lookup(self, block_assets):
        index = DimensionIndex(block_assets, [Dimension.OBJECT])
        with pytest.raises(InvalidArgumentError):
            index.values(Dimension.WORK)
