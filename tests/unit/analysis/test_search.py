"""
Unit tests for faceted search and the review queue.
"""

import pytest
from pydantic import ValidationError

from geoatlas.analysis.search import AssetQuery, facet_counts, review_queue, search_assets


def _ids(assets):
    return [a.id for a in assets]


class TestSearchAssets:
    def test_default_is_published_only(self, catalogue):
        assert _ids(search_assets(catalogue, AssetQuery())) == ["1", "4", "5", "6", "8"]

    def test_all_statuses(self, catalogue):
        results = search_assets(catalogue, AssetQuery(published_only=False))
        assert len(results) == len(catalogue)

    def test_or_within_facet(self, catalogue):
        query = AssetQuery(oilfield=["Saertu", "Weiyuan-Changning"])
        assert _ids(search_assets(catalogue, query)) == ["1", "4", "5", "6", "8"]

    def test_and_across_facets(self, catalogue):
        query = AssetQuery(oilfield=["Saertu"], spatial_relation=["subsurface"])
        assert _ids(search_assets(catalogue, query)) == ["1", "5"]

    def test_stage_by_containment(self, catalogue):
        query = AssetQuery(stage=["Production"])
        assert _ids(search_assets(catalogue, query)) == ["4", "8"]

    def test_text_matches_title(self, catalogue):
        query = AssetQuery(text="  drone ")
        assert _ids(search_assets(catalogue, query)) == ["8"]

    def test_text_matches_profession(self, catalogue):
        query = AssetQuery(text="geophysics")
        assert _ids(search_assets(catalogue, query)) == ["6"]

    def test_invalid_graphic_type(self):
        with pytest.raises(ValidationError):
            AssetQuery(graphic_type=["hologram"])

    def test_no_match_is_empty(self, catalogue):
        assert search_assets(catalogue, AssetQuery(oilfield=["Atlantis"])) == []


class TestFacetCounts:
    def test_fixed_buckets_always_present(self):
        counts = facet_counts([])
        assert counts["spatial_relation"] == {
            "aerial": 0, "surface": 0, "ground": 0, "underwater": 0, "subsurface": 0,
        }
        assert counts["graphic_type"] == {"static": 0, "dynamic": 0, "datavolume": 0}
        assert counts["stage"] == {"Exploration": 0, "Appraisal": 0, "Development": 0, "Production": 0}
        assert counts["oilfield"] == {}

    def test_published_counts(self, catalogue):
        counts = facet_counts(catalogue)
        assert counts["oilfield"] == {"Saertu": 4, "Weiyuan-Changning": 1}
        assert counts["stage"]["Development"] == 2
        assert counts["graphic_type"]["static"] == 5

    def test_all_statuses(self, catalogue):
        counts = facet_counts(catalogue, published_only=False)
        assert sum(counts["oilfield"].values()) == len(catalogue)


class TestReviewQueue:
    def test_partition(self, catalogue):
        queue = review_queue(catalogue)
        assert list(queue) == ["draft", "review", "published"]
        assert _ids(queue["draft"]) == ["3"]
        assert _ids(queue["review"]) == ["2", "7"]
        assert len(queue["published"]) == 5
