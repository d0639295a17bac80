"""
Shared fixtures for geoatlas tests.
"""

import pytest

from geoatlas.core.demo import demo_assets
from geoatlas.core.storage import MemoryAssetStore
from geoatlas.core.types import Asset


def make_asset(asset_id: str, **fields) -> Asset:
    return Asset.model_validate({"id": asset_id, "title": f"Asset {asset_id}", **fields})


@pytest.fixture
def block_assets():
    """Two Saertu assets sharing the Block1 object."""
    a1 = make_asset(
        "a1", oilfield="Saertu", profession="Geology", category="ExplorationMap",
        coordinates5D={"object": "Block1", "business": "", "work": "", "profession": "Geology", "process": ""},
    )
    a2 = make_asset(
        "a2", oilfield="Saertu", profession="Geophysics", category="ProductionModel",
        coordinates5D={"object": "Block1", "business": "CapacityBuild", "work": "", "profession": "Geophysics", "process": ""},
    )
    return [a1, a2]


@pytest.fixture
def block_scenario():
    return {
        "id": "block",
        "name": "Block evaluation",
        "stages": [
            {"name": "S1", "requiredCategories": ["ExplorationMap"]},
            {"name": "S2", "requiredCategories": ["ProductionModel"]},
        ],
    }


@pytest.fixture
def catalogue():
    return demo_assets()


@pytest.fixture
def store(catalogue):
    return MemoryAssetStore(catalogue)


@pytest.fixture
def asset_factory():
    return make_asset
