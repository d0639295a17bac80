"""
Unit tests for the Demo Manager.
"""

from pathlib import Path

from geoatlas.analysis.scenario import ScenarioLibrary
from geoatlas.core.demo import DemoManager, demo_assets, demo_physical_objects
from geoatlas.core.storage import JsonAssetStore


class TestDemoManager:
    """Test the demo catalogue provisioning."""

    def test_provision_creates_files(self, tmp_path):
        manager = DemoManager(tmp_path)
        assets_file = manager.provision(Path(".geoatlas/assets.json"), Path(".geoatlas/scenarios.yaml"))

        assert assets_file == tmp_path / ".geoatlas" / "assets.json"
        assert assets_file.exists()
        assert (tmp_path / ".geoatlas" / "scenarios.yaml").exists()

        store = JsonAssetStore(assets_file)
        assert len(store) == len(demo_assets())

        library = ScenarioLibrary.from_yaml(tmp_path / ".geoatlas" / "scenarios.yaml")
        assert [s.id for s in library.list()] == ["1", "2", "3"]


class TestDemoData:
    def test_unique_ids(self):
        ids = [a.id for a in demo_assets()]
        assert len(ids) == len(set(ids))

    def test_wells_have_parents(self):
        objects = demo_physical_objects()
        assert objects["SE-12"].parent == "Saertu"
        assert objects["Saertu"].type == "field"
