"""Unit tests for CLI utilities."""

import json

import pytest

from geoatlas.cli.utils import emit_json, fail, load_engine, open_store
from geoatlas.core.exceptions import CatalogLoadError, InvalidArgumentError
from geoatlas.core.storage import JsonAssetStore, SQLiteAssetStore, write_assets


class TestEnvelope:
    def test_emit_json(self, capsys):
        emit_json({"a": 1})
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"meta": {"status": "success"}, "data": {"a": 1}}

    def test_fail_json_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            fail(InvalidArgumentError("bad mode", {"allowed": ["x"]}), as_json=True)
        assert exc.value.code == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["meta"]["status"] == "error"
        assert payload["error"] == {
            "type": "InvalidArgumentError",
            "message": "bad mode",
            "details": {"allowed": ["x"]},
        }

    def test_fail_text_goes_to_stderr(self, capsys):
        with pytest.raises(SystemExit):
            fail(InvalidArgumentError("bad mode"))
        assert "bad mode" in capsys.readouterr().err


class TestOpenStore:
    def test_json_by_default(self, tmp_path, catalogue):
        path = write_assets(catalogue, tmp_path / "assets.json")
        assert isinstance(open_store(path), JsonAssetStore)

    def test_sqlite_by_suffix(self, tmp_path):
        path = tmp_path / "assets.sqlite"
        SQLiteAssetStore(path)
        assert isinstance(open_store(path), SQLiteAssetStore)

    def test_missing(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            open_store(tmp_path / "assets.json")


class TestLoadEngine:
    def test_catalog_override_without_config(self, tmp_path, catalogue):
        path = write_assets(catalogue, tmp_path / "assets.json")
        engine = load_engine(str(tmp_path / "missing.yaml"), str(path))
        assert len(engine.assets()) == len(catalogue)
        assert len(engine.scenarios) == 3

    def test_scenarios_from_config(self, tmp_path, catalogue):
        assets = write_assets(catalogue, tmp_path / "assets.json")
        scenarios = tmp_path / "scenarios.yaml"
        scenarios.write_text("scenarios:\n  - id: only\n    stages:\n      - name: S\n        requiredCategories: [Dashboard]\n")
        config = tmp_path / "config.yaml"
        config.write_text(f"catalog:\n  assets_path: '{assets}'\n  scenarios_path: '{scenarios}'\n")

        engine = load_engine(str(config), None)
        assert [s.id for s in engine.scenarios.list()] == ["only"]
        assert engine.scenario("only", "Halahatang")[0].assets[0].id == "7"
