"""
Unit tests for configuration loading.
"""

import pytest

from geoatlas.config import (
    CONFIG_ENV_VAR, GeoAtlasConfig, default_config_path, load_config, write_config,
)
from geoatlas.core.exceptions import InvalidArgumentError
from geoatlas.core.types import Facet, HeatmapStrategy


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "config.yaml")
        assert config == GeoAtlasConfig()
        assert config.heatmap.facet_a is Facet.PROFESSION
        assert config.heatmap.prefix_length == 2

    def test_round_trip(self, tmp_path):
        original = GeoAtlasConfig(project_name="field-study")
        path = write_config(original, tmp_path / ".geoatlas" / "config.yaml")
        assert load_config(path) == original

    def test_partial_override(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("heatmap:\n  facet_b: category\n  strategy: cooccurrence\n")
        config = load_config(path)
        assert config.heatmap.facet_b is Facet.CATEGORY
        assert config.heatmap.strategy is HeatmapStrategy.COOCCURRENCE
        assert config.layout.oilfield_radius == 140.0

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("heatmap: [unclosed\n")
        with pytest.raises(InvalidArgumentError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("layout:\n  oilfield_weight: 3\n")
        with pytest.raises(InvalidArgumentError) as exc:
            load_config(path)
        assert exc.value.details["errors"]

    def test_unknown_heatmap_strategy_rejected_at_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("heatmap:\n  strategy: random\n")
        with pytest.raises(InvalidArgumentError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(InvalidArgumentError):
            load_config(path)


class TestDefaultConfigPath:
    def test_under_project_root(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert default_config_path(tmp_path) == tmp_path / ".geoatlas" / "config.yaml"

    def test_env_override(self, tmp_path, monkeypatch):
        target = tmp_path / "elsewhere.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert default_config_path(tmp_path) == target
