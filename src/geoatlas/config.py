"""
Global configuration and layout defaults.

Layout constants are presentation heuristics: only the node/edge topology of a
built graph is a contract, positions merely have to be reproducible.
Overrides live in ``.geoatlas/config.yaml``.
"""

import logging
import math
import os
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.exceptions import InvalidArgumentError
from .core.types import Dimension, Facet, HeatmapStrategy

logger = logging.getLogger(__name__)

CONFIG_DIR = ".geoatlas"
CONFIG_FILE = "config.yaml"
CONFIG_ENV_VAR = "GEOATLAS_CONFIG"

# Fixed axis order for the pentagon and for dimension indexing
DIMENSION_ORDER: Tuple[Dimension, ...] = tuple(Dimension)

# --- Object-centric layout ---
CANVAS_CENTER = (400.0, 350.0)
OILFIELD_RING_RADIUS = 140.0
PROFESSION_RING_RADIUS = 240.0
PROFESSION_ANGLE_OFFSET = math.pi / 6
OILFIELD_BLEND_WEIGHT = 0.6
ASSET_JITTER_RADIUS = 60.0

# --- Dimension-centric layout ---
AXIS_RING_RADIUS = 180.0
VALUE_RING_RADIUS = 280.0
VALUE_ANGULAR_SPREAD = 0.3
ASSET_RING_RADIUS = 330.0

# --- Heatmap ---
FOCUS_INTENSITY = 95
BACKGROUND_CEILING = 80
STAGE_PREFIX_LENGTH = 2


class LayoutConfig(BaseModel):
    center_x: float = CANVAS_CENTER[0]
    center_y: float = CANVAS_CENTER[1]
    oilfield_radius: float = OILFIELD_RING_RADIUS
    profession_radius: float = PROFESSION_RING_RADIUS
    profession_angle_offset: float = PROFESSION_ANGLE_OFFSET
    oilfield_weight: float = Field(default=OILFIELD_BLEND_WEIGHT, ge=0.0, le=1.0)
    jitter_radius: float = ASSET_JITTER_RADIUS
    axis_radius: float = AXIS_RING_RADIUS
    value_radius: float = VALUE_RING_RADIUS
    value_spread: float = VALUE_ANGULAR_SPREAD
    asset_radius: float = ASSET_RING_RADIUS


class HeatmapConfig(BaseModel):
    facet_a: Facet = Facet.PROFESSION
    facet_b: Facet = Facet.STAGE
    prefix_length: int = Field(default=STAGE_PREFIX_LENGTH, ge=1)
    strategy: HeatmapStrategy = HeatmapStrategy.REFERENCE


class CatalogConfig(BaseModel):
    assets_path: str = f"{CONFIG_DIR}/assets.json"
    scenarios_path: Optional[str] = f"{CONFIG_DIR}/scenarios.yaml"
    cache_size: int = Field(default=64, ge=0)


class GeoAtlasConfig(BaseModel):
    version: str = "1.0"
    project_name: str = "geoatlas"
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    heatmap: HeatmapConfig = Field(default_factory=HeatmapConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)


def default_config_path(root: Optional[Path] = None) -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return (root or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> GeoAtlasConfig:
    """
    Load configuration from YAML, falling back to defaults.

    Raises:
        InvalidArgumentError: If the file exists but is not a valid config.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return GeoAtlasConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidArgumentError(f"Config is not valid YAML: {config_path}", {"error": str(e)}) from e

    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Config must be a mapping: {config_path}")

    try:
        config = GeoAtlasConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid config: {config_path}", {"errors": e.errors()}) from e

    logger.info("Loaded config from %s", config_path)
    return config


def write_config(config: GeoAtlasConfig, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, sort_keys=False, default_flow_style=False)
    return path
