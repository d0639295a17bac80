"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, the JSON response envelope, and engine loading from the
project configuration.
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click

from ..analysis.scenario import ScenarioLibrary
from ..config import GeoAtlasConfig, load_config
from ..core.exceptions import CatalogLoadError, GeoAtlasError
from ..core.storage import AssetStore, JsonAssetStore, SQLiteAssetStore
from ..engine import CatalogEngine

SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def emit_json(data: Any) -> None:
    """Write a success envelope to stdout."""
    click.echo(json.dumps({"meta": {"status": "success"}, "data": data}, ensure_ascii=False))


def fail(error: GeoAtlasError, as_json: bool = False) -> None:
    """
    Report a configuration error and exit with status 1.

    Empty results are not errors and never reach this function.
    """
    if as_json:
        click.echo(json.dumps({"meta": {"status": "error"}, "error": error.to_dict()}, ensure_ascii=False, default=str))
    else:
        echo_error(error.message)
    sys.exit(1)


def open_store(path: Path) -> AssetStore:
    if not path.exists():
        raise CatalogLoadError(
            f"Catalogue not found: {path}. Run 'geoatlas init --demo' to create one.",
            {"path": str(path)},
        )
    if path.suffix.lower() in SQLITE_SUFFIXES:
        return SQLiteAssetStore(path)
    return JsonAssetStore(path)


def load_engine(config_path: Optional[str], catalog_path: Optional[str]) -> CatalogEngine:
    """
    Build a CatalogEngine from the project configuration.

    Args:
        config_path: Explicit config file, else ``.geoatlas/config.yaml``.
        catalog_path: Overrides ``catalog.assets_path``.
    """
    config: GeoAtlasConfig = load_config(Path(config_path) if config_path else None)
    store = open_store(Path(catalog_path or config.catalog.assets_path))

    scenarios = ScenarioLibrary()
    scenarios_path = config.catalog.scenarios_path
    if scenarios_path and Path(scenarios_path).exists():
        scenarios = ScenarioLibrary.from_yaml(Path(scenarios_path))

    return CatalogEngine(store, config=config, scenarios=scenarios)


def catalog_options(func):
    """Shared --config / --catalog options."""
    func = click.option("--catalog", "catalog_path", default=None,
                        help="Asset catalogue (.json or .db); overrides the config")(func)
    func = click.option("-c", "--config", "config_path", default=None,
                        help="Config file (default .geoatlas/config.yaml)")(func)
    return func
