"""
Index Command - Distinct values per 5D dimension.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import GeoAtlasError
from ...core.types import Dimension
from ..utils import catalog_options, emit_json, fail, load_engine

console = Console()


@click.command()
@click.option("-d", "--dimension", "dimensions", multiple=True,
              type=click.Choice([d.value for d in Dimension]),
              help="Limit to one or more dimensions (repeatable)")
@click.option("--json", "as_json", is_flag=True, help="Output value -> asset ids as JSON")
@catalog_options
def index(dimensions: tuple, as_json: bool, config_path: str, catalog_path: str):
    """
    Show the mounted values of each semantic dimension.
    """
    try:
        engine = load_engine(config_path, catalog_path)
        idx = engine.dimension_index(list(dimensions) or None)
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    if as_json:
        emit_json(idx.as_dict())
        return

    for dimension in idx.dimensions:
        counts = idx.value_counts(dimension)
        table = Table(title=f"{dimension.value} ({len(counts)} values)")
        table.add_column("Value", style="cyan")
        table.add_column("Assets", justify="right")
        if not counts:
            table.add_row("[dim]unmounted on every asset[/dim]", "0")
        for value, count in counts.items():
            table.add_row(value, str(count))
        console.print(table)
