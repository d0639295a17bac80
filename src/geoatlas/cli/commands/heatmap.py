"""
Heatmap Command - Cross-facet association around one asset.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import GeoAtlasError
from ..utils import catalog_options, echo_warning, emit_json, fail, load_engine

console = Console()


def _shade(intensity: int) -> str:
    if intensity >= 90:
        return f"[bold white on red]{intensity:>3}[/]"
    if intensity >= 60:
        return f"[red]{intensity:>3}[/]"
    if intensity >= 30:
        return f"[yellow]{intensity:>3}[/]"
    return f"[dim]{intensity:>3}[/]"


@click.command()
@click.argument("asset_id")
@click.option("-a", "--facet-a", default=None, help="Row facet (default: profession)")
@click.option("-b", "--facet-b", default=None, help="Column facet (default: stage)")
@click.option("--strategy", type=click.Choice(["reference", "cooccurrence"]), default=None,
              help="Scoring for non-focus cells")
@click.option("--json", "as_json", is_flag=True, help="Output the flat cell list as JSON")
@catalog_options
def heatmap(asset_id: str, facet_a: str, facet_b: str, strategy: str, as_json: bool,
            config_path: str, catalog_path: str):
    """
    Show how concentrated each facet combination is around ASSET_ID.
    """
    try:
        engine = load_engine(config_path, catalog_path)
        matrix = engine.heatmap(asset_id, facet_a=facet_a, facet_b=facet_b, strategy=strategy)
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    if as_json:
        emit_json(matrix.model_dump(mode="json"))
        return

    if not matrix.cells:
        echo_warning("No facet values to compare")
        return

    table = Table(title=f"{matrix.facet_a.value} x {matrix.facet_b.value} around asset {asset_id}")
    table.add_column(matrix.facet_a.value, style="cyan")
    for b in matrix.facet_b_values:
        table.add_column(b, justify="right")

    nested = matrix.as_nested()
    for a in matrix.facet_a_values:
        table.add_row(a, *[_shade(nested[a][b]) for b in matrix.facet_b_values])
    console.print(table)
