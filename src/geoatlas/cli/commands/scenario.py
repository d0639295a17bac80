"""
Scenario Command - Stage timeline for a focal object.

Also hosts ``objects``, which lists the focal objects a scenario can be
evaluated against.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import GeoAtlasError
from ..utils import catalog_options, echo_error, echo_info, echo_warning, emit_json, fail, load_engine

console = Console()


@click.command()
@click.argument("scenario_id", required=False)
@click.argument("focal_object", required=False)
@click.option("--list", "list_only", is_flag=True, help="List configured scenarios")
@click.option("--json", "as_json", is_flag=True, help="Output stage groups as JSON")
@catalog_options
def scenario(scenario_id: str, focal_object: str, list_only: bool, as_json: bool,
             config_path: str, catalog_path: str):
    """
    Aggregate FOCAL_OBJECT's assets into the stages of SCENARIO_ID.
    """
    try:
        engine = load_engine(config_path, catalog_path)
        if list_only or not scenario_id:
            _list_scenarios(engine.scenarios.list(), as_json)
            return
        groups = engine.scenario(scenario_id, focal_object)
        definition = engine.scenarios.get(scenario_id)
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    if as_json:
        emit_json([
            {
                "stage_name": g.stage_name,
                "required_categories": g.required_categories,
                "assets": [a.id for a in g.assets],
            }
            for g in groups
        ])
        return

    if not focal_object:
        echo_warning("Select a focal object to aggregate. Available objects:")
        for name in engine.available_objects():
            echo_info(name)
        return

    console.print(f"📋 [bold]{definition.name}[/bold] on [cyan]{focal_object}[/cyan]")
    for i, group in enumerate(groups, 1):
        console.print(f"\n[bold]{i}. {group.stage_name}[/bold] [dim]({', '.join(group.required_categories)})[/dim]")
        if group.is_empty:
            console.print("   [yellow]No matching assets for this stage[/yellow]")
            continue
        for asset in group.assets:
            console.print(f"   • [cyan]{asset.id}[/cyan] {asset.title} [dim]{asset.category}[/dim]")


def _list_scenarios(scenarios, as_json: bool) -> None:
    if as_json:
        emit_json([s.model_dump(mode="json") for s in scenarios])
        return
    if not scenarios:
        echo_error("No scenarios configured")
        return
    table = Table(title="Scenarios")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Stages")
    for s in scenarios:
        table.add_row(s.id, s.name, " → ".join(stage.name for stage in s.stages))
    console.print(table)


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@catalog_options
def objects(as_json: bool, config_path: str, catalog_path: str):
    """
    List oilfields, wells and 5D objects that assets are attached to.
    """
    try:
        engine = load_engine(config_path, catalog_path)
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    names = engine.available_objects()
    if as_json:
        emit_json(names)
        return
    if not names:
        echo_warning("Catalogue has no located assets")
        return
    for name in names:
        click.echo(name)
