"""
Search Command - Faceted catalogue search.
"""

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ...analysis.search import AssetQuery, facet_counts, review_queue, search_assets
from ...core.exceptions import GeoAtlasError, InvalidArgumentError
from ..utils import catalog_options, echo_info, echo_warning, emit_json, fail, load_engine

console = Console()


@click.command()
@click.argument("text", required=False, default="")
@click.option("--oilfield", multiple=True, help="Oilfield (repeatable)")
@click.option("--profession", multiple=True, help="Profession (repeatable)")
@click.option("--stage", multiple=True, help="Stage keyword, matched by containment (repeatable)")
@click.option("--graphic-type", multiple=True, help="static, dynamic or datavolume (repeatable)")
@click.option("--spatial", multiple=True, help="aerial, surface, ground, underwater or subsurface (repeatable)")
@click.option("--all-statuses", is_flag=True, help="Include draft and in-review assets")
@click.option("--facets", "show_facets", is_flag=True, help="Show facet counts instead of results")
@click.option("--review", "show_review", is_flag=True, help="Show the review queue by status")
@click.option("--related", "related_to", default=None, help="Show assets from the same project or oilfield as this asset")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@catalog_options
def search(text: str, oilfield: tuple, profession: tuple, stage: tuple, graphic_type: tuple,
           spatial: tuple, all_statuses: bool, show_facets: bool, show_review: bool, related_to: str, as_json: bool,
           config_path: str, catalog_path: str):
    """
    Search the catalogue by TEXT and facet filters.
    """
    try:
        engine = load_engine(config_path, catalog_path)
        try:
            query = AssetQuery(
                text=text,
                oilfield=list(oilfield),
                profession=list(profession),
                stage=list(stage),
                graphic_type=list(graphic_type),
                spatial_relation=list(spatial),
                published_only=not all_statuses,
            )
        except ValidationError as e:
            raise InvalidArgumentError("Invalid search filter", {"errors": e.errors(include_url=False)}) from e
        related = engine.related_assets(related_to) if related_to else None
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    assets = engine.assets()

    if show_facets:
        counts = facet_counts(assets, published_only=not all_statuses)
        if as_json:
            emit_json(counts)
            return
        for facet, values in counts.items():
            console.print(f"[bold]{facet}[/bold]")
            for value, count in values.items():
                console.print(f"   {value}: {count}")
        return

    if show_review:
        queue = review_queue(assets)
        if as_json:
            emit_json({status: [a.id for a in items] for status, items in queue.items()})
            return
        for status, items in queue.items():
            console.print(f"[bold]{status}[/bold] ({len(items)})")
            for asset in items:
                echo_info(f"{asset.id}  {asset.title}")
        return

    results = related if related is not None else search_assets(assets, query)
    if as_json:
        emit_json([a.model_dump(mode="json", by_alias=True, exclude_none=True) for a in results])
        return

    if not results:
        echo_warning("No assets match the current filters")
        return

    table = Table(title=f"{len(results)} result(s)")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Oilfield")
    table.add_column("Profession")
    table.add_column("Stage")
    table.add_column("Status")
    for a in results:
        table.add_row(a.id, a.title, a.oilfield, a.profession, a.stage, a.status.value)
    console.print(table)
