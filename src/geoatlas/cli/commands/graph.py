"""
Graph Command - Build the asset topology.

Prints graph statistics, the one-hop neighbourhood of a focus node, or the
full node/link payload as JSON for a renderer.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.builder import GraphMode
from ...core.exceptions import GeoAtlasError
from ..utils import catalog_options, echo_warning, emit_json, fail, load_engine

console = Console()


@click.command()
@click.option("-m", "--mode", default=GraphMode.OBJECT_CENTRIC.value, show_default=True,
              help="Topology: object-centric or dimension-centric")
@click.option("-f", "--focus", "focus_id", default=None, help="Show links around this node id")
@click.option("-s", "--search", "query", default=None, help="Filter nodes by label or type")
@click.option("--json", "as_json", is_flag=True, help="Output nodes and links as JSON")
@catalog_options
def graph(mode: str, focus_id: str, query: str, as_json: bool, config_path: str, catalog_path: str):
    """
    Build the object-centric or 5D dimension-centric asset graph.
    """
    try:
        engine = load_engine(config_path, catalog_path)
        g = engine.graph(mode)
    except GeoAtlasError as e:
        fail(e, as_json)
        return

    if focus_id:
        _show_focus(g, focus_id, as_json)
        return

    if query is not None:
        matches = g.find_nodes(query)
        if as_json:
            emit_json([n.model_dump(mode="json", exclude={"asset"}) for n in matches])
            return
        if not matches:
            echo_warning(f"No nodes match '{query}'")
            return
        table = Table(title=f"Nodes matching '{query}'")
        table.add_column("ID", style="cyan")
        table.add_column("Type")
        table.add_column("Label")
        for node in matches:
            table.add_row(node.id, node.type.value, node.label)
        console.print(table)
        return

    if as_json:
        emit_json(g.to_dict())
        return

    stats = g.get_stats()
    table = Table(title=f"Asset graph ({stats['mode']})")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Nodes", str(stats["total_nodes"]))
    table.add_row("Links", str(stats["total_edges"]))
    for node_type, count in stats["nodes_by_type"].items():
        table.add_row(f"  {node_type} nodes", str(count))
    for edge_type, count in stats["edges_by_type"].items():
        table.add_row(f"  {edge_type} links", str(count))
    table.add_row("Orphans", str(stats["orphans"]))
    console.print(table)


def _show_focus(g, focus_id: str, as_json: bool) -> None:
    if not g.has_node(focus_id):
        if as_json:
            emit_json({"focus": focus_id, "links": [], "related": []})
        else:
            echo_warning(f"Node not in graph: {focus_id}")
        return

    links = g.neighbors_of(focus_id)
    related = sorted(g.related_node_ids(focus_id))

    if as_json:
        emit_json({
            "focus": focus_id,
            "links": [link.model_dump(mode="json") for link in links],
            "related": related,
        })
        return

    focus = g.get_node(focus_id)
    console.print(f"🔗 [bold]{focus.label}[/bold] [dim]({focus.type.value})[/dim]")
    if not links:
        echo_warning("No links")
        return
    for i, link in enumerate(links):
        other = link.target if link.source == focus_id else link.source
        node = g.get_node(other)
        connector = "└─" if i == len(links) - 1 else "├─"
        console.print(f"  {connector} [cyan]{node.label}[/cyan] [dim]{link.type.value}[/dim]")
