"""
geoatlas CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import graph, heatmap, index, initialize, scenario, search


@click.group()
@click.version_option(package_name="geoatlas")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def main(verbose: bool):
    """geoatlas: 5D semantic graph and association engine for geoscience graphics.

    \b
    Quick Start:
      geoatlas init --demo
      geoatlas graph --mode dimension-centric
      geoatlas scenario 1 Saertu
      geoatlas heatmap 1
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )


# Register commands
main.add_command(initialize.init)
main.add_command(index.index)
main.add_command(graph.graph)
main.add_command(heatmap.heatmap)
main.add_command(scenario.scenario)
main.add_command(scenario.objects)
main.add_command(search.search)

if __name__ == "__main__":
    main()
