"""
Init Command - Project bootstrap.

Writes ``.geoatlas/config.yaml`` and, with ``--demo``, a sample catalogue and
scenario file so every other command works immediately.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_DIR, CONFIG_FILE, GeoAtlasConfig, write_config
from ...core.demo import DemoManager

console = Console()


def create_gitignore(root_dir: Path) -> None:
    """Keep the generated SQLite catalogues out of git."""
    gitignore = root_dir / ".gitignore"
    entry = "\n# geoatlas\n.geoatlas/*.db\n"

    if not gitignore.exists():
        gitignore.write_text(entry)
        return

    content = gitignore.read_text()
    if ".geoatlas" not in content:
        with open(gitignore, "a") as f:
            f.write(entry)


def _init_project(root_dir: Path, is_demo: bool) -> Path:
    config = GeoAtlasConfig(project_name=root_dir.name)
    config_file = write_config(config, root_dir / CONFIG_DIR / CONFIG_FILE)

    if is_demo:
        with console.status("[bold green]Writing demo catalogue...[/bold green]"):
            assets_file = DemoManager(root_dir).provision(
                Path(config.catalog.assets_path),
                Path(config.catalog.scenarios_path),
            )
        console.print(f"📂 Demo catalogue: [bold]{assets_file}[/bold]")

    create_gitignore(root_dir)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--demo", is_flag=True, help="Also write a sample catalogue and scenarios")
def init(force: bool, demo: bool):
    """
    Initialize geoatlas in the current directory.
    """
    console.print(Panel.fit("🗺️  [bold blue]geoatlas Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_DIR / CONFIG_FILE

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    _init_project(root_dir, is_demo=demo)

    if demo:
        console.print("\n[bold green]Ready to go! Try these commands:[/bold green]")
        console.print("1. [bold cyan]geoatlas graph --mode dimension-centric[/bold cyan]")
        console.print("2. [bold cyan]geoatlas scenario 1 Saertu[/bold cyan]")
        console.print("3. [bold cyan]geoatlas heatmap 1[/bold cyan]")
