"""Command-line interface for Castle Builder."""

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from castle_builder import __version__
from castle_builder.config import get_settings
from castle_builder.errors import CastleError
from castle_builder.logs import configure_logging
from castle_builder.models.castle import Castle

console = Console()


def _load(path: str) -> Castle:
    """Build the castle in a declaration file, exiting on any declaration error."""
    from castle_builder.declarations import build_castle

    try:
        return build_castle(Path(path))
    except json.JSONDecodeError as e:
        console.print(f"[red]✗[/red] {path} is not valid JSON: {e}", soft_wrap=True)
    except ValidationError as e:
        console.print(f"[red]✗[/red] {path} does not match the declaration schema:", soft_wrap=True)
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  [dim]{location}[/dim] {error['msg']}")
    except CastleError as e:
        console.print(f"[red]✗[/red] {type(e).__name__}: {e}", soft_wrap=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Log level (defaults to CASTLE_LOG_LEVEL)")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def main(log_level: str | None, json_logs: bool) -> None:
    """Castle Builder - declare castles and assemble them into linked graphs."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_output=json_logs or settings.log_json,
    )


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the castle as JSON")
def build(path: str, as_json: bool) -> None:
    """Assemble the castle declared in a JSON file and print it."""
    from castle_builder.graph import castle_to_json

    castle = _load(path)

    if as_json:
        click.echo(castle_to_json(castle))
        return

    console.print(f"[bold]Castle from:[/bold] {path}\n")
    console.print(castle.render(), markup=False, highlight=False)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check(path: str) -> None:
    """Validate a declaration file without printing the castle."""
    castle = _load(path)
    console.print(
        f"[green]✓[/green] {len(castle.towers)} towers, {len(castle.walls)} walls"
        f"{', keep ' + castle.keep.name if castle.keep else ''}"
    )


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def stats(path: str) -> None:
    """Show layout statistics for a declared castle."""
    from castle_builder.graph import layout_stats

    castle = _load(path)
    result = layout_stats(castle)

    table = Table(title="Castle Layout")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Towers", f"{result.towers:,}")
    table.add_row("Walls", f"{result.walls:,}")
    table.add_row("Drawbridges", f"{result.drawbridges:,}")
    table.add_row("Catapults", f"{result.catapults:,}")
    table.add_row("Keep buildings", f"{result.keep_buildings:,}")
    table.add_row("Connected groups", f"{result.components:,}")

    console.print(table)

    if result.unwalled:
        console.print(f"\n[yellow]Unwalled:[/yellow] {', '.join(result.unwalled)}")


@main.command()
@click.option(
    "--style",
    type=click.Choice(["chain", "path", "blocks"]),
    default="chain",
    show_default=True,
    help="Declaration style used to build the demo castle",
)
def demo(style: str) -> None:
    """Build the four-wall demo castle."""
    from castle_builder.demos import DEMOS

    castle = DEMOS[style]()
    console.print(f"[bold]Demo castle ({style} style)[/bold]\n")
    console.print(castle.render(), markup=False, highlight=False)


if __name__ == "__main__":
    main()
