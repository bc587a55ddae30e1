
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from sct_reader.cli.utils import load_sector
from sct_reader.registry.entities import Airport, Fix, Ndb, Vor

console = Console()

_KIND_LABELS = {Fix: "Fix", Vor: "VOR", Ndb: "NDB", Airport: "Airport"}


def find_command(
    sector_file: Path = typer.Argument(..., exists=True, readable=True),
    identifier: str = typer.Argument(..., help="Fix, VOR, NDB or airport identifier"),
):
    """
    Look up a waypoint the way segment endpoints are resolved:
    fixes first, then VORs, NDBs and airports.
    """
    ctx = load_sector(sector_file)
    waypoint = ctx.result.sector.find_waypoint(identifier)

    if waypoint is None:
        console.print(f"[yellow]{escape(identifier)} not found[/yellow]")
        raise typer.Exit(code=1)

    kind = _KIND_LABELS.get(type(waypoint), type(waypoint).__name__)
    position = waypoint.position
    console.print(
        f"[bold]{escape(waypoint.identifier)}[/bold] {kind} "
        f"{position.lat:.6f} {position.lon:.6f}"
    )
