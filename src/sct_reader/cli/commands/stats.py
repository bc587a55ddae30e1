
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sct_reader.cli.utils import load_sector

console = Console()


def stats_command(
    sector_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print parse timing",
    ),
):
    """
    Show the INFO header, entity counts and a line error breakdown.
    """
    ctx = load_sector(sector_file, verbose=verbose)
    sector = ctx.result.sector
    info = sector.info

    header = Table(title=escape(info.name), show_header=False)
    header.add_row("Callsign", escape(info.default_callsign))
    header.add_row("Airport", escape(info.default_airport))
    header.add_row(
        "Centre",
        f"{info.default_centre_pt.lat:.4f} {info.default_centre_pt.lon:.4f}",
    )
    header.add_row("Magnetic variation", f"{info.magnetic_variation:g}")
    console.print(header)

    counts = Table(title="Entities")
    counts.add_column("Entity", style="bold")
    counts.add_column("Count", justify="right")
    for name, count in sector.counts().items():
        counts.add_row(name.replace("_", " ").title(), str(count))

    counts.add_row("Line errors", str(len(ctx.errors)), style="red" if ctx.errors else None)
    for kind, count in ctx.errors_by_kind().items():
        counts.add_row(f"  {kind}", str(count), style="red")

    console.print(counts)
