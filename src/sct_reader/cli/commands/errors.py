
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sct_reader.cli.utils import load_sector

console = Console()


def errors_command(
    sector_file: Path = typer.Argument(..., exists=True, readable=True),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Show at most this many errors",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print parse timing",
    ),
):
    """
    List the lines that could not be used, in file order.
    """
    ctx = load_sector(sector_file, verbose=verbose)
    errors = ctx.errors if limit is None else ctx.errors[:limit]

    if not errors:
        console.print("[green]No line errors.[/green]")
        return

    table = Table(title=f"{len(ctx.errors)} line error(s)")
    table.add_column("Line", justify="right")
    table.add_column("Kind", style="bold")
    table.add_column("Message")
    table.add_column("Text", overflow="fold")

    for error in errors:
        table.add_row(str(error.lineno), str(error.kind), escape(error.message), escape(error.raw))

    console.print(table)
