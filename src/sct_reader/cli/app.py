
from __future__ import annotations

from typing import Optional

import typer

from sct_reader import __version__
from sct_reader.cli.commands.errors import errors_command
from sct_reader.cli.commands.find import find_command
from sct_reader.cli.commands.stats import stats_command

app = typer.Typer(
    name="sct",
    help="Inspect .sct sector files: entity counts, line errors, waypoint lookup",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("errors")(errors_command)
app.command("find")(find_command)


def _print_version(value: bool):
    if value:
        typer.echo(f"sct-reader {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    pass


def main():
    app()


if __name__ == "__main__":
    main()
