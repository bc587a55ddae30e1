
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from sct_reader.config import get_config
from sct_reader.core.context import ParseContext
from sct_reader.core.exceptions import ParseExecutionError
from sct_reader.core.pipeline import Pipeline
from sct_reader.logging import get_logger

console = Console()
err_console = Console(stderr=True)


def load_sector(path: Path, *, verbose: bool = False) -> ParseContext:
    """
    Run the parse pipeline for one file and return its finished context.

    A fatal assembly error is reported as a single diagnostic and exits
    with status 1.
    """
    cfg = get_config()
    ctx = ParseContext(
        config=cfg,
        logger=get_logger("cli"),
        input_path=path,
        debug=bool(cfg.debug),
    )

    try:
        Pipeline(ctx).run()
    except ParseExecutionError as exc:
        err_console.print(f"[red]Sector file unusable:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        console.log(f"Parsed {path} in {ctx.stats['elapsed_s']:.2f}s")

    return ctx
