from __future__ import annotations

from pathlib import Path
from typing import List, Union

from sct_reader.logging import get_logger

log = get_logger("loader")


def load_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a sector file into memory as a list of lines (newlines stripped).

    Undecodable bytes are replaced rather than aborting the read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Sector file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        lines = f.read().splitlines()

    log.info("Loaded sector file: %s (%d lines)", file_path, len(lines))
    return lines
