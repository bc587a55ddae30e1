# src/sct_reader/loader/scanner.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

COMMENT_CHAR = ";"
SECTION_PREFIX = "["
COLOUR_DEFINE_PREFIX = "#define"


@dataclass(frozen=True)
class SourceLine:
    """
    A sector file line that survived cleaning.

    Attributes:
        lineno: 1-based line number in the original input.
        raw: The original line without its trailing newline.
        text: The line with trailing whitespace and any ``;`` comment removed.
            Leading whitespace is kept; SID/STAR lines depend on it.
    """
    lineno: int
    raw: str
    text: str

    @property
    def is_section_header(self) -> bool:
        return self.text.startswith(SECTION_PREFIX)

    @property
    def is_colour_define(self) -> bool:
        return self.text.startswith(COLOUR_DEFINE_PREFIX)


def clean_line(line: str, lineno: int = 0) -> Optional[str]:
    """
    Strip comments and trailing whitespace from one line.

    Returns None for lines that carry nothing: blank lines, full-line
    comments, and lines that are empty once the comment is cut off.
    """
    raw = line.rstrip("\r\n")

    # Handle optional UTF-8 BOM on the very first line.
    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    text = raw.rstrip()
    if not text or text.startswith(COMMENT_CHAR):
        return None

    if COMMENT_CHAR in text:
        text = text.split(COMMENT_CHAR, 1)[0].rstrip()
        if not text.strip():
            return None

    return text


def scan_lines(lines: Iterable[str]) -> Iterator[SourceLine]:
    """
    Yield a SourceLine for every meaningful line, numbering from 1.

    Skipped lines still advance the line counter so numbers match the file.
    """
    for lineno, line in enumerate(lines, start=1):
        text = clean_line(line, lineno=lineno)
        if text is None:
            continue
        yield SourceLine(lineno=lineno, raw=line.rstrip("\r\n"), text=text)
