# src/sct_reader/loader/__init__.py

"""
Public interface for the sector file loader stack.

    from sct_reader.loader import (
        SourceLine,
        FileSection,
        clean_line,
        scan_lines,
        parse_section_header,
        load_lines,
    )
"""

from __future__ import annotations

from .file_loader import load_lines
from .scanner import SourceLine, clean_line, scan_lines
from .sections import FileSection, parse_section_header

__all__ = [
    "FileSection",
    "SourceLine",
    "clean_line",
    "load_lines",
    "parse_section_header",
    "scan_lines",
]
