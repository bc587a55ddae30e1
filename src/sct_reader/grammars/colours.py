from __future__ import annotations

from sct_reader.registry.partial import PartialSector


def parse_colour_line(sector: PartialSector, line: str) -> None:
    """``#define COLOR_AoRcenter1 8421504``"""
    sector.colours.parse_definition(line)
