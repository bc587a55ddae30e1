"""
Reader for line-oriented ``.sct`` sector files.

    from sct_reader import read_sector_file

    result = read_sector_file("EGTT.sct")
    sector = result.sector
    for error in result.errors:
        print(error.lineno, error.kind, error.raw)
"""

from sct_reader.core.exceptions import (
    AssemblyError,
    ErrorKind,
    MissingMetadataError,
    SectorError,
)
from sct_reader.geo import Colour, ColourRegistry, Heading, Position, UncheckedPosition
from sct_reader.parser_core import SectorParser, parse_lines, read_sector_file
from sct_reader.registry import (
    Airport,
    AirspaceClass,
    ColouredLine,
    Fix,
    Label,
    LineError,
    LineGroup,
    Ndb,
    ParseResult,
    Polygon,
    RegionGroup,
    RunwayEnd,
    RunwayModifier,
    RunwayStrip,
    Sector,
    SectorInfo,
    SimpleLine,
    Vor,
)

__version__ = "0.1.0"

__all__ = [
    "Airport",
    "AirspaceClass",
    "AssemblyError",
    "Colour",
    "ColourRegistry",
    "ColouredLine",
    "ErrorKind",
    "Fix",
    "Heading",
    "Label",
    "LineError",
    "LineGroup",
    "MissingMetadataError",
    "Ndb",
    "ParseResult",
    "Polygon",
    "Position",
    "RegionGroup",
    "RunwayEnd",
    "RunwayModifier",
    "RunwayStrip",
    "Sector",
    "SectorError",
    "SectorInfo",
    "SectorParser",
    "SimpleLine",
    "UncheckedPosition",
    "Vor",
    "parse_lines",
    "read_sector_file",
]
