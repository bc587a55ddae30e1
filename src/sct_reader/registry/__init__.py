from __future__ import annotations

from .build_sector import build_sector
from .entities import (
    Airport,
    AirspaceClass,
    AnyLine,
    ColouredLine,
    Fix,
    Label,
    Line,
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
    Waypoint,
)
from .partial import LineGroupKind, PartialSector
from .runways import pair_runway_ends, parse_runway_identifier

__all__ = [
    "Airport",
    "AirspaceClass",
    "AnyLine",
    "ColouredLine",
    "Fix",
    "Label",
    "Line",
    "LineError",
    "LineGroup",
    "LineGroupKind",
    "Ndb",
    "ParseResult",
    "PartialSector",
    "Polygon",
    "RegionGroup",
    "RunwayEnd",
    "RunwayModifier",
    "RunwayStrip",
    "Sector",
    "SectorInfo",
    "SimpleLine",
    "Vor",
    "Waypoint",
    "build_sector",
    "pair_runway_ends",
    "parse_runway_identifier",
]
