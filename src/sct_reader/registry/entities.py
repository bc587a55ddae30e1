from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Tuple, Union

from sct_reader.core.exceptions import (
    ErrorKind,
    InvalidAirspaceClassError,
    InvalidRunwayError,
)
from sct_reader.geo.colour import Colour
from sct_reader.geo.position import Heading, Position


# -----------------------------
# Waypoints
# -----------------------------

class AirspaceClass(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @classmethod
    def parse(cls, token: str) -> "AirspaceClass":
        try:
            return cls(token.upper())
        except ValueError:
            raise InvalidAirspaceClassError(
                f"Unknown airspace class: {token!r}"
            ) from None


class Waypoint(Protocol):
    """Anything with an identifier and a validated position."""

    identifier: str
    position: Position


@dataclass(frozen=True, slots=True)
class Fix:
    identifier: str
    position: Position


@dataclass(frozen=True, slots=True)
class Vor:
    identifier: str
    position: Position
    frequency: str


@dataclass(frozen=True, slots=True)
class Ndb:
    identifier: str
    position: Position
    frequency: str


# -----------------------------
# Runways
# -----------------------------

class RunwayModifier(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    CENTRE = "C"
    GRASS = "G"
    NONE = ""

    def reciprocal(self) -> "RunwayModifier":
        if self is RunwayModifier.LEFT:
            return RunwayModifier.RIGHT
        if self is RunwayModifier.RIGHT:
            return RunwayModifier.LEFT
        return self

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RunwayEnd:
    """
    One end of a runway.

    Attributes:
        number: Runway designator number, 1-36 (``00`` is stored as 36).
        modifier: Parallel runway suffix.
        heading: Magnetic heading flown when departing from this end.
        threshold: Threshold position of this end.
        opposite_threshold: Threshold position of the far end.
    """

    number: int
    modifier: RunwayModifier
    heading: Heading
    threshold: Position
    opposite_threshold: Position

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 36:
            raise InvalidRunwayError(f"Runway number out of range: {self.number}")

    @property
    def identifier(self) -> str:
        return f"{self.number:02d}{self.modifier}"

    def reciprocal_number(self) -> int:
        return self.number - 18 if self.number > 18 else self.number + 18

    def reciprocal(self) -> "RunwayEnd":
        return RunwayEnd(
            number=self.reciprocal_number(),
            modifier=self.modifier.reciprocal(),
            heading=self.heading.reciprocal(),
            threshold=self.opposite_threshold,
            opposite_threshold=self.threshold,
        )


@dataclass(frozen=True, slots=True)
class RunwayStrip:
    """Two runway ends, ordered so ``end_a.number <= end_b.number``."""

    end_a: RunwayEnd
    end_b: RunwayEnd

    @property
    def identifier(self) -> str:
        return f"{self.end_a.identifier}/{self.end_b.identifier}"


@dataclass(frozen=True, slots=True)
class Airport:
    identifier: str
    position: Position
    tower_frequency: str
    airspace_class: AirspaceClass
    runways: Tuple[RunwayStrip, ...] = ()


# -----------------------------
# Lines
# -----------------------------

class Line(Protocol):
    """Capability shared by every segment kind."""

    @property
    def start(self) -> Position: ...

    @property
    def end(self) -> Position: ...


@dataclass(frozen=True, slots=True)
class SimpleLine:
    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class ColouredLine:
    """A segment with an optional colour; None means the kind's default."""

    line: SimpleLine
    colour: Optional[Colour] = None

    @classmethod
    def between(
        cls, start: Position, end: Position, colour: Optional[Colour] = None
    ) -> "ColouredLine":
        return cls(SimpleLine(start, end), colour)

    @property
    def start(self) -> Position:
        return self.line.start

    @property
    def end(self) -> Position:
        return self.line.end


AnyLine = Union[SimpleLine, ColouredLine]


@dataclass(frozen=True, slots=True)
class LineGroup:
    """A named polyline group: ARTCC boundary, airway, SID, STAR or GEO entry."""

    name: str
    lines: Tuple[ColouredLine, ...] = ()


# -----------------------------
# Regions and labels
# -----------------------------

@dataclass(frozen=True, slots=True)
class Polygon:
    colour: Colour
    vertices: Tuple[Position, ...] = ()


@dataclass(frozen=True, slots=True)
class RegionGroup:
    name: str
    polygons: Tuple[Polygon, ...] = ()


@dataclass(frozen=True, slots=True)
class Label:
    text: str
    position: Position
    colour: Optional[Colour] = None


# -----------------------------
# Sector aggregate
# -----------------------------

@dataclass(frozen=True, slots=True)
class SectorInfo:
    name: str
    default_callsign: str
    default_airport: str
    default_centre_pt: Position
    n_mi_per_deg_lat: float
    n_mi_per_deg_lon: float
    magnetic_variation: float
    sector_scale: float


def _by_identifier(entries, identifier: str):
    for entry in entries:
        if entry.identifier == identifier:
            return entry
    return None


@dataclass(frozen=True, slots=True)
class Sector:
    """
    Fully validated, immutable sector.

    Tables keep file order. Waypoint identifiers are not required to be
    unique; lookups return the first declaration.
    """

    info: SectorInfo
    colours: Mapping[str, Colour] = field(default_factory=lambda: MappingProxyType({}))
    airports: Tuple[Airport, ...] = ()
    vors: Tuple[Vor, ...] = ()
    ndbs: Tuple[Ndb, ...] = ()
    fixes: Tuple[Fix, ...] = ()
    artcc_entries: Tuple[LineGroup, ...] = ()
    artcc_high_entries: Tuple[LineGroup, ...] = ()
    artcc_low_entries: Tuple[LineGroup, ...] = ()
    low_airways: Tuple[LineGroup, ...] = ()
    high_airways: Tuple[LineGroup, ...] = ()
    sid_entries: Tuple[LineGroup, ...] = ()
    star_entries: Tuple[LineGroup, ...] = ()
    geo_entries: Tuple[LineGroup, ...] = ()
    regions: Tuple[RegionGroup, ...] = ()
    labels: Tuple[Label, ...] = ()

    def airport(self, identifier: str) -> Optional[Airport]:
        return _by_identifier(self.airports, identifier)

    def vor(self, identifier: str) -> Optional[Vor]:
        return _by_identifier(self.vors, identifier)

    def ndb(self, identifier: str) -> Optional[Ndb]:
        return _by_identifier(self.ndbs, identifier)

    def fix(self, identifier: str) -> Optional[Fix]:
        return _by_identifier(self.fixes, identifier)

    def find_waypoint(self, identifier: str) -> Optional[Waypoint]:
        """Fix, then VOR, then NDB, then airport: the endpoint resolution order."""
        for table in (self.fixes, self.vors, self.ndbs, self.airports):
            found = _by_identifier(table, identifier)
            if found is not None:
                return found
        return None

    def counts(self) -> Mapping[str, int]:
        return {
            "airports": len(self.airports),
            "runways": sum(len(a.runways) for a in self.airports),
            "vors": len(self.vors),
            "ndbs": len(self.ndbs),
            "fixes": len(self.fixes),
            "artcc": len(self.artcc_entries),
            "artcc_high": len(self.artcc_high_entries),
            "artcc_low": len(self.artcc_low_entries),
            "low_airways": len(self.low_airways),
            "high_airways": len(self.high_airways),
            "sids": len(self.sid_entries),
            "stars": len(self.star_entries),
            "geo": len(self.geo_entries),
            "regions": len(self.regions),
            "labels": len(self.labels),
            "colours": len(self.colours),
        }


@dataclass(frozen=True, slots=True)
class LineError:
    """A recoverable failure recorded while scanning one input line."""

    lineno: int
    raw: str
    kind: ErrorKind
    message: str = ""


@dataclass(frozen=True, slots=True)
class ParseResult:
    sector: Sector
    errors: Tuple[LineError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors
