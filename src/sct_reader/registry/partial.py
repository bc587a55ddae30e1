"""
Mutable accumulation tables for a sector file that is still being scanned.

Nothing here is handed to callers: ``build_sector`` promotes a
``PartialSector`` into the frozen ``Sector`` once scanning is finished.
Only validated ``Position`` values are ever stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from sct_reader.geo.colour import Colour, ColourRegistry
from sct_reader.geo.position import Position, UncheckedPosition
from sct_reader.registry.entities import (
    AirspaceClass,
    ColouredLine,
    Fix,
    Label,
    Ndb,
    RunwayStrip,
    Vor,
)


class LineGroupKind(str, Enum):
    ARTCC = "artcc"
    ARTCC_HIGH = "artcc_high"
    ARTCC_LOW = "artcc_low"
    LOW_AIRWAY = "low_airway"
    HIGH_AIRWAY = "high_airway"
    SID = "sid"
    STAR = "star"
    GEO = "geo"


@dataclass
class PartialAirport:
    identifier: str
    position: Position
    tower_frequency: str
    airspace_class: AirspaceClass
    runways: List[RunwayStrip] = field(default_factory=list)


@dataclass
class PartialLineGroup:
    name: str
    lines: List[ColouredLine] = field(default_factory=list)


@dataclass
class LineGroupTable:
    """
    Ordered groups of one kind plus the continuation target.

    ``current`` is the group that unnamed continuation lines extend. It is
    normally the tail of ``groups`` but moves back to an earlier group when
    a named line repeats that group's name.
    """

    kind: LineGroupKind
    groups: List[PartialLineGroup] = field(default_factory=list)
    current: Optional[PartialLineGroup] = None
    _by_name: Dict[str, PartialLineGroup] = field(
        default_factory=dict, init=False, repr=False
    )

    def __len__(self) -> int:
        return len(self.groups)

    def find(self, name: str) -> Optional[PartialLineGroup]:
        return self._by_name.get(name)

    def open(self, name: str) -> PartialLineGroup:
        group = PartialLineGroup(name)
        self.groups.append(group)
        self._by_name[name] = group
        self.current = group
        return group


@dataclass
class PartialPolygon:
    colour: Optional[Colour] = None
    vertices: List[Position] = field(default_factory=list)


@dataclass
class PartialRegionGroup:
    name: str
    polygons: List[PartialPolygon] = field(default_factory=list)

    @property
    def open_polygon(self) -> Optional[PartialPolygon]:
        return self.polygons[-1] if self.polygons else None


INFO_FIELDS = (
    "name",
    "default_callsign",
    "default_airport",
    "default_centre_pt_lat",
    "default_centre_pt_lon",
    "n_mi_per_deg_lat",
    "n_mi_per_deg_lon",
    "magnetic_variation",
    "sector_scale",
)


@dataclass
class PartialSectorInfo:
    """
    INFO section fields, filled strictly in line order.

    The centre point is kept as raw coordinates until assembly, where it is
    promoted like any other position.
    """

    name: Optional[str] = None
    default_callsign: Optional[str] = None
    default_airport: Optional[str] = None
    default_centre_pt_lat: Optional[float] = None
    default_centre_pt_lon: Optional[float] = None
    n_mi_per_deg_lat: Optional[float] = None
    n_mi_per_deg_lon: Optional[float] = None
    magnetic_variation: Optional[float] = None
    sector_scale: Optional[float] = None

    lines_seen: int = 0

    def centre_point(self) -> Optional[UncheckedPosition]:
        if self.default_centre_pt_lat is None or self.default_centre_pt_lon is None:
            return None
        return UncheckedPosition(self.default_centre_pt_lat, self.default_centre_pt_lon)


@dataclass
class PartialSector:
    colours: ColourRegistry = field(default_factory=ColourRegistry)
    sector_info: PartialSectorInfo = field(default_factory=PartialSectorInfo)
    airports: List[PartialAirport] = field(default_factory=list)
    vors: List[Vor] = field(default_factory=list)
    ndbs: List[Ndb] = field(default_factory=list)
    fixes: List[Fix] = field(default_factory=list)
    line_groups: Dict[LineGroupKind, LineGroupTable] = field(default_factory=dict)
    regions: List[PartialRegionGroup] = field(default_factory=list)
    current_region: Optional[PartialRegionGroup] = None
    labels: List[Label] = field(default_factory=list)

    def __post_init__(self) -> None:
        for kind in LineGroupKind:
            self.line_groups.setdefault(kind, LineGroupTable(kind))

    def table(self, kind: LineGroupKind) -> LineGroupTable:
        return self.line_groups[kind]

    def find_airport(self, identifier: str) -> Optional[PartialAirport]:
        for airport in self.airports:
            if airport.identifier == identifier:
                return airport
        return None

    def find_region(self, name: str) -> Optional[PartialRegionGroup]:
        for region in self.regions:
            if region.name == name:
                return region
        return None

    def lookup_waypoint_position(self, identifier: str) -> Optional[Position]:
        """
        Position of a previously declared waypoint.

        Search order is fixes, VORs, NDBs, airports; the first match wins.
        """
        for table in (self.fixes, self.vors, self.ndbs, self.airports):
            for entry in table:
                if entry.identifier == identifier:
                    return entry.position
        return None
