from __future__ import annotations

from typing import Type

from sct_reader.core.exceptions import (
    InvalidFixError,
    InvalidVorOrNdbError,
    InvalidWaypointError,
    SectorError,
)
from sct_reader.geo.position import Position
from sct_reader.registry.entities import AirspaceClass, Fix, Ndb, Vor
from sct_reader.registry.partial import PartialAirport, PartialSector


def _fields(line: str, count: int, error_cls: Type[SectorError]):
    parts = line.split()
    if len(parts) < count:
        raise error_cls(f"Expected {count} fields, got {len(parts)}: {line!r}")
    return parts


def parse_airport_line(sector: PartialSector, line: str) -> None:
    """``EGLL 118.500 N051.28.39.000 W000.27.41.000 D``"""
    identifier, frequency, lat, lon, airspace = _fields(line, 5, InvalidWaypointError)[:5]
    position = Position.from_dms(lat, lon)
    airspace_class = AirspaceClass.parse(airspace)

    sector.airports.append(
        PartialAirport(
            identifier=identifier,
            position=position,
            tower_frequency=frequency,
            airspace_class=airspace_class,
        )
    )


def parse_vor_line(sector: PartialSector, line: str) -> None:
    identifier, frequency, lat, lon = _fields(line, 4, InvalidVorOrNdbError)[:4]
    sector.vors.append(Vor(identifier, Position.from_dms(lat, lon), frequency))


def parse_ndb_line(sector: PartialSector, line: str) -> None:
    identifier, frequency, lat, lon = _fields(line, 4, InvalidVorOrNdbError)[:4]
    sector.ndbs.append(Ndb(identifier, Position.from_dms(lat, lon), frequency))


def parse_fix_line(sector: PartialSector, line: str) -> None:
    identifier, lat, lon = _fields(line, 3, InvalidFixError)[:3]
    sector.fixes.append(Fix(identifier, Position.from_dms(lat, lon)))
