from __future__ import annotations

from typing import Type

from sct_reader.core.exceptions import (
    InvalidCoordinateError,
    InvalidPositionError,
    SectorError,
)
from sct_reader.geo.position import Position, UncheckedPosition
from sct_reader.registry.partial import PartialSector


def lookup_endpoint(
    sector: PartialSector,
    lat: str,
    lon: str,
    *,
    error_cls: Type[SectorError],
) -> UncheckedPosition:
    """
    Find one segment endpoint without range-checking it.

    A literal DMS pair wins. Otherwise ``lat`` is looked up as a waypoint
    identifier (fixes, VORs, NDBs, airports).
    """
    try:
        return UncheckedPosition.from_dms(lat, lon)
    except (InvalidCoordinateError, InvalidPositionError):
        pass

    position = sector.lookup_waypoint_position(lat)
    if position is None:
        raise error_cls(f"Unresolvable endpoint: {lat} {lon}")
    return UncheckedPosition(position.lat, position.lon)


def resolve_endpoint(
    sector: PartialSector,
    lat: str,
    lon: str,
    *,
    error_cls: Type[SectorError],
) -> Position:
    """
    Look up one endpoint and promote it to a ``Position``.

    A literal that decodes but is out of range is an error; it does not fall
    back to the waypoint tables.
    """
    return lookup_endpoint(sector, lat, lon, error_cls=error_cls).validate()
