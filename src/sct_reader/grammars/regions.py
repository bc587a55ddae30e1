"""
REGIONS grammar.

    REGIONNAME Heathrow Aprons
    COLOR_Apron  N051.28.10.000 W000.27.30.000
                 N051.28.20.000 W000.27.30.000
                 N051.28.20.000 W000.27.10.000

``REGIONNAME`` opens (or re-selects) a region group. A line led by a colour
starts a new polygon in that group; a bare coordinate pair adds a vertex to
the open polygon.
"""

from __future__ import annotations

from sct_reader.core.exceptions import InvalidRegionError
from sct_reader.geo.position import Position
from sct_reader.registry.partial import (
    PartialPolygon,
    PartialRegionGroup,
    PartialSector,
)

REGION_NAME_KEYWORD = "REGIONNAME"


def _open_region(sector: PartialSector, name: str) -> None:
    region = sector.find_region(name)
    if region is None:
        region = PartialRegionGroup(name)
        sector.regions.append(region)
    region.polygons.append(PartialPolygon())
    sector.current_region = region


def parse_region_line(sector: PartialSector, line: str) -> None:
    tokens = line.split()

    if tokens and tokens[0].upper() == REGION_NAME_KEYWORD:
        if len(tokens) < 2:
            raise InvalidRegionError("REGIONNAME without a name")
        _open_region(sector, " ".join(tokens[1:]))
        return

    if len(tokens) == 3:
        colour = sector.colours.resolve(tokens[0])
        if colour is None:
            raise InvalidRegionError(f"Unknown region colour {tokens[0]!r}")
        position = Position.from_dms(tokens[1], tokens[2])

        region = sector.current_region
        if region is None:
            raise InvalidRegionError("Region polygon with no REGIONNAME open")

        polygon = region.open_polygon
        if polygon is None or polygon.colour is not None or polygon.vertices:
            polygon = PartialPolygon()
            region.polygons.append(polygon)
        polygon.colour = colour
        polygon.vertices.append(position)
        return

    if len(tokens) == 2:
        position = Position.from_dms(tokens[0], tokens[1])
        region = sector.current_region
        polygon = region.open_polygon if region is not None else None
        if polygon is None:
            raise InvalidRegionError("Region vertex with no polygon open")
        polygon.vertices.append(position)
        return

    raise InvalidRegionError(f"Unexpected region line with {len(tokens)} fields")
