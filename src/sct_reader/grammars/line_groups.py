from __future__ import annotations

from sct_reader.config import DEFAULT_SID_STAR_NAME_WIDTH
from sct_reader.core.exceptions import (
    InvalidArtccEntryError,
    InvalidGeoEntryError,
    InvalidSidStarEntryError,
)
from sct_reader.grammars.continuation import select_group, split_name
from sct_reader.grammars.endpoints import lookup_endpoint
from sct_reader.registry.entities import ColouredLine
from sct_reader.registry.partial import LineGroupKind, PartialSector

# Two endpoints, each a lat/lon token pair.
SEGMENT_FIELDS = 4


def _error_cls(kind: LineGroupKind):
    if kind is LineGroupKind.GEO:
        return InvalidGeoEntryError
    if kind in (LineGroupKind.SID, LineGroupKind.STAR):
        return InvalidSidStarEntryError
    return InvalidArtccEntryError


def _append_segment(sector, kind, name, fields, colour, error_cls) -> None:
    # Lookup happens before group selection: a line with an unresolvable
    # endpoint leaves the tables untouched. Range is checked after selection.
    start = lookup_endpoint(sector, fields[0], fields[1], error_cls=error_cls)
    end = lookup_endpoint(sector, fields[2], fields[3], error_cls=error_cls)

    group = select_group(sector.table(kind), name, error_cls=error_cls)
    group.lines.append(ColouredLine.between(start.validate(), end.validate(), colour))


def parse_line_group_line(sector: PartialSector, line: str, kind: LineGroupKind) -> None:
    """
    Parse an ARTCC, airway or GEO line::

        [NAME ...] START_LAT START_LON END_LAT END_LON [COLOUR]

    Endpoints may be waypoint identifiers instead of coordinates.
    """
    error_cls = _error_cls(kind)
    tokens = line.split()

    colour = None
    if len(tokens) > SEGMENT_FIELDS:
        colour = sector.colours.resolve(tokens[-1])
        if colour is not None:
            tokens = tokens[:-1]

    name, fields = split_name(tokens, SEGMENT_FIELDS, error_cls=error_cls)
    _append_segment(sector, kind, name, fields, colour, error_cls)


def parse_sid_star_line(
    sector: PartialSector,
    line: str,
    kind: LineGroupKind,
    name_width: int = DEFAULT_SID_STAR_NAME_WIDTH,
) -> None:
    """
    Parse a SID or STAR line.

    The name lives in a fixed leading column ``name_width`` characters wide
    and may contain spaces. A blank name column continues the current entry.
    """
    error_cls = _error_cls(kind)
    if len(line) < name_width:
        raise error_cls(f"Line shorter than the {name_width}-character name column")

    name = line[:name_width].strip() or None
    tokens = line[name_width:].split()
    if len(tokens) < SEGMENT_FIELDS:
        raise error_cls(f"Expected {SEGMENT_FIELDS} endpoint fields, got {len(tokens)}")

    colour = None
    if len(tokens) > SEGMENT_FIELDS:
        colour = sector.colours.resolve(tokens[SEGMENT_FIELDS])

    _append_segment(sector, kind, name, tokens[:SEGMENT_FIELDS], colour, error_cls)
