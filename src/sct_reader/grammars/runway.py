from __future__ import annotations

from sct_reader.core.exceptions import InvalidRunwayError
from sct_reader.geo.position import Heading, Position
from sct_reader.registry.partial import PartialSector
from sct_reader.registry.runways import pair_runway_ends


def parse_runway_line(sector: PartialSector, line: str) -> None:
    """
    Parse a RUNWAY line and attach the strip to its airport::

        09L 27R 090 270 N051.28.38.820 W000.29.06.200 N051.28.39.760 W000.26.00.940 EGLL

    The airport must already be declared in the AIRPORT section.
    """
    parts = line.split()
    if len(parts) < 9:
        raise InvalidRunwayError(f"Expected 9 fields, got {len(parts)}: {line!r}")

    designator_a, designator_b = parts[0], parts[1]
    heading_a = Heading.parse(parts[2])
    heading_b = Heading.parse(parts[3])
    threshold_a = Position.from_dms(parts[4], parts[5])
    threshold_b = Position.from_dms(parts[6], parts[7])
    airport_id = parts[8]

    airport = sector.find_airport(airport_id)
    if airport is None:
        raise InvalidRunwayError(f"Runway references unknown airport {airport_id!r}")

    strip = pair_runway_ends(
        designator_a,
        designator_b,
        heading_a,
        heading_b,
        threshold_a,
        threshold_b,
    )
    airport.runways.append(strip)
