from __future__ import annotations

from sct_reader.core.exceptions import InvalidCoordinateError, InvalidLabelError
from sct_reader.geo.position import Position, decode_coordinate
from sct_reader.registry.entities import Label
from sct_reader.registry.partial import PartialSector


def _is_coordinate(token: str) -> bool:
    try:
        decode_coordinate(token)
    except InvalidCoordinateError:
        return False
    return True


def parse_label_line(sector: PartialSector, line: str) -> None:
    """
    ``"Heathrow Tower" N051.28.39.000 W000.27.41.000 COLOR_Label``

    The colour is optional. Surrounding double quotes are removed from the
    text.
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise InvalidLabelError(f"Expected text, lat and lon: {line!r}")

    colour = None
    if len(tokens) >= 4 and not _is_coordinate(tokens[-1]):
        colour = sector.colours.resolve(tokens[-1])
        if colour is None:
            raise InvalidLabelError(f"Unknown label colour {tokens[-1]!r}")
        tokens = tokens[:-1]

    position = Position.from_dms(tokens[-2], tokens[-1])
    text = " ".join(tokens[:-2]).strip('"')

    sector.labels.append(Label(text=text, position=position, colour=colour))
