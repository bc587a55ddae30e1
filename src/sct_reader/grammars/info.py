from __future__ import annotations

from sct_reader.core.exceptions import InvalidCoordinateError, SectorInfoError
from sct_reader.geo.position import decode_coordinate
from sct_reader.registry.partial import INFO_FIELDS, PartialSectorInfo

_COORDINATE_FIELDS = {"default_centre_pt_lat", "default_centre_pt_lon"}
_TEXT_FIELDS = {"name", "default_callsign", "default_airport"}


def parse_info_line(info: PartialSectorInfo, line: str) -> None:
    """
    Assign the next INFO field from ``line``.

    Fields are positional: the Nth line of the section fills the Nth field
    of ``INFO_FIELDS``. The slot is consumed even when the value is bad, so
    one broken line does not shift every later field.
    """
    info.lines_seen += 1
    index = info.lines_seen - 1
    if index >= len(INFO_FIELDS):
        raise SectorInfoError(
            f"Unexpected INFO line {info.lines_seen}; only {len(INFO_FIELDS)} are defined"
        )

    field_name = INFO_FIELDS[index]
    value = line.strip()

    if field_name in _TEXT_FIELDS:
        setattr(info, field_name, value)
        return

    if field_name in _COORDINATE_FIELDS:
        try:
            setattr(info, field_name, decode_coordinate(value))
        except InvalidCoordinateError as exc:
            raise SectorInfoError(f"{field_name}: {exc}") from exc
        return

    try:
        setattr(info, field_name, float(value))
    except ValueError:
        raise SectorInfoError(f"{field_name} is not a number: {value!r}") from None
