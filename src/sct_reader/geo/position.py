# src/sct_reader/geo/position.py

"""
Coordinate decoding and the two position states.

``UncheckedPosition`` is what the decoders produce. ``Position`` is the only
type stored on entities, and it cannot hold an out-of-range point:
``UncheckedPosition.validate()`` is the bridge between the two.

Sector files write coordinates as hemisphere-prefixed DMS tokens::

    N051.07.25.010 E002.39.13.334
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sct_reader.core.exceptions import (
    InvalidCoordinateError,
    InvalidHeadingError,
    InvalidPositionError,
)

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

_HEMISPHERE_SIGN = {"N": 1.0, "E": 1.0, "S": -1.0, "W": -1.0}


def decode_coordinate(token: str) -> float:
    """
    Decode one DMS token into signed decimal degrees.

    The first character is the hemisphere letter (N/S/E/W, any case); the
    remainder must be exactly three dot-separated numbers. The last field
    (seconds) may be fractional.

    Raises:
        InvalidCoordinateError: on a missing/unknown prefix, a field count
        other than three, or a field that is not a number.
    """
    if not token:
        raise InvalidCoordinateError("Empty coordinate token")

    sign = _HEMISPHERE_SIGN.get(token[0].upper())
    if sign is None:
        raise InvalidCoordinateError(f"Unknown hemisphere prefix in {token!r}")

    # Seconds may carry a fractional part, so only the first two dots split.
    fields = token[1:].split(".", 2)
    if len(fields) != 3:
        raise InvalidCoordinateError(
            f"Expected degrees.minutes.seconds in {token!r}, got {len(fields)} fields"
        )

    try:
        degrees, minutes, seconds = (float(f) for f in fields)
    except ValueError:
        raise InvalidCoordinateError(f"Non-numeric field in {token!r}") from None

    return sign * (degrees + minutes / 60.0 + seconds / 3600.0)


def decode_decimal(token: Union[str, float, int]) -> float:
    """Decode a plain signed decimal coordinate such as ``-0.4614``."""
    try:
        return float(token)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Not a decimal coordinate: {token!r}") from None


@dataclass(frozen=True, slots=True)
class UncheckedPosition:
    """A freshly decoded point that has not been range-checked."""

    lat: float
    lon: float

    @classmethod
    def from_dms(cls, lat: str, lon: str) -> "UncheckedPosition":
        try:
            return cls(decode_coordinate(lat), decode_coordinate(lon))
        except InvalidCoordinateError as exc:
            raise InvalidPositionError(str(exc)) from exc

    @classmethod
    def from_decimal(
        cls, lat: Union[str, float, int], lon: Union[str, float, int]
    ) -> "UncheckedPosition":
        try:
            return cls(decode_decimal(lat), decode_decimal(lon))
        except InvalidCoordinateError as exc:
            raise InvalidPositionError(str(exc)) from exc

    def is_valid(self) -> bool:
        return abs(self.lat) <= MAX_LATITUDE and abs(self.lon) <= MAX_LONGITUDE

    def validate(self) -> "Position":
        return Position(self.lat, self.lon)


@dataclass(frozen=True, slots=True)
class Position:
    """A point within +/-90 latitude and +/-180 longitude."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons and is rejected with the rest.
        if not (abs(self.lat) <= MAX_LATITUDE and abs(self.lon) <= MAX_LONGITUDE):
            raise InvalidPositionError(
                f"Position out of range: lat={self.lat}, lon={self.lon}"
            )

    @classmethod
    def from_dms(cls, lat: str, lon: str) -> "Position":
        return UncheckedPosition.from_dms(lat, lon).validate()

    @classmethod
    def from_decimal(
        cls, lat: Union[str, float, int], lon: Union[str, float, int]
    ) -> "Position":
        return UncheckedPosition.from_decimal(lat, lon).validate()


@dataclass(frozen=True, slots=True)
class Heading:
    """Magnetic heading in degrees, 1-360. Zero is stored as 360."""

    degrees: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.degrees <= 360.0:
            raise InvalidHeadingError(f"Heading out of range: {self.degrees}")
        if self.degrees == 0.0:
            object.__setattr__(self, "degrees", 360.0)

    @classmethod
    def parse(cls, token: str) -> "Heading":
        try:
            value = float(token)
        except ValueError:
            raise InvalidHeadingError(f"Heading is not numeric: {token!r}") from None
        return cls(value)

    def reciprocal(self) -> "Heading":
        if self.degrees > 180.0:
            return Heading(self.degrees - 180.0)
        return Heading(self.degrees + 180.0)

    def __str__(self) -> str:
        return f"{round(self.degrees):03d}"
