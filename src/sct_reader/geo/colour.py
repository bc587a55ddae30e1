# src/sct_reader/geo/colour.py

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from sct_reader.core.exceptions import InvalidColourDefinitionError

MAX_PACKED_COLOUR = 0xFFFFFF


@dataclass(frozen=True, slots=True)
class Colour:
    """
    RGB colour.

    Sector files pack colours into a single decimal integer with red in the
    low byte, then green, then blue (``255`` is pure red).
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidColourDefinitionError(
                    f"Colour channel out of range: {channel}"
                )

    @classmethod
    def from_packed(cls, value: int) -> "Colour":
        if not 0 <= value <= MAX_PACKED_COLOUR:
            raise InvalidColourDefinitionError(f"Packed colour out of range: {value}")
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)

    @classmethod
    def parse(cls, token: str) -> "Colour":
        """Parse a decimal packed-integer literal such as ``16777215``."""
        try:
            value = int(token, 10)
        except ValueError:
            raise InvalidColourDefinitionError(
                f"Colour literal is not an integer: {token!r}"
            ) from None
        return cls.from_packed(value)

    @property
    def packed(self) -> int:
        return self.r | (self.g << 8) | (self.b << 16)

    def as_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class ColourRegistry:
    """
    Named colours declared by ``#define`` lines of one sector file.

    A registry belongs to a single parse; names are matched exactly.
    """

    def __init__(self) -> None:
        self._colours: Dict[str, Colour] = {}

    def __len__(self) -> int:
        return len(self._colours)

    def __contains__(self, name: object) -> bool:
        return name in self._colours

    def define(self, name: str, colour: Colour) -> None:
        self._colours[name] = colour

    def get(self, name: str) -> Optional[Colour]:
        return self._colours.get(name)

    def parse_definition(self, line: str) -> Colour:
        """
        Register a ``#define NAME VALUE`` line and return the colour.

        Raises:
            InvalidColourDefinitionError: if the name or value is missing, or
            the value is not a packed colour literal.
        """
        parts = line.split()
        if len(parts) < 3:
            raise InvalidColourDefinitionError(
                f"Colour definition needs a name and a value: {line!r}"
            )
        name, literal = parts[1], parts[2]
        colour = Colour.parse(literal)
        self.define(name, colour)
        return colour

    def resolve(self, token: str) -> Optional[Colour]:
        """
        Resolve a colour reference: integer literal first, then a defined
        name. Returns None when neither applies.
        """
        try:
            return Colour.parse(token)
        except InvalidColourDefinitionError:
            return self._colours.get(token)

    def snapshot(self) -> Mapping[str, Colour]:
        """Read-only copy for the assembled sector."""
        return MappingProxyType(dict(self._colours))
