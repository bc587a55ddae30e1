"""
Geographic primitives: positions, headings and colours.
"""

from .colour import Colour, ColourRegistry
from .position import (
    Heading,
    Position,
    UncheckedPosition,
    decode_coordinate,
    decode_decimal,
)

__all__ = [
    "Colour",
    "ColourRegistry",
    "Heading",
    "Position",
    "UncheckedPosition",
    "decode_coordinate",
    "decode_decimal",
]
