"""
Runway designator parsing and strip pairing.
"""

from __future__ import annotations

from typing import Tuple

from sct_reader.core.exceptions import InvalidRunwayError
from sct_reader.geo.position import Heading, Position
from sct_reader.registry.entities import RunwayEnd, RunwayModifier, RunwayStrip

_MODIFIERS = {
    "L": RunwayModifier.LEFT,
    "C": RunwayModifier.CENTRE,
    "R": RunwayModifier.RIGHT,
    "G": RunwayModifier.GRASS,
}


def parse_runway_identifier(token: str) -> Tuple[int, RunwayModifier]:
    """
    Split a designator such as ``09L`` into (9, LEFT).

    ``00`` becomes 36. Numbers above 36 are rejected.
    """
    modifier = RunwayModifier.NONE
    digits = token
    if token and token[-1].upper() in _MODIFIERS:
        modifier = _MODIFIERS[token[-1].upper()]
        digits = token[:-1]

    if not (digits.isascii() and digits.isdigit()):
        raise InvalidRunwayError(f"Invalid runway designator: {token!r}")

    number = int(digits)
    if number > 36:
        raise InvalidRunwayError(f"Runway number out of range: {token!r}")
    if number == 0:
        number = 36
    return number, modifier


def pair_runway_ends(
    designator_a: str,
    designator_b: str,
    heading_a: Heading,
    heading_b: Heading,
    threshold_a: Position,
    threshold_b: Position,
) -> RunwayStrip:
    """
    Build a strip from the two ends declared on one RUNWAY line.

    Each end's opposite threshold is the other end's threshold. The ends are
    swapped when needed so the lower runway number comes first.
    """
    number_a, modifier_a = parse_runway_identifier(designator_a)
    number_b, modifier_b = parse_runway_identifier(designator_b)

    end_a = RunwayEnd(
        number=number_a,
        modifier=modifier_a,
        heading=heading_a,
        threshold=threshold_a,
        opposite_threshold=threshold_b,
    )
    end_b = RunwayEnd(
        number=number_b,
        modifier=modifier_b,
        heading=heading_b,
        threshold=threshold_b,
        opposite_threshold=threshold_a,
    )

    if end_a.number > end_b.number:
        end_a, end_b = end_b, end_a

    return RunwayStrip(end_a=end_a, end_b=end_b)
