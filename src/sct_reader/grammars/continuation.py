"""
Shared new-vs-extend rule for multi-line groups.

Boundary, airway, GEO, SID and STAR entries span many lines. A line that
carries a name opens (or re-selects) the group with that name; a line with
no name continues the group most recently opened or selected::

    Milano ACC   N043.34.13.000 E008.19.18.199 N043.42.07.000 E007.50.15.000
                 N043.42.07.000 E007.50.15.000 N043.50.00.000 E007.40.00.000
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Type

from sct_reader.core.exceptions import SectorError
from sct_reader.registry.partial import LineGroupTable, PartialLineGroup


def split_name(
    tokens: Sequence[str], fixed_fields: int, *, error_cls: Type[SectorError]
) -> Tuple[Optional[str], List[str]]:
    """
    Separate the optional leading name from the trailing positional fields.

    Returns (name, fields) where ``name`` is the leading tokens joined by
    single spaces, or None when the line has exactly ``fixed_fields`` tokens.
    """
    if len(tokens) < fixed_fields:
        raise error_cls(
            f"Expected at least {fixed_fields} fields, got {len(tokens)}"
        )
    if len(tokens) == fixed_fields:
        return None, list(tokens)

    split_at = len(tokens) - fixed_fields
    return " ".join(tokens[:split_at]), list(tokens[split_at:])


def select_group(
    table: LineGroupTable, name: Optional[str], *, error_cls: Type[SectorError]
) -> PartialLineGroup:
    """
    Return the group a line belongs to, opening one if needed.

    * Named, tail already has that name: extend the tail.
    * Named, an earlier group has that name: extend it and make it current.
    * Named, unseen: open a new group at the end of the table.
    * Unnamed: extend the current group, or fail if nothing is open.
    """
    if name is None:
        if table.current is None:
            raise error_cls(f"Continuation line with no open {table.kind.value} entry")
        return table.current

    tail = table.groups[-1] if table.groups else None
    if tail is not None and tail.name == name:
        table.current = tail
        return tail

    existing = table.find(name)
    if existing is not None:
        table.current = existing
        return existing

    return table.open(name)
