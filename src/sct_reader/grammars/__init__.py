"""
Per-section grammars.

Each grammar takes the in-progress ``PartialSector`` and one cleaned line,
updates the tables, and raises a ``SectorError`` subclass when the line
cannot be used.
"""

from .colours import parse_colour_line
from .continuation import select_group, split_name
from .endpoints import lookup_endpoint, resolve_endpoint
from .info import INFO_FIELDS, parse_info_line
from .labels import parse_label_line
from .line_groups import parse_line_group_line, parse_sid_star_line
from .regions import parse_region_line
from .runway import parse_runway_line
from .waypoints import parse_airport_line, parse_fix_line, parse_ndb_line, parse_vor_line

__all__ = [
    "INFO_FIELDS",
    "parse_airport_line",
    "parse_colour_line",
    "parse_fix_line",
    "parse_info_line",
    "parse_label_line",
    "parse_line_group_line",
    "parse_ndb_line",
    "parse_region_line",
    "parse_runway_line",
    "parse_sid_star_line",
    "lookup_endpoint",
    "parse_vor_line",
    "resolve_endpoint",
    "select_group",
    "split_name",
]
