# src/sct_reader/loader/sections.py

from __future__ import annotations

from enum import Enum

from sct_reader.core.exceptions import InvalidFileSectionError


class FileSection(str, Enum):
    COLOUR_DEFINITIONS = "#define"
    INFO = "INFO"
    AIRPORT = "AIRPORT"
    VOR = "VOR"
    NDB = "NDB"
    RUNWAY = "RUNWAY"
    FIXES = "FIXES"
    ARTCC = "ARTCC"
    ARTCC_HIGH = "ARTCC HIGH"
    ARTCC_LOW = "ARTCC LOW"
    LOW_AIRWAY = "LOW AIRWAY"
    HIGH_AIRWAY = "HIGH AIRWAY"
    SID = "SID"
    STAR = "STAR"
    GEO = "GEO"
    REGIONS = "REGIONS"
    LABELS = "LABELS"


_HEADERS = {
    f"[{section.value}]": section
    for section in FileSection
    if section is not FileSection.COLOUR_DEFINITIONS
}


def parse_section_header(line: str) -> FileSection:
    """
    Map a ``[SECTION]`` header to its FileSection (case-insensitive).

    Raises:
        InvalidFileSectionError: for any header outside the known set.
    """
    section = _HEADERS.get(line.strip().upper())
    if section is None:
        raise InvalidFileSectionError(f"Unknown section header {line.strip()!r}")
    return section
