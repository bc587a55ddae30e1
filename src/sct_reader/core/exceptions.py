"""
Exception hierarchy for the sector file reader.

Two tiers:

* ``SectorError`` subclasses raised by the per-section grammars. The
  dispatcher catches them per line and records a ``LineError``.
* ``AssemblyError`` subclasses raised while promoting the accumulated tables
  into the final ``Sector``. These are fatal for the file.

``PipelineError`` wraps either tier for orchestration code.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_METADATA = "missing_metadata"
    INVALID_COLOUR_DEFINITION = "invalid_colour_definition"
    INVALID_FILE_SECTION = "invalid_file_section"
    INVALID_COORDINATE = "invalid_coordinate"
    SECTOR_INFO_ERROR = "sector_info_error"
    INVALID_AIRSPACE_CLASS = "invalid_airspace_class"
    INVALID_WAYPOINT = "invalid_waypoint"
    INVALID_POSITION = "invalid_position"
    INVALID_RUNWAY = "invalid_runway"
    INVALID_HEADING = "invalid_heading"
    INVALID_VOR_OR_NDB = "invalid_vor_or_ndb"
    INVALID_FIX = "invalid_fix"
    INVALID_ARTCC_ENTRY = "invalid_artcc_entry"
    INVALID_SID_STAR_ENTRY = "invalid_sid_star_entry"
    INVALID_GEO_ENTRY = "invalid_geo_entry"
    INVALID_REGION = "invalid_region"
    INVALID_LABEL = "invalid_label"

    def __str__(self) -> str:
        return self.value


class SectorError(ValueError):
    """Base class for every sector decoding failure."""

    kind: ErrorKind = ErrorKind.INVALID_WAYPOINT


class InvalidColourDefinitionError(SectorError):
    kind = ErrorKind.INVALID_COLOUR_DEFINITION


class InvalidFileSectionError(SectorError):
    kind = ErrorKind.INVALID_FILE_SECTION


class InvalidCoordinateError(SectorError):
    kind = ErrorKind.INVALID_COORDINATE


class SectorInfoError(SectorError):
    kind = ErrorKind.SECTOR_INFO_ERROR


class InvalidAirspaceClassError(SectorError):
    kind = ErrorKind.INVALID_AIRSPACE_CLASS


class InvalidWaypointError(SectorError):
    kind = ErrorKind.INVALID_WAYPOINT


class InvalidPositionError(SectorError):
    kind = ErrorKind.INVALID_POSITION


class InvalidRunwayError(SectorError):
    kind = ErrorKind.INVALID_RUNWAY


class InvalidHeadingError(SectorError):
    kind = ErrorKind.INVALID_HEADING


class InvalidVorOrNdbError(SectorError):
    kind = ErrorKind.INVALID_VOR_OR_NDB


class InvalidFixError(SectorError):
    kind = ErrorKind.INVALID_FIX


class InvalidArtccEntryError(SectorError):
    kind = ErrorKind.INVALID_ARTCC_ENTRY


class InvalidSidStarEntryError(SectorError):
    kind = ErrorKind.INVALID_SID_STAR_ENTRY


class InvalidGeoEntryError(SectorError):
    kind = ErrorKind.INVALID_GEO_ENTRY


class InvalidRegionError(SectorError):
    kind = ErrorKind.INVALID_REGION


class InvalidLabelError(SectorError):
    kind = ErrorKind.INVALID_LABEL


class AssemblyError(SectorError):
    """Raised when the accumulated tables cannot become a ``Sector``."""

    kind = ErrorKind.MISSING_METADATA


class MissingMetadataError(AssemblyError):
    kind = ErrorKind.MISSING_METADATA


class RegionColourMissingError(AssemblyError, InvalidRegionError):
    kind = ErrorKind.INVALID_REGION


class InvalidCentrePointError(AssemblyError, InvalidPositionError):
    kind = ErrorKind.INVALID_POSITION


class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when a sector file cannot be parsed into a usable sector."""
