from __future__ import annotations

from typing import Iterable, List, Tuple

from sct_reader.core.exceptions import (
    InvalidCentrePointError,
    InvalidPositionError,
    MissingMetadataError,
    RegionColourMissingError,
)
from sct_reader.registry.entities import (
    Airport,
    LineGroup,
    Polygon,
    RegionGroup,
    Sector,
    SectorInfo,
)
from sct_reader.registry.partial import (
    INFO_FIELDS,
    LineGroupKind,
    LineGroupTable,
    PartialAirport,
    PartialRegionGroup,
    PartialSector,
    PartialSectorInfo,
)


# ----------------------------------------------------------------------
# Promotion helpers
# ----------------------------------------------------------------------

def _promote_sector_info(info: PartialSectorInfo) -> SectorInfo:
    for field_name in INFO_FIELDS:
        if getattr(info, field_name) is None:
            raise MissingMetadataError(f"INFO field never assigned: {field_name}")

    centre = info.centre_point()
    try:
        centre_pt = centre.validate()
    except InvalidPositionError as exc:
        raise InvalidCentrePointError(f"INFO centre point: {exc}") from exc

    return SectorInfo(
        name=info.name,
        default_callsign=info.default_callsign,
        default_airport=info.default_airport,
        default_centre_pt=centre_pt,
        n_mi_per_deg_lat=info.n_mi_per_deg_lat,
        n_mi_per_deg_lon=info.n_mi_per_deg_lon,
        magnetic_variation=info.magnetic_variation,
        sector_scale=info.sector_scale,
    )


def _promote_airports(airports: Iterable[PartialAirport]) -> Tuple[Airport, ...]:
    return tuple(
        Airport(
            identifier=a.identifier,
            position=a.position,
            tower_frequency=a.tower_frequency,
            airspace_class=a.airspace_class,
            runways=tuple(a.runways),
        )
        for a in airports
    )


def _promote_line_groups(table: LineGroupTable) -> Tuple[LineGroup, ...]:
    return tuple(LineGroup(name=g.name, lines=tuple(g.lines)) for g in table.groups)


def _promote_regions(regions: Iterable[PartialRegionGroup]) -> Tuple[RegionGroup, ...]:
    promoted: List[RegionGroup] = []
    for region in regions:
        polygons = []
        for index, polygon in enumerate(region.polygons):
            if polygon.colour is None:
                raise RegionColourMissingError(
                    f"Region {region.name!r} polygon {index + 1} has no colour"
                )
            polygons.append(Polygon(colour=polygon.colour, vertices=tuple(polygon.vertices)))
        promoted.append(RegionGroup(name=region.name, polygons=tuple(polygons)))
    return tuple(promoted)


# ----------------------------------------------------------------------
# Sector builder
# ----------------------------------------------------------------------

def build_sector(partial: PartialSector) -> Sector:
    """
    Promote the accumulated tables into an immutable ``Sector``.

    Raises:
        MissingMetadataError: an INFO field was never assigned.
        InvalidCentrePointError: the INFO centre point is out of range.
        RegionColourMissingError: a region polygon never received a colour.
    """
    info = _promote_sector_info(partial.sector_info)

    return Sector(
        info=info,
        colours=partial.colours.snapshot(),
        airports=_promote_airports(partial.airports),
        vors=tuple(partial.vors),
        ndbs=tuple(partial.ndbs),
        fixes=tuple(partial.fixes),
        artcc_entries=_promote_line_groups(partial.table(LineGroupKind.ARTCC)),
        artcc_high_entries=_promote_line_groups(partial.table(LineGroupKind.ARTCC_HIGH)),
        artcc_low_entries=_promote_line_groups(partial.table(LineGroupKind.ARTCC_LOW)),
        low_airways=_promote_line_groups(partial.table(LineGroupKind.LOW_AIRWAY)),
        high_airways=_promote_line_groups(partial.table(LineGroupKind.HIGH_AIRWAY)),
        sid_entries=_promote_line_groups(partial.table(LineGroupKind.SID)),
        star_entries=_promote_line_groups(partial.table(LineGroupKind.STAR)),
        geo_entries=_promote_line_groups(partial.table(LineGroupKind.GEO)),
        regions=_promote_regions(partial.regions),
        labels=tuple(partial.labels),
    )
