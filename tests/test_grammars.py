# tests/test_grammars.py

from __future__ import annotations

import pytest

from sct_reader.core.exceptions import (
    InvalidAirspaceClassError,
    InvalidArtccEntryError,
    InvalidFixError,
    InvalidGeoEntryError,
    InvalidLabelError,
    InvalidPositionError,
    InvalidRegionError,
    InvalidRunwayError,
    InvalidSidStarEntryError,
    InvalidVorOrNdbError,
    InvalidWaypointError,
    SectorInfoError,
)
from sct_reader.geo.colour import Colour
from sct_reader.geo.position import Position
from sct_reader.grammars import (
    parse_airport_line,
    parse_colour_line,
    parse_fix_line,
    parse_info_line,
    parse_label_line,
    parse_line_group_line,
    parse_ndb_line,
    parse_region_line,
    parse_runway_line,
    parse_sid_star_line,
    parse_vor_line,
)
from sct_reader.grammars.endpoints import resolve_endpoint
from sct_reader.registry.entities import AirspaceClass
from sct_reader.registry.partial import LineGroupKind, PartialSector

BIG = Position.from_dms("N051.19.51.150", "E000.02.05.320")


@pytest.fixture
def sector() -> PartialSector:
    partial = PartialSector()
    parse_colour_line(partial, "#define COLOR_Red 255")
    parse_colour_line(partial, "#define COLOR_Apron 4210752")
    parse_vor_line(partial, "BIG 115.100 N051.19.51.150 E000.02.05.320")
    parse_fix_line(partial, "BRAIN N051.48.40.000 E000.39.08.000")
    parse_airport_line(partial, "EGLL 118.500 N051.28.39.000 W000.27.41.000 D")
    return partial


# ---------------------------------------------------------
# INFO
# ---------------------------------------------------------

def test_info_lines_fill_fields_in_order(info_block) -> None:
    partial = PartialSector()
    for line in info_block[1:]:
        parse_info_line(partial.sector_info, line)

    info = partial.sector_info
    assert info.name == "Test Sector"
    assert info.default_callsign == "TEST_CTR"
    assert info.default_airport == "EGLL"
    assert info.default_centre_pt_lat == pytest.approx(51 + 28 / 60 + 39 / 3600)
    assert info.default_centre_pt_lon == pytest.approx(-(27 / 60 + 41 / 3600))
    assert info.n_mi_per_deg_lat == 60.0
    assert info.n_mi_per_deg_lon == 38.0
    assert info.magnetic_variation == -1.0
    assert info.sector_scale == 1.0


def test_info_tenth_line_is_an_error(info_block) -> None:
    partial = PartialSector()
    for line in info_block[1:]:
        parse_info_line(partial.sector_info, line)
    with pytest.raises(SectorInfoError):
        parse_info_line(partial.sector_info, "extra")


def test_info_bad_value_consumes_its_slot() -> None:
    partial = PartialSector()
    for line in ["Name", "CALL", "EGLL"]:
        parse_info_line(partial.sector_info, line)
    with pytest.raises(SectorInfoError):
        parse_info_line(partial.sector_info, "not-a-coordinate")

    parse_info_line(partial.sector_info, "W000.30.00.000")
    assert partial.sector_info.default_centre_pt_lat is None
    assert partial.sector_info.default_centre_pt_lon == pytest.approx(-0.5)


# ---------------------------------------------------------
# Waypoints
# ---------------------------------------------------------

def test_waypoint_lines(sector: PartialSector) -> None:
    assert sector.vors[0].identifier == "BIG"
    assert sector.vors[0].frequency == "115.100"
    assert sector.fixes[0].identifier == "BRAIN"
    assert sector.airports[0].airspace_class is AirspaceClass.D

    parse_ndb_line(sector, "EPM 316.000 N051.19.10.000 W000.22.19.000")
    assert sector.ndbs[0].position.lon < 0


@pytest.mark.parametrize(
    "grammar, line, error",
    [
        (parse_vor_line, "BIG 115.100 N051.19.51.150", InvalidVorOrNdbError),
        (parse_ndb_line, "EPM 316.000", InvalidVorOrNdbError),
        (parse_fix_line, "BRAIN N051.48.40.000", InvalidFixError),
        (parse_airport_line, "EGKK 124.225 N051.08.53.000 W000.11.25.000", InvalidWaypointError),
        (parse_airport_line, "EGKK 124.225 N051.08.53.000 W000.11.25.000 Z", InvalidAirspaceClassError),
        (parse_fix_line, "FAR N091.00.00.000 E000.00.00.000", InvalidPositionError),
        (parse_fix_line, "BAD N051.00 E000.00.00.000", InvalidPositionError),
    ],
)
def test_waypoint_line_errors(grammar, line: str, error) -> None:
    partial = PartialSector()
    with pytest.raises(error):
        grammar(partial, line)


# ---------------------------------------------------------
# Runways
# ---------------------------------------------------------

def test_runway_line_attaches_strip_to_airport(sector: PartialSector) -> None:
    parse_runway_line(
        sector,
        "27L 09R 270 090 N051.27.53.000 W000.26.00.000 N051.27.53.000 W000.29.00.000 EGLL",
    )
    (strip,) = sector.airports[0].runways
    assert strip.identifier == "09R/27L"


def test_runway_line_unknown_airport(sector: PartialSector) -> None:
    with pytest.raises(InvalidRunwayError):
        parse_runway_line(
            sector,
            "09 27 090 270 N051.00.00.000 W000.00.00.000 N051.00.00.000 E000.01.00.000 XXXX",
        )


def test_runway_line_too_short(sector: PartialSector) -> None:
    with pytest.raises(InvalidRunwayError):
        parse_runway_line(sector, "09 27 090 270 EGLL")


# ---------------------------------------------------------
# Endpoints
# ---------------------------------------------------------

def test_resolve_endpoint_literal(sector: PartialSector) -> None:
    pos = resolve_endpoint(
        sector, "N051.00.00.000", "W001.00.00.000", error_cls=InvalidArtccEntryError
    )
    assert pos == Position(51.0, -1.0)


def test_resolve_endpoint_waypoint_lookup(sector: PartialSector) -> None:
    assert resolve_endpoint(sector, "BIG", "BIG", error_cls=InvalidArtccEntryError) == BIG
    assert resolve_endpoint(sector, "EGLL", "EGLL", error_cls=InvalidArtccEntryError) == (
        sector.airports[0].position
    )


def test_resolve_endpoint_fix_wins_over_vor() -> None:
    partial = PartialSector()
    parse_vor_line(partial, "DUP 115.100 N050.00.00.000 E000.00.00.000")
    parse_fix_line(partial, "DUP N052.00.00.000 E000.00.00.000")
    pos = resolve_endpoint(partial, "DUP", "DUP", error_cls=InvalidArtccEntryError)
    assert pos.lat == pytest.approx(52.0)


def test_resolve_endpoint_unknown_identifier(sector: PartialSector) -> None:
    with pytest.raises(InvalidGeoEntryError):
        resolve_endpoint(sector, "NOPE", "NOPE", error_cls=InvalidGeoEntryError)


def test_resolve_endpoint_out_of_range_literal(sector: PartialSector) -> None:
    with pytest.raises(InvalidPositionError):
        resolve_endpoint(
            sector, "N095.00.00.000", "E000.00.00.000", error_cls=InvalidArtccEntryError
        )


# ---------------------------------------------------------
# ARTCC / airways / GEO
# ---------------------------------------------------------

def test_named_artcc_line_then_continuation(sector: PartialSector) -> None:
    parse_line_group_line(
        sector,
        "London ACC N052.00.00.000 W001.00.00.000 N052.00.00.000 E001.00.00.000 COLOR_Red",
        LineGroupKind.ARTCC,
    )
    parse_line_group_line(
        sector,
        "N052.00.00.000 E001.00.00.000 N051.00.00.000 E001.00.00.000",
        LineGroupKind.ARTCC,
    )

    table = sector.table(LineGroupKind.ARTCC)
    (group,) = table.groups
    assert group.name == "London ACC"
    assert len(group.lines) == 2
    assert group.lines[0].colour == Colour(255, 0, 0)
    assert group.lines[1].colour is None
    assert group.lines[1].start == Position(52.0, 1.0)


def test_line_group_with_waypoint_endpoints(sector: PartialSector) -> None:
    parse_line_group_line(sector, "L9 BIG BIG BRAIN BRAIN", LineGroupKind.LOW_AIRWAY)
    (group,) = sector.table(LineGroupKind.LOW_AIRWAY).groups
    assert group.name == "L9"
    assert group.lines[0].start == BIG
    assert group.lines[0].colour is None


def test_unresolved_trailing_token_is_part_of_the_name(sector: PartialSector) -> None:
    parse_line_group_line(
        sector,
        "EGLL Apron N051.28.00.000 W000.28.00.000 N051.28.10.000 W000.28.00.000",
        LineGroupKind.GEO,
    )
    (group,) = sector.table(LineGroupKind.GEO).groups
    assert group.name == "EGLL Apron"


def test_continuation_without_open_group(sector: PartialSector) -> None:
    with pytest.raises(InvalidGeoEntryError):
        parse_line_group_line(
            sector,
            "N051.28.00.000 W000.28.00.000 N051.28.10.000 W000.28.00.000",
            LineGroupKind.GEO,
        )


def test_unresolvable_endpoint_opens_no_group(sector: PartialSector) -> None:
    with pytest.raises(InvalidArtccEntryError):
        parse_line_group_line(sector, "Sector X NOPE NOPE BIG BIG", LineGroupKind.ARTCC)
    with pytest.raises(InvalidArtccEntryError):
        parse_line_group_line(sector, "BIG BIG BRAIN BRAIN", LineGroupKind.ARTCC)

    assert sector.table(LineGroupKind.ARTCC).groups == []


def test_unknown_trailing_colour_opens_no_group(sector: PartialSector) -> None:
    with pytest.raises(InvalidArtccEntryError):
        parse_line_group_line(
            sector,
            "London ACC N052.00.00.000 W001.00.00.000 N052.00.00.000 E001.00.00.000 COLOR_Missing",
            LineGroupKind.ARTCC,
        )
    with pytest.raises(InvalidArtccEntryError):
        parse_line_group_line(
            sector,
            "N052.00.00.000 E001.00.00.000 N051.00.00.000 E001.00.00.000",
            LineGroupKind.ARTCC,
        )

    assert sector.table(LineGroupKind.ARTCC).groups == []


def test_out_of_range_segment_on_named_line_still_selects_group(sector: PartialSector) -> None:
    with pytest.raises(InvalidPositionError):
        parse_line_group_line(
            sector, "Sector Y N095.00.00.000 E000.00.00.000 BIG BIG", LineGroupKind.ARTCC
        )

    parse_line_group_line(sector, "BIG BIG BRAIN BRAIN", LineGroupKind.ARTCC)
    (group,) = sector.table(LineGroupKind.ARTCC).groups
    assert group.name == "Sector Y"
    assert len(group.lines) == 1


# ---------------------------------------------------------
# SID / STAR
# ---------------------------------------------------------

def test_sid_named_line_and_continuation(sector: PartialSector) -> None:
    parse_sid_star_line(
        sector,
        "EGLL BPK7F".ljust(26) + "N051.28.39.000 W000.29.06.000 BIG BIG",
        LineGroupKind.SID,
    )
    parse_sid_star_line(sector, " " * 26 + "BIG BIG BRAIN BRAIN", LineGroupKind.SID)

    (group,) = sector.table(LineGroupKind.SID).groups
    assert group.name == "EGLL BPK7F"
    assert len(group.lines) == 2
    assert group.lines[0].end == BIG


def test_star_line_with_colour(sector: PartialSector) -> None:
    parse_sid_star_line(
        sector,
        "EGLL BIG1E".ljust(26) + "BRAIN BRAIN BIG BIG COLOR_Red",
        LineGroupKind.STAR,
    )
    (group,) = sector.table(LineGroupKind.STAR).groups
    assert group.lines[0].colour == Colour(255, 0, 0)


def test_sid_star_custom_name_width(sector: PartialSector) -> None:
    parse_sid_star_line(
        sector,
        "EGLL X".ljust(10) + "BIG BIG BRAIN BRAIN",
        LineGroupKind.SID,
        name_width=10,
    )
    assert sector.table(LineGroupKind.SID).groups[0].name == "EGLL X"


@pytest.mark.parametrize(
    "line",
    [
        "EGLL SHORT",
        "EGLL BPK7F".ljust(26) + "BIG BIG",
        " " * 26 + "BIG BIG BRAIN BRAIN",
    ],
)
def test_sid_star_errors(sector: PartialSector, line: str) -> None:
    with pytest.raises(InvalidSidStarEntryError):
        parse_sid_star_line(sector, line, LineGroupKind.SID)


# ---------------------------------------------------------
# Regions
# ---------------------------------------------------------

def test_region_polygon(sector: PartialSector) -> None:
    parse_region_line(sector, "REGIONNAME EGLL Apron")
    parse_region_line(sector, "COLOR_Apron N051.28.10.000 W000.27.30.000")
    parse_region_line(sector, " N051.28.20.000 W000.27.30.000")
    parse_region_line(sector, " N051.28.20.000 W000.27.10.000")

    (region,) = sector.regions
    assert region.name == "EGLL Apron"
    (polygon,) = region.polygons
    assert polygon.colour == Colour(64, 64, 64)
    assert len(polygon.vertices) == 3


def test_region_second_colour_line_starts_new_polygon(sector: PartialSector) -> None:
    parse_region_line(sector, "REGIONNAME Taxiways")
    parse_region_line(sector, "COLOR_Apron N051.28.10.000 W000.27.30.000")
    parse_region_line(sector, "COLOR_Red N051.29.10.000 W000.27.30.000")

    (region,) = sector.regions
    assert [p.colour for p in region.polygons] == [Colour(64, 64, 64), Colour(255, 0, 0)]


def test_region_reselected_by_name(sector: PartialSector) -> None:
    parse_region_line(sector, "REGIONNAME A")
    parse_region_line(sector, "COLOR_Red N051.00.00.000 W000.00.00.000")
    parse_region_line(sector, "REGIONNAME B")
    parse_region_line(sector, "COLOR_Red N052.00.00.000 W000.00.00.000")
    parse_region_line(sector, "REGIONNAME A")
    parse_region_line(sector, "COLOR_Apron N053.00.00.000 W000.00.00.000")

    assert [r.name for r in sector.regions] == ["A", "B"]
    assert len(sector.regions[0].polygons) == 2


@pytest.mark.parametrize(
    "line",
    [
        "REGIONNAME",
        "N051.28.20.000 W000.27.30.000",
        "COLOR_Apron N051.28.10.000 W000.27.30.000",
        "COLOR_Unknown N051.28.10.000 W000.27.30.000",
        "a b c d",
    ],
)
def test_region_errors_without_context(sector: PartialSector, line: str) -> None:
    with pytest.raises(InvalidRegionError):
        parse_region_line(sector, line)


# ---------------------------------------------------------
# Labels
# ---------------------------------------------------------

def test_label_with_colour(sector: PartialSector) -> None:
    parse_label_line(sector, '"Heathrow Tower" N051.28.39.000 W000.27.41.000 COLOR_Red')
    (label,) = sector.labels
    assert label.text == "Heathrow Tower"
    assert label.colour == Colour(255, 0, 0)


def test_label_without_colour(sector: PartialSector) -> None:
    parse_label_line(sector, '"Biggin" N051.19.51.150 E000.02.05.320')
    assert sector.labels[0].text == "Biggin"
    assert sector.labels[0].colour is None
    assert sector.labels[0].position == BIG


def test_label_errors(sector: PartialSector) -> None:
    with pytest.raises(InvalidLabelError):
        parse_label_line(sector, '"Lonely" N051.19.51.150')
    with pytest.raises(InvalidLabelError):
        parse_label_line(sector, '"Tower" N051.19.51.150 E000.02.05.320 COLOR_Nope')
    assert sector.labels == []
