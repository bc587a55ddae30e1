"""
parser_core.py
Section dispatcher: one forward pass over a sector file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Union

from sct_reader.config import get_config
from sct_reader.core.exceptions import SectorError
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
from sct_reader.loader.file_loader import load_lines
from sct_reader.loader.scanner import SourceLine, scan_lines
from sct_reader.loader.sections import FileSection, parse_section_header
from sct_reader.logging import get_logger, log_line_errors
from sct_reader.registry.build_sector import build_sector
from sct_reader.registry.entities import LineError, ParseResult
from sct_reader.registry.partial import LineGroupKind, PartialSector

SectionGrammar = Callable[[PartialSector, str], None]

_LINE_GROUP_SECTIONS = {
    FileSection.ARTCC: LineGroupKind.ARTCC,
    FileSection.ARTCC_HIGH: LineGroupKind.ARTCC_HIGH,
    FileSection.ARTCC_LOW: LineGroupKind.ARTCC_LOW,
    FileSection.LOW_AIRWAY: LineGroupKind.LOW_AIRWAY,
    FileSection.HIGH_AIRWAY: LineGroupKind.HIGH_AIRWAY,
    FileSection.GEO: LineGroupKind.GEO,
}

_SID_STAR_SECTIONS = {
    FileSection.SID: LineGroupKind.SID,
    FileSection.STAR: LineGroupKind.STAR,
}


class SectorParser:
    """
    High-level parser:
      - cleans lines and tracks the active section
      - routes each line to its section grammar
      - records per-line failures without stopping
      - promotes the accumulated tables into a Sector

    A parser instance holds no state between parses; every call to
    ``parse_lines`` starts from a fresh ``PartialSector``.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")
        self.grammars = self._build_grammars()

    def _build_grammars(self) -> Dict[FileSection, SectionGrammar]:
        name_width = self.cfg.sid_star_name_width

        grammars: Dict[FileSection, SectionGrammar] = {
            FileSection.COLOUR_DEFINITIONS: parse_colour_line,
            FileSection.INFO: lambda sector, line: parse_info_line(sector.sector_info, line),
            FileSection.AIRPORT: parse_airport_line,
            FileSection.RUNWAY: parse_runway_line,
            FileSection.VOR: parse_vor_line,
            FileSection.NDB: parse_ndb_line,
            FileSection.FIXES: parse_fix_line,
            FileSection.REGIONS: parse_region_line,
            FileSection.LABELS: parse_label_line,
        }
        for section, kind in _LINE_GROUP_SECTIONS.items():
            grammars[section] = (
                lambda sector, line, kind=kind: parse_line_group_line(sector, line, kind)
            )
        for section, kind in _SID_STAR_SECTIONS.items():
            grammars[section] = (
                lambda sector, line, kind=kind: parse_sid_star_line(
                    sector, line, kind, name_width=name_width
                )
            )
        return grammars

    # ---------------------------------------------------------
    # Scanning
    # ---------------------------------------------------------
    def scan(self, lines: Iterable[str]):
        """
        Run the dispatch loop and return (partial_sector, line_errors).

        Unknown section headers leave the previous section active.
        """
        sector = PartialSector()
        errors: List[LineError] = []
        section = FileSection.COLOUR_DEFINITIONS

        for source in scan_lines(lines):
            try:
                if source.is_section_header:
                    section = parse_section_header(source.text)
                    self.log.debug("Line %d: entering [%s]", source.lineno, section.value)
                    continue

                if source.is_colour_define:
                    section = FileSection.COLOUR_DEFINITIONS

                self.grammars[section](sector, source.text)

            except SectorError as exc:
                errors.append(self._record(source, exc))

        return sector, errors

    @staticmethod
    def _record(source: SourceLine, exc: SectorError) -> LineError:
        return LineError(
            lineno=source.lineno,
            raw=source.raw,
            kind=exc.kind,
            message=str(exc),
        )

    # ---------------------------------------------------------
    # Full parse
    # ---------------------------------------------------------
    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        """
        Parse a complete sector file given as lines.

        Raises:
            AssemblyError: if the scanned tables cannot form a Sector.
        """
        sector, errors = self.scan(lines)
        result = ParseResult(sector=build_sector(sector), errors=tuple(errors))

        log_line_errors(self.log, errors)
        return result

    def run(self, input_path: Union[str, Path]) -> ParseResult:
        """Load ``input_path`` and parse it."""
        lines = load_lines(input_path)
        self.log.info("Running parser on %s", input_path)
        return self.parse_lines(lines)


def parse_lines(lines: Iterable[str], *, config=None) -> ParseResult:
    return SectorParser(config=config).parse_lines(lines)


def read_sector_file(path: Union[str, Path], *, config=None) -> ParseResult:
    return SectorParser(config=config).run(path)
