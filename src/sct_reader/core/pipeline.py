from __future__ import annotations

import time

from sct_reader.core.context import ParseContext
from sct_reader.core.exceptions import AssemblyError, ParseExecutionError
from sct_reader.parser_core import SectorParser
from sct_reader.registry.entities import ParseResult


class Pipeline:
    """
    Orchestrates parsing of one sector file.
    No business logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ParseResult:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)
        t0 = time.perf_counter()

        try:
            parser = SectorParser(config=self.ctx.config)
            result = parser.run(self.ctx.input_path)
        except (AssemblyError, OSError) as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc

        self.ctx.result = result
        self.ctx.errors.extend(result.errors)
        self.ctx.stats.update(result.sector.counts())
        self.ctx.stats["line_errors"] = len(result.errors)
        self.ctx.stats["elapsed_s"] = time.perf_counter() - t0

        self.log.info(
            "Pipeline completed: %s in %.3fs (%d line errors)",
            result.sector.info.name,
            self.ctx.stats["elapsed_s"],
            len(result.errors),
        )
        return result
