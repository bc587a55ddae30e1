from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from logging import Logger
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from sct_reader.config import SctConfig
from sct_reader.registry.entities import LineError, ParseResult


@dataclass
class ParseContext:
    """
    State for one sector file run through the pipeline.

    ``stats`` holds the entity counts plus ``line_errors`` and ``elapsed_s``
    once the run has finished; ``result`` is None until then.
    """

    config: SctConfig
    logger: Logger

    input_path: Optional[Union[str, Path]] = None
    result: Optional[ParseResult] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[LineError] = field(default_factory=list)

    debug: bool = False

    def errors_by_kind(self) -> Dict[str, int]:
        """Line error tally keyed by error kind, most frequent first."""
        return dict(Counter(str(error.kind) for error in self.errors).most_common())
