"""
Orchestration layer: shared context, exceptions and the parse pipeline.

``Pipeline`` is imported from ``sct_reader.core.pipeline`` directly to keep
this package free of a cycle through ``parser_core``.
"""

from .exceptions import (
    AssemblyError,
    ErrorKind,
    ParseExecutionError,
    PipelineError,
    SectorError,
)

__all__ = [
    "AssemblyError",
    "ErrorKind",
    "ParseExecutionError",
    "PipelineError",
    "SectorError",
]
