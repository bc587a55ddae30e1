"""
Logging package for ``sct_reader``.

Call ``get_logger("<subsystem>")`` in modules; all loggers share the handlers
configured from ``config/sct_reader.yml``.
"""

from .logger import active_loggers, get_logger, log_line_errors

__all__ = [
    "active_loggers",
    "get_logger",
    "log_line_errors",
]
