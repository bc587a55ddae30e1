"""
Logging setup for the sector file reader.

All loggers live under the ``sct_reader`` hierarchy and share the handlers
installed on the base logger:

* a master log file (``logging.file`` in ``config/sct_reader.yml``),
  optionally rotated;
* a console handler that only shows WARNING and above unless ``debug`` is
  set, so per-line parse noise stays in the files.

Setting ``logging.per_module: true`` additionally gives every subsystem
(``loader``, ``parser_core``, ``cli`` ...) its own file.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from sct_reader.config import get_config
from sct_reader.utils.pathing import resolve_project_path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BASE_LOGGER_NAME = "sct_reader"


@dataclass
class _LogSettings:
    level: int = logging.INFO
    console_level: int = logging.WARNING
    log_dir: Path = Path("logs")
    master_file: str = "sct_reader.log"
    rotate: bool = False
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5
    per_module: bool = False
    loggers: Dict[str, Logger] = field(default_factory=dict)


_settings: Optional[_LogSettings] = None


def _level(name, default: int) -> int:
    return getattr(logging, str(name).upper(), default) if name else default


def _load_settings() -> _LogSettings:
    cfg = get_config()
    section = cfg.logging
    debug = bool(cfg.debug)

    log_dir = resolve_project_path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")

    return _LogSettings(
        level=logging.DEBUG if debug else _level(section.get("level"), logging.INFO),
        console_level=(
            logging.DEBUG if debug else _level(section.get("console_level"), logging.WARNING)
        ),
        log_dir=log_dir,
        master_file=section.get("file", "sct_reader.log"),
        rotate=bool(section.get("rotate", False)),
        max_bytes=int(section.get("max_bytes", 5 * 1024 * 1024)),
        backup_count=int(section.get("backup_count", 5)),
        per_module=bool(section.get("per_module", False)),
    )


def _file_handler(settings: _LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configured() -> _LogSettings:
    """Install the shared handlers on the base logger on first use."""
    global _settings

    if _settings is not None:
        return _settings

    settings = _load_settings()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(_file_handler(settings, settings.master_file))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    settings.loggers[BASE_LOGGER_NAME] = base
    _settings = settings
    return settings


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return ``sct_reader.<name>``, configuring the base handlers if needed."""
    settings = _configured()
    if not name or name == BASE_LOGGER_NAME:
        return settings.loggers[BASE_LOGGER_NAME]

    full_name = name if name.startswith(BASE_LOGGER_NAME + ".") else f"{BASE_LOGGER_NAME}.{name}"
    logger = settings.loggers.get(full_name)
    if logger is not None:
        return logger

    logger = logging.getLogger(full_name)
    logger.setLevel(settings.level)
    logger.propagate = True
    if settings.per_module:
        logger.addHandler(_file_handler(settings, f"{full_name.replace('.', '_')}.log"))

    settings.loggers[full_name] = logger
    return logger


def log_line_errors(logger: Logger, errors: Iterable, source: str = "") -> None:
    """
    Log recoverable line errors: each one at DEBUG, a per-kind tally at INFO.

    ``errors`` holds ``LineError`` records; nothing is logged when empty.
    """
    prefix = f"{source}: " if source else ""
    tally: Counter = Counter()
    for error in errors:
        tally[str(error.kind)] += 1
        logger.debug("%sline %d [%s] %s: %r", prefix, error.lineno, error.kind, error.message, error.raw)

    if tally:
        summary = ", ".join(f"{kind}={count}" for kind, count in sorted(tally.items()))
        logger.info("%s%d line error(s): %s", prefix, sum(tally.values()), summary)


def active_loggers() -> List[str]:
    """Names of the loggers handed out so far."""
    if _settings is None:
        return []
    return sorted(_settings.loggers)
