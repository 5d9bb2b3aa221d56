"""
Logging setup shared by every namefully module.

All module loggers hang under the ``namefully`` logger and propagate to it;
only that base logger owns handlers. Its handlers come from the ``logging``
section of ``config/namefully.yml``:

    logging:
      level: INFO        # base level, DEBUG when ``debug: true``
      file: null         # master log file inside ``dir``
      dir: logs
      rotate: false      # RotatingFileHandler instead of FileHandler
      per_module: false  # extra ``<logger_name>.log`` per module

``configure_logging`` may be called again (the CLI does so for
``--verbose``); it swaps the handlers it installed earlier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from namefully.config import Settings, get_settings

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "namefully"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_OWNED = "_namefully_handler"


@dataclass(slots=True)
class LogOptions:
    level: int = logging.INFO
    file: Optional[str] = None
    dir: Path = PROJECT_ROOT / "logs"
    rotate: bool = False
    per_module: bool = False

    @classmethod
    def from_settings(cls, settings: Settings, verbose: bool = False) -> "LogOptions":
        section = settings.logging
        level_name = str(section.get("level", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)
        if verbose or settings.debug:
            level = logging.DEBUG

        log_dir = Path(section.get("dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            file=section.get("file") or None,
            dir=log_dir,
            rotate=bool(section.get("rotate", False)),
            per_module=bool(section.get("per_module", False)),
        )


_options: Optional[LogOptions] = None
_known: Dict[str, Logger] = {}


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------

def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(options: LogOptions, filename: str) -> logging.Handler:
    options.dir.mkdir(parents=True, exist_ok=True)
    path = options.dir / filename

    if options.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    return handler


def _own(logger: Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(_formatter())
    setattr(handler, _OWNED, True)
    logger.addHandler(handler)


def _drop_owned(logger: Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()


def _attach_module_file(logger: Logger, options: LogOptions) -> None:
    if any(getattr(h, _OWNED, False) for h in logger.handlers):
        return
    _own(logger, _file_handler(options, f"{logger.name.replace('.', '_')}.log"), options.level)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def configure_logging(settings: Optional[Settings] = None, verbose: bool = False) -> Logger:
    """(Re)build the base logger's handlers from ``settings``."""
    global _options

    options = LogOptions.from_settings(settings or get_settings(), verbose=verbose)
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(options.level)
    base.propagate = False

    _drop_owned(base)
    for logger in _known.values():
        if logger is not base:
            _drop_owned(logger)

    _own(base, logging.StreamHandler(), options.level)
    if options.file:
        _own(base, _file_handler(options, options.file), options.level)
    if options.per_module:
        for logger in _known.values():
            if logger is not base:
                _attach_module_file(logger, options)

    _options = options
    _known[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: Optional[str] = None) -> Logger:
    """Logger for ``name`` nested under ``namefully.``.

    The base logger is configured on first use.
    """
    if _options is None:
        configure_logging()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger_name != BASE_LOGGER_NAME:
        logger.propagate = True
        if _options is not None and _options.per_module:
            _attach_module_file(logger, _options)

    _known[logger_name] = logger
    return logger


def reset_logging() -> None:
    """Close every handler installed here; the next ``get_logger`` reconfigures."""
    global _options

    for logger in _known.values():
        _drop_owned(logger)
    _known.clear()
    _options = None


def list_active_loggers() -> List[str]:
    return list(_known.keys())
