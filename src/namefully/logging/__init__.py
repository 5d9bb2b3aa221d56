"""
Logging package for ``namefully``.

Modules call ``get_logger(__name__)``; the CLI calls ``configure_logging``
to switch on debug output.
"""

from .logger import (
    LogOptions,
    configure_logging,
    get_logger,
    list_active_loggers,
    reset_logging,
)

__all__ = [
    "LogOptions",
    "configure_logging",
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
