"""
Exception taxonomy for name handling.

Every failure raised by the package is a ``NameException`` tagged with an
``ExceptionKind``:

* INPUT        malformed raw content (too short, wrong count, bad keys)
* VALIDATION   a slot's content breaks its character-class rule
* NOT_ALLOWED  closed builders, unsupported format directives
* UNKNOWN      anything unexpected, wrapping the original error
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ExceptionKind(Enum):
    INPUT = "input"
    VALIDATION = "validation"
    NOT_ALLOWED = "notAllowed"
    UNKNOWN = "unknown"


def source_as_string(source: Any) -> str:
    """Render the offending source value the way it was given."""
    if source is None:
        return "null"
    if isinstance(source, str):
        return source
    if isinstance(source, dict):
        return " ".join(str(v) for v in source.values())
    if isinstance(source, (list, tuple)):
        return " ".join(str(s) for s in source)
    return str(source)


class NameException(Exception):
    """Base exception for name handling failures."""

    kind: ExceptionKind = ExceptionKind.UNKNOWN

    def __init__(self, message: str = "", source: Any = None) -> None:
        self.message = message
        self.source = source
        super().__init__(str(self))

    @property
    def source_as_string(self) -> str:
        return source_as_string(self.source)

    def __str__(self) -> str:
        report = f"{type(self).__name__} ({self.source_as_string})"
        if self.message:
            report = f"{report}: {self.message}"
        return report


class InputError(NameException):
    """Raised when a raw name input has the wrong shape."""

    kind = ExceptionKind.INPUT

    def __init__(self, source: Any, message: str = "") -> None:
        super().__init__(message, source)


class ValidationError(NameException):
    """Raised when a name part fails its validation rule."""

    kind = ExceptionKind.VALIDATION

    def __init__(self, source: Any, name_type: str, message: str = "") -> None:
        self.name_type = name_type
        super().__init__(message, source)

    def __str__(self) -> str:
        report = f"{type(self).__name__} ({self.name_type}='{self.source_as_string}')"
        if self.message:
            report = f"{report}: {self.message}"
        return report


class NotAllowedError(NameException):
    """Raised by operations attempted on a closed builder or bad format keys."""

    kind = ExceptionKind.NOT_ALLOWED

    def __init__(self, source: Any, message: str = "", operation: str = "") -> None:
        self.operation = operation
        super().__init__(message, source)

    def __str__(self) -> str:
        report = f"{type(self).__name__} ({self.source_as_string})"
        if self.operation:
            report = f"{report} - {self.operation}"
        if self.message:
            report = f"{report}: {self.message}"
        return report


class UnknownError(NameException):
    """Fallback wrapping any non-name failure; the cause is kept in ``error``."""

    kind = ExceptionKind.UNKNOWN

    def __init__(self, source: Any, error: Optional[BaseException] = None, message: str = "") -> None:
        self.error = error
        super().__init__(message, source)

    def __str__(self) -> str:
        report = super().__str__()
        if self.error is not None:
            report = f"{report}\n{self.error!r}"
        return report
