"""
Core building blocks shared by every layer of namefully.

This __init__ only re-exports the exception taxonomy.
"""

from namefully.core.exceptions import (
    ExceptionKind,
    InputError,
    NameException,
    NotAllowedError,
    UnknownError,
    ValidationError,
)

__all__ = [
    "ExceptionKind",
    "InputError",
    "NameException",
    "NotAllowedError",
    "UnknownError",
    "ValidationError",
]
