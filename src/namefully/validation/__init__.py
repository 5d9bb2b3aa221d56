"""
Validation rules and validators for name content and raw input shapes.
"""

from namefully.validation.rules import ValidationRule
from namefully.validation.validators import (
    FirstNameValidator,
    LastNameValidator,
    ListNameValidator,
    ListStringValidator,
    MiddleNameValidator,
    NamaValidator,
    NameValidator,
    NamonValidator,
    Validators,
)

__all__ = [
    "FirstNameValidator",
    "LastNameValidator",
    "ListNameValidator",
    "ListStringValidator",
    "MiddleNameValidator",
    "NamaValidator",
    "NameValidator",
    "NamonValidator",
    "ValidationRule",
    "Validators",
]
