"""
Validators for single name parts and for whole raw inputs.

Content failures raise ``ValidationError`` naming the slot; shape failures
(counts, keys, wrong Python types) raise ``InputError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from namefully.core.exceptions import InputError, NameException, ValidationError
from namefully.models.name import FirstName, LastName, Name
from namefully.name_index import NameIndex
from namefully.types import MAX_NUMBER_OF_NAME_PARTS, MIN_NUMBER_OF_NAME_PARTS, Namon
from namefully.validation.rules import ValidationRule

INVALID_CONTENT = "invalid content"


def _check_count(values: Sequence[Any]) -> None:
    if not (MIN_NUMBER_OF_NAME_PARTS <= len(values) <= MAX_NUMBER_OF_NAME_PARTS):
        raise InputError(
            source=list(values),
            message=f"expecting a list of {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} elements",
        )


# -----------------------------------------------------------------------------
# Single parts
# -----------------------------------------------------------------------------

class NamonValidator:
    """Any single atom (prefix, suffix, one middle name...)."""

    def validate(self, value: str, name_type: str = "namon") -> None:
        if not isinstance(value, str):
            raise InputError(source=type(value).__name__, message="expecting type str")
        if not ValidationRule.matches(ValidationRule.namon, value):
            raise ValidationError(source=value, name_type=name_type, message=INVALID_CONTENT)


class FirstNameValidator:
    def validate(self, value: Any) -> None:
        if isinstance(value, FirstName):
            for name in value.as_names:
                self.validate(name.value)
        elif isinstance(value, str):
            if not ValidationRule.matches(ValidationRule.first_name, value):
                raise ValidationError(source=value, name_type="firstName", message=INVALID_CONTENT)
        else:
            raise InputError(source=type(value).__name__, message="expecting types str | FirstName")


class MiddleNameValidator:
    def validate(self, value: Any) -> None:
        if isinstance(value, str):
            if not ValidationRule.matches(ValidationRule.middle_name, value):
                raise ValidationError(source=value, name_type="middleName", message=INVALID_CONTENT)
            return

        if not isinstance(value, (list, tuple)):
            raise InputError(
                source=type(value).__name__,
                message="expecting types str | list[str] | list[Name]",
            )

        try:
            for item in value:
                if isinstance(item, Name):
                    Validators.namon.validate(item.value)
                    if item.type is not Namon.MIDDLE_NAME:
                        raise NameException("wrong type")
                elif isinstance(item, str):
                    Validators.namon.validate(item)
                else:
                    raise InputError(
                        source=type(item).__name__,
                        message="expecting types str | list[str] | list[Name]",
                    )
        except InputError:
            raise
        except NameException as exc:
            raise ValidationError(source=list(value), name_type="middleName", message=exc.message) from exc


class LastNameValidator:
    def validate(self, value: Any) -> None:
        if isinstance(value, LastName):
            for name in value.as_names:
                self.validate(name.value)
        elif isinstance(value, str):
            if not ValidationRule.matches(ValidationRule.last_name, value):
                raise ValidationError(source=value, name_type="lastName", message=INVALID_CONTENT)
        else:
            raise InputError(source=type(value).__name__, message="expecting types str | LastName")


class NameValidator:
    """A typed atom, reported under its own slot name."""

    def validate(self, name: Name) -> None:
        if not isinstance(name, Name):
            raise InputError(source=type(name).__name__, message="expecting type Name")
        if not ValidationRule.matches(ValidationRule.namon, name.value):
            raise ValidationError(source=name.value, name_type=name.type.key, message=INVALID_CONTENT)


# -----------------------------------------------------------------------------
# Aggregates
# -----------------------------------------------------------------------------

class NamaValidator:
    """A ``{Namon: str}`` map of two or more parts."""

    def validate(self, nama: Dict[Namon, str]) -> None:
        self.validate_keys(nama)
        Validators.first_name.validate(nama[Namon.FIRST_NAME])
        Validators.last_name.validate(nama[Namon.LAST_NAME])
        if Namon.MIDDLE_NAME in nama:
            Validators.middle_name.validate(nama[Namon.MIDDLE_NAME])
        if Namon.PREFIX in nama:
            Validators.namon.validate(nama[Namon.PREFIX], Namon.PREFIX.key)
        if Namon.SUFFIX in nama:
            Validators.namon.validate(nama[Namon.SUFFIX], Namon.SUFFIX.key)

    def validate_keys(self, nama: Dict[Namon, str]) -> None:
        """Structural half: size, known keys and required keys."""
        if not isinstance(nama, dict):
            raise InputError(source=type(nama).__name__, message="expecting a dict")
        if not nama:
            raise InputError(source=None, message="dict must not be empty")

        source = " ".join(str(v) for v in nama.values())
        if not (MIN_NUMBER_OF_NAME_PARTS <= len(nama) <= MAX_NUMBER_OF_NAME_PARTS):
            raise InputError(
                source=source,
                message=f"expecting {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} fields",
            )
        for key in nama:
            if not isinstance(key, Namon):
                raise InputError(source=source, message=f"unsupported key <{key}>")
        if Namon.FIRST_NAME not in nama:
            raise InputError(source=source, message='"firstName" is a required key')
        if Namon.LAST_NAME not in nama:
            raise InputError(source=source, message='"lastName" is a required key')


class ListStringValidator:
    """An ordered list of 2 to 5 strings, checked slot by slot."""

    def __init__(self, index: Optional[NameIndex] = None):
        self.index = index or NameIndex.base()

    def validate(self, values: List[str]) -> None:
        self.validate_index(values)
        index = self.index
        count = len(values)

        if count >= 4:
            Validators.namon.validate(values[index.prefix], Namon.PREFIX.key)
        Validators.first_name.validate(values[index.first_name])
        if count >= 3:
            Validators.middle_name.validate(values[index.middle_name])
        Validators.last_name.validate(values[index.last_name])
        if count == 5:
            Validators.namon.validate(values[index.suffix], Namon.SUFFIX.key)

    def validate_index(self, values: List[str]) -> None:
        """Structural half: the list must hold 2 to 5 elements."""
        if not isinstance(values, (list, tuple)):
            raise InputError(source=type(values).__name__, message="expecting a list of str")
        _check_count(values)


class ListNameValidator:
    """Tagged atoms: 2 to 5 of them, with at least a first and a last name."""

    def validate(self, values: List[Name]) -> None:
        if not isinstance(values, (list, tuple)) or not all(isinstance(v, Name) for v in values):
            raise InputError(source=values, message="expecting a list of Name")
        _check_count(values)

        has_first = any(v.is_first_name for v in values)
        has_last = any(v.is_last_name for v in values)
        if not (has_first and has_last):
            raise InputError(source=list(values), message="both first and last names are required")


class Validators:
    """Shared validator instances, one per slot or input shape."""

    namon = NamonValidator()
    nama = NamaValidator()
    prefix = NameValidator()
    first_name = FirstNameValidator()
    middle_name = MiddleNameValidator()
    last_name = LastNameValidator()
    suffix = NameValidator()
    list_name = ListNameValidator()

    @staticmethod
    def list_string(index: Optional[NameIndex] = None) -> ListStringValidator:
        return ListStringValidator(index)
