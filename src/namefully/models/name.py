"""
name.py
Single name atoms ("namons") and their first/last-name specializations.

Defines:
- Name:       a validated piece of a name tagged with its slot (Namon)
- FirstName:  a given name that may carry additional given names (``more``)
- LastName:   a father surname with an optional mother surname and a format
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from namefully.core.exceptions import InputError
from namefully.models.summary import Summary
from namefully.types import CapsRange, Namon, Surname
from namefully.utils import capitalize, decapitalize, is_valid_atom


def _check_atom(value: Any) -> str:
    if not is_valid_atom(value):
        raise InputError(source=value, message="must be 2+ characters")
    return value


# -----------------------------------------------------------------------------
# Name
# -----------------------------------------------------------------------------

class Name:
    """A string name with its slot type and some extra capabilities."""

    def __init__(self, value: str, type: Namon, caps_range: Optional[CapsRange] = None):
        self.type = type
        self.caps_range = caps_range or CapsRange.INITIAL
        self.value = value
        if caps_range is not None:
            self.caps(caps_range)

    # Factories --------------------------------------------------------------

    @classmethod
    def prefix(cls, value: str) -> "Name":
        return cls(value, Namon.PREFIX)

    @classmethod
    def first(cls, value: str) -> "Name":
        return cls(value, Namon.FIRST_NAME)

    @classmethod
    def middle(cls, value: str) -> "Name":
        return cls(value, Namon.MIDDLE_NAME)

    @classmethod
    def last(cls, value: str) -> "Name":
        return cls(value, Namon.LAST_NAME)

    @classmethod
    def suffix(cls, value: str) -> "Name":
        return cls(value, Namon.SUFFIX)

    # Value ------------------------------------------------------------------

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        self._value = _check_atom(new_value)

    @property
    def length(self) -> int:
        return len(self._value)

    def __len__(self) -> int:
        return self.length

    @property
    def is_prefix(self) -> bool:
        return self.type is Namon.PREFIX

    @property
    def is_first_name(self) -> bool:
        return self.type is Namon.FIRST_NAME

    @property
    def is_middle_name(self) -> bool:
        return self.type is Namon.MIDDLE_NAME

    @property
    def is_last_name(self) -> bool:
        return self.type is Namon.LAST_NAME

    @property
    def is_suffix(self) -> bool:
        return self.type is Namon.SUFFIX

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {self.type.name})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Name) and other.value == self.value and other.type is self.type

    def __hash__(self) -> int:
        return hash((self._value, self.type))

    def to_string(self) -> str:
        return self._value

    def initials(self) -> List[str]:
        return [self._value[0]]

    def stats(self) -> Summary:
        return Summary(self._value)

    # Case -------------------------------------------------------------------

    def caps(self, range_: Optional[CapsRange] = None) -> "Name":
        self.value = capitalize(self._value, range_ or self.caps_range)
        return self

    def decaps(self, range_: Optional[CapsRange] = None) -> "Name":
        self.value = decapitalize(self._value, range_ or self.caps_range)
        return self

    def normalize(self) -> "Name":
        """Initial upper-cased, the rest lower-cased."""
        self.value = capitalize(self._value, CapsRange.INITIAL)
        return self


# -----------------------------------------------------------------------------
# FirstName
# -----------------------------------------------------------------------------

class FirstName(Name):
    """A given name plus any additional given names (``more``).

    ``more`` atoms are treated as part of the first name, not as middle names.
    """

    def __init__(self, value: str, more: Optional[Iterable[str]] = None):
        super().__init__(value, Namon.FIRST_NAME)
        self._more: List[Name] = [Name.first(_check_atom(m)) for m in (more or [])]

    @property
    def more(self) -> List[str]:
        return [n.value for n in self._more]

    @property
    def has_more(self) -> bool:
        return bool(self._more)

    @property
    def length(self) -> int:
        return len(self._value) + sum(n.length for n in self._more)

    @property
    def as_names(self) -> List[Name]:
        return [Name.first(self._value), *(Name.first(n.value) for n in self._more)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FirstName):
            return super().__eq__(other)
        return other.value == self.value and other.more == self.more

    def __hash__(self) -> int:
        return hash((self._value, self.type))

    def to_string(self, with_more: bool = False) -> str:
        if with_more and self.has_more:
            return " ".join([self._value, *self.more]).strip()
        return self._value

    def initials(self, with_more: bool = False) -> List[str]:
        out = [self._value[0]]
        if with_more:
            out.extend(n.value[0] for n in self._more)
        return out

    def stats(self, include_all: bool = False) -> Summary:
        return Summary(self.to_string(with_more=include_all))

    def caps(self, range_: Optional[CapsRange] = None) -> "FirstName":
        range_ = range_ or self.caps_range
        super().caps(range_)
        for n in self._more:
            n.caps(range_)
        return self

    def decaps(self, range_: Optional[CapsRange] = None) -> "FirstName":
        range_ = range_ or self.caps_range
        super().decaps(range_)
        for n in self._more:
            n.decaps(range_)
        return self

    def normalize(self) -> "FirstName":
        super().normalize()
        for n in self._more:
            n.normalize()
        return self

    def copy_with(self, first: Optional[str] = None, more: Optional[Iterable[str]] = None) -> "FirstName":
        return FirstName(first or self._value, self.more if more is None else more)


# -----------------------------------------------------------------------------
# LastName
# -----------------------------------------------------------------------------

class LastName(Name):
    """A father surname with an optional mother surname.

    ``format`` decides how the two render together.
    """

    def __init__(self, father: str, mother: Optional[str] = None, format: Surname = Surname.FATHER):
        super().__init__(father, Namon.LAST_NAME)
        self.format = format or Surname.FATHER
        self._mother: Optional[Name] = Name.last(_check_atom(mother)) if mother is not None else None

    @property
    def father(self) -> str:
        return self._value

    @property
    def mother(self) -> Optional[str]:
        return self._mother.value if self._mother else None

    @property
    def has_mother(self) -> bool:
        return self._mother is not None

    @property
    def length(self) -> int:
        return len(self._value) + (self._mother.length if self._mother else 0)

    @property
    def as_names(self) -> List[Name]:
        names = [Name.last(self._value)]
        if self._mother:
            names.append(Name.last(self._mother.value))
        return names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LastName):
            return super().__eq__(other)
        return other.father == self.father and other.mother == self.mother

    def __hash__(self) -> int:
        return hash((self._value, self.type))

    def to_string(self, format: Optional[Surname] = None) -> str:
        format = format or self.format
        mother = self.mother or ""
        if format is Surname.FATHER:
            return self._value
        if format is Surname.MOTHER:
            return mother
        if format is Surname.HYPHENATED:
            return f"{self._value}-{mother}" if self.has_mother else self._value
        return f"{self._value} {mother}" if self.has_mother else self._value

    def initials(self, format: Optional[Surname] = None) -> List[str]:
        format = format or self.format
        out: List[str] = []
        if format is Surname.FATHER:
            out.append(self._value[0])
        elif format is Surname.MOTHER:
            if self._mother:
                out.append(self._mother.value[0])
        else:
            out.append(self._value[0])
            if self._mother:
                out.append(self._mother.value[0])
        return out

    def stats(self, format: Optional[Surname] = None) -> Summary:
        return Summary(self.to_string(format))

    def caps(self, range_: Optional[CapsRange] = None) -> "LastName":
        range_ = range_ or self.caps_range
        super().caps(range_)
        if self._mother:
            self._mother.caps(range_)
        return self

    def decaps(self, range_: Optional[CapsRange] = None) -> "LastName":
        range_ = range_ or self.caps_range
        super().decaps(range_)
        if self._mother:
            self._mother.decaps(range_)
        return self

    def normalize(self) -> "LastName":
        super().normalize()
        if self._mother:
            self._mother.normalize()
        return self

    def copy_with(
        self,
        father: Optional[str] = None,
        mother: Optional[str] = None,
        format: Optional[Surname] = None,
    ) -> "LastName":
        return LastName(father or self._value, mother or self.mother, format or self.format)
