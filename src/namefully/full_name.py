"""
full_name.py
Canonical container for one person's name, bound to a ``Config``.

Slots follow the standard ``(prefix) firstName (middleName) lastName (suffix)``.
Setters validate their content unless the config bypasses validation; the
``raw_*`` helpers build the typed atom from plain strings and return the
instance so they can be chained.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from namefully.config import Config
from namefully.core.exceptions import InputError
from namefully.models.name import FirstName, LastName, Name
from namefully.types import Namon, Surname, Title
from namefully.validation.validators import Validators


class FullName:
    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()
        self._prefix: Optional[Name] = None
        self._first_name: Optional[FirstName] = None
        self._middle_name: List[Name] = []
        self._last_name: Optional[LastName] = None
        self._suffix: Optional[Name] = None

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, data: Dict[str, Any], config: Optional[Config] = None) -> "FullName":
        """Build from a ``{"firstName": ..., "lastName": ...}`` style map.

        A ``middleName`` string is split on spaces into several middle names;
        a list or tuple is taken as the middle names themselves.
        """
        if "firstName" not in data or "lastName" not in data:
            raise InputError(source=data, message='"firstName" and "lastName" are required keys')

        full_name = cls(config)
        if data.get("prefix") is not None:
            full_name.raw_prefix(data["prefix"])
        full_name.raw_first_name(data["firstName"])
        middles = data.get("middleName")
        if isinstance(middles, (list, tuple)):
            full_name.raw_middle_name([str(m).strip() for m in middles if str(m).strip()])
        elif middles:
            full_name.raw_middle_name([m for m in str(middles).split(" ") if m])
        full_name.raw_last_name(data["lastName"])
        if data.get("suffix") is not None:
            full_name.raw_suffix(data["suffix"])
        return full_name

    @classmethod
    def raw(
        cls,
        first_name: str,
        last_name: str,
        prefix: Optional[str] = None,
        middle_name: Optional[List[str]] = None,
        suffix: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "FullName":
        full_name = cls(config)
        if prefix is not None:
            full_name.raw_prefix(prefix)
        full_name.raw_first_name(first_name)
        if middle_name:
            full_name.raw_middle_name(middle_name)
        full_name.raw_last_name(last_name)
        if suffix is not None:
            full_name.raw_suffix(suffix)
        return full_name

    def copy(self, config: Optional[Config] = None) -> "FullName":
        """Detached copy, optionally bound to another config.

        Atoms are rebuilt so the copy shares no mutable state with ``self``.
        """
        config = config or self._config
        clone = FullName(config)
        if self._prefix is not None:
            clone._prefix = Name.prefix(self._prefix.value)
        if self._first_name is not None:
            clone._first_name = self._first_name.copy_with()
        clone._middle_name = [Name.middle(n.value) for n in self._middle_name]
        if self._last_name is not None:
            clone._last_name = self._last_name.copy_with()
        if self._suffix is not None:
            clone._suffix = Name.suffix(self._suffix.value)
        return clone

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    @property
    def prefix(self) -> Optional[Name]:
        return self._prefix

    @prefix.setter
    def prefix(self, name: Optional[Name]) -> None:
        if name is None:
            return
        if not self._config.bypass:
            Validators.prefix.validate(name)
        value = name.value
        if self._config.title is Title.US and not value.endswith("."):
            value += "."
        self._prefix = Name.prefix(value)

    @property
    def first_name(self) -> FirstName:
        if self._first_name is None:
            raise InputError(source=None, message="first name is not set")
        return self._first_name

    @first_name.setter
    def first_name(self, name: FirstName) -> None:
        if not self._config.bypass:
            Validators.first_name.validate(name)
        self._first_name = name

    @property
    def middle_name(self) -> List[Name]:
        return self._middle_name

    @middle_name.setter
    def middle_name(self, names: List[Name]) -> None:
        if not self._config.bypass:
            Validators.middle_name.validate(names)
        self._middle_name = list(names)

    @property
    def last_name(self) -> LastName:
        if self._last_name is None:
            raise InputError(source=None, message="last name is not set")
        return self._last_name

    @last_name.setter
    def last_name(self, name: LastName) -> None:
        if not self._config.bypass:
            Validators.last_name.validate(name)
        self._last_name = name

    @property
    def suffix(self) -> Optional[Name]:
        return self._suffix

    @suffix.setter
    def suffix(self, name: Optional[Name]) -> None:
        if name is None:
            return
        if not self._config.bypass:
            Validators.suffix.validate(name)
        self._suffix = name

    # Fluent raw helpers -------------------------------------------------

    def raw_prefix(self, value: str) -> "FullName":
        self.prefix = Name.prefix(value)
        return self

    def raw_first_name(self, value: str, more: Optional[List[str]] = None) -> "FullName":
        self.first_name = FirstName(value, more)
        return self

    def raw_middle_name(self, values: List[str]) -> "FullName":
        self.middle_name = [Name.middle(v) for v in values]
        return self

    def raw_last_name(self, father: str, mother: Optional[str] = None, format: Optional[Surname] = None) -> "FullName":
        self.last_name = LastName(father, mother, format or Surname.FATHER)
        return self

    def raw_suffix(self, value: str) -> "FullName":
        self.suffix = Name.suffix(value)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has(self, namon: Namon) -> bool:
        if namon is Namon.PREFIX:
            return self._prefix is not None
        if namon is Namon.FIRST_NAME:
            return self._first_name is not None
        if namon is Namon.MIDDLE_NAME:
            return bool(self._middle_name)
        if namon is Namon.LAST_NAME:
            return self._last_name is not None
        if namon is Namon.SUFFIX:
            return self._suffix is not None
        return False

    def to_iterable(self, flat: bool = False) -> Iterator[Name]:
        """Yield the atoms in slot order.

        With ``flat`` the additional first names and the mother surname come
        out as atoms of their own.
        """
        if self._prefix is not None:
            yield self._prefix
        if flat:
            yield from self.first_name.as_names
            yield from self._middle_name
            yield from self.last_name.as_names
        else:
            yield self.first_name
            yield from self._middle_name
            yield self.last_name
        if self._suffix is not None:
            yield self._suffix

    def __iter__(self) -> Iterator[Name]:
        return self.to_iterable()

    def __repr__(self) -> str:
        parts = " ".join(str(n) for n in self.to_iterable())
        return f"FullName({parts!r})"
