"""
namefully.py
Read-only facade over a parsed ``FullName``.

    >>> name = Namefully("Mr John Ben Smith Ph.D")
    >>> name.format("official")
    'Mr SMITH, John Ben Ph.D'
    >>> name.zip()
    'John B. S.'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from namefully.config import Config
from namefully.core.exceptions import InputError, NameException
from namefully.formatting.flatten import flatten as _flatten
from namefully.formatting.flatten import zip_name
from namefully.formatting.formatter import NameFormatter
from namefully.full_name import FullName
from namefully.logging import get_logger
from namefully.models.name import Name
from namefully.models.summary import Summary
from namefully.parsing.parsers import (
    BoundParser,
    JsonNameParser,
    ListNameParser,
    ListStringParser,
    Parser,
    StringParser,
)
from namefully.types import Flat, NameOrder, NameType, Namon, Surname
from namefully.utils import capitalize, decapitalize

if TYPE_CHECKING:
    from namefully.builder.derivative import NameDerivative

logger = get_logger(__name__)

RawName = Union[str, List[str], Dict[str, str], List[Name], FullName]

DEFAULT_SPLIT = re.compile(r"[' \-.]")


def _select_parser(raw: Any) -> Parser:
    if isinstance(raw, str):
        return StringParser()
    if isinstance(raw, dict):
        return JsonNameParser()
    if isinstance(raw, (list, tuple)):
        if raw and all(isinstance(n, Name) for n in raw):
            return ListNameParser()
        return ListStringParser()
    raise InputError(source=raw, message=f"unsupported raw name type <{type(raw).__name__}>")


class Namefully:
    """A person name, parsed once and read in many shapes.

    ``names`` may be a string, a list of strings, a ``{"firstName": ...}``
    map, a list of ``Name`` atoms or a ``FullName``. A parser set on the
    config takes precedence over the one picked from the raw type.
    """

    def __init__(self, names: RawName, config: Optional[Config] = None):
        if isinstance(names, FullName):
            self._config = config or names.config
            self._full_name = names if config is None else names.copy(config)
            return

        self._config = config or Config()
        parser = self._config.parser or _select_parser(names)
        logger.debug("Building name with %s", type(parser).__name__)
        self._full_name = parser.parse(names, self._config)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_list(cls, names: List[str], config: Optional[Config] = None) -> "Namefully":
        return cls._with(ListStringParser(), names, config)

    @classmethod
    def from_json(cls, names: Dict[str, str], config: Optional[Config] = None) -> "Namefully":
        return cls._with(JsonNameParser(), names, config)

    @classmethod
    def of(cls, names: List[Name], config: Optional[Config] = None) -> "Namefully":
        return cls._with(ListNameParser(), names, config)

    @classmethod
    def from_full_name(cls, full_name: FullName) -> "Namefully":
        return cls(full_name)

    @classmethod
    def from_parser(
        cls,
        parser: Union[Parser, BoundParser],
        raw: Any = None,
        config: Optional[Config] = None,
    ) -> "Namefully":
        """Build with an explicit parser, or with a parser already bound to its raw value."""
        if isinstance(parser, BoundParser):
            return cls._with(parser.parser, parser.raw if raw is None else raw, config)
        return cls._with(parser, raw, config)

    @classmethod
    def only(
        cls,
        first_name: str,
        last_name: str,
        prefix: Optional[str] = None,
        middle_name: Optional[List[str]] = None,
        suffix: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Namefully":
        full_name = FullName.raw(
            first_name=first_name,
            last_name=last_name,
            prefix=prefix,
            middle_name=middle_name,
            suffix=suffix,
            config=config or Config(),
        )
        return cls(full_name)

    @classmethod
    def parse(cls, text: str, config: Optional[Config] = None) -> "Namefully":
        """Guess the structure of free ``text``; raises ``NameException`` on failure."""
        return cls.from_parser(Parser.build(text), config=config)

    @classmethod
    def try_parse(cls, text: str, config: Optional[Config] = None) -> Optional["Namefully"]:
        """Same as ``parse`` but returns None instead of raising."""
        try:
            return cls.parse(text, config)
        except NameException as exc:
            logger.debug("Could not parse %r: %s", text, exc)
            return None

    @classmethod
    def _with(cls, parser: Parser, raw: Any, config: Optional[Config]) -> "Namefully":
        config = config or Config()
        return cls(parser.parse(raw, config))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    @property
    def model(self) -> FullName:
        """The underlying ``FullName``."""
        return self._full_name

    @property
    def length(self) -> int:
        """Number of characters of the birth name, spaces included."""
        return len(self.birth)

    @property
    def count(self) -> int:
        """Number of characters of the birth name, spaces excluded."""
        return len(self.birth.replace(" ", ""))

    @property
    def prefix(self) -> Optional[str]:
        return str(self._full_name.prefix) if self._full_name.prefix else None

    @property
    def first(self) -> str:
        return self.first_name()

    @property
    def middle(self) -> Optional[str]:
        middles = self.middle_name()
        return middles[0] if middles else None

    @property
    def has_middle(self) -> bool:
        return self._full_name.has(Namon.MIDDLE_NAME)

    @property
    def last(self) -> str:
        return self.last_name()

    @property
    def suffix(self) -> Optional[str]:
        return str(self._full_name.suffix) if self._full_name.suffix else None

    @property
    def birth(self) -> str:
        return self.birth_name()

    @property
    def short(self) -> str:
        return self.shorten()

    @property
    def long(self) -> str:
        return self.birth

    @property
    def full(self) -> str:
        return self.full_name()

    @property
    def public(self) -> str:
        """First name followed by the last name initial, e.g. ``John S``."""
        return self.format("f $l")

    @property
    def parts(self) -> Iterator[Name]:
        return self._full_name.to_iterable()

    @property
    def derivative(self) -> "NameDerivative":
        from namefully.builder.derivative import NameDerivative

        return NameDerivative(self)

    def __str__(self) -> str:
        return self.full

    def __repr__(self) -> str:
        return f"Namefully({self.full!r})"

    def __getitem__(self, namon: Namon) -> Any:
        if namon is Namon.PREFIX:
            return self._full_name.prefix
        if namon is Namon.FIRST_NAME:
            return self._full_name.first_name
        if namon is Namon.MIDDLE_NAME:
            return self._full_name.middle_name
        if namon is Namon.LAST_NAME:
            return self._full_name.last_name
        if namon is Namon.SUFFIX:
            return self._full_name.suffix
        raise KeyError(namon)

    def equals(self, other: "Namefully") -> bool:
        return str(self) == str(other)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Namefully) and self.equals(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def has(self, namon: Namon) -> bool:
        return self._full_name.has(namon)

    def to_map(self) -> Dict[str, Optional[str]]:
        return {
            Namon.PREFIX.key: self.prefix,
            Namon.FIRST_NAME.key: self.first,
            Namon.MIDDLE_NAME.key: " ".join(self.middle_name()),
            Namon.LAST_NAME.key: self.last,
            Namon.SUFFIX.key: self.suffix,
        }

    def to_list(self) -> List[Optional[str]]:
        return [self.prefix, self.first, " ".join(self.middle_name()), self.last, self.suffix]

    # ------------------------------------------------------------------
    # Name views
    # ------------------------------------------------------------------

    def full_name(self, order: Optional[NameOrder] = None) -> str:
        """Prefix, birth name and suffix in ``order``.

        With ``config.ending`` a comma closes the birth name before the suffix.
        """
        order = order or self._config.ordered_by
        ending = "," if self._config.ending else ""
        middles = self.middle_name()

        parts: List[str] = [self.prefix or ""]
        if order is NameOrder.FIRST_NAME:
            parts.extend([self.first, *middles, self.last + ending])
        elif middles:
            parts.extend([self.last, self.first, " ".join(middles) + ending])
        else:
            parts.extend([self.last, self.first + ending])
        parts.append(self.suffix or "")
        return " ".join(p for p in parts if p).strip()

    def birth_name(self, order: Optional[NameOrder] = None) -> str:
        order = order or self._config.ordered_by
        if order is NameOrder.FIRST_NAME:
            parts = [self.first, *self.middle_name(), self.last]
        else:
            parts = [self.last, self.first, *self.middle_name()]
        return " ".join(parts)

    def first_name(self, with_more: bool = True) -> str:
        return self._full_name.first_name.to_string(with_more=with_more)

    def last_name(self, format: Optional[Surname] = None) -> str:
        return self._full_name.last_name.to_string(format)

    def middle_name(self) -> List[str]:
        return [n.value for n in self._full_name.middle_name]

    def initials(
        self,
        order: Optional[NameOrder] = None,
        with_mid: bool = False,
        only: NameType = NameType.BIRTH_NAME,
    ) -> List[str]:
        order = order or self._config.ordered_by
        first = self._full_name.first_name.initials()
        middle = [n.initials()[0] for n in self._full_name.middle_name]
        last = self._full_name.last_name.initials()

        if only is NameType.FIRST_NAME:
            return first
        if only is NameType.MIDDLE_NAME:
            return middle
        if only is NameType.LAST_NAME:
            return last

        mid = middle if with_mid else []
        if order is NameOrder.FIRST_NAME:
            return [*first, *mid, *last]
        return [*last, *first, *mid]

    def shorten(self, order: Optional[NameOrder] = None) -> str:
        """Plain first name and last name, without middles, prefix or suffix."""
        order = order or self._config.ordered_by
        first = self._full_name.first_name.value
        last = self._full_name.last_name.to_string()
        return f"{first} {last}" if order is NameOrder.FIRST_NAME else f"{last} {first}"

    def flatten(
        self,
        limit: int = 20,
        by: Flat = Flat.MIDDLE_NAME,
        with_period: bool = True,
        recursive: bool = False,
        with_more: bool = False,
        surname: Optional[Surname] = None,
    ) -> str:
        return _flatten(
            self,
            limit=limit,
            by=by,
            with_period=with_period,
            recursive=recursive,
            with_more=with_more,
            surname=surname,
        )

    def zip(self, by: Flat = Flat.MID_LAST, with_period: bool = True) -> str:
        return zip_name(self, by=by, with_period=with_period)

    def format(self, pattern: str = "official") -> str:
        return NameFormatter(self).format(pattern)

    # ------------------------------------------------------------------
    # Case helpers (all based on the birth name)
    # ------------------------------------------------------------------

    def upper(self) -> str:
        return self.birth.upper()

    def lower(self) -> str:
        return self.birth.lower()

    def camel(self) -> str:
        return decapitalize(self.pascal())

    def pascal(self) -> str:
        return "".join(capitalize(n) for n in self.split())

    def snake(self) -> str:
        return "_".join(n.lower() for n in self.split())

    def hyphen(self) -> str:
        return "-".join(n.lower() for n in self.split())

    def dot(self) -> str:
        return ".".join(n.lower() for n in self.split())

    def split(self, separator: Optional[Union[str, "re.Pattern[str]"]] = None) -> List[str]:
        """Birth name pieces, cut on apostrophes, spaces, hyphens and periods."""
        pattern = re.compile(separator) if isinstance(separator, str) else (separator or DEFAULT_SPLIT)
        return pattern.sub(" ", self.birth).split(" ")

    def join(self, separator: str = "") -> str:
        return separator.join(self.split())

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def stats(self, what: Optional[NameType] = None, restrictions: Optional[List[str]] = None) -> Summary:
        """Character summary of the full name, or of one of its parts."""
        if what is NameType.FIRST_NAME:
            text = self._full_name.first_name.to_string(with_more=True)
        elif what is NameType.MIDDLE_NAME:
            text = " ".join(self.middle_name())
        elif what is NameType.LAST_NAME:
            text = self.last
        elif what is NameType.BIRTH_NAME:
            text = self.birth
        else:
            text = self.full
        return Summary.of(text, restrictions)

    def flip(self) -> "Namefully":
        """Swap the order used to render this name (first/last name)."""
        self._config = self._config.flipped()
        logger.info("The name order is now changed to: %s", self._config.ordered_by.value)
        return self
