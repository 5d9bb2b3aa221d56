"""
parsers.py
Strategies turning raw name input into a ``FullName``.

Supported raw shapes:
- str               StringParser      ("John Ben Smith")
- list[str]         ListStringParser  (["John", "Ben", "Smith"])
- dict[str, str]    JsonNameParser    ({"firstName": "John", "lastName": "Smith"})
- list[Name]        ListNameParser    ([FirstName("John"), LastName("Smith")])

Parsers are stateless: the raw value is passed to ``parse`` and never
mutated. ``Parser.build`` guesses a strategy for free text and returns it
bound to that text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from namefully.config import Config
from namefully.core.exceptions import InputError, NameException, UnknownError
from namefully.full_name import FullName
from namefully.logging import get_logger
from namefully.models.name import FirstName, LastName, Name
from namefully.name_index import NameIndex
from namefully.types import Namon
from namefully.validation.validators import ListStringValidator, Validators

logger = get_logger(__name__)


def _split(text: str, token: str) -> List[str]:
    # An empty separator means "do not split".
    return text.split(token) if token else [text]


# -----------------------------------------------------------------------------
# Base strategy
# -----------------------------------------------------------------------------

class Parser(ABC):
    """Converts one raw shape into a ``FullName``.

    Subclasses implement ``_parse``; ``parse`` wraps any failure that is not
    a ``NameException`` into an ``UnknownError``.
    """

    def parse(self, raw: Any, config: Optional[Config] = None) -> FullName:
        config = config or Config()
        logger.debug("Parsing %r with %s", raw, type(self).__name__)
        try:
            return self._parse(raw, config)
        except NameException:
            raise
        except Exception as exc:
            raise UnknownError(source=raw, error=exc, message="could not parse the raw name") from exc

    @abstractmethod
    def _parse(self, raw: Any, config: Config) -> FullName:
        raise NotImplementedError

    @staticmethod
    def build(text: str) -> "BoundParser":
        """Pick a strategy for whitespace separated ``text``.

        2 or 3 words are bound as they are; 4 or more become
        ``[first, <interior words>, last]``. Both use the list strategy, so
        the configured separator does not affect how ``text`` is split.
        """
        if not isinstance(text, str):
            raise InputError(source=text, message="cannot build from invalid input")

        parts = text.split()
        if len(parts) < 2:
            raise InputError(source=text, message="cannot build from invalid input")
        if len(parts) <= 3:
            return BoundParser(ListStringParser(), parts)
        return BoundParser(ListStringParser(), [parts[0], " ".join(parts[1:-1]), parts[-1]])


@dataclass(frozen=True)
class BoundParser:
    """A parser paired with the raw value it will parse."""

    parser: Parser
    raw: Any

    def parse(self, config: Optional[Config] = None) -> FullName:
        return self.parser.parse(self.raw, config)


# -----------------------------------------------------------------------------
# Strategies
# -----------------------------------------------------------------------------

class StringParser(Parser):
    def _parse(self, raw: str, config: Config) -> FullName:
        if not isinstance(raw, str):
            raise InputError(source=raw, message="expecting a str")
        names = _split(raw, config.separator.token)
        return ListStringParser()._parse(names, config)


class ListStringParser(Parser):
    def _parse(self, raw: List[str], config: Config) -> FullName:
        if not isinstance(raw, (list, tuple)) or not all(isinstance(n, str) for n in raw):
            raise InputError(source=raw, message="expecting a list of str")

        names = [n.strip() for n in raw]
        index = NameIndex.when(config.ordered_by, len(names))
        validator = ListStringValidator(index)
        if config.bypass:
            validator.validate_index(names)
        else:
            validator.validate(names)

        return self._distribute(names, config, index)

    def _distribute(self, names: List[str], config: Config, index: NameIndex) -> FullName:
        count = len(names)
        full_name = FullName(config)

        if count >= 4:
            full_name.prefix = Name.prefix(names[index.prefix])
        full_name.first_name = FirstName(names[index.first_name])
        if count >= 3:
            full_name.middle_name = self._to_middles(names[index.middle_name], config)
        full_name.last_name = LastName(names[index.last_name])
        if count == 5:
            full_name.suffix = Name.suffix(names[index.suffix])
        return full_name

    @staticmethod
    def _to_middles(text: str, config: Config) -> List[Name]:
        return [Name.middle(m.strip()) for m in _split(text, config.separator.token) if m.strip()]


class JsonNameParser(Parser):
    def _parse(self, raw: Dict[str, str], config: Config) -> FullName:
        nama = self._as_nama(raw)
        if config.bypass:
            Validators.nama.validate_keys(nama)
        else:
            Validators.nama.validate(nama)
        return FullName.parse(raw, config)

    @staticmethod
    def _as_nama(raw: Dict[str, str]) -> Dict[Namon, str]:
        if not isinstance(raw, dict):
            raise InputError(source=raw, message="expecting a dict")

        nama: Dict[Namon, str] = {}
        for key, value in raw.items():
            namon = Namon.cast(key)
            if namon is None:
                raise InputError(
                    source=" ".join(str(v) for v in raw.values()),
                    message=f'unsupported key "{key}"',
                )
            nama[namon] = value
        return nama


class ListNameParser(Parser):
    def _parse(self, raw: List[Name], config: Config) -> FullName:
        Validators.list_name.validate(raw)

        full_name = FullName(config)
        middles: List[Name] = []
        for name in raw:
            if name.is_prefix:
                full_name.prefix = name
            elif name.is_first_name:
                full_name.first_name = name if isinstance(name, FirstName) else FirstName(name.value)
            elif name.is_middle_name:
                middles.append(name)
            elif name.is_last_name:
                mother = name.mother if isinstance(name, LastName) else None
                full_name.last_name = LastName(name.value, mother, config.surname)
            elif name.is_suffix:
                full_name.suffix = name

        if middles:
            full_name.middle_name = middles
        return full_name
