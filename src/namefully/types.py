"""
Enumerations and constants shared across the namefully package.

The name standard used throughout is:

    (prefix) firstName (middleName) lastName (suffix)

where the parenthesised parts are optional.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


MIN_NUMBER_OF_NAME_PARTS = 2
MAX_NUMBER_OF_NAME_PARTS = 5

# Characters accepted by the format interpreter.
ALLOWED_TOKENS: Tuple[str, ...] = (
    ".", ",", " ", "-", "_",
    "b", "B",
    "f", "F",
    "l", "L",
    "m", "M",
    "o", "O",
    "p", "P",
    "s", "S",
    "$",
)


class Title(Enum):
    """Whether a prefix gets a trailing period (US) or not (UK)."""

    US = "us"
    UK = "uk"


class Surname(Enum):
    """How to render a compound last name."""

    FATHER = "father"
    MOTHER = "mother"
    HYPHENATED = "hyphenated"
    ALL = "all"


class NameOrder(Enum):
    """Order of appearance of a full name."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"


class NameType(Enum):
    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    BIRTH_NAME = "birthName"


class Flat(Enum):
    """Variants used to flatten a full name."""

    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    FIRST_MID = "firstMid"
    MID_LAST = "midLast"
    ALL = "all"


class CapsRange(Enum):
    """Range to use when (de)capitalizing a name."""

    NONE = "none"
    INITIAL = "initial"
    ALL = "all"


class Namon(Enum):
    """The five name slots. The value doubles as the map key."""

    PREFIX = "prefix"
    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    SUFFIX = "suffix"

    @property
    def key(self) -> str:
        return self.value

    @classmethod
    def has_key(cls, key: str) -> bool:
        return key in _NAMON_KEYS

    @classmethod
    def cast(cls, key: str) -> Optional["Namon"]:
        """Turn a map key ("firstName", ...) into a Namon, or None."""
        return _NAMON_KEYS.get(key)


_NAMON_KEYS: Dict[str, Namon] = {n.value: n for n in Namon}


class Separator(Enum):
    """Token used to split string values."""

    COMMA = ","
    COLON = ":"
    DOUBLE_QUOTE = '"'
    EMPTY = ""
    HYPHEN = "-"
    PERIOD = "."
    SEMI_COLON = ";"
    SINGLE_QUOTE = "'"
    SPACE = " "
    UNDERSCORE = "_"

    @property
    def token(self) -> str:
        return self.value
