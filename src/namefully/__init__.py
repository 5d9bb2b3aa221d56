"""
namefully: handle person names in a particular order, way, or shape.

    from namefully import Namefully

    name = Namefully("Mr John Ben Smith Ph.D")
    name.short      # 'John Smith'
    name.zip()      # 'John B. S.'
"""

from namefully.builder import NameBuilder, NameDerivative
from namefully.config import Config, ConfigRegistry, get_settings, load_settings
from namefully.core.exceptions import (
    ExceptionKind,
    InputError,
    NameException,
    NotAllowedError,
    UnknownError,
    ValidationError,
)
from namefully.formatting import NameFormatter
from namefully.full_name import FullName
from namefully.models import FirstName, LastName, Name, Summary
from namefully.name_index import NameIndex
from namefully.namefully import Namefully
from namefully.parsing import (
    BoundParser,
    JsonNameParser,
    ListNameParser,
    ListStringParser,
    Parser,
    StringParser,
)
from namefully.types import (
    CapsRange,
    Flat,
    NameOrder,
    NameType,
    Namon,
    Separator,
    Surname,
    Title,
)
from namefully.validation import Validators

__version__ = "0.1.0"

__all__ = [
    "BoundParser",
    "CapsRange",
    "Config",
    "ConfigRegistry",
    "ExceptionKind",
    "FirstName",
    "Flat",
    "FullName",
    "InputError",
    "JsonNameParser",
    "LastName",
    "ListNameParser",
    "ListStringParser",
    "Name",
    "NameBuilder",
    "NameDerivative",
    "NameException",
    "NameFormatter",
    "NameIndex",
    "NameOrder",
    "NameType",
    "Namefully",
    "Namon",
    "NotAllowedError",
    "Parser",
    "Separator",
    "StringParser",
    "Summary",
    "Surname",
    "Title",
    "UnknownError",
    "ValidationError",
    "Validators",
    "get_settings",
    "load_settings",
]
