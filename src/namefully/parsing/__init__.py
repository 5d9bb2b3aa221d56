"""
Parser strategies for each supported raw name shape.
"""

from namefully.parsing.parsers import (
    BoundParser,
    JsonNameParser,
    ListNameParser,
    ListStringParser,
    Parser,
    StringParser,
)

__all__ = [
    "BoundParser",
    "JsonNameParser",
    "ListNameParser",
    "ListStringParser",
    "Parser",
    "StringParser",
]
