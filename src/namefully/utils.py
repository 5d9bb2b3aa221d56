"""
Small string helpers shared by the models and the facade.
"""

from __future__ import annotations

from namefully.types import CapsRange


def capitalize(text: str, range_: CapsRange = CapsRange.INITIAL) -> str:
    """Upper-case the initial (lowering the rest) or the whole string."""
    if not text or range_ is CapsRange.NONE:
        return text
    if range_ is CapsRange.INITIAL:
        return text[0].upper() + text[1:].lower()
    return text.upper()


def decapitalize(text: str, range_: CapsRange = CapsRange.INITIAL) -> str:
    """Lower-case the initial only, or the whole string."""
    if not text or range_ is CapsRange.NONE:
        return text
    if range_ is CapsRange.INITIAL:
        return text[0].lower() + text[1:]
    return text.lower()


def is_valid_atom(text: object) -> bool:
    """True when ``text`` is a string of 2+ characters once trimmed."""
    return isinstance(text, str) and len(text.strip()) >= 2


def join_non_empty(parts, sep: str = " ") -> str:
    return sep.join(p for p in parts if p)
