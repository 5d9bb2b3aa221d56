"""
formatter.py
Small pattern language to render a name.

Each character of a pattern is a directive:

    .  ,  space  -  _     copied as-is
    b / B                 birth name
    f / F                 first name (with any additional first names)
    l / L                 last name
    m / M                 middle names, space separated
    o / O                 official form: [prefix] LAST, First [Middle][,] [suffix]
    p / P                 prefix
    s / S                 suffix
    $                     keep only the initial of the next f, l or m

Capital directives upper-case their output. The names ``short``, ``long``,
``public`` and ``official`` are accepted as whole patterns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from namefully.core.exceptions import NotAllowedError
from namefully.types import ALLOWED_TOKENS

if TYPE_CHECKING:
    from namefully.namefully import Namefully

INITIAL_MARK = "$"
LITERALS = (".", ",", " ", "-", "_")


class NameFormatter:
    """Renders a ``Namefully`` through a format pattern."""

    def __init__(self, namefully: "Namefully"):
        self.namefully = namefully
        self._shortcuts: Dict[str, Callable[[], str]] = {
            "short": lambda: self.namefully.short,
            "long": lambda: self.namefully.long,
            "public": lambda: self.namefully.public,
        }

    def format(self, pattern: str = "official") -> str:
        if pattern in self._shortcuts:
            return self._shortcuts[pattern]()
        if pattern == "official":
            pattern = "o"

        group = ""
        formatted: List[str] = []
        for char in pattern:
            if char not in ALLOWED_TOKENS:
                raise NotAllowedError(
                    source=self.namefully.full,
                    operation="format",
                    message=f"unsupported character <{char}> from {pattern}.",
                )
            group += char
            if char == INITIAL_MARK:
                continue
            formatted.append(self._map(group) or "")
            group = ""
        return "".join(formatted).strip()

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _map(self, group: str) -> Optional[str]:
        name = self.namefully
        if group in LITERALS:
            return group
        if group.startswith(INITIAL_MARK):
            return self._initial(group)

        key = group.lower()
        if key == "b":
            out = name.birth
        elif key == "f":
            out = name.first
        elif key == "l":
            out = name.last
        elif key == "m":
            out = " ".join(name.middle_name())
        elif key == "o":
            out = self._official()
        elif key == "p":
            out = name.prefix
        elif key == "s":
            out = name.suffix
        else:
            return None

        if out is None:
            return None
        return out.upper() if group.isupper() else out

    def _initial(self, group: str) -> Optional[str]:
        model = self.namefully.model
        key = group[-1]
        if key in ("f", "F"):
            initials = model.first_name.initials()
        elif key in ("l", "L"):
            initials = model.last_name.initials()
        elif key in ("m", "M"):
            initials = [model.middle_name[0].initials()[0]] if model.middle_name else []
        else:
            return None

        if not initials:
            return None
        return initials[0].upper() if key.isupper() else initials[0]

    def _official(self) -> str:
        name = self.namefully
        ending = "," if name.config.ending else ""

        parts: List[str] = []
        if name.prefix:
            parts.append(name.prefix)
        parts.append(f"{name.last},".upper())
        if name.has_middle:
            parts.extend([name.first, " ".join(name.middle_name()) + ending])
        else:
            parts.append(name.first + ending)
        if name.suffix:
            parts.append(name.suffix)
        return " ".join(parts).strip()
