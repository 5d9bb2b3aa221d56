"""
Regular-expression rules for name content.

Names contain letters only, with a few joiners. The letter class covers:

- a-z, A-Z      Latin
- À-Ö          Latin/German
- Ø-ö, ø-ÿ     German/Icelandic
- Ѐ-ӿ          Cyrillic
- Ά-ω, Α-ώ     Greek
"""

from __future__ import annotations

import re

BASE = "[a-zA-ZÀ-ÖØ-öø-ÿЀ-ӿΆ-ωΑ-ώ]"


class ValidationRule:
    """Compiled patterns per slot.

    ``namon`` matches atoms such as ``Mr``, ``Jean-Baptiste``, ``O'connor``
    or ``Ph.D``: letters joined by a single apostrophe, space, hyphen or
    period. Middle names accept the same joiners minus the period.
    """

    base = re.compile(BASE)
    namon = re.compile(rf"^{BASE}+(?:[' \-.]{BASE}+)*$")
    first_name = namon
    middle_name = re.compile(rf"^{BASE}+(?:[' \-]{BASE}+)*$")
    last_name = namon

    @staticmethod
    def matches(rule: "re.Pattern[str]", value: str) -> bool:
        return rule.fullmatch(value) is not None
