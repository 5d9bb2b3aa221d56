"""
Descriptive character statistics for a piece of name text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass(slots=True)
class Summary:
    """Upper-cased character distribution of ``text``.

    Characters listed in ``restrictions`` (a single space by default) are left
    out of ``count``, ``frequency``, ``top`` and ``unique``; ``length`` is the
    raw text length.
    """

    text: str
    restrictions: List[str] = field(default_factory=lambda: [" "])
    distribution: Dict[str, int] = field(init=False, default_factory=dict)
    count: int = field(init=False, default=0)
    frequency: int = field(init=False, default=0)
    top: str = field(init=False, default="")
    unique: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.distribution = _group_by_char(self.text.upper())
        excluded = {r.upper() for r in self.restrictions}
        for char, freq in self.distribution.items():
            if char in excluded:
                continue
            self.count += freq
            if freq >= self.frequency:
                self.frequency = freq
                self.top = char
            self.unique += 1

    @property
    def length(self) -> int:
        return len(self.text)

    @classmethod
    def of(cls, text: str, restrictions: Optional[Iterable[str]] = None) -> "Summary":
        return cls(text, list(restrictions) if restrictions is not None else [" "])


def _group_by_char(text: str) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for char in text:
        freq[char] = freq.get(char, 0) + 1
    return freq
