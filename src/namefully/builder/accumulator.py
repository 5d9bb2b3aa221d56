"""
accumulator.py
Collects ``Name`` atoms one at a time before turning them into a ``Namefully``.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterable, Iterator, Optional

from namefully.config import Config
from namefully.models.name import Name
from namefully.namefully import Namefully
from namefully.validation.validators import Validators


class NameBuilder:
    """Double-ended queue of name atoms.

    ``build`` requires 2 to 5 atoms, including a first and a last name.
    """

    def __init__(self, names: Optional[Iterable[Name]] = None):
        self._queue: Deque[Name] = deque()
        if names:
            self.add_all(names)

    @classmethod
    def of(cls, *names: Name) -> "NameBuilder":
        return cls(names)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Name]:
        return iter(list(self._queue))

    def __repr__(self) -> str:
        return f"NameBuilder({list(self._queue)!r})"

    # Adding -------------------------------------------------------------

    def add(self, name: Name) -> "NameBuilder":
        self._queue.append(name)
        return self

    def add_first(self, name: Name) -> "NameBuilder":
        self._queue.appendleft(name)
        return self

    def add_last(self, name: Name) -> "NameBuilder":
        return self.add(name)

    def add_all(self, names: Iterable[Name]) -> "NameBuilder":
        self._queue.extend(names)
        return self

    # Removing -----------------------------------------------------------

    def remove(self, name: Name) -> bool:
        try:
            self._queue.remove(name)
        except ValueError:
            return False
        return True

    def remove_first(self) -> Optional[Name]:
        return self._queue.popleft() if self._queue else None

    def remove_last(self) -> Optional[Name]:
        return self._queue.pop() if self._queue else None

    def remove_where(self, test: Callable[[Name], bool]) -> "NameBuilder":
        self._queue = deque(n for n in self._queue if not test(n))
        return self

    def retain_where(self, test: Callable[[Name], bool]) -> "NameBuilder":
        self._queue = deque(n for n in self._queue if test(n))
        return self

    def clear(self) -> "NameBuilder":
        self._queue.clear()
        return self

    # Building -----------------------------------------------------------

    def build(self, config: Optional[Config] = None) -> Namefully:
        names = list(self._queue)
        Validators.list_name.validate(names)
        return Namefully.of(names, config)
