"""
derivative.py
Staged transformations of a ``Namefully`` with undo and change notification.

Every operation derives a new ``FullName`` from the current one, pushes it on
the history stack and notifies subscribers in order. Once closed, the
derivative only exposes its last ``context``.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from namefully.core.exceptions import NotAllowedError
from namefully.full_name import FullName
from namefully.logging import get_logger
from namefully.models.name import FirstName, LastName, Name
from namefully.namefully import Namefully
from namefully.types import CapsRange, NameOrder

logger = get_logger(__name__)

Listener = Callable[[Namefully], None]

CLOSED_MESSAGE = "name derivative builder has been closed"


class NameDerivative:
    def __init__(self, namefully: Namefully):
        self._history: List[Namefully] = [namefully]
        self._listeners: List[Listener] = []
        self._done = False

    @classmethod
    def of(cls, namefully: Namefully) -> "NameDerivative":
        return cls(namefully)

    @property
    def context(self) -> Namefully:
        """Current state; stays readable after closing."""
        return self._history[-1]

    @property
    def is_done(self) -> bool:
        return self._done

    @property
    def history(self) -> List[Namefully]:
        return list(self._history)

    def __repr__(self) -> str:
        state = "closed" if self._done else "open"
        return f"NameDerivative[{state}]: {self.context}"

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for future states; returns an unsubscribe callable."""
        self._guard("subscribe")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def by_first_name(self) -> "NameDerivative":
        return self._order(NameOrder.FIRST_NAME, "by_first_name")

    def by_last_name(self) -> "NameDerivative":
        return self._order(NameOrder.LAST_NAME, "by_last_name")

    def flip(self) -> "NameDerivative":
        self._guard("flip")
        current = self.context
        return self._commit(current.model.copy(current.config.flipped()), "flip")

    def shorten(self) -> "NameDerivative":
        """Keep the plain first name and the last name only."""
        self._guard("shorten")
        model = self.context.model
        short = FullName(self.context.config)
        short.first_name = FirstName(model.first_name.value)
        short.last_name = model.last_name.copy_with()
        return self._commit(short, "shorten")

    def upper(self) -> "NameDerivative":
        self._guard("upper")
        return self._commit(self._recase(upper=True), "upper")

    def lower(self) -> "NameDerivative":
        self._guard("lower")
        return self._commit(self._recase(upper=False), "lower")

    def rollback(self) -> "NameDerivative":
        """Drop the current state; a no-op on the initial state."""
        self._guard("rollback")
        if len(self._history) > 1:
            self._history.pop()
            logger.debug("Rolled back to %r", str(self.context))
            self._notify()
        return self

    def done(self) -> Namefully:
        self._guard("done")
        self.close()
        return self.context

    def close(self) -> None:
        self._done = True
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _guard(self, operation: str) -> None:
        if self._done:
            raise NotAllowedError(source=str(self.context), message=CLOSED_MESSAGE, operation=operation)

    def _order(self, order: NameOrder, operation: str) -> "NameDerivative":
        self._guard(operation)
        current = self.context
        return self._commit(current.model.copy(current.config.merge(ordered_by=order)), operation)

    def _recase(self, upper: bool) -> FullName:
        model = self.context.model.copy()
        atoms: List[Optional[Name]] = [model.prefix, model.first_name, *model.middle_name, model.last_name, model.suffix]
        for atom in atoms:
            if atom is None:
                continue
            if upper:
                atom.caps(CapsRange.ALL)
            else:
                atom.decaps(CapsRange.ALL)
        return model

    def _commit(self, full_name: FullName, operation: str) -> "NameDerivative":
        self._history.append(Namefully(full_name))
        logger.debug("%s -> %r", operation, str(self.context))
        self._notify()
        return self

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.context)
