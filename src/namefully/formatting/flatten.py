"""
flatten.py
Compacts a name into a character budget by swapping parts for initials.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from namefully.logging import get_logger
from namefully.types import Flat, NameOrder, Surname

if TYPE_CHECKING:
    from namefully.namefully import Namefully

logger = get_logger(__name__)

# Variant tried next when the result still exceeds the limit. ALL is final.
ESCALATION: Dict[Flat, Flat] = {
    Flat.FIRST_NAME: Flat.MIDDLE_NAME,
    Flat.MIDDLE_NAME: Flat.LAST_NAME,
    Flat.LAST_NAME: Flat.FIRST_MID,
    Flat.FIRST_MID: Flat.MID_LAST,
    Flat.MID_LAST: Flat.ALL,
}


def flatten(
    namefully: "Namefully",
    limit: int = 20,
    by: Flat = Flat.MIDDLE_NAME,
    with_period: bool = True,
    recursive: bool = False,
    with_more: bool = False,
    surname: Optional[Surname] = None,
) -> str:
    """Abbreviate the parts selected by ``by`` when the birth name is too long.

    Returns the full name untouched when the birth name fits in ``limit``.
    With ``recursive`` the next variant is tried until the result fits or
    every part has been abbreviated.
    """
    if namefully.length <= limit:
        return namefully.full

    model = namefully.model
    sep = "." if with_period else ""
    joiner = f"{sep} "

    fn = model.first_name.to_string()
    ln = model.last_name.to_string()
    mn = " ".join(namefully.middle_name())
    f = joiner.join(model.first_name.initials(with_more=with_more)) + sep
    l = joiner.join(model.last_name.initials(surname)) + sep
    m = joiner.join(n.initials()[0] for n in model.middle_name) + sep if model.middle_name else ""

    first, middle, last = {
        Flat.FIRST_NAME: (f, mn, ln),
        Flat.MIDDLE_NAME: (fn, m, ln),
        Flat.LAST_NAME: (fn, mn, l),
        Flat.FIRST_MID: (f, m, ln),
        Flat.MID_LAST: (fn, m, l),
        Flat.ALL: (f, m, l),
    }[by]

    if namefully.config.ordered_by is NameOrder.FIRST_NAME:
        parts: List[str] = [first, middle, last]
    else:
        parts = [last, first, middle]
    flat = " ".join(p for p in parts if p)

    if recursive and len(flat) > limit and by in ESCALATION:
        logger.debug("Flattened %r is over %d chars, escalating to %s", flat, limit, ESCALATION[by].value)
        return flatten(
            namefully,
            limit=limit,
            by=ESCALATION[by],
            with_period=with_period,
            recursive=recursive,
            with_more=with_more,
            surname=surname,
        )
    return flat


def zip_name(namefully: "Namefully", by: Flat = Flat.MID_LAST, with_period: bool = True) -> str:
    """Flatten regardless of length."""
    return flatten(namefully, limit=0, by=by, with_period=with_period)
