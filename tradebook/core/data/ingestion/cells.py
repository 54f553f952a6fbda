"""Text cell to number coercion."""

from __future__ import annotations

import math
import re

from tradebook.core.models.coercion import Coerced

_PLAIN_NUMBER = re.compile(r"^[+-]?\$?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_GROUPED_NUMBER = re.compile(r"^[+-]?\$?\d{1,3}(,\d{3})+(\.\d*)?$")


def is_blank(cell: object) -> bool:
    return cell is None or not str(cell).strip()


def coerce_number(cell: object) -> Coerced:
    """Coerce a cell to a finite float.

    Accepts an optional sign, a leading ``$`` and well-formed thousands
    separators. Blank cells are absent; anything else that does not parse is
    invalid.
    """

    if is_blank(cell):
        return Coerced.absent()
    text = str(cell).strip()
    if _PLAIN_NUMBER.match(text) is None and _GROUPED_NUMBER.match(text) is None:
        return Coerced.invalid()
    value = float(text.replace("$", "").replace(",", ""))
    if not math.isfinite(value):
        return Coerced.invalid()
    return Coerced.valid(value)


def coerce_percent(cell: object) -> Coerced:
    """Coerce a percent-return cell; a trailing ``%`` is dropped first."""

    if is_blank(cell):
        return Coerced.absent()
    text = str(cell).strip()
    if text.endswith("%"):
        text = text[:-1].strip()
        if not text:
            return Coerced.invalid()
    return coerce_number(text)


__all__ = ["coerce_number", "coerce_percent", "is_blank"]
