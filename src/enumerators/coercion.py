"""Id comparison used by ``ById.by_id``.

Loose comparison treats numeric strings as the number they spell, so an id
supplied from a URL or form field (``"2"``) finds an enumerator whose ``id()``
is ``2``.  A numeric string is optional surrounding whitespace, an optional
sign, digits with an optional fraction, and an optional exponent.  Strings
that do not spell a number never equal a number (``"x"`` vs ``0`` is False).
``bool`` is never coerced.

Strict comparison requires equal types and equal values.
"""

from __future__ import annotations

import re
from typing import Any

__all__ = ["ids_match", "loose_equals", "strict_equals"]

_NUMERIC = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")
_INTEGRAL = re.compile(r"\s*[+-]?\d+\s*")


def _as_number(value: Any) -> int | float | None:
    """Return ``value`` as a number, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC.fullmatch(value):
        # int() refuses strings past sys.get_int_max_str_digits().
        try:
            if _INTEGRAL.fullmatch(value):
                return int(value)
            return float(value)
        except (ValueError, OverflowError):
            return None
    return None


def loose_equals(query: Any, candidate: Any) -> bool:
    """Compare with numeric-string coercion.

    Examples::

        loose_equals("2", 2)      # True
        loose_equals("2.0", 2)    # True
        loose_equals("1e1", "10") # True (both numeric)
        loose_equals("x", 0)      # False
        loose_equals(True, "1")   # False (bool is not coerced)
        loose_equals(True, 1)     # False
    """
    if isinstance(query, bool) is not isinstance(candidate, bool):
        return False
    if query == candidate:
        return True
    left = _as_number(query)
    right = _as_number(candidate)
    if left is None or right is None:
        return False
    return left == right


def strict_equals(query: Any, candidate: Any) -> bool:
    """Compare requiring identical types and equal values."""
    return type(query) is type(candidate) and query == candidate


def ids_match(query: Any, candidate: Any, *, loose: bool) -> bool:
    if loose:
        return loose_equals(query, candidate)
    return strict_equals(query, candidate)
