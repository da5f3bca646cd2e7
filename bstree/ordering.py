"""Total-order comparators used by :class:`bstree.tree.Tree`.

A comparator receives two values and returns a negative number, zero or a
positive number depending on whether the first value sorts before, together
with or after the second one.  All tree operations funnel their comparisons
through a single comparator, which keeps it the one extension point for new
value domains.

Two statically-domained comparators are provided:

* ``numeric_compare`` – real numbers (``bool`` is deliberately excluded).
* ``string_compare`` – strings ordered lexicographically by code point.

``compare`` is the default comparator; it classifies both operands and
delegates to one of the above, raising ``TypeMismatchError`` for operands of
different kinds and ``UnsupportedTypeError`` when the shared kind has no
ordering.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable, Dict, TypeVar

from .errors import TypeMismatchError, UnsupportedTypeError

__all__ = [
    "Comparator",
    "compare",
    "numeric_compare",
    "string_compare",
    "value_kind",
]

T = TypeVar("T")

Comparator = Callable[[T, T], int]

NUMERIC = "number"
STRING = "string"


def value_kind(value: object) -> str:
    """Return the ordering domain *value* belongs to.

    Numbers and strings map to the shared ``"number"`` and ``"string"``
    domains. Any other value is classified by its type name so that two
    unrelated types still report a mismatch before an unsupported type.
    """

    if isinstance(value, bool):
        return type(value).__name__
    if isinstance(value, Real):
        return NUMERIC
    if isinstance(value, str):
        return STRING
    return type(value).__name__


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def numeric_compare(a: Real, b: Real) -> int:
    """Compare two real numbers.

    NaN has no place in a total order and raises ``UnsupportedTypeError``.
    """

    for operand in (a, b):
        if value_kind(operand) != NUMERIC:
            raise TypeMismatchError(
                f"unable to compare, expected a number but received {type(operand).__name__}"
            )
        if operand != operand:
            raise UnsupportedTypeError("unable to compare, NaN is not ordered")
    return _sign(a, b)


def string_compare(a: str, b: str) -> int:
    """Compare two strings lexicographically."""

    for operand in (a, b):
        if value_kind(operand) != STRING:
            raise TypeMismatchError(
                f"unable to compare, expected a string but received {type(operand).__name__}"
            )
    return _sign(a, b)


_BY_KIND: Dict[str, Comparator[Any]] = {
    NUMERIC: numeric_compare,
    STRING: string_compare,
}


def compare(a: Any, b: Any) -> int:
    """Compare *a* and *b* using the ordering of their shared domain."""

    kind = value_kind(a)
    other = value_kind(b)
    if kind != other:
        raise TypeMismatchError(
            f"unable to compare, elements have different types ({kind} and {other})"
        )
    comparator = _BY_KIND.get(kind)
    if comparator is None:
        raise UnsupportedTypeError(f'unable to compare, invalid type "{kind}"')
    return comparator(a, b)
