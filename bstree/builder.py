"""Balanced tree construction from an unordered collection.

``build_balanced`` sorts and deduplicates its input and then materialises the
median-split tree with an explicit work list instead of recursion, so the size
of the input is never bounded by the interpreter's recursion limit.  Each task
on the work list describes one index range together with the parent slot the
range's median node must be attached to.  Processing order does not change the
resulting shape because the median of every range is fixed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from functools import cmp_to_key
import logging
from typing import Any, Collection, List, Literal, Optional, TypeVar

from .errors import InvalidArgumentError
from .node import TreeNode
from .ordering import Comparator, compare

__all__ = ["build_balanced", "build_from_sorted", "sort_unique"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Side = Literal["left", "right"]


@dataclass(frozen=True, slots=True)
class _BuildTask:
    """Pending range ``[start, end]`` whose median hangs off ``parent.side``."""

    parent: Optional[TreeNode[Any]]
    side: Optional[Side]
    start: int
    end: int


def _require_collection(values: object) -> None:
    if isinstance(values, (str, bytes, bytearray, Mapping)):
        raise InvalidArgumentError(
            f"input must be a sequence of values, not {type(values).__name__}"
        )
    if not isinstance(values, (Sequence, Set)):
        raise InvalidArgumentError(
            f"input must be a sequence of values, not {type(values).__name__}"
        )


def sort_unique(values: Collection[T], comparator: Comparator[T] = compare) -> List[T]:
    """Return *values* sorted by *comparator* without consecutive duplicates.

    Duplicates are detected with ``==`` on neighbouring elements after the
    sort, not with the comparator. The input collection is left untouched.
    """

    _require_collection(values)
    ordered = sorted(values, key=cmp_to_key(comparator))
    unique: List[T] = []
    for index, value in enumerate(ordered):
        if index == 0 or ordered[index - 1] != value:
            unique.append(value)
    return unique


def build_from_sorted(items: Sequence[T]) -> Optional[TreeNode[T]]:
    """Materialise the median-split tree for sorted, duplicate-free *items*."""

    if not items:
        return None

    root: Optional[TreeNode[T]] = None
    stack: List[_BuildTask] = [_BuildTask(None, None, 0, len(items) - 1)]
    while stack:
        task = stack.pop()
        middle = task.start + (task.end - task.start) // 2
        node = TreeNode(items[middle])
        if task.parent is None or task.side is None:
            root = node
        else:
            setattr(task.parent, task.side, node)

        if middle > task.start:
            stack.append(_BuildTask(node, "left", task.start, middle - 1))
        if middle < task.end:
            stack.append(_BuildTask(node, "right", middle + 1, task.end))

    return root


def build_balanced(
    values: Collection[T], comparator: Comparator[T] = compare
) -> Optional[TreeNode[T]]:
    """Build a height-balanced tree from *values* and return its root.

    Raises :class:`~bstree.errors.InvalidArgumentError` when *values* is not a
    finite sequence or set, and propagates comparator errors for values from
    mixed or unsupported domains. Empty input yields ``None``.
    """

    items = sort_unique(values, comparator)
    logger.debug(
        "Building balanced tree from %d values (%d unique)", len(values), len(items)
    )
    return build_from_sorted(items)
