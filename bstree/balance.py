"""Height-balance verification.

Two interchangeable algorithms answer whether every node satisfies
``|height(left) - height(right)| <= 1``.  Both return the height of the tree
counted in nodes (an empty tree is ``0``, a single leaf ``1``) or
:data:`UNBALANCED` as soon as an offending node is found.

``checked_height`` is the direct post-order recursion.  ``checked_height_iterative``
computes exactly the same value with explicit two-phase stack frames: the first
visit of a frame schedules its children, the second visit folds the heights
its children wrote back into it and reports its own height to the parent
frame through a stack index.  The iterative form is the one to use for
degenerate trees deeper than the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, List, Optional

from .node import TreeNode

__all__ = [
    "UNBALANCED",
    "checked_height",
    "checked_height_iterative",
    "is_balanced",
]

logger = logging.getLogger(__name__)

UNBALANCED = -1


def checked_height(node: Optional[TreeNode[Any]]) -> int:
    """Return the height of *node* or :data:`UNBALANCED`."""

    if node is None:
        return 0

    left_height = checked_height(node.left)
    if left_height == UNBALANCED:
        return UNBALANCED

    right_height = checked_height(node.right)
    if right_height == UNBALANCED:
        return UNBALANCED

    if abs(left_height - right_height) > 1:
        return UNBALANCED
    return max(left_height, right_height) + 1


@dataclass(slots=True)
class _Frame:
    """Simulated call frame for the iterative post-order accumulation."""

    node: TreeNode[Any]
    parent_index: int
    visited: bool = False
    left_height: int = 0
    right_height: int = 0


def checked_height_iterative(node: Optional[TreeNode[Any]]) -> int:
    """Return the same value as :func:`checked_height` without recursion."""

    if node is None:
        return 0

    stack: List[_Frame] = [_Frame(node, parent_index=-1)]
    result = 0
    while stack:
        frame = stack.pop()

        if not frame.visited:
            frame.visited = True
            index = len(stack)
            stack.append(frame)
            if frame.node.right is not None:
                stack.append(_Frame(frame.node.right, parent_index=index))
            if frame.node.left is not None:
                stack.append(_Frame(frame.node.left, parent_index=index))
            continue

        if abs(frame.left_height - frame.right_height) > 1:
            return UNBALANCED
        height = max(frame.left_height, frame.right_height) + 1

        if frame.parent_index < 0:
            result = height
            continue
        parent = stack[frame.parent_index]
        if parent.node.left is frame.node:
            parent.left_height = height
        else:
            parent.right_height = height

    return result


def is_balanced(root: Optional[TreeNode[Any]], *, iterative: bool = False) -> bool:
    """Return ``True`` when every node under *root* is height-balanced.

    The recursive check falls back to the iterative one when the tree is
    deeper than the interpreter's recursion limit.
    """

    if iterative:
        return checked_height_iterative(root) != UNBALANCED
    try:
        return checked_height(root) != UNBALANCED
    except RecursionError:
        logger.debug("Recursion limit reached, switching to the iterative balance check")
        return checked_height_iterative(root) != UNBALANCED
