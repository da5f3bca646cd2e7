"""Iterative traversal engine.

Breadth-first traversal uses a FIFO queue.  The three depth-first orders share
one engine driven by a *push order*: a sequence of :class:`Step` tokens that
says in which order a node's left child, its pending callback and its right
child are pushed onto an explicit LIFO stack.  Because the stack reverses what
is pushed, each push order is the mirror image of the visit order it produces.

Stack entries are either plain nodes, which are expanded according to the push
order, or :class:`_PendingCall` entries that invoke the callback as soon as
they are popped.  Neither traversal touches the native call stack, so tree
depth is never limited by the recursion limit.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, List, NamedTuple, Optional, Sequence, TypeVar, Union

from .errors import InvalidArgumentError
from .node import TreeNode

__all__ = [
    "IN_ORDER",
    "POST_ORDER",
    "PRE_ORDER",
    "Step",
    "Visitor",
    "require_callable",
    "walk_depth_first",
    "walk_level_order",
]

T = TypeVar("T")

Visitor = Callable[[TreeNode[T]], Any]


class Step(Enum):
    """Token describing one push performed while expanding a node."""

    LEFT = "L"
    CALL = "C"
    RIGHT = "R"


IN_ORDER: tuple[Step, ...] = (Step.RIGHT, Step.CALL, Step.LEFT)
PRE_ORDER: tuple[Step, ...] = (Step.RIGHT, Step.LEFT, Step.CALL)
POST_ORDER: tuple[Step, ...] = (Step.CALL, Step.RIGHT, Step.LEFT)


class _PendingCall(NamedTuple):
    node: TreeNode[Any]
    callback: Visitor[Any]


def require_callable(callback: object) -> None:
    """Raise :class:`InvalidArgumentError` unless *callback* is callable."""

    if not callable(callback):
        raise InvalidArgumentError("callback must be a function")


def walk_level_order(root: Optional[TreeNode[T]], callback: Visitor[T]) -> None:
    """Invoke *callback* for every node reachable from *root* breadth-first."""

    require_callable(callback)
    if root is None:
        return

    queue: Deque[TreeNode[T]] = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
        callback(node)


def walk_depth_first(
    root: Optional[TreeNode[T]],
    push_order: Sequence[Step],
    callback: Visitor[T],
) -> None:
    """Invoke *callback* once per node in the order implied by *push_order*.

    ``push_order`` must contain each :class:`Step` exactly once; see
    :data:`IN_ORDER`, :data:`PRE_ORDER` and :data:`POST_ORDER`.
    """

    require_callable(callback)
    if not all(isinstance(step, Step) for step in push_order) or sorted(
        step.value for step in push_order
    ) != sorted(step.value for step in Step):
        raise InvalidArgumentError("push order must contain LEFT, CALL and RIGHT once")
    if root is None:
        return

    stack: List[Union[TreeNode[T], _PendingCall]] = [root]
    while stack:
        entry = stack.pop()
        if isinstance(entry, _PendingCall):
            entry.callback(entry.node)
            continue

        for step in push_order:
            if step is Step.LEFT:
                if entry.left is not None:
                    stack.append(entry.left)
            elif step is Step.CALL:
                stack.append(_PendingCall(entry, callback))
            elif entry.right is not None:
                stack.append(entry.right)
