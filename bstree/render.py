"""Diagnostic renderings of a tree.

``pretty_print`` draws the familiar sideways diagram with branch connectors:
the right subtree is printed above a node and the left subtree below it, so
reading the output top to bottom walks the values in descending order.

``render_levels`` prints one line per level with ``·`` marking missing
children, which makes the shape of shallow trees easy to eyeball.

Neither function is part of the data contract; they exist for debugging and
for the ``tree_balance`` demonstration CLI.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List, Optional, Protocol, Tuple, Union

from .node import TreeNode

__all__ = ["EMPTY", "pretty_print", "render_levels"]

EMPTY = "<empty>"


class _Rooted(Protocol):
    @property
    def root(self) -> Optional[TreeNode[Any]]: ...


Renderable = Union[TreeNode[Any], _Rooted, None]


def _resolve_root(target: Renderable) -> Optional[TreeNode[Any]]:
    if target is None or isinstance(target, TreeNode):
        return target
    return target.root


def pretty_print(target: Renderable) -> str:
    """Return the branch-connector diagram for a tree or a subtree root."""

    root = _resolve_root(target)
    if root is None:
        return EMPTY

    lines: List[str] = []
    stack: List[Union[str, Tuple[TreeNode[Any], str, bool]]] = [(root, "", True)]
    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            lines.append(entry)
            continue

        node, prefix, is_left = entry
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "|   "), True))
        stack.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.value}")
        if node.right is not None:
            stack.append((node.right, prefix + ("|   " if is_left else "    "), False))

    return "\n".join(lines)


def render_levels(target: Renderable) -> str:
    """Render the tree level by level, marking missing nodes with ``·``.

    Rendering stops at the first level whose slots are all placeholders, so
    the output never ends with a placeholder-only row.
    """

    root = _resolve_root(target)
    if root is None:
        return EMPTY

    rows: List[str] = []
    level: Deque[Optional[TreeNode[Any]]] = deque([root])
    while level:
        cells: List[str] = []
        has_children = False
        for _ in range(len(level)):
            node = level.popleft()
            if node is None:
                cells.append("·")
                level.extend((None, None))
                continue
            cells.append(str(node.value))
            level.extend((node.left, node.right))
            has_children = has_children or not node.is_leaf()

        rows.append(" ".join(cells))
        if not has_children:
            break

    return "\n".join(rows)
