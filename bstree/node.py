"""Node representation for the binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

__all__ = ["TreeNode"]

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class TreeNode(Generic[T]):
    """A single tree cell owning its optional left and right subtrees.

    Nodes compare by identity: two distinct cells holding equal values are
    different nodes. Children are excluded from ``repr`` so printing a deep
    tree never walks the whole graph.
    """

    value: T
    left: Optional["TreeNode[T]"] = field(default=None, repr=False)
    right: Optional["TreeNode[T]"] = field(default=None, repr=False)

    def is_leaf(self) -> bool:
        """Return ``True`` when the node has no children."""

        return self.left is None and self.right is None

    def __str__(self) -> str:
        return str(self.value)
