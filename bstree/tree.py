"""Ordered in-memory binary search tree.

:class:`Tree` owns a graph of :class:`~bstree.node.TreeNode` cells and keeps
the binary-search ordering invariant after every public operation: values in a
node's left subtree sort before it, values in its right subtree sort after it,
and no value is stored twice.

Construction and :meth:`Tree.rebalance` produce a height-balanced tree through
:mod:`bstree.builder`.  Point insertions and deletions never rebalance, so a
run of ascending inserts degrades the tree into a chain until the next
explicit rebuild.

Every comparison goes through the tree's comparator (``bstree.ordering.compare``
by default), which rejects values from mixed or unsupported domains.  The
traversals, the builder and the iterative balance check all run on explicit
stacks and queues, so the depth of the tree is not limited by the recursion
limit.  The recursive balance check is the exception and is kept for parity.
"""

from __future__ import annotations

from collections import deque
import logging
from typing import Any, Collection, Deque, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .balance import is_balanced
from .builder import build_balanced
from .errors import NotFoundError
from .node import TreeNode
from .ordering import Comparator, compare
from .render import pretty_print
from .traversal import (
    IN_ORDER,
    POST_ORDER,
    PRE_ORDER,
    Visitor,
    walk_depth_first,
    walk_level_order,
)

__all__ = ["Tree"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Tree(Generic[T]):
    """Binary search tree over values of a single ordered domain."""

    __slots__ = ("_root", "_size", "_compare")

    def __init__(
        self,
        values: Optional[Collection[T]] = None,
        *,
        comparator: Comparator[T] = compare,
    ) -> None:
        self._root: Optional[TreeNode[T]] = None
        self._size = 0
        self._compare: Comparator[T] = comparator
        if values is not None:
            self._rebuild(values)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[TreeNode[T]]:
        """Root node, or ``None`` for an empty tree."""

        return self._root

    @property
    def comparator(self) -> Comparator[T]:
        """Comparator every ordering decision of this tree goes through."""

        return self._compare

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __str__(self) -> str:
        return pretty_print(self._root)

    def values(self) -> List[T]:
        """Return a snapshot of the stored values in ascending order."""

        collected: List[T] = []
        self.in_order(lambda node: collected.append(node.value))
        return collected

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def find(self, value: T) -> Optional[TreeNode[T]]:
        """Return the node holding *value*, or ``None`` when it is absent."""

        node, _ = self._locate(value)
        return node

    def _locate(self, value: T) -> Tuple[Optional[TreeNode[T]], Optional[TreeNode[T]]]:
        """Return ``(node, parent)`` for *value*; ``node`` is ``None`` if absent.

        When the value is absent, ``parent`` is the last node visited, i.e. the
        node under which the value would be attached.
        """

        parent: Optional[TreeNode[T]] = None
        current = self._root
        while current is not None:
            order = self._compare(current.value, value)
            if order == 0:
                return current, parent
            parent = current
            current = current.left if order > 0 else current.right
        return None, parent

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert_one(self, value: T) -> None:
        """Insert *value* as a new leaf unless it is already present.

        The tree is not rebalanced afterwards.
        """

        existing, parent = self._locate(value)
        if existing is not None:
            logger.debug("Ignoring duplicate insert of %r", value)
            return

        node = TreeNode(value)
        if parent is None:
            # Empty tree: validate the value's domain before it becomes the root.
            self._compare(value, value)
            self._root = node
        elif self._compare(parent.value, value) > 0:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def insert_many(self, values: Iterable[T]) -> None:
        """Insert each of *values* independently, in iteration order."""

        for value in values:
            self.insert_one(value)

    def delete(self, value: T) -> None:
        """Remove *value* from the tree; absent values are ignored."""

        target, parent = self._locate(value)
        if target is None:
            logger.debug("Ignoring delete of absent value %r", value)
            return

        if target.left is not None and target.right is not None:
            successor_parent = target
            successor = target.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            target.value = successor.value
            target, parent = successor, successor_parent

        # At most one child remains on the node being detached.
        replacement = target.left if target.left is not None else target.right
        if parent is None:
            self._root = replacement
        elif parent.left is target:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    delete_item = delete

    def rebalance(self) -> None:
        """Rebuild the tree into a height-balanced shape."""

        snapshot = self.values()
        logger.debug("Rebalancing tree with %d values", len(snapshot))
        self._rebuild(snapshot)

    def _rebuild(self, values: Collection[T]) -> None:
        self._root = build_balanced(values, self._compare)
        size = 0

        def count(_: TreeNode[T]) -> None:
            nonlocal size
            size += 1

        walk_level_order(self._root, count)
        self._size = size

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def level_order(self, callback: Visitor[T]) -> None:
        """Invoke *callback* for each node breadth-first."""

        walk_level_order(self._root, callback)

    def pre_order(self, callback: Visitor[T]) -> None:
        """Invoke *callback* for each node: node, left subtree, right subtree."""

        walk_depth_first(self._root, PRE_ORDER, callback)

    def in_order(self, callback: Visitor[T]) -> None:
        """Invoke *callback* for each node in ascending value order."""

        walk_depth_first(self._root, IN_ORDER, callback)

    def post_order(self, callback: Visitor[T]) -> None:
        """Invoke *callback* for each node: left subtree, right subtree, node."""

        walk_depth_first(self._root, POST_ORDER, callback)

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------
    def height(self, node_or_value: Any) -> int:
        """Return the number of edges on the longest path down to a leaf.

        *node_or_value* may be a node, which is measured directly, or a value,
        which is looked up first. Raises :class:`NotFoundError` when the value
        is not stored in the tree.
        """

        if isinstance(node_or_value, TreeNode):
            start: Optional[TreeNode[T]] = node_or_value
        else:
            start = self.find(node_or_value)
            if start is None:
                raise NotFoundError("unable to calculate height, value not found")

        deepest = 0
        queue: Deque[Tuple[int, TreeNode[T]]] = deque([(0, start)])
        while queue:
            distance, node = queue.popleft()
            deepest = max(deepest, distance)
            if node.left is not None:
                queue.append((distance + 1, node.left))
            if node.right is not None:
                queue.append((distance + 1, node.right))
        return deepest

    def depth(self, node_or_value: Any) -> int:
        """Return the number of edges between the root and a value.

        A node argument is reduced to its value and searched from the root, so
        the answer reflects where that value lives in this tree. Raises
        :class:`NotFoundError` when the value is not stored in the tree.
        """

        value = node_or_value.value if isinstance(node_or_value, TreeNode) else node_or_value
        depth = 0
        current = self._root
        while current is not None:
            order = self._compare(current.value, value)
            if order == 0:
                return depth
            current = current.left if order > 0 else current.right
            depth += 1
        raise NotFoundError("unable to calculate depth, value not found")

    def is_balanced(self, iterative: bool = False) -> bool:
        """Return ``True`` when every node is height-balanced.

        ``iterative=True`` selects the stack-based check. The recursive check
        switches to it by itself on trees deeper than the recursion limit.
        """

        return is_balanced(self._root, iterative=iterative)
