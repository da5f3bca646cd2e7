"""Ordered in-memory binary search tree with balanced rebuilds."""

from .balance import UNBALANCED, checked_height, checked_height_iterative, is_balanced
from .builder import build_balanced, build_from_sorted, sort_unique
from .errors import (
    InvalidArgumentError,
    NotFoundError,
    TreeError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .node import TreeNode
from .ordering import Comparator, compare, numeric_compare, string_compare, value_kind
from .render import pretty_print, render_levels
from .traversal import IN_ORDER, POST_ORDER, PRE_ORDER, Step, walk_depth_first, walk_level_order
from .tree import Tree

__all__ = [
    "Comparator",
    "IN_ORDER",
    "InvalidArgumentError",
    "NotFoundError",
    "POST_ORDER",
    "PRE_ORDER",
    "Step",
    "Tree",
    "TreeError",
    "TreeNode",
    "TypeMismatchError",
    "UNBALANCED",
    "UnsupportedTypeError",
    "build_balanced",
    "build_from_sorted",
    "checked_height",
    "checked_height_iterative",
    "compare",
    "is_balanced",
    "numeric_compare",
    "pretty_print",
    "render_levels",
    "sort_unique",
    "string_compare",
    "value_kind",
    "walk_depth_first",
    "walk_level_order",
]
