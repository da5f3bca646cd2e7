from __future__ import annotations

import sys

from bstree import Tree, TreeNode, pretty_print, render_levels


def test_pretty_print_balanced_tree() -> None:
    tree = Tree([1, 2, 3, 4, 5, 6, 7])
    expected = "\n".join(
        [
            "|       ┌── 7",
            "|   ┌── 6",
            "|   |   └── 5",
            "└── 4",
            "    |   ┌── 3",
            "    └── 2",
            "        └── 1",
        ]
    )
    assert pretty_print(tree) == expected
    assert str(tree) == expected


def test_pretty_print_accepts_subtree_root() -> None:
    tree = Tree([1, 2, 3, 4, 5, 6, 7])
    assert pretty_print(tree.find(2)) == "\n".join(["|   ┌── 3", "└── 2", "    └── 1"])


def test_pretty_print_empty() -> None:
    assert pretty_print(None) == "<empty>"
    assert pretty_print(Tree()) == "<empty>"


def test_pretty_print_deep_chain() -> None:
    size = sys.getrecursionlimit() + 10
    root = TreeNode(0)
    current = root
    for value in range(1, size):
        current.right = TreeNode(value)
        current = current.right
    lines = pretty_print(root).splitlines()
    assert len(lines) == size
    assert lines[-1] == "└── 0"


def test_render_levels_marks_missing_children() -> None:
    root = TreeNode(1, TreeNode(2, right=TreeNode(4)), TreeNode(3))
    assert render_levels(root) == "\n".join(["1", "2 3", "· 4 · ·"])


def test_render_levels_trims_placeholder_only_levels() -> None:
    assert render_levels(Tree([1, 2, 3, 4, 5, 6, 7])) == "\n".join(["4", "2 6", "1 3 5 7"])
    assert render_levels(Tree()) == "<empty>"


def test_tree_node_identity_and_str() -> None:
    first, second = TreeNode(5), TreeNode(5)
    assert first != second
    assert str(first) == "5"
    assert first.is_leaf()
    assert repr(TreeNode(3, TreeNode(1))) == "TreeNode(value=3)"
