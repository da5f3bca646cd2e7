"""Property-based checks of the tree invariants."""

from __future__ import annotations

from typing import Any, List, Optional

from hypothesis import given, strategies as st

from bstree import Tree, TreeNode, checked_height, checked_height_iterative

small_ints = st.lists(st.integers(min_value=-1_000, max_value=1_000), max_size=80)


def _assert_ordered(node: Optional[TreeNode[Any]], low: Any = None, high: Any = None) -> None:
    stack = [(node, low, high)]
    while stack:
        current, lower, upper = stack.pop()
        if current is None:
            continue
        assert lower is None or lower < current.value
        assert upper is None or current.value < upper
        stack.append((current.left, lower, current.value))
        stack.append((current.right, current.value, upper))


@given(small_ints)
def test_build_yields_sorted_unique_values(xs: List[int]) -> None:
    tree = Tree(xs)
    assert tree.values() == sorted(set(xs))
    assert len(tree) == len(set(xs))
    _assert_ordered(tree.root)


@given(st.lists(st.text(max_size=6), max_size=40))
def test_build_strings_yields_sorted_unique_values(xs: List[str]) -> None:
    assert Tree(xs).values() == sorted(set(xs))


@given(small_ints)
def test_built_trees_are_balanced_under_both_checks(xs: List[int]) -> None:
    tree = Tree(xs)
    assert tree.is_balanced()
    assert tree.is_balanced(iterative=True)


@given(small_ints)
def test_balance_checks_agree_on_inserted_trees(xs: List[int]) -> None:
    tree: Tree[int] = Tree()
    tree.insert_many(xs)
    assert checked_height(tree.root) == checked_height_iterative(tree.root)
    _assert_ordered(tree.root)


@given(small_ints, st.integers(min_value=-1_000, max_value=1_000))
def test_insert_is_idempotent(xs: List[int], extra: int) -> None:
    tree: Tree[int] = Tree()
    tree.insert_many(xs)
    tree.insert_one(extra)
    before = tree.values()
    tree.insert_one(extra)
    assert tree.values() == before
    assert len(tree) == len(before)


@given(st.lists(st.integers(), min_size=1, max_size=60, unique=True), st.data())
def test_delete_then_find(xs: List[int], data: st.DataObject) -> None:
    tree: Tree[int] = Tree()
    tree.insert_many(xs)
    victim = data.draw(st.sampled_from(xs))

    tree.delete(victim)

    assert tree.find(victim) is None
    for value in xs:
        if value != victim:
            assert tree.find(value) is not None
    assert len(tree) == len(xs) - 1
    assert tree.values() == sorted(set(xs) - {victim})
    _assert_ordered(tree.root)


@given(small_ints)
def test_rebalance_preserves_values(xs: List[int]) -> None:
    tree: Tree[int] = Tree()
    tree.insert_many(sorted(set(xs)))
    tree.rebalance()
    assert tree.values() == sorted(set(xs))
    assert tree.is_balanced()
    assert tree.is_balanced(iterative=True)
