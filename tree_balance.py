"""Command line demonstration harness for the ``bstree`` package.

Running the module without arguments prints reports for two built-in cases: a
perfectly balanced tree built from ``1..7`` and a chain produced by ascending
inserts.  Passing values builds a custom tree instead, optionally followed by
extra inserts, deletions and a rebalance::

    python tree_balance.py 8 3 10 1 6 --insert 11 12 13 --delete 3
    python tree_balance.py pear apple fig --kind string --rebalance

Each report contains the balance verdict, the branch-connector diagram, the
level-by-level rendering and a table of the four traversal orders.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bstree import Tree, TreeError, pretty_print, render_levels

logger = logging.getLogger(__name__)

console = Console()


@dataclass(frozen=True)
class DemoCase:
    """A tree to report on, described by the operations that produce it."""

    name: str
    values: Sequence[Any] = ()
    inserts: Sequence[Any] = ()
    deletes: Sequence[Any] = ()
    rebalance: bool = False

    def build(self) -> Tree[Any]:
        """Materialise the tree associated with this case."""

        tree: Tree[Any] = Tree(list(self.values))
        tree.insert_many(self.inserts)
        for value in self.deletes:
            tree.delete(value)
        if self.rebalance:
            tree.rebalance()
        return tree


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(name="Balanced", values=[1, 2, 3, 4, 5, 6, 7])
    yield DemoCase(name="Skewed", inserts=[1, 2, 3, 4])


def collect_traversals(tree: Tree[Any]) -> Dict[str, List[Any]]:
    """Return the values visited by each traversal order, keyed by name."""

    orders: Dict[str, Callable[..., None]] = {
        "level-order": tree.level_order,
        "pre-order": tree.pre_order,
        "in-order": tree.in_order,
        "post-order": tree.post_order,
    }
    collected: Dict[str, List[Any]] = {}
    for name, traverse in orders.items():
        visited: List[Any] = []
        traverse(lambda node: visited.append(node.value))
        collected[name] = visited
    return collected


def _traversal_table(tree: Tree[Any]) -> Table:
    table = Table(title="Traversals")
    table.add_column("Order", no_wrap=True)
    table.add_column("Values")
    for name, visited in collect_traversals(tree).items():
        table.add_row(name, escape(", ".join(str(value) for value in visited)))
    return table


def report(case: DemoCase, *, iterative: bool = False) -> Tree[Any]:
    """Print the report for *case* and return the tree it describes."""

    tree = case.build()
    if tree.root is None:
        console.print(f"{case.name} tree: <empty>", markup=False, highlight=False)
        return tree

    status = "Yes" if tree.is_balanced(iterative=iterative) else "No"
    console.print(
        f"{case.name} tree balanced? {status}", markup=False, highlight=False
    )
    console.print(pretty_print(tree), markup=False, highlight=False, soft_wrap=True)
    console.print()
    console.print(render_levels(tree), markup=False, highlight=False, soft_wrap=True)
    console.print(
        f"size: {len(tree)}  height: {tree.height(tree.root)}",
        markup=False,
        highlight=False,
    )
    table = _traversal_table(tree)
    console.print(table, markup=False, highlight=False)
    return tree


def _parse_value(raw: str, kind: str) -> Any:
    if kind == "string":
        return raw
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "values",
        nargs="*",
        help="Values used to build a balanced tree. Omit to run the built-in demos.",
    )
    parser.add_argument(
        "--kind",
        default="number",
        choices=["number", "string"],
        help="Value domain for every supplied value (default: number)",
    )
    parser.add_argument(
        "--insert",
        nargs="+",
        action="extend",
        default=[],
        help="Values inserted one by one after construction",
    )
    parser.add_argument(
        "--delete",
        nargs="+",
        action="extend",
        default=[],
        help="Values deleted after the inserts",
    )
    parser.add_argument(
        "--rebalance",
        action="store_true",
        help="Rebuild the tree into a balanced shape before reporting",
    )
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="Use the stack-based balance check instead of the recursive one",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the demonstration flow and return the process exit code."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if not (args.values or args.insert or args.delete):
        cases: List[DemoCase] = list(_iter_demo_cases())
    else:
        try:
            cases = [
                DemoCase(
                    name="Custom",
                    values=[_parse_value(raw, args.kind) for raw in args.values],
                    inserts=[_parse_value(raw, args.kind) for raw in args.insert],
                    deletes=[_parse_value(raw, args.kind) for raw in args.delete],
                    rebalance=args.rebalance,
                )
            ]
        except ValueError as exc:
            parser.error(f"Failed to parse numeric values: {exc}")

    for index, case in enumerate(cases):
        if index:
            console.print()  # Spacer between cases
        try:
            report(case, iterative=args.iterative)
        except TreeError as exc:
            logger.error("Failed to build %s tree: %s", case.name, exc)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
