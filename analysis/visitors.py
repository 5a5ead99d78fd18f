# analysis/visitors.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Read-only analyses over formula trees built on the traversal contract

"""External analyses over formula trees.

Every analysis here is a visitor in the sense of :class:`formula.Visitor`:
it receives node parts through :func:`formula.visit` and chooses for itself
how to descend. None of them modifies a node; :class:`AtomSubstituter`
builds a new tree and shares every subtree it leaves untouched.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List, Mapping, Optional, Tuple

from formula import BinaryFormula, Formula, Operator, visit
from golospec_utils.logger import get_logger


class AtomCollector:
    """Collects distinct atom names, left to right, in first-seen order."""

    def __init__(self):
        self._seen: Dict[str, None] = {}

    def collect(self, root: Formula) -> Tuple[str, ...]:
        self._seen.clear()
        visit(root, self)
        return tuple(self._seen)

    def visit_atom(self, name: str):
        self._seen.setdefault(name, None)

    def visit_binary(self, left: Formula, operator: Operator, right: Formula):
        visit(left, self)
        visit(right, self)


class OperatorCounter:
    """Counts operator occurrences over a whole tree."""

    def visit_atom(self, name: str) -> Counter:
        return Counter()

    def visit_binary(self, left: Formula, operator: Operator, right: Formula) -> Counter:
        counts = visit(left, self) + visit(right, self)
        counts[operator] += 1
        return counts


class DepthMeter:
    """Measures nesting depth; atoms have depth 0."""

    def visit_atom(self, name: str) -> int:
        return 0

    def visit_binary(self, left: Formula, operator: Operator, right: Formula) -> int:
        return 1 + max(visit(left, self), visit(right, self))


class TreePrinter:
    """Produces an indented outline, one node per line.

    Binary nodes are shown by their operator symbol with their children one
    level deeper; atoms are shown by name.
    """

    INDENT = "  "

    def __init__(self):
        self._level = 0
        self._lines: List[str] = []

    def lines(self, root: Formula) -> List[str]:
        self._level = 0
        self._lines = []
        visit(root, self)
        return self._lines

    def visit_atom(self, name: str):
        self._lines.append(f"{self.INDENT * self._level}{name}")

    def visit_binary(self, left: Formula, operator: Operator, right: Formula):
        self._lines.append(f"{self.INDENT * self._level}{operator.symbol}")
        self._level += 1
        visit(left, self)
        visit(right, self)
        self._level -= 1


class AtomSubstituter:
    """Replaces atoms by formulas, rebuilding only the paths that change.

    Handlers return ``None`` for "unchanged", so untouched nodes are kept by
    identity and no subtree is ever compared or hashed structurally.

    Attributes:
        _mapping: Atom name -> replacement formula
        _memo: Rebuilt subtrees keyed by ``id`` of the original node
    """

    def __init__(self, mapping: Mapping[str, Formula]):
        self._mapping = dict(mapping)
        self._memo: Dict[int, Formula] = {}

    def substitute(self, root: Formula) -> Formula:
        # Every keyed node stays reachable from root, so ids are stable here
        self._memo.clear()
        try:
            return self._visit(root)
        finally:
            self._memo.clear()

    def _visit(self, node: Formula) -> Formula:
        key = id(node)
        if key in self._memo:
            return self._memo[key]

        result = visit(node, self)
        if result is None:
            result = node

        self._memo[key] = result
        return result

    def visit_atom(self, name: str) -> Optional[Formula]:
        return self._mapping.get(name)

    def visit_binary(
        self, left: Formula, operator: Operator, right: Formula
    ) -> Optional[Formula]:
        new_left = self._visit(left)
        new_right = self._visit(right)
        if new_left is left and new_right is right:
            return None
        return BinaryFormula(new_left, operator, new_right)


def collect_atoms(root: Formula) -> Tuple[str, ...]:
    """Return the distinct atom names of ``root`` in first-seen order."""
    result = AtomCollector().collect(root)
    get_logger().analysis_result("collect_atoms", root, result)
    return result


def count_operators(root: Formula) -> Counter:
    """Return a ``Counter`` of the operators used in ``root``."""
    result = visit(root, OperatorCounter())
    get_logger().analysis_result("count_operators", root, dict(result))
    return result


def depth(root: Formula) -> int:
    """Return the nesting depth of ``root``."""
    result = visit(root, DepthMeter())
    get_logger().analysis_result("depth", root, result)
    return result


def tree_lines(root: Formula) -> List[str]:
    """Return an indented outline of ``root``, two spaces per level."""
    return TreePrinter().lines(root)


def substitute(root: Formula, mapping: Mapping[str, Formula]) -> Formula:
    """Replace the atoms named in ``mapping`` by their formulas.

    Args:
        root: Formula to rewrite
        mapping: Atom name -> replacement formula

    Returns:
        ``root`` itself when no atom is replaced, otherwise a new tree that
        shares every unchanged subtree with ``root``
    """
    result = AtomSubstituter(mapping).substitute(root)
    get_logger().analysis_result("substitute", root, result)
    return result
