# formula/ast_nodes.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Immutable formula nodes and the traversal contract

"""Immutable node classes for specification formulas.

A formula tree is built bottom-up: leaves first, then pairs of finished
subtrees joined under an :class:`~formula.operators.Operator`. Nodes are
frozen once constructed, so a finished tree can be shared by any number of
readers, including readers on different threads.

Node Types:
    Atom: Leaf term standing for a name or literal
    BinaryFormula: Two child formulas joined by one operator

``Formula`` is the closed union of these node types. Analyses walk a tree
through :func:`visit`, which dispatches on the node type using a handler
table; nodes hold no analysis logic of their own and never recurse for the
caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Protocol, Tuple, Type, Union

from .operators import Operator


@dataclass(frozen=True, slots=True)
class Atom:
    """Leaf term of a formula.

    The name is rendered verbatim and is not validated. Only names that
    are a single identifier (``[a-zA-Z_][a-zA-Z0-9_]*``) or unsigned integer
    (``\\d+``) render to text that reads back as the same atom; any other name
    (spaces, parentheses, operator characters) may render like a different
    tree or not read back at all.

    Attributes:
        name: Identifier or literal text of the term
    """

    name: str

    def render(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class BinaryFormula:
    """Two formulas composed under one binary operator.

    Construction is pure composition and never fails. Both children must
    already be well-formed formulas; passing ``None`` or any other object is
    a caller error and is not checked here. Fields cannot be rebound after
    construction.

    Attributes:
        left: Left operand
        operator: Operator joining the operands
        right: Right operand
    """

    left: Formula
    operator: Operator
    right: Formula

    @property
    def operator_symbol(self) -> str:
        """Canonical symbol of this node's operator."""
        return self.operator.symbol

    def render(self) -> str:
        """Return the fully parenthesized canonical text of this subtree.

        Returns:
            ``"(" + left + " " + symbol + " " + right + ")"``, with both
            children rendered recursively
        """
        return f"({self.left.render()} {self.operator_symbol} {self.right.render()})"

    def __str__(self) -> str:
        return self.render()


Formula = Union[Atom, BinaryFormula]


class Visitor(Protocol):
    """Interface for formula analyses.

    One handler per node type. Handlers receive the parts of the node, not
    the node itself, and decide on their own whether and in which order to
    descend into children (by calling :func:`visit` again).
    """

    def visit_atom(self, name: str): ...

    def visit_binary(self, left: Formula, operator: Operator, right: Formula): ...


_HANDLERS: Dict[Type, Callable] = {
    Atom: lambda node, v: v.visit_atom(node.name),
    BinaryFormula: lambda node, v: v.visit_binary(node.left, node.operator, node.right),
}

# Node types known to the dispatch table
VARIANTS: Tuple[Type, ...] = tuple(_HANDLERS)


def visit(node: Formula, visitor: Visitor):
    """Dispatch ``node`` to the handler of ``visitor`` matching its type.

    Args:
        node: Formula node to hand over
        visitor: Analysis implementing the :class:`Visitor` handlers

    Returns:
        Whatever the selected handler returns

    Raises:
        TypeError: ``node`` is not one of the formula node types
    """
    try:
        handler = _HANDLERS[type(node)]
    except KeyError:
        raise TypeError(f"Not a formula node: {type(node).__name__}") from None
    return handler(node, visitor)
