# formula/__init__.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Binary formula representation and canonical-form reading

"""Binary formulas of the specification language.

This package holds the immutable representation of binary formulas: the
closed vocabulary of operators, the node types making up a formula tree, the
traversal contract used by external analyses, and a reader for the
canonical textual form produced by ``render()``.

Core API:
    Operator, parse_operator, to_symbol: operator vocabulary
    Atom, BinaryFormula, Formula: formula nodes
    Visitor, visit: traversal contract
    read: canonical text -> formula tree

Example:
    >>> from formula import Atom, BinaryFormula, Operator, read
    >>> tree = BinaryFormula(Atom("x"), Operator.NOT_EQUALS, Atom("y"))
    >>> tree.render()
    '(x <> y)'
    >>> read("(x <> y)") == tree
    True
"""

from .exceptions import ParseError, UnknownOperatorError
from .operators import Operator, SYMBOLS, parse_operator, to_symbol
from .ast_nodes import Atom, BinaryFormula, Formula, Visitor, VARIANTS, visit
from .grammar import _CanonicalParser
from golospec_utils.logger import get_logger


def read(source: str) -> Formula:
    """Read canonical formula text into a formula tree.

    Uses a fresh parser instance for each call, so concurrent callers never
    share parser state.

    Args:
        source: Fully parenthesized formula text, as produced by ``render()``

    Returns:
        Root node of the tree

    Raises:
        UnknownOperatorError: An operator symbol is not in the vocabulary
        ParseError: The text is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Reading formula: {source}")

    result = _CanonicalParser().parse(source)

    logger.formula_read(source, result)
    return result


__all__ = [
    "Atom",
    "BinaryFormula",
    "Formula",
    "Operator",
    "ParseError",
    "SYMBOLS",
    "UnknownOperatorError",
    "VARIANTS",
    "Visitor",
    "parse_operator",
    "read",
    "to_symbol",
    "visit",
]
