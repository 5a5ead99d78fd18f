# formula/operators.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Closed vocabulary of binary operators and their canonical symbols

"""Binary operator vocabulary.

Every operator that may join two formulas is a member of :class:`Operator`
and is bound to exactly one canonical symbol. The table is fixed when the
module is imported and never changes afterwards, so lookups are safe from
any thread.

Operators carry no precedence, associativity or arity beyond "binary": how
nodes are nested is decided entirely by whoever builds the tree.

Example:
    >>> Operator.parse("<=")
    <Operator.LESS_OR_EQUALS: '<='>
    >>> to_symbol(Operator.CONJUNCTIVE)
    '/\\\\'
"""

from __future__ import annotations
from enum import Enum, unique
from typing import Tuple

from .exceptions import UnknownOperatorError
from golospec_utils.logger import get_logger


@unique
class Operator(Enum):
    """Binary connectives, relations and arithmetic operators.

    Member values are the canonical symbols. ``enum.unique`` rejects the
    class at import time if two members ever share a symbol.
    """

    PLUS = "+"
    MINUS = "-"
    LESS = "<"
    DIVIDE = "/"
    EQUALS = "="
    MODULO = "%"
    GREATER = ">"
    NOT_EQUALS = "<>"
    IMPLICATIVE = "->"
    CONJUNCTIVE = "/\\"
    DISJUNCTIVE = "\\/"
    MULTIPLICATION = "*"
    LESS_OR_EQUALS = "<="
    GREATER_OR_EQUALS = ">="

    @property
    def symbol(self) -> str:
        """Canonical symbol of this operator."""
        return self.value

    @classmethod
    def parse(cls, symbol: str) -> Operator:
        """Resolve a symbol to its operator.

        Scans the members in declaration order for an exact, case-sensitive
        match. Surrounding whitespace is not stripped.

        Args:
            symbol: Candidate operator symbol

        Returns:
            The operator bound to ``symbol``

        Raises:
            UnknownOperatorError: No operator uses ``symbol``
        """
        for current in cls:
            if current.value == symbol:
                return current

        get_logger().unknown_operator(symbol, len(SYMBOLS))
        raise UnknownOperatorError(symbol)

    def __str__(self) -> str:
        return self.value


# Symbols in declaration order
SYMBOLS: Tuple[str, ...] = tuple(op.value for op in Operator)


def parse_operator(symbol: str) -> Operator:
    """Module-level alias for :meth:`Operator.parse`."""
    return Operator.parse(symbol)


def to_symbol(operator: Operator) -> str:
    """Return the canonical symbol of ``operator``."""
    return operator.value
