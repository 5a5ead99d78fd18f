# formula/exceptions.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Custom exceptions for operator lookup and canonical-form reading

"""Domain-specific exceptions for formula construction and reading.

Both exceptions derive from ``RuntimeError`` and carry a human-readable
message. ``UnknownOperatorError`` is the only failure of the operator
vocabulary; ``ParseError`` covers every other problem met while reading the
canonical textual form back into a tree.
"""


class UnknownOperatorError(RuntimeError):
    """Exception raised when a symbol matches no binary operator.

    Attributes:
        symbol: The string that was looked up
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Found unknown binary operator: {symbol!r}")


class ParseError(RuntimeError):
    """Exception raised when canonical formula text cannot be read.

    Indicates unbalanced parentheses, illegal characters, a missing operand
    or an empty input.
    """

    pass
