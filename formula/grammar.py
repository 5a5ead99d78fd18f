# formula/grammar.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# LALR(1) grammar reading canonical formula text back into trees using SLY

"""Canonical-form grammar implemented with the SLY parser generator.

The only textual form of a formula is its rendering, where every binary node
is wrapped in its own parentheses. The grammar therefore needs no operator
precedence or associativity: nesting is spelled out in the text.

Grammar:
    formula : "(" formula OPERATOR formula ")"
            | "(" formula ")"
            | ID
            | NUMBER

Redundant grouping parentheses are accepted and dropped.
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Atom, BinaryFormula, Formula
from .exceptions import ParseError, UnknownOperatorError
from .operators import Operator
from golospec_utils.logger import get_logger


class _CanonicalParser(Parser):
    """SLY-based LALR(1) parser for canonical formula text.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("formula")
    def start(self, p) -> Formula:
        """Start rule: the whole input is a single formula."""
        return p.formula

    @_("LPAREN formula OPERATOR formula RPAREN")
    def formula(self, p) -> Formula:
        """Binary node; the symbol is resolved against the operator table."""
        return BinaryFormula(p.formula0, Operator.parse(p.OPERATOR), p.formula1)

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> Formula:
        """Grouping parentheses."""
        return p.formula

    @_("ID")
    def formula(self, p) -> Formula:
        return Atom(p.ID)

    @_("NUMBER")
    def formula(self, p) -> Formula:
        return Atom(p.NUMBER)

    def parse(self, text: str) -> Formula:
        """Read canonical formula text into a tree.

        Args:
            text: Rendered formula

        Returns:
            Root node of the tree

        Raises:
            UnknownOperatorError: An operator symbol is not in the table
            ParseError: The text is empty or malformed
        """
        logger = get_logger()

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if result is None:
                raise ParseError("Failed to read formula (syntax error).")

            return result

        except (ParseError, UnknownOperatorError):
            raise
        except Exception as e:
            logger.debug(f"Unexpected reading error: {e}")
            raise ParseError(f"Read failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None at end of input

        Raises:
            ParseError: Always, with token position information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
