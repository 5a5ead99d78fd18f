# formula/lexer.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Lexical analyzer for canonical formula text using SLY

"""Lexical analyzer for canonical formula strings.

Breaks rendered formula text into tokens for the canonical reader. Operator
symbols are not told apart here: any run of operator characters becomes a
single ``OPERATOR`` token and is resolved against the operator table by the
parser, so near-miss symbols such as ``&&`` or ``=>`` surface as unknown
operators rather than as illegal characters.

Supported Tokens:
- Punctuation: (, )
- Operators: runs of + - < > / \\ = % * & | !
- Identifiers and unsigned integer literals as leaf terms
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from golospec_utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for canonical formula text.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NUMBER",
        "OPERATOR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"

    OPERATOR = r"[-+<>/\\=%*&|!]+"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"
    NUMBER = r"\d+"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
