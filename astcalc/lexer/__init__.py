"""
astcalc Lexer Package

Implements the tokenizer for arithmetic expressions.

Key Features:
- Lazy, restartable token stream (iterate a Lexer to restart it)
- Decimal and exponent number literals
- Maximal-munch function names (sin, cos, tan, exp, ln)
- Never fails: unrecognized text becomes INVALID tokens

Author: xwest
"""

from .tokens import Token, TokenType, FUNCTIONS
from .lexer import Lexer, tokenize
from .errors import Diagnostic

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "FUNCTIONS",
    "Diagnostic",
]
