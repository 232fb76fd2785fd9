"""
Token definitions for the astcalc lexer.

This module defines every token type an arithmetic expression can contain:
- Numeric literals (stored as floats)
- Arithmetic operators and the postfix factorial
- Named functions (sin, cos, tan, exp, ln)
- Parentheses
- End-of-input and invalid-text markers

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in an expression.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals and Names
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14, .5, 1e-3
    FUNCTION = auto()               # sin, cos, tan, exp, ln

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # - (subtraction or negation)
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # ^ (exponentiation)
    FACTORIAL = auto()              # ! (postfix)

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # ========================================================================
    # Error Tokens
    # ========================================================================
    INVALID = auto()                # Unrecognized character or identifier


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in an arithmetic expression.

    Contains the token type, lexeme (raw text) and semantic value.
    Tokens deliberately carry no source position.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any = None               # float for NUMBER, name for FUNCTION

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.value!r})"

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"


# Lookup tables used by the lexer

# Single-character operators and punctuation
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "!": TokenType.FACTORIAL,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Recognized function names
FUNCTIONS = frozenset({"sin", "cos", "tan", "exp", "ln"})
