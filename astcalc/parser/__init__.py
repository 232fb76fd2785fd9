"""
astcalc Parser Package

Implements a Pratt parser for arithmetic expressions.

Key Features:
- Top-down operator precedence (Pratt parsing)
- Right-associative exponentiation, postfix factorial, prefix negation
- One class per AST node kind, compared structurally
- Distinct errors for unexpected tokens, early end and trailing input

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, Precedence, parse, parse_string
from .errors import ParseError, UnexpectedTokenError, UnexpectedEndError, TrailingTokensError

__all__ = [
    # Core parser
    "Parser", "Precedence", "parse", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor",
    "Number", "UnaryOp", "PostfixOp", "BinaryOp", "FunctionCall",
    "format_number",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnexpectedEndError", "TrailingTokensError",
]
