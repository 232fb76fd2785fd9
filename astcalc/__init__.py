"""
astcalc Package

An arithmetic expression evaluator that builds an explicit syntax tree,
evaluates it, and can draw it as text.

Architecture:
    astcalc/
    ├── lexer/           # Tokenization
    ├── parser/          # Pratt parser and AST nodes
    ├── evaluator/       # Numeric evaluation of the AST
    ├── render/          # Hierarchy and ASCII-art tree diagrams
    ├── repl.py          # Interactive read loop
    └── cli.py           # Command line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize
from .parser import (
    Parser, parse, parse_string,
    ASTNode, Number, UnaryOp, PostfixOp, BinaryOp, FunctionCall,
    ParseError, UnexpectedTokenError, UnexpectedEndError, TrailingTokensError,
)
from .evaluator import Evaluator, evaluate, evaluate_string, EvaluationError, DomainError
from .render import render_hierarchy, render_tree, AstView, render

__all__ = [
    # Pipeline
    "tokenize",
    "parse",
    "parse_string",
    "evaluate",
    "evaluate_string",
    "render_hierarchy",
    "render_tree",
    "render",

    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "Evaluator",
    "AstView",

    # AST nodes
    "ASTNode",
    "Number",
    "UnaryOp",
    "PostfixOp",
    "BinaryOp",
    "FunctionCall",

    # Errors
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndError",
    "TrailingTokensError",
    "EvaluationError",
    "DomainError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
