"""
astcalc Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for arithmetic
expressions. Prefix parsers start a term (numbers, groups, function calls,
negation); infix parsers extend it (binary operators and postfix factorial)
for as long as the next operator binds at least as tightly as the current
minimum.

Author: xwest
"""

import logging
from typing import Iterable, List, Dict, Callable
from enum import IntEnum

from ..lexer.tokens import Token, TokenType
from .ast_nodes import ASTNode, Number, UnaryOp, PostfixOp, BinaryOp, FunctionCall
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_unclosed_delimiter_error, create_trailing_tokens_error, create_nesting_error
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    NONE = 0
    TERM = 1            # +, -
    FACTOR = 2          # *, /
    UNARY = 3           # prefix -
    POWER = 4           # ^ (right associative)
    POSTFIX = 5         # !


# Right-associative binary operators parse their right operand at their own
# precedence instead of one level higher
RIGHT_ASSOCIATIVE = {TokenType.POWER}

OPERAND_DESCRIPTION = "a number, '(', a function or '-'"


class Parser:
    """
    Expression Pratt parser.

    Builds one AST from a complete token stream. Any grammar violation raises
    a ParseError subclass; there is no recovery.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with tokens.

        Args:
            tokens: Tokens from the lexer (a list or a Lexer), ending with EOF
        """
        self.tokens: List[Token] = list(tokens)
        self.current = 0

        # Initialize parsing tables
        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize operator precedence and parsing function tables."""

        # Prefix parsing functions (for tokens that can start a term)
        self.prefix_parsers: Dict[TokenType, Callable[[], ASTNode]] = {
            TokenType.NUMBER: self._parse_number,
            TokenType.LEFT_PAREN: self._parse_grouping,
            TokenType.FUNCTION: self._parse_function_call,
            TokenType.MINUS: self._parse_unary,
        }

        # Infix parsing functions (binary operators and postfix operations)
        self.infix_parsers: Dict[TokenType, Callable[[ASTNode], ASTNode]] = {
            TokenType.PLUS: self._parse_binary,
            TokenType.MINUS: self._parse_binary,
            TokenType.MULTIPLY: self._parse_binary,
            TokenType.DIVIDE: self._parse_binary,
            TokenType.POWER: self._parse_binary,
            TokenType.FACTORIAL: self._parse_postfix,
        }

        # Operator precedence table
        self.precedences: Dict[TokenType, Precedence] = {
            TokenType.PLUS: Precedence.TERM,
            TokenType.MINUS: Precedence.TERM,
            TokenType.MULTIPLY: Precedence.FACTOR,
            TokenType.DIVIDE: Precedence.FACTOR,
            TokenType.POWER: Precedence.POWER,
            TokenType.FACTORIAL: Precedence.POSTFIX,
        }

    def parse(self) -> ASTNode:
        """
        Parse the token stream into an AST.

        Returns:
            Root node of the expression

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        self.current = 0

        try:
            expr = self._parse_expression()
        except RecursionError:
            # Each '(' or prefix '-' costs a few stack frames
            raise create_nesting_error(self._peek()) from None

        # The whole stream must be consumed
        if not self._is_at_end():
            raise create_trailing_tokens_error(self._peek())

        logger.debug("parsed %d tokens, root %r", len(self.tokens), expr.label)
        return expr

    def _parse_expression(self) -> ASTNode:
        """Parse a full expression (lowest binding power)."""
        return self._parse_precedence(Precedence.TERM)

    def _parse_precedence(self, precedence: Precedence) -> ASTNode:
        """Parse expression with given minimum precedence."""
        # Get prefix parser
        prefix_parser = self.prefix_parsers.get(self._peek().type)
        if prefix_parser is None:
            if self._is_at_end():
                raise create_unexpected_eof_error(OPERAND_DESCRIPTION, self._peek())
            raise create_unexpected_token_error(OPERAND_DESCRIPTION, self._peek())

        # Parse left side with prefix parser
        left = prefix_parser()

        # Parse infix and postfix operators
        while precedence <= self._get_precedence(self._peek().type):
            infix_parser = self.infix_parsers.get(self._peek().type)
            if infix_parser is None:
                break
            left = infix_parser(left)

        return left

    def _get_precedence(self, token_type: TokenType) -> Precedence:
        """Get precedence for a token type."""
        return self.precedences.get(token_type, Precedence.NONE)

    # Prefix parsers (tokens that can start a term)

    def _parse_number(self) -> Number:
        """Parse numeric literal."""
        token = self._advance()
        return Number(token.value)

    def _parse_unary(self) -> UnaryOp:
        """Parse prefix negation."""
        operator_token = self._advance()

        # Binds looser than ^ and !, tighter than binary operators
        operand = self._parse_precedence(Precedence.UNARY)

        return UnaryOp(operator_token.lexeme, operand)

    def _parse_grouping(self) -> ASTNode:
        """Parse parenthesized expression."""
        self._advance()  # Consume (

        expr = self._parse_expression()

        self._consume_closing_paren("a '('")

        return expr

    def _parse_function_call(self) -> FunctionCall:
        """Parse a function call such as sin(expr)."""
        name_token = self._advance()

        self._consume(TokenType.LEFT_PAREN)

        argument = self._parse_expression()

        self._consume_closing_paren(f"'{name_token.lexeme}('")

        return FunctionCall(name_token.value, argument)

    # Infix parsers (binary operators and postfix operations)

    def _parse_binary(self, left: ASTNode) -> BinaryOp:
        """Parse binary operation."""
        operator_token = self._advance()

        precedence = self._get_precedence(operator_token.type)
        if operator_token.type in RIGHT_ASSOCIATIVE:
            right = self._parse_precedence(precedence)
        else:
            right = self._parse_precedence(Precedence(precedence + 1))

        return BinaryOp(left, operator_token.lexeme, right)

    def _parse_postfix(self, left: ASTNode) -> PostfixOp:
        """Parse postfix factorial; it takes no right operand."""
        operator_token = self._advance()
        return PostfixOp(operator_token.lexeme, left)

    # Utility methods

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Return EOF token if past end
        return Token(TokenType.EOF, "")

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        if self._is_at_end():
            raise create_unexpected_eof_error(token_type, self._peek())
        raise create_unexpected_token_error(token_type, self._peek())

    def _consume_closing_paren(self, opened_by: str) -> Token:
        """Consume the ')' matching an earlier '('."""
        if self._check(TokenType.RIGHT_PAREN):
            return self._advance()
        raise create_unclosed_delimiter_error(opened_by, self._peek())


def parse(tokens: Iterable[Token]) -> ASTNode:
    """
    Convenience function to parse a token stream.

    Args:
        tokens: Tokens ending with EOF

    Returns:
        Root node of the expression

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()


def parse_string(source: str) -> ASTNode:
    """
    Convenience function to tokenize and parse an expression string.

    Args:
        source: Expression text

    Returns:
        Root node of the expression

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize

    return parse(tokenize(source))
