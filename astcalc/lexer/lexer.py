"""
astcalc Lexer - turns an expression line into tokens

Iterating a Lexer walks the text from the start every time, so the token
stream can be restarted but never resumed halfway. Nothing here raises:
text that is not a number, operator, paren or known function comes out as
an INVALID token and the parser deals with it.

xwest
"""

import logging
import re
from typing import Iterator, List

from .tokens import Token, TokenType, OPERATORS, FUNCTIONS

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Lexer:
    """
    Expression lexical analyzer.

    Converts one line of text into a stream of tokens terminated by a single
    EOF token.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: The expression line
        """
        self.source = source
        self.pos = 0

        # Precompile regex patterns for efficiency
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""

        # Digits with at most one decimal point, optional exponent
        self.number_pattern = re.compile(
            r'(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII
        )

        # Identifiers are matched maximally, then checked against FUNCTIONS
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*', re.ASCII)

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens from the start of the source."""
        self.pos = 0

        while True:
            self._skip_whitespace()

            if self.pos >= len(self.source):
                break

            yield self._next_token()

        yield Token(TokenType.EOF, "")

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens including the EOF token
        """
        tokens = list(self)
        logger.debug("tokenized %r into %d tokens", self.source, len(tokens))
        return tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        current_char = self.source[self.pos]

        # Numbers
        if current_char in DIGITS or (current_char == '.' and self._peek() in DIGITS):
            return self._tokenize_number()

        # Function names
        if current_char.isalpha() or current_char == '_':
            return self._tokenize_identifier()

        # Operators and punctuation
        if current_char in OPERATORS:
            self._advance()
            return Token(OPERATORS[current_char], current_char)

        # Anything else is kept as an INVALID token for the parser to report
        self._advance()
        return Token(TokenType.INVALID, current_char)

    def _tokenize_number(self) -> Token:
        """Tokenize a numeric literal."""
        match = self.number_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self.pos = match.end()
        return Token(TokenType.NUMBER, lexeme, float(lexeme))

    def _tokenize_identifier(self) -> Token:
        """Tokenize a function name (or an unknown identifier)."""
        match = self.identifier_pattern.match(self.source, self.pos)
        if match is None:
            # Non-ASCII letter: not part of any identifier we know
            self._advance()
            return Token(TokenType.INVALID, self.source[self.pos - 1])

        lexeme = match.group(0)
        self.pos = match.end()

        if lexeme in FUNCTIONS:
            return Token(TokenType.FUNCTION, lexeme, lexeme)
        return Token(TokenType.INVALID, lexeme)

    def _skip_whitespace(self):
        """Skip whitespace between tokens."""
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character."""
        if self.pos < len(self.source):
            self.pos += 1

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'


def tokenize(source: str) -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Expression text

    Returns:
        List of tokens ending with EOF. Never raises; unrecognized text
        becomes INVALID tokens.
    """
    return Lexer(source).tokenize()
