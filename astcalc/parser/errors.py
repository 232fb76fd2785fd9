"""
Error handling for the astcalc parser.

Every grammar violation is fatal for the expression being parsed; there is
no partial tree. The three failure kinds (unexpected token, unexpected end of
input, trailing tokens) are separate ParseError subclasses so callers can
tell them apart.

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic, ERROR_CODES as LEXER_ERROR_CODES, explain_invalid_token


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def category(self) -> str:
        """Short name of the error code, e.g. 'Unexpected token'."""
        return PARSER_ERROR_CODES.get(self.code, "Syntax error")

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """A token appeared where the grammar does not allow it."""


class UnexpectedEndError(ParseError):
    """Input ended in the middle of an expression."""


class TrailingTokensError(ParseError):
    """A complete expression was followed by unconsumed tokens."""


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    **LEXER_ERROR_CODES,
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P010": "Unexpected end of input",
    "P012": "Mismatched parentheses",
    "P013": "Unexpected tokens after expression",
    "P014": "Expression nested too deeply",
}


# What to tell the user when a specific token was expected
TOKEN_SUGGESTIONS = {
    TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
    TokenType.LEFT_PAREN: ["Function arguments must be wrapped in parentheses, e.g. sin(1)"],
}


def _expected_str(expected: Union[TokenType, str]) -> str:
    if isinstance(expected, TokenType):
        return {
            TokenType.LEFT_PAREN: "'('",
            TokenType.RIGHT_PAREN: "')'",
        }.get(expected, expected.name)
    return expected


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> UnexpectedTokenError:
    """Create an error for an unexpected token."""
    expected_str = _expected_str(expected)

    if found.type == TokenType.INVALID:
        code, help_text, suggestions = explain_invalid_token(found)
        return UnexpectedTokenError(
            message=f"Unrecognized input {found.describe()}, expected {expected_str}",
            token=found,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    suggestions = list(TOKEN_SUGGESTIONS.get(expected, [])) if isinstance(expected, TokenType) else []

    return UnexpectedTokenError(
        message=f"Expected {expected_str}, found {found.describe()}",
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found.describe()} instead.",
        suggestions=suggestions
    )


def create_unexpected_eof_error(expected: Union[TokenType, str], token: Optional[Token] = None) -> UnexpectedEndError:
    """Create an error for unexpected end of input."""
    expected_str = _expected_str(expected)
    suggestions = list(TOKEN_SUGGESTIONS.get(expected, [])) if isinstance(expected, TokenType) else []

    return UnexpectedEndError(
        message=f"Unexpected end of input, expected {expected_str}",
        token=token,
        code="P010",
        help_text=f"The expression ended while the parser was still expecting {expected_str}.",
        suggestions=suggestions or [f"Add the missing {expected_str}", "Check for an operator without an operand"]
    )


def create_unclosed_delimiter_error(opened_by: str, found: Token) -> ParseError:
    """Create an error for a '(' that was never closed."""
    help_text = f"The '(' opened by {opened_by} was never closed."
    suggestions = ["Add a closing ')'", "Check for missing delimiters"]

    if found.type == TokenType.EOF:
        return UnexpectedEndError(
            message="Unclosed delimiter '(' at end of input",
            token=found,
            code="P004",
            help_text=help_text,
            suggestions=suggestions
        )

    return UnexpectedTokenError(
        message=f"Unclosed delimiter '(': expected ')', found {found.describe()}",
        token=found,
        code="P004",
        help_text=help_text,
        suggestions=suggestions
    )


def create_trailing_tokens_error(found: Token) -> TrailingTokensError:
    """Create an error for tokens left over after a complete expression."""
    if found.type == TokenType.RIGHT_PAREN:
        return TrailingTokensError(
            message="Unmatched closing parenthesis ')'",
            token=found,
            code="P012",
            help_text="There are more ')' than '(' in the expression.",
            suggestions=["Remove the extra ')'", "Add the missing '('"]
        )

    if found.type == TokenType.INVALID:
        code, help_text, suggestions = explain_invalid_token(found)
        return TrailingTokensError(
            message=f"Unrecognized input {found.describe()} after expression",
            token=found,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    return TrailingTokensError(
        message=f"Unexpected {found.describe()} after end of expression",
        token=found,
        code="P013",
        help_text="The expression was complete but more input followed it.",
        suggestions=["Add an operator between the two parts", "Remove the extra input"]
    )


def create_nesting_error(token: Optional[Token] = None) -> ParseError:
    """Create an error for input nested deeper than the parser can recurse."""
    return ParseError(
        message=PARSER_ERROR_CODES["P014"],
        token=token,
        code="P014",
        help_text="Too many nested parentheses or repeated signs for the parser to follow.",
        suggestions=["Remove redundant parentheses or signs", "Split the expression into smaller parts"]
    )
