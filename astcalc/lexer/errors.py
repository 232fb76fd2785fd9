"""
Diagnostics shared by every stage of the expression pipeline.

The lexer itself never raises: text it cannot recognize becomes an INVALID
token, and the parser reports it. This module holds the diagnostic record the
parser and evaluator attach to their exceptions, plus the suggestion helpers
used to explain unrecognized text.

Author: xwest
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

from .tokens import Token, FUNCTIONS


@dataclass
class Diagnostic:
    """A single error report (message, code, help and suggestions)."""
    message: str
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ErrorRecovery:
    """
    Suggestion helpers for text the lexer could not recognize.
    """

    @staticmethod
    def suggest_function_corrections(invalid_word: str) -> List[str]:
        """Suggest function names close to a misspelled identifier."""
        suggestions = []
        for name in FUNCTIONS:
            distance = ErrorRecovery._edit_distance(invalid_word.lower(), name)
            if distance <= 2:  # Allow up to 2 character differences
                suggestions.append(name)

        return sorted(suggestions, key=lambda n: (ErrorRecovery._edit_distance(invalid_word.lower(), n), n))[:3]

    @staticmethod
    def suggest_ascii_alternatives(char: str) -> List[str]:
        """Suggest ASCII operators for common look-alike characters."""
        ascii_alternatives = {
            '×': ['*'],
            '⋅': ['*'],
            '÷': ['/'],
            '−': ['-'],
            '[': ['('],
            ']': [')'],
            '{': ['('],
            '}': [')'],
            '%': ['/'],
        }

        return ascii_alternatives.get(char, [])

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Codes for text the lexer turns into INVALID tokens
ERROR_CODES = {
    "L001": "Invalid character",
    "L005": "Unknown identifier",
}


def explain_invalid_token(token: Token) -> Tuple[str, str, List[str]]:
    """
    Build (code, help_text, suggestions) for an INVALID token.

    Identifiers get function-name suggestions; single characters get ASCII
    look-alike suggestions.
    """
    lexeme = token.lexeme
    if lexeme[:1].isalpha() or lexeme[:1] == '_':
        suggestions = ErrorRecovery.suggest_function_corrections(lexeme)
        help_text = (f"'{lexeme}' is not a known function. "
                     f"Available functions: {', '.join(sorted(FUNCTIONS))}.")
        return "L005", help_text, [f"Did you mean '{name}'?" for name in suggestions]

    suggestions = ErrorRecovery.suggest_ascii_alternatives(lexeme)
    if lexeme.isprintable():
        help_text = f"The character '{lexeme}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(lexeme[0]):04X}) is not allowed."
    return "L001", help_text, [f"Use '{alt}' instead" for alt in suggestions]
