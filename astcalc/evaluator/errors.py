"""
Error handling for the astcalc evaluator.

Mathematically undefined operations fail loudly with a DomainError instead of
producing nan or inf.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import ASTNode, format_number


class EvaluationError(Exception):
    """
    Exception raised when evaluating an AST fails.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        node: Optional[ASTNode] = None,
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
        self.node = node

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def category(self) -> str:
        """Short name of the error code, e.g. 'Division by zero'."""
        return EVALUATOR_ERROR_CODES.get(self.code, "Evaluation error")

    def __str__(self) -> str:
        return str(self.diagnostic)


class DomainError(EvaluationError):
    """An operation was applied outside its mathematical domain."""


EVALUATOR_ERROR_CODES = {
    "E001": "Factorial of a negative or non-integer value",
    "E002": "Math domain error",
    "E003": "Division by zero",
    "E004": "Result too large",
    "E005": "Expression nested too deeply",
}


def create_factorial_domain_error(value: float, node: Optional[ASTNode] = None) -> DomainError:
    """Create an error for factorial of a value that is not a non-negative integer."""
    return DomainError(
        message=f"Cannot take the factorial of {format_number(value)}",
        node=node,
        code="E001",
        help_text="Factorial is only defined for non-negative integers.",
    )


def create_math_domain_error(operation: str, operands: List[float], node: Optional[ASTNode] = None) -> DomainError:
    """Create an error for a math function called outside its domain."""
    shown = ", ".join(format_number(value) for value in operands)
    help_texts = {
        "ln": "The natural logarithm is only defined for positive numbers.",
        "^": "Negative bases need integer exponents, and 0 cannot be raised to a negative power.",
    }
    return DomainError(
        message=f"Math domain error in {operation}({shown})",
        node=node,
        code="E002",
        help_text=help_texts.get(operation, f"{operation} is undefined for these arguments."),
    )


def create_division_by_zero_error(dividend: float, node: Optional[ASTNode] = None) -> DomainError:
    """Create an error for division by zero."""
    return DomainError(
        message=f"Division by zero: {format_number(dividend)} / 0",
        node=node,
        code="E003",
        help_text="The divisor evaluated to zero.",
    )


def create_overflow_error(operation: str, node: Optional[ASTNode] = None) -> DomainError:
    """Create an error for a result that does not fit in a float."""
    return DomainError(
        message=f"Result of {operation} is too large",
        node=node,
        code="E004",
        help_text="The result exceeds the range of a 64-bit float.",
    )


def create_nesting_error(node: Optional[ASTNode] = None) -> EvaluationError:
    """Create an error for a tree deeper than the evaluator can recurse."""
    return EvaluationError(
        message=EVALUATOR_ERROR_CODES["E005"],
        node=node,
        code="E005",
        help_text="The expression tree is too deep to evaluate, e.g. a very long chain of operators.",
        suggestions=["Split the expression into smaller parts"]
    )
