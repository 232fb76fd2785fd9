"""
Evaluator for astcalc expressions.

Folds an AST post-order into a float. Children are always evaluated before
their parent; the tree is never modified.

Author: xwest
"""

import logging
import math
from typing import Callable, Dict

from ..parser.ast_nodes import (
    ASTNode, ASTVisitor, Number, UnaryOp, PostfixOp, BinaryOp, FunctionCall
)
from .errors import (
    EvaluationError, create_factorial_domain_error, create_math_domain_error,
    create_division_by_zero_error, create_overflow_error, create_nesting_error
)

logger = logging.getLogger(__name__)

# Largest n whose factorial is representable as a float
MAX_FACTORIAL = 170


def _divide(left: float, right: float) -> float:
    return left / right


class Evaluator(ASTVisitor):
    """
    Computes the numeric value of an expression tree.

    Domain violations raise DomainError rather than returning nan or inf.
    """

    def __init__(self):
        """Initialize the evaluator."""
        self._init_operation_tables()

    def _init_operation_tables(self):
        """Initialize mappings from operators and names to math functions."""
        self.binary_operations: Dict[str, Callable[[float, float], float]] = {
            "+": lambda left, right: left + right,
            "-": lambda left, right: left - right,
            "*": lambda left, right: left * right,
            "/": _divide,
            "^": math.pow,
        }

        self.functions: Dict[str, Callable[[float], float]] = {
            "sin": math.sin,
            "cos": math.cos,
            "tan": math.tan,
            "exp": math.exp,
            "ln": math.log,
        }

    def evaluate(self, ast: ASTNode) -> float:
        """
        Evaluate an expression tree.

        Args:
            ast: Root node of a parsed expression

        Returns:
            The value of the expression

        Raises:
            EvaluationError: If an operation is mathematically undefined
        """
        try:
            result = ast.accept(self)
        except RecursionError:
            raise create_nesting_error(ast) from None
        logger.debug("evaluated %s = %r", ast.label, result)
        return result

    def visit(self, node: ASTNode) -> float:
        """Evaluate a single node (after its children)."""
        if isinstance(node, Number):
            result = node.value
        elif isinstance(node, BinaryOp):
            result = self._evaluate_binary_op(node)
        elif isinstance(node, UnaryOp):
            result = -node.operand.accept(self)
        elif isinstance(node, PostfixOp):
            result = self._evaluate_factorial(node)
        elif isinstance(node, FunctionCall):
            result = self._evaluate_function_call(node)
        else:
            raise EvaluationError(f"Cannot evaluate node {node!r}", node=node)

        return self._check_result(result, node)

    def _evaluate_binary_op(self, node: BinaryOp) -> float:
        """Evaluate a binary operation."""
        left = node.left.accept(self)
        right = node.right.accept(self)

        operation = self.binary_operations[node.operator]
        try:
            return operation(left, right)
        except ZeroDivisionError:
            raise create_division_by_zero_error(left, node) from None
        except OverflowError:
            raise create_overflow_error(f"{node.operator}", node) from None
        except ValueError:
            raise create_math_domain_error(node.operator, [left, right], node) from None

    def _evaluate_factorial(self, node: PostfixOp) -> float:
        """Evaluate n! for a non-negative integral n."""
        value = node.operand.accept(self)

        if value < 0 or not value.is_integer():
            raise create_factorial_domain_error(value, node)
        if value > MAX_FACTORIAL:
            raise create_overflow_error(f"{value:g}!", node)

        return float(math.factorial(int(value)))

    def _evaluate_function_call(self, node: FunctionCall) -> float:
        """Evaluate a named function call."""
        argument = node.argument.accept(self)

        function = self.functions[node.name]
        try:
            return function(argument)
        except OverflowError:
            raise create_overflow_error(f"{node.name}({argument:g})", node) from None
        except ValueError:
            raise create_math_domain_error(node.name, [argument], node) from None

    def _check_result(self, result: float, node: ASTNode) -> float:
        """Reject inf and nan produced by ordinary float arithmetic."""
        if math.isinf(result):
            raise create_overflow_error(str(node), node)
        if math.isnan(result):
            raise create_math_domain_error(node.label, [], node)
        return result


def evaluate(ast: ASTNode) -> float:
    """
    Convenience function to evaluate an expression tree.

    Raises:
        EvaluationError: If an operation is mathematically undefined
    """
    return Evaluator().evaluate(ast)


def evaluate_string(source: str) -> float:
    """
    Convenience function to tokenize, parse and evaluate an expression string.

    Raises:
        ParseError: If the text is not a valid expression
        EvaluationError: If an operation is mathematically undefined
    """
    from ..parser import parse_string

    return evaluate(parse_string(source))
