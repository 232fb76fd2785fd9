"""
astcalc Evaluator Package

Computes the float value of a parsed expression tree.

Author: xwest
"""

from .evaluator import Evaluator, evaluate, evaluate_string
from .errors import EvaluationError, DomainError

__all__ = [
    "Evaluator",
    "evaluate",
    "evaluate_string",
    "EvaluationError",
    "DomainError",
]
