"""
Abstract Syntax Tree node definitions for astcalc.

One class per node kind, each with a constructor that takes exactly the
children its arity calls for. Nodes own their children (the tree never shares
a subtree), carry no source spans, and support the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Any, Tuple
from enum import Enum


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    NUMBER = "Number"
    UNARY_OP = "UnaryOp"
    POSTFIX_OP = "PostfixOp"
    BINARY_OP = "BinaryOp"
    FUNCTION_CALL = "FunctionCall"


# Operator symbols each node kind accepts
BINARY_OPERATORS = ("+", "-", "*", "/", "^")
UNARY_OPERATORS = ("-",)
POSTFIX_OPERATORS = ("!",)
FUNCTION_NAMES = ("sin", "cos", "tan", "exp", "ln")


def format_number(value: float) -> str:
    """Shortest text for a number label: 3 rather than 3.0, 2.5, 1e+20."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType):
        self.node_type = node_type

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes, left to right."""
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Text shown for this node in diagrams."""
        pass

    @abstractmethod
    def _key(self) -> Tuple:
        """Values that identify this node, excluding children."""
        pass

    def walk(self):
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()

    def __eq__(self, other) -> bool:
        """Structural equality: same kind, same operator/value, equal children."""
        if not isinstance(other, ASTNode) or self.node_type != other.node_type:
            return False
        return self._key() == other._key() and self.children() == other.children()

    def __hash__(self) -> int:
        return hash((self.node_type, self._key(), tuple(self.children())))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(part) for part in self._key() + tuple(self.children()))})"


class Number(ASTNode):
    """Numeric literal leaf."""
    value: float

    def __init__(self, value: float):
        super().__init__(ASTNodeType.NUMBER)
        self.value = float(value)

    def children(self) -> List[ASTNode]:
        return []

    @property
    def label(self) -> str:
        return format_number(self.value)

    def _key(self) -> Tuple:
        return (self.value,)

    def __str__(self) -> str:
        return self.label


class UnaryOp(ASTNode):
    """Prefix negation."""
    operator: str
    operand: ASTNode

    def __init__(self, operator: str, operand: ASTNode):
        super().__init__(ASTNodeType.UNARY_OP)
        if operator not in UNARY_OPERATORS:
            raise ValueError(f"Unknown unary operator: {operator!r}")
        self.operator = operator
        self.operand = operand

    def children(self) -> List[ASTNode]:
        return [self.operand]

    @property
    def label(self) -> str:
        return self.operator

    def _key(self) -> Tuple:
        return (self.operator,)

    def __str__(self) -> str:
        return f"({self.operator}{self.operand})"


class PostfixOp(ASTNode):
    """Postfix factorial."""
    operator: str
    operand: ASTNode

    def __init__(self, operator: str, operand: ASTNode):
        super().__init__(ASTNodeType.POSTFIX_OP)
        if operator not in POSTFIX_OPERATORS:
            raise ValueError(f"Unknown postfix operator: {operator!r}")
        self.operator = operator
        self.operand = operand

    def children(self) -> List[ASTNode]:
        return [self.operand]

    @property
    def label(self) -> str:
        return self.operator

    def _key(self) -> Tuple:
        return (self.operator,)

    def __str__(self) -> str:
        return f"({self.operand}{self.operator})"


class BinaryOp(ASTNode):
    """Binary operation expression."""
    left: ASTNode
    operator: str
    right: ASTNode

    def __init__(self, left: ASTNode, operator: str, right: ASTNode):
        super().__init__(ASTNodeType.BINARY_OP)
        if operator not in BINARY_OPERATORS:
            raise ValueError(f"Unknown binary operator: {operator!r}")
        self.left = left
        self.operator = operator
        self.right = right

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    @property
    def label(self) -> str:
        return self.operator

    def _key(self) -> Tuple:
        return (self.operator,)

    def __repr__(self) -> str:
        return f"BinaryOp({self.left!r}, {self.operator!r}, {self.right!r})"

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


class FunctionCall(ASTNode):
    """Call of a named function on a single argument."""
    name: str
    argument: ASTNode

    def __init__(self, name: str, argument: ASTNode):
        super().__init__(ASTNodeType.FUNCTION_CALL)
        if name not in FUNCTION_NAMES:
            raise ValueError(f"Unknown function: {name!r}")
        self.name = name
        self.argument = argument

    def children(self) -> List[ASTNode]:
        return [self.argument]

    @property
    def label(self) -> str:
        return self.name

    def _key(self) -> Tuple:
        return (self.name,)

    def __str__(self) -> str:
        return f"{self.name}({self.argument})"

