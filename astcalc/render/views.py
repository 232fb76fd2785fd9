"""
Selection between the two diagram styles.

Author: xwest
"""

from enum import Enum

from ..parser.ast_nodes import ASTNode
from .hierarchy import render_hierarchy
from .tree import render_tree


class AstView(Enum):
    """Diagram styles available for printing an AST."""
    HIERARCHY = "hierarchy"
    TREE = "tree"

    def __str__(self) -> str:
        return self.value


def render(ast: ASTNode, view: AstView = AstView.HIERARCHY) -> str:
    """Render an AST in the requested style."""
    if view == AstView.TREE:
        return render_tree(ast)
    return render_hierarchy(ast)
