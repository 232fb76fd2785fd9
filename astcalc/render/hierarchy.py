"""
Hierarchy view: an indented tree print of an AST.

    +
    ├── 2
    └── *
        ├── 3
        └── 4

Each line only depends on whether the node is its parent's last child and on
the prefix inherited from its ancestors, so the output is exact for any tree
shape.

Author: xwest
"""

from typing import List

from ..parser.ast_nodes import ASTNode
from .errors import create_nesting_error

BRANCH = "├── "
LAST_BRANCH = "└── "
CONTINUATION = "│   "
BLANK = "    "


def render_hierarchy(ast: ASTNode) -> str:
    """
    Render an AST as an indented hierarchy.

    Args:
        ast: Root node

    Returns:
        The diagram, one node per line, each line ending with a newline
    """
    lines = [ast.label]
    try:
        _render_children(ast, "", lines)
    except RecursionError:
        raise create_nesting_error(ast) from None
    return "\n".join(lines) + "\n"


def _render_children(node: ASTNode, prefix: str, lines: List[str]):
    children = node.children()
    for index, child in enumerate(children):
        is_last = index == len(children) - 1
        lines.append(prefix + (LAST_BRANCH if is_last else BRANCH) + child.label)
        _render_children(child, prefix + (BLANK if is_last else CONTINUATION), lines)
