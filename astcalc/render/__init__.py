"""
astcalc Diagram Rendering Package

Two text views of the same AST:
- Hierarchy view: indented tree with box-drawing connectors, exact for any shape
- Tree view: ASCII-art layout with '/', '\\' and '|' edges

Both are pure functions of the tree.

Author: xwest
"""

from .hierarchy import render_hierarchy
from .tree import TreeRenderer, render_tree
from .views import AstView, render
from .errors import RenderError

__all__ = [
    "render_hierarchy",
    "render_tree",
    "TreeRenderer",
    "AstView",
    "render",
    "RenderError",
]
