"""
Error handling for the astcalc diagram renderers.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import ASTNode


class RenderError(Exception):
    """Exception raised when an AST cannot be drawn."""

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
        return RENDER_ERROR_CODES.get(self.code, "Render error")

    def __str__(self) -> str:
        return str(self.diagnostic)


RENDER_ERROR_CODES = {
    "R001": "Tree too deep to draw",
}


def create_nesting_error(node: Optional[ASTNode] = None) -> RenderError:
    """Create an error for a tree deeper than the renderer can recurse."""
    return RenderError(
        message=RENDER_ERROR_CODES["R001"],
        node=node,
        code="R001",
        help_text="The diagram would need more nesting levels than can be laid out.",
        suggestions=["Turn off AST mode for this expression"]
    )
