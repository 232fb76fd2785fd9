r"""
Tree view: an ASCII-art drawing of an AST.

        *
       / \
      +   !
     / \  |
    1   2 3

Layout is done in two passes. The first pass works bottom-up and gives every
subtree a box: its width, where its root label sits inside it, and where each
child box starts. The second pass works top-down, turns those relative
offsets into absolute columns and writes labels and connectors onto a
character grid, one label row and one connector row per level.

Subtrees never overlap, but a parent can end up far from the connectors under
it when its children are wide. That gap is left as spaces.

Author: xwest
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..parser.ast_nodes import ASTNode
from .errors import create_nesting_error

# Minimum number of blank columns between two sibling subtrees
MIN_GAP = 1


@dataclass
class _Box:
    """Horizontal extent of one laid-out subtree."""
    width: int
    label_start: int
    label_width: int
    child_offsets: List[int] = field(default_factory=list)

    @property
    def label_end(self) -> int:
        """First column after the label."""
        return self.label_start + self.label_width

    @property
    def center(self) -> int:
        return self.label_start + (self.label_width - 1) // 2


class TreeRenderer:
    """
    Two-pass ASCII layout of an expression tree.

    Nodes with one child get a '|' straight above the child's label; nodes
    with two children get a '/' just right of the left child's label and a
    '\\' just left of the right child's label.
    """

    def render(self, ast: ASTNode) -> str:
        """
        Render an AST as ASCII art.

        Returns:
            The diagram with trailing spaces stripped, each line ending with
            a newline
        """
        boxes: Dict[int, _Box] = {}
        try:
            root = self._measure(ast, boxes)

            height = 2 * self._depth(ast) - 1
            grid = [[" "] * root.width for _ in range(height)]
            self._draw(ast, boxes, 0, 0, grid)
        except RecursionError:
            raise create_nesting_error(ast) from None

        return "".join("".join(row).rstrip() + "\n" for row in grid)

    # Pass 1: bottom-up measurement

    def _measure(self, node: ASTNode, boxes: Dict[int, _Box]) -> _Box:
        label_width = len(node.label)
        children = node.children()

        if not children:
            box = _Box(label_width, 0, label_width)

        elif len(children) == 1:
            child = self._measure(children[0], boxes)

            # Center the label over the child's label
            label_start = child.center - (label_width - 1) // 2
            shift = max(0, -label_start)
            label_start += shift

            box = _Box(
                width=max(shift + child.width, label_start + label_width),
                label_start=label_start,
                label_width=label_width,
                child_offsets=[shift],
            )

        else:
            left = self._measure(children[0], boxes)
            right = self._measure(children[1], boxes)

            # The right box must clear the left one, and leave room for
            # '/', the label and '\' between the two child labels
            right_offset = max(
                left.width + MIN_GAP,
                left.label_end + label_width + 2 - right.label_start,
            )

            slash = left.label_end
            backslash = right_offset + right.label_start - 1
            free = backslash - slash - 1

            box = _Box(
                width=right_offset + right.width,
                label_start=slash + 1 + (free - label_width) // 2,
                label_width=label_width,
                child_offsets=[0, right_offset],
            )

        boxes[id(node)] = box
        return box

    def _depth(self, node: ASTNode) -> int:
        children = node.children()
        if not children:
            return 1
        return 1 + max(self._depth(child) for child in children)

    # Pass 2: top-down placement

    def _draw(self, node: ASTNode, boxes: Dict[int, _Box], origin: int, row: int, grid: List[List[str]]):
        box = boxes[id(node)]
        start = origin + box.label_start
        grid[row][start:start + box.label_width] = list(node.label)

        children = node.children()
        if len(children) == 1:
            child_box = boxes[id(children[0])]
            grid[row + 1][origin + box.child_offsets[0] + child_box.center] = "|"
        elif len(children) == 2:
            left_box = boxes[id(children[0])]
            right_box = boxes[id(children[1])]
            grid[row + 1][origin + box.child_offsets[0] + left_box.label_end] = "/"
            grid[row + 1][origin + box.child_offsets[1] + right_box.label_start - 1] = "\\"

        for child, offset in zip(children, box.child_offsets):
            self._draw(child, boxes, origin + offset, row + 2, grid)


def render_tree(ast: ASTNode) -> str:
    """Convenience function to render an AST as ASCII art."""
    return TreeRenderer().render(ast)
