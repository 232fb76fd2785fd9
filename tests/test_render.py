"""
Test suite for the astcalc AST diagrams.

Tests cover:
- Exact hierarchy output
- Exact ASCII-art tree output
- Pre-order labels and repeatability

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from astcalc.parser import parse_string, Number, BinaryOp
from astcalc.render import render_hierarchy, render_tree, render, AstView, RenderError


class TestHierarchy(unittest.TestCase):
    """Test the indented hierarchy view."""

    def test_single_number(self):
        """A leaf is a single line."""
        self.assertEqual(render_hierarchy(parse_string("42")), "42\n")
        self.assertEqual(render_hierarchy(parse_string("2.5")), "2.5\n")

    def test_binary(self):
        """Children are listed left to right."""
        self.assertEqual(
            render_hierarchy(parse_string("2+3*4")),
            "+\n"
            "├── 2\n"
            "└── *\n"
            "    ├── 3\n"
            "    └── 4\n"
        )

    def test_continuation_lines(self):
        """A non-last subtree keeps the vertical bar for its siblings."""
        self.assertEqual(
            render_hierarchy(parse_string("(1+2)*3!")),
            "*\n"
            "├── +\n"
            "│   ├── 1\n"
            "│   └── 2\n"
            "└── !\n"
            "    └── 3\n"
        )

    def test_unary_and_function(self):
        """Single-child nodes use the last-child branch."""
        self.assertEqual(
            render_hierarchy(parse_string("-sin(0)")),
            "-\n"
            "└── sin\n"
            "    └── 0\n"
        )

    def test_labels_in_pre_order(self):
        """Stripping the drawing characters leaves the pre-order labels."""
        ast = parse_string("5^ln(3/4* cos(9- -1))")
        lines = render_hierarchy(ast).splitlines()
        labels = [line.lstrip(" │├└─") for line in lines]
        self.assertEqual(labels, [node.label for node in ast.walk()])


class TestTree(unittest.TestCase):
    """Test the ASCII-art tree view."""

    def test_single_number(self):
        """A leaf is just its label."""
        self.assertEqual(render_tree(Number(7)), "7\n")

    def test_binary(self):
        """Slash and backslash sit between the operator and its operands."""
        self.assertEqual(render_tree(parse_string("2*3")), "  *\n / \\\n2   3\n")

    def test_unary(self):
        """One child hangs straight below its parent."""
        self.assertEqual(render_tree(parse_string("-5")), "-\n|\n5\n")

    def test_function(self):
        """A wide label is centered over its child."""
        self.assertEqual(render_tree(parse_string("sin(2)")), "sin\n |\n 2\n")

    def test_wide_operands(self):
        """Multi-character numbers push the right subtree over."""
        self.assertEqual(render_tree(parse_string("12+345")), "   +\n  / \\\n12   345\n")

    def test_nested_right(self):
        """Right-nested subtrees descend to the right."""
        self.assertEqual(
            render_tree(parse_string("2+3*4")),
            "  +\n"
            " / \\\n"
            "2   *\n"
            "   / \\\n"
            "  3   4\n"
        )

    def test_mixed_arity(self):
        """Binary and postfix nodes on the same level."""
        self.assertEqual(
            render_tree(parse_string("(1+2)*3!")),
            "    *\n"
            "   / \\\n"
            "  +   !\n"
            " / \\  |\n"
            "1   2 3\n"
        )

    def test_row_count(self):
        """One label row per level and one connector row between levels."""
        ast = parse_string("1+2*3^4")
        self.assertEqual(len(render_tree(ast).splitlines()), 7)

    def test_no_trailing_spaces(self):
        """Lines are right-stripped."""
        output = render_tree(parse_string("sin(1)+cos(2)*ln(3)"))
        for line in output.splitlines():
            self.assertEqual(line, line.rstrip())

    def test_every_label_drawn(self):
        """Each label appears in the drawing."""
        ast = parse_string("exp(10)/(3!-ln(2))")
        output = render_tree(ast)
        for node in ast.walk():
            self.assertIn(node.label, output)


class TestRenderDispatch(unittest.TestCase):
    """Test view selection."""

    def test_default_is_hierarchy(self):
        ast = BinaryOp(Number(1), "+", Number(2))
        self.assertEqual(render(ast), render_hierarchy(ast))

    def test_tree_view(self):
        ast = BinaryOp(Number(1), "+", Number(2))
        self.assertEqual(render(ast, AstView.TREE), render_tree(ast))
        self.assertEqual(str(AstView.TREE), "tree")

    def test_very_deep_tree(self):
        """Both views report a tree too deep to draw."""
        ast = parse_string(" + ".join(["1"] * 3000))
        for view in AstView:
            with self.subTest(view=view):
                with self.assertRaises(RenderError) as ctx:
                    render(ast, view)
                self.assertEqual(ctx.exception.code, "R001")
                self.assertEqual(ctx.exception.category, "Tree too deep to draw")

    def test_rendering_is_repeatable(self):
        """Rendering twice gives the same text."""
        ast = parse_string("-(2^3)!")
        for view in AstView:
            with self.subTest(view=view):
                self.assertEqual(render(ast, view), render(ast, view))


if __name__ == "__main__":
    unittest.main(verbosity=2)
