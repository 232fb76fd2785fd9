"""
Test suite for the astcalc command line and interactive loop.

Tests cover:
- One-shot evaluation of command line expressions
- AST mode and view selection
- The interactive loop (exit commands, blank lines, error recovery)
- Log level resolution

Author: xwest
"""

import io
import logging
import unittest
import sys
import os
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from click.testing import CliRunner
from rich.console import Console

from astcalc import __version__
from astcalc.cli import main
from astcalc.log import resolve_level, LOG_LEVEL_ENV
from astcalc.render import AstView
from astcalc.repl import Repl, ReplOptions, BANNER


class TestCommandLine(unittest.TestCase):
    """Test the click entry point."""

    def setUp(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_evaluate_argument(self):
        """An expression argument is evaluated once."""
        result = self.runner.invoke(main, ["2+3*4"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("The expression evaluates to: 14", result.output)
        self.assertNotIn(BANNER, result.output)

    def test_several_arguments(self):
        """Each argument is a separate expression."""
        result = self.runner.invoke(main, ["1+1", "3!"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("The expression evaluates to: 2", result.output)
        self.assertIn("The expression evaluates to: 6", result.output)

    def test_negative_expression_after_double_dash(self):
        """Expressions starting with '-' follow '--'."""
        result = self.runner.invoke(main, ["--", "-2^2"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("The expression evaluates to: -4", result.output)

    def test_ast_mode_hierarchy(self):
        """-a prints the hierarchy view by default."""
        result = self.runner.invoke(main, ["-a", "2*3"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Here is the AST for your expression:\n*\n├── 2\n└── 3\n", result.output)
        self.assertIn("The expression evaluates to: 6", result.output)

    def test_ast_mode_tree(self):
        """-a -v tree prints the ASCII-art view."""
        result = self.runner.invoke(main, ["-a", "-v", "tree", "2*3"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("  *\n / \\\n2   3\n", result.output)

    def test_view_requires_ast_mode(self):
        """-v without -a is a usage error."""
        result = self.runner.invoke(main, ["-v", "tree", "1"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("requires --ast-mode", result.output)

    def test_unknown_view(self):
        """Only the known views are accepted."""
        result = self.runner.invoke(main, ["-a", "-v", "sideways", "1"])
        self.assertEqual(result.exit_code, 2)

    def test_failed_expression_sets_exit_status(self):
        """A bad expression is reported and the exit status is 1."""
        result = self.runner.invoke(main, ["1+1", "1/0"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("The expression evaluates to: 2", result.output)
        self.assertIn("error: Division by zero", result.output)

    def test_deeply_nested_arguments(self):
        """Deep nesting on the command line fails with status 1, not a crash."""
        result = self.runner.invoke(main, ["--", "(" * 400 + "1" + ")" * 400, "-" * 800 + "1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertEqual(result.output.count("error: Expression nested too deeply"), 2)

    def test_interactive_loop(self):
        """Errors do not stop the loop; quit does."""
        result = self.runner.invoke(main, [], input="1+1\n\nsin(\nquit\n2+2\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn(BANNER, result.output)
        self.assertIn("The expression evaluates to: 2", result.output)
        self.assertIn("error: Unexpected end of input", result.output)
        self.assertNotIn("The expression evaluates to: 4", result.output)

    def test_interactive_loop_end_of_input(self):
        """The loop stops at end of input."""
        result = self.runner.invoke(main, [], input="3!\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("The expression evaluates to: 6", result.output)

    def test_version(self):
        """--version prints the package version."""
        result = self.runner.invoke(main, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)


class TestRepl(unittest.TestCase):
    """Test the loop against an in-memory console."""

    def setUp(self):
        """Set up test fixtures."""
        self.output = io.StringIO()
        self.console = Console(file=self.output, highlight=False, soft_wrap=True)

    def _run(self, lines, options=None):
        """Helper feeding lines to the loop until end of input."""
        repl = Repl(options, console=self.console)
        with mock.patch("builtins.input", side_effect=list(lines) + [EOFError()]):
            repl.run()
        return self.output.getvalue()

    def test_exit_commands(self):
        """exit, quit and q all stop the loop."""
        for command in ("exit", "quit", "q", "  quit  "):
            with self.subTest(command=command):
                self.output.seek(0)
                self.output.truncate()
                output = self._run([command, "1+1"])
                self.assertNotIn("evaluates", output)

    def test_blank_lines_are_ignored(self):
        """Blank input prints nothing."""
        output = self._run(["", "   "])
        self.assertNotIn("error", output)
        self.assertNotIn("evaluates", output)

    def test_errors_are_reported(self):
        """Each kind of failure prints one error line."""
        output = self._run(["sn(1)", "1 2", "(-1)!", "2^3^2"])
        self.assertEqual(output.count("error: "), 3)
        self.assertIn("The expression evaluates to: 512", output)

    def test_ast_mode(self):
        """The AST is printed before the value."""
        options = ReplOptions(ast_mode=True, ast_view=AstView.TREE)
        output = self._run(["-5"], options)
        self.assertIn("Here is the AST for your expression:\n-\n|\n5\nThe expression evaluates to: -5", output)

    def test_deep_nesting_is_reported(self):
        """Input nested past the recursion limit does not end the loop."""
        output = self._run(["(" * 1000 + "1" + ")" * 1000, "-" * 800 + "1", "2+2"])
        self.assertEqual(output.count("error: Expression nested too deeply"), 2)
        self.assertIn("The expression evaluates to: 4", output)

    def test_process_deep_nesting(self):
        """process() reports deep nesting as a failed expression."""
        repl = Repl(console=self.console)
        self.assertFalse(repl.process("(" * 1000 + "1" + ")" * 1000))
        self.assertIn("error: Expression nested too deeply", self.output.getvalue())

    def test_tree_too_deep_to_draw(self):
        """A drawing failure in AST mode is reported like any other error."""
        repl = Repl(ReplOptions(ast_mode=True), console=self.console)
        self.assertFalse(repl.process(" + ".join(["1"] * 3000)))
        self.assertIn("error: Tree too deep to draw", self.output.getvalue())

    def test_keyboard_interrupt_exits(self):
        """Ctrl-C at the prompt ends the loop without a traceback."""
        repl = Repl(console=self.console)
        with mock.patch("builtins.input", side_effect=KeyboardInterrupt()):
            repl.run()
        self.assertEqual(self.output.getvalue(), BANNER + "\n" + ">>> \n")

    def test_process_return_value(self):
        """process() reports success."""
        repl = Repl(console=self.console)
        self.assertTrue(repl.process("2.5*2"))
        self.assertFalse(repl.process("ln(0)"))
        self.assertIn("The expression evaluates to: 5\n", self.output.getvalue())


class TestLogLevel(unittest.TestCase):
    """Test log level resolution."""

    def test_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_level(), logging.WARNING)

    def test_environment(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            self.assertEqual(resolve_level(), logging.DEBUG)

    def test_explicit_level_wins(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            self.assertEqual(resolve_level("error"), logging.ERROR)

    def test_unknown_level(self):
        self.assertEqual(resolve_level("chatty"), logging.WARNING)


if __name__ == "__main__":
    unittest.main(verbosity=2)
