"""
Interactive read loop for astcalc.

Reads one expression per line, optionally prints its AST, and prints its
value. A bad expression only costs that line: parse and evaluation errors are
reported and the loop asks for the next one.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from .log import get_logger
from .lexer import tokenize
from .parser import parse, ParseError, format_number
from .evaluator import evaluate, EvaluationError
from .render import AstView, render, RenderError

logger = get_logger(__name__)

BANNER = "Type exit or quit to stop the program!"
PROMPT = ">>> "
EXIT_COMMANDS = frozenset({"exit", "quit", "q"})


@dataclass
class ReplOptions:
    """Settings chosen on the command line."""
    ast_mode: bool = False
    ast_view: AstView = AstView.HIERARCHY


class Repl:
    """Read-evaluate-print loop over arithmetic expressions."""

    def __init__(self, options: Optional[ReplOptions] = None, console: Optional[Console] = None):
        self.options = options or ReplOptions()
        self.console = console or Console(highlight=False, soft_wrap=True)

    def run(self) -> None:
        """Prompt for expressions until exit, quit, q or end of input."""
        self.console.print(BANNER)

        while True:
            try:
                line = self.console.input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

            command = line.strip()
            if command in EXIT_COMMANDS:
                break
            if not command:
                continue

            self.process(command)

    def process(self, expression: str) -> bool:
        """
        Evaluate one expression and print the outcome.

        Returns:
            True if the expression evaluated, False if it was reported as an error
        """
        try:
            ast = parse(tokenize(expression))

            if self.options.ast_mode:
                self.console.print("Here is the AST for your expression:")
                self.console.print(render(ast, self.options.ast_view), end="", markup=False)

            value = evaluate(ast)
        except (ParseError, EvaluationError, RenderError) as e:
            logger.info("rejected %r (%s): %s", expression, e.category, e.message)
            self.console.print(f"error: {e.message}", style="red", markup=False)
            return False

        self.console.print(f"The expression evaluates to: {format_number(value)}")
        return True
