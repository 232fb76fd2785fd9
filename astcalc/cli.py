"""
Command line entry point for astcalc.

    astcalc                      interactive loop
    astcalc -a -v tree           interactive loop printing ASCII-art trees
    astcalc "2+3*4" "(1+2)!"     evaluate the given expressions and exit

Expressions starting with '-' must follow '--' so they are not read as options.

Author: xwest
"""

import sys

import click

from . import __version__
from .log import configure_logging, get_logger
from .render import AstView
from .repl import Repl, ReplOptions

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-a", "--ast-mode", is_flag=True, default=False,
              help="Print the AST of each expression before evaluating it.")
@click.option("-v", "--ast-view", type=click.Choice([view.value for view in AstView]), default=None,
              help="Diagram style used in AST mode (default: hierarchy). Requires --ast-mode.")
@click.option("--log-level", default=None, metavar="LEVEL",
              help="Logging level (default: $ASTCALC_LOG_LEVEL or WARNING).")
@click.argument("expressions", nargs=-1)
@click.version_option(version=__version__, prog_name="astcalc")
def main(ast_mode, ast_view, log_level, expressions):
    """Evaluate arithmetic expressions and optionally show their syntax trees."""
    if ast_view is not None and not ast_mode:
        raise click.UsageError("--ast-view requires --ast-mode")

    configure_logging(log_level)

    options = ReplOptions(ast_mode=ast_mode, ast_view=AstView(ast_view or AstView.HIERARCHY.value))
    logger.debug("starting with %s", options)
    repl = Repl(options)

    if not expressions:
        repl.run()
        return

    failures = [expression for expression in expressions if not repl.process(expression)]
    if failures:
        logger.debug("%d of %d expressions failed", len(failures), len(expressions))
        sys.exit(1)


if __name__ == "__main__":
    main()
