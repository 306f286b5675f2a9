"""
intcalc CLI.

Commands:
- repl: interactive calculator (default session with /help and /exit)
- eval: evaluate a single expression, optionally after assignments
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from intcalc._version import get_version
from intcalc.core.calculator import assign, evaluate
from intcalc.core.errors import CalculatorError
from intcalc.core.numbers import format_int
from intcalc.core.settings import get_settings
from intcalc.core.variables import VariableEnvironment
from intcalc.session import GOODBYE, Session

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="intcalc – arbitrary-precision integer calculator with variables",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"intcalc {get_version()}")
        raise typer.Exit()


def _echo(text: str) -> None:
    # soft_wrap keeps very long integers on a single line
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
) -> None:
    """intcalc CLI main callback for global options."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command(name="repl")
def repl_command() -> None:
    """
    Start the interactive calculator.

    Enter expressions to evaluate them, "name = expression" to store a
    variable, /help for usage and /exit to quit.
    """
    session = Session()
    while True:
        try:
            line = console.input(escape(session.settings.prompt))
        except (EOFError, KeyboardInterrupt):
            _echo(GOODBYE)
            break

        reply = session.handle(line)
        if reply.output is not None:
            _echo(reply.output)
        if reply.exit:
            break


@app.command(name="eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    assignments: list[str] = typer.Option(  # noqa: B008
        [],
        "--set",
        "-s",
        help='Assignment applied before evaluating, e.g. --set "x = 4" (repeatable)',
    ),
) -> None:
    """
    Evaluate a single expression and print its value.
    """
    settings = get_settings()
    env = VariableEnvironment()
    logger.debug("Evaluating %r after %d assignment(s)", expression, len(assignments))
    try:
        for assignment in assignments:
            assign(assignment, env, settings)
        result = evaluate(expression, env, settings)
    except CalculatorError as e:
        err_console.print(e.message, markup=False, highlight=False)
        raise typer.Exit(code=1)

    _echo(format_int(result))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
