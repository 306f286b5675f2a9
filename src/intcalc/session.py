"""
Line dispatcher for the interactive calculator.

A ``Session`` owns one variable environment and turns each input line into
a reply: a value, an error message, help text, or nothing. It performs no
I/O itself so any host (the CLI REPL, tests) can drive it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from intcalc.core.calculator import assign, evaluate
from intcalc.core.errors import CalculatorError
from intcalc.core.numbers import format_int
from intcalc.core.settings import CalculatorSettings, get_settings
from intcalc.core.variables import VariableEnvironment

logger = logging.getLogger(__name__)

HELP_COMMAND = "/help"
EXIT_COMMAND = "/exit"
COMMAND_PREFIX = "/"

GOODBYE = "Bye!"
UNKNOWN_COMMAND = "Unknown command"

HELP_TEXT = (
    "The program can solve and save expressions with integer numbers and + - * / ^ operators.\n"
    "  Saving an expression   ->    identifier = expression [ example: x = (5 * (-2 + -6))  ]\n"
    "  Saving a value         ->    identifier = value      [ example: y = 4   or   y = x   ]\n"
    "  Evaluate an expression ->    expression              [ example: 6 ^ 2 * -(-(20 / y)) ]\n"
    "Spaces are ignored, write /help for info, /exit to terminate the program."
)


@dataclass(frozen=True)
class SessionReply:
    """Outcome of one input line."""

    output: str | None = None
    exit: bool = False
    error: bool = False


class Session:
    """Dispatches REPL lines to the calculator core."""

    def __init__(
        self,
        env: VariableEnvironment | None = None,
        settings: CalculatorSettings | None = None,
    ) -> None:
        self.env = env if env is not None else VariableEnvironment()
        self.settings = settings or get_settings()

    def handle(self, line: str) -> SessionReply:
        """Process one line of input."""
        if not line or line.isspace():
            return SessionReply()
        if line == EXIT_COMMAND:
            return SessionReply(output=GOODBYE, exit=True)
        if line == HELP_COMMAND:
            return SessionReply(output=HELP_TEXT)
        if line.startswith(COMMAND_PREFIX):
            return SessionReply(output=UNKNOWN_COMMAND, error=True)

        try:
            if "=" in line:
                assign(line, self.env, self.settings)
                return SessionReply()
            return SessionReply(output=format_int(evaluate(line, self.env, self.settings)))
        except CalculatorError as e:
            logger.debug("Line %r failed: %s", line, type(e).__name__)
            return SessionReply(output=e.message, error=True)
