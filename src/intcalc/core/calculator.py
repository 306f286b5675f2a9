"""
Entry points of the intcalc core: evaluate an expression, assign a variable.

Both functions take the variable environment explicitly. ``evaluate`` only
reads it; ``assign`` writes it once, after the right-hand side succeeded.
"""

from __future__ import annotations

import logging
import re

from intcalc.core.errors import (
    CalculatorError,
    InvalidAssignmentError,
    InvalidIdentifierError,
    UnknownVariableError,
)
from intcalc.core.expression_lang.evaluator import evaluate_expr
from intcalc.core.expression_lang.parser import parse_expr
from intcalc.core.expression_lang.validator import validate_expression
from intcalc.core.settings import CalculatorSettings
from intcalc.core.variables import VariableEnvironment

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[a-zA-Z]+")
_WHITESPACE_RE = re.compile(r"\s+")
_AROUND_EQUALS_RE = re.compile(r"\s*=\s*")

_DEFAULT_SETTINGS = CalculatorSettings()


def evaluate(
    raw: str,
    env: VariableEnvironment,
    settings: CalculatorSettings | None = None,
) -> int:
    """Evaluate a raw expression line.

    Args:
        raw: Expression text, e.g. "6 ^ 2 * -(20 / y)".
        env: Variable environment consulted for identifiers.
        settings: Optional settings; defaults apply when omitted.

    Returns:
        The value of the expression.

    Raises:
        InvalidExpressionError: Malformed expression.
        InvalidIdentifierError: Digit adjacent to a letter.
        UnknownVariableError: Reference to an unassigned variable.
        CalculatorArithmeticError: Division by zero or bad exponent.
    """
    settings = settings or _DEFAULT_SETTINGS
    validate_expression(raw)
    expr = parse_expr(raw)
    logger.debug("Parsed %r as %s", raw, expr)
    return evaluate_expr(expr, env, settings.max_exponent, settings.max_result_bits)


def split_assignment(raw: str) -> tuple[str, str]:
    """Split "name = expression" into its two sides.

    Whitespace runs collapse to one space and whitespace around '=' is
    dropped before splitting on the first '='.
    """
    line = _WHITESPACE_RE.sub(" ", raw)
    line = _AROUND_EQUALS_RE.sub("=", line).strip()
    if "=" not in line:
        raise InvalidAssignmentError()
    identifier, value = line.split("=", 1)
    return identifier, value


def assign(
    raw: str,
    env: VariableEnvironment,
    settings: CalculatorSettings | None = None,
) -> tuple[str, int]:
    """Evaluate the right-hand side of "name = expression" and store it.

    Returns:
        The ``(name, value)`` pair written to ``env``.

    Raises:
        InvalidIdentifierError: The target is not letters-only.
        UnknownVariableError: The right-hand side references an unknown variable.
        InvalidAssignmentError: Any other failure of the right-hand side.
    """
    identifier, value_source = split_assignment(raw)

    if not _IDENTIFIER_RE.fullmatch(identifier):
        raise InvalidIdentifierError()

    try:
        value = evaluate(value_source, env, settings)
    except UnknownVariableError:
        raise
    except CalculatorError as e:
        raise InvalidAssignmentError() from e

    env.set(identifier, value)
    logger.info("Assigned %s", identifier)
    return identifier, value
