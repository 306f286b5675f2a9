"""
Expression evaluator for intcalc.

Evaluates expression AST nodes against a variable environment. Pure
evaluation: the environment is only read, never written. Does NOT use
Python's eval().
"""

from __future__ import annotations

import logging

from intcalc.core.errors import (
    DivisionByZeroError,
    ExponentOverflowError,
    InvalidExpressionError,
    NegativeExponentError,
)
from intcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    IntLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)
from intcalc.core.settings import DEFAULT_MAX_EXPONENT, DEFAULT_MAX_RESULT_BITS
from intcalc.core.variables import VariableEnvironment

logger = logging.getLogger(__name__)


def evaluate_expr(
    expr: Expr,
    env: VariableEnvironment,
    max_exponent: int = DEFAULT_MAX_EXPONENT,
    max_result_bits: int = DEFAULT_MAX_RESULT_BITS,
) -> int:
    """Evaluate a parsed expression against an environment.

    Args:
        expr: Parsed expression AST.
        env: Variable environment used for identifier lookups.
        max_exponent: Largest exponent accepted by '^'.
        max_result_bits: Largest result size in bits '^' may produce.

    Returns:
        The computed integer.

    Raises:
        UnknownVariableError: If a referenced variable is not in ``env``.
        CalculatorArithmeticError: On division by zero or a bad exponent.
        InvalidExpressionError: On an unknown node or operator.
    """
    return _Interpreter(env, max_exponent, max_result_bits).interpret(expr)


class _Interpreter:
    def __init__(self, env: VariableEnvironment, max_exponent: int, max_result_bits: int) -> None:
        self.env = env
        self.max_exponent = max_exponent
        self.max_result_bits = max_result_bits

    def interpret(self, expr: Expr) -> int:
        """Dispatch evaluation to the appropriate handler."""
        if isinstance(expr, IntLiteral):
            return expr.value

        if isinstance(expr, VariableRef):
            return self.env.get(expr.name)

        if isinstance(expr, UnaryExpr):
            return self._interpret_unary(expr)

        if isinstance(expr, BinaryExpr):
            left = self.interpret(expr.left)
            right = self.interpret(expr.right)
            return apply_binary(expr.op, left, right, self.max_exponent, self.max_result_bits)

        logger.debug("Unknown expression type: %s", type(expr).__name__)
        raise InvalidExpressionError()

    def _interpret_unary(self, expr: UnaryExpr) -> int:
        val = self.interpret(expr.operand)
        if expr.op == UnaryOp.NEG:
            return -val
        if expr.op == UnaryOp.POS:
            return val
        logger.debug("Unknown unary op: %s", expr.op)
        raise InvalidExpressionError()


def apply_binary(
    op: BinaryOp | str,
    left: int,
    right: int,
    max_exponent: int = DEFAULT_MAX_EXPONENT,
    max_result_bits: int = DEFAULT_MAX_RESULT_BITS,
) -> int:
    """Execute one binary operation on resolved operands."""
    if op == BinaryOp.POW:
        return power(left, right, max_exponent, max_result_bits)
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        return truncating_div(left, right)
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right

    logger.debug("Unknown binary op: %s", op)
    raise InvalidExpressionError()


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero: -7 / 2 == -3."""
    if right == 0:
        raise DivisionByZeroError()
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def power(
    base: int,
    exponent: int,
    max_exponent: int = DEFAULT_MAX_EXPONENT,
    max_result_bits: int = DEFAULT_MAX_RESULT_BITS,
) -> int:
    """Raise ``base`` to a non-negative ``exponent`` within the size limits.

    Raises:
        NegativeExponentError: If ``exponent`` is negative.
        ExponentOverflowError: If ``exponent`` exceeds ``max_exponent`` or the
            result could exceed ``max_result_bits`` bits.
    """
    if exponent < 0:
        raise NegativeExponentError()
    if exponent > max_exponent:
        raise ExponentOverflowError()

    # Results that never grow
    if base in (0, 1):
        return 1 if exponent == 0 else base
    if base == -1:
        return 1 if exponent % 2 == 0 else -1

    # Upper bound on the bit length of base ** exponent
    if abs(base).bit_length() * exponent > max_result_bits:
        logger.debug("Refusing %d-bit base to the power %d", abs(base).bit_length(), exponent)
        raise ExponentOverflowError()
    return base**exponent
