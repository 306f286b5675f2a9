"""
intcalc - arbitrary-precision integer calculator with variables.

Evaluates expressions over + - * / ^, parentheses and sign chains against
an explicit variable environment.
"""

from __future__ import annotations

from ._version import get_version
from .core.calculator import assign, evaluate
from .core.errors import (
    CalculatorArithmeticError,
    CalculatorError,
    DivisionByZeroError,
    ExponentOverflowError,
    InvalidAssignmentError,
    InvalidExpressionError,
    InvalidIdentifierError,
    NegativeExponentError,
    UnknownVariableError,
)
from .core.variables import VariableEnvironment

__version__ = get_version()

__all__ = [
    "__version__",
    "assign",
    "evaluate",
    "VariableEnvironment",
    "CalculatorError",
    "CalculatorArithmeticError",
    "DivisionByZeroError",
    "ExponentOverflowError",
    "InvalidAssignmentError",
    "InvalidExpressionError",
    "InvalidIdentifierError",
    "NegativeExponentError",
    "UnknownVariableError",
]
