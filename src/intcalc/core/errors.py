"""
Error types for intcalc expression evaluation and assignment.
"""


class CalculatorError(Exception):
    """Base exception for all intcalc errors."""

    default_message = "Calculator error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidExpressionError(CalculatorError):
    """
    Raised when an expression cannot be evaluated.

    Examples:
    - Disallowed characters
    - Unbalanced parentheses
    - Operands separated only by whitespace
    - Missing or dangling operators
    """

    default_message = "Invalid expression"


class InvalidIdentifierError(CalculatorError):
    """
    Raised for malformed identifiers.

    Examples:
    - Assignment target that is not letters-only
    - Digit directly adjacent to a letter (``3x``, ``x3``)
    """

    default_message = "Invalid identifier"


class InvalidAssignmentError(CalculatorError):
    """Raised when the right-hand side of an assignment fails to evaluate."""

    default_message = "Invalid assignment"


class UnknownVariableError(CalculatorError):
    """Raised when an operand references a variable that was never assigned."""

    default_message = "Unknown variable"

    def __init__(self, name: str | None = None, message: str | None = None):
        self.name = name
        super().__init__(message)


class CalculatorArithmeticError(CalculatorError, ArithmeticError):
    """Base for failures of the arithmetic itself."""

    default_message = "Arithmetic error"


class DivisionByZeroError(CalculatorArithmeticError, ZeroDivisionError):
    default_message = "Division by zero"


class NegativeExponentError(CalculatorArithmeticError):
    default_message = "Negative exponent"


class ExponentOverflowError(CalculatorArithmeticError):
    default_message = "Exponent too large"
