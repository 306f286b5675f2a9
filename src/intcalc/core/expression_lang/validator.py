"""
Structural validation for raw expression strings.

Runs before tokenization and rejects input that can never form a valid
expression, so the tokenizer and parser only see the permitted alphabet.
"""

from __future__ import annotations

import re

from intcalc.core.errors import InvalidExpressionError, InvalidIdentifierError

# Digits, ASCII letters, parentheses, the five operators and whitespace
_ALLOWED_RE = re.compile(r"[\s0-9a-zA-Z()^*/+-]+", re.ASCII)
# Two operands separated only by whitespace: "3 4", "x y"
_SPACED_OPERANDS_RE = re.compile(r"[a-zA-Z0-9]\s+[a-zA-Z0-9]", re.ASCII)
# Digit touching a letter: "3x", "x3"
_DIGIT_LETTER_RE = re.compile(r"[0-9][a-zA-Z]|[a-zA-Z][0-9]")


def parentheses_balanced(source: str) -> bool:
    """Return True if every ')' closes an earlier '(' and none stay open."""
    depth = 0
    for c in source:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def validate_expression(source: str) -> None:
    """Check the structure of a raw expression.

    Raises:
        InvalidExpressionError: On disallowed characters, whitespace-separated
            operands, unbalanced parentheses, or blank input.
        InvalidIdentifierError: If a digit is directly adjacent to a letter.
    """
    if (
        not _ALLOWED_RE.fullmatch(source)
        or _SPACED_OPERANDS_RE.search(source)
        or not parentheses_balanced(source)
        or source.isspace()
    ):
        raise InvalidExpressionError()

    if _DIGIT_LETTER_RE.search(source):
        raise InvalidIdentifierError()
