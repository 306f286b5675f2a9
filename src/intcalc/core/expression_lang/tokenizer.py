"""
Tokenizer for intcalc expressions.

Converts an expression string into a flat list of typed tokens. Runs of
consecutive '+'/'-' characters are folded into a single sign token whose
value is '-' when the run holds an odd number of minus signs.
"""

from __future__ import annotations

from enum import StrEnum, auto

from intcalc.core.errors import InvalidExpressionError


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Operands
    INT = auto()
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_MAP: dict[str, TokenKind] = {
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_SIGNS = "+-"


def _is_ascii_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ascii_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        # Sign run, whitespace allowed in between: "- - 5", "+-+"
        if c in _SIGNS:
            start = i
            negative = False
            while i < n and (source[i] in _SIGNS or source[i].isspace()):
                if source[i] == "-":
                    negative = not negative
                i += 1
            if negative:
                tokens.append(Token(TokenKind.MINUS, "-", start))
            else:
                tokens.append(Token(TokenKind.PLUS, "+", start))
            continue

        if _is_ascii_digit(c):
            start = i
            while i < n and _is_ascii_digit(source[i]):
                i += 1
            tokens.append(Token(TokenKind.INT, source[start:i], start))
            continue

        if _is_ascii_letter(c):
            start = i
            while i < n and _is_ascii_letter(source[i]):
                i += 1
            tokens.append(Token(TokenKind.IDENT, source[start:i], start))
            continue

        if c in _SINGLE_MAP:
            tokens.append(Token(_SINGLE_MAP[c], c, i))
            i += 1
            continue

        raise InvalidExpressionError(f"Unexpected character: {c!r}")

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens
