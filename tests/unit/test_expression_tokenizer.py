"""Tests for the intcalc tokenizer."""

import pytest

from intcalc.core.errors import InvalidExpressionError
from intcalc.core.expression_lang.tokenizer import TokenKind, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(source)]


class TestTokenizer:
    """Tokenizer produces correct token sequences."""

    def test_integer(self) -> None:
        tokens = tokenize("42")
        assert tokens[0].kind == TokenKind.INT
        assert tokens[0].value == "42"

    def test_identifier(self) -> None:
        tokens = tokenize("total")
        assert tokens[0].kind == TokenKind.IDENT
        assert tokens[0].value == "total"

    def test_operators_and_punctuation(self) -> None:
        assert kinds("(1*2/3^4)") == [
            TokenKind.LPAREN,
            TokenKind.INT,
            TokenKind.STAR,
            TokenKind.INT,
            TokenKind.SLASH,
            TokenKind.INT,
            TokenKind.CARET,
            TokenKind.INT,
            TokenKind.RPAREN,
            TokenKind.EOF,
        ]

    def test_whitespace_skipped(self) -> None:
        assert kinds("  1\t+\t2  ") == [TokenKind.INT, TokenKind.PLUS, TokenKind.INT, TokenKind.EOF]

    def test_positions(self) -> None:
        tokens = tokenize("12 + ab")
        assert [t.pos for t in tokens] == [0, 3, 5, 7]

    def test_empty_input(self) -> None:
        assert kinds("") == [TokenKind.EOF]

    def test_unexpected_character(self) -> None:
        with pytest.raises(InvalidExpressionError):
            tokenize("2 % 3")


class TestSignFolding:
    """Runs of '+' and '-' fold into a single sign token."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("+", "+"),
            ("-", "-"),
            ("++", "+"),
            ("--", "+"),
            ("-+", "-"),
            ("+-", "-"),
            ("---", "-"),
            ("- - -", "-"),
            ("+-+-", "+"),
        ],
    )
    def test_fold(self, source: str, expected: str) -> None:
        tokens = tokenize(source + "5")
        assert len(tokens) == 3
        assert tokens[0].value == expected
        assert tokens[0].kind == (TokenKind.MINUS if expected == "-" else TokenKind.PLUS)
        assert tokens[1].value == "5"

    def test_binary_run_folds_to_one_operator(self) -> None:
        assert kinds("5 -+- 3") == [TokenKind.INT, TokenKind.PLUS, TokenKind.INT, TokenKind.EOF]

    def test_sign_after_caret(self) -> None:
        assert kinds("6^-2") == [
            TokenKind.INT,
            TokenKind.CARET,
            TokenKind.MINUS,
            TokenKind.INT,
            TokenKind.EOF,
        ]
