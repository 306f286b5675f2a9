"""Tests for structural validation of raw expressions."""

import pytest

from intcalc.core.errors import InvalidExpressionError, InvalidIdentifierError
from intcalc.core.expression_lang.validator import parentheses_balanced, validate_expression


class TestParenthesesBalanced:
    @pytest.mark.parametrize("source", ["", "1", "(1)", "((1) + (2))", "()()"])
    def test_balanced(self, source: str) -> None:
        assert parentheses_balanced(source)

    @pytest.mark.parametrize("source", ["(", ")", "(1 + 2", "1 + 2)", ")(", "(()"])
    def test_unbalanced(self, source: str) -> None:
        assert not parentheses_balanced(source)


class TestValidateExpression:
    @pytest.mark.parametrize(
        "source",
        ["1 + 2", "x", "(a + b) * -c", "6^-2", "- - 5", " 1\t+\t2 ", "2 ^ (3)"],
    )
    def test_accepts(self, source: str) -> None:
        validate_expression(source)

    @pytest.mark.parametrize("source", ["", " ", "\t  "])
    def test_blank(self, source: str) -> None:
        with pytest.raises(InvalidExpressionError):
            validate_expression(source)

    @pytest.mark.parametrize("source", ["2 % 3", "2.5", "x_y", "1 = 2", "é + 1", "2 # 3"])
    def test_disallowed_characters(self, source: str) -> None:
        with pytest.raises(InvalidExpressionError):
            validate_expression(source)

    @pytest.mark.parametrize("source", ["3 4", "x y", "3 x", "(1 + 2 3)", "a\tb"])
    def test_operands_separated_by_whitespace(self, source: str) -> None:
        with pytest.raises(InvalidExpressionError):
            validate_expression(source)

    @pytest.mark.parametrize("source", ["(1 + 2", "1 + 2)", ")1 + 2("])
    def test_unbalanced_parentheses(self, source: str) -> None:
        with pytest.raises(InvalidExpressionError):
            validate_expression(source)

    @pytest.mark.parametrize("source", ["3x", "x3", "3x + 1", "1 + ab2"])
    def test_digit_adjacent_to_letter(self, source: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            validate_expression(source)

    def test_structure_checked_before_identifiers(self) -> None:
        # Both problems present: the structural one wins
        with pytest.raises(InvalidExpressionError):
            validate_expression("(3x")
