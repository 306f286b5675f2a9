"""
Recursive descent parser for intcalc expressions.

Grammar (precedence low to high, every binary operator left-associative):
    sum      → product (("+"|"-") product)*
    product  → power (("*"|"/") power)*
    power    → signed ("^" signed)*
    signed   → ("+"|"-") primary | primary
    primary  → INT | IDENT | "(" sum ")"

The tokenizer has already folded sign runs, so at most one sign token
precedes a primary. A sign binds tighter than '^': "-2 ^ 2" is 4.
"""

from __future__ import annotations

import logging

from intcalc.core.errors import InvalidExpressionError
from intcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from intcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    IntLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)
from intcalc.core.numbers import parse_int_literal

logger = logging.getLogger(__name__)

_SUM_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}
_PRODUCT_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}
_SIGN_OPS: dict[TokenKind, UnaryOp] = {
    TokenKind.PLUS: UnaryOp.POS,
    TokenKind.MINUS: UnaryOp.NEG,
}


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            logger.debug("Expected %s, got %s at %d", kind, tok.kind, tok.pos)
            raise InvalidExpressionError()
        return self.advance()

    # -- Grammar rules --

    def parse_sum(self) -> Expr:
        """product (('+' | '-') product)*"""
        left = self.parse_product()
        while self.current.kind in _SUM_OPS:
            op = _SUM_OPS[self.advance().kind]
            right = self.parse_product()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_product(self) -> Expr:
        """power (('*' | '/') power)*"""
        left = self.parse_power()
        while self.current.kind in _PRODUCT_OPS:
            op = _PRODUCT_OPS[self.advance().kind]
            right = self.parse_power()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_power(self) -> Expr:
        """signed ('^' signed)*"""
        left = self.parse_signed()
        while self.current.kind == TokenKind.CARET:
            self.advance()
            right = self.parse_signed()
            left = BinaryExpr(op=BinaryOp.POW, left=left, right=right)
        return left

    def parse_signed(self) -> Expr:
        """('+' | '-') primary | primary"""
        if self.current.kind in _SIGN_OPS:
            op = _SIGN_OPS[self.advance().kind]
            return UnaryExpr(op=op, operand=self.parse_primary())
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """INT | IDENT | '(' sum ')'"""
        tok = self.current

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_sum()
            self.expect(TokenKind.RPAREN)
            return expr

        if tok.kind == TokenKind.INT:
            self.advance()
            return IntLiteral(value=parse_int_literal(tok.value))

        if tok.kind == TokenKind.IDENT:
            self.advance()
            return VariableRef(name=tok.value)

        logger.debug("Unexpected token %s (%r) at %d", tok.kind, tok.value, tok.pos)
        raise InvalidExpressionError()


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "6 ^ 2 * -(20 / y)")

    Returns:
        Parsed expression AST.

    Raises:
        InvalidExpressionError: If the expression is malformed.
    """
    parser = _Parser(tokenize(source))
    expr = parser.parse_sum()

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        logger.debug(
            "Unexpected token after expression: %r at %d",
            parser.current.value,
            parser.current.pos,
        )
        raise InvalidExpressionError()

    return expr
