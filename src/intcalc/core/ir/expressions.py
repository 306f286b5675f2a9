"""
Expression types for the intcalc IR.

A small typed AST for integer arithmetic:

- Literals: 42, 100000000000000000000
- Variable references: x, total
- Unary signs: -x, +3, -(1 + 2)
- Binary operators: ^, *, /, +, -
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators, grouped by precedence tier."""

    # Tier 1
    POW = "^"
    # Tier 2
    MUL = "*"
    DIV = "/"
    # Tier 3
    ADD = "+"
    SUB = "-"


class UnaryOp(StrEnum):
    """Unary sign operators."""

    NEG = "-"
    POS = "+"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class IntLiteral(BaseModel):
    """An integer literal of arbitrary size."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class VariableRef(BaseModel):
    """Reference to a variable in the environment."""

    name: str = Field(description="Identifier, ASCII letters only")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class UnaryExpr(BaseModel):
    """Unary sign applied to an operand or parenthesized group."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op}{self.operand}"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


Expr = IntLiteral | VariableRef | UnaryExpr | BinaryExpr

# Resolve forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
