"""
Intermediate representation for intcalc expressions.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    IntLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "IntLiteral",
    "UnaryExpr",
    "UnaryOp",
    "VariableRef",
]
