"""
intcalc expression language.

Validator, tokenizer, parser, and evaluator for integer arithmetic.

Usage:
    from intcalc.core.expression_lang import parse_expr, evaluate_expr
    from intcalc.core.variables import VariableEnvironment

    expr = parse_expr("x * (y + 2)")
    result = evaluate_expr(expr, VariableEnvironment({"x": 3, "y": 4}))
    # result == 18
"""

from intcalc.core.expression_lang.evaluator import evaluate_expr
from intcalc.core.expression_lang.parser import parse_expr
from intcalc.core.expression_lang.validator import validate_expression

__all__ = ["evaluate_expr", "parse_expr", "validate_expression"]
