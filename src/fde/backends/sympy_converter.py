"""
sympy bridge for FDE expression trees.

Converts a tree into a sympy expression so that algebraic identities
(e.g. relaxation modulus × creep compliance = 1/s²) can be checked
symbolically. The conversion is one way: nothing produced here is fed
back into the builders.
"""
from fractions import Fraction

import sympy as sp

from fde.expressions import (
    BinaryExpression,
    Expression,
    FunctionCall,
    Literal,
    Operator,
    Symbol,
)


def _literal_to_sympy(value):
    if isinstance(value, complex):
        return sp.nsimplify(value.real) + sp.I * sp.nsimplify(value.imag)
    if isinstance(value, Fraction):
        return sp.Rational(value.numerator, value.denominator)
    return sp.sympify(value)


def to_sympy(expr: Expression):
    """
    Convert an FDE expression to sympy.

    Symbols become sympy.Symbol, the imaginary unit becomes sympy.I and
    function calls become applications of an undefined sympy.Function.
    """
    if isinstance(expr, Literal):
        return _literal_to_sympy(expr.value)
    if isinstance(expr, Symbol):
        return sp.Symbol(expr.name)
    if isinstance(expr, FunctionCall):
        return sp.Function(expr.name)(*[to_sympy(arg) for arg in expr.arguments])
    if isinstance(expr, BinaryExpression):
        left = to_sympy(expr.left)
        right = to_sympy(expr.right)
        if expr.operator == Operator.ADD:
            return left + right
        if expr.operator == Operator.SUBTRACT:
            return left - right
        if expr.operator == Operator.MULTIPLY:
            return left * right
        if expr.operator == Operator.DIVIDE:
            return left / right
        if expr.operator == Operator.POWER:
            return left ** right
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def are_equivalent(a, b) -> bool:
    """True if a and b simplify to the same sympy expression."""
    a = to_sympy(a) if isinstance(a, Expression) else sp.sympify(a)
    b = to_sympy(b) if isinstance(b, Expression) else sp.sympify(b)
    return sp.simplify(a - b) == 0
