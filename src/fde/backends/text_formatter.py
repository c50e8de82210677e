"""
Plain-text algebra renderer for FDE expression trees.

Renders infix notation with the minimum parentheses needed to recover the
tree shape:

    k + η * s
    η * dεdt - (k * σ + η * dσdt)
    cₐ * s^α + cᵧ * s^γ + cₐ * cᵧ / cᵦ * s^(α + γ - β)

Operands of equal precedence are parenthesised on the right, never on the
left, so a left-folded sum prints flat.
"""

from fractions import Fraction

from fde.builders import fold_time_domain
from fde.expressions import (
    BinaryExpression,
    Expression,
    FunctionCall,
    Literal,
    Operator,
    Symbol,
)
from fde.model import Equation


_ATOM = 4

_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.POWER: 3,
}


def _format_literal(lit: Literal):
    """Return (text, precedence) for a literal."""
    value = lit.value
    if isinstance(value, complex):
        if value == 1j:
            return "i", _ATOM
        if value.real == 0:
            return f"{value.imag}i", 0 if value.imag < 0 else _PRECEDENCE[Operator.MULTIPLY]
        sign = "-" if value.imag < 0 else "+"
        return f"({value.real} {sign} {abs(value.imag)}i)", _ATOM
    if isinstance(value, Fraction) and value.denominator != 1:
        text = f"{abs(value.numerator)}/{value.denominator}"
        if value < 0:
            return f"-{text}", 0
        return text, _PRECEDENCE[Operator.DIVIDE]
    if isinstance(value, Fraction):
        value = value.numerator
    if value < 0:
        return str(value), 0
    return str(value), _ATOM


def _render(expr: Expression):
    """Return (text, precedence) for any node."""
    if isinstance(expr, Literal):
        return _format_literal(expr)

    if isinstance(expr, Symbol):
        return expr.name, _ATOM

    if isinstance(expr, FunctionCall):
        args = ", ".join(format_expression(arg) for arg in expr.arguments)
        return f"{expr.name}({args})", _ATOM

    if isinstance(expr, BinaryExpression):
        prec = _PRECEDENCE[expr.operator]
        left, left_prec = _render(expr.left)
        right, right_prec = _render(expr.right)

        if expr.operator == Operator.POWER:
            # base binds tighter than anything but an atom; exponent is grouped
            if left_prec <= prec:
                left = f"({left})"
            if right_prec < _ATOM:
                right = f"({right})"
            return f"{left}^{right}", prec

        if left_prec < prec:
            left = f"({left})"
        if right_prec <= prec:
            right = f"({right})"
        return f"{left} {expr.operator.value} {right}", prec

    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def format_expression(expr: Expression) -> str:
    """
    Render an expression tree as human-readable algebra.

    Args:
        expr: Any FDE expression

    Returns:
        Infix string, e.g. "η * s / (s * (k + η * s))"
    """
    text, _ = _render(expr)
    return text


def format_equation(equation: Equation) -> str:
    """
    Render an equation in time-domain notation.

    Example:
        η * dεdt = k * σ + η * dσdt
    """
    left = fold_time_domain(equation.left_variable, equation.left_terms)
    right = fold_time_domain(equation.right_variable, equation.right_terms)
    return f"{format_expression(left)} = {format_expression(right)}"


__all__ = ["format_expression", "format_equation"]
