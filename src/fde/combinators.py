"""
Expression combinators.

Small constructors used to fold terms into larger trees. They know nothing
about terms or equations.

The only simplification performed anywhere in the package lives in
product_of: a factor equal to the literal 1 is dropped. Everything else
builds the node exactly as asked.
"""

from fde.expressions import (
    BinaryExpression,
    Expression,
    Literal,
    Operator,
    as_expression,
    is_real_number,
)


def is_one(expr: Expression) -> bool:
    """True if expr is the real numeric literal 1 (1, 1.0, Fraction(1))."""
    return isinstance(expr, Literal) and is_real_number(expr.value) and expr.value == 1


def is_zero(expr: Expression) -> bool:
    """True if expr is the real numeric literal 0."""
    return isinstance(expr, Literal) and is_real_number(expr.value) and expr.value == 0


def sum_of(a, b) -> Expression:
    """a + b"""
    return BinaryExpression(Operator.ADD, as_expression(a), as_expression(b))


def product_of(a, b) -> Expression:
    """
    a * b, dropping a factor equal to the literal 1.

    a is checked first, so product_of(1, 1) returns the second operand.
    """
    a = as_expression(a)
    b = as_expression(b)
    if is_one(a):
        return b
    if is_one(b):
        return a
    return BinaryExpression(Operator.MULTIPLY, a, b)


def difference_of(a, b) -> Expression:
    """a - b"""
    return BinaryExpression(Operator.SUBTRACT, as_expression(a), as_expression(b))


def quotient_of(a, b) -> Expression:
    """a / b"""
    return BinaryExpression(Operator.DIVIDE, as_expression(a), as_expression(b))


def power_of(base, exponent) -> Expression:
    """base ^ exponent"""
    return BinaryExpression(Operator.POWER, as_expression(base), as_expression(exponent))
