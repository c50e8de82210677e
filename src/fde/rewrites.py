"""
Per-term rewrite rules.

Two alternative encodings of a term's derivative order:

    time_derivative   d^order(v)/dt^order in time-domain notation
    laplace_power     (transform variable)^order in the Laplace or
                      frequency domain

A derivative of non-integer or symbolic order has no closed name in the
time domain, so time_derivative hands it to a DerivativeOperator. The
default operator only builds an unevaluated call node; callers that can
represent the derivative some other way inject their own.
"""

from typing import Callable, Union

from fde.combinators import is_one, is_zero, power_of
from fde.expressions import (
    IMAGINARY_UNIT,
    BinaryExpression,
    Expression,
    FunctionCall,
    Literal,
    Operator,
    Symbol,
    as_expression,
    is_integer_literal,
    is_term_value,
)


class UnsupportedOrderError(TypeError):
    """Raised when a derivative order is not a real number, a name or a sub-expression."""
    pass


FRACTIONAL_DERIVATIVE_NAME = "dᵅdtᵅ"

LAPLACE_VARIABLE = Symbol("s")

# i·ω
FREQUENCY_VARIABLE = BinaryExpression(Operator.MULTIPLY, IMAGINARY_UNIT, Symbol("ω"))

DerivativeOperator = Callable[[Symbol, Expression], Expression]


def symbolic_fractional_derivative(variable: Symbol, order: Expression) -> Expression:
    """Default derivative operator: an unevaluated dᵅdtᵅ(variable, order) call."""
    return FunctionCall(FRACTIONAL_DERIVATIVE_NAME, (variable, order))


def _check_order(order) -> Expression:
    try:
        order = as_expression(order)
    except TypeError as e:
        raise UnsupportedOrderError(str(e)) from e
    if is_term_value(order):
        return order
    raise UnsupportedOrderError(f"Unsupported derivative order: {order!r}")


def derivative_name(variable: str, order: int) -> str:
    """Conventional name of an integer derivative: dxdt, d2xdt2, ..."""
    if order == 1:
        return f"d{variable}dt"
    return f"d{order}{variable}dt{order}"


def time_derivative(
    variable: Union[str, Symbol],
    order,
    derivative: DerivativeOperator = symbolic_fractional_derivative,
) -> Expression:
    """
    Rewrite d^order(variable)/dt^order as an expression.

    Args:
        variable: Side variable name (a str or a Symbol)
        order: Derivative order (number, name or sub-expression)
        derivative: Operator used for non-integer and symbolic orders

    Returns:
        - order 0: the bare variable
        - integer order n: a synthesized name (dxdt, d2xdt2, ...)
        - otherwise: derivative(Symbol(variable), order)

    Raises:
        UnsupportedOrderError: if order has an unsupported shape
        TypeError: if variable is not a name
    """
    if isinstance(variable, Symbol):
        variable = variable.name
    if not isinstance(variable, str) or not variable:
        raise TypeError(f"Side variable must be a non-empty name, got {variable!r}")
    order = _check_order(order)
    if is_zero(order):
        return Symbol(variable)
    if is_integer_literal(order):
        return Symbol(derivative_name(variable, int(order.value)))
    return derivative(Symbol(variable), order)


def laplace_power(order, transform: Expression = LAPLACE_VARIABLE) -> Expression:
    """
    Rewrite a derivative order as a power of the transform variable.

    Args:
        order: Derivative order (number, name or sub-expression)
        transform: Laplace variable s by default; FREQUENCY_VARIABLE for
            the harmonic response

    Returns:
        - order 0: the literal 1
        - order 1: the transform variable itself
        - otherwise: transform ^ order (fractional powers included)
    """
    order = _check_order(order)
    transform = as_expression(transform)
    if is_zero(order):
        return Literal(1)
    if is_one(order):
        return transform
    return power_of(transform, order)
