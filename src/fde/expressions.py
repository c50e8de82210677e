"""
Expression System for FDE

Every coefficient, derivative order and derived modulus is represented
as an Abstract Syntax Tree (AST), never as a string.

This ensures:
    - Structural equality (trees can be compared in tests)
    - Renderer independence (text, DOT, sympy all read the same tree)
    - Serialization capability

ARCHITECTURAL RULE:
    No evaluation, no simplification, no string rendering in this module.
    Those belong in the combinators and backends.
"""

import math
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from numbers import Number
from typing import Tuple, Union


class UnsupportedValueError(TypeError):
    """Raised when a value cannot be used as a coefficient or order."""
    pass


class Expression(ABC):
    """
    Base class for all AST expressions.

    This class is structure only.
    It exists to provide type-safety for the expression hierarchy.
    """
    pass


class Operator(Enum):
    """
    Binary arithmetic operators used in derived expressions.

    Keep this minimal: the builders only ever need these five.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """
    Represents a binary arithmetic expression.

    Example:
        k + η * s

    Becomes:
        BinaryExpression(
            operator=Operator.ADD,
            left=Symbol("k"),
            right=BinaryExpression(
                operator=Operator.MULTIPLY,
                left=Symbol("η"),
                right=Symbol("s"),
            ),
        )

    IMPORTANT:
        This object is immutable (frozen=True).
        Operand order is significant: a - b and b - a are different trees.
    """

    operator: Operator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Symbol(Expression):
    """
    A named, unevaluated quantity.

    Examples:
        - ε, σ   (side variables)
        - η, k   (material parameters)
        - α      (fractional order)
        - dεdt   (synthesized derivative name)
    """

    name: str


@dataclass(frozen=True)
class Literal(Expression):
    """
    Represents a numeric constant.

    Properties:
        value: int, float, Fraction or complex.
            Complex values only appear in frequency-domain output
            (the imaginary unit is Literal(1j)).
    """

    value: Union[int, float, Fraction, complex]


@dataclass(frozen=True)
class FunctionCall(Expression):
    """
    Represents an unevaluated call such as dᵅdtᵅ(ε, α).

    Properties:
        name: Function identifier
        arguments: Positional arguments, in call order
    """

    name: str
    arguments: Tuple[Expression, ...] = ()


IMAGINARY_UNIT = Literal(1j)


def is_real_number(value) -> bool:
    """True for int/float/Fraction values, excluding bool and complex."""
    if isinstance(value, bool) or isinstance(value, complex):
        return False
    return isinstance(value, Number)


def as_expression(value) -> Expression:
    """
    Coerce a raw Python value into an Expression.

    Accepts:
        - Expression instances (returned unchanged)
        - real numbers (int, float, Fraction) -> Literal
        - non-empty strings -> Symbol

    Raises:
        UnsupportedValueError: for anything else (bool, complex, None, ...)
    """
    if isinstance(value, Expression):
        return value
    if is_real_number(value):
        return Literal(value)
    if isinstance(value, str) and value:
        return Symbol(value)
    raise UnsupportedValueError(
        f"Cannot use {value!r} ({type(value).__name__}) as a coefficient or order"
    )


def is_term_value(expr: Expression) -> bool:
    """
    True if expr may stand as a term coefficient or derivative order:
    a real Literal, a Symbol or a BinaryExpression.
    """
    if isinstance(expr, (Symbol, BinaryExpression)):
        return True
    return isinstance(expr, Literal) and is_real_number(expr.value)


def is_integer_literal(expr: Expression) -> bool:
    """True if expr is a finite, integer-valued real Literal (2, 2.0, Fraction(4, 2))."""
    if not isinstance(expr, Literal) or not is_real_number(expr.value):
        return False
    if isinstance(expr.value, float) and not math.isfinite(expr.value):
        return False
    return expr.value == int(expr.value)
