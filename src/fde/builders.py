"""
Equation builders.

Folds each side of an Equation into a single expression with one of the
rewrite rules, then composes the two sides:

    build_differential_expression   left - right           (time domain)
    build_relaxation_modulus        left / (s * right)     (Laplace)
    build_creep_compliance          right / (s * left)     (Laplace)
    build_dynamic_modulus           left / right           (s = i·ω)

IMPORTANT: Builders are pure. They never mutate the Equation or its
term tuples.
"""

from typing import Callable, Iterable

from fde.combinators import difference_of, product_of, quotient_of, sum_of
from fde.expressions import BinaryExpression, Expression, Operator
from fde.model import Equation, Term
from fde.rewrites import (
    FREQUENCY_VARIABLE,
    LAPLACE_VARIABLE,
    DerivativeOperator,
    laplace_power,
    symbolic_fractional_derivative,
    time_derivative,
)


class EmptySideError(ValueError):
    """Raised when an expression is requested for a side with no terms."""
    pass


def fold_terms(terms: Iterable[Term], rewrite: Callable[[Expression], Expression]) -> Expression:
    """
    Sum coefficient * rewrite(order) over terms.

    The first term seeds the fold; the rest are added left to right in
    iteration order.

    Raises:
        EmptySideError: if terms is empty
    """
    terms = tuple(terms)
    if not terms:
        raise EmptySideError("Cannot build an expression from an empty term set")
    first, rest = terms[0], terms[1:]
    expr = product_of(first.coefficient, rewrite(first.order))
    for term in rest:
        expr = sum_of(expr, product_of(term.coefficient, rewrite(term.order)))
    return expr


def fold_time_domain(
    variable: str,
    terms: Iterable[Term],
    derivative: DerivativeOperator = symbolic_fractional_derivative,
) -> Expression:
    """Fold one side in time-derivative notation."""
    return fold_terms(terms, lambda order: time_derivative(variable, order, derivative))


def fold_laplace(terms: Iterable[Term], transform: Expression = LAPLACE_VARIABLE) -> Expression:
    """Fold one side as powers of the transform variable."""
    return fold_terms(terms, lambda order: laplace_power(order, transform))


def build_differential_expression(
    equation: Equation,
    derivative: DerivativeOperator = symbolic_fractional_derivative,
) -> Expression:
    """
    Governing equation as a residual: left - right.

    Substituting a true solution makes this expression zero, so it can be
    used directly as a cost function.
    """
    left = fold_time_domain(equation.left_variable, equation.left_terms, derivative)
    right = fold_time_domain(equation.right_variable, equation.right_terms, derivative)
    return difference_of(left, right)


def build_relaxation_modulus(equation: Equation) -> Expression:
    """Relaxation modulus in the Laplace domain: left / (s * right)."""
    left = fold_laplace(equation.left_terms)
    right = fold_laplace(equation.right_terms)
    return quotient_of(left, BinaryExpression(Operator.MULTIPLY, LAPLACE_VARIABLE, right))


def build_creep_compliance(equation: Equation) -> Expression:
    """Creep compliance in the Laplace domain: right / (s * left)."""
    left = fold_laplace(equation.left_terms)
    right = fold_laplace(equation.right_terms)
    return quotient_of(right, BinaryExpression(Operator.MULTIPLY, LAPLACE_VARIABLE, left))


def build_dynamic_modulus(equation: Equation) -> Expression:
    """Complex dynamic modulus: left / right evaluated at s = i·ω."""
    left = fold_laplace(equation.left_terms, FREQUENCY_VARIABLE)
    right = fold_laplace(equation.right_terms, FREQUENCY_VARIABLE)
    return quotient_of(left, right)
