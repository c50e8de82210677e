"""
Equation Analyzer: inventory and diagnostics of FDE equations.

This module provides lightweight analysis of Equation objects:
    - Parameter inventory (names used in coefficients and orders)
    - Derivative order inventory per side
    - Fractional vs. integer-order classification
    - Expression complexity metrics
    - Warning flags for suspicious models

IMPORTANT: This module does NOT modify the equation.
It only produces read-only reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from fde.expressions import BinaryExpression, Expression, FunctionCall, Literal, Symbol, is_integer_literal
from fde.model import Equation, Term


@dataclass
class ExpressionMetrics:
    """Metrics about a single expression tree."""
    depth: int = 0
    node_count: int = 0
    symbols: Set[str] = field(default_factory=set)
    function_calls: int = 0

    def add(self, other: ExpressionMetrics) -> None:
        self.depth = max(self.depth, other.depth)
        self.node_count += other.node_count
        self.symbols.update(other.symbols)
        self.function_calls += other.function_calls


def analyze_expression(expr: Expression) -> ExpressionMetrics:
    """Recursively analyze an expression tree."""
    metrics = ExpressionMetrics(node_count=1)

    if isinstance(expr, BinaryExpression):
        children = [expr.left, expr.right]
    elif isinstance(expr, FunctionCall):
        metrics.function_calls = 1
        children = list(expr.arguments)
    elif isinstance(expr, Symbol):
        metrics.symbols.add(expr.name)
        children = []
    elif isinstance(expr, Literal):
        children = []
    else:
        raise TypeError(f"Unsupported Expression type: {type(expr)}")

    if children:
        combined = ExpressionMetrics()
        for child in children:
            combined.add(analyze_expression(child))
        metrics.depth = 1 + combined.depth
        metrics.node_count += combined.node_count
        metrics.symbols.update(combined.symbols)
        metrics.function_calls += combined.function_calls

    return metrics


def _integer_order(order: Expression) -> Optional[int]:
    if is_integer_literal(order):
        return int(order.value)
    return None


@dataclass
class EquationReport:
    """Analysis report for an equation."""

    left_variable: str
    right_variable: str
    left_term_count: int = 0
    right_term_count: int = 0

    # Parameter inventory
    parameters: Set[str] = field(default_factory=set)
    coefficient_parameters: Set[str] = field(default_factory=set)
    order_parameters: Set[str] = field(default_factory=set)

    # Orders, in insertion order
    left_orders: List[Expression] = field(default_factory=list)
    right_orders: List[Expression] = field(default_factory=list)

    is_fractional: bool = False
    max_integer_order: Optional[int] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _inventory_side(report: EquationReport, variable: str, terms: Tuple[Term, ...],
                    orders: List[Expression]) -> None:
    if not terms:
        report.add_warning(f"Side {variable!r} has no terms")
        return

    has_bare_term = False
    for term in terms:
        orders.append(term.order)
        report.coefficient_parameters.update(analyze_expression(term.coefficient).symbols)
        report.order_parameters.update(analyze_expression(term.order).symbols)

        n = _integer_order(term.order)
        if n is None:
            report.is_fractional = True
            continue
        if n == 0:
            has_bare_term = True
        if report.max_integer_order is None or n > report.max_integer_order:
            report.max_integer_order = n

    if not has_bare_term:
        report.add_warning(f"Side {variable!r} has no order-0 term")


def analyze_equation(equation: Equation) -> EquationReport:
    """
    Perform analysis of an Equation.

    Checks for:
        - Empty sides
        - Sides without a bare (order-0) term
        - Parameters whose name shadows a side variable

    Returns an EquationReport with inventory and warnings.
    """
    report = EquationReport(
        left_variable=equation.left_variable,
        right_variable=equation.right_variable,
        left_term_count=len(equation.left_terms),
        right_term_count=len(equation.right_terms),
    )

    _inventory_side(report, equation.left_variable, equation.left_terms, report.left_orders)
    _inventory_side(report, equation.right_variable, equation.right_terms, report.right_orders)

    report.parameters = report.coefficient_parameters | report.order_parameters

    for variable in (equation.left_variable, equation.right_variable):
        if variable in report.parameters:
            report.add_warning(f"Parameter {variable!r} shadows a side variable")

    return report
