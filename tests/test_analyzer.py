"""
Tests for the Equation Analyzer.

Tests verify that the analyzer correctly:
    - Measures expression complexity
    - Inventories parameters and orders
    - Classifies fractional equations
    - Flags suspicious models
"""

from fde.analyzer import analyze_equation, analyze_expression
from fde.builders import build_differential_expression, build_relaxation_modulus
from fde.examples import build_fractional_zener_model, build_maxwell_model
from fde.expressions import Literal, Symbol
from fde.model import Equation


class TestExpressionMetrics:
    """Test metrics for single trees."""

    def test_leaf(self):
        metrics = analyze_expression(Symbol("x"))
        assert metrics.depth == 0
        assert metrics.node_count == 1
        assert metrics.symbols == {"x"}

    def test_literal_has_no_symbols(self):
        assert analyze_expression(Literal(2)).symbols == set()

    def test_maxwell_relaxation_modulus(self):
        """η * s / (s * (k + η * s))"""
        metrics = analyze_expression(build_relaxation_modulus(build_maxwell_model()))
        assert metrics.depth == 4
        assert metrics.node_count == 11
        assert metrics.symbols == {"η", "s", "k"}
        assert metrics.function_calls == 0

    def test_function_calls_are_counted(self):
        expr = build_differential_expression(build_fractional_zener_model())
        assert analyze_expression(expr).function_calls == 4


class TestEquationReport:
    """Test equation inventory."""

    def test_maxwell_model(self):
        report = analyze_equation(build_maxwell_model())
        assert report.left_term_count == 1
        assert report.right_term_count == 2
        assert report.parameters == {"η", "k"}
        assert report.order_parameters == set()
        assert not report.is_fractional
        assert report.max_integer_order == 1
        assert report.left_orders == [Literal(1)]
        assert "Side 'ε' has no order-0 term" in report.warnings

    def test_fractional_zener_model(self):
        report = analyze_equation(build_fractional_zener_model())
        assert report.is_fractional
        assert report.order_parameters == {"α", "β", "γ"}
        assert report.coefficient_parameters == {"cₐ", "cᵦ", "cᵧ"}
        assert report.max_integer_order == 0
        assert len(report.right_orders) == 2

    def test_empty_side_warning(self):
        eq = Equation("x", "y")
        eq.add_term("x", ("a", 0))
        report = analyze_equation(eq)
        assert "Side 'y' has no terms" in report.warnings
        assert report.max_integer_order == 0

    def test_parameter_shadowing_side_variable(self):
        eq = Equation.build(x=("y", 0), y=("b", 0))
        report = analyze_equation(eq)
        assert "Parameter 'y' shadows a side variable" in report.warnings

    def test_analysis_does_not_mutate(self):
        eq = build_maxwell_model()
        before = (eq.left_terms, eq.right_terms)
        analyze_equation(eq)
        assert (eq.left_terms, eq.right_terms) == before
