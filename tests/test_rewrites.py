"""
Tests for the per-term rewrite rules.

These tests verify:
    - Time-derivative naming for integer orders
    - Delegation of fractional and symbolic orders to the derivative operator
    - Laplace powers, including the i·ω frequency variable
    - Rejection of unsupported order shapes
"""

from fractions import Fraction

import pytest
from fde.expressions import (
    IMAGINARY_UNIT,
    BinaryExpression,
    FunctionCall,
    Literal,
    Operator,
    Symbol,
)
from fde.rewrites import (
    FRACTIONAL_DERIVATIVE_NAME,
    FREQUENCY_VARIABLE,
    LAPLACE_VARIABLE,
    UnsupportedOrderError,
    derivative_name,
    laplace_power,
    symbolic_fractional_derivative,
    time_derivative,
)


class TestTimeDerivative:
    """Test time-domain rewriting."""

    @pytest.mark.parametrize("variable", ["x", "ε", "σ"])
    def test_zeroth_order_is_the_variable(self, variable):
        assert time_derivative(variable, 0) == Symbol(variable)

    def test_zeroth_order_float(self):
        assert time_derivative("x", 0.0) == Symbol("x")

    def test_first_order_name(self):
        assert time_derivative("x", 1) == Symbol("dxdt")
        assert time_derivative("ε", 1.0) == Symbol("dεdt")

    def test_higher_integer_order_name(self):
        """No one-element grouping: a plain name."""
        assert time_derivative("x", 2) == Symbol("d2xdt2")
        assert time_derivative("x", 3.0) == Symbol("d3xdt3")

    def test_negative_integer_order_name(self):
        assert time_derivative("x", -1) == Symbol("d-1xdt-1")

    def test_non_integer_order_uses_operator(self):
        assert time_derivative("x", 0.5) == FunctionCall(
            FRACTIONAL_DERIVATIVE_NAME, (Symbol("x"), Literal(0.5))
        )
        assert time_derivative("x", Fraction(1, 2)) == FunctionCall(
            FRACTIONAL_DERIVATIVE_NAME, (Symbol("x"), Literal(Fraction(1, 2)))
        )

    def test_symbolic_order_uses_operator(self):
        order = BinaryExpression(Operator.SUBTRACT, Symbol("α"), Symbol("β"))
        assert time_derivative("σ", order) == symbolic_fractional_derivative(Symbol("σ"), order)
        assert time_derivative("σ", "α") == FunctionCall(
            FRACTIONAL_DERIVATIVE_NAME, (Symbol("σ"), Symbol("α"))
        )

    def test_injected_operator(self):
        """A caller-supplied operator replaces the default call node."""
        calls = []

        def caputo(variable, order):
            calls.append((variable, order))
            return Symbol(f"D[{variable.name}]")

        assert time_derivative("x", "α", derivative=caputo) == Symbol("D[x]")
        assert calls == [(Symbol("x"), Symbol("α"))]

    def test_injected_operator_not_used_for_integer_orders(self):
        def fail(variable, order):
            raise AssertionError("should not be called")

        assert time_derivative("x", 1, derivative=fail) == Symbol("dxdt")

    @pytest.mark.parametrize("order", [1j, True, None, Literal(1j), FunctionCall("f", ())])
    def test_unsupported_order(self, order):
        with pytest.raises(UnsupportedOrderError):
            time_derivative("x", order)

    def test_symbol_variable_is_taken_by_name(self):
        """A Symbol variable should rewrite the same as its name."""
        assert time_derivative(Symbol("x"), 0) == Symbol("x")
        assert time_derivative(Symbol("x"), 1) == Symbol("dxdt")
        assert time_derivative(Symbol("x"), "α") == FunctionCall(
            FRACTIONAL_DERIVATIVE_NAME, (Symbol("x"), Symbol("α"))
        )

    @pytest.mark.parametrize("variable", [3, "", None, Literal(1)])
    def test_rejects_non_name_variable(self, variable):
        with pytest.raises(TypeError):
            time_derivative(variable, 1)

    def test_derivative_name(self):
        assert derivative_name("x", 1) == "dxdt"
        assert derivative_name("x", 4) == "d4xdt4"


class TestLaplacePower:
    """Test Laplace/frequency rewriting."""

    @pytest.mark.parametrize("transform", [LAPLACE_VARIABLE, FREQUENCY_VARIABLE, Symbol("p")])
    def test_zeroth_order_is_one(self, transform):
        assert laplace_power(0, transform) == Literal(1)

    @pytest.mark.parametrize("transform", [LAPLACE_VARIABLE, FREQUENCY_VARIABLE, Symbol("p")])
    def test_first_order_is_transform(self, transform):
        assert laplace_power(1, transform) is transform

    def test_default_transform_is_s(self):
        assert laplace_power(1) == Symbol("s")

    def test_integer_power(self):
        assert laplace_power(2) == BinaryExpression(Operator.POWER, Symbol("s"), Literal(2))

    def test_fractional_power_needs_no_placeholder(self):
        assert laplace_power(0.5) == BinaryExpression(Operator.POWER, Symbol("s"), Literal(0.5))
        assert laplace_power("α") == BinaryExpression(Operator.POWER, Symbol("s"), Symbol("α"))

    def test_frequency_variable_is_i_omega(self):
        assert FREQUENCY_VARIABLE == BinaryExpression(Operator.MULTIPLY, IMAGINARY_UNIT, Symbol("ω"))
        assert laplace_power("α", FREQUENCY_VARIABLE) == BinaryExpression(
            Operator.POWER, FREQUENCY_VARIABLE, Symbol("α")
        )

    def test_string_transform_is_coerced(self):
        assert laplace_power(1, "p") == Symbol("p")

    def test_unsupported_order(self):
        with pytest.raises(UnsupportedOrderError):
            laplace_power(2j)
