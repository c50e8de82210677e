"""
Tests for serialization and deserialization of FDE objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `fde.serialization`.
"""

from fractions import Fraction

import pytest
from fde.builders import build_differential_expression, build_dynamic_modulus
from fde.examples import build_fractional_zener_model, build_maxwell_model
from fde.expressions import Literal
from fde.model import Equation, Term
from fde.serialization import (
    equation_from_dict,
    equation_from_json,
    equation_from_yaml,
    equation_to_dict,
    equation_to_json,
    equation_to_yaml,
    expr_from_dict,
    expr_from_json,
    expr_to_dict,
    expr_to_json,
)


def test_equation_dict_layout():
    d = equation_to_dict(build_maxwell_model())
    assert d["left_variable"] == "ε"
    assert d["right_variable"] == "σ"
    assert d["left_terms"] == [
        {"coefficient": {"type": "sym", "name": "η"}, "order": {"type": "lit", "value": 1}},
    ]
    assert len(d["right_terms"]) == 2


def test_json_roundtrip():
    eq = build_fractional_zener_model()
    restored = equation_from_json(equation_to_json(eq))
    assert restored == eq


def test_yaml_roundtrip():
    eq = build_fractional_zener_model()
    restored = equation_from_yaml(equation_to_yaml(eq))
    assert restored == eq


def test_term_order_is_preserved():
    eq = Equation("x", "y")
    eq.add_terms("x", (("c", 2), ("a", 0), ("b", Fraction(1, 2))))
    eq.add_term("y", ("d", 0))
    restored = equation_from_json(equation_to_json(eq))
    assert restored.left_terms == (Term("c", 2), Term("a", 0), Term("b", Fraction(1, 2)))


def test_reordered_document_loads_as_equal_equation():
    eq = build_maxwell_model()
    d = equation_to_dict(eq)
    d["right_terms"].reverse()
    restored = equation_from_dict(d)
    assert restored == eq
    assert restored.right_terms == tuple(reversed(eq.right_terms))


def test_expression_with_complex_and_calls():
    """Builder output holds the imaginary unit and derivative calls."""
    for expr in (
        build_dynamic_modulus(build_maxwell_model()),
        build_differential_expression(build_fractional_zener_model()),
    ):
        assert expr_from_json(expr_to_json(expr)) == expr


def test_literal_encodings():
    assert expr_to_dict(Literal(1j)) == {"type": "complex", "real": 0.0, "imag": 1.0}
    assert expr_to_dict(Literal(Fraction(1, 3))) == {"type": "fraction", "numerator": 1, "denominator": 3}


def test_unknown_dict_type():
    with pytest.raises(TypeError):
        expr_from_dict({"type": "matrix"})
