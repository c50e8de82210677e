"""
Serialization helpers for FDE objects (Equation, Term, Expression).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from fractions import Fraction
from typing import Any, Dict

import yaml

from fde.model import Equation, Term
from fde.expressions import (
    Expression,
    BinaryExpression,
    FunctionCall,
    Literal,
    Operator,
    Symbol,
)


def _literal_to_dict(value: Any) -> Dict[str, Any]:
    if isinstance(value, complex):
        return {"type": "complex", "real": value.real, "imag": value.imag}
    if isinstance(value, Fraction):
        return {"type": "fraction", "numerator": value.numerator, "denominator": value.denominator}
    return {"type": "lit", "value": value}


def expr_to_dict(expr: Expression) -> Dict[str, Any]:
    if isinstance(expr, BinaryExpression):
        return {
            "type": "binary",
            "operator": expr.operator.value,
            "left": expr_to_dict(expr.left),
            "right": expr_to_dict(expr.right),
        }
    if isinstance(expr, Symbol):
        return {"type": "sym", "name": expr.name}
    if isinstance(expr, Literal):
        return _literal_to_dict(expr.value)
    if isinstance(expr, FunctionCall):
        return {
            "type": "call",
            "name": expr.name,
            "arguments": [expr_to_dict(arg) for arg in expr.arguments],
        }
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def expr_from_dict(d: Dict[str, Any]) -> Expression:
    t = d.get("type")
    if t == "binary":
        op = Operator(d["operator"])
        left = expr_from_dict(d["left"])
        right = expr_from_dict(d["right"])
        return BinaryExpression(operator=op, left=left, right=right)
    if t == "sym":
        return Symbol(d["name"])
    if t == "lit":
        return Literal(d["value"])
    if t == "fraction":
        return Literal(Fraction(d["numerator"], d["denominator"]))
    if t == "complex":
        return Literal(complex(d["real"], d["imag"]))
    if t == "call":
        return FunctionCall(d["name"], tuple(expr_from_dict(arg) for arg in d.get("arguments", [])))
    raise TypeError(f"Unsupported expression dict type: {t}")


def term_to_dict(t: Term) -> Dict[str, Any]:
    return {"coefficient": expr_to_dict(t.coefficient), "order": expr_to_dict(t.order)}


def term_from_dict(d: Dict[str, Any]) -> Term:
    return Term(coefficient=expr_from_dict(d["coefficient"]), order=expr_from_dict(d["order"]))


def equation_to_dict(e: Equation) -> Dict[str, Any]:
    return {
        "left_variable": e.left_variable,
        "right_variable": e.right_variable,
        "left_terms": [term_to_dict(t) for t in e.left_terms],
        "right_terms": [term_to_dict(t) for t in e.right_terms],
    }


def equation_from_dict(d: Dict[str, Any]) -> Equation:
    e = Equation(left_variable=d["left_variable"], right_variable=d["right_variable"])
    e.add_terms(e.left_variable, [term_from_dict(t) for t in d.get("left_terms", [])])
    e.add_terms(e.right_variable, [term_from_dict(t) for t in d.get("right_terms", [])])
    return e


def equation_to_json(e: Equation) -> str:
    return json.dumps(equation_to_dict(e), sort_keys=True, ensure_ascii=False)


def equation_from_json(s: str) -> Equation:
    d = json.loads(s)
    return equation_from_dict(d)


def equation_to_yaml(e: Equation) -> str:
    return yaml.safe_dump(equation_to_dict(e), allow_unicode=True)


def equation_from_yaml(s: str) -> Equation:
    d = yaml.safe_load(s)
    return equation_from_dict(d)


def expr_to_json(expr: Expression) -> str:
    return json.dumps(expr_to_dict(expr), sort_keys=True, ensure_ascii=False)


def expr_from_json(s: str) -> Expression:
    return expr_from_dict(json.loads(s))
