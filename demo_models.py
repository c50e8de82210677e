#!/usr/bin/env python3
"""
Demo: derive the four response expressions of two viscoelastic models.

For the Maxwell and fractional Zener models, prints the equation, the
governing equation residual, the relaxation modulus, the creep compliance
and the dynamic modulus.
"""

from fde.analyzer import analyze_equation
from fde.backends import format_equation, format_expression
from fde.builders import (
    build_creep_compliance,
    build_differential_expression,
    build_dynamic_modulus,
    build_relaxation_modulus,
)
from fde.examples import build_fractional_zener_model, build_maxwell_model


def main():
    models = [
        ("Maxwell model", build_maxwell_model()),
        ("Fract Zener model", build_fractional_zener_model()),
    ]

    for title, equation in models:
        print("=" * 80)
        print(title)
        print("=" * 80)
        print(format_equation(equation))

        report = analyze_equation(equation)
        kind = "fractional" if report.is_fractional else "integer order"
        print(f"({kind}, parameters: {', '.join(sorted(report.parameters))})")

        print("\nDifferential equation (cost function)")
        print(format_expression(build_differential_expression(equation)))
        print("Relaxation modulus")
        print(format_expression(build_relaxation_modulus(equation)))
        print("Creep compliance")
        print(format_expression(build_creep_compliance(equation)))
        print("Dynamic modulus")
        print(format_expression(build_dynamic_modulus(equation)))
        print()


if __name__ == "__main__":
    main()
