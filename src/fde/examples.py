"""
Example viscoelastic models.

Builds the two reference constitutive laws, strain ε on the left and
stress σ on the right:

    Maxwell:            η dε/dt = k σ + η dσ/dt
    Fractional Zener:   cₐ D^α ε + cᵧ D^γ ε + (cₐ cᵧ / cᵦ) D^(α+γ-β) ε
                            = σ + (cₐ / cᵦ) D^(α-β) σ
"""
from fde.combinators import difference_of, product_of, quotient_of, sum_of
from fde.expressions import Symbol
from fde.model import Equation, Term


STRAIN = "ε"
STRESS = "σ"


def build_maxwell_model() -> Equation:
    return Equation.build(ε=("η", 1), σ=(("k", 0), ("η", 1)))


def build_fractional_zener_model() -> Equation:
    c_a, c_g, c_b = Symbol("cₐ"), Symbol("cᵧ"), Symbol("cᵦ")
    alpha, beta, gamma = Symbol("α"), Symbol("β"), Symbol("γ")

    equation = Equation(STRAIN, STRESS)
    equation.add_terms(STRAIN, (
        Term(c_a, alpha),
        Term(c_g, gamma),
        Term(quotient_of(product_of(c_a, c_g), c_b), difference_of(sum_of(alpha, gamma), beta)),
    ))
    equation.add_terms(STRESS, (
        Term(1, 0),
        Term(quotient_of(c_a, c_b), difference_of(alpha, beta)),
    ))
    return equation
