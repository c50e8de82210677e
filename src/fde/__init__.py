"""
Fractional Differential Equation (FDE) Package

Holds linear fractional-order differential equations as structured data
and derives symbolic expressions from them:

    - the time-domain governing equation (as a residual)
    - the relaxation modulus
    - the creep compliance
    - the complex dynamic modulus

ARCHITECTURAL GUARANTEE:
------------------------
The core (expressions, model, rewrites, builders) contains ZERO knowledge of:
    - text or diagram rendering
    - sympy or any other computer algebra system
    - numeric evaluation of fractional derivatives

All rendering happens in fde.backends.
"""

from .builders import (
    EmptySideError,
    build_creep_compliance,
    build_differential_expression,
    build_dynamic_modulus,
    build_relaxation_modulus,
)
from .model import Equation, EquationError, Term, UnknownSideError

__version__ = "0.1.0"

__all__ = [
    "Equation",
    "EquationError",
    "Term",
    "UnknownSideError",
    "EmptySideError",
    "build_creep_compliance",
    "build_differential_expression",
    "build_dynamic_modulus",
    "build_relaxation_modulus",
]
