"""Backends for FDE expression output (text, DOT, sympy)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .sympy_converter import are_equivalent, to_sympy
from .text_formatter import format_equation, format_expression

__all__ = [
    "DotMode",
    "generate_dot",
    "save_dot_file",
    "are_equivalent",
    "to_sympy",
    "format_equation",
    "format_expression",
]
