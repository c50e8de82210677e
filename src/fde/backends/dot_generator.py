"""
Graphviz DOT diagram generator for FDE expression trees.

Converts an expression tree into Graphviz DOT format for visualization.
One node per tree node, one edge per operand, operands left to right.

Supports two modes:
    - SIMPLE: Operator, function or leaf label only
    - DETAILED: Also shows the rendered sub-expression under each operator
"""

from enum import Enum
from typing import List

from fde.backends.text_formatter import format_expression
from fde.expressions import (
    BinaryExpression,
    Expression,
    FunctionCall,
    Literal,
    Symbol,
)


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_label(expr: Expression) -> str:
    if isinstance(expr, BinaryExpression):
        return expr.operator.value
    if isinstance(expr, FunctionCall):
        return expr.name
    if isinstance(expr, (Symbol, Literal)):
        return format_expression(expr)
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def _children(expr: Expression) -> List[Expression]:
    if isinstance(expr, BinaryExpression):
        return [expr.left, expr.right]
    if isinstance(expr, FunctionCall):
        return list(expr.arguments)
    return []


def generate_dot(expr: Expression, name: str = "expression", mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for an expression tree.

    Args:
        expr: Expression to visualize
        name: Graph name
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines = []

    lines.append(f"digraph {_escape_dot_string(name)} {{")
    lines.append("  rankdir=TB;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    # Walk the tree iteratively; node ids follow pre-order
    stack = [(expr, None)]
    counter = 0
    while stack:
        node, parent_id = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        label = _node_label(node)
        attrs = [f"label={_escape_dot_string(label)}"]
        children = _children(node)
        if not children:
            attrs.append("shape=ellipse")
            attrs.append("fillcolor=lightgreen")
        elif mode == DotMode.DETAILED:
            attrs.append(f"xlabel={_escape_dot_string(format_expression(node))}")
        lines.append(f"  {node_id} [{', '.join(attrs)}];")

        if parent_id is not None:
            lines.append(f"  {parent_id} -> {node_id};")

        # Reversed so the first operand is popped (and numbered) first
        for child in reversed(children):
            stack.append((child, node_id))

    lines.append("}")

    return "\n".join(lines)


def save_dot_file(expr: Expression, filename: str, name: str = "expression",
                  mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        expr: Expression to visualize
        filename: Output file path (.dot extension recommended)
        name: Graph name
        mode: Visualization mode
    """
    dot = generate_dot(expr, name=name, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
