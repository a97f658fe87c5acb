"""Symbolic helpers for building finite-element shape functions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import sympy

__all__ = [
    "make_variables",
    "generate_lagrangian_function",
    "generate_lagrangian_basis",
    "basis_production",
    "derivative",
    "simplify",
    "to_function",
]


def make_variables(n: int) -> tuple[sympy.Symbol, ...]:
    """Create ``n`` independent real symbols ``x0 .. x{n-1}``."""
    if n < 0:
        raise ValueError(f"Number of variables must be non-negative: {n}")
    return tuple(sympy.Symbol(f"x{i}", real=True) for i in range(n))


def generate_lagrangian_function(variable: sympy.Symbol, k: int, nodes: Sequence[Any]) -> sympy.Expr:
    """Lagrange polynomial equal to 1 at ``nodes[k]`` and 0 at every other node."""
    if not nodes:
        raise ValueError("The number of nodes must be greater than 0")
    if not 0 <= k < len(nodes):
        raise IndexError(f"Node index {k} out of range for {len(nodes)} nodes")
    points = [sympy.sympify(node) for node in nodes]
    node_k = points[k]
    return sympy.Mul(
        *((variable - node) / (node_k - node) for i, node in enumerate(points) if i != k)
    )


def generate_lagrangian_basis(variable: sympy.Symbol, nodes: Sequence[Any]) -> tuple[sympy.Expr, ...]:
    """All Lagrange polynomials over ``nodes``."""
    return tuple(generate_lagrangian_function(variable, k, nodes) for k in range(len(nodes)))


def _product(first: Sequence[Any], second: Sequence[Any]) -> tuple[Any, ...]:
    return tuple(e * f for e in first for f in second)


def basis_production(first: Sequence[Any], *args: Sequence[Any]) -> tuple[Any, ...]:
    """Tensor product of bases; the first basis varies slowest."""
    if not args:
        return tuple(first)
    return _product(first, basis_production(*args))


def derivative(expression: Any, *args: sympy.Symbol) -> Any:
    """Differentiate by each variable in turn; tuples are differentiated element-wise."""
    if not args:
        raise ValueError("At least one differentiation variable is required")
    if isinstance(expression, (tuple, list)):
        return tuple(derivative(item, *args) for item in expression)
    result = sympy.sympify(expression)
    for variable in args:
        result = sympy.diff(result, variable)
    return result


def simplify(expressions: Sequence[Any]) -> tuple[Any, ...]:
    """Simplified copy of a tuple of expressions."""
    return tuple(sympy.simplify(sympy.sympify(item)) for item in expressions)


def _single_function(expression: Any, variables: tuple[sympy.Symbol, ...]) -> Callable[[Sequence[float]], float]:
    compiled = sympy.lambdify(variables, sympy.sympify(expression), modules="math")
    count = len(variables)

    def evaluate(x: Sequence[float]) -> float:
        if len(x) != count:
            raise ValueError(f"Expected a point of dimension {count}, got {len(x)}")
        return float(compiled(*x))

    return evaluate


def to_function(expressions: Any, variables: Sequence[sympy.Symbol]):
    """Compile an expression, or a tuple of them, into callables taking a point."""
    symbols = tuple(variables)
    if isinstance(expressions, (tuple, list)):
        return tuple(_single_function(item, symbols) for item in expressions)
    return _single_function(expressions, symbols)