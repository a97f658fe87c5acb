"""Shape-function bases of two-dimensional finite elements.

Triangles use the reference triangle with vertices (1, 0), (0, 1), (0, 0).
Rectangles use the reference square [-1, 1] x [-1, 1].
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any, Callable

import sympy

from .symbolic import (
    basis_production,
    derivative as _derivative,
    generate_lagrangian_basis,
    make_variables,
    to_function,
)

__all__ = [
    "Geometry",
    "Element2DBasis",
    "barycentric_coordinates",
    "triangle_basis",
    "serendipity_basis",
    "lagrangian_basis_2d",
]

X, Y = make_variables(2)
_P = sympy.Symbol("p", real=True)
_R = sympy.Rational


class Geometry(enum.Enum):
    """Shape of the reference element."""

    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"


class Element2DBasis:
    """Nodes of a reference element together with its shape functions."""

    variables = (X, Y)

    def __init__(
        self,
        geometry: Geometry,
        nodes: Sequence[Sequence[Any]],
        basis: Sequence[Any],
        parameter: Any = None,
    ) -> None:
        self.geometry = geometry
        self.nodes = tuple((sympy.sympify(x), sympy.sympify(y)) for x, y in nodes)
        self.basis = tuple(sympy.sympify(item) for item in basis)
        self.parameter = None if parameter is None else sympy.sympify(parameter)
        if len(self.nodes) != len(self.basis):
            raise ValueError(
                f"Nodes count {len(self.nodes)} does not match "
                f"basis functions count {len(self.basis)}"
            )
        self._functions: tuple[Callable[[Sequence[float]], float], ...] | None = None

    def nodes_count(self) -> int:
        return len(self.basis)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.nodes_count():
            raise IndexError(f"Basis function index {i} out of range")

    def evaluate(self, i: int, point: Sequence[float]) -> float:
        """Value of shape function ``i`` at ``point``."""
        self._check_index(i)
        if self._functions is None:
            self._functions = to_function(self.basis, self.variables)
        return self._functions[i](point)

    def derivative(self, i: int, variable_index: int) -> sympy.Expr:
        """Partial derivative of shape function ``i`` by x (0) or y (1)."""
        self._check_index(i)
        if variable_index not in (0, 1):
            raise ValueError(f"Variable index must be 0 or 1, got {variable_index}")
        return _derivative(self.basis[i], self.variables[variable_index])


def barycentric_coordinates() -> tuple[sympy.Expr, sympy.Expr, sympy.Expr]:
    """Barycentric coordinates L1, L2, L3 of the reference triangle."""
    return X, Y, 1 - X - Y


def triangle_basis(order: int) -> Element2DBasis:
    """Lagrangian triangle of order 0 to 3."""
    l1, l2, l3 = barycentric_coordinates()
    third, two_thirds, half = _R(1, 3), _R(2, 3), _R(1, 2)
    if order == 0:
        nodes = [(third, third)]
        basis = [sympy.Integer(1)]
    elif order == 1:
        nodes = [(1, 0), (0, 1), (0, 0)]
        basis = [l1, l2, l3]
    elif order == 2:
        nodes = [(1, 0), (0, 1), (0, 0), (half, half), (0, half), (half, 0)]
        basis = [
            l1 * (2 * l1 - 1),
            l2 * (2 * l2 - 1),
            l3 * (2 * l3 - 1),
            4 * l1 * l2,
            4 * l2 * l3,
            4 * l3 * l1,
        ]
    elif order == 3:
        nodes = [
            (1, 0), (0, 1), (0, 0),
            (two_thirds, third), (third, two_thirds),
            (0, two_thirds), (0, third),
            (third, 0), (two_thirds, 0),
            (third, third),
        ]
        basis = [
            l1 * (3 * l1 - 1) * (3 * l1 - 2) / 2,
            l2 * (3 * l2 - 1) * (3 * l2 - 2) / 2,
            l3 * (3 * l3 - 1) * (3 * l3 - 2) / 2,
            9 * l1 * l2 * (3 * l1 - 1) / 2,
            9 * l1 * l2 * (3 * l2 - 1) / 2,
            9 * l2 * l3 * (3 * l2 - 1) / 2,
            9 * l2 * l3 * (3 * l3 - 1) / 2,
            9 * l3 * l1 * (3 * l3 - 1) / 2,
            9 * l3 * l1 * (3 * l1 - 1) / 2,
            27 * l1 * l2 * l3,
        ]
    else:
        raise ValueError(f"Unsupported triangle order: {order}")
    return Element2DBasis(Geometry.TRIANGLE, nodes, basis)


def _serendipity_0() -> tuple[list, list]:
    return [(0, 0)], [sympy.Integer(1)]


def _serendipity_1() -> tuple[list, list]:
    x, y = X, Y
    nodes = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    basis = [
        (1 - x) * (1 - y) / 4,
        (1 + x) * (1 - y) / 4,
        (1 + x) * (1 + y) / 4,
        (1 - x) * (1 + y) / 4,
    ]
    return nodes, basis


def _serendipity_2() -> tuple[list, list]:
    x, y, p = X, Y, _P
    nodes = [(-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0)]
    a, b, c = 9 * p - 1, 9 * p + 3, 9 * p - 5
    basis = [
        (1 - x) * (1 - y) * (a * (1 + x + y) + b * x * y) / 16,
        -(1 - x * x) * (1 - y) * (c + b * y) / 16,
        (1 + x) * (1 - y) * (a * (1 - x + y) - b * x * y) / 16,
        -(1 - y * y) * (1 + x) * (c - b * x) / 16,
        (1 + x) * (1 + y) * (a * (1 - x - y) + b * x * y) / 16,
        -(1 - x * x) * (1 + y) * (c - b * y) / 16,
        (1 - x) * (1 + y) * (a * (1 + x - y) - b * x * y) / 16,
        -(1 - y * y) * (1 - x) * (c + b * x) / 16,
    ]
    return nodes, basis


def _serendipity_3() -> tuple[list, list]:
    x, y, p = X, Y, _P
    t = _R(1, 3)
    nodes = [
        (-1, -1), (-t, -1), (t, -1), (1, -1),
        (1, -t), (1, t), (1, 1), (t, 1),
        (-t, 1), (-1, 1), (-1, t), (-1, -t),
    ]
    s = 2 * p + 1
    q = 18 * p + 9
    r = 18 * p
    sq = x * x + y * y
    basis = [
        (1 - x) * (1 - y) * (9 * (sq + s * (x * y + x + y)) + r - 1) / 32,
        -(1 - x * x) * (1 - y) * (54 * x + q * y + r - 9) / 64,
        (1 - x * x) * (1 - y) * (54 * x - q * y - r + 9) / 64,
        (1 + x) * (1 - y) * (9 * (sq - s * (x * y + x - y)) + r - 1) / 32,
        -(1 + x) * (1 - y * y) * (54 * y - q * x + r - 9) / 64,
        (1 + x) * (1 - y * y) * (54 * y + q * x - r + 9) / 64,
        (1 + x) * (1 + y) * (9 * (sq + s * (x * y - x - y)) + r - 1) / 32,
        (1 - x * x) * (1 + y) * (54 * x + q * y - r + 9) / 64,
        -(1 - x * x) * (1 + y) * (54 * x - q * y + r - 9) / 64,
        (1 - x) * (1 + y) * (9 * (sq - s * (x * y - x + y)) + r - 1) / 32,
        (1 - x) * (1 - y * y) * (54 * y - q * x - r + 9) / 64,
        -(1 - x) * (1 - y * y) * (54 * y + q * x + r - 9) / 64,
    ]
    return nodes, basis


def _serendipity_4() -> tuple[list, list]:
    x, y = X, Y
    h = _R(1, 2)
    nodes = [
        (-1, -1), (-h, -1), (0, -1), (h, -1),
        (1, -1), (1, -h), (1, 0), (1, h),
        (1, 1), (h, 1), (0, 1), (-h, 1),
        (-1, 1), (-1, h), (-1, 0), (-1, -h),
    ]
    sq = x * x + y * y
    k = _R(1600, 3)
    basis = [
        (1 - x) * (1 - y) * (1 + 2 * (x + y)) * (561 + 61 * (x + y) - 500 * sq + 311 * x * y) / 3000,
        -(1 - x * x) * (1 - y) * (203 + 203 * y + k * x) * (1 - 2 * x) / 800,
        (1 - x * x) * (1 - y) * (1141 + 141 * y - 4000 * x * x) / 2000,
        -(1 - x * x) * (1 - y) * (203 + 203 * y - k * x) * (1 + 2 * x) / 800,
        (1 + x) * (1 - y) * (1 - 2 * (x - y)) * (561 - 61 * (x - y) - 500 * sq - 311 * x * y) / 3000,
        -(1 + x) * (1 - y * y) * (203 - 203 * x + k * y) * (1 - 2 * y) / 800,
        (1 + x) * (1 - y * y) * (1141 - 141 * x - 4000 * y * y) / 2000,
        -(1 + x) * (1 - y * y) * (203 - 203 * x - k * y) * (1 + 2 * y) / 800,
        (1 + x) * (1 + y) * (1 - 2 * (x + y)) * (561 - 61 * (x + y) - 500 * sq + 311 * x * y) / 3000,
        -(1 - x * x) * (1 + y) * (203 - 203 * y - k * x) * (1 + 2 * x) / 800,
        (1 - x * x) * (1 + y) * (1141 - 141 * y - 4000 * x * x) / 2000,
        -(1 - x * x) * (1 + y) * (203 - 203 * y + k * x) * (1 - 2 * x) / 800,
        (1 - x) * (1 + y) * (1 + 2 * (x - y)) * (561 + 61 * (x - y) - 500 * sq - 311 * x * y) / 3000,
        -(1 - x) * (1 - y * y) * (203 + 203 * x - k * y) * (1 + 2 * y) / 800,
        (1 - x) * (1 - y * y) * (1141 + 141 * x - 4000 * y * y) / 2000,
        -(1 - x) * (1 - y * y) * (203 + 203 * x + k * y) * (1 - 2 * y) / 800,
    ]
    return nodes, basis


def _serendipity_5() -> tuple[list, list]:
    x, y = X, Y
    a, b = _R(3, 5), _R(1, 5)
    nodes = [
        (-1, -1), (-a, -1), (-b, -1), (b, -1), (a, -1),
        (1, -1), (1, -a), (1, -b), (1, b), (1, a),
        (1, 1), (a, 1), (b, 1), (-b, 1), (-a, 1),
        (-1, 1), (-1, a), (-1, b), (-1, -b), (-1, -a),
    ]
    corner = 384 - 125 * ((1 - x * x) * (3 + 5 * x * x) + (1 - y * y) * (3 + 5 * y * y))

    def edge(t, side):
        bubble = (1 - t * t) * side
        return [
            25 * bubble * (-1 + 25 * t * t) * (3 - 5 * t) / 1536,
            25 * bubble * (9 - 25 * t * t) * (1 - 5 * t) / 768,
            25 * bubble * (9 - 25 * t * t) * (1 + 5 * t) / 768,
            25 * bubble * (-1 + 25 * t * t) * (3 + 5 * t) / 1536,
        ]

    basis = [
        (1 - x) * (1 - y) * corner / 1536,
        *edge(x, 1 - y),
        (1 + x) * (1 - y) * corner / 1536,
        *edge(y, 1 + x),
        (1 + x) * (1 + y) * corner / 1536,
        *reversed(edge(x, 1 + y)),
        (1 - x) * (1 + y) * corner / 1536,
        *reversed(edge(y, 1 - x)),
    ]
    return nodes, basis


_SERENDIPITY = {
    0: (_serendipity_0, None),
    1: (_serendipity_1, None),
    2: (_serendipity_2, _R(2, 9)),
    3: (_serendipity_3, _R(1, 8)),
    4: (_serendipity_4, None),
    5: (_serendipity_5, None),
}


def serendipity_basis(order: int, p: Any = None) -> Element2DBasis:
    """Serendipity rectangle of order 0 to 5.

    Orders 2 and 3 depend on a free parameter ``p`` (defaults 2/9 and 1/8);
    the other orders take none.
    """
    try:
        build, default = _SERENDIPITY[order]
    except KeyError:
        raise ValueError(f"Unsupported serendipity order: {order}") from None
    if default is None and p is not None:
        raise ValueError(f"Serendipity element of order {order} has no parameter")
    nodes, basis = build()
    parameter = None
    if default is not None:
        parameter = sympy.nsimplify(p) if p is not None else default
        basis = [item.subs(_P, parameter) for item in basis]
    return Element2DBasis(Geometry.RECTANGLE, nodes, basis, parameter)


def _uniform_partition(count: int) -> list[sympy.Rational]:
    return [sympy.Integer(-1) + _R(2 * k, count - 1) for k in range(count)]


def lagrangian_basis_2d(n: int, m: int) -> Element2DBasis:
    """Tensor-product Lagrangian rectangle of order ``n`` in x and ``m`` in y."""
    if n < 1 or m < 1:
        raise ValueError(f"Orders must be at least 1, got {n} and {m}")
    nodes_x = _uniform_partition(n + 1)
    nodes_y = _uniform_partition(m + 1)
    nodes = [(nx, ny) for nx in nodes_x for ny in nodes_y]
    basis = basis_production(
        generate_lagrangian_basis(X, nodes_x),
        generate_lagrangian_basis(Y, nodes_y),
    )
    return Element2DBasis(Geometry.RECTANGLE, nodes, basis)