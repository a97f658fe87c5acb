"""Uniform one-dimensional mesh of identical finite elements."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Protocol

from .element_base import ElementIntegrateBase

__all__ = ["CurrNextElements", "Mesh1D", "integrate_solution", "gradient"]


class _Element1D(Protocol):
    def nodes_count(self) -> int: ...
    def qnodes_count(self) -> int: ...
    def weight(self, q: int) -> float: ...
    def q_n(self, i: int, q: int) -> float: ...
    def qnode(self, q: int) -> float: ...
    def boundaries(self) -> tuple[float, float]: ...
    def n_xi(self, j: int, xi: float) -> float: ...


class _LinearElement(ElementIntegrateBase):
    """Linear Lagrangian element on [-1, 1] with one-point Gauss quadrature."""

    def __init__(self) -> None:
        super().__init__(weights=(2.0,), qn=(0.5, 0.5), nearest_qnode=(0, 0))

    def qnode(self, q: int) -> float:
        if q != 0:
            raise IndexError(f"Quadrature node index {q} out of range")
        return 0.0

    def boundaries(self) -> tuple[float, float]:
        return (-1.0, 1.0)

    def n_xi(self, j: int, xi: float) -> float:
        if j not in (0, 1):
            raise IndexError(f"Node index {j} out of range")
        return -0.5 if j == 0 else 0.5


@dataclasses.dataclass(frozen=True)
class CurrNextElements:
    """Elements a node belongs to, with the node's local number in each.

    A node inside an element or at the mesh ends has no next element.
    """

    curr_element: int
    curr_loc_number: int
    next_element: int | None = None
    next_loc_number: int | None = None

    @property
    def pairs(self) -> tuple[tuple[int, int], ...]:
        """``(element, local number)`` pairs for every element holding the node."""
        result = ((self.curr_element, self.curr_loc_number),)
        if self.next_element is not None:
            result += ((self.next_element, self.next_loc_number),)
        return result


class Mesh1D:
    """Uniform mesh; elements and nodes are numbered from left to right."""

    def __init__(
        self,
        element: _Element1D | None = None,
        elements_count: int = 1,
        section: Sequence[float] = (-1.0, 1.0),
    ) -> None:
        if elements_count < 1:
            raise ValueError(f"Elements count must be positive, got {elements_count}")
        if len(section) != 2:
            raise ValueError("Section must have exactly two ends")
        self.element = element if element is not None else _LinearElement()
        self.section = (float(section[0]), float(section[1]))
        self.elements_count = elements_count
        self.nodes_count = elements_count * (self.element.nodes_count() - 1) + 1
        self._step = (self.section[1] - self.section[0]) / elements_count
        left, right = self.element.boundaries()
        self.jacobian = self._step / (right - left)
        self._quad_coord_loc = tuple(
            (self.element.qnode(q) - left) * self.jacobian
            for q in range(self.element.qnodes_count())
        )
        self._neighbours_count: int | None = None

    def node_coord(self, node: int) -> float:
        a, b = self.section
        return a + node * (b - a) / self.nodes_count

    def quad_coord(self, e: int, q: int) -> float:
        return self._step * e + self._quad_coord_loc[q]

    def node_number(self, e: int, i: int) -> int:
        return e * (self.element.nodes_count() - 1) + i

    def is_boundary_node(self, node: int) -> bool:
        return node == 0 or node == self.nodes_count - 1

    def node_elements(self, node: int) -> CurrNextElements:
        """Elements holding ``node`` and the node's local numbers in them."""
        if not 0 <= node < self.nodes_count:
            raise IndexError(f"Node {node} out of range")
        last_local = self.element.nodes_count() - 1
        if node == 0:
            return CurrNextElements(0, 0)
        if node == self.nodes_count - 1:
            return CurrNextElements(self.elements_count - 1, last_local)
        quot, rem = divmod(node, last_local)
        if rem:
            return CurrNextElements(quot, rem)
        return CurrNextElements(quot - 1, last_local, quot, 0)

    def calc_neighbours_count(self, r: float) -> None:
        """Set how many elements on each side fall within radius ``r``."""
        self._neighbours_count = int(r / self._step + 1)

    def _neighbours(self) -> int:
        if self._neighbours_count is None:
            raise RuntimeError("Neighbours count is not calculated; call calc_neighbours_count first")
        return self._neighbours_count

    def left_neighbour(self, e: int) -> int:
        count = self._neighbours()
        return e - count if e > count else 0

    def right_neighbour(self, e: int) -> int:
        return min(e + self._neighbours(), self.elements_count)


def _check_size(mesh: Mesh1D, x: Sequence[float]) -> None:
    if mesh.nodes_count != len(x):
        raise ValueError("nodes_count() != x.size()")


def integrate_solution(mesh: Mesh1D, x: Sequence[float]) -> float:
    """Integral over the section of the function with nodal values ``x``."""
    _check_size(mesh, x)
    el = mesh.element
    integral = sum(
        el.weight(q) * el.q_n(i, q) * x[mesh.node_number(e, i)]
        for e in range(mesh.elements_count)
        for i in range(el.nodes_count())
        for q in range(el.qnodes_count())
    )
    return integral * mesh.jacobian


def gradient(mesh: Mesh1D, x: Sequence[float]) -> list[float]:
    """Derivative at the nodes of the function with nodal values ``x``."""
    _check_size(mesh, x)
    el = mesh.element
    nodes = el.nodes_count()
    last = mesh.elements_count - 1
    dx = [0.0] * len(x)
    for e in range(mesh.elements_count):
        for i in range(nodes - (e != last)):
            node = mesh.node_number(e, i)
            coord = mesh.node_coord(node)
            dx[node] += sum(
                el.n_xi(j, coord) * x[mesh.node_number(e, j)] / mesh.jacobian
                for j in range(nodes)
            )
    return dx