"""Abstract element and quadrature interfaces, and precomputed integration data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

__all__ = ["ElementBase", "QuadratureBase", "ElementIntegrateBase"]


class ElementBase(ABC):
    """Any finite element: it has a number of nodes."""

    @abstractmethod
    def nodes_count(self) -> int:
        """Number of nodes of the element."""


class QuadratureBase(ABC):
    """A quadrature rule: nodes with weights."""

    @abstractmethod
    def nodes_count(self) -> int:
        """Number of quadrature nodes."""

    @abstractmethod
    def weight(self, i: int) -> float:
        """Weight of the ``i``-th quadrature node."""


class ElementIntegrateBase:
    """Shape-function values tabulated at quadrature nodes.

    ``qn`` is flat, node-major: the value of function ``i`` at quadrature
    node ``q`` is ``qn[i * qnodes_count + q]``.
    """

    def __init__(
        self,
        weights: Iterable[float],
        qn: Iterable[float],
        nearest_qnode: Iterable[int],
    ) -> None:
        self._weights = tuple(float(w) for w in weights)
        self._qn = tuple(float(v) for v in qn)
        self._nearest_qnode = tuple(int(q) for q in nearest_qnode)
        if not self._weights:
            raise ValueError("At least one quadrature node is required")
        if len(self._qn) % len(self._weights):
            raise ValueError(
                f"Shape values count {len(self._qn)} is not a multiple of "
                f"quadrature nodes count {len(self._weights)}"
            )

    def qnodes_count(self) -> int:
        return len(self._weights)

    def nodes_count(self) -> int:
        return len(self._qn) // self.qnodes_count()

    def nearest_qnode(self, i: int) -> int:
        """Quadrature node closest to element node ``i``."""
        return self._nearest_qnode[i]

    def weight(self, q: int) -> float:
        return self._weights[q]

    def q_n(self, i: int, q: int) -> float:
        """Value of shape function ``i`` at quadrature node ``q``."""
        if not 0 <= q < self.qnodes_count():
            raise IndexError(f"Quadrature node index {q} out of range")
        if not 0 <= i < self.nodes_count():
            raise IndexError(f"Node index {i} out of range")
        return self._qn[i * self.qnodes_count() + q]