"""Conjugate gradient solver for sparse symmetric positive definite systems.

Only the upper triangle of the matrix is read; the lower triangle is taken
to be its mirror image.
"""

from __future__ import annotations

import dataclasses
import math
import os
from collections.abc import Sequence
from typing import Any

import numpy as np
from scipy import sparse

__all__ = ["ConjugateGradientParameters", "ConjugateGradient", "distribute_rows"]


def _default_threads_count() -> int:
    return os.cpu_count() or 1


@dataclasses.dataclass
class ConjugateGradientParameters:
    """Stopping criteria and the number of row blocks the matrix is split into."""

    tolerance: float = 1e-15
    max_iterations: int = 10000
    threads_count: int = dataclasses.field(default_factory=_default_threads_count)


def distribute_rows(matrix: Any, threads_count: int) -> list[tuple[int, int]]:
    """Split the rows of a sparse matrix into contiguous blocks of similar non-zero count.

    Returns ``threads_count`` half-open ranges ``(first_row, last_row)`` that
    together cover every row exactly once; trailing ranges may be empty.
    """
    if threads_count < 1:
        raise ValueError("Threads count must be greater than 0.")
    csr = sparse.csr_matrix(matrix)
    rows = csr.shape[0]
    mean_count = csr.nnz // threads_count
    row_sizes = np.diff(csr.indptr)

    ranges: list[tuple[int, int]] = []
    start = 0
    thread_sum = 0
    for row, size in enumerate(row_sizes):
        thread_sum += int(size)
        if thread_sum > mean_count and len(ranges) < threads_count - 1:
            thread_sum = 0
            ranges.append((start, row))
            start = row
    ranges.append((start, rows))
    ranges.extend((rows, rows) for _ in range(threads_count - len(ranges)))
    return ranges


class ConjugateGradient:
    """Solves ``A x = b`` for a symmetric positive definite ``A`` stored by its upper triangle."""

    def __init__(self, matrix: Any, parameters: ConjugateGradientParameters | None = None) -> None:
        csr = sparse.csr_matrix(matrix, dtype=float)
        if csr.shape[0] != csr.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {csr.shape}")
        self.parameters = dataclasses.replace(parameters) if parameters else ConjugateGradientParameters()
        self._upper = sparse.triu(csr, format="csr")
        self._strict_upper_t = sparse.triu(csr, k=1, format="csr").T.tocsr()
        self.threads_ranges = distribute_rows(self._upper, self.parameters.threads_count)
        self._iterations = 0
        self._residual = 0.0

    @property
    def size(self) -> int:
        return self._upper.shape[0]

    @property
    def residual(self) -> float:
        """Relative residual ``|b - A x| / |b|`` after the last solve."""
        return self._residual

    @property
    def iterations(self) -> int:
        """Number of iterations made by the last solve."""
        return self._iterations

    def _product(self, p: np.ndarray) -> np.ndarray:
        return self._upper @ p + self._strict_upper_t @ p

    def solve(self, b: Sequence[float], x0: Sequence[float] | None = None) -> np.ndarray:
        """Solve the system, starting from ``x0`` or from zero."""
        rhs = np.asarray(b, dtype=float)
        if rhs.shape != (self.size,):
            raise ValueError(f"Right part size {rhs.size} does not match matrix size {self.size}")
        if x0 is None:
            x = np.zeros(self.size)
        else:
            x = np.array(x0, dtype=float)
            if x.shape != (self.size,):
                raise ValueError(f"Initial guess size {x.size} does not match matrix size {self.size}")

        r = rhs - self._product(x)
        p = r.copy()
        r_squared = float(r @ r)
        b_norm = float(np.linalg.norm(rhs))
        self._iterations = 0
        if b_norm == 0.0:
            self._residual = math.nan
            return x
        self._residual = math.sqrt(r_squared) / b_norm

        tolerance = self.parameters.tolerance
        while self._iterations < self.parameters.max_iterations and self._residual > tolerance:
            z = self._product(p)
            pz = float(p @ z)
            if pz == 0.0:
                break
            nu = r_squared / pz
            x += nu * p
            r -= nu * z
            r_squared_prev, r_squared = r_squared, float(r @ r)
            p = r + (r_squared / r_squared_prev) * p
            self._iterations += 1
            self._residual = math.sqrt(r_squared) / b_norm
        return x