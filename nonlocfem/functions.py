"""Small numeric helpers: distance, factorial, integer powers and element-wise container arithmetic."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, MutableSequence, Sequence
from numbers import Integral
from typing import Any

__all__ = [
    "distance",
    "factorial",
    "power",
    "add",
    "subtract",
    "multiply",
    "divide",
    "add_inplace",
    "subtract_inplace",
    "multiply_inplace",
    "divide_inplace",
]


def distance(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    """Euclidean distance between two points of the same dimension."""
    if len(lhs) != len(rhs):
        raise ValueError(
            f"Points have different dimensions: {len(lhs)} and {len(rhs)}"
        )
    return math.sqrt(sum(power(a - b, 2) for a, b in zip(lhs, rhs)))


def factorial(n: int) -> int:
    """Factorial of a non-negative integer."""
    if not isinstance(n, Integral):
        raise TypeError(f"factorial. Integer expected, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"factorial. Invalid number: {n}")
    result = 1
    for k in range(2, int(n) + 1):
        result *= k
    return result


def power(x: Any, n: int) -> Any:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    if not isinstance(n, Integral):
        raise TypeError(f"power. Integer exponent expected, got {type(n).__name__}")
    if n < 0:
        return 1 / power(x, -n)
    if n == 0:
        return 1
    if n == 1:
        return x
    if n % 2:
        return x * power(x, n - 1)
    half = power(x, n // 2)
    return half * half


def _check_sizes(lhs: Sequence[Any], rhs: Sequence[Any], operation: str) -> None:
    if len(lhs) != len(rhs):
        raise ValueError(
            f"Error in {operation}. Containers sizes do not match: "
            f"lhs.size() == {len(lhs)}, rhs.size() == {len(rhs)}"
        )


def _rebuild(template: Sequence[Any], values: list[Any]) -> Sequence[Any]:
    return tuple(values) if isinstance(template, tuple) else values


def _combine(lhs, rhs, op: Callable[[Any, Any], Any], name: str):
    _check_sizes(lhs, rhs, name)
    return _rebuild(lhs, [op(a, b) for a, b in zip(lhs, rhs)])


def _combine_inplace(lhs: MutableSequence[Any], rhs, op, name: str):
    _check_sizes(lhs, rhs, name)
    lhs[:] = [op(a, b) for a, b in zip(lhs, rhs)]
    return lhs


def add(lhs: Sequence[Any], rhs: Sequence[Any]) -> Sequence[Any]:
    """Element-wise sum of two containers of equal size."""
    return _combine(lhs, rhs, operator.add, "add")


def subtract(lhs: Sequence[Any], rhs: Sequence[Any]) -> Sequence[Any]:
    """Element-wise difference of two containers of equal size."""
    return _combine(lhs, rhs, operator.sub, "subtract")


def multiply(container: Sequence[Any], value: Any) -> Sequence[Any]:
    """Every element multiplied by ``value``."""
    return _rebuild(container, [item * value for item in container])


def divide(container: Sequence[Any], value: Any) -> Sequence[Any]:
    """Every element divided by ``value``."""
    return _rebuild(container, [item / value for item in container])


def add_inplace(lhs: MutableSequence[Any], rhs: Sequence[Any]) -> MutableSequence[Any]:
    """Add ``rhs`` to ``lhs`` element-wise, in place; returns ``lhs``."""
    return _combine_inplace(lhs, rhs, operator.add, "add_inplace")


def subtract_inplace(lhs: MutableSequence[Any], rhs: Sequence[Any]) -> MutableSequence[Any]:
    """Subtract ``rhs`` from ``lhs`` element-wise, in place; returns ``lhs``."""
    return _combine_inplace(lhs, rhs, operator.sub, "subtract_inplace")


def multiply_inplace(container: MutableSequence[Any], value: Any) -> MutableSequence[Any]:
    """Multiply every element by ``value`` in place; returns the container."""
    container[:] = [item * value for item in container]
    return container


def divide_inplace(container: MutableSequence[Any], value: Any) -> MutableSequence[Any]:
    """Divide every element by ``value`` in place; returns the container."""
    container[:] = [item / value for item in container]
    return container