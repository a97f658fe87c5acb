"""Two-dimensional unstructured mesh: SU2 reading, VTK and CSV writing."""

from __future__ import annotations

import dataclasses
import enum
import os
from collections.abc import Iterable, Sequence
from typing import TextIO

__all__ = [
    "ElementType2D",
    "ElementType1D",
    "VtkElementNumber",
    "Mesh2D",
    "save_as_csv",
]


class ElementType2D(enum.Enum):
    """Kinds of two-dimensional elements."""

    TRIANGLE = enum.auto()
    QUADRATIC_TRIANGLE = enum.auto()
    BILINEAR = enum.auto()
    QUADRATIC_SERENDIPITY = enum.auto()
    QUADRATIC_LAGRANGE = enum.auto()


class ElementType1D(enum.Enum):
    """Kinds of boundary (one-dimensional) elements."""

    LINEAR = enum.auto()
    QUADRATIC = enum.auto()


class VtkElementNumber(enum.IntEnum):
    """Cell type numbers used by the VTK and SU2 formats."""

    LINEAR = 3
    TRIANGLE = 5
    BILINEAR = 9
    QUADRATIC = 21
    QUADRATIC_TRIANGLE = 22
    QUADRATIC_SERENDIPITY = 23
    QUADRATIC_LAGRANGE = 28


# Position in the element's node list of each node as it appears in a file.
_FILE_ORDER_2D: dict[ElementType2D, tuple[int, ...]] = {
    ElementType2D.TRIANGLE: (0, 1, 2),
    ElementType2D.QUADRATIC_TRIANGLE: (0, 1, 2, 3, 4, 5),
    ElementType2D.BILINEAR: (0, 1, 2, 3),
    ElementType2D.QUADRATIC_SERENDIPITY: (0, 2, 4, 6, 1, 3, 5, 7),
    ElementType2D.QUADRATIC_LAGRANGE: (0, 2, 4, 6, 1, 3, 5, 7, 8),
}

_FILE_ORDER_1D: dict[ElementType1D, tuple[int, ...]] = {
    ElementType1D.LINEAR: (0, 1),
    ElementType1D.QUADRATIC: (0, 2, 1),
}

_VTK_TO_2D: dict[VtkElementNumber, ElementType2D] = {
    VtkElementNumber.TRIANGLE: ElementType2D.TRIANGLE,
    VtkElementNumber.QUADRATIC_TRIANGLE: ElementType2D.QUADRATIC_TRIANGLE,
    VtkElementNumber.BILINEAR: ElementType2D.BILINEAR,
    VtkElementNumber.QUADRATIC_SERENDIPITY: ElementType2D.QUADRATIC_SERENDIPITY,
    VtkElementNumber.QUADRATIC_LAGRANGE: ElementType2D.QUADRATIC_LAGRANGE,
}
_2D_TO_VTK = {kind: number for number, kind in _VTK_TO_2D.items()}

_VTK_TO_1D: dict[VtkElementNumber, ElementType1D] = {
    VtkElementNumber.LINEAR: ElementType1D.LINEAR,
    VtkElementNumber.QUADRATIC: ElementType1D.QUADRATIC,
}


class _Tokens:
    """Whitespace-separated tokens of a text, read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("Unexpected end of mesh file.") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Integer expected in mesh file, got {token!r}.") from None

    def real(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"Number expected in mesh file, got {token!r}.") from None

    def element(self, order: Sequence[int]) -> tuple[int, ...]:
        nodes = [0] * len(order)
        for position in order:
            nodes[position] = self.integer()
        return tuple(nodes)


def _vtk_number(value: int) -> VtkElementNumber | None:
    try:
        return VtkElementNumber(value)
    except ValueError:
        return None


@dataclasses.dataclass
class Mesh2D:
    """Nodes, two-dimensional elements and named boundaries of a mesh."""

    nodes: list[tuple[float, float]] = dataclasses.field(default_factory=list)
    elements: list[tuple[int, ...]] = dataclasses.field(default_factory=list)
    element_types: list[ElementType2D] = dataclasses.field(default_factory=list)
    boundaries: dict[str, list[tuple[int, ...]]] = dataclasses.field(default_factory=dict)
    boundary_types: dict[str, list[ElementType1D]] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.elements) != len(self.element_types):
            raise ValueError("Elements count and element types count differ.")
        for kind, element in zip(self.element_types, self.elements):
            if len(element) != len(_FILE_ORDER_2D[kind]):
                raise ValueError(f"Element of type {kind.name} has {len(element)} nodes.")
        if self.boundaries.keys() != self.boundary_types.keys():
            raise ValueError("Boundaries and boundary types have different names.")
        for name, elements in self.boundaries.items():
            if len(elements) != len(self.boundary_types[name]):
                raise ValueError(f"Boundary {name!r}: elements and types counts differ.")

    @classmethod
    def read_su2(cls, stream: TextIO) -> Mesh2D:
        """Read a mesh in SU2 format from a text stream."""
        tokens = _Tokens(stream.read())

        tokens.word()
        tokens.word()
        tokens.word()
        count = tokens.integer()
        elements: list[tuple[int, ...]] = []
        element_types: list[ElementType2D] = []
        for _ in range(count):
            kind = _VTK_TO_2D.get(_vtk_number(tokens.integer()))
            if kind is None:
                raise ValueError("Unknown 2D element.")
            element_types.append(kind)
            elements.append(tokens.element(_FILE_ORDER_2D[kind]))
            tokens.word()

        tokens.word()
        count = tokens.integer()
        nodes: list[tuple[float, float]] = []
        for _ in range(count):
            x, y = tokens.real(), tokens.real()
            tokens.word()
            nodes.append((x, y))

        boundaries: dict[str, list[tuple[int, ...]]] = {}
        boundary_types: dict[str, list[ElementType1D]] = {}
        tokens.word()
        markers = tokens.integer()
        for _ in range(markers):
            tokens.word()
            name = tokens.word()
            tokens.word()
            count = tokens.integer()
            bound: list[tuple[int, ...]] = []
            kinds: list[ElementType1D] = []
            for _ in range(count):
                kind_1d = _VTK_TO_1D.get(_vtk_number(tokens.integer()))
                if kind_1d is None:
                    raise ValueError("Unknown 1D element.")
                kinds.append(kind_1d)
                bound.append(tokens.element(_FILE_ORDER_1D[kind_1d]))
            boundaries[name] = bound
            boundary_types[name] = kinds

        return cls(nodes, elements, element_types, boundaries, boundary_types)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Mesh2D:
        """Read a mesh from an SU2 file."""
        with open(path, encoding="utf-8") as stream:
            return cls.read_su2(stream)

    def nodes_count(self) -> int:
        return len(self.nodes)

    def elements_count(self) -> int:
        return len(self.elements)

    def boundary_names(self) -> list[str]:
        return list(self.boundaries)

    def node(self, i: int) -> tuple[float, float]:
        return self.nodes[i]

    def save_as_vtk(self, stream: TextIO) -> None:
        """Write the mesh as an ASCII legacy VTK unstructured grid."""
        stream.write(
            "# vtk DataFile Version 4.2\n"
            "Data\n"
            "ASCII\n"
            "DATASET UNSTRUCTURED_GRID\n"
        )
        stream.write(f"POINTS {self.nodes_count()} double\n")
        for x, y in self.nodes:
            stream.write(f"{x:g} {y:g} 0\n")

        list_size = sum(len(element) + 1 for element in self.elements)
        stream.write(f"CELLS {self.elements_count()} {list_size}\n")
        for kind, element in zip(self.element_types, self.elements):
            order = _FILE_ORDER_2D[kind]
            written = " ".join(str(element[k]) for k in order)
            stream.write(f"{len(order)} {written}\n")

        stream.write(f"CELL_TYPES {self.elements_count()}\n")
        for kind in self.element_types:
            stream.write(f"{int(_2D_TO_VTK[kind])}\n")


def save_as_csv(path: str | os.PathLike[str], mesh: Mesh2D, x: Iterable[float]) -> None:
    """Write ``x, y, value`` lines, one per mesh node."""
    values = list(x)
    if len(values) != mesh.nodes_count():
        raise ValueError("Mesh nodes count and x.size() have different sizes.")
    with open(path, "w", encoding="utf-8") as csv:
        for (px, py), value in zip(mesh.nodes, values):
            csv.write(f"{px:.17g},{py:.17g},{value:.17g}\n")