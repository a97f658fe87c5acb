"""Material parameters of the two-dimensional heat equation."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from numbers import Real
from typing import Union

__all__ = ["Material", "HeatEquationParameters2D"]

Conductivity = Union[float, tuple[float, float]]


class Material(enum.Enum):
    """Kinds of material supported by the heat equation."""

    ISOTROPIC = enum.auto()
    ORTHOTROPIC = enum.auto()


@dataclasses.dataclass
class HeatEquationParameters2D:
    """Conductivity, heat transfer per boundary, heat capacity and density.

    Isotropic conductivity is a number; orthotropic is a pair for the x and y
    directions. ``integral`` is the solution integral used for the Neumann
    problem.
    """

    material: Material = Material.ISOTROPIC
    thermal_conductivity: Conductivity | None = None
    heat_transfer: dict[str, float] = dataclasses.field(default_factory=dict)
    heat_capacity: float = 1.0
    density: float = 1.0
    integral: float = 0.0

    def __post_init__(self) -> None:
        if self.material is Material.ISOTROPIC:
            if self.thermal_conductivity is None:
                self.thermal_conductivity = 1.0
            elif not isinstance(self.thermal_conductivity, Real):
                raise ValueError("Isotropic thermal conductivity must be a number.")
            else:
                self.thermal_conductivity = float(self.thermal_conductivity)
        elif self.material is Material.ORTHOTROPIC:
            if self.thermal_conductivity is None:
                self.thermal_conductivity = (1.0, 1.0)
            else:
                try:
                    kx, ky = self.thermal_conductivity  # type: ignore[misc]
                except (TypeError, ValueError):
                    raise ValueError(
                        "Orthotropic thermal conductivity must be a pair of numbers."
                    ) from None
                self.thermal_conductivity = (float(kx), float(ky))
        else:
            raise ValueError("Only isotropic and orthotropic materials are supported")

    @classmethod
    def with_boundaries(
        cls,
        names: Iterable[str] = (),
        material: Material = Material.ISOTROPIC,
    ) -> HeatEquationParameters2D:
        """Default parameters with heat transfer 1 on every named boundary."""
        return cls(material=material, heat_transfer={name: 1.0 for name in names})