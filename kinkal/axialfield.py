"""Field map built from an axial field profile, extrapolated off axis."""

from __future__ import annotations

import math
from os import PathLike
from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from kinkal.bfield import BFieldMap, _vec3

_GRADIENT_WINDOW = 3


class AxialBFieldMap(BFieldMap):
    """Axial field values on an evenly spaced z grid."""

    def __init__(self, zmin: float, zmax: float, field: Sequence[float]) -> None:
        values = [float(b) for b in field]
        if len(values) < 2:
            raise ValueError("axial field needs at least two values")
        self.zmin = float(zmin)
        self.zmax = float(zmax)
        self._axial = values
        self._zstep = (self.zmax - self.zmin) / (len(values) - 1)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> AxialBFieldMap:
        """Read z positions and field values; spacing must be uniform."""
        try:
            with open(path) as stream:
                lines = stream.read().splitlines()
        except OSError as err:
            raise ValueError(f"can't open Axial field file {path}") from err
        zmin = zmax = zold = 0.0
        values: list[float] = []
        for line in lines:
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            try:
                z, bz = float(tokens[0]), float(tokens[1])
            except (IndexError, ValueError):
                continue
            if not values:
                zmin = z
            else:
                dz = z - (zmin + (z - zold) * len(values))
                if abs(dz) > 1e-5:
                    raise ValueError("field spacing isn't uniform!")
            zmax = z
            zold = z
            values.append(bz)
        return cls(zmin, zmax, values)

    @property
    def field(self) -> tuple[float, ...]:
        return tuple(self._axial)

    def _low_bound(self, z: float) -> int:
        low = math.floor((z - self.zmin) / self._zstep)
        return min(max(low, 0), len(self._axial) - 1)

    def _zval(self, index: int) -> float:
        return self.zmin + index * self._zstep

    def bz(self, z: float) -> float:
        """Axial field at the grid point at or below z."""
        return self._axial[self._low_bound(z)]

    def gradient(self, z: float) -> float:
        """Axial gradient averaged over a window of grid steps."""
        zlow = z - _GRADIENT_WINDOW * self._zstep
        zhigh = z + _GRADIENT_WINDOW * self._zstep
        return (self.bz(zhigh) - self.bz(zlow)) / (zhigh - zlow)

    def field_vect(self, position: ArrayLike) -> np.ndarray:
        x, y, z = _vec3(position)
        ilow = self._low_bound(z)
        grad = self.gradient(z)
        dz = z - self._zval(ilow)
        return np.array([-0.5 * grad * x, -0.5 * grad * y, self._axial[ilow] + grad * dz])

    def field_grad(self, position: ArrayLike) -> np.ndarray:
        grad = self.gradient(_vec3(position)[2])
        return np.diag([-0.5 * grad, -0.5 * grad, -grad])

    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        grad = self.gradient(_vec3(position)[2])
        vx, vy, vz = _vec3(velocity)
        return np.array([-0.5 * grad * vx, -0.5 * grad * vy, grad * vz])

    def in_range(self, position: ArrayLike) -> bool:
        z = _vec3(position)[2]
        return self.zmin < z < self.zmax

    def describe(self) -> str:
        return (
            f"Axial Bfield between {self.zmin:g} and {self.zmax:g} with "
            f"{len(self._axial)} field values from {self._axial[0]:g} "
            f"to {self._axial[-1]:g}\n"
        )