"""Magnetic field maps and their interaction with kinematic trajectories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, Union

import numpy as np
from numpy.typing import ArrayLike

from kinkal.timerange import TimeRange
from kinkal.units import c_light


def cbar() -> float:
    """Speed of light in units converting Tesla to mm of bending radius."""
    return c_light / 1000.0


def _vec3(values: ArrayLike) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


def _format3(vec: np.ndarray) -> str:
    return "(" + ",".join(f"{x:g}" for x in vec) + ")"


class KinematicTrajectory(Protocol):
    """What a field map needs from a kinematic trajectory."""

    charge: float
    range: TimeRange

    def position3(self, time: float) -> np.ndarray: ...

    def velocity(self, time: float) -> np.ndarray: ...

    def momentum(self, time: float) -> float: ...

    def bnom(self, time: float) -> np.ndarray: ...


class BFieldMap(ABC):
    """Interface of a magnetic field map."""

    @abstractmethod
    def field_vect(self, position: ArrayLike) -> np.ndarray:
        """Field value at a point."""

    @abstractmethod
    def field_grad(self, position: ArrayLike) -> np.ndarray:
        """Field gradient dB_i/dx_j at a point, as a 3x3 matrix."""

    @abstractmethod
    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        """Time derivative of the field at a point along a velocity."""

    @abstractmethod
    def in_range(self, position: ArrayLike) -> bool:
        """Whether the point lies inside the range of this map."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of the map."""

    def __str__(self) -> str:
        return self.describe()

    def range_in_tolerance(self, ktraj: KinematicTrajectory, tstart: float, tol: float) -> float:
        """Time until field inhomogeneity drives the momentum out of the fractional tolerance.

        First-order estimate that ignores trajectory curvature.
        """
        tpos = ktraj.position3(tstart)
        dp = ktraj.momentum(tstart) * tol
        vel = _vec3(ktraj.velocity(tstart))
        dbdt = self.field_deriv(tpos, vel)
        d2pdt2 = float(np.linalg.norm(np.cross(dbdt, vel))) * cbar() * abs(ktraj.charge)
        if d2pdt2 > 1e-10:
            return tstart + float(np.sqrt(dp / d2pdt2))
        return ktraj.range.end

    def integrate(self, ktraj: KinematicTrajectory, trange: TimeRange) -> np.ndarray:
        """Integrate the residual magnetic force over the time range.

        The residual is the difference between this field and the trajectory's
        nominal field; a fixed number of steps is taken.
        """
        nsteps = 10
        dt = trange.range() / nsteps
        dmom = np.zeros(3)
        for istep in range(nsteps):
            tstep = trange.begin + (0.5 + istep) * dt
            vel = _vec3(ktraj.velocity(tstep))
            db = self.field_vect(ktraj.position3(tstep)) - _vec3(ktraj.bnom(tstep))
            dmom += cbar() * ktraj.charge * dt * np.cross(vel, db)
        return dmom


class UniformBFieldMap(BFieldMap):
    """A constant field everywhere."""

    def __init__(self, bnom: Union[float, ArrayLike]) -> None:
        if np.ndim(bnom) == 0:
            self._fvec = np.array([0.0, 0.0, float(bnom)])
        else:
            self._fvec = _vec3(bnom)

    def field_vect(self, position: ArrayLike) -> np.ndarray:
        return self._fvec.copy()

    def field_grad(self, position: ArrayLike) -> np.ndarray:
        return np.zeros((3, 3))

    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        return np.zeros(3)

    def in_range(self, position: ArrayLike) -> bool:
        return True

    def describe(self) -> str:
        return f"Uniform BField, B = {_format3(self._fvec)}\n"


class CompositeBFieldMap(BFieldMap):
    """Superposition of several field maps."""

    def __init__(self, fields: Optional[Iterable[BFieldMap]] = None) -> None:
        self.fields: list[BFieldMap] = list(fields) if fields is not None else []

    def add_field(self, field: BFieldMap) -> None:
        self.fields.append(field)

    def field_vect(self, position: ArrayLike) -> np.ndarray:
        return sum((f.field_vect(position) for f in self.fields), np.zeros(3))

    def field_grad(self, position: ArrayLike) -> np.ndarray:
        return sum((f.field_grad(position) for f in self.fields), np.zeros((3, 3)))

    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        return sum((f.field_deriv(position, velocity) for f in self.fields), np.zeros(3))

    def in_range(self, position: ArrayLike) -> bool:
        return all(f.in_range(position) for f in self.fields)

    def describe(self) -> str:
        header = "Composite BField with constituents as follows:\n"
        return header + "".join(f.describe() for f in self.fields)


class GradientBFieldMap(BFieldMap):
    """Field with a constant gradient along z."""

    def __init__(self, b0: float, b1: float, zg0: float, zg1: float) -> None:
        self.b0 = float(b0)
        self.b1 = float(b1)
        self.z0 = float(zg0)
        self.gradient = (self.b1 - self.b0) / (zg1 - zg0)
        self._fgrad = np.diag([-0.5 * self.gradient, -0.5 * self.gradient, -self.gradient])

    def field_vect(self, position: ArrayLike) -> np.ndarray:
        x, y, z = _vec3(position)
        g = self.gradient
        return np.array([-0.5 * g * x, -0.5 * g * y, self.b0 + g * (z - self.z0)])

    def field_grad(self, position: ArrayLike) -> np.ndarray:
        return self._fgrad.copy()

    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        vx, vy, vz = _vec3(velocity)
        g = self.gradient
        return np.array([-0.5 * g * vx, -0.5 * g * vy, g * vz])

    def in_range(self, position: ArrayLike) -> bool:
        return True

    def describe(self) -> str:
        return f"BField with  constant gradient of {self.gradient:g} Tesla/mm\n"