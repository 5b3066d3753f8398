"""Cylindrically symmetric field map read from a grid of (Br, Bz) values."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

import numpy as np
from numpy.typing import ArrayLike

from kinkal.bfield import BFieldMap, _vec3
from kinkal.interp import InterpBilinear

_DATA_FLAG = "data"
_GRID_FLAG = "grid"
_RHO_EPSILON = 1e-6


def _param_token(line: str, key: str) -> str:
    start = line.find(key)
    if start < 0:
        raise ValueError(f"grid parameter {key!r} missing from line: {line!r}")
    start += len(key)
    stop = line.find(" ", start)
    return line[start:] if stop < 0 else line[start:stop]


def _param_float(line: str, key: str) -> float:
    token = _param_token(line, key)
    try:
        return float(token)
    except ValueError as err:
        raise ValueError(f"bad value {token!r} for grid parameter {key!r}") from err


def _param_int(line: str, key: str) -> int:
    token = _param_token(line, key)
    try:
        return int(float(token))
    except ValueError as err:
        raise ValueError(f"bad value {token!r} for grid parameter {key!r}") from err


@dataclass
class CylBMap:
    """Grid of Br and Bz values at radii ``r`` and positions ``z``.

    ``br[i][j]`` and ``bz[i][j]`` are the field components at ``(r[i], z[j])``.
    """

    r: np.ndarray
    z: np.ndarray
    br: np.ndarray
    bz: np.ndarray
    ntot: int

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> CylBMap:
        """Read a map: header with one grid line, a data marker, then r z Br Bz lines."""
        try:
            with open(path) as stream:
                lines = stream.read().splitlines()
        except OSError as err:
            raise ValueError(f"can't open cylindrical field file {path}") from err

        grid = None
        data_start = None
        for index, line in enumerate(lines):
            if line[:4] == _DATA_FLAG:
                data_start = index + 1
                break
            if line[:4] == _GRID_FLAG:
                if grid is not None:
                    raise ValueError("multiple grid parameter lines found!")
                grid = (
                    _param_float(line, "R0="),
                    _param_float(line, "Z0="),
                    _param_int(line, "nR="),
                    _param_int(line, "nZ="),
                    _param_float(line, "dR="),
                    _param_float(line, "dZ="),
                )
        if grid is None:
            raise ValueError("no grid parameters found in data file!")
        if data_start is None:
            raise ValueError("no data marker found in data file!")

        r0, z0, nr, nz, dr, dz = grid
        data_lines = lines[data_start:]
        ntot = len(data_lines)
        if ntot != nr * nz:
            raise ValueError(
                "number of data does not match expected, based on grid parameters"
            )
        r = r0 + np.arange(nr) * dr
        z = z0 + np.arange(nz) * dz
        br = np.zeros((nr, nz))
        bz = np.zeros((nr, nz))
        for step, line in enumerate(data_lines):
            i, j = divmod(step, nz)
            tokens = line.split()
            try:
                r_val, z_val, br_val, bz_val = (float(tok) for tok in tokens[:4])
            except ValueError as err:
                raise ValueError(f"malformed data line {step}: {line!r}") from err
            br[i, j] = br_val
            bz[i, j] = bz_val
            dist = float(np.hypot(r_val - r[i], z_val - z[j]))
            if dist > 1e-5:
                raise ValueError(
                    f"field spacing isn't uniform! dist={dist:f} for line i={i}, "
                    f"j={j}, step={step}"
                )
        return cls(r, z, br, bz, ntot)


class CylBFieldMap(BFieldMap):
    """Field map interpolating a cylindrically symmetric (Br, Bz) grid."""

    def __init__(self, data: CylBMap) -> None:
        self.data = data
        self._br = InterpBilinear(data.r, data.z, data.br)
        self._bz = InterpBilinear(data.r, data.z, data.bz)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> CylBFieldMap:
        return cls(CylBMap.from_file(path))

    def z_min(self) -> float:
        return float(self.data.z[0])

    def z_max(self) -> float:
        return float(self.data.z[-1])

    def r_min(self) -> float:
        return float(self.data.r[0])

    def r_max(self) -> float:
        return float(self.data.r[-1])

    def field_vect(self, position: ArrayLike) -> np.ndarray:
        x, y, z = _vec3(position)
        rho = float(np.hypot(x, y))
        bz = self._bz.interp(rho, z)
        br = self._br.interp(rho, z)
        if rho < _RHO_EPSILON:
            return np.array([br, 0.0, bz])
        return np.array([br * x / rho, br * y / rho, bz])

    def field_grad(self, position: ArrayLike) -> np.ndarray:
        x, y, z = _vec3(position)
        rho = float(np.hypot(x, y))
        br = self._br.interp(rho, z)
        dbz = self._bz.gradient(rho, z)
        dbr = self._br.gradient(rho, z)
        if rho < _RHO_EPSILON:
            return np.array(
                [
                    [dbr[0], 0.0, dbr[1]],
                    [0.0, 0.0, 0.0],
                    [dbz[0], 0.0, dbz[1]],
                ]
            )
        xr, yr = x / rho, y / rho
        xryr, xrxr, yryr = xr * yr, xr * xr, yr * yr
        rinv = 1.0 / rho
        cross = dbr[0] * xryr - br * xryr * rinv
        return np.array(
            [
                [dbr[0] * xrxr + br * rinv * (1.0 - xrxr), cross, xr * dbr[1]],
                [cross, dbr[0] * yryr + br * rinv * (1.0 - yryr), yr * dbr[1]],
                [dbz[0] * xr, dbz[0] * yr, dbz[1]],
            ]
        )

    def field_deriv(self, position: ArrayLike, velocity: ArrayLike) -> np.ndarray:
        return self.field_grad(position) @ _vec3(velocity)

    def in_range(self, position: ArrayLike) -> bool:
        pos = _vec3(position)
        radius = float(np.linalg.norm(pos))
        rrange = 0.0 <= radius <= self.r_max()
        zrange = self.z_min() <= pos[2] <= self.z_max()
        return rrange and zrange

    def describe(self) -> str:
        d = self.data
        return (
            f"Cylindrically symmetric Bfield with boundaries z=[{self.z_min():g}, "
            f"{self.z_max():g}] and r=[{self.r_min():g}, {self.r_max():g}] with "
            f"{d.ntot} field values from (lower left, upper left): "
            f"Br=({d.br[0, 0]:g}, {d.br[-1, -1]:g}) Tesla and "
            f"Bz=({d.bz[0, 0]:g}, {d.bz[-1, -1]:g}) Tesla\n"
        )