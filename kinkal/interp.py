"""Bilinear interpolation on a regular two-dimensional grid."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


class InterpBilinear:
    """Interpolate values tabulated at the nodes of an evenly spaced grid.

    ``y[i][j]`` is the value at ``(x1[i], x2[j])``.  Points outside the grid
    are extrapolated linearly from the nearest edge cell.
    """

    def __init__(self, x1: ArrayLike, x2: ArrayLike, y: ArrayLike) -> None:
        self.x1 = np.array(x1, dtype=float)
        self.x2 = np.array(x2, dtype=float)
        self.y = np.array(y, dtype=float)
        if self.x1.ndim != 1 or self.x2.ndim != 1:
            raise ValueError("grid coordinates must be one-dimensional")
        if len(self.x1) < 2 or len(self.x2) < 2:
            raise ValueError("grid needs at least two points along each axis")
        if self.y.shape != (len(self.x1), len(self.x2)):
            raise ValueError(
                f"values must have shape {(len(self.x1), len(self.x2))}, got {self.y.shape}"
            )
        self._dx1 = float(self.x1[1] - self.x1[0])
        self._dx2 = float(self.x2[1] - self.x2[0])

    def _cell(self, x1p: float, x2p: float) -> tuple[int, int, float, float]:
        """Lower-left indices of the enclosing cell and fractional offsets in it."""
        i = int((x1p - self.x1[0]) / self._dx1)
        j = int((x2p - self.x2[0]) / self._dx2)
        i = max(0, min(len(self.x1) - 2, i))
        j = max(0, min(len(self.x2) - 2, j))
        t = (x1p - self.x1[i]) / self._dx1
        u = (x2p - self.x2[j]) / self._dx2
        return i, j, float(t), float(u)

    def interp(self, x1p: float, x2p: float) -> float:
        """Interpolated value at (x1p, x2p)."""
        i, j, t, u = self._cell(x1p, x2p)
        y = self.y
        return float(
            (1.0 - t) * (1.0 - u) * y[i, j]
            + t * (1.0 - u) * y[i + 1, j]
            + (1.0 - t) * u * y[i, j + 1]
            + t * u * y[i + 1, j + 1]
        )

    def gradient(self, x1p: float, x2p: float) -> np.ndarray:
        """Gradient (dy/dx1, dy/dx2) of the interpolating function."""
        i, j, t, u = self._cell(x1p, x2p)
        y = self.y
        dtx1 = 1.0 / (self.x1[i + 1] - self.x1[i])
        dux2 = 1.0 / (self.x2[j + 1] - self.x2[j])
        d1 = dtx1 * ((1.0 - u) * (y[i + 1, j] - y[i, j]) + u * (y[i + 1, j + 1] - y[i, j + 1]))
        d2 = dux2 * ((1.0 - t) * (y[i, j + 1] - y[i, j]) + t * (y[i + 1, j + 1] - y[i + 1, j]))
        return np.array([d1, d2])