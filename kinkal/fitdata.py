"""Fit parameters and weights in the six-dimensional kinematic space.

``Parameters`` hold a parameter vector with its covariance; ``Weights`` hold
the equivalent weight-space vector and matrix.  The two are related by
inversion, wrapped by ``FitData``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

NPARAMS = 6
"""Dimension of the kinematic parameter space and of phase space."""

NDIM = 3
"""Number of spatial dimensions."""


def _as_vector(values: Optional[ArrayLike]) -> np.ndarray:
    if values is None:
        return np.zeros(NPARAMS)
    vec = np.array(values, dtype=float)
    if vec.shape != (NPARAMS,):
        raise ValueError(f"expected a vector of length {NPARAMS}, got shape {vec.shape}")
    return vec


def _as_matrix(values: Optional[ArrayLike]) -> np.ndarray:
    if values is None:
        return np.zeros((NPARAMS, NPARAMS))
    mat = np.array(values, dtype=float)
    if mat.shape != (NPARAMS, NPARAMS):
        raise ValueError(
            f"expected a {NPARAMS}x{NPARAMS} matrix, got shape {mat.shape}"
        )
    return mat


def _format_vector(vec: np.ndarray) -> str:
    return "[" + ", ".join(f"{x:g}" for x in vec) + "]"


def _format_matrix(mat: np.ndarray) -> str:
    return "\n".join(_format_vector(row) for row in mat)


class FitData:
    """A vector and a symmetric matrix: either parameters or weights."""

    __slots__ = ("vec", "mat")

    def __init__(self, vec: Optional[ArrayLike] = None, mat: Optional[ArrayLike] = None) -> None:
        self.vec = _as_vector(vec)
        self.mat = _as_matrix(mat)

    def copy(self) -> FitData:
        return FitData(self.vec, self.mat)

    def invert(self) -> None:
        """Invert in place, switching between parameter and weight space."""
        try:
            inverse = np.linalg.inv(self.mat)
        except np.linalg.LinAlgError as err:
            raise np.linalg.LinAlgError("Inversion failure") from err
        if not np.all(np.isfinite(inverse)):
            raise np.linalg.LinAlgError("Inversion failure")
        self.mat = inverse
        self.vec = inverse @ self.vec

    def inverted(self) -> FitData:
        """Return an inverted copy, leaving this one unchanged."""
        result = self.copy()
        result.invert()
        return result

    def scale(self, factor: float) -> None:
        """Scale the matrix only."""
        self.mat = self.mat * factor

    def __iadd__(self, other: FitData) -> FitData:
        self.vec = self.vec + other.vec
        self.mat = self.mat + other.mat
        return self

    def __isub__(self, other: FitData) -> FitData:
        self.vec = self.vec - other.vec
        self.mat = self.mat - other.mat
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FitData):
            return NotImplemented
        return bool(np.array_equal(self.vec, other.vec) and np.array_equal(self.mat, other.mat))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FitData(vec={self.vec!r}, mat={self.mat!r})"


class Parameters:
    """Fit parameters with their covariance."""

    __slots__ = ("fit_data",)

    def __init__(
        self,
        parameters: Optional[ArrayLike] = None,
        covariance: Optional[ArrayLike] = None,
    ) -> None:
        self.fit_data = FitData(parameters, covariance)

    @classmethod
    def from_weights(cls, weights: Weights) -> Parameters:
        """Build parameters by inverting weight-space data."""
        result = cls()
        result.fit_data = weights.fit_data.inverted()
        return result

    @property
    def parameters(self) -> np.ndarray:
        return self.fit_data.vec

    @parameters.setter
    def parameters(self, values: ArrayLike) -> None:
        self.fit_data.vec = _as_vector(values)

    @property
    def covariance(self) -> np.ndarray:
        return self.fit_data.mat

    @covariance.setter
    def covariance(self, values: ArrayLike) -> None:
        self.fit_data.mat = _as_matrix(values)

    def copy(self) -> Parameters:
        return Parameters(self.parameters, self.covariance)

    def scale(self, factor: float) -> None:
        """Scale the covariance matrix."""
        self.fit_data.scale(factor)

    def delta(self, other: Parameters) -> float:
        """Chi-squared difference with respect to another parameter set."""
        pdiff = self.parameters - other.parameters
        csum = self.covariance + other.covariance
        try:
            cinv = np.linalg.inv(csum)
        except np.linalg.LinAlgError as err:
            raise np.linalg.LinAlgError("Inversion failure") from err
        return float(pdiff @ cinv @ pdiff)

    def __iadd__(self, other: Parameters) -> Parameters:
        self.fit_data += other.fit_data
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self.fit_data == other.fit_data

    __hash__ = None  # type: ignore[assignment]

    def describe(self, detail: int = 0) -> str:
        text = f"Parameters params {_format_vector(self.parameters)}\n"
        if detail > 1:
            text += f"covariance {_format_matrix(self.covariance)}\n"
        return text

    def __str__(self) -> str:
        return self.describe(0)


class Weights:
    """Weight-space information: weight vector and weight matrix."""

    __slots__ = ("fit_data",)

    def __init__(
        self,
        weight_vec: Optional[ArrayLike] = None,
        weight_mat: Optional[ArrayLike] = None,
    ) -> None:
        self.fit_data = FitData(weight_vec, weight_mat)

    @classmethod
    def from_parameters(cls, parameters: Parameters) -> Weights:
        """Build weights by inverting parameter-space data."""
        result = cls()
        result.fit_data = parameters.fit_data.inverted()
        return result

    @property
    def weight_vec(self) -> np.ndarray:
        return self.fit_data.vec

    @weight_vec.setter
    def weight_vec(self, values: ArrayLike) -> None:
        self.fit_data.vec = _as_vector(values)

    @property
    def weight_mat(self) -> np.ndarray:
        return self.fit_data.mat

    @weight_mat.setter
    def weight_mat(self, values: ArrayLike) -> None:
        self.fit_data.mat = _as_matrix(values)

    def copy(self) -> Weights:
        return Weights(self.weight_vec, self.weight_mat)

    def __iadd__(self, other: Weights) -> Weights:
        self.fit_data += other.fit_data
        return self

    def __isub__(self, other: Weights) -> Weights:
        self.fit_data -= other.fit_data
        return self

    def __imul__(self, factor: float) -> Weights:
        self.fit_data.vec = self.fit_data.vec * factor
        self.fit_data.mat = self.fit_data.mat * factor
        return self

    def scaled(self, factor: float) -> Weights:
        """Return a copy with vector and matrix scaled."""
        result = self.copy()
        result *= factor
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weights):
            return NotImplemented
        return self.fit_data == other.fit_data

    __hash__ = None  # type: ignore[assignment]

    def describe(self, detail: int = 0) -> str:
        text = f"Weights wVec {_format_vector(self.weight_vec)}\n"
        if detail > 1:
            text += f"weight {_format_matrix(self.weight_mat)}\n"
        return text

    def __str__(self) -> str:
        return self.describe(0)