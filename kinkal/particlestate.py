"""Particle state vectors (position and momentum) with optional covariance."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from kinkal.fitdata import NPARAMS, _as_matrix, _as_vector
from kinkal.units import c_light


class MomDirection(IntEnum):
    """Local basis relative to the momentum direction."""

    momdir = 0
    perpdir = 1
    phidir = 2
    ndir = 3

    def direction_name(self) -> str:
        return _DIRECTION_NAMES.get(self, "Unknown")


_DIRECTION_NAMES = {
    MomDirection.momdir: "MomentumDirection",
    MomDirection.perpdir: "PerpendicularDirection",
    MomDirection.phidir: "PhiDirection",
}


class PrintDetail(IntEnum):
    """Standard verbosity levels for printout."""

    minimal = 0
    basic = 1
    extended = 2
    complete = 3
    extreme = 4


_STATE_TITLES = (
    "X Position",
    "Y Position",
    "Z Position",
    "X Momentum",
    "Y Momentum",
    "Z Momentum",
)
_STATE_NAMES = ("XPos", "YPos", "ZPos", "XMom", "YMom", "ZMom")
_STATE_UNITS = ("mm", "mm", "mm", "MeV/c", "MeV/c", "MeV/c")


def _lookup(table: tuple, index: int) -> str:
    if not 0 <= index < len(table):
        raise IndexError(f"state index {index} out of range")
    return table[index]


def state_name(index: int) -> str:
    return _lookup(_STATE_NAMES, index)


def state_unit(index: int) -> str:
    return _lookup(_STATE_UNITS, index)


def state_title(index: int) -> str:
    return _lookup(_STATE_TITLES, index)


def _three(values: ArrayLike) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


def _four(values: ArrayLike) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"expected a 4-vector, got shape {arr.shape}")
    return arr


class ParticleState:
    """Position, momentum, time, mass and charge of a particle."""

    dimension = NPARAMS

    def __init__(
        self,
        state: Optional[ArrayLike] = None,
        time: float = 0.0,
        mass: float = 0.0,
        charge: int = 0,
    ) -> None:
        self.state = _as_vector(state)
        self.time = float(time)
        self.mass = float(mass)
        self.charge = int(charge)

    @classmethod
    def from_vectors(
        cls, position: ArrayLike, momentum: ArrayLike, time: float, mass: float, charge: int
    ) -> ParticleState:
        state = np.concatenate((_three(position), _three(momentum)))
        return cls(state, time, mass, charge)

    @classmethod
    def from_four_vectors(
        cls, position4: ArrayLike, momentum4: ArrayLike, charge: int
    ) -> ParticleState:
        """Build from (x, y, z, t) and (px, py, pz, mass)."""
        pos4 = _four(position4)
        mom4 = _four(momentum4)
        state = np.concatenate((pos4[:3], mom4[:3]))
        return cls(state, pos4[3], mom4[3], charge)

    def position3(self) -> np.ndarray:
        return self.state[:3].copy()

    def position4(self) -> np.ndarray:
        """Position with time as the fourth component."""
        return np.append(self.state[:3], self.time)

    def momentum3(self) -> np.ndarray:
        return self.state[3:].copy()

    def momentum4(self) -> np.ndarray:
        """Momentum with mass as the fourth component."""
        return np.append(self.state[3:], self.mass)

    def momentum(self) -> float:
        return float(np.linalg.norm(self.state[3:]))

    def energy(self) -> float:
        mom = self.momentum()
        return float(np.sqrt(mom * mom + self.mass * self.mass))

    def beta(self) -> float:
        return self.momentum() / self.energy()

    def gamma(self) -> float:
        return self.energy() / self.mass

    def speed(self) -> float:
        return c_light * self.beta()

    def velocity(self) -> np.ndarray:
        return self.speed() * self.momentum3() / self.momentum()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self.state!r}, time={self.time!r}, "
            f"mass={self.mass!r}, charge={self.charge!r})"
        )


class ParticleStateEstimate(ParticleState):
    """Particle state with a covariance on the state vector."""

    def __init__(
        self,
        state: Optional[ArrayLike] = None,
        time: float = 0.0,
        mass: float = 0.0,
        charge: int = 0,
        covariance: Optional[ArrayLike] = None,
    ) -> None:
        super().__init__(state, time, mass, charge)
        self.covariance = _as_matrix(covariance)

    @classmethod
    def from_state(cls, state: ParticleState, covariance: ArrayLike) -> ParticleStateEstimate:
        return cls(state.state, state.time, state.mass, state.charge, covariance)

    def momentum_variance(self) -> float:
        """Variance projected onto the scalar momentum."""
        momdir = self.state[3:] / self.momentum()
        dmdm = np.concatenate((np.zeros(3), momdir))
        return float(dmdm @ self.covariance @ dmdm)