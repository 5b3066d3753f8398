"""Chi-squared value with its number of degrees of freedom."""

from __future__ import annotations

from dataclasses import dataclass

from scipy.special import gammaincc


@dataclass(frozen=True)
class Chisq:
    """Chi-squared from a least-squares fit; additive under ``+``."""

    chisq: float = 0.0
    ndof: int = 0

    def chisq_per_ndof(self) -> float:
        if self.ndof > 0:
            return self.chisq / self.ndof
        return -1.0

    def probability(self) -> float:
        """Chi-squared probability (consistency), or -1 when undefined."""
        if self.ndof > 0 and self.chisq > 0.0:
            return float(gammaincc(0.5 * self.ndof, 0.5 * self.chisq))
        return -1.0

    def __add__(self, other: Chisq) -> Chisq:
        if not isinstance(other, Chisq):
            return NotImplemented
        return Chisq(self.chisq + other.chisq, self.ndof + other.ndof)

    def __str__(self) -> str:
        return (
            f"Chisq value {self.chisq:g} nDOF {self.ndof} "
            f"prob {self.probability():g}"
        )