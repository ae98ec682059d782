"""
Four-momentum value type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class LorentzVector:
    """
    A 4-momentum in cartesian coordinates (px, py, pz, E).
    """
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    @classmethod
    def from_polar(cls, p: float, theta: float, phi: float, e: float) -> LorentzVector:
        """
        Build a vector from its momentum magnitude, polar and azimuthal angles and energy.

        Args:
            p: Magnitude of the 3-momentum.
            theta: Polar angle in radians, measured from +z.
            phi: Azimuthal angle in radians, measured from +x.
            e: Energy.
        """
        sin_theta = math.sin(theta)
        return cls(
            p * sin_theta * math.cos(phi),
            p * sin_theta * math.sin(phi),
            p * math.cos(theta),
            e
        )

    @classmethod
    def from_array(cls, values: list[float] | npt.NDArray[np.float64]) -> LorentzVector:
        px, py, pz, e = np.asarray(values, dtype=np.float64)
        return cls(float(px), float(py), float(pz), float(e))

    def __add__(self, other: LorentzVector) -> LorentzVector:
        return LorentzVector(self.px + other.px, self.py + other.py, self.pz + other.pz, self.e + other.e)

    def __sub__(self, other: LorentzVector) -> LorentzVector:
        return LorentzVector(self.px - other.px, self.py - other.py, self.pz - other.pz, self.e - other.e)

    def set_coordinates(self, px: float, py: float, pz: float, e: float) -> None:
        """Overwrite all four components in place."""
        self.px = px
        self.py = py
        self.pz = pz
        self.e = e

    @property
    def pt(self) -> float:
        """Transverse momentum."""
        return math.hypot(self.px, self.py)

    @property
    def p(self) -> float:
        """Magnitude of the 3-momentum."""
        return math.sqrt(self.px**2 + self.py**2 + self.pz**2)

    @property
    def phi(self) -> float:
        """Azimuthal angle in (-pi, pi]; 0 for a vector along the beam axis."""
        if self.px == 0.0 and self.py == 0.0:
            return 0.0
        return math.atan2(self.py, self.px)

    @property
    def theta(self) -> float:
        """Polar angle in [0, pi]."""
        return math.atan2(self.pt, self.pz)

    @property
    def m2(self) -> float:
        return self.e**2 - (self.px**2 + self.py**2 + self.pz**2)

    @property
    def m(self) -> float:
        # Space-like vectors report a negative mass
        m2 = self.m2
        return math.sqrt(m2) if m2 >= 0.0 else -math.sqrt(-m2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.px, self.py, self.pz, self.e], dtype=np.float64)
