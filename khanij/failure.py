"""Rock failure: Mohr-Coulomb strength, failure modes and slope stability."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from khanij.materials import RockMaterial


@dataclass(frozen=True)
class StressTensor:
    """Symmetric Cauchy stress tensor in Pa (compression positive).

    Normal components ``xx``, ``yy``, ``zz`` and shear components
    ``xy``, ``yz``, ``xz``.
    """

    xx: float
    yy: float
    zz: float
    xy: float = 0.0
    yz: float = 0.0
    xz: float = 0.0

    def _matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.xx, self.xy, self.xz],
                [self.xy, self.yy, self.yz],
                [self.xz, self.yz, self.zz],
            ],
            dtype=float,
        )

    def principal_stresses(self) -> tuple[float, float, float]:
        """Principal stresses, largest first."""
        values = np.linalg.eigvalsh(self._matrix())
        largest, middle, smallest = sorted((float(v) for v in values), reverse=True)
        return largest, middle, smallest

    def max_shear(self) -> float:
        """Maximum shear stress, half the spread of the principal stresses."""
        largest, _, smallest = self.principal_stresses()
        return 0.5 * (largest - smallest)

    def hydrostatic(self) -> float:
        """Mean normal stress, a third of the trace."""
        return (self.xx + self.yy + self.zz) / 3.0


class FailureMode(Enum):
    """How rock responds to a stress state."""

    BRITTLE = "brittle"
    DUCTILE = "ductile"
    STABLE = "stable"


def mohr_coulomb_strength(
    cohesion: float, friction_angle_rad: float, normal_stress: float
) -> float:
    """Shear strength ``c + σn·tan(φ)`` in Pa."""
    return cohesion + normal_stress * math.tan(friction_angle_rad)


def mohr_coulomb_failure(
    stress: StressTensor, cohesion: float, friction_angle_rad: float
) -> bool:
    """True when the maximum shear stress exceeds the Mohr-Coulomb strength."""
    tau_max = stress.max_shear()
    sigma_n = stress.hydrostatic()
    return tau_max > mohr_coulomb_strength(cohesion, friction_angle_rad, sigma_n)


def mohr_coulomb_safety_factor(
    stress: StressTensor, cohesion: float, friction_angle_rad: float
) -> float:
    """Strength over applied maximum shear; infinite when there is no shear."""
    tau_max = stress.max_shear()
    if tau_max <= 0.0:
        return math.inf
    sigma_n = stress.hydrostatic()
    return mohr_coulomb_strength(cohesion, friction_angle_rad, sigma_n) / tau_max


def mohr_coulomb_to_drucker_prager(
    friction_angle_rad: float, cohesion: float
) -> tuple[float, float]:
    """Drucker-Prager ``(alpha, k)`` circumscribing the Mohr-Coulomb surface."""
    sin_phi = math.sin(friction_angle_rad)
    cos_phi = math.cos(friction_angle_rad)
    denominator = math.sqrt(3.0) * (3.0 - sin_phi)
    alpha = 2.0 * sin_phi / denominator
    k = 6.0 * cohesion * cos_phi / denominator
    return alpha, k


def classify_failure_mode(
    confining_pressure: float,
    differential_stress: float,
    cohesion: float,
    friction_angle_rad: float,
    yield_strength: float,
) -> FailureMode:
    """Ductile when the differential stress passes yield, brittle when it passes Mohr-Coulomb."""
    mc_strength = mohr_coulomb_strength(cohesion, friction_angle_rad, confining_pressure)
    if differential_stress > yield_strength:
        return FailureMode.DUCTILE
    if differential_stress / 2.0 > mc_strength:
        return FailureMode.BRITTLE
    return FailureMode.STABLE


def brittle_ductile_transition_depth(
    material: RockMaterial, cohesion: float, friction_angle_rad: float, gravity: float
) -> float:
    """Depth in metres where Mohr-Coulomb strength reaches half the yield strength."""
    numerator = material.yield_strength / 2.0 - cohesion
    denominator = material.density * gravity * math.tan(friction_angle_rad)
    if denominator <= 0.0 or numerator <= 0.0:
        return 0.0
    return numerator / denominator


def infinite_slope_safety_factor(
    cohesion: float,
    friction_angle_rad: float,
    unit_weight: float,
    depth_m: float,
    slope_angle_rad: float,
) -> float:
    """Factor of safety of an infinite slope; infinite when nothing drives sliding."""
    sin_a = math.sin(slope_angle_rad)
    cos_a = math.cos(slope_angle_rad)
    driving = unit_weight * depth_m * sin_a * cos_a
    if driving <= 0.0:
        return math.inf
    resisting = cohesion + unit_weight * depth_m * cos_a**2 * math.tan(friction_angle_rad)
    return resisting / driving