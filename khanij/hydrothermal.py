"""Hydrothermal ore formation: alteration zones, metal solubility and ore grade."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

PRECIPITATION_TEMPS: dict[str, float] = {
    "gold": 300.0,
    "copper": 350.0,
    "silver": 250.0,
    "lead": 200.0,
    "zinc": 250.0,
    "tin": 400.0,
    "molybdenum": 500.0,
    "tungsten": 450.0,
}
"""Typical precipitation temperatures of common ore metals, in °C."""

_PRECIPITATION_SIGMA_C = 30.0


@dataclass(frozen=True)
class HydrothermalConditions:
    """Conditions at a point in a hydrothermal system.

    Temperature in kelvin, pressure in pascals, distance from the intrusion
    contact in metres and Darcy flow rate in m³/s.
    """

    temperature_k: float
    pressure_pa: float
    distance_m: float
    flow_rate: float


class AlterationZone(Enum):
    """Hydrothermal alteration zone."""

    POTASSIC = "potassic"
    PHYLLIC = "phyllic"
    ARGILLIC = "argillic"
    PROPYLITIC = "propylitic"
    UNALTERED = "unaltered"


def classify_alteration(temperature_c: float) -> AlterationZone:
    """Alteration zone for a fluid temperature in °C."""
    if temperature_c > 500.0:
        return AlterationZone.POTASSIC
    if temperature_c > 350.0:
        return AlterationZone.PHYLLIC
    if temperature_c > 250.0:
        return AlterationZone.ARGILLIC
    if temperature_c > 150.0:
        return AlterationZone.PROPYLITIC
    return AlterationZone.UNALTERED


def metal_solubility(temperature_c: float, precipitation_temp_c: float) -> float:
    """Relative solubility (0-1): zero at or below the precipitation temperature."""
    if temperature_c <= precipitation_temp_c:
        return 0.0
    excess = temperature_c - precipitation_temp_c
    return min(max(1.0 - math.exp(-excess / 200.0), 0.0), 1.0)


def precipitation_rate(temperature_c: float, precipitation_temp_c: float) -> float:
    """Relative precipitation rate (0-1), a Gaussian peak at the precipitation temperature."""
    delta = temperature_c - precipitation_temp_c
    return math.exp(-(delta**2) / (2.0 * _PRECIPITATION_SIGMA_C**2))


def estimated_ore_grade(
    fluid_flux: float,
    temperature_c: float,
    precipitation_temp_c: float,
    porosity: float,
    background_grade: float,
) -> float:
    """Ore grade (fraction, at most 1) enhanced by flux, precipitation and trapping."""
    precip = precipitation_rate(temperature_c, precipitation_temp_c)
    flux_factor = min(fluid_flux / 1e-6, 10.0)
    trap_factor = porosity * 5.0
    enhancement = precip * flux_factor * trap_factor
    return min(background_grade * (1.0 + enhancement), 1.0)