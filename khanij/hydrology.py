"""Hydrology: groundwater flow, sediment transport and grain-fluid mechanics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import numpy as np

SHIELDS_CRITICAL = 0.047
"""Critical Shields parameter for incipient grain motion in turbulent flow."""

CONDUCTIVITY: dict[str, float] = {
    "gravel": 1e-2,
    "coarse_sand": 1e-3,
    "fine_sand": 1e-5,
    "silt": 1e-7,
    "clay": 1e-9,
    "sandstone": 1e-6,
    "fractured_granite": 1e-6,
    "unfractured_granite": 1e-12,
    "limestone_karst": 1e-2,
    "limestone_intact": 1e-8,
}
"""Hydraulic conductivity of common rock and sediment types, in m/s."""

STORATIVITY: dict[str, float] = {
    "confined_typical": 1e-4,
    "unconfined_sand": 0.25,
    "unconfined_gravel": 0.22,
    "unconfined_silt": 0.08,
    "unconfined_clay": 0.03,
}
"""Aquifer storage coefficients (dimensionless)."""

_GAUSS_POINTS = 200
_WELL_TAIL = 40.0


@dataclass(frozen=True)
class FluidMaterial:
    """Bulk fluid properties.

    Density in kg/m³, dynamic viscosity in Pa·s, surface tension in N/m and
    speed of sound in m/s.
    """

    density: float
    viscosity: float
    surface_tension: float
    speed_of_sound: float

    def __post_init__(self) -> None:
        if not self.density > 0.0:
            raise ValueError(f"density must be positive, got {self.density}")
        if not self.viscosity > 0.0:
            raise ValueError(f"viscosity must be positive, got {self.viscosity}")
        if not self.surface_tension >= 0.0:
            raise ValueError(
                f"surface tension must not be negative, got {self.surface_tension}"
            )
        if not self.speed_of_sound > 0.0:
            raise ValueError(
                f"speed of sound must be positive, got {self.speed_of_sound}"
            )


GROUNDWATER = FluidMaterial(1000.0, 0.001, 0.073, 1500.0)
"""Fresh groundwater at about 15 °C."""

LAVA = FluidMaterial(2600.0, 100.0, 0.4, 2500.0)
"""Basaltic lava at about 1100 °C: dense and very viscous."""


class FlowRegime(Enum):
    """Flow regime from the Reynolds number."""

    LAMINAR = "laminar"
    TRANSITIONAL = "transitional"
    TURBULENT = "turbulent"


class TransportRegime(Enum):
    """Sediment transport regime from the Hjulström curve."""

    DEPOSITION = "deposition"
    TRANSPORT = "transport"
    EROSION = "erosion"


def brine(salinity_fraction: float) -> FluidMaterial:
    """Saline groundwater for a salt mass fraction in [0, 0.35]."""
    if not 0.0 <= salinity_fraction <= 0.35:
        raise ValueError(
            f"salinity fraction must be within 0-0.35, got {salinity_fraction}"
        )
    density = 1000.0 + 700.0 * salinity_fraction
    viscosity = 0.001 * (1.0 + 1.5 * salinity_fraction)
    return FluidMaterial(density, viscosity, 0.073, 1500.0)


def sediment_laden(sediment_fraction: float) -> FluidMaterial:
    """Sediment-laden flow for a suspended volume fraction in [0, 0.6]."""
    if not 0.0 <= sediment_fraction <= 0.6:
        raise ValueError(
            f"sediment fraction must be within 0-0.6, got {sediment_fraction}"
        )
    density = 1000.0 * (1.0 - sediment_fraction) + 2650.0 * sediment_fraction
    # Einstein viscosity for dilute suspensions.
    viscosity = 0.001 * (1.0 + 2.5 * sediment_fraction)
    return FluidMaterial(density, viscosity, 0.073, 1500.0)


def stokes_settling_velocity(
    grain_density: float,
    fluid_density: float,
    grain_diameter_m: float,
    fluid_viscosity: float,
    gravity: float,
) -> float:
    """Stokes terminal settling velocity in m/s (valid for Re < 1)."""
    delta_rho = grain_density - fluid_density
    return delta_rho * gravity * grain_diameter_m**2 / (18.0 * fluid_viscosity)


def _reynolds(density: float, velocity: float, length: float, viscosity: float) -> float:
    if not viscosity > 0.0:
        raise ValueError(f"viscosity must be positive, got {viscosity}")
    if not length > 0.0:
        raise ValueError(f"length scale must be positive, got {length}")
    if not density > 0.0:
        raise ValueError(f"density must be positive, got {density}")
    return density * abs(velocity) * length / viscosity


def grain_reynolds_number(
    fluid_density: float,
    velocity: float,
    grain_diameter_m: float,
    fluid_viscosity: float,
) -> float:
    """Reynolds number of flow around a grain."""
    return _reynolds(fluid_density, velocity, grain_diameter_m, fluid_viscosity)


def flow_regime(
    fluid_density: float,
    velocity: float,
    channel_depth_m: float,
    fluid_viscosity: float,
) -> FlowRegime:
    """Flow regime of a channel: laminar below Re 500, turbulent from Re 2000."""
    re = _reynolds(fluid_density, velocity, channel_depth_m, fluid_viscosity)
    if re < 500.0:
        return FlowRegime.LAMINAR
    if re < 2000.0:
        return FlowRegime.TRANSITIONAL
    return FlowRegime.TURBULENT


def buoyancy_force(fluid_density: float, gravity: float, displaced_volume: float) -> float:
    """Buoyant force in newtons on a submerged body."""
    return fluid_density * gravity * displaced_volume


def sediment_drag_force(
    fluid_density: float,
    velocity: float,
    drag_coefficient: float,
    cross_section_area: float,
) -> float:
    """Drag force in newtons on a grain moving through fluid."""
    return 0.5 * fluid_density * velocity**2 * drag_coefficient * cross_section_area


def terminal_velocity(
    mass: float,
    gravity: float,
    fluid_density: float,
    drag_coefficient: float,
    area: float,
) -> float:
    """Terminal velocity in m/s of a body falling through fluid."""
    denominator = fluid_density * drag_coefficient * area
    if not denominator > 0.0:
        raise ValueError("fluid density, drag coefficient and area must be positive")
    if mass < 0.0 or gravity < 0.0:
        raise ValueError("mass and gravity must not be negative")
    return math.sqrt(2.0 * mass * gravity / denominator)


def darcy_flow(hydraulic_conductivity: float, hydraulic_gradient: float, area: float) -> float:
    """Darcy volumetric flow rate in m³/s through porous rock."""
    return hydraulic_conductivity * hydraulic_gradient * area


@lru_cache(maxsize=1)
def _gauss_legendre() -> tuple[np.ndarray, np.ndarray]:
    return np.polynomial.legendre.leggauss(_GAUSS_POINTS)


def well_function(u: float) -> float:
    """Theis well function W(u), the exponential integral E₁(u); infinite for u <= 0."""
    if u <= 0.0:
        return math.inf
    # With t = e^s the integrand becomes exp(-e^s), smooth over the range.
    lo = math.log(u)
    hi = math.log(u + _WELL_TAIL)
    nodes, weights = _gauss_legendre()
    half = 0.5 * (hi - lo)
    s = half * nodes + 0.5 * (hi + lo)
    value = float(half * np.sum(weights * np.exp(-np.exp(s))))
    return max(value, 0.0)


def _invalid_aquifer(
    transmissivity: float, storativity: float, distance_m: float, time_seconds: float
) -> bool:
    return (
        transmissivity <= 0.0
        or storativity <= 0.0
        or time_seconds <= 0.0
        or distance_m <= 0.0
    )


def theis_drawdown(
    pumping_rate: float,
    transmissivity: float,
    storativity: float,
    distance_m: float,
    time_seconds: float,
) -> float:
    """Theis drawdown in metres at a distance from a pumping well; 0 for invalid inputs."""
    if _invalid_aquifer(transmissivity, storativity, distance_m, time_seconds):
        return 0.0
    u = distance_m**2 * storativity / (4.0 * transmissivity * time_seconds)
    return pumping_rate / (4.0 * math.pi * transmissivity) * well_function(u)


def cooper_jacob_drawdown(
    pumping_rate: float,
    transmissivity: float,
    storativity: float,
    distance_m: float,
    time_seconds: float,
) -> float:
    """Cooper-Jacob approximate drawdown in metres; 0 where it does not apply."""
    if _invalid_aquifer(transmissivity, storativity, distance_m, time_seconds):
        return 0.0
    arg = 2.25 * transmissivity * time_seconds / (distance_m**2 * storativity)
    if arg <= 1.0:
        return 0.0
    return pumping_rate / (4.0 * math.pi * transmissivity) * math.log(arg)


def radius_of_influence(transmissivity: float, storativity: float, time_seconds: float) -> float:
    """Radius in metres beyond which a pumping well causes about no drawdown."""
    return math.sqrt(2.25 * transmissivity * time_seconds / storativity)


def hjulstrom_erosion_velocity(grain_diameter_m: float) -> float:
    """Flow velocity in m/s needed to erode a grain (upper Hjulström curve)."""
    d = grain_diameter_m
    if d < 1e-6:
        return 5.0
    if d < 6.25e-5:
        return 0.1 * (6.25e-5 / d) ** 0.4
    return 4.0 * math.sqrt(d)


def hjulstrom_deposition_velocity(grain_diameter_m: float) -> float:
    """Flow velocity in m/s below which a grain settles (lower Hjulström curve)."""
    return max(1.6 * grain_diameter_m**0.8, 0.001)


def transport_regime(grain_diameter_m: float, flow_velocity: float) -> TransportRegime:
    """Whether a flow erodes, transports or deposits grains of a given size."""
    if flow_velocity >= hjulstrom_erosion_velocity(grain_diameter_m):
        return TransportRegime.EROSION
    if flow_velocity >= hjulstrom_deposition_velocity(grain_diameter_m):
        return TransportRegime.TRANSPORT
    return TransportRegime.DEPOSITION


def shields_parameter(
    shear_stress: float,
    grain_density: float,
    fluid_density: float,
    grain_diameter_m: float,
    gravity: float,
) -> float:
    """Dimensionless Shields parameter for incipient motion."""
    return shear_stress / ((grain_density - fluid_density) * gravity * grain_diameter_m)


def is_grain_mobile(
    shear_stress: float,
    grain_density: float,
    fluid_density: float,
    grain_diameter_m: float,
    gravity: float,
) -> bool:
    """True when the Shields parameter exceeds the critical value."""
    theta = shields_parameter(
        shear_stress, grain_density, fluid_density, grain_diameter_m, gravity
    )
    return theta > SHIELDS_CRITICAL