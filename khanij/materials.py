"""Rock elastic properties, seismic velocities and weathering degradation."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

_VP_TEMPERATURE_COEFF = 0.0004
_VS_TEMPERATURE_COEFF = 0.0005
_MIN_VELOCITY_FACTOR = 0.5


@dataclass(frozen=True)
class RockMaterial:
    """Elastic and thermal properties of a rock.

    Moduli and strengths are in Pa, density in kg/m³ and thermal
    expansion in 1/K.
    """

    name: str
    youngs_modulus: float
    poisson_ratio: float
    yield_strength: float
    ultimate_tensile_strength: float
    density: float
    thermal_expansion: float

    def bulk_modulus(self) -> float:
        """Bulk modulus K = E / (3(1 - 2ν)) in Pa."""
        denominator = 3.0 * (1.0 - 2.0 * self.poisson_ratio)
        if denominator <= 0.0:
            return math.inf
        return self.youngs_modulus / denominator

    def shear_modulus(self) -> float:
        """Shear modulus G = E / (2(1 + ν)) in Pa."""
        return self.youngs_modulus / (2.0 * (1.0 + self.poisson_ratio))


def granite_material() -> RockMaterial:
    """Typical granite."""
    return RockMaterial("Granite", 50e9, 0.25, 150e6, 170e6, 2700.0, 8e-6)


def basalt_material() -> RockMaterial:
    """Typical basalt."""
    return RockMaterial("Basalt", 70e9, 0.27, 200e6, 250e6, 3000.0, 6e-6)


def limestone_material() -> RockMaterial:
    """Typical limestone."""
    return RockMaterial("Limestone", 30e9, 0.30, 60e6, 80e6, 2500.0, 8e-6)


def sandstone_material() -> RockMaterial:
    """Typical sandstone."""
    return RockMaterial("Sandstone", 15e9, 0.20, 40e6, 50e6, 2300.0, 11e-6)


def marble_material() -> RockMaterial:
    """Typical marble."""
    return RockMaterial("Marble", 55e9, 0.25, 80e6, 100e6, 2700.0, 7e-6)


def shale_material() -> RockMaterial:
    """Typical shale."""
    return RockMaterial("Shale", 10e9, 0.25, 30e6, 40e6, 2400.0, 10e-6)


def quartzite_material() -> RockMaterial:
    """Typical quartzite."""
    return RockMaterial("Quartzite", 80e9, 0.15, 250e6, 300e6, 2650.0, 12e-6)


def gneiss_material() -> RockMaterial:
    """Typical gneiss."""
    return RockMaterial("Gneiss", 60e9, 0.25, 160e6, 200e6, 2700.0, 7e-6)


def p_wave_velocity(material: RockMaterial) -> float:
    """Compressional wave velocity √((K + 4G/3)/ρ) in m/s."""
    k = material.bulk_modulus()
    g = material.shear_modulus()
    return math.sqrt((k + 4.0 * g / 3.0) / material.density)


def s_wave_velocity(material: RockMaterial) -> float:
    """Shear wave velocity √(G/ρ) in m/s."""
    return math.sqrt(material.shear_modulus() / material.density)


def vp_vs_ratio(material: RockMaterial) -> float:
    """Vp/Vs ratio; infinite when the shear velocity is zero."""
    vs = s_wave_velocity(material)
    if vs > 0.0:
        return p_wave_velocity(material) / vs
    return math.inf


def poisson_from_velocities(vp: float, vs: float) -> float:
    """Poisson's ratio (R² - 2) / (2(R² - 1)) with R = Vp/Vs.

    Raises ValueError when Vs is not positive or Vp does not exceed Vs.
    """
    if vs <= 0.0:
        raise ValueError(f"shear velocity must be positive, got {vs}")
    r2 = (vp / vs) ** 2
    if r2 <= 1.0:
        raise ValueError("compressional velocity must exceed shear velocity")
    return (r2 - 2.0) / (2.0 * (r2 - 1.0))


def _temperature_factor(coeff: float, temperature_c: float, reference_temp_c: float) -> float:
    return max(1.0 - coeff * (temperature_c - reference_temp_c), _MIN_VELOCITY_FACTOR)


def p_wave_at_temperature(
    material: RockMaterial, temperature_c: float, reference_temp_c: float
) -> float:
    """P-wave velocity softened by temperature, never below half the reference."""
    factor = _temperature_factor(_VP_TEMPERATURE_COEFF, temperature_c, reference_temp_c)
    return p_wave_velocity(material) * factor


def s_wave_at_temperature(
    material: RockMaterial, temperature_c: float, reference_temp_c: float
) -> float:
    """S-wave velocity softened by temperature, never below half the reference."""
    factor = _temperature_factor(_VS_TEMPERATURE_COEFF, temperature_c, reference_temp_c)
    return s_wave_velocity(material) * factor


def velocity_depth_profile(
    material: RockMaterial,
    surface_temp_c: float,
    gradient_c_per_km: float,
    max_depth_km: float,
    steps: int,
) -> list[tuple[float, float, float]]:
    """``(depth_km, vp, vs)`` at ``steps + 1`` evenly spaced depths from the surface."""
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    step_size = max_depth_km / steps
    profile = []
    for i in range(steps + 1):
        depth = step_size * i
        temp = surface_temp_c + gradient_c_per_km * depth
        profile.append(
            (
                depth,
                p_wave_at_temperature(material, temp, surface_temp_c),
                s_wave_at_temperature(material, temp, surface_temp_c),
            )
        )
    return profile


def weathered_material(material: RockMaterial, weathering_fraction: float) -> RockMaterial:
    """Degraded properties for a weathered fraction (0 fresh, 1 fully weathered)."""
    w = min(max(weathering_fraction, 0.0), 1.0)
    return replace(
        material,
        name=f"{material.name} (weathered {w * 100.0:.0f}%)",
        youngs_modulus=material.youngs_modulus * (1.0 - 0.9 * w),
        poisson_ratio=material.poisson_ratio * (1.0 + 0.3 * w),
        yield_strength=material.yield_strength * (1.0 - 0.95 * w),
        ultimate_tensile_strength=material.ultimate_tensile_strength * (1.0 - 0.95 * w),
        density=material.density * (1.0 - 0.15 * w),
        thermal_expansion=material.thermal_expansion * (1.0 + 0.5 * w),
    )


def time_to_weathering_failure(
    material: RockMaterial, depth_m: float, gravity: float, weathering_rate: float
) -> float | None:
    """Years of weathering until rock fails under lithostatic load at a depth.

    Returns 0.0 when it already fails, and None when it never does.
    """
    if weathering_rate <= 0.0:
        return None
    stress = material.density * gravity * depth_m
    w_fail = (1.0 - stress / material.yield_strength) / 0.95
    if w_fail <= 0.0:
        return 0.0
    if w_fail >= 1.0:
        return None
    return w_fail / weathering_rate