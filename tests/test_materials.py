import math

import pytest

from khanij.materials import (
    RockMaterial,
    basalt_material,
    gneiss_material,
    granite_material,
    limestone_material,
    marble_material,
    p_wave_at_temperature,
    p_wave_velocity,
    poisson_from_velocities,
    quartzite_material,
    s_wave_at_temperature,
    s_wave_velocity,
    sandstone_material,
    shale_material,
    time_to_weathering_failure,
    velocity_depth_profile,
    vp_vs_ratio,
    weathered_material,
)

ALL_PRESETS = [
    granite_material,
    basalt_material,
    limestone_material,
    sandstone_material,
    marble_material,
    shale_material,
    quartzite_material,
    gneiss_material,
]


def test_granite_vp_realistic():
    vp = p_wave_velocity(granite_material())
    assert 4000.0 < vp < 7000.0


def test_granite_vs_realistic():
    vs = s_wave_velocity(granite_material())
    assert 2500.0 < vs < 4000.0


@pytest.mark.parametrize("factory", ALL_PRESETS)
def test_vp_always_greater_than_vs(factory):
    mat = factory()
    assert p_wave_velocity(mat) > s_wave_velocity(mat)


def test_vp_vs_ratio_reasonable():
    ratio = vp_vs_ratio(granite_material())
    assert 1.5 < ratio < 2.5
    # Poisson ratio 0.25 gives Vp/Vs = √3.
    assert ratio == pytest.approx(math.sqrt(3.0), rel=1e-9)


def test_poisson_from_velocities_roundtrip():
    mat = granite_material()
    nu = poisson_from_velocities(p_wave_velocity(mat), s_wave_velocity(mat))
    assert abs(nu - mat.poisson_ratio) < 0.01


@pytest.mark.parametrize("vp, vs", [(5000.0, 0.0), (5000.0, -1.0), (1000.0, 2000.0)])
def test_poisson_from_velocities_invalid(vp, vs):
    with pytest.raises(ValueError):
        poisson_from_velocities(vp, vs)


def test_quartzite_stiffest_rock():
    materials = [
        granite_material(),
        basalt_material(),
        limestone_material(),
        sandstone_material(),
        marble_material(),
        shale_material(),
        quartzite_material(),
        gneiss_material(),
    ]
    stiffest = max(materials, key=lambda m: m.youngs_modulus)
    assert stiffest.name == "Quartzite"


@pytest.mark.parametrize(
    "factory, density",
    [
        (granite_material, 2700.0),
        (basalt_material, 3000.0),
        (limestone_material, 2500.0),
        (sandstone_material, 2300.0),
        (marble_material, 2700.0),
        (shale_material, 2400.0),
        (quartzite_material, 2650.0),
        (gneiss_material, 2700.0),
    ],
)
def test_preset_densities(factory, density):
    assert factory().density == pytest.approx(density)


def test_shear_modulus_below_youngs_modulus():
    materials = [
        granite_material(),
        basalt_material(),
        limestone_material(),
        sandstone_material(),
        marble_material(),
        shale_material(),
        quartzite_material(),
        gneiss_material(),
    ]
    for mat in materials:
        assert 0.0 < mat.shear_modulus() < mat.youngs_modulus, mat.name


def test_bulk_modulus_infinite_for_incompressible():
    mat = RockMaterial("Rubber", 1e6, 0.5, 1e6, 1e6, 1000.0, 1e-5)
    assert mat.bulk_modulus() == math.inf


def test_vp_decreases_with_temperature():
    mat = granite_material()
    assert p_wave_at_temperature(mat, 500.0, 20.0) < p_wave_at_temperature(mat, 20.0, 20.0)


def test_vs_decreases_with_temperature():
    mat = granite_material()
    assert s_wave_at_temperature(mat, 500.0, 20.0) < s_wave_at_temperature(mat, 20.0, 20.0)


def test_velocity_at_reference_temp_equals_base():
    mat = granite_material()
    assert abs(p_wave_velocity(mat) - p_wave_at_temperature(mat, 20.0, 20.0)) < 0.01


def test_velocity_never_below_half():
    mat = granite_material()
    assert p_wave_at_temperature(mat, 100_000.0, 20.0) == pytest.approx(
        0.5 * p_wave_velocity(mat)
    )
    assert s_wave_at_temperature(mat, 100_000.0, 20.0) == pytest.approx(
        0.5 * s_wave_velocity(mat)
    )


def test_velocity_depth_profile_length():
    profile = velocity_depth_profile(granite_material(), 15.0, 25.0, 30.0, 5)
    assert len(profile) == 6
    assert profile[0][0] == 0.0
    assert profile[-1][0] == pytest.approx(30.0)


def test_velocity_depth_profile_monotonic_decrease():
    profile = velocity_depth_profile(granite_material(), 15.0, 25.0, 30.0, 10)
    assert len(profile) == 11
    for upper, lower in zip(profile, profile[1:]):
        assert lower[1] <= upper[1]
        assert lower[2] <= upper[2]


def test_velocity_depth_profile_rejects_zero_steps():
    with pytest.raises(ValueError):
        velocity_depth_profile(granite_material(), 15.0, 25.0, 30.0, 0)


def test_weathered_granite_weaker():
    fresh = granite_material()
    degraded = weathered_material(fresh, 0.5)
    assert degraded.youngs_modulus < fresh.youngs_modulus
    assert degraded.yield_strength < fresh.yield_strength
    assert degraded.name == "Granite (weathered 50%)"


def test_fully_weathered_very_weak():
    fresh = granite_material()
    saprolite = weathered_material(fresh, 1.0)
    assert saprolite.youngs_modulus < fresh.youngs_modulus * 0.15
    assert saprolite.yield_strength < fresh.yield_strength * 0.10


def test_unweathered_unchanged():
    fresh = granite_material()
    same = weathered_material(fresh, 0.0)
    assert abs(same.youngs_modulus - fresh.youngs_modulus) < 1.0
    assert fresh.name == "Granite"


def test_weathering_fraction_clamped():
    fresh = granite_material()
    assert weathered_material(fresh, 2.0).youngs_modulus == pytest.approx(
        weathered_material(fresh, 1.0).youngs_modulus
    )


def test_time_to_failure_finite_at_depth():
    time = time_to_weathering_failure(granite_material(), 3000.0, 9.81, 1e-6)
    assert time is not None
    assert time > 0.0


def test_time_to_failure_none_for_shallow():
    assert time_to_weathering_failure(granite_material(), 100.0, 9.81, 1e-6) is None


def test_time_to_failure_zero_when_already_failed():
    assert time_to_weathering_failure(granite_material(), 10_000.0, 9.81, 1e-6) == 0.0


def test_time_to_failure_none_without_weathering():
    assert time_to_weathering_failure(granite_material(), 3000.0, 9.81, 0.0) is None


def test_faster_weathering_fails_sooner():
    slow = time_to_weathering_failure(granite_material(), 3000.0, 9.81, 1e-6)
    fast = time_to_weathering_failure(granite_material(), 3000.0, 9.81, 1e-5)
    assert fast < slow