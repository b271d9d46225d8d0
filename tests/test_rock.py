import pytest

from khanij.rock import (
    GeologicalProcess,
    Rock,
    RockType,
    bulk_density,
    bulk_density_from_minerals,
    porosity_from_density,
    rock_cycle_next,
)


def test_rock_cycle_complete():
    sed = rock_cycle_next(RockType.IGNEOUS, GeologicalProcess.WEATHERING)
    assert sed is RockType.SEDIMENTARY
    meta = rock_cycle_next(sed, GeologicalProcess.METAMORPHISM)
    assert meta is RockType.METAMORPHIC
    back = rock_cycle_next(meta, GeologicalProcess.MELTING)
    assert back is RockType.IGNEOUS


@pytest.mark.parametrize(
    "start, process, expected",
    [
        (RockType.IGNEOUS, GeologicalProcess.METAMORPHISM, RockType.METAMORPHIC),
        (RockType.SEDIMENTARY, GeologicalProcess.MELTING, RockType.IGNEOUS),
        (RockType.METAMORPHIC, GeologicalProcess.WEATHERING, RockType.SEDIMENTARY),
    ],
)
def test_rock_cycle_shortcuts(start, process, expected):
    assert rock_cycle_next(start, process) is expected


def test_invalid_process_returns_none():
    assert rock_cycle_next(RockType.IGNEOUS, GeologicalProcess.MELTING) is None
    assert rock_cycle_next(RockType.SEDIMENTARY, GeologicalProcess.WEATHERING) is None


def test_granite_is_igneous():
    granite = Rock.granite()
    assert granite.rock_type is RockType.IGNEOUS
    assert granite.name == "Granite"
    assert granite.density == pytest.approx(2.7)
    assert "Quartz" in granite.primary_minerals


def test_marble_is_metamorphic():
    assert Rock.marble().rock_type is RockType.METAMORPHIC


@pytest.mark.parametrize(
    "factory",
    [
        Rock.granite, Rock.sandstone, Rock.marble, Rock.basalt, Rock.obsidian,
        Rock.rhyolite, Rock.limestone, Rock.shale, Rock.conglomerate, Rock.slate,
        Rock.gneiss, Rock.quartzite, Rock.schist,
    ],
)
def test_presets_valid(factory):
    rock = factory()
    assert 0.0 <= rock.porosity <= 1.0
    assert rock.density > 0.0
    assert rock.primary_minerals


def test_validated_rock_rejects_bad_density():
    with pytest.raises(ValueError):
        Rock("Bad", RockType.IGNEOUS, -1.0, 0.5, [])
    with pytest.raises(ValueError):
        Rock("Bad", RockType.IGNEOUS, 0.0, 0.5, [])


def test_validated_rock_rejects_bad_porosity():
    with pytest.raises(ValueError):
        Rock("Bad", RockType.IGNEOUS, 2.5, -0.1, [])
    with pytest.raises(ValueError):
        Rock("Bad", RockType.IGNEOUS, 2.5, 1.1, [])


def test_validated_rock_accepts_valid():
    rock = Rock("Good", RockType.SEDIMENTARY, 2.3, 0.15, ["Quartz"])
    assert rock.name == "Good"
    assert rock.primary_minerals == ["Quartz"]


def test_bulk_density_no_porosity():
    assert bulk_density(2.65, 0.0, 1.0) == pytest.approx(2.65, abs=0.01)


def test_bulk_density_with_water():
    assert bulk_density(2.65, 0.15, 1.0) == pytest.approx(2.4025, abs=0.01)


def test_bulk_density_from_mineral_mix():
    minerals = [(2.65, 0.30), (2.56, 0.60), (2.82, 0.10)]
    bd = bulk_density_from_minerals(minerals, 0.01, 0.001)
    assert 2.5 < bd < 2.7


def test_bulk_density_from_mineral_mix_water():
    minerals = [(2.65, 0.30), (2.56, 0.60), (2.82, 0.10)]
    bd = bulk_density_from_minerals(iter(minerals), 0.01, 1.0)
    assert 2.5 < bd < 2.7


def test_porosity_from_density_example():
    assert porosity_from_density(2.25, 2.65) == pytest.approx(0.151, abs=0.01)


def test_porosity_from_density_roundtrip():
    grain, phi = 2.65, 0.15
    bd = bulk_density(grain, phi, 0.001)
    assert porosity_from_density(bd, grain) == pytest.approx(phi, abs=0.01)


def test_porosity_from_density_clamped_and_guarded():
    assert porosity_from_density(3.0, 2.65) == 0.0
    assert porosity_from_density(2.0, 0.0) == 0.0
    assert porosity_from_density(-1.0, 2.0) == 1.0