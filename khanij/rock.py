"""Rocks, the rock cycle and density/porosity relations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class RockType(Enum):
    """Rock classification by formation process."""

    IGNEOUS = "igneous"
    SEDIMENTARY = "sedimentary"
    METAMORPHIC = "metamorphic"


class GeologicalProcess(Enum):
    """Process that drives a rock cycle transition."""

    WEATHERING = "weathering"
    METAMORPHISM = "metamorphism"
    MELTING = "melting"


@dataclass
class Rock:
    """A rock; density is in g/cm³ and porosity is a fraction in [0, 1]."""

    name: str
    rock_type: RockType
    density: float
    porosity: float
    primary_minerals: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.density > 0.0:
            raise ValueError(f"density must be positive, got {self.density}")
        if not 0.0 <= self.porosity <= 1.0:
            raise ValueError(f"porosity must be within 0-1, got {self.porosity}")

    @classmethod
    def granite(cls) -> Rock:
        return cls("Granite", RockType.IGNEOUS, 2.7, 0.01, ["Quartz", "Feldspar", "Mica"])

    @classmethod
    def sandstone(cls) -> Rock:
        return cls("Sandstone", RockType.SEDIMENTARY, 2.3, 0.15, ["Quartz"])

    @classmethod
    def marble(cls) -> Rock:
        return cls("Marble", RockType.METAMORPHIC, 2.7, 0.005, ["Calcite"])

    @classmethod
    def basalt(cls) -> Rock:
        return cls("Basalt", RockType.IGNEOUS, 3.0, 0.01, ["Feldspar", "Pyroxene"])

    @classmethod
    def obsidian(cls) -> Rock:
        return cls("Obsidian", RockType.IGNEOUS, 2.35, 0.001, ["Volcanic glass"])

    @classmethod
    def rhyolite(cls) -> Rock:
        return cls("Rhyolite", RockType.IGNEOUS, 2.5, 0.05, ["Quartz", "Feldspar"])

    @classmethod
    def limestone(cls) -> Rock:
        return cls("Limestone", RockType.SEDIMENTARY, 2.5, 0.10, ["Calcite"])

    @classmethod
    def shale(cls) -> Rock:
        return cls("Shale", RockType.SEDIMENTARY, 2.4, 0.05, ["Clay minerals", "Quartz"])

    @classmethod
    def conglomerate(cls) -> Rock:
        return cls("Conglomerate", RockType.SEDIMENTARY, 2.5, 0.12, ["Quartz", "Feldspar"])

    @classmethod
    def slate(cls) -> Rock:
        return cls("Slate", RockType.METAMORPHIC, 2.75, 0.005, ["Quartz", "Muscovite"])

    @classmethod
    def gneiss(cls) -> Rock:
        return cls("Gneiss", RockType.METAMORPHIC, 2.7, 0.005, ["Feldspar", "Quartz", "Mica"])

    @classmethod
    def quartzite(cls) -> Rock:
        return cls("Quartzite", RockType.METAMORPHIC, 2.65, 0.005, ["Quartz"])

    @classmethod
    def schist(cls) -> Rock:
        return cls("Schist", RockType.METAMORPHIC, 2.65, 0.01, ["Mica", "Quartz", "Feldspar"])


def bulk_density(grain_density: float, porosity: float, fluid_density: float) -> float:
    """Bulk density from grain density, porosity and pore-fluid density (g/cm³)."""
    return grain_density * (1.0 - porosity) + fluid_density * porosity


def bulk_density_from_minerals(
    minerals: Iterable[tuple[float, float]], porosity: float, fluid_density: float
) -> float:
    """Bulk density of a mix given ``(density, volume_fraction)`` pairs."""
    grain_density = sum(density * fraction for density, fraction in minerals)
    return bulk_density(grain_density, porosity, fluid_density)


def porosity_from_density(bulk_density: float, grain_density: float) -> float:
    """Porosity from bulk and grain density, assuming air-filled pores."""
    if grain_density <= 0.0:
        return 0.0
    return min(max(1.0 - bulk_density / grain_density, 0.0), 1.0)


_TRANSITIONS: dict[tuple[RockType, GeologicalProcess], RockType] = {
    (RockType.IGNEOUS, GeologicalProcess.WEATHERING): RockType.SEDIMENTARY,
    (RockType.SEDIMENTARY, GeologicalProcess.METAMORPHISM): RockType.METAMORPHIC,
    (RockType.METAMORPHIC, GeologicalProcess.MELTING): RockType.IGNEOUS,
    (RockType.IGNEOUS, GeologicalProcess.METAMORPHISM): RockType.METAMORPHIC,
    (RockType.SEDIMENTARY, GeologicalProcess.MELTING): RockType.IGNEOUS,
    (RockType.METAMORPHIC, GeologicalProcess.WEATHERING): RockType.SEDIMENTARY,
}


def rock_cycle_next(rock_type: RockType, process: GeologicalProcess) -> RockType | None:
    """The rock type a process turns ``rock_type`` into, or None if it does not apply."""
    return _TRANSITIONS.get((rock_type, process))