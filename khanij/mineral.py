"""Minerals, their Mohs hardness and physical properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_MOHS_MIN = 1.0
_MOHS_MAX = 10.0


class CrystalSystem(Enum):
    """The seven crystal systems."""

    CUBIC = "cubic"
    TETRAGONAL = "tetragonal"
    ORTHORHOMBIC = "orthorhombic"
    HEXAGONAL = "hexagonal"
    TRIGONAL = "trigonal"
    MONOCLINIC = "monoclinic"
    TRICLINIC = "triclinic"


class Luster(Enum):
    """Mineral luster classification."""

    METALLIC = "metallic"
    VITREOUS = "vitreous"
    PEARLY = "pearly"
    SILKY = "silky"
    RESINOUS = "resinous"
    ADAMANTINE = "adamantine"
    WAXY = "waxy"
    EARTHY = "earthy"
    DULL = "dull"


def _vickers(mohs: float) -> float:
    # Cubic fit for Mohs 1-9.5; exponential segment captures the
    # corundum-diamond jump.
    if mohs >= 9.5:
        return 2060.0 * math_exp((mohs - 9.0) * 1.57)
    return 3.24 * mohs**3 - 18.2 * mohs**2 + 90.3 * mohs - 50.0


def math_exp(x: float) -> float:
    """Exponential, kept separate so the fit reads like its formula."""
    import math

    return math.exp(x)


def _bisect(func, lo: float, hi: float, tol: float, max_iter: int) -> float:
    f_lo = func(lo)
    f_hi = func(hi)
    if f_lo == 0.0:
        return lo
    if f_hi == 0.0:
        return hi
    if f_lo * f_hi > 0.0:
        raise ValueError("root is not bracketed by the interval")
    mid = lo
    for _ in range(max_iter):
        mid = 0.5 * (lo + hi)
        f_mid = func(mid)
        if f_mid == 0.0 or 0.5 * (hi - lo) < tol:
            return mid
        if f_lo * f_mid < 0.0:
            hi = mid
        else:
            lo, f_lo = mid, f_mid
    raise ValueError("bisection did not converge")


@dataclass(frozen=True, order=True)
class MohsHardness:
    """A hardness on the Mohs scale, between 1 and 10 inclusive."""

    value: float

    def __post_init__(self) -> None:
        if not _MOHS_MIN <= self.value <= _MOHS_MAX:
            raise ValueError(
                f"Mohs hardness must be within {_MOHS_MIN}-{_MOHS_MAX}, got {self.value}"
            )

    def scratches(self, other: MohsHardness) -> bool:
        """True when this hardness can scratch ``other``."""
        return self.value > other.value

    def to_vickers(self) -> float:
        """Approximate Vickers hardness (HV)."""
        return _vickers(self.value)

    def to_knoop(self) -> float:
        """Approximate Knoop hardness (HK), about 1.05 times Vickers."""
        return self.to_vickers() * 1.05

    @classmethod
    def from_vickers(cls, hv: float) -> MohsHardness:
        """Approximate Mohs hardness for a Vickers value, within about 0.1."""
        if not hv > 0.0:
            raise ValueError(f"Vickers hardness must be positive, got {hv}")
        mohs = _bisect(lambda m: _vickers(m) - hv, _MOHS_MIN, _MOHS_MAX, 1e-4, 50)
        return cls(mohs)


@dataclass
class Mineral:
    """A mineral with physical properties; density is in g/cm³."""

    name: str
    formula: str
    hardness: MohsHardness
    density: float
    crystal_system: CrystalSystem
    luster: Luster
    color: str

    @classmethod
    def quartz(cls) -> Mineral:
        return cls("Quartz", "SiO₂", MohsHardness(7.0), 2.65,
                   CrystalSystem.HEXAGONAL, Luster.VITREOUS, "colorless/white")

    @classmethod
    def feldspar(cls) -> Mineral:
        return cls("Feldspar", "KAlSi₃O₈", MohsHardness(6.0), 2.56,
                   CrystalSystem.MONOCLINIC, Luster.VITREOUS, "white/pink")

    @classmethod
    def calcite(cls) -> Mineral:
        return cls("Calcite", "CaCO₃", MohsHardness(3.0), 2.71,
                   CrystalSystem.HEXAGONAL, Luster.VITREOUS, "white/colorless")

    @classmethod
    def diamond(cls) -> Mineral:
        return cls("Diamond", "C", MohsHardness(10.0), 3.52,
                   CrystalSystem.CUBIC, Luster.ADAMANTINE, "colorless")

    @classmethod
    def talc(cls) -> Mineral:
        return cls("Talc", "Mg₃Si₄O₁₀(OH)₂", MohsHardness(1.0), 2.75,
                   CrystalSystem.MONOCLINIC, Luster.PEARLY, "white/green")

    @classmethod
    def olivine(cls) -> Mineral:
        return cls("Olivine", "(Mg,Fe)₂SiO₄", MohsHardness(6.5), 3.30,
                   CrystalSystem.ORTHORHOMBIC, Luster.VITREOUS, "green")

    @classmethod
    def pyrite(cls) -> Mineral:
        return cls("Pyrite", "FeS₂", MohsHardness(6.0), 5.01,
                   CrystalSystem.CUBIC, Luster.METALLIC, "brass-yellow")

    @classmethod
    def magnetite(cls) -> Mineral:
        return cls("Magnetite", "Fe₃O₄", MohsHardness(5.5), 5.17,
                   CrystalSystem.CUBIC, Luster.METALLIC, "black")

    @classmethod
    def halite(cls) -> Mineral:
        return cls("Halite", "NaCl", MohsHardness(2.5), 2.17,
                   CrystalSystem.CUBIC, Luster.VITREOUS, "colorless/white")

    @classmethod
    def gypsum(cls) -> Mineral:
        return cls("Gypsum", "CaSO₄·2H₂O", MohsHardness(2.0), 2.31,
                   CrystalSystem.MONOCLINIC, Luster.VITREOUS, "white/colorless")

    @classmethod
    def muscovite(cls) -> Mineral:
        return cls("Muscovite", "KAl₂(AlSi₃O₁₀)(OH)₂", MohsHardness(2.5), 2.82,
                   CrystalSystem.MONOCLINIC, Luster.VITREOUS, "colorless/silver")

    @classmethod
    def fluorite(cls) -> Mineral:
        return cls("Fluorite", "CaF₂", MohsHardness(4.0), 3.18,
                   CrystalSystem.CUBIC, Luster.VITREOUS, "purple/green/yellow")

    @classmethod
    def apatite(cls) -> Mineral:
        return cls("Apatite", "Ca₅(PO₄)₃(F,Cl,OH)", MohsHardness(5.0), 3.19,
                   CrystalSystem.HEXAGONAL, Luster.VITREOUS, "green/blue")

    @classmethod
    def corundum(cls) -> Mineral:
        return cls("Corundum", "Al₂O₃", MohsHardness(9.0), 4.02,
                   CrystalSystem.HEXAGONAL, Luster.ADAMANTINE, "varies")

    @classmethod
    def topaz(cls) -> Mineral:
        return cls("Topaz", "Al₂SiO₄(F,OH)₂", MohsHardness(8.0), 3.53,
                   CrystalSystem.ORTHORHOMBIC, Luster.VITREOUS, "colorless/yellow/blue")