"""Sediment budget: source-to-sink mass balance of production, transport and deposition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

GRAIN_CLASSES: tuple[str, ...] = ("clay", "silt", "fine_sand", "coarse_sand", "gravel")
"""Grain size class names."""

GRAIN_DIAMETERS: tuple[float, ...] = (0.000_005, 0.000_03, 0.000_2, 0.001, 0.01)
"""Representative grain diameters in metres, one per class."""

_SECONDS_PER_YEAR = 365.25 * 86400.0


@dataclass
class SedimentSource:
    """Where sediment is produced; ``production_rate`` is in tonnes/year.

    ``grain_fractions`` gives the fraction in each of the five grain classes.
    """

    name: str
    production_rate: float
    grain_fractions: tuple[float, float, float, float, float]

    def __post_init__(self) -> None:
        self.grain_fractions = tuple(self.grain_fractions)
        if len(self.grain_fractions) != len(GRAIN_CLASSES):
            raise ValueError(
                f"grain_fractions needs {len(GRAIN_CLASSES)} values, "
                f"got {len(self.grain_fractions)}"
            )


@dataclass
class SedimentSink:
    """Where sediment accumulates; capacity in tonnes/year, accumulated in tonnes."""

    name: str
    capacity: float
    accumulated: float = 0.0


@dataclass(frozen=True)
class BudgetResult:
    """Sediment budget for one time step, all in tonnes."""

    total_production: float
    total_deposition: float
    total_export: float
    net_change: float


def sediment_production(
    weathering_rate: float,
    rock_density: float,
    area_m2: float,
    depth_m_per_year: float,
) -> float:
    """Sediment production in tonnes/year from a relative weathering rate."""
    return weathering_rate * rock_density * area_m2 * depth_m_per_year / 1000.0


def transport_capacity(
    discharge_m3_s: float, slope: float, k: float, a: float, b: float
) -> float:
    """Stream-power transport capacity ``k·Q^a·S^b`` converted to tonnes/year."""
    rate_kg_s = k * discharge_m3_s**a * slope**b
    return rate_kg_s * _SECONDS_PER_YEAR / 1000.0


def compute_budget(
    sources: Iterable[SedimentSource],
    transport_cap: float,
    sinks: Iterable[SedimentSink],
) -> BudgetResult:
    """Budget for one time step: production limited by transport, then by sinks."""
    total_production = sum(source.production_rate for source in sources)
    transportable = min(total_production, transport_cap)
    total_sink_capacity = sum(sink.capacity for sink in sinks)
    total_deposition = min(transportable, total_sink_capacity)
    total_export = transportable - total_deposition
    return BudgetResult(
        total_production=total_production,
        total_deposition=total_deposition,
        total_export=total_export,
        net_change=total_production - total_deposition - total_export,
    )


def sediment_delivery_ratio(catchment_area_km2: float) -> float:
    """Fraction of eroded sediment reaching a sink: ``0.42·A^-0.125``, in [0, 1]."""
    if catchment_area_km2 <= 0.0:
        return 1.0
    return min(max(0.42 * catchment_area_km2**-0.125, 0.0), 1.0)


def denudation_rate(
    sediment_export_tonnes_yr: float,
    catchment_area_m2: float,
    rock_density: float,
) -> float:
    """Average surface lowering in mm/year from annual sediment export."""
    if catchment_area_m2 <= 0.0 or rock_density <= 0.0:
        return 0.0
    volume_m3 = sediment_export_tonnes_yr * 1000.0 / rock_density
    return volume_m3 / catchment_area_m2 * 1000.0