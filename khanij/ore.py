"""Ore deposits, tonnage-grade curves and simple mining economics."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

_EPSILON = sys.float_info.epsilon
_INTEGRATION_INTERVALS = 50


class DepositType(Enum):
    """Ore deposit type."""

    VEIN = "vein"
    PLACER = "placer"
    MASSIVE = "massive"
    DISSEMINATED = "disseminated"
    SKARN = "skarn"
    PORPHYRY = "porphyry"


class ResourceCategory(IntEnum):
    """Resource confidence classification, ordered from least to most confident."""

    INFERRED = 1
    INDICATED = 2
    MEASURED = 3


@dataclass
class OreDeposit:
    """An ore deposit.

    ``grade`` is a fraction in [0, 1], ``depth_m`` a positive depth in metres
    and ``tonnage`` a positive mass in metric tonnes.
    """

    mineral: str
    deposit_type: DepositType
    grade: float
    depth_m: float
    tonnage: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.grade <= 1.0:
            raise ValueError(f"grade must be within 0-1, got {self.grade}")
        if not self.depth_m > 0.0:
            raise ValueError(f"depth must be positive, got {self.depth_m}")
        if not self.tonnage > 0.0:
            raise ValueError(f"tonnage must be positive, got {self.tonnage}")

    def contained_metal(self) -> float:
        """Contained metal in tonnes (grade × tonnage)."""
        return self.grade * self.tonnage

    def gross_revenue(self, price_per_tonne: float) -> float:
        """Revenue estimate: contained metal × price."""
        return self.contained_metal() * price_per_tonne

    def stripping_ratio(self) -> float:
        """Approximate waste-to-ore ratio, growing linearly with depth."""
        return max(self.depth_m / 50.0, 1.0)

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-ready representation."""
        return {
            "mineral": self.mineral,
            "deposit_type": self.deposit_type.value,
            "grade": self.grade,
            "depth_m": self.depth_m,
            "tonnage": self.tonnage,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OreDeposit:
        """Rebuild a deposit from :meth:`to_dict` output."""
        try:
            return cls(
                mineral=str(data["mineral"]),
                deposit_type=DepositType(data["deposit_type"]),
                grade=float(data["grade"]),
                depth_m=float(data["depth_m"]),
                tonnage=float(data["tonnage"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc


@dataclass(frozen=True)
class TonnageGradePoint:
    """Tonnage and average grade above one cutoff grade."""

    cutoff_grade: float
    tonnage_above_cutoff: float
    average_grade_above_cutoff: float


def tonnage_grade_curve(
    blocks: Iterable[tuple[float, float]], cutoff_steps: int
) -> list[TonnageGradePoint]:
    """Tonnage-grade curve over ``(tonnage, grade)`` blocks.

    Evaluates ``cutoff_steps + 1`` cutoffs evenly spaced from the lowest to
    the highest block grade, lowest first.
    """
    blocks = list(blocks)
    if not blocks or cutoff_steps == 0:
        return []

    grades = [grade for _, grade in blocks]
    min_grade, max_grade = min(grades), max(grades)

    if abs(max_grade - min_grade) < _EPSILON:
        total = sum(tonnage for tonnage, _ in blocks)
        return [TonnageGradePoint(min_grade, total, min_grade)]

    step = (max_grade - min_grade) / cutoff_steps
    curve = []
    for i in range(cutoff_steps + 1):
        cutoff = min_grade + step * i
        above = [(t, g) for t, g in blocks if g >= cutoff]
        total = sum(t for t, _ in above)
        weighted = sum(t * g for t, g in above)
        average = weighted / total if total > 0.0 else 0.0
        curve.append(TonnageGradePoint(cutoff, total, average))
    return curve


def cutoff_grade(price_per_tonne: float, cost_per_tonne: float, recovery: float) -> float:
    """Grade at which ``grade × price × recovery`` equals the cost per tonne of ore.

    Raises ValueError for a non-positive price, a recovery outside (0, 1],
    or when the deposit is uneconomic at any grade.
    """
    if price_per_tonne <= 0.0:
        raise ValueError(f"price must be positive, got {price_per_tonne}")
    if not 0.0 < recovery <= 1.0:
        raise ValueError(f"recovery must be within (0, 1], got {recovery}")
    cog = cost_per_tonne / (price_per_tonne * recovery)
    if cog > 1.0:
        raise ValueError("uneconomic at any grade")
    return cog


def _simpson(func: Callable[[float], float], lo: float, hi: float, intervals: int) -> float:
    if intervals <= 0 or intervals % 2:
        raise ValueError("Simpson's rule needs a positive even number of intervals")
    h = (hi - lo) / intervals
    total = func(lo) + func(hi)
    for i in range(1, intervals):
        total += (4.0 if i % 2 else 2.0) * func(lo + i * h)
    return total * h / 3.0


def is_economically_viable(
    grade: float, tonnage: float, price_per_tonne: float, extraction_cost: float
) -> bool:
    """True when revenue integrated over tonnage, with diminishing returns, beats the cost."""
    if tonnage == 0.0:
        return 0.0 > extraction_cost
    revenue = _simpson(
        lambda t: grade * price_per_tonne * math.exp(-0.0001 * t / tonnage),
        0.0,
        tonnage,
        _INTEGRATION_INTERVALS,
    )
    return revenue > extraction_cost


def net_present_value(
    annual_revenue: float, annual_cost: float, discount_rate: float, years: float
) -> float:
    """Continuously discounted NPV of a constant net annual cash flow."""
    if discount_rate < 0.0:
        raise ValueError(f"discount rate must not be negative, got {discount_rate}")
    if years <= 0.0:
        raise ValueError(f"mine life must be positive, got {years}")
    net_annual = annual_revenue - annual_cost
    return _simpson(
        lambda t: net_annual * math.exp(-discount_rate * t),
        0.0,
        years,
        _INTEGRATION_INTERVALS,
    )