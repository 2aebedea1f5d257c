"""Shared result models for splice limit-state and detailing checks."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Literal

from ..materials import DesignMethod

Bound = Literal["min", "max"]


@dataclass(frozen=True)
class Strength:
    """Nominal strength `Rn` with its resistance (phi) and safety (omega) factors."""

    Rn: float
    phi: float
    omega: float
    details: dict[str, Any] = field(default_factory=dict)

    def design(self, method: DesignMethod) -> float:
        if method is DesignMethod.LRFD:
            return self.phi * self.Rn
        return self.Rn / self.omega if self.omega > 0.0 else 0.0


@dataclass(frozen=True)
class LimitStateResult:
    name: str
    demand: float
    Rn: float
    phi: float
    omega: float
    design_method: DesignMethod
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_strength(
        cls,
        name: str,
        demand: float,
        strength: Strength,
        method: DesignMethod,
        **details: Any,
    ) -> "LimitStateResult":
        return cls(
            name=name,
            demand=float(demand),
            Rn=strength.Rn,
            phi=strength.phi,
            omega=strength.omega,
            design_method=method,
            details={**strength.details, **details},
        )

    @property
    def design_capacity(self) -> float:
        return Strength(self.Rn, self.phi, self.omega).design(self.design_method)

    @property
    def ratio(self) -> float:
        capacity = self.design_capacity
        if capacity <= 0.0:
            return math.inf
        return abs(self.demand) / capacity

    @property
    def passed(self) -> bool:
        return self.design_capacity > 0.0 and self.ratio <= 1.0

    @property
    def info(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "demand": self.demand,
            "Rn": self.Rn,
            "phi": self.phi,
            "omega": self.omega,
            "design_method": self.design_method.value,
            "design_capacity": self.design_capacity,
            "ratio": self.ratio,
            "passed": self.passed,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class GeometryCheckResult:
    actual: float
    limit: float
    bound: Bound

    @property
    def passed(self) -> bool:
        if self.bound == "min":
            return self.actual >= self.limit
        return self.actual <= self.limit

    @property
    def info(self) -> dict[str, Any]:
        return {"actual": self.actual, "limit": self.limit, "bound": self.bound, "passed": self.passed}


def get_governing(checks: dict[str, LimitStateResult]) -> tuple[str | None, float]:
    """Return (key, ratio) for the limit state with the highest ratio."""
    if not checks:
        return None, 0.0
    key, check = max(checks.items(), key=lambda item: item[1].ratio)
    return key, check.ratio


__all__ = ["Strength", "LimitStateResult", "GeometryCheckResult", "get_governing"]
