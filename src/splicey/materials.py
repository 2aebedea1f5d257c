"""
Reference data for AISC 360-22 splice checks.

Bolt grade stresses, hole oversizes and minimum edge distances. Units are
US customary (ksi, in) throughout.
"""

from __future__ import annotations

from enum import Enum
import math
from types import MappingProxyType
from typing import Mapping

from loguru import logger


class DesignMethod(str, Enum):
    """LRFD (strength design, phi * Rn) or ASD (allowable stress, Rn / Omega)."""

    LRFD = "LRFD"
    ASD = "ASD"

    @classmethod
    def parse(cls, value: "DesignMethod | str") -> "DesignMethod":
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        aliases = {"STRENGTH": cls.LRFD, "STRENGTHDESIGN": cls.LRFD, "ALLOWABLE": cls.ASD, "ALLOWABLESTRESS": cls.ASD}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unsupported design method: {value!r}") from None


class BoltGrade(str, Enum):
    A325 = "A325"
    A490 = "A490"
    F3148 = "F3148"


# Table J3.2: Fnt, Fnv (threads included, N) and Fnv (threads excluded, X)
BOLT_GRADE_STRESS: Mapping[BoltGrade, Mapping[str, float]] = MappingProxyType({
    BoltGrade.A325: MappingProxyType({"Fnt": 90.0, "Fnv_N": 54.0, "Fnv_X": 68.0}),
    BoltGrade.A490: MappingProxyType({"Fnt": 113.0, "Fnv_N": 68.0, "Fnv_X": 84.0}),
    BoltGrade.F3148: MappingProxyType({"Fnt": 90.0, "Fnv_N": 65.0, "Fnv_X": 81.0}),
})

# Table J3.4 (bolt diameter -> minimum edge distance), in
MIN_EDGE_DISTANCE: Mapping[float, float] = MappingProxyType({0.75: 1.0, 0.875: 1.25, 1.0: 1.5})

E_STEEL = 29000.0  # ksi
STANDARD_HOLE_OVERSIZE = 1.0 / 16.0  # bearing and prying
NET_AREA_HOLE_OVERSIZE = 1.0 / 8.0  # net areas (hole + 1/16 damage allowance)
MIN_SPACING_FACTOR = 2.667  # x d
MAX_SPACING_THICKNESS_FACTOR = 24.0  # x thinner ply
MAX_SPACING_CAP = 12.0  # in


def parse_bolt_grade(grade: "BoltGrade | str | None") -> BoltGrade | None:
    """Return the matching `BoltGrade`, or None when the grade is not tabulated."""
    if grade is None:
        return None
    if isinstance(grade, BoltGrade):
        return grade
    key = str(grade).strip().upper().replace(" ", "")
    try:
        return BoltGrade(key)
    except ValueError:
        return None


def bolt_stresses(grade: "BoltGrade | str | None", threads_included: bool = True) -> tuple[float, float]:
    """Return (Fnt, Fnv) for a bolt grade.

    Unknown grades fall back to zero nominal stresses, so every bolt check
    using them reports zero capacity.
    """
    parsed = parse_bolt_grade(grade)
    if parsed is None:
        logger.warning("Unknown bolt grade {!r}; using zero nominal stresses", grade)
        return 0.0, 0.0
    stresses = BOLT_GRADE_STRESS[parsed]
    return stresses["Fnt"], stresses["Fnv_N" if threads_included else "Fnv_X"]


def bolt_area(diameter: float) -> float:
    if diameter <= 0.0:
        return 0.0
    return math.pi * diameter**2 / 4.0


def min_edge_distance(diameter: float) -> float:
    """Minimum edge distance from Table J3.4, or 1.25 d when not tabulated."""
    for size, edge in MIN_EDGE_DISTANCE.items():
        if math.isclose(size, diameter, abs_tol=1e-6):
            return edge
    return 1.25 * diameter


__all__ = [
    "DesignMethod",
    "BoltGrade",
    "BOLT_GRADE_STRESS",
    "MIN_EDGE_DISTANCE",
    "E_STEEL",
    "STANDARD_HOLE_OVERSIZE",
    "NET_AREA_HOLE_OVERSIZE",
    "MIN_SPACING_FACTOR",
    "MAX_SPACING_THICKNESS_FACTOR",
    "MAX_SPACING_CAP",
    "parse_bolt_grade",
    "bolt_stresses",
    "bolt_area",
    "min_edge_distance",
]
