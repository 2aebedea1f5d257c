"""Bolt spacing and edge distance checks (AISC 360-22 J3.3 to J3.5).

These rules are independent of the strength checks and never affect ratios.
"""

from __future__ import annotations

from ..materials import (
    MAX_SPACING_CAP,
    MAX_SPACING_THICKNESS_FACTOR,
    MIN_SPACING_FACTOR,
    min_edge_distance,
)
from .models import GeometryCheckResult


def max_bolt_spacing(thinner_ply: float) -> float:
    return min(MAX_SPACING_THICKNESS_FACTOR * thinner_ply, MAX_SPACING_CAP)


def min_bolt_spacing(diameter: float) -> float:
    return MIN_SPACING_FACTOR * diameter


def check_bolt_detailing(
    *,
    diameter: float,
    col_spacing: float,
    row_spacing: float,
    edge_longitudinal: float,
    edge_transverse: float,
    edge_gap: float,
    thinner_ply: float,
) -> dict[str, GeometryCheckResult]:
    """Edge distance and spacing rules for one bolt group."""
    min_le = min_edge_distance(diameter)
    min_s = min_bolt_spacing(diameter)
    max_s = max_bolt_spacing(thinner_ply)

    return {
        "edge_distance_longitudinal": GeometryCheckResult(edge_longitudinal, min_le, "min"),
        "edge_distance_transverse": GeometryCheckResult(edge_transverse, min_le, "min"),
        "edge_distance_gap": GeometryCheckResult(edge_gap, min_le, "min"),
        "spacing_column": GeometryCheckResult(col_spacing, min_s, "min"),
        "spacing_row": GeometryCheckResult(row_spacing, min_s, "min"),
        "max_spacing_column": GeometryCheckResult(col_spacing, max_s, "max"),
        "max_spacing_row": GeometryCheckResult(row_spacing, max_s, "max"),
    }


__all__ = ["max_bolt_spacing", "min_bolt_spacing", "check_bolt_detailing"]
