"""Splice limit-state formulas, detailing rules and result models (AISC 360-22)."""

from __future__ import annotations

from .models import GeometryCheckResult, LimitStateResult, Strength, get_governing
from .aisc import (
    block_shear,
    bolt_bearing,
    bolt_group_bearing,
    bolt_shear,
    bolt_tension,
    flexural_rupture,
    gross_section_yielding,
    member_tensile_rupture,
    net_section_fracture,
    plate_compression,
    shear_rupture,
    shear_yielding,
)
from .detailing import check_bolt_detailing

__all__ = [
    "Strength",
    "LimitStateResult",
    "GeometryCheckResult",
    "get_governing",
    "block_shear",
    "bolt_bearing",
    "bolt_group_bearing",
    "bolt_shear",
    "bolt_tension",
    "flexural_rupture",
    "gross_section_yielding",
    "member_tensile_rupture",
    "net_section_fracture",
    "plate_compression",
    "shear_rupture",
    "shear_yielding",
    "check_bolt_detailing",
]
