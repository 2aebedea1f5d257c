"""
Input validation for splice checks.

The evaluators accept any dimensions and clamp nonsensical geometry to zero
capacity. Rejecting such inputs up front is left to the caller; these rules
mirror the minimums enforced by the splice input form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable

from .geometry import SpliceInput
from .materials import parse_bolt_grade


@dataclass(frozen=True)
class Rule:
    label: str
    value: Callable[[SpliceInput], float]
    minimum: float


RULES: tuple[Rule, ...] = (
    Rule("Member Depth", lambda s: s.member.d, 1.0),
    Rule("Member Flange Width", lambda s: s.member.bf, 1.0),
    Rule("Member Flange Thickness", lambda s: s.member.tf, 0.1),
    Rule("Member Web Thickness", lambda s: s.member.tw, 0.1),
    Rule("Member Fy", lambda s: s.member.Fy, 36.0),
    Rule("Flange Plate Width", lambda s: s.flange.outer_plate.height, 1.0),
    Rule("Flange Plate Thickness", lambda s: s.flange.outer_plate.thickness, 0.1),
    Rule("Flange Plate Length", lambda s: s.flange.outer_plate.length, 1.0),
    Rule("Web Plate Height", lambda s: s.web.plate.height, 1.0),
    Rule("Web Plate Thickness", lambda s: s.web.plate.thickness, 0.1),
    Rule("Web Plate Length", lambda s: s.web.plate.length, 1.0),
    Rule("Flange Bolt Diameter", lambda s: s.flange.bolt.diameter, 0.1),
    Rule("Web Bolt Diameter", lambda s: s.web.bolt.diameter, 0.1),
)

INNER_PLATE_RULES: tuple[Rule, ...] = (
    Rule("Inner Flange Plate Width", lambda s: s.flange.inner_plate.height, 1.0),
    Rule("Inner Flange Plate Thickness", lambda s: s.flange.inner_plate.thickness, 0.1),
    Rule("Inner Flange Plate Length", lambda s: s.flange.inner_plate.length, 1.0),
)


@dataclass
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_inputs(inputs: SpliceInput) -> ValidationReport:
    """Check an input snapshot against the form rules."""
    report = ValidationReport()

    rules = RULES + (INNER_PLATE_RULES if inputs.flange.inner_plate is not None else ())
    for rule in rules:
        value = rule.value(inputs)
        if value is None or math.isnan(value):
            report.errors.append(f"{rule.label} is required.")
        elif value < rule.minimum:
            report.errors.append(f"{rule.label} must be at least {rule.minimum}.")

    for label, grade in (("Flange", inputs.flange.bolt.grade), ("Web", inputs.web.bolt.grade)):
        if parse_bolt_grade(grade) is None:
            report.warnings.append(f"{label} bolt grade {grade!r} is not tabulated; bolt strengths will be zero.")

    if inputs.develop_member_capacity and inputs.member.Zx <= 0.0:
        report.warnings.append("Member Zx is not positive; developed moment demand is zero.")

    return report


__all__ = ["Rule", "RULES", "ValidationReport", "validate_inputs"]
