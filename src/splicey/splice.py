"""
Flange-and-web bolted splice evaluation.

`check_splice` is the single entry point: it validates the input snapshot,
resolves the demand and evaluates every limit state and detailing rule
independently from the same immutable input. Units: in, ksi, kips; moment
demand in kip-ft, moment checks in kip-in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from .bolt.eccentric import bolt_row_inertia, solve_eccentric_shear
from .bolt.interaction import shear_tension_interaction
from .bolt.prying import prying_action
from .checks.aisc import (
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
from .checks.detailing import check_bolt_detailing
from .checks.models import GeometryCheckResult, LimitStateResult, Strength, get_governing
from .demand import Demand, FlangeDemand, flange_forces, resolve_demand
from .geometry import SpliceInput
from .materials import DesignMethod, parse_bolt_grade
from .validation import validate_inputs

Checks = dict[str, LimitStateResult]


@dataclass
class SpliceResult:
    """All limit-state and detailing results for one splice evaluation."""

    checks: Checks
    geometry_checks: dict[str, dict[str, GeometryCheckResult]]
    derived_demand: Demand
    design_method: DesignMethod
    notes: list[str] = field(default_factory=list)

    @property
    def governing(self) -> tuple[str | None, float]:
        """(check key, ratio) of the limit state with the highest ratio."""
        return get_governing(self.checks)

    @property
    def failures(self) -> list[str]:
        failed = [key for key, check in self.checks.items() if not check.passed]
        for group, rules in self.geometry_checks.items():
            failed.extend(f"{group}.{name}" for name, rule in rules.items() if not rule.passed)
        return failed

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def info(self) -> dict[str, Any]:
        governing_key, governing_ratio = self.governing
        return {
            "design_method": self.design_method.value,
            "derived_demand": {
                "moment": self.derived_demand.moment,
                "shear": self.derived_demand.shear,
                "axial": self.derived_demand.axial,
            },
            "checks": {key: check.info for key, check in self.checks.items()},
            "geometry_checks": {
                group: {name: rule.info for name, rule in rules.items()}
                for group, rules in self.geometry_checks.items()
            },
            "governing_check": governing_key,
            "governing_ratio": governing_ratio,
            "passed": self.passed,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class SpliceOutcome:
    """Outcome of `check_splice`: a result, or the reasons the input was rejected."""

    ok: bool
    result: SpliceResult | None = None
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


# === Flange splice ===


def _flange_checks(inputs: SpliceInput, forces: FlangeDemand, method: DesignMethod) -> Checks:
    member = inputs.member
    flange = inputs.flange
    pattern = flange.pattern
    bolt = flange.bolt
    dh_net = bolt.net_hole_diameter
    deformation = inputs.hole_deformation_considered
    checks: Checks = {}

    n_bolts = flange.n_bolts
    single = bolt_shear(bolt.grade, bolt.threads_included, bolt.diameter, flange.n_shear_planes)
    checks["flange_bolt_shear"] = LimitStateResult.from_strength(
        "Flange Bolt Shear",
        forces.tension,
        Strength(single.Rn * n_bolts, single.phi, single.omega, single.details),
        method,
        Rn_single=single.Rn,
        n_bolts=n_bolts,
    )

    le_long = pattern.longitudinal_edge_distance(flange.outer_plate)
    pattern_height = flange.bolt_pattern_height
    n_edge = 2 * pattern.n_rows
    n_interior = 2 * (pattern.n_cols - 1) * pattern.n_rows

    plates = (
        ("outer", "Outer", flange.outer_plate, forces.outer_tension, forces.outer_compression),
        ("inner", "Inner", flange.inner_plate, forces.inner_tension, forces.inner_compression),
    )
    for key, label, plate, tension, compression in plates:
        if plate is None:
            continue
        t = plate.thickness
        Ag = plate.area
        An = (plate.height - 2 * pattern.n_rows * dh_net) * t
        checks[f"{key}_plate_gross_yielding"] = LimitStateResult.from_strength(
            f"{label} Plate Gross Section Yielding", tension, gross_section_yielding(Ag, plate.Fy), method
        )
        checks[f"{key}_plate_net_fracture"] = LimitStateResult.from_strength(
            f"{label} Plate Net Section Fracture", tension, net_section_fracture(An, plate.Fu), method
        )
        checks[f"{key}_plate_compression"] = LimitStateResult.from_strength(
            f"{label} Plate Compression",
            compression,
            plate_compression(Ag, plate.Fy, t, pattern.col_spacing),
            method,
        )

        Agv = 2 * (le_long + (pattern.n_cols - 1) * pattern.col_spacing) * t
        Anv = Agv - 2 * pattern.n_cols * dh_net * t
        Ant = (pattern_height - 2 * pattern.n_rows * dh_net) * t
        checks[f"{key}_plate_block_shear"] = LimitStateResult.from_strength(
            f"{label} Plate Block Shear", tension, block_shear(Anv, Agv, Ant, plate.Fu, plate.Fy), method
        )

        edge = bolt_bearing(
            bolt.diameter, t, plate.Fu, le_long, pattern.col_spacing,
            edge_bolt=True, hole_deformation_considered=deformation,
        )
        interior = bolt_bearing(
            bolt.diameter, t, plate.Fu, le_long, pattern.col_spacing,
            edge_bolt=False, hole_deformation_considered=deformation,
        )
        checks[f"{key}_plate_bearing"] = LimitStateResult.from_strength(
            f"{label} Plate Bolt Bearing", tension, bolt_group_bearing(edge, interior, n_edge, n_interior), method
        )

    tf = member.tf
    edge = bolt_bearing(
        bolt.diameter, tf, member.Fu, le_long, pattern.col_spacing,
        edge_bolt=True, hole_deformation_considered=deformation,
    )
    if n_interior > 0:
        # Interior flange bolts are bounded by the next hole, not a free edge.
        interior = bolt_bearing(
            bolt.diameter, tf, member.Fu, float("inf"), pattern.col_spacing,
            edge_bolt=False, hole_deformation_considered=deformation,
        )
    else:
        interior = Strength(Rn=0.0, phi=edge.phi, omega=edge.omega, details={"Lc": 0.0})
    checks["beam_flange_bearing"] = LimitStateResult.from_strength(
        "Beam Flange Bolt Bearing", forces.tension, bolt_group_bearing(edge, interior, n_edge, n_interior), method
    )

    Agv = 2 * (le_long + (pattern.n_cols - 1) * pattern.col_spacing) * tf
    Anv = Agv - 2 * pattern.n_cols * dh_net * tf
    Ant = (pattern_height - 2 * pattern.n_rows * dh_net) * tf
    checks["beam_flange_block_shear"] = LimitStateResult.from_strength(
        "Beam Flange Block Shear", forces.tension, block_shear(Anv, Agv, Ant, member.Fu, member.Fy), method
    )

    B = forces.tension / n_bolts if n_bolts > 0 else 0.0
    if B > 0.0:
        B_outer = B * 0.5 if flange.n_plates == 2 else B
        b = pattern.gage / 2.0
        outer = prying_action(
            thickness=flange.outer_plate.thickness,
            Fy=flange.outer_plate.Fy,
            b=b,
            a=flange.transverse_edge_distance(flange.outer_plate),
            pitch=pattern.col_spacing,
            bolt_diameter=bolt.diameter,
            hole_diameter=bolt.hole_diameter,
            tension_per_bolt=B_outer,
        )
        Q_total = outer.Q
        prying_details: dict[str, Any] = {"outer": outer.info}
        if flange.inner_plate is not None:
            inner = prying_action(
                thickness=flange.inner_plate.thickness,
                Fy=flange.inner_plate.Fy,
                b=b,
                a=flange.transverse_edge_distance(flange.inner_plate),
                pitch=pattern.col_spacing,
                bolt_diameter=bolt.diameter,
                hole_diameter=bolt.hole_diameter,
                tension_per_bolt=B * 0.5,
            )
            Q_total += inner.Q
            prying_details["inner"] = inner.info

        checks["flange_bolt_prying_tension"] = LimitStateResult.from_strength(
            "Flange Bolt Prying & Tension",
            B + Q_total,
            bolt_tension(bolt.grade, bolt.diameter),
            method,
            B_per_bolt=B,
            Q_total=Q_total,
            **prying_details,
        )

    return checks


# === Web splice ===


def _web_bolt_tension(
    inputs: SpliceInput,
    demand: Demand,
    flange_bolt_capacity: float,
    eccentric_moment: float,
) -> dict[str, float]:
    """Tension on the critical web bolt from the moment the web splice must carry.

    The web takes the greater of the moment the flange bolts cannot develop
    and the moment from the shear eccentricity.
    """
    pattern = inputs.web.pattern
    M_flange_max = flange_bolt_capacity * inputs.member.flange_arm
    M_shortfall = max(0.0, abs(demand.moment_kip_in) - M_flange_max)
    M_web = max(M_shortfall, abs(eccentric_moment))

    I_rows, y_max = bolt_row_inertia(pattern.n_rows, pattern.row_spacing)
    Tu = M_web * y_max / (I_rows * pattern.n_cols) if I_rows > 0.0 else 0.0
    return {
        "M_flange_max": M_flange_max,
        "M_shortfall": M_shortfall,
        "M_web_design": M_web,
        "I_rows": I_rows,
        "y_max": y_max,
        "Tu": Tu,
    }


def _web_checks(inputs: SpliceInput, demand: Demand, flange_bolt_capacity: float, method: DesignMethod) -> Checks:
    member = inputs.member
    web = inputs.web
    pattern = web.pattern
    bolt = web.bolt
    dh_net = bolt.net_hole_diameter
    deformation = inputs.hole_deformation_considered
    V = demand.shear
    checks: Checks = {}

    ecc = solve_eccentric_shear(
        shear=V,
        gap=inputs.gap,
        n_cols=pattern.n_cols,
        n_rows=pattern.n_rows,
        col_spacing=pattern.col_spacing,
        row_spacing=pattern.row_spacing,
        end_distance=pattern.end_distance,
    )
    Vu = ecc.resultant
    checks["web_bolt_shear"] = LimitStateResult.from_strength(
        "Web Bolt Shear (Eccentricity)",
        Vu,
        bolt_shear(bolt.grade, bolt.threads_included, bolt.diameter, web.n_plates),
        method,
        V=V,
        **ecc.info,
    )

    tension = _web_bolt_tension(inputs, demand, flange_bolt_capacity, ecc.moment)
    interaction = shear_tension_interaction(Vu, bolt.grade, bolt.threads_included, bolt.diameter, method)
    checks["web_bolt_interaction"] = LimitStateResult.from_strength(
        "Web Bolt Shear/Tension Interaction", tension["Tu"], interaction.strength, method, Vu=Vu, **tension
    )

    t = web.total_thickness
    checks["web_plate_shear_yielding"] = LimitStateResult.from_strength(
        "Web Plate Gross Shear Yielding", V, shear_yielding(web.plate.height * t, web.plate.Fy), method
    )
    Anv = (web.plate.height - pattern.n_rows * dh_net) * t
    checks["web_plate_shear_rupture"] = LimitStateResult.from_strength(
        "Web Plate Net Shear Rupture", V, shear_rupture(Anv, web.plate.Fu), method
    )

    le_long = pattern.longitudinal_edge_distance(web.plate)
    le_tran = web.transverse_edge_distance
    Agv = (le_long + (pattern.n_cols - 1) * pattern.col_spacing) * t
    Anv = Agv - pattern.n_cols * dh_net * t
    Ant = (le_tran - 0.5 * dh_net) * t
    checks["web_plate_block_shear"] = LimitStateResult.from_strength(
        "Web Plate Block Shear", V, block_shear(Anv, Agv, Ant, web.plate.Fu, web.plate.Fy), method
    )

    checks["web_plate_bearing"] = LimitStateResult.from_strength(
        "Web Plate Bolt Bearing",
        Vu,
        bolt_bearing(
            bolt.diameter, t, web.plate.Fu, le_long, pattern.col_spacing,
            edge_bolt=True, hole_deformation_considered=deformation,
        ),
        method,
    )
    checks["beam_web_bearing"] = LimitStateResult.from_strength(
        "Beam Web Bolt Bearing",
        Vu,
        bolt_bearing(
            bolt.diameter, member.tw, member.Fu, le_long, pattern.col_spacing,
            edge_bolt=True, hole_deformation_considered=deformation,
        ),
        method,
    )
    checks["beam_web_shear_yielding"] = LimitStateResult.from_strength(
        "Beam Web Shear Yielding", V, shear_yielding(member.clear_web_depth * member.tw, member.Fy), method
    )
    return checks


# === Member at the splice ===


def _member_checks(inputs: SpliceInput, demand: Demand, method: DesignMethod) -> Checks:
    member = inputs.member
    flange_pattern = inputs.flange.pattern
    web_pattern = inputs.web.pattern
    dh_flange = inputs.flange.bolt.net_hole_diameter
    dh_web = inputs.web.bolt.net_hole_diameter
    checks: Checks = {}

    checks["beam_flexural_rupture"] = LimitStateResult.from_strength(
        "Beam Flexural Rupture",
        demand.moment_kip_in,
        flexural_rupture(member.Fu, member.d, member.bf, member.tf, flange_pattern.n_rows, dh_flange, member.Sx),
        method,
    )
    Anv = (member.clear_web_depth - web_pattern.n_rows * dh_web) * member.tw
    checks["beam_web_shear_rupture"] = LimitStateResult.from_strength(
        "Beam Web Shear Rupture", demand.shear, shear_rupture(Anv, member.Fu), method
    )

    if demand.axial > 0.0:
        checks["beam_tensile_rupture"] = LimitStateResult.from_strength(
            "Beam Section Tensile Rupture",
            demand.axial,
            member_tensile_rupture(
                member.Fu,
                member.d,
                member.bf,
                member.tf,
                member.tw,
                flange_pattern.n_rows,
                dh_flange,
                web_pattern.n_rows,
                dh_web,
            ),
            method,
        )
    return checks


# === Detailing ===


def _detailing_checks(inputs: SpliceInput) -> dict[str, dict[str, GeometryCheckResult]]:
    member = inputs.member
    flange = inputs.flange
    web = inputs.web

    flange_plies = [member.tf, flange.outer_plate.thickness]
    if flange.inner_plate is not None:
        flange_plies.append(flange.inner_plate.thickness)

    return {
        "flange_bolts": check_bolt_detailing(
            diameter=flange.bolt.diameter,
            col_spacing=flange.pattern.col_spacing,
            row_spacing=flange.pattern.row_spacing,
            edge_longitudinal=flange.pattern.longitudinal_edge_distance(flange.outer_plate),
            edge_transverse=flange.transverse_edge_distance(flange.outer_plate),
            edge_gap=flange.pattern.end_distance,
            thinner_ply=min(flange_plies),
        ),
        "web_bolts": check_bolt_detailing(
            diameter=web.bolt.diameter,
            col_spacing=web.pattern.col_spacing,
            row_spacing=web.pattern.row_spacing,
            edge_longitudinal=web.pattern.longitudinal_edge_distance(web.plate),
            edge_transverse=web.transverse_edge_distance,
            edge_gap=web.pattern.end_distance,
            thinner_ply=min(member.tw, web.total_thickness),
        ),
    }


# === Entry points ===


def evaluate_splice(inputs: SpliceInput) -> SpliceResult:
    """Evaluate every limit state and detailing rule for one input snapshot.

    Total for any input the dataclasses accept: degenerate geometry shows up
    as zero capacity (a failing ratio), never as an exception.
    """
    method = DesignMethod.parse(inputs.design_method)
    demand = resolve_demand(
        inputs.demand,
        inputs.member,
        method,
        develop_capacity=inputs.develop_member_capacity,
    )

    notes: list[str] = []
    for label, grade in (("flange", inputs.flange.bolt.grade), ("web", inputs.web.bolt.grade)):
        if parse_bolt_grade(grade) is None:
            notes.append(f"Unknown {label} bolt grade {grade!r}: nominal bolt stresses taken as zero")
    if inputs.member.flange_arm <= 0.0:
        notes.append("Flange lever arm d - tf is not positive")

    forces = flange_forces(demand, inputs.member, inputs.flange.n_plates)

    checks: Checks = {}
    checks.update(_flange_checks(inputs, forces, method))
    checks.update(_web_checks(inputs, demand, checks["flange_bolt_shear"].design_capacity, method))
    checks.update(_member_checks(inputs, demand, method))

    for key, check in checks.items():
        logger.debug(
            "{}: demand={:.3f} capacity={:.3f} ratio={:.3f} {}",
            key,
            check.demand,
            check.design_capacity,
            check.ratio,
            "OK" if check.passed else "NG",
        )

    result = SpliceResult(
        checks=checks,
        geometry_checks=_detailing_checks(inputs),
        derived_demand=demand,
        design_method=method,
        notes=notes,
    )
    governing_key, governing_ratio = result.governing
    logger.info(
        "Splice ({}): {} checks, governing {} at {:.3f}, {} failure(s)",
        method.value,
        len(checks),
        governing_key,
        governing_ratio,
        len(result.failures),
    )
    return result


def check_splice(inputs: SpliceInput, *, validate: bool = True) -> SpliceOutcome:
    """Validate and evaluate a splice; the single top-level call."""
    warnings: tuple[str, ...] = ()
    if validate:
        report = validate_inputs(inputs)
        warnings = tuple(report.warnings)
        if not report.ok:
            logger.warning("Splice input rejected: {}", "; ".join(report.errors))
            return SpliceOutcome(ok=False, errors=tuple(report.errors), warnings=warnings)

    return SpliceOutcome(ok=True, result=evaluate_splice(inputs), warnings=warnings)


__all__ = ["SpliceResult", "SpliceOutcome", "evaluate_splice", "check_splice"]
