"""
Splicey - Bolted Flange and Web Beam Splice Checks

Evaluate a bolted steel beam splice (flange plates plus web plates) against
the AISC 360-22 limit states under LRFD or ASD. Units: in, ksi, kips; moment
demand in kip-ft.

Example usage:
    from splicey import (
        BoltPattern, BoltSpec, Demand, FlangeSplice, MemberSection,
        SpliceInput, SplicePlate, WebSplice, check_splice,
    )

    member = MemberSection(d=18.0, bf=7.5, tf=0.57, tw=0.355, Fy=50.0, Fu=65.0, Zx=101.0)
    flange = FlangeSplice(
        outer_plate=SplicePlate(height=7.5, thickness=0.75, length=20.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325"),
        pattern=BoltPattern(n_cols=3, n_rows=1, col_spacing=3.0, row_spacing=3.0, end_distance=1.5, gage=4.0),
    )
    web = WebSplice(
        plate=SplicePlate(height=12.0, thickness=0.375, length=10.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325"),
        pattern=BoltPattern(n_cols=1, n_rows=4, col_spacing=3.0, row_spacing=3.0, end_distance=1.5),
    )

    inputs = SpliceInput(member, flange, web, demand=Demand(moment=150.0, shear=40.0))
    outcome = check_splice(inputs)

    if outcome.ok:
        key, ratio = outcome.result.governing
        print(f"Governing: {key} at {ratio:.1%}")

Logging is disabled by default; call `splicey.configure_logging()` to see
per-check debug records and the evaluation summary.
"""

from loguru import logger

from .common import configure_logging
from .materials import BoltGrade, DesignMethod
from .demand import Demand, FlangeDemand, flange_forces, resolve_demand
from .geometry import (
    BoltPattern,
    BoltSpec,
    FlangeSplice,
    MemberSection,
    SpliceInput,
    SplicePlate,
    WebSplice,
)
from .checks import GeometryCheckResult, LimitStateResult, Strength
from .bolt import (
    EccentricShearResult,
    InteractionResult,
    PryingResult,
    prying_action,
    shear_tension_interaction,
    solve_eccentric_shear,
)
from .validation import ValidationReport, validate_inputs
from .splice import SpliceOutcome, SpliceResult, check_splice, evaluate_splice

logger.disable("splicey")

__all__ = [
    # Inputs
    "MemberSection",
    "SplicePlate",
    "BoltSpec",
    "BoltPattern",
    "FlangeSplice",
    "WebSplice",
    "SpliceInput",
    "Demand",
    "DesignMethod",
    "BoltGrade",
    # Evaluation
    "check_splice",
    "evaluate_splice",
    "validate_inputs",
    "resolve_demand",
    "flange_forces",
    "solve_eccentric_shear",
    "prying_action",
    "shear_tension_interaction",
    # Results
    "SpliceOutcome",
    "SpliceResult",
    "ValidationReport",
    "LimitStateResult",
    "GeometryCheckResult",
    "Strength",
    "FlangeDemand",
    "EccentricShearResult",
    "PryingResult",
    "InteractionResult",
    # Logging
    "configure_logging",
]

__version__ = "0.1.0"
