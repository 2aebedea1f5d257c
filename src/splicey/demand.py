"""
Demand resolution for splice checks.

Either the user-specified loads are used as-is, or the splice is designed to
develop the member: moment and shear are replaced with the member's design
flexural (plastic) and shear-yield strengths. Resolution always returns a new
`Demand`; the caller's snapshot is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import TYPE_CHECKING

from loguru import logger

from .materials import DesignMethod

if TYPE_CHECKING:
    from .geometry import MemberSection

# AISC F2.1 (plastic moment) and G2.1 (shear yielding, Cv = 1.0)
PHI_FLEXURE, OMEGA_FLEXURE = 0.90, 1.67
PHI_SHEAR_YIELD, OMEGA_SHEAR_YIELD = 1.00, 1.50


@dataclass(frozen=True)
class Demand:
    """Splice demand: moment (kip-ft), shear (kips), axial (kips, tension positive)."""

    moment: float = 0.0
    shear: float = 0.0
    axial: float = 0.0

    @property
    def moment_kip_in(self) -> float:
        return self.moment * 12.0


@dataclass(frozen=True)
class FlangeDemand:
    """Flange force couple from the moment, plus half the axial load per flange."""

    force_from_moment: float
    tension: float
    compression: float
    outer_tension: float
    inner_tension: float
    outer_compression: float
    inner_compression: float


def _design_strength(Rn: float, phi: float, omega: float, method: DesignMethod) -> float:
    return phi * Rn if method is DesignMethod.LRFD else Rn / omega


def member_flexural_strength(member: "MemberSection", method: DesignMethod) -> float:
    """Design plastic moment strength in kip-ft; 0 when Zx is not positive."""
    if member.Zx <= 0.0:
        return 0.0
    Mp = member.Fy * member.Zx  # kip-in
    return _design_strength(Mp, PHI_FLEXURE, OMEGA_FLEXURE, method) / 12.0


def member_shear_strength(member: "MemberSection", method: DesignMethod) -> float:
    """Design shear-yield strength 0.6 Fy Aw in kips; 0 when Aw is not positive."""
    Aw = member.Aw
    if Aw <= 0.0:
        return 0.0
    Vn = 0.6 * member.Fy * Aw
    return _design_strength(Vn, PHI_SHEAR_YIELD, OMEGA_SHEAR_YIELD, method)


def resolve_demand(
    demand: Demand,
    member: "MemberSection",
    method: DesignMethod | str,
    *,
    develop_capacity: bool = False,
) -> Demand:
    """Return the demand used by every limit state.

    With `develop_capacity`, moment and shear come from the member's own
    design strengths (a zero plastic modulus or shear area yields a zero
    component). Axial load is always carried through.
    """
    if not develop_capacity:
        return demand

    method = DesignMethod.parse(method)
    resolved = replace(
        demand,
        moment=member_flexural_strength(member, method),
        shear=member_shear_strength(member, method),
    )
    logger.info(
        "Developing member capacity ({}): M = {:.2f} kip-ft, V = {:.2f} kips",
        method.value,
        resolved.moment,
        resolved.shear,
    )
    return resolved


def flange_forces(demand: Demand, member: "MemberSection", n_plates: int) -> FlangeDemand:
    """Split the moment into a flange force couple and share it between plates.

    With two flange plates each plate takes half of the flange force, otherwise
    the outer plate takes all of it.
    """
    arm = member.flange_arm
    M = demand.moment_kip_in
    if arm > 0.0:
        force = M / arm
    elif M == 0.0:
        force = 0.0
    else:
        logger.warning("Flange lever arm d - tf = {:.3f} in is not positive; flange force is unbounded", arm)
        force = math.copysign(math.inf, M)

    tension = force + demand.axial / 2.0
    compression = force - demand.axial / 2.0

    share = 0.5 if n_plates == 2 else 1.0
    return FlangeDemand(
        force_from_moment=force,
        tension=tension,
        compression=compression,
        outer_tension=tension * share,
        inner_tension=tension * 0.5 if n_plates == 2 else 0.0,
        outer_compression=compression * share,
        inner_compression=compression * 0.5 if n_plates == 2 else 0.0,
    )


__all__ = [
    "Demand",
    "FlangeDemand",
    "member_flexural_strength",
    "member_shear_strength",
    "resolve_demand",
    "flange_forces",
]
