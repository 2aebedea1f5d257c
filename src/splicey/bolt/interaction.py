"""Combined shear and tension on a single bolt (AISC 360-22 J3.7)."""

from __future__ import annotations

from dataclasses import dataclass

from ..checks.aisc import OMEGA_BOLT, PHI_BOLT
from ..checks.models import Strength
from ..materials import BoltGrade, DesignMethod, bolt_area, bolt_stresses


@dataclass(frozen=True)
class InteractionResult:
    Fnt: float
    Fnv: float
    Ab: float
    fv: float
    Fnt_prime: float

    @property
    def strength(self) -> Strength:
        return Strength(
            Rn=self.Fnt_prime * self.Ab,
            phi=PHI_BOLT,
            omega=OMEGA_BOLT,
            details={"Fnt": self.Fnt, "Fnv": self.Fnv, "Ab": self.Ab, "fv": self.fv, "Fnt_prime": self.Fnt_prime},
        )


def reduced_tensile_stress(Fnt: float, Fnv: float, fv: float, method: DesignMethod) -> float:
    """F'nt per Eq. J3-3a (LRFD) or J3-3b (ASD), capped at Fnt and floored at 0."""
    if Fnv <= 0.0:
        return 0.0
    if method is DesignMethod.LRFD:
        value = 1.3 * Fnt - (Fnt / (PHI_BOLT * Fnv)) * fv
    else:
        value = 1.3 * Fnt - (OMEGA_BOLT * Fnt / Fnv) * fv
    return max(0.0, min(value, Fnt))


def shear_tension_interaction(
    shear: float,
    grade: BoltGrade | str,
    threads_included: bool,
    diameter: float,
    method: DesignMethod | str,
) -> InteractionResult:
    """Tensile strength of a bolt reduced for the shear it carries."""
    method = DesignMethod.parse(method)
    Fnt, Fnv = bolt_stresses(grade, threads_included)
    Ab = bolt_area(diameter)
    if Ab <= 0.0 or Fnv <= 0.0:
        return InteractionResult(Fnt=Fnt, Fnv=Fnv, Ab=Ab, fv=0.0, Fnt_prime=0.0)

    fv = abs(shear) / Ab
    return InteractionResult(
        Fnt=Fnt,
        Fnv=Fnv,
        Ab=Ab,
        fv=fv,
        Fnt_prime=reduced_tensile_stress(Fnt, Fnv, fv, method),
    )


__all__ = ["InteractionResult", "reduced_tensile_stress", "shear_tension_interaction"]
