"""Prying action on flange bolts (tee-stub model, AISC Manual Part 9)."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class PryingResult:
    Q: float
    tc: float
    alpha_prime: float = 0.0
    delta: float | None = None
    rho: float | None = None
    b_prime: float | None = None
    a_prime: float | None = None

    @property
    def info(self) -> dict[str, float | None]:
        return {
            "Q": self.Q,
            "tc": self.tc,
            "alpha_prime": self.alpha_prime,
            "delta": self.delta,
            "rho": self.rho,
            "b_prime": self.b_prime,
            "a_prime": self.a_prime,
        }


def prying_action(
    *,
    thickness: float,
    Fy: float,
    b: float,
    a: float,
    pitch: float,
    bolt_diameter: float,
    hole_diameter: float,
    tension_per_bolt: float,
) -> PryingResult:
    """Additional bolt tension Q from flexure of the connected plate.

    - `b`: bolt line to the face of the support (web / stiff element)
    - `a`: bolt line to the plate edge
    - `pitch`: tributary length per bolt along the plate

    Invalid geometry gives no prying (Q = 0, tc = inf). When the holes take up
    the whole pitch (delta <= 0) the plate has no net ligament and Q is
    unbounded.
    """
    if pitch <= 0.0 or Fy <= 0.0 or tension_per_bolt <= 0.0:
        return PryingResult(Q=0.0, tc=math.inf)

    b_prime = b - bolt_diameter / 2.0
    a_prime = min(a + bolt_diameter / 2.0, 1.25 * b_prime)
    if a_prime <= 0.0 or b_prime < 0.0:
        return PryingResult(Q=0.0, tc=math.inf, b_prime=b_prime, a_prime=a_prime)

    rho = b_prime / a_prime
    delta = 1.0 - hole_diameter / pitch
    if delta <= 0.0:
        return PryingResult(Q=math.inf, tc=0.0, delta=delta, rho=rho, b_prime=b_prime, a_prime=a_prime)

    tc = math.sqrt(4.0 * tension_per_bolt * b_prime / (pitch * Fy))

    Q = 0.0
    alpha_prime = 0.0
    if thickness < tc:
        alpha_prime = (1.0 / delta) * ((thickness / tc) ** 2 - 1.0)
        alpha_prime = max(0.0, min(alpha_prime, 1.0))
        # alpha' = 0 means no prying even for an unbounded bolt force
        if alpha_prime > 0.0:
            Q = tension_per_bolt * delta * alpha_prime * rho

    return PryingResult(
        Q=Q,
        tc=tc,
        alpha_prime=alpha_prime,
        delta=delta,
        rho=rho,
        b_prime=b_prime,
        a_prime=a_prime,
    )


__all__ = ["PryingResult", "prying_action"]
