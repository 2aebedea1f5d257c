"""Bolt group analysis for splice connections."""

from .eccentric import EccentricShearResult, solve_eccentric_shear
from .interaction import InteractionResult, shear_tension_interaction
from .prying import PryingResult, prying_action

__all__ = [
    "EccentricShearResult",
    "solve_eccentric_shear",
    "InteractionResult",
    "shear_tension_interaction",
    "PryingResult",
    "prying_action",
]
