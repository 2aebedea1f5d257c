"""
AISC 360-22 limit-state formulas used by the splice checks.

Each evaluator returns a `Strength` (nominal strength plus phi / Omega) with
the intermediate quantities needed to reconstruct the calculation. The
evaluators are total: non-positive areas or clear distances produce zero
strength rather than an exception.
"""

from __future__ import annotations

import math

from ..materials import E_STEEL, STANDARD_HOLE_OVERSIZE, BoltGrade, bolt_area, bolt_stresses
from .models import Strength


# === Resistance / safety factors ===

PHI_BOLT, OMEGA_BOLT = 0.75, 2.00
PHI_YIELD, OMEGA_YIELD = 0.90, 1.67
PHI_RUPTURE, OMEGA_RUPTURE = 0.75, 2.00
PHI_SHEAR_YIELD, OMEGA_SHEAR_YIELD = 1.00, 1.50

COMPRESSION_K = 0.65
SLENDERNESS_LIMIT = 25.0  # J4.4: Fcr = Fy below this


# === Bolts ===


def bolt_shear(
    grade: BoltGrade | str,
    threads_included: bool,
    diameter: float,
    n_shear_planes: int = 1,
) -> Strength:
    """Nominal shear strength of a single bolt, Eq. J3-1: Rn = Fnv Ab ns."""
    _, Fnv = bolt_stresses(grade, threads_included)
    Ab = bolt_area(diameter)
    return Strength(
        Rn=Fnv * Ab * n_shear_planes,
        phi=PHI_BOLT,
        omega=OMEGA_BOLT,
        details={"Fnv": Fnv, "Ab": Ab, "n_shear_planes": n_shear_planes},
    )


def bolt_tension(grade: BoltGrade | str, diameter: float) -> Strength:
    """Nominal tensile strength of a single bolt, Eq. J3-1: Rn = Fnt Ab."""
    Fnt, _ = bolt_stresses(grade)
    Ab = bolt_area(diameter)
    return Strength(Rn=Fnt * Ab, phi=PHI_BOLT, omega=OMEGA_BOLT, details={"Fnt": Fnt, "Ab": Ab})


def bolt_bearing(
    diameter: float,
    thickness: float,
    Fu: float,
    edge_distance: float,
    spacing: float,
    *,
    edge_bolt: bool,
    hole_deformation_considered: bool = True,
) -> Strength:
    """Bearing / tear-out strength of one bolt on one ply, Eq. J3-6.

    The clear distance is measured to the plate edge for edge bolts
    (Lc = le - dh/2) and to the adjacent hole for interior bolts
    (Lc = s - dh). A negative clear distance gives zero strength.
    """
    tearout_coeff, bearing_coeff = (1.2, 2.4) if hole_deformation_considered else (1.5, 3.0)
    hole_dia = diameter + STANDARD_HOLE_OVERSIZE
    Lc = edge_distance - hole_dia / 2.0 if edge_bolt else spacing - hole_dia

    if Lc < 0.0:
        return Strength(
            Rn=0.0,
            phi=PHI_BOLT,
            omega=OMEGA_BOLT,
            details={"Lc": Lc, "Rn_tearout": 0.0, "Rn_bearing": 0.0, "edge_bolt": edge_bolt},
        )

    Rn_tearout = tearout_coeff * Lc * thickness * Fu
    Rn_bearing = bearing_coeff * diameter * thickness * Fu
    return Strength(
        Rn=max(0.0, min(Rn_tearout, Rn_bearing)),
        phi=PHI_BOLT,
        omega=OMEGA_BOLT,
        details={
            "Lc": Lc,
            "Rn_tearout": Rn_tearout,
            "Rn_bearing": Rn_bearing,
            "tearout_coeff": tearout_coeff,
            "bearing_coeff": bearing_coeff,
            "edge_bolt": edge_bolt,
        },
    )


def bolt_group_bearing(edge: Strength, interior: Strength, n_edge: int, n_interior: int) -> Strength:
    """Sum per-bolt bearing strengths over edge and interior bolts."""
    Rn = edge.Rn * n_edge + interior.Rn * n_interior
    return Strength(
        Rn=Rn,
        phi=edge.phi,
        omega=edge.omega,
        details={
            "edge": dict(edge.details, Rn=edge.Rn),
            "interior": dict(interior.details, Rn=interior.Rn),
            "n_edge": n_edge,
            "n_interior": n_interior,
        },
    )


# === Connecting elements (J4) ===


def gross_section_yielding(Ag: float, Fy: float) -> Strength:
    """Eq. J4-1: Rn = Fy Ag."""
    return Strength(Rn=max(0.0, Fy * Ag), phi=PHI_YIELD, omega=OMEGA_YIELD, details={"Ag": Ag, "Fy": Fy})


def net_section_fracture(An: float, Fu: float, U: float = 1.0) -> Strength:
    """Eq. J4-2: Rn = Fu Ae, Ae = U An."""
    Ae = U * An
    return Strength(
        Rn=max(0.0, Fu * Ae),
        phi=PHI_RUPTURE,
        omega=OMEGA_RUPTURE,
        details={"An": An, "U": U, "Ae": Ae, "Fu": Fu},
    )


def shear_yielding(Agv: float, Fy: float) -> Strength:
    """Eq. J4-3: Rn = 0.6 Fy Agv."""
    return Strength(
        Rn=max(0.0, 0.6 * Fy * Agv),
        phi=PHI_SHEAR_YIELD,
        omega=OMEGA_SHEAR_YIELD,
        details={"Agv": Agv, "Fy": Fy},
    )


def shear_rupture(Anv: float, Fu: float) -> Strength:
    """Eq. J4-4: Rn = 0.6 Fu Anv."""
    return Strength(
        Rn=max(0.0, 0.6 * Fu * Anv),
        phi=PHI_RUPTURE,
        omega=OMEGA_RUPTURE,
        details={"Anv": Anv, "Fu": Fu},
    )


def block_shear(Anv: float, Agv: float, Ant: float, Fu: float, Fy: float, Ubs: float = 1.0) -> Strength:
    """Eq. J4-5 as the lesser of the shear-rupture and shear-yield paths.

    Both paths share the tension-plane rupture term Ubs Fu Ant.
    """
    details = {"Anv": Anv, "Agv": Agv, "Ant": Ant, "Fu": Fu, "Fy": Fy, "Ubs": Ubs}
    if Anv <= 0.0 or Agv <= 0.0 or Ant < 0.0:
        return Strength(Rn=0.0, phi=PHI_RUPTURE, omega=OMEGA_RUPTURE, details=details)

    tension_term = Ubs * Fu * Ant
    path_rupture = 0.6 * Fu * Anv + tension_term
    path_yield = 0.6 * Fy * Agv + tension_term
    return Strength(
        Rn=max(0.0, min(path_rupture, path_yield)),
        phi=PHI_RUPTURE,
        omega=OMEGA_RUPTURE,
        details={**details, "path_rupture": path_rupture, "path_yield": path_yield},
    )


def plate_compression(
    Ag: float,
    Fy: float,
    thickness: float,
    unbraced_length: float,
    k: float = COMPRESSION_K,
    E: float = E_STEEL,
) -> Strength:
    """Compression strength of a splice plate (J4.4 / Chapter E).

    r = t / sqrt(12). Slenderness up to 25 uses Fcr = Fy; above it Fcr
    follows the inelastic (E3-2) or elastic (E3-3) buckling curve.
    """
    r = thickness / math.sqrt(12.0) if thickness > 0.0 else 0.0
    slenderness = k * unbraced_length / r if r > 0.0 else 0.0

    Fe: float | None = None
    if slenderness <= SLENDERNESS_LIMIT:
        Fcr = Fy
    else:
        Fe = math.pi**2 * E / slenderness**2
        Fcr = 0.658 ** (Fy / Fe) * Fy if Fy / Fe <= 2.25 else 0.877 * Fe

    return Strength(
        Rn=max(0.0, Fcr * Ag),
        phi=PHI_YIELD,
        omega=OMEGA_YIELD,
        details={
            "Fcr": Fcr,
            "Fe": Fe,
            "slenderness": slenderness,
            "r": r,
            "k": k,
            "unbraced_length": unbraced_length,
            "Ag": Ag,
            "Fy": Fy,
        },
    )


# === Member at the splice ===


def flexural_rupture(
    Fu: float,
    d: float,
    bf: float,
    tf: float,
    n_holes: int,
    hole_diameter: float,
    Sx: float = 0.0,
) -> Strength:
    """Approximate flexural rupture of the member at the flange bolt holes (kip-in).

    Uses the net tension flange force Tn = Fu Afn acting over the lever arm
    d - tf. This is a lever-arm approximation of F13.1, not the full
    procedure.
    """
    Afg = bf * tf
    Afn = (bf - n_holes * hole_diameter) * tf
    Tn = Fu * Afn
    lever_arm = d - tf
    Mn = Tn * lever_arm
    return Strength(
        Rn=max(0.0, Mn),
        phi=PHI_RUPTURE,
        omega=OMEGA_RUPTURE,
        details={"Afg": Afg, "Afn": Afn, "Tn": Tn, "lever_arm": lever_arm, "Sx": Sx, "Fu": Fu},
    )


def member_tensile_rupture(
    Fu: float,
    d: float,
    bf: float,
    tf: float,
    tw: float,
    n_flange_holes: int,
    flange_hole_diameter: float,
    n_web_holes: int,
    web_hole_diameter: float,
) -> Strength:
    """Tensile rupture of the member net section with a flange-connection shear lag factor.

    U is the ratio of net to gross flange area (Table D3.1 approximation for
    shapes connected through the flanges).
    """
    Ag = 2.0 * bf * tf + (d - 2.0 * tf) * tw
    A_holes_flange = 2.0 * n_flange_holes * flange_hole_diameter * tf
    A_holes_web = n_web_holes * web_hole_diameter * tw
    An = Ag - A_holes_flange - A_holes_web

    Ag_conn = 2.0 * bf * tf
    An_conn = 2.0 * (bf - n_flange_holes * flange_hole_diameter) * tf
    U = An_conn / Ag_conn if Ag_conn > 0.0 else 1.0

    Ae = U * An
    return Strength(
        Rn=max(0.0, Fu * Ae),
        phi=PHI_RUPTURE,
        omega=OMEGA_RUPTURE,
        details={"Ag": Ag, "An": An, "U": U, "Ae": Ae, "Fu": Fu},
    )


__all__ = [
    "PHI_BOLT",
    "OMEGA_BOLT",
    "bolt_shear",
    "bolt_tension",
    "bolt_bearing",
    "bolt_group_bearing",
    "gross_section_yielding",
    "net_section_fracture",
    "shear_yielding",
    "shear_rupture",
    "block_shear",
    "plate_compression",
    "flexural_rupture",
    "member_tensile_rupture",
]
