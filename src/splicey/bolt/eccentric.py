"""Elastic (vector) shear distribution for an eccentrically loaded web bolt group."""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from ..common import ZERO_TOLERANCE


@dataclass(frozen=True)
class EccentricShearResult:
    """Critical-bolt resultant and the components that build it."""

    resultant: float
    eccentricity: float
    moment: float
    Ip: float
    n_bolts: int
    f_direct: float
    fx_moment: float
    fy_moment: float

    @property
    def info(self) -> dict[str, float]:
        return {
            "resultant": self.resultant,
            "eccentricity": self.eccentricity,
            "moment": self.moment,
            "Ip": self.Ip,
            "n_bolts": self.n_bolts,
            "f_direct": self.f_direct,
            "fx_moment": self.fx_moment,
            "fy_moment": self.fy_moment,
        }


def bolt_coordinates(n_cols: int, n_rows: int, col_spacing: float, row_spacing: float) -> np.ndarray:
    """Return an (n, 2) array of (x, y) bolt positions relative to the group centroid."""
    xs = np.arange(n_cols, dtype=float) * col_spacing
    ys = np.arange(n_rows, dtype=float) * row_spacing
    xx, yy = np.meshgrid(xs, ys, indexing="ij")
    points = np.column_stack([xx.ravel(), yy.ravel()])
    return points - points.mean(axis=0)


def solve_eccentric_shear(
    *,
    shear: float,
    gap: float,
    n_cols: int,
    n_rows: int,
    col_spacing: float,
    row_spacing: float,
    end_distance: float,
) -> EccentricShearResult:
    """Resultant force on the critical bolt of one side of a web splice.

    The shear acts at the splice centreline, so its eccentricity to the bolt
    group centroid is end_distance + (n_cols - 1) * col_spacing / 2 + gap / 2.
    With a single bolt (Ip = 0) the resultant is the shear itself.
    """
    n = n_cols * n_rows
    eccentricity = end_distance + (n_cols - 1) * col_spacing / 2.0 + gap / 2.0
    moment = shear * eccentricity

    if n <= 0:
        return EccentricShearResult(0.0, eccentricity, moment, 0.0, 0, 0.0, 0.0, 0.0)

    points = bolt_coordinates(n_cols, n_rows, col_spacing, row_spacing)
    Ip = float(np.sum(points**2))
    f_direct = shear / n

    if Ip <= ZERO_TOLERANCE:
        return EccentricShearResult(shear, eccentricity, moment, Ip, n, f_direct, 0.0, 0.0)

    x_max = (n_cols - 1) * col_spacing / 2.0
    y_max = (n_rows - 1) * row_spacing / 2.0
    fx_moment = moment * y_max / Ip
    fy_moment = moment * x_max / Ip
    resultant = math.sqrt(fx_moment**2 + (f_direct + fy_moment) ** 2)

    return EccentricShearResult(resultant, eccentricity, moment, Ip, n, f_direct, fx_moment, fy_moment)


def bolt_row_inertia(n_rows: int, row_spacing: float) -> tuple[float, float]:
    """Return (sum of dy^2, y_max) for one bolt column about its centroid."""
    if n_rows <= 0:
        return 0.0, 0.0
    ys = np.arange(n_rows, dtype=float) * row_spacing
    dy = ys - ys.mean()
    return float(np.sum(dy**2)), (n_rows - 1) * row_spacing / 2.0


__all__ = ["EccentricShearResult", "bolt_coordinates", "solve_eccentric_shear", "bolt_row_inertia"]
