"""
Splice connection input models.

This module contains *input* data structures only (member, plates, bolts and
demand). Evaluation is performed by `splicey.splice`.

Units: in, ksi, kips; moment demand in kip-ft.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from .demand import Demand
from .materials import (
    E_STEEL,
    NET_AREA_HOLE_OVERSIZE,
    STANDARD_HOLE_OVERSIZE,
    BoltGrade,
    DesignMethod,
    bolt_area,
)

if TYPE_CHECKING:
    from .splice import SpliceOutcome


@dataclass(frozen=True)
class MemberSection:
    """Spliced wide-flange member."""

    d: float
    bf: float
    tf: float
    tw: float
    Fy: float
    Fu: float
    Zx: float = 0.0
    Sx: float = 0.0
    E: float = E_STEEL

    @property
    def Aw(self) -> float:
        """Shear area d * tw."""
        return self.d * self.tw

    @property
    def flange_arm(self) -> float:
        """Lever arm between flange centroids, d - tf."""
        return self.d - self.tf

    @property
    def clear_web_depth(self) -> float:
        return self.d - 2.0 * self.tf


@dataclass(frozen=True)
class SplicePlate:
    """Splice plate. `length` is the total length across both sides of the gap."""

    height: float
    thickness: float
    length: float
    Fy: float
    Fu: float

    @property
    def length_per_side(self) -> float:
        return self.length / 2.0

    @property
    def area(self) -> float:
        return self.height * self.thickness


@dataclass(frozen=True)
class BoltSpec:
    """Bolt size and grade."""

    diameter: float
    grade: BoltGrade | str = BoltGrade.A325
    threads_included: bool = True

    @property
    def area(self) -> float:
        return bolt_area(self.diameter)

    @property
    def hole_diameter(self) -> float:
        """Standard hole, used for bearing and prying."""
        return self.diameter + STANDARD_HOLE_OVERSIZE

    @property
    def net_hole_diameter(self) -> float:
        """Hole width deducted from net areas."""
        return self.diameter + NET_AREA_HOLE_OVERSIZE


@dataclass(frozen=True)
class BoltPattern:
    """Rectangular bolt pattern on one side of the splice gap.

    - `n_cols` bolt columns run across the member (along the load path),
      spaced `col_spacing` (pitch).
    - `n_rows` bolt rows are spaced `row_spacing`.
    - `end_distance` is measured from the gap-side plate edge to the first
      bolt column.
    - `gage` is only used by flange patterns: the distance between the two
      innermost bolt lines, either side of the web.
    """

    n_cols: int
    n_rows: int
    col_spacing: float
    row_spacing: float
    end_distance: float
    gage: float = 0.0

    def __post_init__(self) -> None:
        if self.n_cols < 1 or self.n_rows < 1:
            raise ValueError("n_cols and n_rows must be at least 1")

    @property
    def n(self) -> int:
        return self.n_cols * self.n_rows

    @property
    def width(self) -> float:
        """Distance from the first to the last bolt column."""
        return (self.n_cols - 1) * self.col_spacing

    def longitudinal_edge_distance(self, plate: SplicePlate) -> float:
        """Distance from the last bolt column to the far end of the plate."""
        return plate.length_per_side - self.end_distance - self.width


@dataclass(frozen=True)
class FlangeSplice:
    """Flange splice: outer plate, optional inner plate, one bolt pattern per flange side."""

    outer_plate: SplicePlate
    bolt: BoltSpec
    pattern: BoltPattern
    inner_plate: SplicePlate | None = None

    @property
    def n_plates(self) -> int:
        return 2 if self.inner_plate is not None else 1

    @property
    def n_shear_planes(self) -> int:
        return self.n_plates

    @property
    def n_bolts(self) -> int:
        """Bolts on one side of the gap (rows mirrored either side of the web)."""
        return 2 * self.pattern.n

    @property
    def bolt_pattern_height(self) -> float:
        """Transverse distance between the outermost bolt lines."""
        if self.pattern.n_rows <= 1:
            return self.pattern.gage
        return self.pattern.gage + 2.0 * (self.pattern.n_rows - 1) * self.pattern.row_spacing

    def transverse_edge_distance(self, plate: SplicePlate) -> float:
        return (plate.height - self.bolt_pattern_height) / 2.0


@dataclass(frozen=True)
class WebSplice:
    """Web splice: `n_plates` identical plates (one each side of the web)."""

    plate: SplicePlate
    bolt: BoltSpec
    pattern: BoltPattern
    n_plates: int = 2

    def __post_init__(self) -> None:
        if self.n_plates not in (1, 2):
            raise ValueError("n_plates must be 1 or 2")

    @property
    def total_thickness(self) -> float:
        return self.plate.thickness * self.n_plates

    @property
    def transverse_edge_distance(self) -> float:
        return (self.plate.height - (self.pattern.n_rows - 1) * self.pattern.row_spacing) / 2.0


@dataclass(frozen=True)
class SpliceInput:
    """One immutable input snapshot for a splice evaluation."""

    member: MemberSection
    flange: FlangeSplice
    web: WebSplice
    demand: Demand = field(default_factory=Demand)
    design_method: DesignMethod | str = DesignMethod.LRFD
    gap: float = 0.25
    develop_member_capacity: bool = False
    hole_deformation_considered: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "design_method", DesignMethod.parse(self.design_method))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpliceInput":
        """Build an input snapshot from the flat key set of a saved splice input file.

        Keys follow the calculator form (``member_d``, ``H_fp``, ``Nc_wp``, ...).
        Plate lengths are totals across the gap; ``M_load`` is in kip-ft.
        """

        def num(key: str, default: float = 0.0) -> float:
            value = data.get(key, default)
            if value is None or value == "":
                return default
            return float(value)

        def flag(key: str, default: bool = False) -> bool:
            value = data.get(key, default)
            if isinstance(value, str):
                return value.strip().lower() in ("true", "1", "yes", "on")
            return bool(value)

        member = MemberSection(
            d=num("member_d"),
            bf=num("member_bf"),
            tf=num("member_tf"),
            tw=num("member_tw"),
            Fy=num("member_Fy", 50.0),
            Fu=num("member_Fu", 65.0),
            Zx=num("member_Zx"),
            Sx=num("member_Sx"),
        )

        outer = SplicePlate(
            height=num("H_fp"),
            thickness=num("t_fp"),
            length=num("L_fp"),
            Fy=num("flange_plate_Fy", 50.0),
            Fu=num("flange_plate_Fu", 65.0),
        )
        inner = None
        if int(num("num_flange_plates", 1.0)) == 2:
            inner = SplicePlate(
                height=num("H_fp_inner"),
                thickness=num("t_fp_inner"),
                length=num("L_fp_inner"),
                Fy=num("flange_plate_Fy_inner", 50.0),
                Fu=num("flange_plate_Fu_inner", 65.0),
            )
        flange = FlangeSplice(
            outer_plate=outer,
            inner_plate=inner,
            bolt=BoltSpec(
                diameter=num("D_fp"),
                grade=str(data.get("bolt_grade_fp", "A325")),
                threads_included=flag("threads_included_fp", True),
            ),
            pattern=BoltPattern(
                n_cols=int(num("Nc_fp", 1.0)),
                n_rows=int(num("Nr_fp", 1.0)),
                col_spacing=num("S1_col_spacing_fp"),
                row_spacing=num("S2_row_spacing_fp"),
                end_distance=num("S3_end_dist_fp"),
                gage=num("g_gage_fp"),
            ),
        )

        web = WebSplice(
            plate=SplicePlate(
                height=num("H_wp"),
                thickness=num("t_wp"),
                length=num("L_wp"),
                Fy=num("web_plate_Fy", 50.0),
                Fu=num("web_plate_Fu", 65.0),
            ),
            bolt=BoltSpec(
                diameter=num("D_wp"),
                grade=str(data.get("bolt_grade_wp", "A325")),
                threads_included=flag("threads_included_wp", True),
            ),
            pattern=BoltPattern(
                n_cols=int(num("Nc_wp", 1.0)),
                n_rows=int(num("Nr_wp", 1.0)),
                col_spacing=num("S4_col_spacing_wp"),
                row_spacing=num("S5_row_spacing_wp"),
                end_distance=num("S6_end_dist_wp"),
            ),
            n_plates=int(num("num_web_plates", 2.0)),
        )

        return cls(
            member=member,
            flange=flange,
            web=web,
            demand=Demand(moment=num("M_load"), shear=num("V_load"), axial=num("Axial_load")),
            design_method=str(data.get("design_method", "LRFD")),
            gap=num("gap", 0.25),
            develop_member_capacity=flag("develop_capacity_check"),
            hole_deformation_considered=flag("deformation_is_consideration", True),
        )

    def check(self) -> "SpliceOutcome":
        from .splice import check_splice

        return check_splice(self)


__all__ = [
    "MemberSection",
    "SplicePlate",
    "BoltSpec",
    "BoltPattern",
    "FlangeSplice",
    "WebSplice",
    "SpliceInput",
]
