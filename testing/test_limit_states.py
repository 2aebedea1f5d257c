"""AISC 360-22 limit-state formulas."""

import math

import pytest

from splicey.checks import (
    LimitStateResult,
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
from splicey.materials import DesignMethod


def test_bolt_shear_single_plane_a325_threads_included():
    s = bolt_shear("A325", True, 0.875)

    assert s.details["Fnv"] == 54.0
    assert s.details["Ab"] == pytest.approx(0.6013, rel=1e-3)
    assert s.Rn == pytest.approx(32.45, rel=2e-3)
    assert s.design(DesignMethod.LRFD) == pytest.approx(0.75 * s.Rn)
    assert s.design(DesignMethod.ASD) == pytest.approx(s.Rn / 2.0)


def test_bolt_shear_threads_excluded_and_double_shear():
    single = bolt_shear("A325", False, 0.875)
    double = bolt_shear("A325", False, 0.875, n_shear_planes=2)

    assert single.details["Fnv"] == 68.0
    assert double.Rn == pytest.approx(2.0 * single.Rn)


def test_bolt_tension_uses_fnt():
    s = bolt_tension("A490", 1.0)
    assert s.Rn == pytest.approx(113.0 * math.pi / 4.0)


def test_unknown_grade_has_zero_bolt_strength():
    assert bolt_shear("A307", True, 0.875).Rn == 0.0
    assert bolt_tension("A307", 0.875).Rn == 0.0


def test_gross_yielding_asd():
    s = gross_section_yielding(Ag=6.0, Fy=50.0)
    assert s.Rn == pytest.approx(300.0)
    assert s.design(DesignMethod.ASD) == pytest.approx(179.6, abs=0.05)


def test_net_fracture_with_shear_lag():
    s = net_section_fracture(An=5.0, Fu=65.0, U=0.9)
    assert s.details["Ae"] == pytest.approx(4.5)
    assert s.Rn == pytest.approx(292.5)


def test_shear_yielding_and_rupture():
    assert shear_yielding(Agv=4.5, Fy=50.0).Rn == pytest.approx(135.0)
    assert shear_rupture(Anv=3.6, Fu=65.0).Rn == pytest.approx(140.4)
    assert shear_rupture(Anv=-1.0, Fu=65.0).Rn == 0.0


def test_block_shear_takes_lesser_path():
    s = block_shear(Anv=4.0, Agv=5.0, Ant=1.0, Fu=65.0, Fy=50.0)

    assert s.details["path_rupture"] == pytest.approx(221.0)
    assert s.details["path_yield"] == pytest.approx(215.0)
    assert s.Rn == pytest.approx(215.0)


def test_block_shear_degenerate_areas_give_zero():
    assert block_shear(Anv=0.0, Agv=5.0, Ant=1.0, Fu=65.0, Fy=50.0).Rn == 0.0
    assert block_shear(Anv=4.0, Agv=5.0, Ant=-0.1, Fu=65.0, Fy=50.0).Rn == 0.0


def test_bearing_edge_bolt_tearout_governs():
    s = bolt_bearing(0.875, 0.5, 65.0, 1.5, 3.0, edge_bolt=True)

    assert s.details["Lc"] == pytest.approx(1.03125)
    assert s.Rn == pytest.approx(1.2 * 1.03125 * 0.5 * 65.0)


def test_bearing_without_hole_deformation_uses_higher_coefficients():
    s = bolt_bearing(0.875, 0.5, 65.0, 1.5, 3.0, edge_bolt=True, hole_deformation_considered=False)

    assert s.details["tearout_coeff"] == 1.5
    assert s.details["bearing_coeff"] == 3.0
    assert s.Rn == pytest.approx(1.5 * 1.03125 * 0.5 * 65.0)


def test_bearing_interior_bolt_capped_by_bearing():
    s = bolt_bearing(0.875, 0.5, 65.0, math.inf, 3.0, edge_bolt=False)

    assert s.details["Lc"] == pytest.approx(2.0625)
    assert s.Rn == pytest.approx(2.4 * 0.875 * 0.5 * 65.0)


def test_bearing_negative_clear_distance_is_zero():
    s = bolt_bearing(0.875, 0.5, 65.0, 0.3, 3.0, edge_bolt=True)
    assert s.Rn == 0.0
    # the negative clear distance is kept to explain the zero strength
    assert s.details["Lc"] == pytest.approx(0.3 - 0.9375 / 2.0)
    assert s.details["Lc"] < 0.0


def test_bolt_group_bearing_sums_edge_and_interior():
    edge = bolt_bearing(0.875, 0.5, 65.0, 1.5, 3.0, edge_bolt=True)
    interior = bolt_bearing(0.875, 0.5, 65.0, 1.5, 3.0, edge_bolt=False)

    group = bolt_group_bearing(edge, interior, n_edge=2, n_interior=4)
    assert group.Rn == pytest.approx(2 * edge.Rn + 4 * interior.Rn)
    assert group.details["n_interior"] == 4


def test_plate_compression_stocky_plate_reaches_yield():
    s = plate_compression(Ag=7.5 * 0.75, Fy=50.0, thickness=0.75, unbraced_length=3.0)

    assert s.details["slenderness"] <= 25.0
    assert s.details["Fcr"] == 50.0
    assert s.Rn == pytest.approx(7.5 * 0.75 * 50.0)


def test_plate_compression_slender_plate_buckles():
    s = plate_compression(Ag=2.0, Fy=50.0, thickness=0.25, unbraced_length=12.0)

    assert s.details["slenderness"] > 25.0
    assert s.details["Fe"] is not None
    assert s.details["Fcr"] < 50.0
    assert s.Rn < 2.0 * 50.0


def test_flexural_rupture_lever_arm():
    s = flexural_rupture(Fu=65.0, d=18.0, bf=7.5, tf=0.57, n_holes=2, hole_diameter=1.0)

    Afn = (7.5 - 2.0) * 0.57
    assert s.details["Afn"] == pytest.approx(Afn)
    assert s.Rn == pytest.approx(65.0 * Afn * (18.0 - 0.57))


def test_member_tensile_rupture_net_area_and_shear_lag():
    s = member_tensile_rupture(
        Fu=65.0, d=18.0, bf=7.5, tf=0.57, tw=0.355,
        n_flange_holes=1, flange_hole_diameter=1.0,
        n_web_holes=4, web_hole_diameter=1.0,
    )

    Ag = 2 * 7.5 * 0.57 + (18.0 - 2 * 0.57) * 0.355
    An = Ag - 2 * 1.0 * 0.57 - 4 * 1.0 * 0.355
    U = (7.5 - 1.0) / 7.5
    assert s.details["Ag"] == pytest.approx(Ag)
    assert s.details["An"] == pytest.approx(An)
    assert s.details["U"] == pytest.approx(U)
    assert s.Rn == pytest.approx(65.0 * U * An)


@pytest.mark.parametrize(
    "strength",
    [
        bolt_shear("A490", True, 1.0),
        gross_section_yielding(10.0, 50.0),
        net_section_fracture(8.0, 65.0),
        shear_yielding(4.0, 50.0),
        block_shear(4.0, 5.0, 1.0, 65.0, 50.0),
    ],
)
def test_design_capacity_scales_with_method(strength):
    assert strength.design(DesignMethod.LRFD) == pytest.approx(strength.phi * strength.Rn)
    assert strength.design(DesignMethod.ASD) == pytest.approx(strength.Rn / strength.omega)


def test_doubling_strength_and_demand_keeps_ratio():
    base = LimitStateResult.from_strength("Gross", 150.0, gross_section_yielding(6.0, 50.0), DesignMethod.LRFD)
    doubled = LimitStateResult.from_strength("Gross", 300.0, gross_section_yielding(6.0, 100.0), DesignMethod.LRFD)

    assert doubled.ratio == pytest.approx(base.ratio)


def test_bolt_shear_lrfd_capacity():
    assert bolt_shear("A325", True, 0.875).design(DesignMethod.LRFD) == pytest.approx(24.3, abs=0.1)


def test_plate_compression_zero_thickness_uses_yield():
    s = plate_compression(Ag=0.0, Fy=50.0, thickness=0.0, unbraced_length=3.0)

    assert s.details["r"] == 0.0
    assert s.details["slenderness"] == 0.0
    assert s.details["Fcr"] == 50.0
    assert s.Rn == 0.0
