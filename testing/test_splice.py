"""End-to-end splice evaluation."""

import dataclasses
import math

import pytest

from splicey import (
    BoltSpec,
    Demand,
    DesignMethod,
    SpliceInput,
    SplicePlate,
    check_splice,
    evaluate_splice,
    solve_eccentric_shear,
)
from splicey.demand import member_flexural_strength

BASE_KEYS = {
    "flange_bolt_shear",
    "outer_plate_gross_yielding",
    "outer_plate_net_fracture",
    "outer_plate_compression",
    "outer_plate_block_shear",
    "outer_plate_bearing",
    "beam_flange_bearing",
    "beam_flange_block_shear",
    "web_bolt_shear",
    "web_bolt_interaction",
    "web_plate_shear_yielding",
    "web_plate_shear_rupture",
    "web_plate_block_shear",
    "web_plate_bearing",
    "beam_web_bearing",
    "beam_web_shear_yielding",
    "beam_flexural_rupture",
    "beam_web_shear_rupture",
}

INNER_KEYS = {
    "inner_plate_gross_yielding",
    "inner_plate_net_fracture",
    "inner_plate_compression",
    "inner_plate_block_shear",
    "inner_plate_bearing",
}


def test_default_splice_passes(splice_input):
    outcome = check_splice(splice_input)

    assert outcome.ok
    assert outcome.errors == ()
    result = outcome.result
    assert set(result.checks) == BASE_KEYS | {"flange_bolt_prying_tension"}
    assert result.design_method is DesignMethod.LRFD
    assert result.passed
    assert result.failures == []


def test_flange_bolt_shear_against_flange_force(splice_input):
    result = evaluate_splice(splice_input)
    check = result.checks["flange_bolt_shear"]

    assert check.demand == pytest.approx(150.0 * 12.0 / (18.0 - 0.57))
    assert check.details["n_bolts"] == 6
    assert check.Rn == pytest.approx(6 * check.details["Rn_single"])
    assert check.design_capacity == pytest.approx(0.75 * check.Rn)


def test_web_bolts_carry_eccentric_shear(splice_input):
    result = evaluate_splice(splice_input)
    ecc = solve_eccentric_shear(
        shear=40.0, gap=0.25, n_cols=1, n_rows=4, col_spacing=3.0, row_spacing=3.0, end_distance=1.5
    )

    assert result.checks["web_bolt_shear"].demand == pytest.approx(ecc.resultant)
    assert result.checks["web_plate_bearing"].demand == pytest.approx(ecc.resultant)

    # flange bolts develop the full moment, so the web takes only the eccentricity moment
    interaction = result.checks["web_bolt_interaction"]
    assert interaction.details["M_shortfall"] == 0.0
    assert interaction.details["M_web_design"] == pytest.approx(ecc.moment)
    assert interaction.demand == pytest.approx(ecc.moment * 4.5 / 45.0)


def test_moment_beyond_flange_bolts_goes_to_the_web(splice_input):
    heavy = dataclasses.replace(splice_input, demand=Demand(moment=400.0, shear=40.0))
    result = evaluate_splice(heavy)
    details = result.checks["web_bolt_interaction"].details

    flange_capacity = result.checks["flange_bolt_shear"].design_capacity
    assert details["M_flange_max"] == pytest.approx(flange_capacity * (18.0 - 0.57))
    assert details["M_shortfall"] == pytest.approx(400.0 * 12.0 - details["M_flange_max"])
    assert details["M_web_design"] == pytest.approx(details["M_shortfall"])


def test_inner_plate_adds_checks_and_shear_plane(splice_input):
    inner = SplicePlate(height=6.0, thickness=0.5, length=20.0, Fy=50.0, Fu=65.0)
    flange = dataclasses.replace(splice_input.flange, inner_plate=inner)
    result = evaluate_splice(dataclasses.replace(splice_input, flange=flange))

    assert INNER_KEYS <= set(result.checks)
    assert result.checks["flange_bolt_shear"].details["n_shear_planes"] == 2
    # each plate takes half of the flange force
    tension = result.checks["flange_bolt_shear"].demand
    assert result.checks["inner_plate_gross_yielding"].demand == pytest.approx(tension / 2.0)
    assert result.checks["outer_plate_gross_yielding"].demand == pytest.approx(tension / 2.0)
    assert "inner" in result.checks["flange_bolt_prying_tension"].details


def test_prying_omitted_without_flange_tension(splice_input):
    result = evaluate_splice(dataclasses.replace(splice_input, demand=Demand(shear=40.0)))

    assert "flange_bolt_prying_tension" not in result.checks
    assert set(result.checks) == BASE_KEYS


def test_tensile_rupture_only_with_axial_tension(splice_input):
    with_axial = evaluate_splice(dataclasses.replace(splice_input, demand=Demand(moment=150.0, shear=40.0, axial=30.0)))
    compressive = evaluate_splice(dataclasses.replace(splice_input, demand=Demand(moment=150.0, shear=40.0, axial=-30.0)))

    assert with_axial.checks["beam_tensile_rupture"].demand == 30.0
    assert "beam_tensile_rupture" not in compressive.checks


def test_develop_member_capacity(splice_input, member):
    result = evaluate_splice(dataclasses.replace(splice_input, develop_member_capacity=True))

    assert result.derived_demand.moment == pytest.approx(member_flexural_strength(member, DesignMethod.LRFD))
    assert result.checks["beam_flexural_rupture"].demand == pytest.approx(result.derived_demand.moment * 12.0)
    # the snapshot keeps the user demand
    assert splice_input.demand == Demand(moment=150.0, shear=40.0)


def test_asd_uses_safety_factors(splice_input):
    lrfd = evaluate_splice(splice_input)
    asd = evaluate_splice(dataclasses.replace(splice_input, design_method="ASD"))

    assert asd.design_method is DesignMethod.ASD
    for key, check in asd.checks.items():
        assert check.design_capacity == pytest.approx(check.Rn / check.omega)
        # F'nt depends on the design method, so only the interaction Rn differs
        if key != "web_bolt_interaction":
            assert check.Rn == pytest.approx(lrfd.checks[key].Rn)


def test_asd_interaction_reduces_tension_strength_more(splice_input):
    lrfd = evaluate_splice(splice_input).checks["web_bolt_interaction"]
    asd = evaluate_splice(dataclasses.replace(splice_input, design_method="ASD")).checks["web_bolt_interaction"]

    assert lrfd.details["Vu"] > 0.0
    assert asd.details["Fnt_prime"] < lrfd.details["Fnt_prime"]
    assert asd.Rn < lrfd.Rn


def test_zero_flange_arm_fails_prying_without_nan(splice_input, member):
    flat = dataclasses.replace(member, d=1.0, tf=1.0)
    result = evaluate_splice(dataclasses.replace(splice_input, member=flat))
    prying = result.checks["flange_bolt_prying_tension"]

    assert prying.details["Q_total"] == 0.0
    assert prying.demand == math.inf
    assert prying.ratio == math.inf
    assert not prying.passed
    assert not any(math.isnan(check.ratio) for check in result.checks.values())
    assert result.governing[1] == math.inf


def test_governing_is_highest_ratio(splice_input):
    result = evaluate_splice(splice_input)
    key, ratio = result.governing

    assert ratio == max(check.ratio for check in result.checks.values())
    assert result.checks[key].ratio == ratio


def test_geometry_checks_for_both_bolt_groups(splice_input):
    result = evaluate_splice(splice_input)

    assert set(result.geometry_checks) == {"flange_bolts", "web_bolts"}
    for rules in result.geometry_checks.values():
        assert len(rules) == 7
    flange = result.geometry_checks["flange_bolts"]
    assert flange["edge_distance_longitudinal"].actual == pytest.approx(10.0 - 1.5 - 6.0)
    assert flange["edge_distance_transverse"].actual == pytest.approx((7.5 - 4.0) / 2.0)
    # thinner ply is the beam flange
    assert flange["max_spacing_column"].limit == pytest.approx(min(24.0 * 0.57, 12.0))


def test_detailing_failure_fails_result_but_not_ratios(splice_input):
    pattern = dataclasses.replace(splice_input.flange.pattern, end_distance=0.5)
    flange = dataclasses.replace(splice_input.flange, pattern=pattern)
    result = evaluate_splice(dataclasses.replace(splice_input, flange=flange))

    assert "flange_bolts.edge_distance_gap" in result.failures
    assert not result.passed


def test_unknown_bolt_grade_is_noted(splice_input):
    flange = dataclasses.replace(splice_input.flange, bolt=BoltSpec(diameter=0.875, grade="A307"))
    outcome = check_splice(dataclasses.replace(splice_input, flange=flange))

    assert outcome.ok
    assert outcome.warnings
    result = outcome.result
    assert any("A307" in note for note in result.notes)
    assert result.checks["flange_bolt_shear"].ratio == math.inf
    assert not result.checks["flange_bolt_shear"].passed
    assert result.governing[1] == math.inf


def test_invalid_input_is_rejected(splice_input, member):
    thin = dataclasses.replace(member, tf=0.05)
    outcome = check_splice(dataclasses.replace(splice_input, member=thin))

    assert not outcome.ok
    assert outcome.result is None
    assert "Member Flange Thickness must be at least 0.1." in outcome.errors


def test_evaluation_is_repeatable(splice_input):
    assert evaluate_splice(splice_input).info == evaluate_splice(splice_input).info


def test_input_check_shortcut(splice_input):
    outcome = splice_input.check()
    assert outcome.ok
    assert outcome.result.info["passed"] is True


def test_from_dict_flat_keys(splice_input):
    data = {
        "member_d": 18.0, "member_bf": 7.5, "member_tf": 0.57, "member_tw": 0.355,
        "member_Fy": 50.0, "member_Fu": 65.0, "member_Zx": 101.0, "member_Sx": 88.9,
        "H_fp": 7.5, "t_fp": 0.75, "L_fp": 20.0, "flange_plate_Fy": 50.0, "flange_plate_Fu": 65.0,
        "num_flange_plates": 1, "D_fp": 0.875, "bolt_grade_fp": "A325", "threads_included_fp": "true",
        "Nc_fp": 3, "Nr_fp": 1, "S1_col_spacing_fp": 3.0, "S2_row_spacing_fp": 3.0,
        "S3_end_dist_fp": 1.5, "g_gage_fp": 4.0,
        "H_wp": 12.0, "t_wp": 0.375, "L_wp": 10.0, "web_plate_Fy": 50.0, "web_plate_Fu": 65.0,
        "D_wp": 0.875, "bolt_grade_wp": "A325", "Nc_wp": 1, "Nr_wp": 4,
        "S4_col_spacing_wp": 3.0, "S5_row_spacing_wp": 3.0, "S6_end_dist_wp": 1.5, "num_web_plates": 2,
        "M_load": 150.0, "V_load": 40.0, "Axial_load": "",
        "design_method": "LRFD", "gap": 0.25, "develop_capacity_check": False,
    }

    assert SpliceInput.from_dict(data) == splice_input
