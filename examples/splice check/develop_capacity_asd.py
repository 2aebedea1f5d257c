"""
Double-plate flange splice designed to develop the member (ASD).

Moment and shear demand are taken from the member's own design strengths,
and an axial tension adds the member tensile rupture check.
"""

from splicey import (
    BoltPattern,
    BoltSpec,
    Demand,
    FlangeSplice,
    MemberSection,
    SpliceInput,
    SplicePlate,
    WebSplice,
    check_splice,
)

member = MemberSection(d=18.0, bf=7.5, tf=0.57, tw=0.355, Fy=50.0, Fu=65.0, Zx=101.0, Sx=88.9)

flange = FlangeSplice(
    outer_plate=SplicePlate(height=7.5, thickness=0.625, length=26.0, Fy=50.0, Fu=65.0),
    inner_plate=SplicePlate(height=3.0, thickness=0.625, length=26.0, Fy=50.0, Fu=65.0),
    bolt=BoltSpec(diameter=0.875, grade="A490", threads_included=False),
    pattern=BoltPattern(n_cols=4, n_rows=1, col_spacing=3.0, row_spacing=3.0, end_distance=1.5, gage=4.0),
)
web = WebSplice(
    plate=SplicePlate(height=15.0, thickness=0.3125, length=10.0, Fy=50.0, Fu=65.0),
    bolt=BoltSpec(diameter=0.875, grade="A325"),
    pattern=BoltPattern(n_cols=1, n_rows=5, col_spacing=3.0, row_spacing=3.0, end_distance=1.5),
)

inputs = SpliceInput(
    member,
    flange,
    web,
    demand=Demand(axial=40.0),
    design_method="ASD",
    develop_member_capacity=True,
)

outcome = check_splice(inputs)
if outcome.ok:
    result = outcome.result
    print(f"Developed demand: M = {result.derived_demand.moment:.1f} kip-ft, V = {result.derived_demand.shear:.1f} kips")
    for key, check in sorted(result.checks.items(), key=lambda item: item[1].ratio, reverse=True)[:5]:
        print(f"  {check.name:<40} ratio {check.ratio:.3f}")
    print("PASS" if result.passed else f"FAIL: {', '.join(result.failures)}")
else:
    print("\n".join(outcome.errors))
