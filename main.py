"""
Splicey Example: W18x50 bolted flange and web splice (LRFD).

This example demonstrates:
1. Describing the member, splice plates and bolt patterns
2. Checking the splice under a moment / shear demand
3. Reading the governing limit state and the detailing results
"""
import json
import sys
from pathlib import Path

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
    configure_logging,
)


def build_input() -> SpliceInput:
    member = MemberSection(d=18.0, bf=7.5, tf=0.57, tw=0.355, Fy=50.0, Fu=65.0, Zx=101.0, Sx=88.9)

    flange = FlangeSplice(
        outer_plate=SplicePlate(height=7.5, thickness=0.75, length=20.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325", threads_included=True),
        pattern=BoltPattern(n_cols=3, n_rows=1, col_spacing=3.0, row_spacing=3.0, end_distance=1.5, gage=4.0),
    )
    web = WebSplice(
        plate=SplicePlate(height=12.0, thickness=0.375, length=10.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325"),
        pattern=BoltPattern(n_cols=1, n_rows=4, col_spacing=3.0, row_spacing=3.0, end_distance=1.5),
        n_plates=2,
    )
    return SpliceInput(member, flange, web, demand=Demand(moment=150.0, shear=40.0))


def main() -> None:
    configure_logging("INFO", reset=True)

    # A saved input file (flat calculator keys) can be passed instead
    if len(sys.argv) > 1:
        inputs = SpliceInput.from_dict(json.loads(Path(sys.argv[1]).read_text()))
    else:
        inputs = build_input()

    outcome = check_splice(inputs)
    if not outcome.ok:
        print("Input rejected:")
        for error in outcome.errors:
            print(f"  - {error}")
        return
    for warning in outcome.warnings:
        print(f"Warning: {warning}")

    result = outcome.result
    print(f"\nDesign method: {result.design_method.value}")
    print(f"Demand: M = {result.derived_demand.moment:.1f} kip-ft, V = {result.derived_demand.shear:.1f} kips")

    print(f"\n{'Limit state':<40} {'Demand':>10} {'Capacity':>10} {'Ratio':>7}")
    for check in result.checks.values():
        status = "OK" if check.passed else "NG"
        print(f"{check.name:<40} {check.demand:>10.2f} {check.design_capacity:>10.2f} {check.ratio:>7.3f} {status}")

    print("\nDetailing:")
    for group, rules in result.geometry_checks.items():
        for name, rule in rules.items():
            status = "OK" if rule.passed else "NG"
            print(f"  {group}.{name}: {rule.actual:.3f} ({rule.bound} {rule.limit:.3f}) {status}")

    key, ratio = result.governing
    print(f"\nGoverning: {key} ({ratio:.1%})")
    print("PASS" if result.passed else f"FAIL: {', '.join(result.failures)}")


if __name__ == "__main__":
    main()
