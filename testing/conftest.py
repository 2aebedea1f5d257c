import sys

import pytest
from loguru import logger

from splicey import (
    BoltPattern,
    BoltSpec,
    Demand,
    FlangeSplice,
    MemberSection,
    SpliceInput,
    SplicePlate,
    WebSplice,
)


@pytest.fixture
def member() -> MemberSection:
    """W18x50-like member, A992 steel."""
    return MemberSection(d=18.0, bf=7.5, tf=0.57, tw=0.355, Fy=50.0, Fu=65.0, Zx=101.0, Sx=88.9)


@pytest.fixture
def flange() -> FlangeSplice:
    return FlangeSplice(
        outer_plate=SplicePlate(height=7.5, thickness=0.75, length=20.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325"),
        pattern=BoltPattern(n_cols=3, n_rows=1, col_spacing=3.0, row_spacing=3.0, end_distance=1.5, gage=4.0),
    )


@pytest.fixture
def web() -> WebSplice:
    return WebSplice(
        plate=SplicePlate(height=12.0, thickness=0.375, length=10.0, Fy=50.0, Fu=65.0),
        bolt=BoltSpec(diameter=0.875, grade="A325"),
        pattern=BoltPattern(n_cols=1, n_rows=4, col_spacing=3.0, row_spacing=3.0, end_distance=1.5),
    )


@pytest.fixture
def splice_input(member: MemberSection, flange: FlangeSplice, web: WebSplice) -> SpliceInput:
    """Default single-plate flange splice under moment and shear (LRFD)."""
    return SpliceInput(member=member, flange=flange, web=web, demand=Demand(moment=150.0, shear=40.0))


@pytest.fixture
def captured_logs():
    """Enable splicey logging into a list for the duration of a test."""
    from splicey import configure_logging

    messages: list[str] = []
    configure_logging(level="DEBUG", sink=messages.append)
    yield messages
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("splicey")
