import pytest

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.entitlement import CarryoverLeave, LeaveQuota
from leave_tracker.services.monthly_summary import MONTH_NAMES, build_separated, rtt_accrued_entitlement

CP = LeaveType.PAID_LEAVE
RTT = LeaveType.TIME_REDUCTION


@pytest.fixture
def summary(make_leave):
    quotas = [LeaveQuota(type=CP, yearly_quota=25), LeaveQuota(type=RTT, yearly_quota=23)]
    carryovers = [CarryoverLeave(id="c1", type=CP, origin_year=2024, days=5)]
    leaves = [
        make_leave("cp", "2025-01-13", "2025-01-15", working_days=3),
        make_leave("cp", "2025-02-10", "2025-02-11", working_days=2, is_forecast=True),
        make_leave("rtt", "2025-03-07", working_days=1),
        make_leave("rtt", "2025-03-20", "2025-03-21", working_days=2, is_forecast=True),
        make_leave("cp", "2024-06-03", working_days=1),
    ]
    return build_separated(leaves, quotas, carryovers, 2025)


def test_twelve_rows_with_month_names(summary):
    assert [row.month for row in summary.months] == list(range(1, 13))
    assert summary.months[0].month_name == MONTH_NAMES[0] == "Janvier"
    assert summary.months[7].month_name == "Août"


def test_lump_sum_available_from_january(summary):
    """Paid leave: 25 + 5 carried over, minus what each track has taken so far."""
    january = summary.months[0].by_type[CP]
    assert january.real.taken == 3
    assert january.real.remaining == 27
    assert january.forecast.remaining == 30

    february = summary.months[1].by_type[CP]
    assert february.real.cumulative == 3
    assert february.forecast.taken == 2
    assert february.forecast.remaining == 28


def test_tracks_never_mix(summary):
    december = summary.months[11].by_type[CP]
    assert december.real.cumulative == 3
    assert december.forecast.cumulative == 2


def test_rtt_accrues_monthly_regardless_of_quota(summary):
    march = summary.months[2].by_type[RTT]
    assert march.real.remaining == 5
    assert march.forecast.remaining == 4

    december = summary.months[11].by_type[RTT]
    assert december.real.remaining == 23
    assert december.forecast.remaining == 22


def test_yearly_totals_and_opening(summary):
    assert summary.opening[CP] == 5
    assert summary.opening[RTT] == 0
    totals = summary.yearly_totals[CP]
    assert (totals.real, totals.forecast, totals.total) == (3, 2, 5)


def test_remaining_floors_at_zero(make_leave):
    leaves = [make_leave("rtt", "2025-01-06", "2025-01-10", working_days=5)]
    summary = build_separated(leaves, [LeaveQuota(type=RTT, yearly_quota=23)], [], 2025)
    assert summary.months[0].by_type[RTT].real.remaining == 0
    assert summary.months[2].by_type[RTT].real.remaining == 1


def test_duplicate_quota_keeps_first():
    quotas = [LeaveQuota(type=CP, yearly_quota=25), LeaveQuota(type=CP, yearly_quota=10)]
    summary = build_separated([], quotas, [], 2025)
    assert summary.months[0].by_type[CP].real.remaining == 25


def test_rtt_accrual_helper():
    assert rtt_accrued_entitlement(1) == 2
    assert rtt_accrued_entitlement(12, carryover=3) == 27


def test_rtt_tracked_without_quota(make_leave):
    """RTT accrues monthly even when only paid leave has a quota."""
    leaves = [make_leave("rtt", "2025-03-07", working_days=1)]
    summary = build_separated(leaves, [LeaveQuota(type=CP, yearly_quota=25)], [], 2025)

    march = summary.months[2].by_type
    assert set(march) == {CP, RTT}
    assert march[RTT].real.taken == 1
    assert march[RTT].real.remaining == 5
    assert summary.yearly_totals[RTT].real == 1


def test_unconfigured_types_with_leaves_get_rows(make_leave):
    leaves = [
        make_leave("sick", "2025-04-01", "2025-04-02", working_days=2),
        make_leave("training", "2024-04-01", working_days=1),
    ]
    summary = build_separated(leaves, [], [], 2025)

    assert set(summary.months[0].by_type) == {RTT, LeaveType.SICK}
    april = summary.months[3].by_type[LeaveType.SICK]
    assert april.real.taken == 2
    assert april.real.remaining == 0
    assert summary.yearly_totals[LeaveType.SICK].total == 2
