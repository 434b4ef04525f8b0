from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.entitlement import CarryoverLeave, LeaveQuota
from leave_tracker.services.balance import compute_balances, leave_stats
from leave_tracker.services.carryover import available_carryover, carryover_summary, sum_carryover


def _carryover(leave_type, days, origin_year=2024, carryover_id="c1"):
    return CarryoverLeave(id=carryover_id, type=LeaveType(leave_type), origin_year=origin_year, days=days)


def test_time_reduction_fixture(make_leave):
    """Quota 23 + carryover 6, 24 days used: 5 remain."""
    leaves = [
        make_leave("rtt", "2025-02-03", "2025-02-14", working_days=10),
        make_leave("rtt", "2025-05-05", "2025-05-16", working_days=10),
        make_leave("rtt", "2025-09-01", "2025-09-04", working_days=4),
    ]
    quotas = [LeaveQuota(type=LeaveType.TIME_REDUCTION, yearly_quota=23)]
    balances = compute_balances(leaves, quotas, [_carryover("rtt", 6)], 2025)

    assert len(balances) == 1
    balance = balances[0]
    assert (balance.total, balance.used, balance.remaining) == (29, 24, 5)
    assert balance.year == 2025


def test_remaining_never_negative(make_leave):
    leaves = [make_leave("cp", "2025-03-03", "2025-03-12", working_days=8)]
    balances = compute_balances(leaves, [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=5)], [], 2025)
    assert balances[0].used == 8
    assert balances[0].remaining == 0


def test_every_carryover_counts_whatever_its_origin_year():
    carryovers = [
        _carryover("cp", 2, origin_year=2020, carryover_id="old"),
        _carryover("cp", 3, origin_year=2024, carryover_id="recent"),
        _carryover("rtt", 7, carryover_id="other-type"),
    ]
    balances = compute_balances([], [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25)], carryovers, 2025)
    assert balances[0].total == 30
    assert sum_carryover(carryovers, LeaveType.PAID_LEAVE) == 5


def test_forecast_and_real_both_consume_quota(make_leave):
    leaves = [
        make_leave("cp", "2025-04-07", working_days=1),
        make_leave("cp", "2025-11-03", "2025-11-05", working_days=3, is_forecast=True),
    ]
    balances = compute_balances(leaves, [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25)], [], 2025)
    assert balances[0].used == 4
    assert balances[0].remaining == 21


def test_only_leaves_starting_in_target_year(make_leave):
    leaves = [
        make_leave("cp", "2024-12-30", "2025-01-03", working_days=4),
        make_leave("cp", "2025-06-02", working_days=1),
    ]
    balances = compute_balances(leaves, [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25)], [], 2025)
    assert balances[0].used == 1


def test_types_without_quota_are_skipped_and_order_follows_quotas(make_leave):
    quotas = [
        LeaveQuota(type=LeaveType.TIME_SAVINGS_ACCOUNT, yearly_quota=5),
        LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25),
    ]
    leaves = [make_leave("sick", "2025-02-10", working_days=1)]
    balances = compute_balances(leaves, quotas, [], 2025)
    assert [b.type for b in balances] == [LeaveType.TIME_SAVINGS_ACCOUNT, LeaveType.PAID_LEAVE]


def test_embedded_quota_carryover_is_added():
    quotas = [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25, carryover=2)]
    balances = compute_balances([], quotas, [_carryover("cp", 1)], 2025)
    assert balances[0].total == 28


def test_balances_are_idempotent(make_leave):
    leaves = [make_leave("cp", "2025-04-07", working_days=1)]
    quotas = [LeaveQuota(type=LeaveType.PAID_LEAVE, yearly_quota=25)]
    carryovers = [_carryover("cp", 4)]
    assert compute_balances(leaves, quotas, carryovers, 2025) == compute_balances(leaves, quotas, carryovers, 2025)


def test_carryover_summary_groups_by_year_and_type():
    carryovers = [
        _carryover("cp", 2, origin_year=2023, carryover_id="a"),
        _carryover("cp", 3, origin_year=2024, carryover_id="b"),
        _carryover("rtt", 1.5, origin_year=2024, carryover_id="c"),
    ]
    summary = carryover_summary(carryovers)
    assert [c.id for c in summary.by_year[2024]] == ["b", "c"]
    assert len(summary.by_type[LeaveType.PAID_LEAVE]) == 2
    assert summary.total_by_type[LeaveType.PAID_LEAVE] == 5
    assert summary.total_by_type[LeaveType.SICK] == 0

    available = available_carryover(carryovers)
    assert available[LeaveType.TIME_REDUCTION] == 1.5
    assert set(available) == set(LeaveType)


def test_leave_stats_only_count_tracked_types_in_totals(make_leave):
    leaves = [
        make_leave("cp", "2025-03-03", "2025-03-05", working_days=3),
        make_leave("rtt", "2025-03-10", working_days=1),
        make_leave("sick", "2025-04-01", "2025-04-02", working_days=2),
        make_leave("cp", "2024-03-04", working_days=1),
    ]
    stats = leave_stats(leaves, 2025)
    assert stats.total_days == 4
    assert stats.by_type[LeaveType.SICK] == 2
    assert stats.by_type[LeaveType.PAID_LEAVE] == 3
    assert stats.by_month == {"2025-03": 4}
