"""
Quota-driven balances and yearly statistics.

Balances trust the configured ``yearly_quota``. The month-by-month table in
``monthly_summary`` uses a fixed RTT accrual instead; the two are kept apart
on purpose.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.entitlement import CarryoverLeave, LeaveBalance, LeaveQuota
from leave_tracker.schemas.leave import LeaveEntry
from leave_tracker.schemas.summary import LeaveStats
from leave_tracker.services.carryover import sum_carryover
from leave_tracker.services.leave_types import is_stats_type

logger = logging.getLogger(__name__)


def leaves_in_year(leaves: Iterable[LeaveEntry], year: int) -> List[LeaveEntry]:
    """Leaves attributed to ``year``: those whose start date falls in it."""
    return [leave for leave in leaves or [] if leave.start_date.year == year]


def used_days(leaves: Iterable[LeaveEntry], leave_type: LeaveType, year: int) -> float:
    # Forecast and confirmed leaves both consume quota
    return sum(leave.working_days for leave in leaves_in_year(leaves, year) if leave.type == leave_type)


def quota_total(quota: LeaveQuota, carryovers: Iterable[CarryoverLeave]) -> float:
    return quota.yearly_quota + (quota.carryover or 0.0) + sum_carryover(carryovers, quota.type)


def compute_balances(
    leaves: Iterable[LeaveEntry],
    quotas: Iterable[LeaveQuota],
    carryovers: Iterable[CarryoverLeave],
    year: int,
) -> List[LeaveBalance]:
    """One balance per configured quota, in quota order."""
    leaves = list(leaves or [])
    carryovers = list(carryovers or [])
    balances = []
    for quota in quotas or []:
        total = quota_total(quota, carryovers)
        used = used_days(leaves, quota.type, year)
        balances.append(
            LeaveBalance(
                type=quota.type,
                total=total,
                used=used,
                remaining=max(0.0, total - used),
                year=year,
            )
        )
    logger.debug(f"Computed {len(balances)} balances for {year}")
    return balances


def leave_stats(leaves: Iterable[LeaveEntry], year: int) -> LeaveStats:
    year_leaves = leaves_in_year(leaves, year)

    by_type: Dict[LeaveType, float] = {leave_type: 0.0 for leave_type in LeaveType}
    by_month: Dict[str, float] = defaultdict(float)
    total = 0.0

    for leave in year_leaves:
        by_type[leave.type] += leave.working_days
        if is_stats_type(leave.type):
            total += leave.working_days
            by_month[leave.start_date.strftime("%Y-%m")] += leave.working_days

    return LeaveStats(year=year, total_days=total, by_type=by_type, by_month=dict(sorted(by_month.items())))
