"""
Month-by-month leave table with separate real and forecast tracks.

Lump-sum types (paid leave, CET, ...) are fully available from January:
``yearly_quota + carryover``. Rows cover every configured quota, RTT always,
and any other type with leaves in the year (entitlement = carryover only). RTT is posted monthly at a fixed rate,
``RTT_MONTHLY_ACCRUAL`` per month, regardless of the configured RTT quota.
That accrual differs from ``balance.compute_balances``, which
trusts the configured quota; both stay available as separate computations.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.entitlement import CarryoverLeave, LeaveQuota
from leave_tracker.schemas.leave import LeaveEntry
from leave_tracker.schemas.summary import (
    MonthlySummary,
    MonthlySummaryRow,
    TrackFigures,
    TypeTracks,
    YearlyTotal,
)
from leave_tracker.services.carryover import sum_carryover

logger = logging.getLogger(__name__)

RTT_MONTHLY_ACCRUAL = 2.0
RTT_YEARLY_ACCRUAL = RTT_MONTHLY_ACCRUAL * 12

MONTH_NAMES = [
    "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
    "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
]


def rtt_accrued_entitlement(month: int, carryover: float = 0.0) -> float:
    """RTT days earned from January through ``month`` (1-12), plus carryover."""
    return carryover + RTT_MONTHLY_ACCRUAL * month


def lump_sum_entitlement(yearly_quota: float, carryover: float = 0.0) -> float:
    return yearly_quota + carryover


def _entitlement_to_date(leave_type: LeaveType, yearly_quota: float, carryover: float, month: int) -> float:
    if leave_type == LeaveType.TIME_REDUCTION:
        return rtt_accrued_entitlement(month, carryover)
    return lump_sum_entitlement(yearly_quota, carryover)


def _taken_by_month(leaves: Iterable[LeaveEntry], year: int, forecast: bool) -> Dict[tuple, float]:
    """(type, month) -> working days, for leaves starting in ``year`` on one track."""
    taken: Dict[tuple, float] = defaultdict(float)
    for leave in leaves:
        if leave.start_date.year != year or leave.is_forecast != forecast:
            continue
        taken[(leave.type, leave.start_date.month)] += leave.working_days
    return taken


def build_separated(
    leaves: Iterable[LeaveEntry],
    quotas: Iterable[LeaveQuota],
    carryovers: Iterable[CarryoverLeave],
    year: int,
) -> MonthlySummary:
    leaves = list(leaves or [])
    carryovers = list(carryovers or [])

    tracked: Dict[LeaveType, Optional[LeaveQuota]] = {}
    for quota in quotas or []:
        if quota.type in tracked:
            logger.warning(f"Duplicate quota for {quota.type.value}; keeping the first one")
            continue
        tracked[quota.type] = quota
    # RTT accrues whether or not a quota is configured; other types show up once they have leaves
    tracked.setdefault(LeaveType.TIME_REDUCTION, None)
    used_types = {leave.type for leave in leaves if leave.start_date.year == year}
    for leave_type in LeaveType:
        if leave_type in used_types:
            tracked.setdefault(leave_type, None)

    yearly = {leave_type: quota.yearly_quota if quota else 0.0 for leave_type, quota in tracked.items()}
    opening = {
        leave_type: ((quota.carryover or 0.0) if quota else 0.0) + sum_carryover(carryovers, leave_type)
        for leave_type, quota in tracked.items()
    }
    real_taken = _taken_by_month(leaves, year, forecast=False)
    forecast_taken = _taken_by_month(leaves, year, forecast=True)

    real_cumul = {leave_type: 0.0 for leave_type in tracked}
    forecast_cumul = {leave_type: 0.0 for leave_type in tracked}
    months: List[MonthlySummaryRow] = []

    for month in range(1, 13):
        by_type = {}
        for leave_type in tracked:
            entitlement = _entitlement_to_date(leave_type, yearly[leave_type], opening[leave_type], month)

            real = real_taken.get((leave_type, month), 0.0)
            forecast = forecast_taken.get((leave_type, month), 0.0)
            real_cumul[leave_type] += real
            forecast_cumul[leave_type] += forecast

            by_type[leave_type] = TypeTracks(
                real=TrackFigures(
                    taken=real,
                    cumulative=real_cumul[leave_type],
                    remaining=max(0.0, entitlement - real_cumul[leave_type]),
                ),
                forecast=TrackFigures(
                    taken=forecast,
                    cumulative=forecast_cumul[leave_type],
                    remaining=max(0.0, entitlement - forecast_cumul[leave_type]),
                ),
            )
        months.append(MonthlySummaryRow(month=month, month_name=MONTH_NAMES[month - 1], by_type=by_type))

    yearly_totals = {
        leave_type: YearlyTotal(
            real=real_cumul[leave_type],
            forecast=forecast_cumul[leave_type],
            total=real_cumul[leave_type] + forecast_cumul[leave_type],
        )
        for leave_type in tracked
    }
    return MonthlySummary(year=year, opening=opening, months=months, yearly_totals=yearly_totals)
