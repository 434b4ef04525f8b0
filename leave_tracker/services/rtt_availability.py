"""
When accrued RTT days may be spent.

RTT days for a month are posted on the 15th of that month. The rule is
advisory: it feeds warnings and never blocks leave creation.
"""
from datetime import date
from typing import Optional

from leave_tracker.core.dates import DateLike, parse_day
from leave_tracker.schemas.summary import RttAvailability, RttMonthDetail, RttPeriodAvailability
from leave_tracker.services.monthly_summary import RTT_MONTHLY_ACCRUAL

RTT_POSTING_DAY = 15


def can_take_rtt(target_month: int, target_year: int, now: date) -> RttAvailability:
    if target_year > now.year:
        return RttAvailability(
            can_take=False,
            available_days=0,
            reason=f"RTT for {target_year} are not available yet",
        )

    if target_year < now.year or target_month < now.month:
        return RttAvailability(can_take=True, available_days=RTT_MONTHLY_ACCRUAL)

    if target_month == now.month:
        if now.day >= RTT_POSTING_DAY:
            return RttAvailability(can_take=True, available_days=RTT_MONTHLY_ACCRUAL)
        return RttAvailability(
            can_take=False,
            available_days=0,
            reason=f"RTT for {target_month:02d}/{target_year} are posted on day {RTT_POSTING_DAY}",
        )

    return RttAvailability(
        can_take=False,
        available_days=0,
        reason=f"RTT for {target_month:02d}/{target_year} have not accrued yet",
    )


def _detail(month: int, year: int, now: date) -> RttMonthDetail:
    rule = can_take_rtt(month, year, now)
    return RttMonthDetail(
        month=month,
        year=year,
        available=rule.available_days,
        can_take=rule.can_take,
        reason=rule.reason,
    )


def available_rtt_for_period(start: DateLike, end: DateLike, now: date) -> RttPeriodAvailability:
    """Walk every month touched by [start, end] and add up what can be taken."""
    start_day: Optional[date] = parse_day(start)
    end_day: Optional[date] = parse_day(end)
    if start_day is None or end_day is None:
        return RttPeriodAvailability(total_available=0, details=[])

    details = []
    year, month = start_day.year, start_day.month
    while (year, month) <= (end_day.year, end_day.month):
        details.append(_detail(month, year, now))
        month += 1
        if month > 12:
            year, month = year + 1, 1

    return RttPeriodAvailability(
        total_available=sum(d.available for d in details if d.can_take),
        details=details,
    )


def available_rtt_for_year(year: int, now: date) -> RttPeriodAvailability:
    details = [_detail(month, year, now) for month in range(1, 13)]
    return RttPeriodAvailability(
        total_available=sum(d.available for d in details if d.can_take),
        details=details,
    )
