"""
Payslip reconciliation.

Compares the figures an employee copies from a monthly payslip with what the
recorded leaves imply:

- RTT taken: payslips report the RTT of the *previous* month.
- CP taken the previous month: the dates listed on the payslip against the
  CP working days recorded for that month.
- CET taken in the month itself. It is reported but does not count towards
  the score.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, List, Set, Tuple

from leave_tracker.core.config import settings
from leave_tracker.models.enums import CheckStatus, LeaveType
from leave_tracker.schemas.leave import LeaveEntry
from leave_tracker.schemas.payroll import FigureCheck, PayrollCheck, PayrollDataInput
from leave_tracker.services.holiday_calendar import HolidayLike, holiday_dates
from leave_tracker.services.working_days import is_weekend

logger = logging.getLogger(__name__)


def previous_period(month: int, year: int) -> Tuple[int, int]:
    return (12, year - 1) if month == 1 else (month - 1, year)


def _taken(leaves: Iterable[LeaveEntry], leave_type: LeaveType, month: int, year: int) -> float:
    return sum(
        leave.working_days
        for leave in leaves
        if leave.type == leave_type and leave.start_date.year == year and leave.start_date.month == month
    )


def _status(difference: float) -> CheckStatus:
    gap = abs(difference)
    if gap <= settings.payroll.valid:
        return CheckStatus.VALID
    if gap <= settings.payroll.warning:
        return CheckStatus.WARNING
    return CheckStatus.ERROR


def _figure(declared: float, computed: float) -> FigureCheck:
    difference = declared - computed
    return FigureCheck(declared=declared, computed=computed, difference=difference, status=_status(difference))


def _leave_days(
    leaves: Iterable[LeaveEntry], leave_type: LeaveType, month: int, year: int, closed: Set[date]
) -> Set[date]:
    """Working days covered by ``leave_type`` leaves inside the given month."""
    days = set()
    for leave in leaves:
        if leave.type != leave_type:
            continue
        current = leave.start_date
        while current <= leave.end_date:
            if current.year == year and current.month == month and not is_weekend(current) and current not in closed:
                days.add(current)
            current += timedelta(days=1)
    return days


def check_payroll(
    record: PayrollDataInput,
    leaves: Iterable[LeaveEntry],
    holidays: Iterable[HolidayLike] = (),
) -> PayrollCheck:
    leaves = list(leaves or [])
    prev_month, prev_year = previous_period(record.month, record.year)

    rtt = _figure(record.rtt_taken_in_month, _taken(leaves, LeaveType.TIME_REDUCTION, prev_month, prev_year))
    cp = _figure(
        float(len(record.cp_dates_previous_month)),
        _taken(leaves, LeaveType.PAID_LEAVE, prev_month, prev_year),
    )
    cet = _figure(record.cet_balance, _taken(leaves, LeaveType.TIME_SAVINGS_ACCOUNT, record.month, record.year))

    expected_cp = _leave_days(leaves, LeaveType.PAID_LEAVE, prev_month, prev_year, holiday_dates(holidays))
    declared_cp = set(record.cp_dates_previous_month)

    scored: List[FigureCheck] = [rtt, cp]
    valid = sum(1 for check in scored if check.status == CheckStatus.VALID)
    score = round(valid / len(scored) * 100)
    if score >= settings.payroll.score_valid:
        status = CheckStatus.VALID
    elif score >= settings.payroll.score_warning:
        status = CheckStatus.WARNING
    else:
        status = CheckStatus.ERROR

    if status != CheckStatus.VALID:
        logger.info(f"Payslip {record.month:02d}/{record.year} reconciliation: {status.value} ({score}%)")

    return PayrollCheck(
        month=record.month,
        year=record.year,
        rtt_taken_in_month=rtt,
        cp_taken_previous_month=cp,
        cet_taken_in_month=cet,
        missing_cp_dates=sorted(expected_cp - declared_cp),
        unexpected_cp_dates=sorted(declared_cp - expected_cp),
        score=score,
        status=status,
    )
