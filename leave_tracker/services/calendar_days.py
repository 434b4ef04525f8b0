import calendar
import logging
from datetime import date
from typing import Iterable, List, Optional

from leave_tracker.schemas.holiday import PublicHoliday
from leave_tracker.schemas.leave import CalendarDay, LeaveEntry
from leave_tracker.services.holiday_calendar import holiday_dates
from leave_tracker.services.working_days import is_weekend

logger = logging.getLogger(__name__)


def _leave_on(day: date, leaves: List[LeaveEntry]) -> Optional[LeaveEntry]:
    for leave in leaves:
        if leave.start_date <= day <= leave.end_date:
            return leave
    return None


def project_month(
    year: int,
    month: int,
    leaves: Iterable[LeaveEntry],
    holidays: Iterable[PublicHoliday],
) -> List[CalendarDay]:
    """
    One ``CalendarDay`` per day of the month.

    Weekends and holidays are never marked as leave days, even inside a
    leave's range.
    """
    if not 1 <= month <= 12:
        logger.warning(f"Calendar projection skipped for invalid month {month}/{year}")
        return []

    leaves = list(leaves or [])
    holidays = list(holidays or [])
    names = {h.date: h.name for h in holidays}
    closed = holiday_dates(holidays)

    days = []
    for day_number in range(1, calendar.monthrange(year, month)[1] + 1):
        day = date(year, month, day_number)
        weekend = is_weekend(day)
        holiday = day in closed
        leave = None if weekend or holiday else _leave_on(day, leaves)
        days.append(
            CalendarDay(
                date=day,
                is_leave_day=leave is not None,
                leave_type=leave.type if leave else None,
                leave_id=leave.id if leave else None,
                is_forecast=leave.is_forecast if leave else None,
                is_weekend=weekend,
                is_holiday=holiday,
                holiday_name=names.get(day),
            )
        )
    return days
