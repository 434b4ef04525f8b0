import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from leave_tracker.core.dates import DateLike, parse_day
from leave_tracker.models.enums import HalfDayType
from leave_tracker.services.holiday_calendar import HolidayLike, holiday_dates

logger = logging.getLogger(__name__)

HALF_DAY = 0.5


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def count_working_days(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[HolidayLike] = (),
    is_half_day: bool = False,
    half_day_type: Optional[HalfDayType] = None,
) -> float:
    """
    Count business days from ``start`` to ``end`` inclusive.

    Saturdays, Sundays and holidays are skipped. A single-day half-day request
    always counts 0.5, even when that day is itself a weekend or holiday.
    Multi-day half-day requests keep the full count; ``half_day_type`` does not
    change the result. Unparsable dates yield 0.
    """
    start_day = parse_day(start)
    end_day = parse_day(end)
    if start_day is None or end_day is None:
        logger.warning(f"Working-day count skipped for invalid range {start!r} -> {end!r}")
        return 0.0

    if is_half_day and start_day == end_day:
        return HALF_DAY

    closed = holiday_dates(holidays)
    count = 0
    current = start_day
    while current <= end_day:
        if not is_weekend(current) and current not in closed:
            count += 1
        current += timedelta(days=1)
    return float(count)
