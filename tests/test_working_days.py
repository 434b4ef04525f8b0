from datetime import date, datetime, timedelta, timezone

from leave_tracker.models.enums import HalfDayType
from leave_tracker.services.holiday_calendar import holidays_for
from leave_tracker.services.working_days import count_working_days


def test_bastille_day_excluded_from_week():
    """Mon-Fri week containing 14 July counts four days."""
    assert count_working_days("2025-07-14", "2025-07-18", [date(2025, 7, 14)]) == 4


def test_reversed_range_counts_nothing():
    assert count_working_days("2025-07-18", "2025-07-14", []) == 0


def test_weekend_only_range():
    assert count_working_days("2025-07-19", "2025-07-20", []) == 0


def test_weekend_and_holiday_range():
    """Saturday 12 July through Monday 14 July (holiday) has no working day."""
    assert count_working_days("2025-07-12", "2025-07-14", holidays_for(2025)) == 0


def test_full_month_with_calendar():
    """July 2025 has 23 weekdays, one of them a public holiday."""
    assert count_working_days(date(2025, 7, 1), date(2025, 7, 31), holidays_for(2025)) == 22


def test_single_half_day():
    assert count_working_days("2025-07-15", "2025-07-15", [], is_half_day=True, half_day_type=HalfDayType.MORNING) == 0.5


def test_half_day_forced_on_holiday_and_weekend():
    assert count_working_days("2025-07-14", "2025-07-14", holidays_for(2025), is_half_day=True) == 0.5
    assert count_working_days("2025-07-19", "2025-07-19", [], is_half_day=True) == 0.5


def test_multi_day_half_day_keeps_full_count():
    assert count_working_days("2025-07-15", "2025-07-16", [], is_half_day=True, half_day_type=HalfDayType.AFTERNOON) == 2


def test_invalid_dates_return_zero():
    assert count_working_days("not-a-date", "2025-07-16", []) == 0
    assert count_working_days("2025-07-16", None, []) == 0


def test_time_and_offset_are_ignored():
    """A late-evening timestamp with a negative offset still means 14 July."""
    evening = datetime(2025, 7, 14, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert count_working_days(evening, evening, holidays_for(2025)) == 0
    assert count_working_days("2025-07-15T22:00:00.000Z", "2025-07-15T22:00:00.000Z", []) == 1


def test_holidays_accept_plain_strings():
    assert count_working_days("2025-07-14", "2025-07-15", ["2025-07-14", "garbage"]) == 1
