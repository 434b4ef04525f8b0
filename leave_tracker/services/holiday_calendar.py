"""
Static public-holiday table.

Only the years listed below are known; any other year contributes no
holidays. Callers wanting other years store their own overrides
(see ``LeaveRepository.get_holidays``).
"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from leave_tracker.core.dates import DateLike, parse_day
from leave_tracker.schemas.holiday import PublicHoliday

HolidayLike = Union[PublicHoliday, DateLike]

_FRENCH_HOLIDAYS: Dict[int, List[Tuple[str, str]]] = {
    2024: [
        ("2024-01-01", "Jour de l'an"),
        ("2024-05-01", "Fête du travail"),
        ("2024-05-08", "Victoire 1945"),
        ("2024-05-09", "Ascension"),
        ("2024-05-20", "Lundi de Pentecôte"),
        ("2024-07-14", "Fête nationale"),
        ("2024-08-15", "Assomption"),
        ("2024-11-01", "Toussaint"),
        ("2024-11-11", "Armistice"),
        ("2024-12-25", "Noël"),
    ],
    2025: [
        ("2025-01-01", "Jour de l'an"),
        ("2025-05-01", "Fête du travail"),
        ("2025-05-08", "Victoire 1945"),
        ("2025-05-29", "Ascension"),
        ("2025-06-09", "Lundi de Pentecôte"),
        ("2025-07-14", "Fête nationale"),
        ("2025-08-15", "Assomption"),
        ("2025-11-01", "Toussaint"),
        ("2025-11-11", "Armistice"),
        ("2025-12-25", "Noël"),
    ],
    2026: [
        ("2026-01-01", "Jour de l'an"),
        ("2026-05-01", "Fête du travail"),
        ("2026-05-08", "Victoire 1945"),
        ("2026-05-14", "Ascension"),
        ("2026-05-25", "Lundi de Pentecôte"),
        ("2026-07-14", "Fête nationale"),
        ("2026-08-15", "Assomption"),
        ("2026-11-01", "Toussaint"),
        ("2026-11-11", "Armistice"),
        ("2026-12-25", "Noël"),
    ],
}


def holidays_for(year: int, country: str = "FR") -> List[PublicHoliday]:
    """Public holidays for ``year``; empty for years outside the table."""
    return [
        PublicHoliday(id=str(index), date=date.fromisoformat(day), name=name, country=country)
        for index, (day, name) in enumerate(_FRENCH_HOLIDAYS.get(year, []), start=1)
    ]


def _holiday_day(holiday: HolidayLike) -> Optional[date]:
    if isinstance(holiday, PublicHoliday):
        return holiday.date
    return parse_day(holiday)


def holiday_dates(holidays: Iterable[HolidayLike]) -> Set[date]:
    """Calendar dates of ``holidays``; unparsable entries are skipped."""
    days = set()
    for holiday in holidays or []:
        day = _holiday_day(holiday)
        if day is not None:
            days.add(day)
    return days


def is_holiday(day: DateLike, holidays: Iterable[HolidayLike]) -> bool:
    target = parse_day(day)
    if target is None:
        return False
    return target in holiday_dates(holidays)


def holiday_name(day: DateLike, holidays: Iterable[PublicHoliday]) -> Optional[str]:
    """Name of the holiday on ``day``. Bare dates carry no name, so only ``PublicHoliday`` entries are searched."""
    target = parse_day(day)
    if target is None:
        return None
    for holiday in holidays or []:
        if isinstance(holiday, PublicHoliday) and holiday.date == target:
            return holiday.name
    return None
