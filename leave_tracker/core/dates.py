"""
Date helpers shared by the leave engine.

Every engine function accepts ``date``, ``datetime`` or ISO-8601 strings.
Values are reduced to a plain calendar date: time-of-day and timezone offsets
are dropped, never converted.
"""
import logging
from datetime import date, datetime
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

# Years accepted by the DD/MM/YYYY form helpers
FRENCH_DATE_MIN_YEAR = 2020
FRENCH_DATE_MAX_YEAR = 2030


def parse_day(value: Any) -> Optional[date]:
    """
    Reduce a date-like value to a calendar date.

    Returns None (and logs) for anything unparsable, so callers can degrade
    to a zero/empty result instead of raising.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    logger.warning(f"Invalid date input: {value!r}")
    return None


def french_to_iso(french_date: str) -> str:
    """DD/MM/YYYY -> YYYY-MM-DD; returns '' when the input is not in that shape."""
    if not french_date or len(french_date) != 10:
        return ""
    parts = french_date.split("/")
    if len(parts) != 3:
        return ""
    day, month, year = parts
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def iso_to_french(iso_date: str) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY; returns '' when the input is not in that shape."""
    if not iso_date or len(iso_date) != 10:
        return ""
    parts = iso_date.split("-")
    if len(parts) != 3:
        return ""
    year, month, day = parts
    return f"{day}/{month}/{year}"


def is_valid_french_date(french_date: str) -> bool:
    iso = french_to_iso(french_date)
    if not iso:
        return False
    try:
        parsed = date.fromisoformat(iso)
    except ValueError:
        return False
    return FRENCH_DATE_MIN_YEAR <= parsed.year <= FRENCH_DATE_MAX_YEAR


def day_text_to_iso(text: str) -> str:
    """
    Accept YYYY-MM-DD, DD/MM/YYYY or DD-MM-YYYY and return YYYY-MM-DD.

    ISO input is returned untouched for the caller to parse. A French form
    that is not a real date raises ValueError.
    """
    text = text.strip()
    if "/" in text or len(text.split("-")[0]) <= 2:
        french = text.replace("-", "/")
        if not is_valid_french_date(french):
            raise ValueError(f"{text!r} is not a valid DD/MM/YYYY date")
        return french_to_iso(french)
    return text
