import uuid
from datetime import datetime
from typing import Iterable, Optional

from leave_tracker.schemas.leave import LeaveEntry, LeaveEntryCreate
from leave_tracker.services.holiday_calendar import HolidayLike
from leave_tracker.services.working_days import count_working_days


def build_leave_entry(
    payload: LeaveEntryCreate,
    holidays: Iterable[HolidayLike],
    now: datetime,
    entry_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> LeaveEntry:
    """
    Turn a form payload into a complete ``LeaveEntry``.

    All defaults are settled here once: id, timestamps and the cached
    working-day count. Editing passes the existing ``entry_id``/``created_at``.
    A half-day type only makes sense on a half-day request and is dropped otherwise.
    """
    half_day_type = payload.half_day_type if payload.is_half_day else None
    return LeaveEntry(
        id=entry_id or str(uuid.uuid4()),
        type=payload.type,
        start_date=payload.start_date,
        end_date=payload.end_date,
        working_days=count_working_days(
            payload.start_date,
            payload.end_date,
            holidays,
            is_half_day=payload.is_half_day,
            half_day_type=half_day_type,
        ),
        is_forecast=payload.is_forecast,
        is_half_day=payload.is_half_day,
        half_day_type=half_day_type,
        notes=payload.notes,
        created_at=created_at or now,
        updated_at=now,
    )
