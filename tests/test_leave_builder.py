from datetime import date, datetime, timezone

from leave_tracker.models.enums import HalfDayType, LeaveType
from leave_tracker.schemas.leave import LeaveEntryCreate
from leave_tracker.services.holiday_calendar import holidays_for
from leave_tracker.services.leave_builder import build_leave_entry

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_new_entry_gets_defaults():
    payload = LeaveEntryCreate(type=LeaveType.PAID_LEAVE, start_date=date(2025, 7, 14), end_date=date(2025, 7, 18))
    entry = build_leave_entry(payload, holidays_for(2025), NOW)

    assert entry.id
    assert entry.working_days == 4
    assert entry.created_at == entry.updated_at == NOW
    assert entry.is_forecast is False


def test_edit_keeps_identity_and_creation_time():
    created = datetime(2025, 1, 2, tzinfo=timezone.utc)
    payload = LeaveEntryCreate(type=LeaveType.TIME_REDUCTION, start_date=date(2025, 7, 21), end_date=date(2025, 7, 21))
    entry = build_leave_entry(payload, [], NOW, entry_id="keep-me", created_at=created)

    assert entry.id == "keep-me"
    assert entry.created_at == created
    assert entry.updated_at == NOW


def test_half_day_type_dropped_without_half_day():
    payload = LeaveEntryCreate(
        type=LeaveType.PAID_LEAVE,
        start_date=date(2025, 7, 21),
        end_date=date(2025, 7, 21),
        half_day_type=HalfDayType.MORNING,
    )
    entry = build_leave_entry(payload, [], NOW)
    assert entry.half_day_type is None
    assert entry.working_days == 1
