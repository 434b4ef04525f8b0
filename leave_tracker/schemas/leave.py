from pydantic import Field, model_validator
from datetime import date, datetime
from typing import Optional

from leave_tracker.core.schemas import ErrorInfo
from leave_tracker.models.enums import LeaveType, HalfDayType
from leave_tracker.schemas.base import CamelModel


class LeaveEntry(CamelModel):
    id: str
    type: LeaveType
    start_date: date
    end_date: date
    working_days: float = Field(default=0.0, ge=0)
    is_forecast: bool = False
    is_half_day: bool = False
    half_day_type: Optional[HalfDayType] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_range(self) -> "LeaveEntry":
        if self.start_date > self.end_date:
            raise ValueError("startDate must be on or before endDate")
        return self


class LeaveEntryCreate(CamelModel):
    """Form payload; working days, id and timestamps are filled in by build_leave_entry."""
    type: LeaveType
    start_date: date
    end_date: date
    is_forecast: bool = False
    is_half_day: bool = False
    half_day_type: Optional[HalfDayType] = None
    notes: Optional[str] = None


class PeriodCheckRequest(CamelModel):
    # Raw strings: the check runs on every keystroke and must tolerate half-typed dates
    start_date: str
    end_date: str
    exclude_id: Optional[str] = None


class WorkingDaysRequest(CamelModel):
    start_date: str
    end_date: str
    is_half_day: bool = False
    half_day_type: Optional[HalfDayType] = None


class WorkingDaysResponse(CamelModel):
    start_date: str
    end_date: str
    working_days: float


class ValidationResult(CamelModel):
    is_valid: bool
    error: Optional[ErrorInfo] = None


class CalendarDay(CamelModel):
    date: date
    is_leave_day: bool = False
    leave_type: Optional[LeaveType] = None
    leave_id: Optional[str] = None
    is_forecast: Optional[bool] = None
    is_weekend: bool = False
    is_holiday: bool = False
    holiday_name: Optional[str] = None


class LeaveTypeInfo(CamelModel):
    type: LeaveType
    label: str
    color: str
    icon: str
    counts_in_stats: bool
    has_quota: bool
