from pydantic import Field, field_validator
from datetime import date, datetime
from typing import Any, List, Optional

from leave_tracker.core.dates import day_text_to_iso
from leave_tracker.models.enums import CheckStatus
from leave_tracker.schemas.base import CamelModel


class PayrollDataInput(CamelModel):
    month: int = Field(ge=1, le=12)
    year: int
    cp_upcoming: float = 0.0
    cp_elapsed: float = 0.0
    cp_remainder: float = 0.0
    rtt_taken_in_month: float = 0.0
    cet_balance: float = 0.0
    cp_dates_previous_month: List[date] = []
    public_holidays: List[date] = []

    @field_validator("cp_dates_previous_month", "public_holidays", mode="before")
    @classmethod
    def accept_french_dates(cls, value: Any) -> Any:
        # Payslips list dates as DD/MM/YYYY or DD-MM-YYYY
        if not isinstance(value, list):
            return value
        return [day_text_to_iso(item) if isinstance(item, str) else item for item in value]


class PayrollData(PayrollDataInput):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FigureCheck(CamelModel):
    declared: float
    computed: float
    difference: float
    status: CheckStatus


class PayrollCheck(CamelModel):
    month: int
    year: int
    rtt_taken_in_month: FigureCheck
    cp_taken_previous_month: FigureCheck
    cet_taken_in_month: FigureCheck
    missing_cp_dates: List[date]
    unexpected_cp_dates: List[date]
    score: int
    status: CheckStatus
