from datetime import datetime
from typing import List, Optional

from leave_tracker.schemas.base import CamelModel
from leave_tracker.schemas.entitlement import CarryoverLeave, LeaveQuota
from leave_tracker.schemas.holiday import PublicHoliday
from leave_tracker.schemas.leave import LeaveEntry
from leave_tracker.schemas.payroll import PayrollData

EXPORT_VERSION = "1.0.0"


class AppSettings(CamelModel):
    quotas: List[LeaveQuota] = []
    country: str = "FR"


class ExportEnvelope(CamelModel):
    leaves: List[LeaveEntry]
    settings: Optional[AppSettings] = None
    holidays: List[PublicHoliday] = []
    carryovers: List[CarryoverLeave] = []
    payroll_data: List[PayrollData] = []
    export_date: datetime
    version: str = EXPORT_VERSION


class ImportSummary(CamelModel):
    leaves: int
    carryovers: int
    holidays: int
    payroll_data: int
    quotas: int = 0
