# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import (
    leave_entry, carryover, leave_quota, public_holiday, payroll_record
)

# Explicit class exports for cleaner imports
from .enums import LeaveType, HalfDayType, CheckStatus
from .leave_entry import LeaveEntryRecord
from .carryover import CarryoverRecord
from .leave_quota import LeaveQuotaRecord
from .public_holiday import PublicHolidayRecord
from .payroll_record import PayrollRecord

__all__ = [
    "LeaveType",
    "HalfDayType",
    "CheckStatus",
    "LeaveEntryRecord",
    "CarryoverRecord",
    "LeaveQuotaRecord",
    "PublicHolidayRecord",
    "PayrollRecord",
]
