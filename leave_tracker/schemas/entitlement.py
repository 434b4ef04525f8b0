from pydantic import AliasChoices, Field
from datetime import datetime
from typing import Dict, List, Optional

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.base import CamelModel


class LeaveQuota(CamelModel):
    type: LeaveType
    yearly_quota: float = Field(ge=0)
    carryover: Optional[float] = Field(default=None, ge=0)


class CarryoverLeave(CamelModel):
    id: str
    type: LeaveType
    # Older backups store the origin year under "year"
    origin_year: int = Field(validation_alias=AliasChoices("originYear", "origin_year", "year"))
    days: float = Field(gt=0)
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CarryoverCreate(CamelModel):
    type: LeaveType
    origin_year: int
    days: float = Field(gt=0)
    description: Optional[str] = None


class LeaveBalance(CamelModel):
    type: LeaveType
    total: float
    used: float
    remaining: float
    year: int


class CarryoverSummary(CamelModel):
    by_year: Dict[int, List[CarryoverLeave]]
    by_type: Dict[LeaveType, List[CarryoverLeave]]
    total_by_type: Dict[LeaveType, float]
