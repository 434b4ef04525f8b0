from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Path

from leave_tracker.routers.deps import get_now, get_repository
from leave_tracker.schemas.entitlement import LeaveBalance
from leave_tracker.schemas.holiday import PublicHoliday
from leave_tracker.schemas.leave import CalendarDay, LeaveTypeInfo
from leave_tracker.schemas.summary import LeaveStats, MonthlySummary
from leave_tracker.services.balance import compute_balances, leave_stats
from leave_tracker.services.calendar_days import project_month
from leave_tracker.services.leave_types import leave_type_catalog
from leave_tracker.services.monthly_summary import build_separated
from leave_tracker.services.repository import LeaveRepository

router = APIRouter(tags=["reports"])


@router.get("/balances", response_model=List[LeaveBalance])
def get_balances(
    year: Optional[int] = None,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    year = year or now.year
    return compute_balances(repo.list_leaves(), repo.get_quotas(), repo.list_carryovers(), year)


@router.get("/summary/monthly", response_model=MonthlySummary)
def get_monthly_summary(
    year: Optional[int] = None,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    year = year or now.year
    return build_separated(repo.list_leaves(year), repo.get_quotas(), repo.list_carryovers(), year)


@router.get("/stats", response_model=LeaveStats)
def get_stats(
    year: Optional[int] = None,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    year = year or now.year
    return leave_stats(repo.list_leaves(year), year)


@router.get("/calendar/{year}/{month}", response_model=List[CalendarDay])
def get_calendar_month(
    year: int,
    month: int = Path(ge=1, le=12),
    repo: LeaveRepository = Depends(get_repository),
):
    return project_month(year, month, repo.list_leaves(), repo.get_holidays(year))


@router.get("/holidays/{year}", response_model=List[PublicHoliday])
def get_holidays(year: int, repo: LeaveRepository = Depends(get_repository)):
    return repo.get_holidays(year)


@router.get("/leave-types", response_model=List[LeaveTypeInfo])
def get_leave_types():
    return leave_type_catalog()
