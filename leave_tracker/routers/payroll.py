from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Path

from leave_tracker.routers.deps import get_now, get_repository
from leave_tracker.schemas.payroll import PayrollCheck, PayrollData, PayrollDataInput
from leave_tracker.services.payroll_check import check_payroll, previous_period
from leave_tracker.services.repository import LeaveRepository

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.get("", response_model=List[PayrollData])
def list_payroll(year: Optional[int] = None, repo: LeaveRepository = Depends(get_repository)):
    return repo.list_payroll(year)


@router.put("", response_model=PayrollData)
def save_payroll(
    payload: PayrollDataInput,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    return repo.save_payroll(payload, now)


@router.get("/{year}/{month}/check", response_model=PayrollCheck)
def check_payroll_month(
    year: int,
    month: int = Path(ge=1, le=12),
    repo: LeaveRepository = Depends(get_repository),
):
    record = repo.get_payroll(year, month)
    _, prev_year = previous_period(month, year)
    return check_payroll(record, repo.list_leaves(), repo.get_holidays(prev_year))
