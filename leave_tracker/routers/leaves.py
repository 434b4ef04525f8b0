from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from leave_tracker.routers.deps import get_now, get_repository
from leave_tracker.schemas.leave import (
    LeaveEntry,
    LeaveEntryCreate,
    PeriodCheckRequest,
    ValidationResult,
    WorkingDaysRequest,
    WorkingDaysResponse,
)
from leave_tracker.core.dates import parse_day
from leave_tracker.services.leave_builder import build_leave_entry
from leave_tracker.services.overlap import ensure_valid_period, validate_leave_period
from leave_tracker.services.repository import LeaveRepository
from leave_tracker.services.working_days import count_working_days

router = APIRouter(prefix="/leaves", tags=["leaves"])


@router.get("", response_model=List[LeaveEntry])
def list_leaves(year: Optional[int] = None, repo: LeaveRepository = Depends(get_repository)):
    return repo.list_leaves(year)


@router.get("/{leave_id}", response_model=LeaveEntry)
def get_leave(leave_id: str, repo: LeaveRepository = Depends(get_repository)):
    return repo.get_leave(leave_id)


@router.post("", response_model=LeaveEntry, status_code=status.HTTP_201_CREATED)
def create_leave(
    payload: LeaveEntryCreate,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    ensure_valid_period(payload.start_date, payload.end_date, repo.list_leaves())
    holidays = repo.get_holidays_between(payload.start_date, payload.end_date)
    entry = build_leave_entry(payload, holidays, now)
    return repo.add_leave(entry)


@router.put("/{leave_id}", response_model=LeaveEntry)
def update_leave(
    leave_id: str,
    payload: LeaveEntryCreate,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    existing = repo.get_leave(leave_id)
    ensure_valid_period(payload.start_date, payload.end_date, repo.list_leaves(), exclude_id=leave_id)
    holidays = repo.get_holidays_between(payload.start_date, payload.end_date)
    entry = build_leave_entry(payload, holidays, now, entry_id=leave_id, created_at=existing.created_at)
    return repo.update_leave(entry)


@router.delete("/{leave_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_leave(leave_id: str, repo: LeaveRepository = Depends(get_repository)):
    repo.delete_leave(leave_id)


@router.post("/validate", response_model=ValidationResult)
def validate_period(request: PeriodCheckRequest, repo: LeaveRepository = Depends(get_repository)):
    """Inline form check; always 200, problems are reported in the body."""
    return validate_leave_period(request.start_date, request.end_date, repo.list_leaves(), request.exclude_id)


@router.post("/working-days", response_model=WorkingDaysResponse)
def working_days(request: WorkingDaysRequest, repo: LeaveRepository = Depends(get_repository)):
    start = parse_day(request.start_date)
    end = parse_day(request.end_date)
    holidays = repo.get_holidays_between(start, end) if start and end else []
    days = count_working_days(
        request.start_date,
        request.end_date,
        holidays,
        is_half_day=request.is_half_day,
        half_day_type=request.half_day_type,
    )
    return WorkingDaysResponse(start_date=request.start_date, end_date=request.end_date, working_days=days)
