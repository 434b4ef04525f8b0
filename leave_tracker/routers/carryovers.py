from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, status

from leave_tracker.routers.deps import get_now, get_repository
from leave_tracker.schemas.entitlement import CarryoverCreate, CarryoverLeave, CarryoverSummary
from leave_tracker.services.carryover import carryover_summary
from leave_tracker.services.repository import LeaveRepository

router = APIRouter(prefix="/carryovers", tags=["carryovers"])


@router.get("", response_model=List[CarryoverLeave])
def list_carryovers(repo: LeaveRepository = Depends(get_repository)):
    return repo.list_carryovers()


@router.post("", response_model=CarryoverLeave, status_code=status.HTTP_201_CREATED)
def create_carryover(
    payload: CarryoverCreate,
    repo: LeaveRepository = Depends(get_repository),
    now: datetime = Depends(get_now),
):
    return repo.add_carryover(payload, now)


@router.delete("/{carryover_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_carryover(carryover_id: str, repo: LeaveRepository = Depends(get_repository)):
    repo.delete_carryover(carryover_id)


@router.get("/summary", response_model=CarryoverSummary)
def get_carryover_summary(repo: LeaveRepository = Depends(get_repository)):
    return carryover_summary(repo.list_carryovers())
