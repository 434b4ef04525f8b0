from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from leave_tracker.routers.deps import get_now
from leave_tracker.schemas.summary import RttAvailability, RttPeriodAvailability
from leave_tracker.services.rtt_availability import (
    available_rtt_for_period,
    available_rtt_for_year,
    can_take_rtt,
)

router = APIRouter(prefix="/rtt", tags=["rtt"])


@router.get("/availability", response_model=RttAvailability)
def get_rtt_availability(
    month: int = Query(ge=1, le=12),
    year: int = Query(),
    now: datetime = Depends(get_now),
):
    return can_take_rtt(month, year, now.date())


@router.get("/year", response_model=RttPeriodAvailability)
def get_rtt_year(year: Optional[int] = None, now: datetime = Depends(get_now)):
    return available_rtt_for_year(year or now.year, now.date())


@router.get("/period", response_model=RttPeriodAvailability)
def get_rtt_period(start: date, end: date, now: datetime = Depends(get_now)):
    return available_rtt_for_period(start, end, now.date())
