from typing import Dict, List, Optional

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.base import CamelModel


class TrackFigures(CamelModel):
    taken: float = 0.0
    cumulative: float = 0.0
    remaining: float = 0.0


class TypeTracks(CamelModel):
    real: TrackFigures
    forecast: TrackFigures


class MonthlySummaryRow(CamelModel):
    month: int
    month_name: str
    by_type: Dict[LeaveType, TypeTracks]


class YearlyTotal(CamelModel):
    real: float
    forecast: float
    total: float


class MonthlySummary(CamelModel):
    year: int
    opening: Dict[LeaveType, float]
    months: List[MonthlySummaryRow]
    yearly_totals: Dict[LeaveType, YearlyTotal]


class LeaveStats(CamelModel):
    year: int
    total_days: float
    by_type: Dict[LeaveType, float]
    by_month: Dict[str, float]


class RttAvailability(CamelModel):
    can_take: bool
    available_days: float
    reason: Optional[str] = None


class RttMonthDetail(CamelModel):
    month: int
    year: int
    available: float
    can_take: bool
    reason: Optional[str] = None


class RttPeriodAvailability(CamelModel):
    total_available: float
    details: List[RttMonthDetail]
