from collections import defaultdict
from typing import Dict, Iterable, List

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.entitlement import CarryoverLeave, CarryoverSummary


def sum_carryover(carryovers: Iterable[CarryoverLeave], leave_type: LeaveType) -> float:
    """
    Total carried-over days for ``leave_type``.

    Every stored record counts, whatever its origin year: a carryover keeps
    feeding each year's balance until the caller deletes it.
    """
    return sum(c.days for c in carryovers or [] if c.type == leave_type)


def available_carryover(carryovers: Iterable[CarryoverLeave]) -> Dict[LeaveType, float]:
    available = {leave_type: 0.0 for leave_type in LeaveType}
    for carryover in carryovers or []:
        available[carryover.type] += carryover.days
    return available


def carryover_summary(carryovers: Iterable[CarryoverLeave]) -> CarryoverSummary:
    by_year: Dict[int, List[CarryoverLeave]] = defaultdict(list)
    by_type: Dict[LeaveType, List[CarryoverLeave]] = {leave_type: [] for leave_type in LeaveType}
    carryovers = list(carryovers or [])

    for carryover in carryovers:
        by_year[carryover.origin_year].append(carryover)
        by_type[carryover.type].append(carryover)

    return CarryoverSummary(by_year=dict(by_year), by_type=by_type, total_by_type=available_carryover(carryovers))
