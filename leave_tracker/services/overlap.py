import logging
from typing import Iterable, Optional

from leave_tracker.core.dates import DateLike, parse_day
from leave_tracker.core.exceptions import AppException, InvalidDateError, InvalidRangeError, OverlapError
from leave_tracker.core.schemas import ErrorInfo
from leave_tracker.schemas.leave import LeaveEntry, ValidationResult

logger = logging.getLogger(__name__)


def find_overlap(
    start: DateLike,
    end: DateLike,
    existing: Iterable[LeaveEntry],
    exclude_id: Optional[str] = None,
) -> Optional[LeaveEntry]:
    """First leave sharing at least one calendar day with [start, end], bounds included."""
    start_day = parse_day(start)
    end_day = parse_day(end)
    if start_day is None or end_day is None:
        return None
    for leave in existing or []:
        if exclude_id is not None and leave.id == exclude_id:
            continue
        if start_day <= leave.end_date and leave.start_date <= end_day:
            return leave
    return None


def _period_problem(
    start: DateLike,
    end: DateLike,
    existing: Iterable[LeaveEntry],
    exclude_id: Optional[str],
) -> Optional[AppException]:
    start_day = parse_day(start)
    if start_day is None:
        return InvalidDateError(start)
    end_day = parse_day(end)
    if end_day is None:
        return InvalidDateError(end)

    if start_day > end_day:
        return InvalidRangeError()

    conflict = find_overlap(start_day, end_day, existing, exclude_id)
    if conflict is not None:
        logger.info(f"Period {start_day} -> {end_day} overlaps leave {conflict.id}")
        return OverlapError(conflict.id)
    return None


def validate_leave_period(
    start: DateLike,
    end: DateLike,
    existing: Iterable[LeaveEntry],
    exclude_id: Optional[str] = None,
) -> ValidationResult:
    """
    Check a candidate period against the existing leaves.

    Never raises: problems come back as ``ValidationResult(is_valid=False, error=...)``
    so a form can show them inline. ``exclude_id`` skips the entry being edited.
    """
    problem = _period_problem(start, end, existing, exclude_id)
    if problem is not None:
        return ValidationResult(is_valid=False, error=ErrorInfo.from_exception(problem))
    return ValidationResult(is_valid=True)


def ensure_valid_period(
    start: DateLike,
    end: DateLike,
    existing: Iterable[LeaveEntry],
    exclude_id: Optional[str] = None,
) -> None:
    """Same checks as ``validate_leave_period``, raising the matching ``AppException``."""
    problem = _period_problem(start, end, existing, exclude_id)
    if problem is not None:
        raise problem
