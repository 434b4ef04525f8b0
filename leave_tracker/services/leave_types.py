"""
Leave type catalog.

One mapping per leave type; adding a member to ``LeaveType`` without an entry
here fails at import time.
"""
from typing import Dict, List, NamedTuple

from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.leave import LeaveTypeInfo


class LeaveTypeMeta(NamedTuple):
    label: str
    color: str
    icon: str


LEAVE_TYPE_META: Dict[LeaveType, LeaveTypeMeta] = {
    LeaveType.PAID_LEAVE: LeaveTypeMeta("Congés Payés", "leave-cp", "🏖️"),
    LeaveType.TIME_REDUCTION: LeaveTypeMeta("RTT", "leave-rtt", "📅"),
    LeaveType.TIME_SAVINGS_ACCOUNT: LeaveTypeMeta("CET", "leave-cet", "🏦"),
    LeaveType.SICK: LeaveTypeMeta("Maladie", "leave-sick", "🏥"),
    LeaveType.UNPAID: LeaveTypeMeta("Congé sans solde", "leave-unpaid", "⏸️"),
    LeaveType.TRAINING: LeaveTypeMeta("Formation", "leave-training", "🎓"),
    LeaveType.OTHER: LeaveTypeMeta("Autre", "leave-other", "📌"),
}

_missing = set(LeaveType) - set(LEAVE_TYPE_META)
if _missing:
    raise RuntimeError(f"Leave types without catalog entry: {sorted(t.value for t in _missing)}")

# Types counted in headline statistics and in quota tracking
STATS_TYPES: List[LeaveType] = [
    LeaveType.PAID_LEAVE,
    LeaveType.TIME_REDUCTION,
    LeaveType.TIME_SAVINGS_ACCOUNT,
]
QUOTA_TYPES: List[LeaveType] = list(STATS_TYPES)


def leave_type_label(leave_type: LeaveType) -> str:
    return LEAVE_TYPE_META[leave_type].label


def leave_type_color(leave_type: LeaveType) -> str:
    return LEAVE_TYPE_META[leave_type].color


def leave_type_icon(leave_type: LeaveType) -> str:
    return LEAVE_TYPE_META[leave_type].icon


def is_stats_type(leave_type: LeaveType) -> bool:
    return leave_type in STATS_TYPES


def is_quota_type(leave_type: LeaveType) -> bool:
    return leave_type in QUOTA_TYPES


def leave_type_catalog() -> List[LeaveTypeInfo]:
    """Display metadata for every leave type, in declaration order."""
    return [
        LeaveTypeInfo(
            type=leave_type,
            label=leave_type_label(leave_type),
            color=leave_type_color(leave_type),
            icon=leave_type_icon(leave_type),
            counts_in_stats=is_stats_type(leave_type),
            has_quota=is_quota_type(leave_type),
        )
        for leave_type in LeaveType
    ]
