import enum


class LeaveType(str, enum.Enum):
    PAID_LEAVE = "cp"
    TIME_REDUCTION = "rtt"
    TIME_SAVINGS_ACCOUNT = "cet"
    SICK = "sick"
    UNPAID = "unpaid"
    TRAINING = "training"
    OTHER = "other"


class HalfDayType(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


class CheckStatus(str, enum.Enum):
    VALID = "valid"
    WARNING = "warning"
    ERROR = "error"
