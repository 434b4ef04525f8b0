from datetime import datetime, timezone

from fastapi import Depends
from sqlalchemy.orm import Session

from leave_tracker.database import get_db
from leave_tracker.services.repository import LeaveRepository


def get_repository(db: Session = Depends(get_db)) -> LeaveRepository:
    return LeaveRepository(db)


def get_now() -> datetime:
    """Request clock. Every temporal rule receives this value instead of reading the system time."""
    return datetime.now(timezone.utc)
