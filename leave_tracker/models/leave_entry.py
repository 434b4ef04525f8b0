from sqlalchemy import Column, String, Date, Float, Boolean, DateTime, Text
from sqlalchemy.sql import func
from leave_tracker.database import Base


class LeaveEntryRecord(Base):
    __tablename__ = "leaves"

    id = Column(String, primary_key=True, index=True)
    leave_type = Column(String, index=True)
    start_date = Column(Date, index=True)
    end_date = Column(Date)
    working_days = Column(Float, default=0.0)
    is_forecast = Column(Boolean, default=False)
    is_half_day = Column(Boolean, default=False)
    half_day_type = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
