from sqlalchemy import Column, String, Integer, Float, DateTime, Text
from sqlalchemy.sql import func
from leave_tracker.database import Base


class CarryoverRecord(Base):
    __tablename__ = "carryovers"

    id = Column(String, primary_key=True, index=True)
    leave_type = Column(String, index=True)
    origin_year = Column(Integer, index=True)
    days = Column(Float)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
