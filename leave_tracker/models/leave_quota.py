from sqlalchemy import Column, Integer, String, Float
from leave_tracker.database import Base


class LeaveQuotaRecord(Base):
    __tablename__ = "leave_quotas"

    id = Column(Integer, primary_key=True, index=True)
    leave_type = Column(String, unique=True, index=True)
    yearly_quota = Column(Float, default=0.0)
    carryover = Column(Float, nullable=True)
    position = Column(Integer, default=0)  # display / calculation order
