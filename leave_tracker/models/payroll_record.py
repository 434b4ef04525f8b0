from sqlalchemy import Column, Integer, String, Float, JSON, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from leave_tracker.database import Base


class PayrollRecord(Base):
    """Figures copied by the employee from a monthly payslip."""
    __tablename__ = "payroll_records"
    __table_args__ = (UniqueConstraint("year", "month", name="uq_payroll_period"),)

    id = Column(String, primary_key=True, index=True)
    month = Column(Integer)
    year = Column(Integer, index=True)
    cp_upcoming = Column(Float, default=0.0)
    cp_elapsed = Column(Float, default=0.0)
    cp_remainder = Column(Float, default=0.0)
    rtt_taken_in_month = Column(Float, default=0.0)
    cet_balance = Column(Float, default=0.0)
    cp_dates_previous_month = Column(JSON, default=list)
    public_holidays = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
