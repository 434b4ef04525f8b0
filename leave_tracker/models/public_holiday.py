from sqlalchemy import Column, Integer, String, Date
from leave_tracker.database import Base


class PublicHolidayRecord(Base):
    """Stored holiday overrides; a year with rows here replaces the static table."""
    __tablename__ = "public_holidays"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, index=True)
    year = Column(Integer, index=True)
    name = Column(String)
    country = Column(String, default="FR")
