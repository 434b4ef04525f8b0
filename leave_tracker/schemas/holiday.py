from datetime import date
from typing import Optional

from leave_tracker.schemas.base import CamelModel


class PublicHoliday(CamelModel):
    date: date
    name: str
    country: str = "FR"
    id: Optional[str] = None
