"""
Storage boundary for the leave engine.

The calculation services never touch the database; routers load a snapshot
through this repository, hand plain schema objects to the engine, and write
results back through it.
"""
import logging
import uuid
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import extract
from sqlalchemy.orm import Session

from leave_tracker.core.config import settings
from leave_tracker.core.exceptions import NotFoundError
from leave_tracker.models.carryover import CarryoverRecord
from leave_tracker.models.enums import LeaveType
from leave_tracker.models.leave_entry import LeaveEntryRecord
from leave_tracker.models.leave_quota import LeaveQuotaRecord
from leave_tracker.models.payroll_record import PayrollRecord
from leave_tracker.models.public_holiday import PublicHolidayRecord
from leave_tracker.schemas.entitlement import CarryoverCreate, CarryoverLeave, LeaveQuota
from leave_tracker.schemas.holiday import PublicHoliday
from leave_tracker.schemas.leave import LeaveEntry
from leave_tracker.schemas.payroll import PayrollData, PayrollDataInput
from leave_tracker.services.holiday_calendar import holidays_for

logger = logging.getLogger(__name__)


def _entry_from_row(row: LeaveEntryRecord) -> LeaveEntry:
    return LeaveEntry(
        id=row.id,
        type=row.leave_type,
        start_date=row.start_date,
        end_date=row.end_date,
        working_days=row.working_days or 0.0,
        is_forecast=bool(row.is_forecast),
        is_half_day=bool(row.is_half_day),
        half_day_type=row.half_day_type,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _fill_entry_row(row: LeaveEntryRecord, entry: LeaveEntry) -> LeaveEntryRecord:
    row.leave_type = entry.type.value
    row.start_date = entry.start_date
    row.end_date = entry.end_date
    row.working_days = entry.working_days
    row.is_forecast = entry.is_forecast
    row.is_half_day = entry.is_half_day
    row.half_day_type = entry.half_day_type.value if entry.half_day_type else None
    row.notes = entry.notes
    if entry.created_at is not None:
        row.created_at = entry.created_at
    if entry.updated_at is not None:
        row.updated_at = entry.updated_at
    return row


def _carryover_from_row(row: CarryoverRecord) -> CarryoverLeave:
    return CarryoverLeave(
        id=row.id,
        type=row.leave_type,
        origin_year=row.origin_year,
        days=row.days,
        description=row.description,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _payroll_from_row(row: PayrollRecord) -> PayrollData:
    return PayrollData(
        id=row.id,
        month=row.month,
        year=row.year,
        cp_upcoming=row.cp_upcoming or 0.0,
        cp_elapsed=row.cp_elapsed or 0.0,
        cp_remainder=row.cp_remainder or 0.0,
        rtt_taken_in_month=row.rtt_taken_in_month or 0.0,
        cet_balance=row.cet_balance or 0.0,
        cp_dates_previous_month=row.cp_dates_previous_month or [],
        public_holidays=row.public_holidays or [],
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class LeaveRepository:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # --- Leaves ---

    def list_leaves(self, year: Optional[int] = None) -> List[LeaveEntry]:
        query = self.db.query(LeaveEntryRecord)
        if year is not None:
            query = query.filter(extract("year", LeaveEntryRecord.start_date) == year)
        return [_entry_from_row(row) for row in query.order_by(LeaveEntryRecord.start_date).all()]

    def get_leave(self, leave_id: str) -> LeaveEntry:
        row = self.db.get(LeaveEntryRecord, leave_id)
        if not row:
            raise NotFoundError("Leave", leave_id)
        return _entry_from_row(row)

    def add_leave(self, entry: LeaveEntry) -> LeaveEntry:
        row = _fill_entry_row(LeaveEntryRecord(id=entry.id), entry)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        logger.info(f"Stored leave {entry.id} ({entry.type.value}, {entry.working_days} days)")
        return _entry_from_row(row)

    def update_leave(self, entry: LeaveEntry) -> LeaveEntry:
        row = self.db.get(LeaveEntryRecord, entry.id)
        if not row:
            raise NotFoundError("Leave", entry.id)
        _fill_entry_row(row, entry)
        self._commit()
        self.db.refresh(row)
        return _entry_from_row(row)

    def delete_leave(self, leave_id: str) -> None:
        row = self.db.get(LeaveEntryRecord, leave_id)
        if not row:
            raise NotFoundError("Leave", leave_id)
        self.db.delete(row)
        self._commit()

    # --- Carryovers ---

    def list_carryovers(self) -> List[CarryoverLeave]:
        rows = self.db.query(CarryoverRecord).order_by(CarryoverRecord.origin_year, CarryoverRecord.leave_type).all()
        return [_carryover_from_row(row) for row in rows]

    def add_carryover(self, payload: CarryoverCreate, now: datetime) -> CarryoverLeave:
        row = CarryoverRecord(
            id=str(uuid.uuid4()),
            leave_type=payload.type.value,
            origin_year=payload.origin_year,
            days=payload.days,
            description=payload.description,
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        return _carryover_from_row(row)

    def delete_carryover(self, carryover_id: str) -> None:
        row = self.db.get(CarryoverRecord, carryover_id)
        if not row:
            raise NotFoundError("Carryover", carryover_id)
        self.db.delete(row)
        self._commit()

    # --- Quotas ---

    def get_quotas(self) -> List[LeaveQuota]:
        """Stored quotas, or the configured defaults when none were saved."""
        rows = self.db.query(LeaveQuotaRecord).order_by(LeaveQuotaRecord.position).all()
        if not rows:
            return [
                LeaveQuota(type=LeaveType(leave_type), yearly_quota=quota)
                for leave_type, quota in settings.default_quotas.items()
            ]
        return [
            LeaveQuota(type=row.leave_type, yearly_quota=row.yearly_quota, carryover=row.carryover)
            for row in rows
        ]

    def save_quotas(self, quotas: List[LeaveQuota], commit: bool = True) -> List[LeaveQuota]:
        self.db.query(LeaveQuotaRecord).delete()
        for position, quota in enumerate(quotas):
            self.db.add(
                LeaveQuotaRecord(
                    leave_type=quota.type.value,
                    yearly_quota=quota.yearly_quota,
                    carryover=quota.carryover,
                    position=position,
                )
            )
        if commit:
            self._commit()
        else:
            self.db.flush()
        return self.get_quotas()

    # --- Holidays ---

    def get_holidays(self, year: int) -> List[PublicHoliday]:
        """Stored overrides for ``year``; the static table otherwise."""
        rows = (
            self.db.query(PublicHolidayRecord)
            .filter(PublicHolidayRecord.year == year)
            .order_by(PublicHolidayRecord.date)
            .all()
        )
        if not rows:
            return holidays_for(year, settings.holiday_country)
        return [PublicHoliday(id=str(row.id), date=row.date, name=row.name, country=row.country) for row in rows]

    def get_holidays_between(self, start: date, end: date) -> List[PublicHoliday]:
        """Holidays of every year touched by [start, end]."""
        holidays = []
        for year in range(start.year, max(start.year, end.year) + 1):
            holidays.extend(self.get_holidays(year))
        return holidays

    def list_stored_holidays(self) -> List[PublicHoliday]:
        rows = self.db.query(PublicHolidayRecord).order_by(PublicHolidayRecord.date).all()
        return [PublicHoliday(id=str(row.id), date=row.date, name=row.name, country=row.country) for row in rows]

    # --- Payroll ---

    def list_payroll(self, year: Optional[int] = None) -> List[PayrollData]:
        query = self.db.query(PayrollRecord)
        if year is not None:
            query = query.filter(PayrollRecord.year == year)
        return [_payroll_from_row(row) for row in query.order_by(PayrollRecord.year, PayrollRecord.month).all()]

    def get_payroll(self, year: int, month: int) -> PayrollData:
        row = self.db.query(PayrollRecord).filter(PayrollRecord.year == year, PayrollRecord.month == month).first()
        if not row:
            raise NotFoundError("Payroll record", f"{month:02d}/{year}")
        return _payroll_from_row(row)

    def save_payroll(self, payload: PayrollDataInput, now: datetime) -> PayrollData:
        """Insert or replace the record for the payload's month."""
        row = (
            self.db.query(PayrollRecord)
            .filter(PayrollRecord.year == payload.year, PayrollRecord.month == payload.month)
            .first()
        )
        if not row:
            row = PayrollRecord(id=str(uuid.uuid4()), year=payload.year, month=payload.month, created_at=now)
            self.db.add(row)
        row.cp_upcoming = payload.cp_upcoming
        row.cp_elapsed = payload.cp_elapsed
        row.cp_remainder = payload.cp_remainder
        row.rtt_taken_in_month = payload.rtt_taken_in_month
        row.cet_balance = payload.cet_balance
        row.cp_dates_previous_month = [d.isoformat() for d in payload.cp_dates_previous_month]
        row.public_holidays = [d.isoformat() for d in payload.public_holidays]
        row.updated_at = now
        self._commit()
        self.db.refresh(row)
        return _payroll_from_row(row)

    # --- Bulk ---

    def clear_all(self, commit: bool = True) -> None:
        for model in (LeaveEntryRecord, CarryoverRecord, LeaveQuotaRecord, PublicHolidayRecord, PayrollRecord):
            self.db.query(model).delete()
        if commit:
            self._commit()

    def replace_all(
        self,
        leaves: List[LeaveEntry],
        carryovers: List[CarryoverLeave],
        quotas: List[LeaveQuota],
        holidays: List[PublicHoliday],
        payroll: List[PayrollData],
    ) -> None:
        """Swap the whole dataset in one transaction."""
        try:
            self.clear_all(commit=False)
            for entry in leaves:
                self.db.add(_fill_entry_row(LeaveEntryRecord(id=entry.id), entry))
            for carryover in carryovers:
                self.db.add(
                    CarryoverRecord(
                        id=carryover.id,
                        leave_type=carryover.type.value,
                        origin_year=carryover.origin_year,
                        days=carryover.days,
                        description=carryover.description,
                        created_at=carryover.created_at,
                        updated_at=carryover.updated_at,
                    )
                )
            if quotas:
                self.save_quotas(quotas, commit=False)
            for holiday in holidays:
                self.db.add(
                    PublicHolidayRecord(
                        date=holiday.date, year=holiday.date.year, name=holiday.name, country=holiday.country
                    )
                )
            for record in payroll:
                self.db.add(
                    PayrollRecord(
                        id=record.id,
                        month=record.month,
                        year=record.year,
                        cp_upcoming=record.cp_upcoming,
                        cp_elapsed=record.cp_elapsed,
                        cp_remainder=record.cp_remainder,
                        rtt_taken_in_month=record.rtt_taken_in_month,
                        cet_balance=record.cet_balance,
                        cp_dates_previous_month=[d.isoformat() for d in record.cp_dates_previous_month],
                        public_holidays=[d.isoformat() for d in record.public_holidays],
                        created_at=record.created_at,
                        updated_at=record.updated_at,
                    )
                )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
