"""
Backup envelope: ``{leaves, settings, holidays, carryovers, payrollData, exportDate, version}``.

Keys are camelCase so files exported by earlier versions of the tracker load
unchanged.
"""
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from leave_tracker.core.config import settings
from leave_tracker.core.exceptions import ImportFormatError
from leave_tracker.schemas.transfer import AppSettings, ExportEnvelope, ImportSummary
from leave_tracker.services.repository import LeaveRepository

logger = logging.getLogger(__name__)


def export_data(repo: LeaveRepository, now: datetime) -> ExportEnvelope:
    return ExportEnvelope(
        leaves=repo.list_leaves(),
        settings=AppSettings(quotas=repo.get_quotas(), country=settings.holiday_country),
        holidays=repo.list_stored_holidays(),
        carryovers=repo.list_carryovers(),
        payroll_data=repo.list_payroll(),
        export_date=now,
    )


def _ensure_unique(label: str, keys: List[str]) -> None:
    seen = set()
    for key in keys:
        if key in seen:
            raise ImportFormatError(f"Backup repeats {label} {key!r}")
        seen.add(key)


def parse_envelope(raw: Union[str, bytes, Dict[str, Any]]) -> ExportEnvelope:
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ImportFormatError(f"Backup is not valid JSON: {e.msg}")

    if not isinstance(raw, dict) or not isinstance(raw.get("leaves"), list):
        raise ImportFormatError()

    # Older backups carry a null settings/holidays block
    cleaned = {key: value for key, value in raw.items() if value is not None}
    try:
        envelope = ExportEnvelope.model_validate({"exportDate": datetime.now(), **cleaned})
    except ValidationError as e:
        logger.warning(f"Rejected backup: {e.error_count()} validation error(s)")
        raise ImportFormatError(f"Backup content is invalid: {e.errors()[0]['msg']}")

    quotas = envelope.settings.quotas if envelope.settings else []
    _ensure_unique("quota type", [quota.type.value for quota in quotas])
    _ensure_unique("leave id", [leave.id for leave in envelope.leaves])
    _ensure_unique("carryover id", [carryover.id for carryover in envelope.carryovers])
    _ensure_unique("payroll id", [record.id for record in envelope.payroll_data])
    _ensure_unique("payroll period", [f"{record.month:02d}/{record.year}" for record in envelope.payroll_data])
    return envelope


def import_data(repo: LeaveRepository, raw: Union[str, bytes, Dict[str, Any]]) -> ImportSummary:
    """Replace every stored leave, carryover, quota, holiday and payslip with the backup's."""
    envelope = parse_envelope(raw)
    quotas = envelope.settings.quotas if envelope.settings else []

    repo.replace_all(
        leaves=envelope.leaves,
        carryovers=envelope.carryovers,
        quotas=quotas,
        holidays=envelope.holidays,
        payroll=envelope.payroll_data,
    )
    summary = ImportSummary(
        leaves=len(envelope.leaves),
        carryovers=len(envelope.carryovers),
        holidays=len(envelope.holidays),
        payroll_data=len(envelope.payroll_data),
        quotas=len(quotas),
    )
    logger.info(f"Imported backup (version {envelope.version}): {summary.model_dump()}")
    return summary
