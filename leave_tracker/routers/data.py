from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from leave_tracker.core.schemas import ApiResponse
from leave_tracker.routers.deps import get_now, get_repository
from leave_tracker.schemas.transfer import ExportEnvelope, ImportSummary
from leave_tracker.services.repository import LeaveRepository
from leave_tracker.services.transfer import export_data, import_data
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export", response_model=ExportEnvelope)
def export_backup(repo: LeaveRepository = Depends(get_repository), now: datetime = Depends(get_now)):
    return export_data(repo, now)


@router.post("/import", response_model=ApiResponse[ImportSummary])
def import_backup(payload: Dict[str, Any] = Body(...), repo: LeaveRepository = Depends(get_repository)):
    return ApiResponse[ImportSummary].ok(import_data(repo, payload))


@router.delete("", response_model=ApiResponse[Dict[str, bool]])
def clear_data(repo: LeaveRepository = Depends(get_repository)):
    repo.clear_all()
    logger.info("All stored leave data cleared")
    return ApiResponse[Dict[str, bool]].ok({"cleared": True})
