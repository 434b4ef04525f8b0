from typing import List

from fastapi import APIRouter, Depends, HTTPException

from leave_tracker.routers.deps import get_repository
from leave_tracker.schemas.entitlement import LeaveQuota
from leave_tracker.services.repository import LeaveRepository

router = APIRouter(prefix="/quotas", tags=["quotas"])


@router.get("", response_model=List[LeaveQuota])
def get_quotas(repo: LeaveRepository = Depends(get_repository)):
    return repo.get_quotas()


@router.put("", response_model=List[LeaveQuota])
def save_quotas(quotas: List[LeaveQuota], repo: LeaveRepository = Depends(get_repository)):
    types = [quota.type for quota in quotas]
    if len(types) != len(set(types)):
        raise HTTPException(status_code=400, detail="Each leave type may only have one quota")
    return repo.save_quotas(quotas)
