from fastapi import APIRouter
from leave_tracker.routers import (
    leaves, carryovers, quotas, reports, rtt, payroll, data
)

# Centralized API router hub; main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(leaves.router, tags=["Leaves"])
api_router.include_router(carryovers.router, tags=["Carryovers"])
api_router.include_router(quotas.router, tags=["Quotas"])
api_router.include_router(reports.router, tags=["Reports"])
api_router.include_router(rtt.router, tags=["RTT"])
api_router.include_router(payroll.router, tags=["Payroll"])
api_router.include_router(data.router, tags=["Backup"])
