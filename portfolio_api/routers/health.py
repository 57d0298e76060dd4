from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio_api.routers.deps import get_health_service
from portfolio_api.services.health_service import HealthService

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(svc: HealthService = Depends(get_health_service)):
    return svc.snapshot()
