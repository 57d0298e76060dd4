from __future__ import annotations

from fastapi import Request

from portfolio_api.services.contact_service import ContactService
from portfolio_api.services.health_service import HealthService
from portfolio_api.services.portfolio_service import PortfolioService


def _state_attr(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def get_portfolio_service(request: Request) -> PortfolioService:
    return _state_attr(request, "portfolio_service")


def get_contact_service(request: Request) -> ContactService:
    return _state_attr(request, "contact_service")


def get_health_service(request: Request) -> HealthService:
    return _state_attr(request, "health_service")
