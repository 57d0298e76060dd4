from __future__ import annotations

from typing import Callable, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from portfolio_api.routers.deps import get_portfolio_service
from portfolio_api.services.portfolio_service import (
    PortfolioLoadError,
    PortfolioNotFoundError,
    PortfolioService,
)

router = APIRouter(prefix="/api", tags=["portfolio"])


def _not_found(err: PortfolioNotFoundError) -> JSONResponse:
    return JSONResponse({"error": "Data file not found", "path": err.location}, status_code=404)


def _load_failed(what: str, err: PortfolioLoadError) -> JSONResponse:
    return JSONResponse({"error": f"Failed to load {what}", "details": err.details}, status_code=500)


def _respond(what: str, fetch: Callable[[], List]) -> JSONResponse:
    try:
        items = fetch()
    except PortfolioNotFoundError as exc:
        return _not_found(exc)
    except PortfolioLoadError as exc:
        return _load_failed(what, exc)
    return JSONResponse(items)


@router.get("/projects")
def list_projects(svc: PortfolioService = Depends(get_portfolio_service)):
    return _respond("projects", svc.list_projects)


@router.get("/skills")
def list_skills(category: str = "", svc: PortfolioService = Depends(get_portfolio_service)):
    return _respond("skills", lambda: svc.list_skills(category or None))
