"""FastAPI application for the portfolio backend."""

from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.logging import configure_logging
from portfolio_api.repositories.base import DocumentStorage
from portfolio_api.repositories.json_storage import JsonFileStorage
from portfolio_api.routers import contact as contact_router
from portfolio_api.routers import health as health_router
from portfolio_api.routers import portfolio as portfolio_router
from portfolio_api.services.contact_service import CONTACTS_KEY, ContactService
from portfolio_api.services.health_service import HealthService
from portfolio_api.services.portfolio_service import PORTFOLIO_KEY, PortfolioService

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> JsonFileStorage:
    return JsonFileStorage(
        settings.data_dir,
        files={PORTFOLIO_KEY: settings.portfolio_file, CONTACTS_KEY: settings.contacts_file},
    )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[DocumentStorage] = None,
) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests inject their own storage."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    storage = storage if storage is not None else build_storage(settings)

    app = FastAPI(title="Portfolio API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.portfolio_service = PortfolioService(storage)
    app.state.contact_service = ContactService(storage)
    app.state.health_service = HealthService(storage)

    app.include_router(portfolio_router.router)
    app.include_router(contact_router.router)
    app.include_router(health_router.router)

    # Mount por ultimo para que /api/* sempre tenha prioridade
    frontend = settings.frontend_dir
    if frontend:
        if os.path.isdir(frontend):
            app.mount("/", StaticFiles(directory=frontend, html=True), name="frontend")
        else:
            logger.warning("FRONTEND_DIR %s not found; static files disabled", frontend)
    return app
