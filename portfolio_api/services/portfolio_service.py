"""Read-only use cases over the portfolio document."""

from __future__ import annotations

import logging
from typing import Any, List

from portfolio_api.domain.portfolio import PortfolioDocument, skill_matches_category
from portfolio_api.repositories.base import DocumentNotFoundError, DocumentStorage, StorageError

logger = logging.getLogger(__name__)

PORTFOLIO_KEY = "portfolio"


class PortfolioError(Exception):
    """Base exception for portfolio reads."""


class PortfolioNotFoundError(PortfolioError):
    """Raised when the portfolio document is missing."""

    def __init__(self, location: str):
        super().__init__(f"Portfolio document not found at {location}")
        self.location = location


class PortfolioLoadError(PortfolioError):
    """Raised when the document exists but cannot be read or parsed."""

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


class PortfolioService:
    """Loads the portfolio document fresh on every call (no cache)."""

    def __init__(self, storage: DocumentStorage, key: str = PORTFOLIO_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> PortfolioDocument:
        try:
            raw = self.storage.load_document(self.key)
        except DocumentNotFoundError as exc:
            raise PortfolioNotFoundError(exc.location) from exc
        except StorageError as exc:
            logger.error("Error reading portfolio data: %s", exc.cause)
            raise PortfolioLoadError(str(exc.cause)) from exc
        try:
            return PortfolioDocument.from_raw(raw)
        except ValueError as exc:
            logger.error("Error reading portfolio data: %s", exc)
            raise PortfolioLoadError(str(exc)) from exc

    def list_projects(self) -> List[Any]:
        return self.load().projects

    def list_skills(self, category: str | None = None) -> List[Any]:
        skills = self.load().skills
        if not category or not category.strip():
            return skills
        return [skill for skill in skills if skill_matches_category(skill, category)]
