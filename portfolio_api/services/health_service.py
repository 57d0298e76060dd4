"""Health snapshot: liveness plus presence of the data files."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from portfolio_api.core.utils import iso_timestamp
from portfolio_api.repositories.base import DocumentStorage
from portfolio_api.services.contact_service import CONTACTS_KEY
from portfolio_api.services.portfolio_service import PORTFOLIO_KEY

PROCESS_STARTED = time.monotonic()


@dataclass
class HealthService:
    storage: DocumentStorage
    started_at: float = field(default=PROCESS_STARTED)

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self.started_at)

    def snapshot(self) -> dict:
        return {
            "status": "OK",
            "timestamp": iso_timestamp(),
            "uptime": self.uptime(),
            "files": {
                "portfolio": self.storage.exists(PORTFOLIO_KEY),
                "contacts": self.storage.exists(CONTACTS_KEY),
            },
        }
