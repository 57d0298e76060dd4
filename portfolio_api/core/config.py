"""
Configuration helpers for the portfolio backend.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_dir: Path
    portfolio_file: str
    contacts_file: str
    frontend_dir: str
    log_level: str
    host: str
    port: int
    reload: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_dir = os.getenv("PORTFOLIO_DATA_DIR") or str(PROJECT_ROOT / "data")
    return Settings(
        data_dir=Path(data_dir).expanduser(),
        portfolio_file=os.getenv("PORTFOLIO_FILE", "portfolio.json"),
        contacts_file=os.getenv("CONTACTS_FILE", "contacts.json"),
        frontend_dir=os.getenv("FRONTEND_DIR", "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
        reload=_bool(os.getenv("RELOAD"), False),
    )
