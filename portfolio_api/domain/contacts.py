"""Domain helpers for contact submissions (normalization, e-mail shape check)."""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

# Intencionalmente permissivo: nao e validacao RFC completa.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
REQUIRED_FIELDS = ("name", "email", "message")


def is_valid_email(value: str | None) -> bool:
    """Return True when value has the loose shape local@domain.tld."""
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def normalize_email(value: str) -> str:
    return value.strip().lower()


def clean_fields(payload: Mapping[str, Any]) -> dict[str, str]:
    """Trim the required fields; missing or non-text values become empty strings."""
    cleaned: dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        cleaned[field] = value.strip() if isinstance(value, str) else ""
    return cleaned


@dataclass(frozen=True)
class ContactSubmission:
    id: int
    name: str
    email: str
    message: str
    timestamp: str
    ip: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
