"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """
    ISO-8601 em UTC com milissegundos e sufixo Z: 2026-10-19T12:00:00.123Z.
    """
    moment = (moment or utc_now()).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis(moment: Optional[datetime] = None) -> int:
    moment = moment or utc_now()
    return (moment - EPOCH) // timedelta(milliseconds=1)


def client_ip(request: Request) -> Optional[str]:
    """Best-effort caller address: direct connection first, then X-Forwarded-For."""
    if request.client and request.client.host:
        return request.client.host
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return None
