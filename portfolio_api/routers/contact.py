from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from portfolio_api.core.utils import client_ip
from portfolio_api.routers.deps import get_contact_service
from portfolio_api.services.contact_service import (
    THANK_YOU_MESSAGE,
    ContactPersistenceError,
    ContactService,
    ContactValidationError,
)

router = APIRouter(prefix="/api", tags=["contact"])
logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to send message. Please try again."


async def _read_payload(request: Request) -> dict:
    """Accept JSON or form-encoded bodies; anything unreadable is an empty payload."""
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith("application/x-www-form-urlencoded") or content_type.startswith(
        "multipart/form-data"
    ):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.debug("Ignoring malformed JSON body on /api/contact")
        return {}
    return data if isinstance(data, dict) else {}


@router.post("/contact")
async def submit_contact(request: Request, svc: ContactService = Depends(get_contact_service)):
    payload = await _read_payload(request)
    try:
        await run_in_threadpool(svc.submit, payload, ip=client_ip(request))
    except ContactValidationError as exc:
        return JSONResponse({"error": exc.message}, status_code=400)
    except ContactPersistenceError:
        return JSONResponse({"error": GENERIC_FAILURE_MESSAGE}, status_code=500)
    return {"success": True, "message": THANK_YOU_MESSAGE}
