"""
routes/ip_routes.py

Responsibility: The public HTTP surface: the cached public IP as JSON on
GET / and a liveness probe on GET /health.
Does NOT: fetch the address upstream or mutate the cache.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from dependencies import get_address_cache
from services.address_cache import AddressCache

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_READY_MESSAGE = "Public IP not yet available. Please try again later."


class AddressResponse(BaseModel):
    """Wire object for GET /."""

    ip: str


@router.get(
    "/",
    response_model=AddressResponse,
    responses={503: {"description": NOT_READY_MESSAGE}},
)
async def get_ip(cache: AddressCache = Depends(get_address_cache)) -> Response:
    """
    Returns the cached public IP as {"ip": "<value>"}.

    Responds 503 with a plain-text message until the refresh job has
    stored its first address.

    Args:
        cache: The shared AddressCache (injected via get_address_cache).

    Returns:
        A JSONResponse on success, or a 503 PlainTextResponse during cold start.
    """
    snapshot = cache.read()
    if not snapshot.populated:
        logger.debug("GET / during cold start, answering 503.")
        return PlainTextResponse(NOT_READY_MESSAGE, status_code=503)

    return JSONResponse(content=AddressResponse(ip=snapshot.value).model_dump())


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe; does not depend on the cache being populated."""
    return {"status": "ok"}
