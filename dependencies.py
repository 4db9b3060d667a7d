"""
dependencies.py

Responsibility: Declares the FastAPI Depends() provider functions for the
app-level resources used by route handlers.
Does NOT: contain business logic, HTTP handlers, or start background jobs.
"""

from __future__ import annotations

from fastapi import Request

from services.address_cache import AddressCache


def get_address_cache(request: Request) -> AddressCache:
    """
    Returns the process-wide AddressCache stored on app.state.

    The cache is created once during the FastAPI lifespan and shared with
    the refresh job, which is its only writer.

    Args:
        request: The current FastAPI Request (injected automatically).

    Returns:
        The application-level AddressCache.
    """
    return request.app.state.address_cache
