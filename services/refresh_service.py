"""
services/refresh_service.py

Responsibility: Runs one refresh cycle: probe the upstream, then install
the result in the AddressCache or log the failure.
Does NOT: decide when cycles run (see scheduler.py) or serve HTTP requests.
"""

from __future__ import annotations

import logging

from exceptions import IpFetchError
from services.address_cache import AddressCache
from services.ip_service import IpService

logger = logging.getLogger(__name__)


class RefreshService:
    """
    Keeps the AddressCache filled with the latest public IP.

    A failed probe never touches the cache, so the last-known-good
    address keeps being served through upstream outages.

    Collaborators:
        - IpService: performs the outbound probe
        - AddressCache: receives successful results
    """

    def __init__(self, ip_service: IpService, cache: AddressCache) -> None:
        """
        Initialises the service with its probe and cache.

        Args:
            ip_service: Fetches the current public IP.
            cache: The process-wide AddressCache shared with request handlers.
        """
        self._ip_service = ip_service
        self._cache = cache

    async def refresh_once(self) -> bool:
        """
        Performs a single probe-and-store cycle.

        Returns:
            True if the cache was updated, False if the probe failed.
        """
        try:
            ip = await self._ip_service.get_public_ip()
        except IpFetchError as exc:
            logger.error("Error refreshing IP: %s", exc)
            return False

        self._cache.write(ip)
        logger.info("Public IP updated to: %s", ip)
        return True
