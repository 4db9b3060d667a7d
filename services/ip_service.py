"""
services/ip_service.py

Responsibility: Fetches the current public IP address of the host machine
from an upstream echo endpoint.
Does NOT: cache the address, schedule refreshes, or serve HTTP requests.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from config import DEFAULT_IP_PROVIDER_URL, DEFAULT_PROBE_TIMEOUT
from exceptions import IpFetchError

logger = logging.getLogger(__name__)


class IpService:
    """
    Fetches the host machine's current public IPv4/IPv6 address.

    Uses an injected httpx.AsyncClient so the service is fully testable
    without real network calls (use respx.mock in tests). The client's own
    timeout limits each phase of a request; the service adds a deadline
    covering the whole probe, body included.

    Collaborators:
        - httpx.AsyncClient: injected; must be kept alive externally
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        provider_url: str = DEFAULT_IP_PROVIDER_URL,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
    ) -> None:
        """
        Initialises the service with a shared HTTP client.

        Args:
            http_client: A long-lived httpx.AsyncClient instance created
                         during application startup.
            provider_url: The echo endpoint that returns the caller's
                          address as plain text.
            timeout: Seconds the whole probe may take, from connect to
                     the last byte of the body.
        """
        self._client = http_client
        self._provider_url = provider_url
        self._timeout = timeout

    @property
    def provider_url(self) -> str:
        return self._provider_url

    async def get_public_ip(self) -> str:
        """
        Returns the current public IP address of the host machine.

        Performs exactly one GET; retrying is the scheduler's job.

        Returns:
            The public IP address as a plain string, e.g. "1.2.3.4".

        Raises:
            IpFetchError: If the upstream provider is unreachable, times out,
                          returns a non-2xx response, or returns an empty body.
        """
        try:
            response = await asyncio.wait_for(
                self._client.get(self._provider_url), timeout=self._timeout
            )
            response.raise_for_status()
        except asyncio.TimeoutError as exc:
            raise IpFetchError(
                f"IP provider ({self._provider_url}) did not answer within {self._timeout}s."
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise IpFetchError(
                f"IP provider returned status {exc.response.status_code}."
            ) from exc
        except httpx.RequestError as exc:
            raise IpFetchError(
                f"Could not reach IP provider ({self._provider_url}): {exc!r}"
            ) from exc

        # NOTE: icanhazip.com terminates the address with a newline.
        ip = response.text.strip()
        if not ip:
            raise IpFetchError(f"IP provider ({self._provider_url}) returned an empty body.")
        logger.debug("Current public IP: %s", ip)
        return ip
