"""
services/address_cache.py

Responsibility: Holds the most recently observed public IP address as an
immutable snapshot that many readers share with a single writer.
Does NOT: fetch addresses, log refresh outcomes, or render HTTP responses.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedAddress:
    """
    One immutable view of the cache.

    Attributes:
        value: The observed address. Only meaningful while populated is True.
        populated: False until the first successful probe has been written.
        updated_at: UTC time of the write that produced this snapshot.
    """

    value: str = ""
    populated: bool = False
    updated_at: datetime | None = None


_EMPTY = CachedAddress()


class AddressCache:
    """
    Single-slot cache for the public IP address.

    Readers get the current CachedAddress with one attribute load and never
    block. write() builds a new snapshot and swaps the reference, so a reader
    sees either the old or the new snapshot in full. Once a snapshot with
    populated=True is installed there is no way back to the empty one.

    Collaborators:
        - RefreshService: the only writer
        - routes/ip_routes.py: readers, one per request
    """

    def __init__(self) -> None:
        self._snapshot: CachedAddress = _EMPTY
        self._write_lock = threading.Lock()

    def read(self) -> CachedAddress:
        """
        Returns the current snapshot.

        Returns:
            The CachedAddress installed by the latest write, or the empty
            un-populated snapshot during cold start.
        """
        return self._snapshot

    def write(self, value: str) -> CachedAddress:
        """
        Installs value as the new populated snapshot.

        Args:
            value: The address returned by a successful probe.

        Returns:
            The newly installed CachedAddress.
        """
        snapshot = CachedAddress(
            value=value,
            populated=True,
            updated_at=datetime.now(timezone.utc),
        )
        with self._write_lock:
            previous = self._snapshot
            self._snapshot = snapshot
        if previous.populated and previous.value != value:
            logger.debug("Cached address changed: %s -> %s", previous.value, value)
        return snapshot

    @property
    def populated(self) -> bool:
        return self._snapshot.populated
