"""
config.py

Responsibility: Reads runtime settings from environment variables and
applies the defaults of the reference deployment.
Does NOT: configure logging, create HTTP clients, or start the scheduler.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_IP_PROVIDER_URL = "https://icanhazip.com"
DEFAULT_REFRESH_INTERVAL = 30 * 60
DEFAULT_PROBE_TIMEOUT = 10.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6969
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """
    Immutable runtime settings for one process.

    Attributes:
        ip_provider_url: Upstream echo endpoint returning the caller's address.
        refresh_interval: Seconds between the start of successive probes.
        probe_timeout: Outbound HTTP timeout in seconds for a single probe.
        host: Interface the HTTP listener binds to.
        port: TCP port the HTTP listener binds to.
        log_level: Root log level name, e.g. "INFO".
    """

    ip_provider_url: str = DEFAULT_IP_PROVIDER_URL
    refresh_interval: int = DEFAULT_REFRESH_INTERVAL
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive, got {self.refresh_interval}.")
        if self.probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive, got {self.probe_timeout}.")
        # NOTE: A probe that can outlive the interval would silently stall refreshes.
        if self.probe_timeout >= self.refresh_interval:
            raise ValueError(
                f"probe_timeout ({self.probe_timeout}s) must be shorter than "
                f"refresh_interval ({self.refresh_interval}s)."
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}.")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}.")


def load_settings() -> Settings:
    """
    Builds Settings from the process environment.

    Unset variables fall back to the module defaults. Malformed numbers
    raise ValueError, which is fatal at start-up.

    Returns:
        A validated Settings instance.
    """
    return Settings(
        ip_provider_url=os.getenv("IP_PROVIDER_URL", DEFAULT_IP_PROVIDER_URL),
        refresh_interval=int(os.getenv("REFRESH_INTERVAL", DEFAULT_REFRESH_INTERVAL)),
        probe_timeout=float(os.getenv("PROBE_TIMEOUT", DEFAULT_PROBE_TIMEOUT)),
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
