"""
exceptions.py

Responsibility: Defines all custom exception classes used across the application.
Does NOT: contain business logic, logging, or HTTP handling.
"""

from __future__ import annotations


class IpFetchError(Exception):
    """
    Raised by IpService when the public IP address cannot be determined.

    This may occur due to network connectivity issues, a timeout, a non-2xx
    status, or an empty body from the upstream echo endpoint
    (e.g. icanhazip.com). RefreshService catches it and keeps the
    last-known-good address.
    """
