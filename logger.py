"""
logger.py

Responsibility: Configures the stdlib logging tree so every module's
logger writes timestamped lines to stderr.
Does NOT: create per-module loggers (each module calls logging.getLogger).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the handler we install so repeated setup calls can find it.
_HANDLER_NAME = "public-ip-stderr"


def setup_logging(level: str = "INFO") -> None:
    """
    Installs a single stderr handler on the root logger.

    Safe to call more than once; an existing handler installed by this
    function is reused and only the level is updated.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG".

    Returns:
        None
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # APScheduler logs every job execution at INFO; keep only its warnings.
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
