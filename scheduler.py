"""
scheduler.py

Responsibility: Sets up the APScheduler AsyncIOScheduler and registers the
public IP refresh job.
Does NOT: contain probe logic or cache handling directly; those are
delegated entirely to RefreshService and its collaborators.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from config import DEFAULT_REFRESH_INTERVAL
from services.refresh_service import RefreshService

logger = logging.getLogger(__name__)

# Job ID used to identify the refresh job in APScheduler
JOB_ID = "ip_refresh"


async def _ip_refresh_job(refresh_service: RefreshService) -> None:
    """
    APScheduler job: runs one refresh cycle.

    Args:
        refresh_service: The RefreshService created during the lifespan.

    Returns:
        None
    """
    logger.debug("IP refresh job triggered.")
    await refresh_service.refresh_once()


def create_scheduler(
    refresh_service: RefreshService,
    interval_seconds: int = DEFAULT_REFRESH_INTERVAL,
) -> AsyncIOScheduler:
    """
    Creates and returns a configured AsyncIOScheduler with the refresh job.

    The job runs immediately on startup (next_run_time=now) and then at the
    configured interval, whether or not the previous probe succeeded.

    Args:
        refresh_service: The RefreshService the job delegates to.
        interval_seconds: Seconds between refresh cycles (default 1800).

    Returns:
        A configured but not yet started AsyncIOScheduler.
    """
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        _ip_refresh_job,
        trigger="interval",
        seconds=interval_seconds,
        id=JOB_ID,
        kwargs={"refresh_service": refresh_service},
        # NOTE: next_run_time=now triggers the first probe immediately on startup
        # rather than waiting a full interval before the first run.
        next_run_time=datetime.now(timezone.utc),
        max_instances=1,  # A hung probe must not stack up overlapping runs
        coalesce=True,
    )
    logger.info("IP refresh job scheduled, interval: %ds.", interval_seconds)
    return scheduler
