"""
Scheduler Service - daily batch jobs.

Uses APScheduler 4.x (AsyncScheduler) with an in-memory data store.
Jobs:
- daily missions at 00:00 UTC
- streak roll-over at 01:00 UTC

The same jobs can be triggered by an external cron via /api/cron/{job}.
"""

import logging

from apscheduler import AsyncScheduler, ConflictPolicy
from apscheduler.triggers.cron import CronTrigger

from nudgequest.config import config
from nudgequest.core.use_cases import generate_daily_missions, update_streaks

logger = logging.getLogger(__name__)

_scheduler: AsyncScheduler | None = None


async def run_daily_missions_job() -> int:
    """Generate daily missions for every user."""
    try:
        return await generate_daily_missions.generate_for_all_users()
    except Exception:
        logger.exception("Daily missions job failed")
        raise


async def run_streaks_job() -> dict[str, int]:
    """Roll streaks over for every user."""
    try:
        stats = await update_streaks.update_all_streaks()
    except Exception:
        logger.exception("Streak update job failed")
        raise
    return {"extended": stats.extended, "reset": stats.reset, "shielded": stats.shielded}


JOBS = {
    "daily-missions": run_daily_missions_job,
    "streaks": run_streaks_job,
}


async def register_jobs(scheduler: AsyncScheduler) -> None:
    """Add the daily cron schedules, replacing existing ones."""
    await scheduler.add_schedule(
        run_daily_missions_job,
        trigger=CronTrigger(hour=0, minute=0, timezone="UTC"),
        id="daily_missions",
        conflict_policy=ConflictPolicy.replace,
    )
    await scheduler.add_schedule(
        run_streaks_job,
        trigger=CronTrigger(hour=1, minute=0, timezone="UTC"),
        id="update_streaks",
        conflict_policy=ConflictPolicy.replace,
    )
    logger.info("Daily jobs scheduled: missions 00:00 UTC, streaks 01:00 UTC")


# === Lifecycle ===


async def start() -> None:
    """Start the scheduler (call on application startup)."""
    global _scheduler
    if not config.SCHEDULER_ENABLED:
        logger.info("Scheduler disabled (SCHEDULER_ENABLED=false)")
        return

    _scheduler = AsyncScheduler()
    await _scheduler.__aenter__()
    await register_jobs(_scheduler)
    await _scheduler.start_in_background()
    logger.info("Scheduler started")


async def stop() -> None:
    """Stop the scheduler (call on application shutdown)."""
    global _scheduler
    if _scheduler is not None:
        await _scheduler.__aexit__(None, None, None)
        _scheduler = None
    logger.info("Scheduler stopped")
