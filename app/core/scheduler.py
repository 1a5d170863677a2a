"""APScheduler configuration for deferred writes."""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from app.core.config import settings

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler: BackgroundScheduler | None = None


def init_scheduler() -> BackgroundScheduler:
    """Initialize and configure the scheduler."""
    global scheduler

    scheduler = BackgroundScheduler(
        timezone=settings.TIMEZONE,
        job_defaults={
            "coalesce": True,  # Combine missed runs
            "max_instances": 1,  # Only one instance of each job at a time
            "misfire_grace_time": 60,
        },
    )

    logger.info(f"Scheduler initialized ({settings.TIMEZONE})")
    return scheduler


def get_scheduler() -> BackgroundScheduler:
    """Return the global scheduler, starting it on first use."""
    start_scheduler()
    return scheduler


def start_scheduler():
    """Start the scheduler."""
    global scheduler
    if scheduler is None:
        scheduler = init_scheduler()

    if not scheduler.running:
        scheduler.start()
        logger.info("Scheduler started")


def stop_scheduler():
    """Stop the scheduler gracefully."""
    global scheduler
    if scheduler and scheduler.running:
        scheduler.shutdown(wait=True)
        logger.info("Scheduler stopped")
    scheduler = None
