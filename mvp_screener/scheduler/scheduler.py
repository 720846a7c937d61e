"""
SCHEDULER BOOTSTRAP

Runs the screening job on trading weekdays after the close.
Scheduler is orchestration-only and contains no business logic.
"""

import logging
from typing import Awaitable, Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
import pytz

from mvp_screener.config import settings

_logger = logging.getLogger(__name__)


def parse_screening_time(value: str) -> tuple[int, int]:
    """Parse "HH:MM" into (hour, minute)."""
    try:
        hour_str, minute_str = value.split(":")
        hour, minute = int(hour_str), int(minute_str)
    except ValueError as exc:
        raise ValueError(f"SCREENING_TIME must be HH:MM, got {value!r}") from exc

    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(f"SCREENING_TIME out of range: {value!r}")

    return hour, minute


def build_scheduler(
    job: Callable[[], Awaitable[object]],
    screening_time: str | None = None,
    timezone: str | None = None,
) -> AsyncIOScheduler:
    """
    Create a scheduler with the screening job registered.
    Mon–Fri @ SCREENING_TIME in TIMEZONE. The caller starts it.
    """
    hour, minute = parse_screening_time(screening_time or settings.SCREENING_TIME)
    tz = pytz.timezone(timezone or settings.TIMEZONE)

    scheduler = AsyncIOScheduler(timezone=tz)

    # ------------------------------------------------------------
    # DAILY MVP SCREENING JOB
    # ------------------------------------------------------------
    scheduler.add_job(
        job,
        trigger=CronTrigger(day_of_week="mon-fri", hour=hour, minute=minute, timezone=tz),
        id="mvp_screening_job",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )

    _logger.info(f"Screening job scheduled mon-fri at {hour:02d}:{minute:02d} {tz.zone}")
    return scheduler
