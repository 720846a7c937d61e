"""
MVP Screener entry point
Run one screening pass, or keep running on a weekday schedule
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from mvp_screener.config import settings
from mvp_screener.core.logging import setup_logging
from mvp_screener.domain.models import MalformedSeriesError
from mvp_screener.infrastructure.db import database
from mvp_screener.scheduler.scheduler import build_scheduler
from mvp_screener.services.screening_service import ScreeningService, StoreUnavailableError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_DELIVERED = 1
EXIT_DATA_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mvp-screener",
        description="Screen stocks for the Momentum/Volume/Price pattern and report matches to Slack",
    )
    parser.add_argument("--dry-run", action="store_true", help="Log the message instead of sending it")
    parser.add_argument(
        "--schedule",
        action="store_true",
        default=settings.SCHEDULER_ENABLED,
        help="Run every weekday at SCREENING_TIME instead of once",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    return parser


async def run_once(service: ScreeningService, dry_run: bool = False) -> int:
    try:
        result = await service.run(dry_run=dry_run)
    except StoreUnavailableError:
        return EXIT_DATA_ERROR
    except MalformedSeriesError:
        logger.exception("Price history violated the 15-day window contract")
        return EXIT_DATA_ERROR

    if dry_run or result.delivered:
        return EXIT_OK
    return EXIT_NOT_DELIVERED


async def run_scheduled(service: ScreeningService, dry_run: bool = False) -> int:
    async def job():
        await run_once(service, dry_run=dry_run)

    scheduler = build_scheduler(job)
    scheduler.start()
    logger.info("✅ Scheduler started; waiting for the next screening window")

    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown(wait=False)
        logger.info("🛑 Scheduler shut down")

    return EXIT_OK


async def _main(args: argparse.Namespace) -> int:
    service = ScreeningService(session_factory=database.async_session_factory)
    try:
        if args.schedule:
            return await run_scheduled(service, dry_run=args.dry_run)
        return await run_once(service, dry_run=args.dry_run)
    finally:
        await database.close_db()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        return asyncio.run(_main(args))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
