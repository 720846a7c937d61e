"""
SERVICE — MVP SCREENING RUN

One pass of the screener:
store rows -> 15-day windows -> verdicts -> message -> Slack.

• Read only against the store
• One notification per run
• Same store contents -> same message
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mvp_screener.domain.models import Verdict
from mvp_screener.domain.services.screening_engine import ScreeningEngine
from mvp_screener.domain.services.windowing import build_symbol_series
from mvp_screener.infrastructure.db.repositories.stock_price_repository import StockPriceRepository
from mvp_screener.reports.screening_report import build_screening_message, summarize_verdicts
from mvp_screener.services.notification_service import SlackNotifier

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    """Price history could not be read from the store."""


@dataclass(frozen=True)
class ScreeningRunResult:
    verdicts: List[Verdict]
    message: str
    delivered: bool

    @property
    def matches(self) -> List[str]:
        return ScreeningEngine.passing_symbols(self.verdicts)


class ScreeningService:
    """
    Orchestrates a screening run.
    Business rules live in the domain layer; this only wires them up.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        notifier: Optional[SlackNotifier] = None,
        engine: Optional[ScreeningEngine] = None,
        repository_factory: Callable[[AsyncSession], StockPriceRepository] = StockPriceRepository,
    ):
        self.session_factory = session_factory
        self.notifier = notifier or SlackNotifier()
        self.engine = engine or ScreeningEngine()
        self.repository_factory = repository_factory

    async def evaluate(self) -> List[Verdict]:
        """Read the store and evaluate every symbol. No notification."""
        try:
            async with self.session_factory() as session:
                repo = self.repository_factory(session)
                observations = await repo.fetch_recent_observations()
        except (SQLAlchemyError, OSError) as exc:
            # Connection failures from the driver (e.g. refused) are not wrapped
            logger.exception("Failed to read price history")
            raise StoreUnavailableError("Failed to read price history") from exc

        series_list = build_symbol_series(observations)
        logger.info(f"📊 Screening {len(series_list)} symbols ({len(observations)} rows)")

        return self.engine.screen(series_list)

    async def run(self, dry_run: bool = False) -> ScreeningRunResult:
        """
        Run one screening pass and send the result.

        Args:
            dry_run: Build and log the message without sending it

        Returns:
            ScreeningRunResult
        """
        logger.info("🔄 Starting MVP screening run...")

        verdicts = await self.evaluate()
        message = build_screening_message(verdicts)
        summary = summarize_verdicts(verdicts)

        logger.info(
            f"✅ Screening complete: {summary['passed']}/{summary['evaluated']} passed "
            f"(M={summary['momentum']} V={summary['volume_growth']} P={summary['price_growth']})"
        )
        logger.info(message)

        if dry_run:
            logger.info("Dry run; notification not sent")
            return ScreeningRunResult(verdicts=verdicts, message=message, delivered=False)

        delivered = await self.notifier.send(message)
        if not delivered:
            logger.warning("Screening result was not delivered")

        return ScreeningRunResult(verdicts=verdicts, message=message, delivered=delivered)
