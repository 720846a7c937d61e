"""
SCREENING ENGINE
Evaluate MVP verdicts for a batch of symbol windows

RESPONSIBILITIES:
- Apply the MVP rule to each series independently
- Log factor diagnostics
- NO DATA ACCESS, NO NOTIFICATIONS

RULES:
❌ No shared mutable state
❌ No ordering dependency between symbols
✅ Same input -> same verdicts
"""

import logging
from typing import Iterable, List

from mvp_screener.domain.models import SymbolSeries, Verdict, VerdictReason
from mvp_screener.domain.strategy.mvp_rule import evaluate_mvp

logger = logging.getLogger(__name__)


class ScreeningEngine:
    """
    Screening Engine
    Stateless wrapper around the MVP rule
    """

    def evaluate(self, series: SymbolSeries) -> Verdict:
        """Evaluate a single series"""
        verdict = evaluate_mvp(series)

        if verdict.reason is VerdictReason.ZERO_BASELINE_VOLUME:
            logger.info(f"{series.symbol}: 0 volume on the oldest day of the window")
        elif verdict.reason is VerdictReason.ZERO_BASELINE_PRICE:
            logger.info(f"{series.symbol}: 0 price on the oldest day of the window")

        logger.debug(
            f"{series.symbol}: M={verdict.momentum} ({verdict.up_days}/14) "
            f"V={verdict.volume_growth} P={verdict.price_growth} "
            f"-> {verdict.reason.value}"
        )
        return verdict

    def screen(self, series_list: Iterable[SymbolSeries]) -> List[Verdict]:
        """
        Evaluate every series, preserving input order.

        Returns:
            One Verdict per series
        """
        return [self.evaluate(series) for series in series_list]

    @staticmethod
    def passing_symbols(verdicts: Iterable[Verdict]) -> List[str]:
        return [verdict.symbol for verdict in verdicts if verdict.passed]
