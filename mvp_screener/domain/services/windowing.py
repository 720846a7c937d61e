"""
WINDOWING / AGGREGATION
Turn raw store rows into fixed 15-day windows

RESPONSIBILITIES:
- Group observations by symbol
- Order each group newest first
- Keep the 15 most recent rows, pad the rest with the zero sentinel

RULES:
❌ No evaluation
❌ No de-duplication of (symbol, date) rows
✅ Pure transformation
✅ Deterministic output for a given input order
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Iterable, List

from mvp_screener.domain.models import WINDOW_DAYS, Observation, SymbolSeries

logger = logging.getLogger(__name__)

ZERO_PRICE = Decimal("0")
ZERO_VOLUME = 0


def build_symbol_series(observations: Iterable[Observation]) -> List[SymbolSeries]:
    """
    Aggregate observations into one SymbolSeries per symbol.

    Symbols come out in the order they first appear in the input.
    Rows sharing a (symbol, date) keep the order the store returned them
    in; the sort is stable and does not break such ties.

    Args:
        observations: Unordered rows, one or more per symbol

    Returns:
        List of SymbolSeries
    """
    grouped: dict[str, list[Observation]] = defaultdict(list)
    for observation in observations:
        grouped[observation.symbol].append(observation)

    series_list = []
    for symbol, rows in grouped.items():
        recent = sorted(rows, key=lambda row: row.date, reverse=True)[:WINDOW_DAYS]
        missing = WINDOW_DAYS - len(recent)

        if missing:
            logger.debug(
                f"{symbol}: {len(recent)} of {WINDOW_DAYS} days available, "
                f"padding {missing} oldest positions"
            )

        series_list.append(
            SymbolSeries(
                symbol=symbol,
                prices=[row.price for row in recent] + [ZERO_PRICE] * missing,
                volumes=[row.volume for row in recent] + [ZERO_VOLUME] * missing,
                observed_days=len(recent),
                as_of=recent[0].date,
            )
        )

    return series_list
