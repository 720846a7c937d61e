"""
MVP SCREENING RULE — MOMENTUM / VOLUME / PRICE

This module defines the deterministic three-factor rule applied to a
single 15-trading-day window.

It answers:
- Did the price rise on at least 12 of the 14 day-over-day steps? (M)
- Did volume grow by at least 25% across the window? (V)
- Did price grow by at least 20% across the window? (P)

It explicitly does NOT:
- Fetch or aggregate market data
- Rank or compare symbols
- Smooth, weight or model anything; thresholds are literal
"""

from decimal import Decimal

from mvp_screener.domain.models import WINDOW_DAYS, SymbolSeries, Verdict, VerdictReason

# -------------------------------------------------------------------
# Threshold Definitions
# -------------------------------------------------------------------

# Day-over-day comparisons inside one window
MOMENTUM_COMPARISONS = WINDOW_DAYS - 1

# Exclusive: up_days / 14 must be strictly greater (12 of 14 passes)
MOMENTUM_MIN_UP_RATIO = 0.8

# Inclusive, exact decimal comparisons
VOLUME_GROWTH_MIN = Decimal("0.25")
PRICE_GROWTH_MIN = Decimal("0.20")

NEWEST = 0
BASELINE = WINDOW_DAYS - 1

# -------------------------------------------------------------------
# Factor Helpers
# -------------------------------------------------------------------


def count_up_days(prices) -> int:
    """
    Count day-over-day increases, walking from the most recent day
    toward the oldest: prices[i] > prices[i + 1] for i in 0..13.
    """
    up_days = 0
    for i in range(MOMENTUM_COMPARISONS):
        if prices[i] > prices[i + 1]:
            up_days += 1
    return up_days


def growth_ratio(newest: Decimal, baseline: Decimal) -> Decimal:
    """(newest - baseline) / baseline in exact decimal arithmetic."""
    return (Decimal(newest) - Decimal(baseline)) / Decimal(baseline)


# -------------------------------------------------------------------
# Rule
# -------------------------------------------------------------------

def evaluate_mvp(series: SymbolSeries) -> Verdict:
    """
    Apply the MVP rule to one series.

    Zero-baseline guards run before each division and fail closed, so a
    series padded with the zero sentinel can never pass.

    Args:
        series (SymbolSeries): 15-day window, newest first

    Returns:
        Verdict with the three factor results and the deciding reason
    """
    up_days = count_up_days(series.prices)
    up_ratio = up_days / MOMENTUM_COMPARISONS
    momentum = up_ratio > MOMENTUM_MIN_UP_RATIO

    if series.volumes[BASELINE] == 0:
        return Verdict(
            symbol=series.symbol,
            passed=False,
            momentum=momentum,
            volume_growth=False,
            price_growth=False,
            reason=VerdictReason.ZERO_BASELINE_VOLUME,
            up_days=up_days,
        )

    volume_ratio = growth_ratio(
        Decimal(series.volumes[NEWEST]), Decimal(series.volumes[BASELINE])
    )
    volume_growth = volume_ratio >= VOLUME_GROWTH_MIN

    if series.prices[BASELINE].is_zero():
        return Verdict(
            symbol=series.symbol,
            passed=False,
            momentum=momentum,
            volume_growth=volume_growth,
            price_growth=False,
            reason=VerdictReason.ZERO_BASELINE_PRICE,
            up_days=up_days,
            volume_ratio=volume_ratio,
        )

    price_ratio = growth_ratio(series.prices[NEWEST], series.prices[BASELINE])
    price_growth = price_ratio >= PRICE_GROWTH_MIN

    passed = momentum and volume_growth and price_growth

    return Verdict(
        symbol=series.symbol,
        passed=passed,
        momentum=momentum,
        volume_growth=volume_growth,
        price_growth=price_growth,
        reason=VerdictReason.PASSED if passed else VerdictReason.CRITERIA_NOT_MET,
        up_days=up_days,
        volume_ratio=volume_ratio,
        price_ratio=price_ratio,
    )
