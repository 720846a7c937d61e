"""
DOMAIN MODELS — MVP SCREENING

Immutable structures flowing through one screening run:
raw store rows (Observation) -> fixed 15-day windows (SymbolSeries)
-> per-symbol outcome (Verdict).
Pure domain logic only; no database or service imports.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

WINDOW_DAYS = 15


class MalformedSeriesError(ValueError):
    """A SymbolSeries violated its fixed-window invariants."""


class VerdictReason(str, Enum):
    PASSED = "all criteria met"
    CRITERIA_NOT_MET = "criteria not met"
    ZERO_BASELINE_VOLUME = "zero baseline volume"
    ZERO_BASELINE_PRICE = "zero baseline price"


@dataclass(frozen=True)
class Observation:
    """One (symbol, date) row from the price store."""
    symbol: str
    date: date
    price: Decimal
    volume: int


@dataclass(frozen=True)
class SymbolSeries:
    """
    Fixed-length trailing window for one symbol.

    Index 0 is the most recent trading day, index 14 the oldest.
    Positions without history hold the zero sentinel (price 0, volume 0).
    """
    symbol: str
    prices: tuple[Decimal, ...]
    volumes: tuple[int, ...]
    observed_days: int = WINDOW_DAYS
    as_of: Optional[date] = field(default=None, compare=False)

    def __post_init__(self):
        # Freeze whatever sequence was passed in
        object.__setattr__(self, "prices", tuple(self.prices))
        object.__setattr__(self, "volumes", tuple(self.volumes))

        if not self.symbol:
            raise MalformedSeriesError("symbol must be non-empty")

        if len(self.prices) != WINDOW_DAYS:
            raise MalformedSeriesError(
                f"{self.symbol}: expected {WINDOW_DAYS} prices, got {len(self.prices)}"
            )

        if len(self.volumes) != len(self.prices):
            raise MalformedSeriesError(
                f"{self.symbol}: {len(self.volumes)} volumes are not aligned "
                f"with {len(self.prices)} prices"
            )

        for index, price in enumerate(self.prices):
            if not isinstance(price, Decimal):
                raise MalformedSeriesError(
                    f"{self.symbol}: price at index {index} must be Decimal, "
                    f"got {type(price).__name__}"
                )

        for index, volume in enumerate(self.volumes):
            if isinstance(volume, bool) or not isinstance(volume, int):
                raise MalformedSeriesError(
                    f"{self.symbol}: volume at index {index} must be int, "
                    f"got {type(volume).__name__}"
                )

        if not 0 <= self.observed_days <= WINDOW_DAYS:
            raise MalformedSeriesError(
                f"{self.symbol}: observed_days must be within 0..{WINDOW_DAYS}"
            )

    @property
    def is_padded(self) -> bool:
        return self.observed_days < WINDOW_DAYS


@dataclass(frozen=True)
class Verdict:
    """
    Result of evaluating one SymbolSeries against the MVP rule.

    Factors skipped by a zero-baseline guard are recorded as False and
    their ratio as None.
    """
    symbol: str
    passed: bool
    momentum: bool
    volume_growth: bool
    price_growth: bool
    reason: VerdictReason
    up_days: int
    volume_ratio: Optional[Decimal] = None
    price_ratio: Optional[Decimal] = None
