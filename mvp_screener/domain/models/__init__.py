"""
Domain Models Package
Export all domain entities
"""

from .screening import (
    WINDOW_DAYS,
    MalformedSeriesError,
    Observation,
    SymbolSeries,
    Verdict,
    VerdictReason,
)

__all__ = [
    "WINDOW_DAYS",

    # Errors
    "MalformedSeriesError",

    # Enums
    "VerdictReason",

    # Entities
    "Observation",
    "SymbolSeries",
    "Verdict",
]
