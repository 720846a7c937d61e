"""
REPORTING — MVP SCREENING RESULT

Human-readable message for the notification channel, plus a structured
summary for logs.
"""

from typing import Iterable, List

from mvp_screener.domain.models import Verdict

NO_MATCH_MESSAGE = "No symbols met the MVP criteria"
MATCH_PREFIX = "Symbols meeting the MVP criteria: "
SYMBOL_SEPARATOR = ", "


def build_screening_message(verdicts: Iterable[Verdict]) -> str:
    """
    Build the notification text.

    Passing symbols are listed in verdict order, joined by ", ".
    """
    symbols = [verdict.symbol for verdict in verdicts if verdict.passed]

    if not symbols:
        return NO_MATCH_MESSAGE

    return MATCH_PREFIX + SYMBOL_SEPARATOR.join(symbols)


def summarize_verdicts(verdicts: List[Verdict]) -> dict:
    """Counts per outcome, for the run log"""
    summary = {
        "evaluated": len(verdicts),
        "passed": 0,
        "momentum": 0,
        "volume_growth": 0,
        "price_growth": 0,
        "reasons": {},
    }

    for verdict in verdicts:
        summary["passed"] += int(verdict.passed)
        summary["momentum"] += int(verdict.momentum)
        summary["volume_growth"] += int(verdict.volume_growth)
        summary["price_growth"] += int(verdict.price_growth)
        reason = verdict.reason.value
        summary["reasons"][reason] = summary["reasons"].get(reason, 0) + 1

    return summary
