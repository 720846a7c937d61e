from mvp_screener.domain.models import Verdict, VerdictReason
from mvp_screener.reports.screening_report import (
    NO_MATCH_MESSAGE,
    build_screening_message,
    summarize_verdicts,
)


def verdict(symbol, passed, reason=None):
    return Verdict(
        symbol=symbol,
        passed=passed,
        momentum=passed,
        volume_growth=passed,
        price_growth=passed,
        reason=reason or (VerdictReason.PASSED if passed else VerdictReason.CRITERIA_NOT_MET),
        up_days=14 if passed else 0,
    )


def test_no_matches_message():
    message = build_screening_message([verdict("AAA", False), verdict("BBB", False)])
    assert message == NO_MATCH_MESSAGE == "No symbols met the MVP criteria"


def test_empty_run_is_no_matches():
    assert build_screening_message([]) == NO_MATCH_MESSAGE


def test_single_match_has_no_separator():
    message = build_screening_message([verdict("AAA", False), verdict("NVDA", True)])
    assert message == "Symbols meeting the MVP criteria: NVDA"


def test_matches_joined_in_verdict_order():
    verdicts = [verdict("MSFT", True), verdict("AAA", False), verdict("AAPL", True)]

    message = build_screening_message(verdicts)

    assert message == "Symbols meeting the MVP criteria: MSFT, AAPL"
    assert not message.endswith(", ")


def test_summary_counts_reasons():
    verdicts = [
        verdict("AAA", True),
        verdict("BBB", False),
        verdict("CCC", False, VerdictReason.ZERO_BASELINE_VOLUME),
        verdict("DDD", False, VerdictReason.ZERO_BASELINE_VOLUME),
    ]

    summary = summarize_verdicts(verdicts)

    assert summary["evaluated"] == 4
    assert summary["passed"] == 1
    assert summary["momentum"] == 1
    assert summary["reasons"] == {
        "all criteria met": 1,
        "criteria not met": 1,
        "zero baseline volume": 2,
    }
