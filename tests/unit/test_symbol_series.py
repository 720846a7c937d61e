from decimal import Decimal

import pytest

from mvp_screener.domain.models import MalformedSeriesError, SymbolSeries


def test_lists_are_frozen_to_tuples():
    prices = [Decimal("1")] * 15
    series = SymbolSeries(symbol="AAA", prices=prices, volumes=[1] * 15)

    prices[0] = Decimal("999")

    assert isinstance(series.prices, tuple)
    assert isinstance(series.volumes, tuple)
    assert series.prices[0] == Decimal("1")


@pytest.mark.parametrize("length", [0, 14, 16])
def test_wrong_length_is_rejected(length):
    with pytest.raises(MalformedSeriesError, match="expected 15 prices"):
        SymbolSeries(symbol="AAA", prices=[Decimal("1")] * length, volumes=[1] * length)


def test_misaligned_volumes_are_rejected():
    with pytest.raises(MalformedSeriesError, match="not aligned"):
        SymbolSeries(symbol="AAA", prices=[Decimal("1")] * 15, volumes=[1] * 14)


def test_float_prices_are_rejected():
    with pytest.raises(MalformedSeriesError, match="must be Decimal"):
        SymbolSeries(symbol="AAA", prices=[1.5] * 15, volumes=[1] * 15)


def test_non_integer_volumes_are_rejected():
    with pytest.raises(MalformedSeriesError, match="must be int"):
        SymbolSeries(symbol="AAA", prices=[Decimal("1")] * 15, volumes=[1.0] * 15)


def test_observed_days_out_of_range_is_rejected(make_series):
    with pytest.raises(MalformedSeriesError, match="observed_days"):
        make_series(observed_days=16)


def test_blank_symbol_is_rejected(make_series):
    with pytest.raises(MalformedSeriesError):
        make_series(symbol="")


def test_malformed_series_is_a_value_error():
    assert issubclass(MalformedSeriesError, ValueError)
