# SPDX-License-Identifier: Apache-2.0
"""Unit tests for domain value objects."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from avconnect.domain import (
    DatePeriod,
    Exchange,
    Interval,
    InvalidArgumentError,
    Money,
    QuarterPeriod,
    Symbol,
    YearPeriod,
    parse_period,
)


class TestSymbol:
    def test_normalizes_case_and_whitespace(self):
        assert Symbol(" aapl ").value == "AAPL"

    @pytest.mark.parametrize("raw", ["BRK.A", "EUR/USD", "BTC-USD", "^GSPC", "TSCO.LON"])
    def test_accepts_common_shapes(self, raw):
        assert Symbol.from_string(raw).value == raw

    @pytest.mark.parametrize("raw", ["", "   ", "AA PL", "A" * 33, "AAPL$"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidArgumentError):
            Symbol(raw)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            Symbol("")


class TestMoney:
    def test_from_canonical_str_is_exact(self):
        money = Money.from_canonical_str("101.1")
        assert money.amount == Decimal("101.1")
        assert money.currency == "USD"

    def test_rejects_non_finite(self):
        with pytest.raises(InvalidArgumentError):
            Money(Decimal("NaN"))

    def test_rejects_garbage_text(self):
        with pytest.raises(InvalidArgumentError):
            Money.from_canonical_str("abc")

    def test_rejects_bad_currency(self):
        with pytest.raises(InvalidArgumentError):
            Money(Decimal("1"), "us")


class TestInterval:
    def test_intraday_minutes(self):
        assert Interval.I1H.minutes == 60
        assert Interval.I90M.minutes == 90
        assert Interval.D1.minutes is None

    def test_is_intraday(self):
        assert Interval.I5M.is_intraday
        assert not Interval.W1.is_intraday


class TestExchange:
    def test_known_region(self):
        assert Exchange.try_from_str("nyse") is Exchange.NYSE

    @pytest.mark.parametrize("raw", [None, "", "United States"])
    def test_unknown_region(self, raw):
        assert Exchange.try_from_str(raw) is None


class TestParsePeriod:
    def test_year(self):
        assert parse_period("2024") == YearPeriod(2024)

    @pytest.mark.parametrize("raw", ["2024Q1", "2024-Q1", "2024q1"])
    def test_quarter(self, raw):
        assert parse_period(raw) == QuarterPeriod(2024, 1)

    def test_date(self):
        assert parse_period("2024-03-31") == DatePeriod(date(2024, 3, 31))

    @pytest.mark.parametrize("raw", ["", "Q1", "2024-13-01", "soon"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidArgumentError):
            parse_period(raw)

    def test_quarter_bounds(self):
        with pytest.raises(InvalidArgumentError):
            QuarterPeriod(2024, 5)
