# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the typed Alpha Vantage payload models."""

from __future__ import annotations

import pytest

from avconnect.domain import DataError
from avconnect.infrastructure.payloads import (
    CryptoPayload,
    EarningsPayload,
    ForexPayload,
    GlobalQuotePayload,
    SearchPayload,
    TimeSeriesPayload,
    normalize_key,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1. open", "open"),
        ("5. adjusted close", "adjusted_close"),
        ("1a. open (USD)", "open"),
        ("6. market cap (USD)", "market_cap"),
        ("08. previous close", "previous_close"),
        ("9. matchScore", "match_score"),
        ("bestMatches", "best_matches"),
        ("reportedEPS", "reported_eps"),
        ("5. Time Zone", "time_zone"),
    ],
)
def test_normalize_key(raw, expected):
    assert normalize_key(raw) == expected


class TestSeriesPayloads:
    def test_time_series(self, daily_adjusted_body):
        payload = TimeSeriesPayload.from_response(daily_adjusted_body)
        assert payload.timezone == "US/Eastern"
        bar = payload.series["2024-01-04"]
        assert bar.adjusted_close == 159.4
        assert bar.dividend_amount == 1.66
        assert bar.volume == 3500000

    def test_raw_series_has_no_adjusted_fields(self, daily_body):
        bar = TimeSeriesPayload.from_response(daily_body).series["2024-01-05"]
        assert bar.adjusted_close is None
        assert bar.dividend_amount is None

    def test_forex(self, fx_daily_body):
        payload = ForexPayload.from_response(fx_daily_body)
        assert payload.timezone == "UTC"
        assert payload.series["2024-01-05"].close == 1.0941

    def test_crypto_first_market_column_wins(self, crypto_daily_body):
        crypto_daily_body["Time Series (Digital Currency Daily)"]["2024-01-05"][
            "1b. open (USD)"
        ] = "1.0"
        payload = CryptoPayload.from_response(crypto_daily_body)
        assert payload.series["2024-01-05"].open == 44151.1
        assert payload.series["2024-01-05"].volume == 1000000.4

    def test_missing_series(self):
        with pytest.raises(DataError, match="no time series"):
            TimeSeriesPayload.from_response({"Meta Data": {}})

    def test_non_numeric_price(self, daily_body):
        daily_body["Time Series (Daily)"]["2024-01-05"]["2. high"] = "n/a"
        with pytest.raises(DataError):
            TimeSeriesPayload.from_response(daily_body)

    def test_missing_meta_data_means_no_timezone(self, fx_daily_body):
        del fx_daily_body["Meta Data"]
        assert ForexPayload.from_response(fx_daily_body).timezone is None


class TestGlobalQuotePayload:
    def test_parses_numbered_keys(self, quote_body):
        payload = GlobalQuotePayload.from_response(quote_body)
        assert payload.symbol == "IBM"
        assert payload.price == 123.0
        assert payload.previous_close == 160.5
        assert payload.change_percent == "0.2243%"

    @pytest.mark.parametrize("body", [{"Global Quote": {}}, {}])
    def test_empty_quote(self, body):
        assert GlobalQuotePayload.from_response(body).symbol is None


class TestSearchPayload:
    def test_matches(self, search_body):
        payload = SearchPayload.from_response(search_body)
        assert [m.symbol for m in payload.best_matches][:2] == ["TSCO.LON", "TSCDY"]
        assert payload.best_matches[0].match_score == 0.8889
        assert payload.best_matches[2].type == "ETF"

    def test_no_matches(self):
        assert SearchPayload.from_response({"bestMatches": []}).best_matches == []


class TestEarningsPayload:
    def test_none_markers_become_missing(self, earnings_body):
        payload = EarningsPayload.from_response(earnings_body)
        latest = payload.quarterly_earnings[1]
        assert latest.reported_eps is None
        assert latest.reported_date is None
        assert latest.estimated_eps == 1.6

    def test_annual(self, earnings_body):
        payload = EarningsPayload.from_response(earnings_body)
        assert [a.fiscal_date_ending for a in payload.annual_earnings] == [
            "2023-12-31",
            "2022-12-31",
        ]

    def test_malformed(self):
        with pytest.raises(DataError):
            EarningsPayload.from_response({"quarterlyEarnings": [{"reportedEPS": "1.0"}]})
