# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for the avconnect test suite.

FIXTURES PROVIDED:
- fake_transport / connector: connector wired to a recording fake transport
- *_body: representative Alpha Vantage JSON bodies, one per upstream shape
- search_body_factory: builds SYMBOL_SEARCH bodies with N matches
- clean_env: removes ALPHAVANTAGE_* variables so settings tests are hermetic
"""

from __future__ import annotations

from typing import Any

import pytest

from avconnect.infrastructure.connector import AlphaVantageConnector
from tests.fakes.transport import FakeAlphaVantageTransport


@pytest.fixture
def fake_transport() -> FakeAlphaVantageTransport:
    return FakeAlphaVantageTransport()


@pytest.fixture
def connector(fake_transport) -> AlphaVantageConnector:
    return AlphaVantageConnector(fake_transport)


@pytest.fixture
def daily_adjusted_body() -> dict[str, Any]:
    """TIME_SERIES_DAILY_ADJUSTED, newest first as Alpha Vantage sends it."""
    return {
        "Meta Data": {
            "1. Information": "Daily Time Series with Splits and Dividend Events",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-01-05",
            "4. Output Size": "Full size",
            "5. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2024-01-05": {
                "1. open": "160.7",
                "2. high": "161.2",
                "3. low": "159.9",
                "4. close": "160.86",
                "5. adjusted close": "158.1",
                "6. volume": "4000000",
                "7. dividend amount": "0.0000",
                "8. split coefficient": "1.0",
            },
            "2024-01-04": {
                "1. open": "161.0",
                "2. high": "162.0",
                "3. low": "160.1",
                "4. close": "161.1",
                "5. adjusted close": "159.4",
                "6. volume": "3500000",
                "7. dividend amount": "1.6600",
                "8. split coefficient": "1.0",
            },
            "2024-01-03": {
                "1. open": "162.5",
                "2. high": "163.0",
                "3. low": "161.2",
                "4. close": "161.5",
                "5. adjusted close": "159.8",
                "6. volume": "3100000",
                "7. dividend amount": "0.0000",
                "8. split coefficient": "1.0",
            },
        },
    }


@pytest.fixture
def daily_body() -> dict[str, Any]:
    """TIME_SERIES_DAILY without adjustment fields."""
    return {
        "Meta Data": {
            "1. Information": "Daily Prices (open, high, low, close) and Volumes",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-01-05",
            "4. Output Size": "Full size",
            "5. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2024-01-05": {
                "1. open": "160.7",
                "2. high": "161.2",
                "3. low": "159.9",
                "4. close": "160.86",
                "5. volume": "4000000",
            },
            "2024-01-04": {
                "1. open": "161.0",
                "2. high": "162.0",
                "3. low": "160.1",
                "4. close": "161.1",
                "5. volume": "3500000",
            },
        },
    }


@pytest.fixture
def intraday_body() -> dict[str, Any]:
    return {
        "Meta Data": {
            "1. Information": "Intraday (5min) open, high, low, close prices and volume",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-01-05 19:55:00",
            "4. Interval": "5min",
            "5. Output Size": "Full size",
            "6. Time Zone": "US/Eastern",
        },
        "Time Series (5min)": {
            "2024-01-05 09:35:00": {
                "1. open": "160.80",
                "2. high": "161.00",
                "3. low": "160.50",
                "4. close": "160.90",
                "5. volume": "120000",
            },
            "2024-01-05 09:30:00": {
                "1. open": "160.70",
                "2. high": "160.95",
                "3. low": "160.60",
                "4. close": "160.80",
                "5. volume": "150000",
            },
        },
    }


@pytest.fixture
def fx_daily_body() -> dict[str, Any]:
    return {
        "Meta Data": {
            "1. Information": "Forex Daily Prices (open, high, low, close)",
            "2. From Symbol": "EUR",
            "3. To Symbol": "USD",
            "4. Output Size": "Full size",
            "5. Last Refreshed": "2024-01-05 21:55:00",
            "6. Time Zone": "UTC",
        },
        "Time Series FX (Daily)": {
            "2024-01-05": {
                "1. open": "1.0942",
                "2. high": "1.0998",
                "3. low": "1.0877",
                "4. close": "1.0941",
            },
            "2024-01-04": {
                "1. open": "1.0923",
                "2. high": "1.0966",
                "3. low": "1.0920",
                "4. close": "1.0945",
            },
        },
    }


@pytest.fixture
def crypto_daily_body() -> dict[str, Any]:
    return {
        "Meta Data": {
            "1. Information": "Daily Prices and Volumes for Digital Currency",
            "2. Digital Currency Code": "BTC",
            "3. Digital Currency Name": "Bitcoin",
            "4. Market Code": "USD",
            "5. Market Name": "United States Dollar",
            "6. Last Refreshed": "2024-01-05 00:00:00",
            "7. Time Zone": "UTC",
        },
        "Time Series (Digital Currency Daily)": {
            "2024-01-05": {
                "1a. open (USD)": "44151.1",
                "1b. open (USD)": "44151.1",
                "2a. high (USD)": "44357.5",
                "2b. high (USD)": "44357.5",
                "3a. low (USD)": "42450.0",
                "3b. low (USD)": "42450.0",
                "4a. close (USD)": "44145.1",
                "4b. close (USD)": "44145.1",
                "5. volume": "1000000.4",
                "6. market cap (USD)": "1000000.4",
            },
            "2024-01-04": {
                "1a. open (USD)": "42836.2",
                "1b. open (USD)": "42836.2",
                "2a. high (USD)": "44729.6",
                "2b. high (USD)": "44729.6",
                "3a. low (USD)": "42630.0",
                "3b. low (USD)": "42630.0",
                "4a. close (USD)": "44151.1",
                "4b. close (USD)": "44151.1",
                "5. volume": "3.6",
                "6. market cap (USD)": "3.6",
            },
        },
    }


@pytest.fixture
def quote_body() -> dict[str, Any]:
    return {
        "Global Quote": {
            "01. symbol": "IBM",
            "02. open": "161.0000",
            "03. high": "161.7300",
            "04. low": "159.9900",
            "05. price": "123",
            "06. volume": "3029212",
            "07. latest trading day": "2024-01-05",
            "08. previous close": "160.5000",
            "09. change": "0.3600",
            "10. change percent": "0.2243%",
        }
    }


def _match(symbol: str, name: str, type_: str, region: str = "United States") -> dict[str, str]:
    return {
        "1. symbol": symbol,
        "2. name": name,
        "3. type": type_,
        "4. region": region,
        "5. marketOpen": "09:30",
        "6. marketClose": "16:00",
        "7. timezone": "UTC-04",
        "8. currency": "USD",
        "9. matchScore": "0.8889",
    }


@pytest.fixture
def search_body() -> dict[str, Any]:
    return {
        "bestMatches": [
            _match("TSCO.LON", "Tesco PLC", "Equity", "United Kingdom"),
            _match("TSCDY", "Tesco plc", "Equity"),
            _match("VOO", "Vanguard S&P 500 ETF", "ETF", "NYSE"),
            _match("SPX", "S&P 500 Index", "Index"),
            _match("BTC", "Bitcoin", "Digital Currency"),
        ]
    }


@pytest.fixture
def search_body_factory():
    def build(count: int, type_: str = "Equity") -> dict[str, Any]:
        return {"bestMatches": [_match(f"SYM{i}", f"Company {i}", type_) for i in range(count)]}

    return build


@pytest.fixture
def earnings_body() -> dict[str, Any]:
    return {
        "symbol": "IBM",
        "annualEarnings": [
            {"fiscalDateEnding": "2023-12-31", "reportedEPS": "9.61"},
            {"fiscalDateEnding": "2022-12-31", "reportedEPS": "9.13"},
        ],
        "quarterlyEarnings": [
            {
                "fiscalDateEnding": "2023-12-31",
                "reportedDate": "2024-01-24",
                "reportedEPS": "3.87",
                "estimatedEPS": "3.78",
                "surprise": "0.09",
                "surprisePercentage": "2.381",
                "reportTime": "post-market",
            },
            {
                "fiscalDateEnding": "2024-03-31",
                "reportedDate": "",
                "reportedEPS": "None",
                "estimatedEPS": "1.6",
                "surprise": "None",
                "surprisePercentage": "None",
                "reportTime": "pre-market",
            },
        ],
    }


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ALPHAVANTAGE_API_KEY",
        "ALPHAVANTAGE_RAPIDAPI_KEY",
        "ALPHAVANTAGE_BASE_URL",
        "ALPHAVANTAGE_RAPIDAPI_HOST",
        "ALPHAVANTAGE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
