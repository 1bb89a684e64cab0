# SPDX-License-Identifier: Apache-2.0
"""Domain value objects for avconnect.

Value Objects are immutable objects that are defined by their values rather
than their identity. They form the vendor-neutral vocabulary every connector
translates into and out of.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from .market_data import InvalidArgumentError

_SYMBOL_RE = re.compile(r"^[A-Z0-9.\-/^=_:]{1,32}$")
_CURRENCY_RE = re.compile(r"^[A-Z]{3,5}$")


@dataclass(frozen=True)
class Symbol:
    """Trading symbol value object.

    Represents an instrument identifier (e.g. AAPL, BRK.A, EUR/USD, BTC-USD).
    """

    value: str

    def __post_init__(self):
        """Validate symbol format on creation."""
        if not self.value or not self.value.strip():
            raise InvalidArgumentError("Symbol cannot be empty")

        normalized = self.value.upper().strip()
        object.__setattr__(self, "value", normalized)

        if not _SYMBOL_RE.match(self.value):
            raise InvalidArgumentError(
                f"Invalid symbol format: {self.value}. "
                "Must be 1-32 characters (A-Z, 0-9 or one of . - / ^ = _ :)"
            )

    @classmethod
    def from_string(cls, symbol_str: str) -> Symbol:
        """Create Symbol from string with normalization."""
        return cls(symbol_str.upper().strip())

    def __str__(self) -> str:
        return self.value


class AssetKind(str, Enum):
    """Asset classification used to route requests to the right upstream shape."""

    EQUITY = "EQUITY"
    FUND = "FUND"
    INDEX = "INDEX"
    FOREX = "FOREX"
    CRYPTO = "CRYPTO"
    BOND = "BOND"
    COMMODITY = "COMMODITY"


class Exchange(str, Enum):
    """Exchanges a connector may report on quotes and search results."""

    NASDAQ = "NASDAQ"
    NYSE = "NYSE"
    AMEX = "AMEX"
    LSE = "LSE"
    XETRA = "XETRA"
    TSX = "TSX"
    TSXV = "TSXV"
    BSE = "BSE"
    NSE = "NSE"
    SSE = "SSE"
    SZSE = "SZSE"
    ASX = "ASX"

    @classmethod
    def try_from_str(cls, value: Optional[str]) -> Optional[Exchange]:
        """Return the exchange named by *value*, or None if it names none."""
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Money:
    """Exact decimal amount tagged with a currency code."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise InvalidArgumentError(f"Money amount must be a Decimal, got {type(self.amount)}")
        if not self.amount.is_finite():
            raise InvalidArgumentError(f"Money amount must be finite: {self.amount}")
        if not _CURRENCY_RE.match(self.currency or ""):
            raise InvalidArgumentError(f"Invalid currency code: {self.currency!r}")

    @classmethod
    def from_canonical_str(cls, value: str, currency: str = "USD") -> Money:
        """Create money from its textual representation (e.g. "123.45").

        Raises:
            InvalidArgumentError: If the text is not a finite decimal number.
        """
        try:
            amount = Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid money amount: {value!r}") from e
        return cls(amount, currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


class Interval(str, Enum):
    """Bar granularity."""

    I1M = "1m"
    I2M = "2m"
    I5M = "5m"
    I15M = "15m"
    I30M = "30m"
    I90M = "90m"
    I1H = "1h"
    D1 = "1d"
    D5 = "5d"
    W1 = "1wk"
    M1 = "1mo"
    M3 = "3mo"

    @property
    def minutes(self) -> Optional[int]:
        """Length in minutes for intraday intervals, None otherwise."""
        return _INTRADAY_MINUTES.get(self)

    @property
    def is_intraday(self) -> bool:
        return self in _INTRADAY_MINUTES


_INTRADAY_MINUTES = {
    Interval.I1M: 1,
    Interval.I2M: 2,
    Interval.I5M: 5,
    Interval.I15M: 15,
    Interval.I30M: 30,
    Interval.I90M: 90,
    Interval.I1H: 60,
}


class Range(str, Enum):
    """Relative lookback window, e.g. "1mo" means the last month."""

    D1 = "1d"
    D5 = "5d"
    M1 = "1mo"
    M3 = "3mo"
    M6 = "6mo"
    Y1 = "1y"
    Y2 = "2y"
    Y5 = "5y"
    Y10 = "10y"
    YTD = "ytd"
    MAX = "max"


@dataclass(frozen=True)
class YearPeriod:
    """A fiscal year."""

    year: int

    def __str__(self) -> str:
        return f"{self.year}"


@dataclass(frozen=True)
class QuarterPeriod:
    """A fiscal quarter of a given year."""

    year: int
    quarter: int

    def __post_init__(self):
        if not 1 <= self.quarter <= 4:
            raise InvalidArgumentError(f"Quarter must be between 1 and 4: {self.quarter}")

    def __str__(self) -> str:
        return f"{self.year}Q{self.quarter}"


@dataclass(frozen=True)
class DatePeriod:
    """A reporting period identified by an explicit calendar date."""

    day: date

    def __str__(self) -> str:
        return self.day.isoformat()


Period = Union[YearPeriod, QuarterPeriod, DatePeriod]

_YEAR_RE = re.compile(r"^(\d{4})$")
_QUARTER_RE = re.compile(r"^(\d{4})-?Q([1-4])$", re.IGNORECASE)


def parse_period(value: str) -> Period:
    """Parse a reporting period.

    Accepted shapes: ``2024`` (year), ``2024Q1`` / ``2024-Q1`` (quarter) and
    ``2024-03-31`` (date).

    Raises:
        InvalidArgumentError: If the text matches none of the shapes.
    """
    text = (value or "").strip()
    m = _YEAR_RE.match(text)
    if m:
        return YearPeriod(int(m.group(1)))
    m = _QUARTER_RE.match(text)
    if m:
        return QuarterPeriod(int(m.group(1)), int(m.group(2)))
    try:
        return DatePeriod(date.fromisoformat(text))
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid period: {value!r}") from e


__all__ = [
    "Symbol",
    "AssetKind",
    "Exchange",
    "Money",
    "Interval",
    "Range",
    "YearPeriod",
    "QuarterPeriod",
    "DatePeriod",
    "Period",
    "parse_period",
]
