# SPDX-License-Identifier: Apache-2.0
"""Canonical request and response types shared by all connectors.

Everything here is immutable: responses are built once per call by a
connector and handed to the caller as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union

from .market_data import InvalidArgumentError
from .value_objects import AssetKind, Exchange, Interval, Money, Period, Range, Symbol


@dataclass(frozen=True)
class Instrument:
    """A tradable asset: a validated symbol plus its asset kind."""

    symbol: Symbol
    kind: AssetKind

    @classmethod
    def from_symbol(cls, symbol: str, kind: AssetKind) -> Instrument:
        return cls(Symbol.from_string(symbol), AssetKind(kind))

    @property
    def symbol_str(self) -> str:
        return self.symbol.value

    def __str__(self) -> str:
        return f"{self.symbol} ({self.kind.value})"


@dataclass(frozen=True)
class HistoryRequest:
    """Parameters for a history call.

    Exactly one of ``range`` or ``period`` (explicit UTC start/end) is set.
    ``auto_adjust`` asks for dividend/split adjusted prices.
    """

    interval: Interval
    range: Optional[Range] = None
    period: Optional[Tuple[datetime, datetime]] = None
    auto_adjust: bool = True
    include_actions: bool = True

    def __post_init__(self):
        if (self.range is None) == (self.period is None):
            raise InvalidArgumentError("exactly one of range or period must be set")
        if self.period is not None:
            start, end = self.period
            if start >= end:
                raise InvalidArgumentError(f"period start {start} must be before end {end}")

    @classmethod
    def try_from_range(
        cls, range_: Union[Range, str], interval: Union[Interval, str], auto_adjust: bool = True
    ) -> HistoryRequest:
        try:
            return cls(interval=Interval(interval), range=Range(range_), auto_adjust=auto_adjust)
        except ValueError as e:
            if isinstance(e, InvalidArgumentError):
                raise
            raise InvalidArgumentError(str(e)) from e

    @classmethod
    def try_from_period(
        cls,
        start: datetime,
        end: datetime,
        interval: Union[Interval, str],
        auto_adjust: bool = True,
    ) -> HistoryRequest:
        try:
            return cls(interval=Interval(interval), period=(start, end), auto_adjust=auto_adjust)
        except ValueError as e:
            if isinstance(e, InvalidArgumentError):
                raise
            raise InvalidArgumentError(str(e)) from e


@dataclass(frozen=True)
class SearchRequest:
    """Free-text instrument search, optionally filtered by kind and bounded."""

    query: str
    kind: Optional[AssetKind] = None
    limit: Optional[int] = None

    def __post_init__(self):
        if not self.query or not self.query.strip():
            raise InvalidArgumentError("search query cannot be empty")
        if self.limit is not None and self.limit < 1:
            raise InvalidArgumentError(f"search limit must be positive: {self.limit}")


@dataclass(frozen=True)
class Candle:
    """One OHLCV observation at a UTC instant."""

    ts: datetime
    open: Money
    high: Money
    low: Money
    close: Money
    close_unadj: Optional[Money] = None
    volume: Optional[int] = None


@dataclass(frozen=True)
class Dividend:
    """Cash distribution attached to a history response."""

    ts: datetime
    amount: Money


CorporateAction = Dividend


@dataclass(frozen=True)
class HistoryMeta:
    timezone: Optional[str] = None
    utc_offset_seconds: Optional[int] = None


@dataclass(frozen=True)
class HistoryResponse:
    candles: Tuple[Candle, ...] = ()
    actions: Tuple[CorporateAction, ...] = ()
    adjusted: bool = False
    meta: Optional[HistoryMeta] = None


@dataclass(frozen=True)
class Quote:
    symbol: Symbol
    shortname: Optional[str] = None
    price: Optional[Money] = None
    previous_close: Optional[Money] = None
    exchange: Optional[Exchange] = None
    market_state: Optional[str] = None


@dataclass(frozen=True)
class SearchResult:
    symbol: Symbol
    kind: AssetKind
    name: Optional[str] = None
    exchange: Optional[Exchange] = None


@dataclass(frozen=True)
class SearchResponse:
    results: Tuple[SearchResult, ...] = ()


@dataclass(frozen=True)
class EarningsYear:
    year: int
    revenue: Optional[Money] = None
    earnings: Optional[Money] = None


@dataclass(frozen=True)
class EarningsQuarter:
    period: Period
    revenue: Optional[Money] = None
    earnings: Optional[Money] = None


@dataclass(frozen=True)
class EarningsQuarterEps:
    period: Period
    actual: Optional[Money] = None
    estimate: Optional[Money] = None


@dataclass(frozen=True)
class Earnings:
    yearly: Tuple[EarningsYear, ...] = field(default_factory=tuple)
    quarterly: Tuple[EarningsQuarter, ...] = field(default_factory=tuple)
    quarterly_eps: Tuple[EarningsQuarterEps, ...] = field(default_factory=tuple)
