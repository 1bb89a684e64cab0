# SPDX-License-Identifier: Apache-2.0
"""Canonical domain model for avconnect.

This package contains the vendor-neutral types every connector produces:
- Value Objects: symbols, money, intervals, ranges, reporting periods
- Entities: requests and responses (candles, quotes, search results, earnings)
- Market data ports: provider interfaces and the canonical error taxonomy

The domain layer knows nothing about any particular vendor.
"""

from .entities import (
    Candle,
    CorporateAction,
    Dividend,
    Earnings,
    EarningsQuarter,
    EarningsQuarterEps,
    EarningsYear,
    HistoryMeta,
    HistoryRequest,
    HistoryResponse,
    Instrument,
    Quote,
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from .market_data import (
    ConnectorError,
    ConnectorMetadata,
    DataError,
    EarningsProvider,
    HistoryProvider,
    InvalidArgumentError,
    MarketDataConnector,
    MarketDataError,
    NotFoundError,
    OtherError,
    QuoteProvider,
    SearchProvider,
    UnsupportedError,
)
from .value_objects import (
    AssetKind,
    DatePeriod,
    Exchange,
    Interval,
    Money,
    Period,
    QuarterPeriod,
    Range,
    Symbol,
    YearPeriod,
    parse_period,
)

__all__ = [
    # Value Objects
    "AssetKind",
    "DatePeriod",
    "Exchange",
    "Interval",
    "Money",
    "Period",
    "QuarterPeriod",
    "Range",
    "Symbol",
    "YearPeriod",
    "parse_period",
    # Entities
    "Candle",
    "CorporateAction",
    "Dividend",
    "Earnings",
    "EarningsQuarter",
    "EarningsQuarterEps",
    "EarningsYear",
    "HistoryMeta",
    "HistoryRequest",
    "HistoryResponse",
    "Instrument",
    "Quote",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    # Ports
    "ConnectorMetadata",
    "EarningsProvider",
    "HistoryProvider",
    "MarketDataConnector",
    "QuoteProvider",
    "SearchProvider",
    # Errors
    "ConnectorError",
    "DataError",
    "InvalidArgumentError",
    "MarketDataError",
    "NotFoundError",
    "OtherError",
    "UnsupportedError",
]
