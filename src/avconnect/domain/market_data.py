# SPDX-License-Identifier: Apache-2.0
# src/avconnect/domain/market_data.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Optional, Tuple

if TYPE_CHECKING:
    from .entities import (
        Earnings,
        HistoryRequest,
        HistoryResponse,
        Instrument,
        Quote,
        SearchRequest,
        SearchResponse,
    )
    from .value_objects import AssetKind, Interval


# ---------- domain exceptions ----------
class MarketDataError(Exception):
    """Base class for every error a connector hands back to its caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MarketDataError):
    """Raised when the requested resource does not exist upstream."""

    def __init__(self, what: str):
        super().__init__(f"not found: {what}")
        self.what = what


class ConnectorError(MarketDataError):
    """Raised when a connector's upstream service fails.

    Carries the name of the connector that failed so callers fanning out over
    several providers can tell them apart.
    """

    def __init__(self, connector: str, message: str):
        super().__init__(message)
        self.connector = connector

    def __str__(self) -> str:
        return f"connector error [{self.connector}]: {self.message}"


class InvalidArgumentError(MarketDataError, ValueError):
    """Raised when caller-supplied input is structurally wrong."""


class UnsupportedError(MarketDataError):
    """Raised when a well-formed request cannot be served by this connector."""

    def __init__(self, what: str):
        super().__init__(f"unsupported operation: {what}")
        self.what = what


class DataError(MarketDataError):
    """Raised when an upstream payload cannot be interpreted."""

    def __str__(self) -> str:
        return f"data error: {self.message}"


class OtherError(MarketDataError):
    """Raised for failures that fit no other category."""


# ---------- metadata ----------
@dataclass(frozen=True)
class ConnectorMetadata:
    connector_name: str
    vendor: str
    supported_kinds: FrozenSet[AssetKind]
    supports_quotes: bool
    supports_history: bool
    supports_search: bool
    supports_earnings: bool


# ---------- domain ports ----------
class QuoteProvider(ABC):
    """Port for fetching a current quote."""

    @abstractmethod
    async def quote(self, instrument: Instrument) -> Quote:
        """
        Fetch the latest quote for an instrument.

        Raises:
            NotFoundError: When the instrument is unknown upstream
            ConnectorError: When the upstream service fails
        """
        ...


class HistoryProvider(ABC):
    """Port for fetching OHLCV history."""

    @abstractmethod
    async def history(self, instrument: Instrument, request: HistoryRequest) -> HistoryResponse:
        """
        Fetch candles (and corporate actions) for an instrument.

        Raises:
            InvalidArgumentError: When the instrument symbol is malformed
            UnsupportedError: When the interval cannot be served
            NotFoundError: When the instrument is unknown upstream
            ConnectorError: When the upstream service fails
        """
        ...

    @abstractmethod
    def supported_history_intervals(self, kind: AssetKind) -> Tuple[Interval, ...]:
        """Intervals this provider can serve for the given asset kind."""
        ...


class SearchProvider(ABC):
    """Port for instrument search."""

    @abstractmethod
    async def search(self, request: SearchRequest) -> SearchResponse:
        ...


class EarningsProvider(ABC):
    """Port for earnings history."""

    @abstractmethod
    async def earnings(self, instrument: Instrument) -> Earnings:
        ...


class MarketDataConnector(ABC):
    """A named connector exposing some subset of the provider ports.

    Capabilities are discovered through the ``as_*_provider`` accessors, which
    return the connector itself when it implements the port and None otherwise.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def vendor(self) -> str:
        ...

    @abstractmethod
    def supports_kind(self, kind: AssetKind) -> bool:
        ...

    @abstractmethod
    def get_connector_metadata(self) -> ConnectorMetadata:
        ...

    def as_quote_provider(self) -> Optional[QuoteProvider]:
        return self if isinstance(self, QuoteProvider) else None

    def as_history_provider(self) -> Optional[HistoryProvider]:
        return self if isinstance(self, HistoryProvider) else None

    def as_search_provider(self) -> Optional[SearchProvider]:
        return self if isinstance(self, SearchProvider) else None

    def as_earnings_provider(self) -> Optional[EarningsProvider]:
        return self if isinstance(self, EarningsProvider) else None
