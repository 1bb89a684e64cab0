# SPDX-License-Identifier: Apache-2.0
"""Alpha Vantage market data connector."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Tuple

import httpx

from avconnect.domain.entities import (
    Earnings,
    HistoryRequest,
    HistoryResponse,
    Instrument,
    Quote,
    SearchRequest,
    SearchResponse,
)
from avconnect.domain.market_data import (
    ConnectorMetadata,
    EarningsProvider,
    HistoryProvider,
    MarketDataConnector,
    QuoteProvider,
    SearchProvider,
)
from avconnect.domain.value_objects import AssetKind, Interval
from avconnect.security.mask import mask
from avconnect.settings import AlphaVantageSettings

from .auth import ApiKeyAuth, AuthStrategy, RapidApiAuth
from .client import AlphaVantageClient, AlphaVantageTransport
from .connector_registry import connector
from .error_classifier import ErrorClassifier
from .models import ClientConfig
from .pair_parser import parse_pair
from .request_translator import SeriesKind, translate
from .response_normalizer import (
    normalize_crypto_series,
    normalize_earnings,
    normalize_forex_series,
    normalize_quote,
    normalize_search,
    normalize_time_series,
)
from .vendor import (
    CONNECTOR_NAME,
    DEFAULT_BASE_URL,
    DEFAULT_CURRENCY,
    RAPIDAPI_HOST,
    REGISTRY_KEY,
    VENDOR_NAME,
)

SUPPORTED_INTERVALS: Tuple[Interval, ...] = (
    Interval.I1M,
    Interval.I5M,
    Interval.I15M,
    Interval.I30M,
    Interval.I1H,
    Interval.D1,
    Interval.W1,
    Interval.M1,
)

SUPPORTED_KINDS = frozenset({AssetKind.EQUITY, AssetKind.FOREX, AssetKind.CRYPTO})

# Digital currency series are always requested priced in this market
CRYPTO_MARKET = DEFAULT_CURRENCY


@connector(REGISTRY_KEY)
class AlphaVantageConnector(
    MarketDataConnector, QuoteProvider, HistoryProvider, SearchProvider, EarningsProvider
):
    """
    Anti-corruption layer for the Alpha Vantage API.

    Translates canonical requests into Alpha Vantage functions, hands them to
    the injected transport and maps the payloads (or failures) back into the
    canonical model. Holds no mutable state; one upstream exchange per call.

    API Documentation: https://www.alphavantage.co/documentation/
    """

    def __init__(
        self,
        transport: AlphaVantageTransport,
        classifier: Optional[ErrorClassifier] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._transport = transport
        self._classifier = classifier or ErrorClassifier(CONNECTOR_NAME)
        self.log = logger or logging.getLogger(self.__class__.__name__)

    # ---------- construction ----------
    @classmethod
    def _with_auth(
        cls,
        auth: AuthStrategy,
        base_url: str,
        timeout: float,
        http_client: Optional[httpx.AsyncClient],
    ) -> AlphaVantageConnector:
        config = ClientConfig(api_key=auth.secret, base_url=base_url, timeout=timeout)
        instance = cls(AlphaVantageClient(config, auth, http_client=http_client))
        instance.log.info(
            f"Alpha Vantage connector initialized ({type(auth).__name__}, "
            f"key {mask(auth.secret)}, base {config.base_url})"
        )
        return instance

    @classmethod
    def new_with_key(
        cls,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> AlphaVantageConnector:
        """Build a connector authenticating with a native Alpha Vantage key."""
        return cls._with_auth(ApiKeyAuth(api_key), base_url, timeout, http_client)

    @classmethod
    def new_with_rapidapi(
        cls,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        host: str = RAPIDAPI_HOST,
        timeout: float = 30.0,
    ) -> AlphaVantageConnector:
        """Build a connector that reaches Alpha Vantage through RapidAPI."""
        return cls._with_auth(RapidApiAuth(api_key, host), f"https://{host}", timeout, http_client)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[AlphaVantageSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> AlphaVantageConnector:
        """Build a connector from environment-backed settings.

        The native key is preferred when both keys are configured.
        """
        settings = settings or AlphaVantageSettings()
        if settings.uses_rapidapi:
            return cls.new_with_rapidapi(
                settings.rapidapi_key,
                http_client=http_client,
                host=settings.rapidapi_host,
                timeout=settings.timeout,
            )
        return cls.new_with_key(
            settings.api_key,
            http_client=http_client,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> AlphaVantageConnector:
        """
        Create connector from configuration dictionary.

        Args:
            config: Configuration dictionary with keys:
                - api_key: Alpha Vantage API key (or rapidapi_key)
                - rapidapi_key: RapidAPI key, used when api_key is absent
                - base_url: API base URL (optional)
                - rapidapi_host: RapidAPI host (optional)
                - timeout: Request timeout in seconds (optional, default: 30)
        """
        timeout = float(config.get("timeout", 30.0))
        if config.get("api_key"):
            return cls.new_with_key(
                config["api_key"],
                base_url=config.get("base_url", DEFAULT_BASE_URL),
                timeout=timeout,
            )
        if config.get("rapidapi_key"):
            return cls.new_with_rapidapi(
                config["rapidapi_key"],
                host=config.get("rapidapi_host", RAPIDAPI_HOST),
                timeout=timeout,
            )
        raise ValueError("Alpha Vantage config requires 'api_key' or 'rapidapi_key'")

    # ---------- identity ----------
    @property
    def name(self) -> str:
        return CONNECTOR_NAME

    @property
    def vendor(self) -> str:
        return VENDOR_NAME

    def supports_kind(self, kind: AssetKind) -> bool:
        return kind in SUPPORTED_KINDS

    def get_connector_metadata(self) -> ConnectorMetadata:
        return ConnectorMetadata(
            connector_name=CONNECTOR_NAME,
            vendor=VENDOR_NAME,
            supported_kinds=SUPPORTED_KINDS,
            supports_quotes=True,
            supports_history=True,
            supports_search=True,
            supports_earnings=True,
        )

    def supported_history_intervals(self, kind: AssetKind) -> Tuple[Interval, ...]:
        return SUPPORTED_INTERVALS

    # ---------- providers ----------
    @contextmanager
    def _classify_errors(self, what: str) -> Iterator[None]:
        try:
            yield
        except Exception as e:
            normalized = self._classifier.normalize(e, what)
            if normalized is e:
                raise
            raise normalized from e

    async def quote(self, instrument: Instrument) -> Quote:
        with self._classify_errors(f"quote for {instrument.symbol}"):
            payload = await self._transport.global_quote(instrument.symbol_str)
            return normalize_quote(payload, instrument.symbol_str)

    async def history(self, instrument: Instrument, request: HistoryRequest) -> HistoryResponse:
        """Fetch history for an equity, currency pair or crypto asset.

        Pair parsing and interval translation happen before any upstream call.
        """
        pair = parse_pair(instrument.symbol_str) if instrument.kind is AssetKind.FOREX else None
        upstream = translate(instrument.kind, request.interval, request.auto_adjust)
        self.log.debug(
            f"History {instrument.symbol} {request.interval.value} -> {upstream.function.value}"
        )

        with self._classify_errors(f"history for {instrument.symbol}"):
            if upstream.series is SeriesKind.FOREX and pair is not None:
                base, quote = pair
                fx = await self._transport.forex_series(base, quote, upstream)
                return normalize_forex_series(fx)
            if upstream.series is SeriesKind.CRYPTO:
                crypto = await self._transport.crypto_series(
                    instrument.symbol_str, CRYPTO_MARKET, upstream
                )
                return normalize_crypto_series(crypto)
            series = await self._transport.time_series(instrument.symbol_str, upstream)
            return normalize_time_series(series, include_actions=request.include_actions)

    async def search(self, request: SearchRequest) -> SearchResponse:
        with self._classify_errors("search"):
            payload = await self._transport.symbol_search(request.query)
            return normalize_search(payload, request)

    async def earnings(self, instrument: Instrument) -> Earnings:
        with self._classify_errors(f"earnings for {instrument.symbol}"):
            payload = await self._transport.earnings(instrument.symbol_str)
            return normalize_earnings(payload, instrument.symbol_str)


__all__ = ["AlphaVantageConnector", "SUPPORTED_INTERVALS", "SUPPORTED_KINDS", "CRYPTO_MARKET"]
