# SPDX-License-Identifier: Apache-2.0
"""HTTP transport for the Alpha Vantage ``/query`` endpoint."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, NoReturn, Optional, Protocol, TypeVar, runtime_checkable

import httpx

from avconnect.domain.market_data import ConnectorError, DataError
from avconnect.metrics import ERRORS, LATENCY, REQUESTS
from avconnect.security.mask import mask_params, safe_for_log

from .auth import AuthStrategy
from .models import ClientConfig
from .payloads import (
    CryptoPayload,
    EarningsPayload,
    ForexPayload,
    GlobalQuotePayload,
    SearchPayload,
    TimeSeriesPayload,
)
from .request_translator import UpstreamFunction, UpstreamRequest
from .vendor import CONNECTOR_NAME, QUERY_PATH

T = TypeVar("T")

# Keys Alpha Vantage uses to report failures inside a 200 response
ERROR_KEYS = ("Error Message", "Note", "Information")


@runtime_checkable
class AlphaVantageTransport(Protocol):
    """One upstream exchange per method, returning a typed payload.

    Implementations raise ``ConnectorError`` for upstream failures and
    ``DataError`` for bodies that cannot be interpreted.
    """

    async def time_series(self, symbol: str, request: UpstreamRequest) -> TimeSeriesPayload:
        ...

    async def forex_series(
        self, from_symbol: str, to_symbol: str, request: UpstreamRequest
    ) -> ForexPayload:
        ...

    async def crypto_series(
        self, symbol: str, market: str, request: UpstreamRequest
    ) -> CryptoPayload:
        ...

    async def global_quote(self, symbol: str) -> GlobalQuotePayload:
        ...

    async def symbol_search(self, keywords: str) -> SearchPayload:
        ...

    async def earnings(self, symbol: str) -> EarningsPayload:
        ...


class AlphaVantageClient:
    """httpx implementation of ``AlphaVantageTransport``.

    Every call is a single GET without retries or rate limiting. When no
    ``http_client`` is supplied a short-lived ``httpx.AsyncClient`` is opened
    per request.
    """

    def __init__(
        self,
        config: ClientConfig,
        auth: AuthStrategy,
        http_client: Optional[httpx.AsyncClient] = None,
        provider_name: str = CONNECTOR_NAME,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.auth = auth
        self.base_url = config.base_url.rstrip("/")
        self.provider_name = provider_name
        self._http_client = http_client
        self.log = logger or logging.getLogger(self.__class__.__name__)

    async def time_series(self, symbol: str, request: UpstreamRequest) -> TimeSeriesPayload:
        params = {**request.params(), "symbol": symbol}
        return await self._fetch(params, TimeSeriesPayload.from_response)

    async def forex_series(
        self, from_symbol: str, to_symbol: str, request: UpstreamRequest
    ) -> ForexPayload:
        params = {**request.params(), "from_symbol": from_symbol, "to_symbol": to_symbol}
        return await self._fetch(params, ForexPayload.from_response)

    async def crypto_series(
        self, symbol: str, market: str, request: UpstreamRequest
    ) -> CryptoPayload:
        params = {**request.params(), "symbol": symbol, "market": market}
        return await self._fetch(params, CryptoPayload.from_response)

    async def global_quote(self, symbol: str) -> GlobalQuotePayload:
        params = {"function": UpstreamFunction.GLOBAL_QUOTE.value, "symbol": symbol}
        return await self._fetch(params, GlobalQuotePayload.from_response)

    async def symbol_search(self, keywords: str) -> SearchPayload:
        params = {"function": UpstreamFunction.SYMBOL_SEARCH.value, "keywords": keywords}
        return await self._fetch(params, SearchPayload.from_response)

    async def earnings(self, symbol: str) -> EarningsPayload:
        params = {"function": UpstreamFunction.EARNINGS.value, "symbol": symbol}
        return await self._fetch(params, EarningsPayload.from_response)

    async def _fetch(self, params: dict[str, str], parse: Callable[[dict[str, Any]], T]) -> T:
        function = params.get("function", "unknown")
        data = await self._get(params)
        try:
            return parse(data)
        except DataError:
            ERRORS.labels(provider=self.provider_name, function=function, code="data").inc()
            raise

    async def _get(self, params: dict[str, str]) -> dict[str, Any]:
        """Perform the GET and return the decoded body.

        Raises:
            ConnectorError: On transport failure, HTTP error status, a body that
                is not a JSON object, or an in-band error message.
        """
        function = params.get("function", "unknown")
        url = f"{self.base_url}{QUERY_PATH}"
        headers = {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        query = dict(params)
        self.auth.apply(headers, query)

        self.log.debug(f"GET {url} params={mask_params(query)}")
        REQUESTS.labels(provider=self.provider_name, function=function).inc()

        start = time.perf_counter()
        try:
            response = await self._send(url, query, headers)
        except httpx.HTTPError as e:
            self._fail(function, "transport", f"{type(e).__name__}: {e}")
        finally:
            LATENCY.labels(provider=self.provider_name, function=function).observe(
                time.perf_counter() - start
            )

        if response.status_code >= 400:
            self._fail(
                function,
                str(response.status_code),
                f"HTTP {response.status_code}: {response.text[:200]}",
            )

        try:
            data = response.json()
        except ValueError:
            self._fail(function, "decode", "response body is not valid JSON")

        if not isinstance(data, dict):
            self._fail(function, "decode", f"unexpected response type {type(data).__name__}")

        for key in ERROR_KEYS:
            if key in data:
                self._fail(function, "api", str(data[key]))

        return data

    async def _send(self, url: str, params: dict[str, str], headers: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(
                url, params=params, headers=headers, timeout=self.config.timeout
            )
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.get(url, params=params, headers=headers)

    def _fail(self, function: str, code: str, message: str) -> NoReturn:
        ERRORS.labels(provider=self.provider_name, function=function, code=code).inc()
        message = safe_for_log(message, self.auth.secret)
        self.log.warning(f"Alpha Vantage {function} failed: {message}")
        raise ConnectorError(self.provider_name, message)


__all__ = ["AlphaVantageTransport", "AlphaVantageClient", "ERROR_KEYS"]
