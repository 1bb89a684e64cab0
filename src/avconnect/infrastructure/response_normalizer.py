# SPDX-License-Identifier: Apache-2.0
"""Translation of Alpha Vantage payloads into canonical domain responses.

Each function takes one typed payload from ``payloads`` and returns the
domain entity callers see. Nothing here performs I/O.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from avconnect.domain.entities import (
    Candle,
    Dividend,
    Earnings,
    EarningsQuarter,
    EarningsQuarterEps,
    EarningsYear,
    HistoryMeta,
    HistoryResponse,
    Quote,
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from avconnect.domain.market_data import DataError, InvalidArgumentError, NotFoundError
from avconnect.domain.value_objects import (
    AssetKind,
    Exchange,
    Period,
    Symbol,
    YearPeriod,
    parse_period,
)
from avconnect.metrics import DROPPED_OBSERVATIONS

from .conversions import (
    coerce_volume,
    parse_timestamp,
    resolve_timezone,
    to_money,
    to_optional_money,
)
from .payloads import (
    CryptoPayload,
    EarningsPayload,
    ForexPayload,
    GlobalQuotePayload,
    SearchPayload,
    TimeSeriesPayload,
)

logger = logging.getLogger(__name__)

# Upstream security type (trimmed, upper-cased) -> canonical asset kind
SEARCH_TYPE_KINDS: dict[str, AssetKind] = {
    "ETF": AssetKind.FUND,
    "MUTUAL FUND": AssetKind.FUND,
    "FUND": AssetKind.FUND,
    "INDEX": AssetKind.INDEX,
    "CURRENCY": AssetKind.FOREX,
    "FOREX": AssetKind.FOREX,
    "CRYPTOCURRENCY": AssetKind.CRYPTO,
    "CRYPTO": AssetKind.CRYPTO,
    "DIGITAL CURRENCY": AssetKind.CRYPTO,
}


def _meta(tz: Optional[ZoneInfo]) -> HistoryMeta:
    return HistoryMeta(timezone=tz.key if tz is not None else None, utc_offset_seconds=None)


def _resolve_instants(
    raw_timestamps: Iterable[str], tz: Optional[ZoneInfo], series: str
) -> dict[str, datetime]:
    """Resolve each raw timestamp, dropping (and counting) those that do not resolve."""
    resolved: dict[str, datetime] = {}
    for raw in raw_timestamps:
        ts = parse_timestamp(raw, tz)
        if ts is None:
            DROPPED_OBSERVATIONS.labels(series=series).inc()
            logger.debug(f"Dropping {series} observation with unresolvable timestamp {raw!r}")
            continue
        resolved[raw] = ts
    return resolved


def normalize_time_series(
    payload: TimeSeriesPayload, include_actions: bool = True
) -> HistoryResponse:
    """Map a single-asset series onto candles and dividend actions.

    The close is the adjusted close when the series carries one. The response
    is flagged ``adjusted`` when any observation carried an adjusted close or
    a dividend field, including observations dropped for their timestamp.
    Dividends are attached only when ``include_actions`` is set.
    """
    tz = resolve_timezone(payload.timezone)
    instants = _resolve_instants(payload.series, tz, "equity")

    candles: list[Candle] = []
    actions: list[Dividend] = []
    for raw, bar in payload.series.items():
        ts = instants.get(raw)
        if ts is None:
            continue
        close = bar.adjusted_close if bar.adjusted_close is not None else bar.close
        candles.append(
            Candle(
                ts=ts,
                open=to_money(bar.open),
                high=to_money(bar.high),
                low=to_money(bar.low),
                close=to_money(close),
                volume=coerce_volume(bar.volume) if bar.volume is not None else None,
            )
        )
        if include_actions and bar.dividend_amount is not None and bar.dividend_amount > 0:
            actions.append(Dividend(ts=ts, amount=to_money(bar.dividend_amount)))

    adjusted = any(
        bar.adjusted_close is not None or bar.dividend_amount is not None
        for bar in payload.series.values()
    )
    candles.sort(key=lambda c: c.ts)
    actions.sort(key=lambda a: a.ts)
    return HistoryResponse(
        candles=tuple(candles), actions=tuple(actions), adjusted=adjusted, meta=_meta(tz)
    )


def normalize_forex_series(payload: ForexPayload) -> HistoryResponse:
    tz = resolve_timezone(payload.timezone)
    instants = _resolve_instants(payload.series, tz, "forex")

    candles = [
        Candle(
            ts=instants[raw],
            open=to_money(bar.open),
            high=to_money(bar.high),
            low=to_money(bar.low),
            close=to_money(bar.close),
        )
        for raw, bar in payload.series.items()
        if raw in instants
    ]
    candles.sort(key=lambda c: c.ts)
    return HistoryResponse(candles=tuple(candles), adjusted=False, meta=_meta(tz))


def normalize_crypto_series(payload: CryptoPayload) -> HistoryResponse:
    """Map a digital currency series; fractional volumes become integers."""
    tz = resolve_timezone(payload.timezone)
    instants = _resolve_instants(payload.series, tz, "crypto")

    candles = [
        Candle(
            ts=instants[raw],
            open=to_money(bar.open),
            high=to_money(bar.high),
            low=to_money(bar.low),
            close=to_money(bar.close),
            volume=coerce_volume(bar.volume) if bar.volume is not None else None,
        )
        for raw, bar in payload.series.items()
        if raw in instants
    ]
    candles.sort(key=lambda c: c.ts)
    return HistoryResponse(candles=tuple(candles), adjusted=False, meta=_meta(tz))


def _symbol(raw: str) -> Symbol:
    try:
        return Symbol(raw)
    except InvalidArgumentError as e:
        raise DataError(f"invalid symbol '{raw}': {e}") from e


def normalize_quote(payload: GlobalQuotePayload, requested: str) -> Quote:
    """Map a global quote.

    Raises:
        NotFoundError: If the upstream quote carries no symbol.
        DataError: If the upstream symbol is not a valid symbol.
    """
    if not payload.symbol:
        raise NotFoundError(f"quote for {requested}")
    return Quote(
        symbol=_symbol(payload.symbol),
        price=to_optional_money(payload.price),
        previous_close=to_optional_money(payload.previous_close),
    )


def classify_search_type(security_type: Optional[str]) -> AssetKind:
    """Infer the asset kind from an upstream security type; equity by default."""
    return SEARCH_TYPE_KINDS.get((security_type or "").strip().upper(), AssetKind.EQUITY)


def normalize_search(payload: SearchPayload, request: SearchRequest) -> SearchResponse:
    """Map search matches, filtering by kind before truncating to the limit."""
    results: list[SearchResult] = []
    for match in payload.best_matches:
        kind = classify_search_type(match.type)
        if request.kind is not None and kind is not request.kind:
            continue
        results.append(
            SearchResult(
                symbol=_symbol(match.symbol),
                kind=kind,
                name=match.name,
                exchange=Exchange.try_from_str(match.region),
            )
        )
    if request.limit is not None:
        results = results[: request.limit]
    return SearchResponse(results=tuple(results))


def _period_or_year_zero(raw: Optional[str]) -> Period:
    try:
        return parse_period(raw or "")
    except InvalidArgumentError:
        return YearPeriod(0)


def _fiscal_year(fiscal_date_ending: str) -> int:
    try:
        return int(fiscal_date_ending[:4])
    except ValueError:
        return 0


def normalize_earnings(payload: EarningsPayload, requested: Optional[str] = None) -> Earnings:
    """Map yearly and quarterly earnings.

    Raises:
        NotFoundError: If the body names no symbol and carries no rows, which
            is how Alpha Vantage answers an unknown symbol.
    """
    if not payload.symbol and not payload.annual_earnings and not payload.quarterly_earnings:
        raise NotFoundError(f"earnings for {requested}")

    yearly = tuple(
        EarningsYear(year=_fiscal_year(row.fiscal_date_ending)) for row in payload.annual_earnings
    )

    quarterly: list[EarningsQuarter] = []
    quarterly_eps: list[EarningsQuarterEps] = []
    for row in payload.quarterly_earnings:
        eps_period_source = row.reported_date if row.reported_date else row.fiscal_date_ending
        quarterly_eps.append(
            EarningsQuarterEps(
                period=_period_or_year_zero(eps_period_source),
                actual=to_optional_money(row.reported_eps),
                estimate=to_optional_money(row.estimated_eps),
            )
        )
        quarterly.append(EarningsQuarter(period=_period_or_year_zero(row.fiscal_date_ending)))

    return Earnings(yearly=yearly, quarterly=tuple(quarterly), quarterly_eps=tuple(quarterly_eps))


__all__ = [
    "SEARCH_TYPE_KINDS",
    "normalize_time_series",
    "normalize_forex_series",
    "normalize_crypto_series",
    "normalize_quote",
    "classify_search_type",
    "normalize_search",
    "normalize_earnings",
]
