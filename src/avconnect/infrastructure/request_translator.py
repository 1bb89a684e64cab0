# SPDX-License-Identifier: Apache-2.0
"""Maps canonical history requests onto Alpha Vantage functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from avconnect.domain.market_data import UnsupportedError
from avconnect.domain.value_objects import AssetKind, Interval


class UpstreamFunction(str, Enum):
    """Values of the ``function`` query parameter."""

    TIME_SERIES_INTRADAY = "TIME_SERIES_INTRADAY"
    TIME_SERIES_DAILY = "TIME_SERIES_DAILY"
    TIME_SERIES_DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    TIME_SERIES_WEEKLY = "TIME_SERIES_WEEKLY"
    TIME_SERIES_WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    TIME_SERIES_MONTHLY = "TIME_SERIES_MONTHLY"
    TIME_SERIES_MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"
    FX_INTRADAY = "FX_INTRADAY"
    FX_DAILY = "FX_DAILY"
    FX_WEEKLY = "FX_WEEKLY"
    FX_MONTHLY = "FX_MONTHLY"
    DIGITAL_CURRENCY_DAILY = "DIGITAL_CURRENCY_DAILY"
    DIGITAL_CURRENCY_WEEKLY = "DIGITAL_CURRENCY_WEEKLY"
    DIGITAL_CURRENCY_MONTHLY = "DIGITAL_CURRENCY_MONTHLY"
    GLOBAL_QUOTE = "GLOBAL_QUOTE"
    SYMBOL_SEARCH = "SYMBOL_SEARCH"
    EARNINGS = "EARNINGS"


class SeriesKind(str, Enum):
    """The three upstream series shapes."""

    EQUITY = "equity"
    FOREX = "forex"
    CRYPTO = "crypto"


@dataclass(frozen=True)
class UpstreamRequest:
    """The upstream function plus the parameters that depend on the request."""

    series: SeriesKind
    function: UpstreamFunction
    interval: Optional[str] = None
    adjusted: Optional[bool] = None
    output_size: Optional[str] = None

    def params(self) -> dict[str, str]:
        """Query parameters contributed by this request (symbol and auth excluded)."""
        params = {"function": self.function.value}
        if self.interval is not None:
            params["interval"] = self.interval
        if self.adjusted is not None:
            params["adjusted"] = "true" if self.adjusted else "false"
        if self.output_size is not None:
            params["outputsize"] = self.output_size
        return params


FULL_OUTPUT = "full"

# Intraday minute granularity -> upstream interval code
INTRADAY_INTERVALS: dict[int, str] = {
    1: "1min",
    5: "5min",
    15: "15min",
    30: "30min",
    60: "60min",
}

# Interval -> (raw function, adjusted function)
_EQUITY_FUNCTIONS = {
    Interval.D1: (UpstreamFunction.TIME_SERIES_DAILY, UpstreamFunction.TIME_SERIES_DAILY_ADJUSTED),
    Interval.W1: (UpstreamFunction.TIME_SERIES_WEEKLY, UpstreamFunction.TIME_SERIES_WEEKLY_ADJUSTED),
    Interval.M1: (
        UpstreamFunction.TIME_SERIES_MONTHLY,
        UpstreamFunction.TIME_SERIES_MONTHLY_ADJUSTED,
    ),
}

_FOREX_FUNCTIONS = {
    Interval.D1: UpstreamFunction.FX_DAILY,
    Interval.W1: UpstreamFunction.FX_WEEKLY,
    Interval.M1: UpstreamFunction.FX_MONTHLY,
}

# Anything not listed falls back to the daily function
_CRYPTO_FUNCTIONS = {
    Interval.W1: UpstreamFunction.DIGITAL_CURRENCY_WEEKLY,
    Interval.M1: UpstreamFunction.DIGITAL_CURRENCY_MONTHLY,
    Interval.M3: UpstreamFunction.DIGITAL_CURRENCY_MONTHLY,
}


def series_kind_for(kind: AssetKind) -> SeriesKind:
    """Pick the upstream series shape for an asset kind.

    Everything that is neither a currency pair nor a crypto asset is served by
    the single-asset (equity) endpoints.
    """
    if kind is AssetKind.FOREX:
        return SeriesKind.FOREX
    if kind is AssetKind.CRYPTO:
        return SeriesKind.CRYPTO
    return SeriesKind.EQUITY


def _intraday_code(interval: Interval) -> str:
    code = INTRADAY_INTERVALS.get(interval.minutes or 0)
    if code is None:
        raise UnsupportedError("intraday interval for Alpha Vantage")
    return code


def translate(kind: AssetKind, interval: Interval, adjust: bool) -> UpstreamRequest:
    """Select the upstream function and parameters for a history request.

    Raises:
        UnsupportedError: If Alpha Vantage has no function for the combination.
    """
    series = series_kind_for(kind)

    if series is SeriesKind.CRYPTO:
        function = _CRYPTO_FUNCTIONS.get(interval, UpstreamFunction.DIGITAL_CURRENCY_DAILY)
        return UpstreamRequest(series, function)

    if series is SeriesKind.FOREX:
        if interval.is_intraday:
            return UpstreamRequest(
                series,
                UpstreamFunction.FX_INTRADAY,
                interval=_intraday_code(interval),
                output_size=FULL_OUTPUT,
            )
        fx_function = _FOREX_FUNCTIONS.get(interval)
        if fx_function is None:
            raise UnsupportedError("interval for Alpha Vantage")
        return UpstreamRequest(series, fx_function, output_size=FULL_OUTPUT)

    if interval.is_intraday:
        return UpstreamRequest(
            series,
            UpstreamFunction.TIME_SERIES_INTRADAY,
            interval=_intraday_code(interval),
            adjusted=adjust,
            output_size=FULL_OUTPUT,
        )
    functions = _EQUITY_FUNCTIONS.get(interval)
    if functions is None:
        raise UnsupportedError("interval for Alpha Vantage")
    raw, adjusted = functions
    return UpstreamRequest(series, adjusted if adjust else raw, output_size=FULL_OUTPUT)
