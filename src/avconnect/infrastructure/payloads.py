# SPDX-License-Identifier: Apache-2.0
"""Typed views over Alpha Vantage JSON bodies.

Alpha Vantage numbers its keys (``"1. open"``, ``"1a. open (USD)"``,
``"05. price"``), mixes camelCase with spaced names and sends numbers as
strings, sometimes as the literal ``"None"``. The models here normalize keys
to snake_case and let pydantic coerce the values; timestamps stay raw strings
so the normalizer can apply the series timezone.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from avconnect.domain.market_data import DataError

_NUMBER_PREFIX = re.compile(r"^\d+[a-z]?\.\s*")
_PAREN_SUFFIX = re.compile(r"\s*\([^)]*\)\s*$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_NULL_MARKERS = {"None", "none", "null", "-", ""}


def normalize_key(key: str) -> str:
    """Turn a vendor key into snake_case.

    >>> normalize_key("1a. open (USD)")
    'open'
    >>> normalize_key("08. previous close")
    'previous_close'
    >>> normalize_key("reportedEPS")
    'reported_eps'
    """
    key = _NUMBER_PREFIX.sub("", key.strip())
    key = _PAREN_SUFFIX.sub("", key)
    key = _CAMEL_BOUNDARY.sub("_", key)
    return re.sub(r"[\s\-]+", "_", key).lower()


class VendorModel(BaseModel):
    """Base for models built from vendor dictionaries."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            name = normalize_key(str(key))
            # "1a. open (USD)" and "1b. open (USD)" collapse to one name; first wins
            if name in normalized:
                continue
            if isinstance(value, str) and value.strip() in _NULL_MARKERS:
                value = None
            normalized[name] = value
        return normalized


# ---------- time series ----------
class EquityBar(VendorModel):
    open: float
    high: float
    low: float
    close: float
    adjusted_close: Optional[float] = None
    volume: Optional[float] = None
    dividend_amount: Optional[float] = None
    split_coefficient: Optional[float] = None


class ForexBar(VendorModel):
    open: float
    high: float
    low: float
    close: float


class CryptoBar(VendorModel):
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None
    market_cap: Optional[float] = None


def _find_timezone(meta: Any) -> Optional[str]:
    if not isinstance(meta, dict):
        return None
    for key, value in meta.items():
        if normalize_key(str(key)).endswith("time_zone") and isinstance(value, str):
            return value
    return None


def _find_series(data: dict[str, Any]) -> Optional[dict[str, Any]]:
    for key, value in data.items():
        if "time series" in str(key).lower() and isinstance(value, dict):
            return value
    return None


class _SeriesPayload(VendorModel):
    """Shared parsing for the three series shapes."""

    timezone: Optional[str] = None

    @classmethod
    def from_response(cls, data: dict[str, Any]):
        """Build the payload from a decoded JSON body.

        Raises:
            DataError: If no series is present or a value is not numeric.
        """
        series = _find_series(data)
        if series is None:
            raise DataError(f"no time series in Alpha Vantage response (keys: {sorted(data)})")
        try:
            return cls.model_validate(
                {"timezone": _find_timezone(data.get("Meta Data")), "series": series}
            )
        except ValidationError as e:
            raise DataError(f"malformed Alpha Vantage series: {e}") from e


class TimeSeriesPayload(_SeriesPayload):
    series: dict[str, EquityBar]


class ForexPayload(_SeriesPayload):
    series: dict[str, ForexBar]


class CryptoPayload(_SeriesPayload):
    series: dict[str, CryptoBar]


# ---------- quote ----------
class GlobalQuotePayload(VendorModel):
    # Alpha Vantage answers unknown symbols with an empty "Global Quote" object
    symbol: Optional[str] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    price: Optional[float] = None
    volume: Optional[float] = None
    latest_trading_day: Optional[str] = None
    previous_close: Optional[float] = None
    change: Optional[float] = None
    change_percent: Optional[str] = None

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> GlobalQuotePayload:
        quote = data.get("Global Quote") or {}
        try:
            return cls.model_validate(quote)
        except ValidationError as e:
            raise DataError(f"malformed Alpha Vantage quote: {e}") from e


# ---------- search ----------
class SearchMatch(VendorModel):
    symbol: str
    name: Optional[str] = None
    type: Optional[str] = None
    region: Optional[str] = None
    market_open: Optional[str] = None
    market_close: Optional[str] = None
    timezone: Optional[str] = None
    currency: Optional[str] = None
    match_score: Optional[float] = None


class SearchPayload(VendorModel):
    best_matches: list[SearchMatch] = []

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> SearchPayload:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DataError(f"malformed Alpha Vantage search response: {e}") from e


# ---------- earnings ----------
class AnnualEarning(VendorModel):
    fiscal_date_ending: str
    reported_eps: Optional[float] = None


class QuarterlyEarning(VendorModel):
    fiscal_date_ending: str
    reported_date: Optional[str] = None
    reported_eps: Optional[float] = None
    estimated_eps: Optional[float] = None
    surprise: Optional[float] = None
    surprise_percentage: Optional[float] = None


class EarningsPayload(VendorModel):
    symbol: Optional[str] = None
    annual_earnings: list[AnnualEarning] = []
    quarterly_earnings: list[QuarterlyEarning] = []

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> EarningsPayload:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DataError(f"malformed Alpha Vantage earnings response: {e}") from e


__all__ = [
    "normalize_key",
    "EquityBar",
    "ForexBar",
    "CryptoBar",
    "TimeSeriesPayload",
    "ForexPayload",
    "CryptoPayload",
    "GlobalQuotePayload",
    "SearchMatch",
    "SearchPayload",
    "AnnualEarning",
    "QuarterlyEarning",
    "EarningsPayload",
]
