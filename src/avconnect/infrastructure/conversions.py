# SPDX-License-Identifier: Apache-2.0
"""Scalar conversions from Alpha Vantage values into canonical ones."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from avconnect.domain.market_data import DataError
from avconnect.domain.value_objects import Money

from .vendor import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)

MAX_VOLUME = 2**64 - 1

TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def float_text(value: float) -> str:
    """Render a finite float in plain notation without a trailing ``.0``."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_money(value: float, currency: str = DEFAULT_CURRENCY) -> Money:
    """Convert a vendor float into exact decimal money via its text form.

    The text is the shortest round-trip form in plain notation: ``101.1``
    becomes ``Decimal("101.1")``, ``123.0`` becomes ``Decimal("123")`` and
    ``1e16`` becomes ``Decimal("10000000000000000")``.

    Raises:
        DataError: If the value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise DataError(f"non-finite price: {value}")
    return Money(Decimal(float_text(value)), currency)


def to_optional_money(value: Optional[float], currency: str = DEFAULT_CURRENCY) -> Optional[Money]:
    return None if value is None else to_money(value, currency)


def resolve_timezone(name: Optional[str]) -> Optional[ZoneInfo]:
    """Look up an IANA zone by name, returning None when it does not resolve."""
    if not name:
        return None
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug(f"Unknown series timezone {name!r}, falling back to UTC")
        return None


def parse_timestamp(raw: str, tz: Optional[ZoneInfo] = None) -> Optional[datetime]:
    """Parse a vendor timestamp into an aware UTC datetime.

    Date-only values mean midnight. With a zone the value is read as local
    wall time there; wall times that fall in a DST gap or overlap have no
    single instant and yield None, as does text in neither format.
    """
    naive = None
    for fmt in TIMESTAMP_FORMATS:
        try:
            naive = datetime.strptime(raw.strip(), fmt)
            break
        except ValueError:
            continue
    if naive is None:
        return None

    if tz is None:
        return naive.replace(tzinfo=timezone.utc)

    earlier = naive.replace(tzinfo=tz, fold=0)
    later = naive.replace(tzinfo=tz, fold=1)
    if earlier.utcoffset() != later.utcoffset():
        return None
    return earlier.astimezone(timezone.utc)


def coerce_volume(value: float) -> int:
    """Turn a fractional vendor volume into a non-negative integer.

    Non-finite values saturate to ``MAX_VOLUME``, non-positive values become
    zero and everything else is rounded half away from zero, capped at
    ``MAX_VOLUME``.
    """
    if not math.isfinite(value):
        return MAX_VOLUME
    if value <= 0:
        return 0
    if value >= MAX_VOLUME:
        return MAX_VOLUME
    rounded = int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return min(rounded, MAX_VOLUME)
