# SPDX-License-Identifier: Apache-2.0
"""Currency pair symbol parsing."""

from __future__ import annotations

from avconnect.domain.market_data import InvalidArgumentError

# Checked in order; the first delimiter present wins
PAIR_DELIMITERS = ("/", "-")


def parse_pair(symbol: str) -> tuple[str, str]:
    """Split a currency pair symbol such as ``EUR/USD`` or ``EUR-USD``.

    The symbol is split at the first occurrence of the first delimiter it
    contains. No other normalization is applied.

    Raises:
        InvalidArgumentError: If there is no delimiter, or either side is empty.
    """
    for delimiter in PAIR_DELIMITERS:
        if delimiter in symbol:
            base, quote = symbol.split(delimiter, 1)
            if not base or not quote:
                raise InvalidArgumentError(
                    f"Invalid forex pair format: '{symbol}' - empty base or quote currency"
                )
            return base, quote

    raise InvalidArgumentError(
        f"Forex pair for AlphaVantage must be in 'BASE/QUOTE' format, got: '{symbol}'"
    )
