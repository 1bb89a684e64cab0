# SPDX-License-Identifier: Apache-2.0
"""Alpha Vantage identity and endpoint constants."""

from __future__ import annotations

CONNECTOR_NAME = "avconnect-alphavantage"
VENDOR_NAME = "Alpha Vantage"
REGISTRY_KEY = "alphavantage"

DEFAULT_BASE_URL = "https://www.alphavantage.co"
RAPIDAPI_HOST = "alpha-vantage.p.rapidapi.com"
QUERY_PATH = "/query"

# Quote currency for every price Alpha Vantage returns
DEFAULT_CURRENCY = "USD"

USER_AGENT = "avconnect/0.1 (Alpha Vantage connector)"

__all__ = [
    "CONNECTOR_NAME",
    "VENDOR_NAME",
    "REGISTRY_KEY",
    "DEFAULT_BASE_URL",
    "RAPIDAPI_HOST",
    "QUERY_PATH",
    "DEFAULT_CURRENCY",
    "USER_AGENT",
]
