# SPDX-License-Identifier: Apache-2.0
"""avconnect: Alpha Vantage connector for the canonical market data model."""

from .infrastructure.connector import AlphaVantageConnector
from .infrastructure.vendor import CONNECTOR_NAME, VENDOR_NAME

__version__ = "0.1.0"

__all__ = [
    "AlphaVantageConnector",
    "CONNECTOR_NAME",
    "VENDOR_NAME",
    "__version__",
]
