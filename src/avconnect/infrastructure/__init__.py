# SPDX-License-Identifier: Apache-2.0
"""Alpha Vantage infrastructure: translation, transport and the connector itself."""

from .client import AlphaVantageClient, AlphaVantageTransport
from .connector import AlphaVantageConnector
from .error_classifier import NOT_FOUND_PHRASES, ErrorClassifier
from .pair_parser import parse_pair
from .request_translator import SeriesKind, UpstreamFunction, UpstreamRequest, translate
from .vendor import CONNECTOR_NAME, VENDOR_NAME

__all__ = [
    "AlphaVantageClient",
    "AlphaVantageConnector",
    "AlphaVantageTransport",
    "CONNECTOR_NAME",
    "ErrorClassifier",
    "NOT_FOUND_PHRASES",
    "SeriesKind",
    "UpstreamFunction",
    "UpstreamRequest",
    "VENDOR_NAME",
    "parse_pair",
    "translate",
]
