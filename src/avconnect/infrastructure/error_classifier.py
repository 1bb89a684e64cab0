# SPDX-License-Identifier: Apache-2.0
"""Narrowing of free-text upstream failures into the canonical error taxonomy."""

from __future__ import annotations

import logging

from avconnect.domain.market_data import (
    ConnectorError,
    MarketDataError,
    NotFoundError,
    OtherError,
)

from .vendor import CONNECTOR_NAME

# Lowercase phrases Alpha Vantage uses when a symbol or function has no data
NOT_FOUND_PHRASES: tuple[str, ...] = (
    "invalid api call",
    "no data",
    "not found",
    "unknown symbol",
    "no matches",
)


class ErrorClassifier:
    """Maps upstream failures onto ``NotFoundError`` or a connector failure.

    Alpha Vantage reports every failure as a sentence rather than a code, so
    the only signal available is the text itself.
    """

    def __init__(
        self,
        connector_name: str = CONNECTOR_NAME,
        phrases: tuple[str, ...] = NOT_FOUND_PHRASES,
    ):
        self.connector_name = connector_name
        self.phrases = tuple(p.lower() for p in phrases)
        self.log = logging.getLogger(self.__class__.__name__)

    def looks_like_not_found(self, message: str) -> bool:
        lowered = message.lower()
        return any(phrase in lowered for phrase in self.phrases)

    def normalize(self, error: BaseException, what: str) -> MarketDataError:
        """Return the canonical error to surface for ``error``.

        Args:
            error: The failure raised while serving a call.
            what: Description of the requested resource, used for NotFound.
        """
        if isinstance(error, ConnectorError):
            if self.looks_like_not_found(error.message):
                self.log.warning(f"Reclassified upstream failure as not found for {what}")
                return NotFoundError(what)
            return error

        if isinstance(error, MarketDataError) and not isinstance(error, OtherError):
            return error

        message = error.message if isinstance(error, OtherError) else str(error)
        if self.looks_like_not_found(message):
            self.log.warning(f"Reclassified upstream failure as not found for {what}")
            return NotFoundError(what)

        self.log.warning(f"Wrapping untyped failure for {what}: {message}")
        return ConnectorError(self.connector_name, message)


__all__ = ["NOT_FOUND_PHRASES", "ErrorClassifier"]
