# SPDX-License-Identifier: Apache-2.0
"""Registry of pluggable market data connectors."""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from avconnect.domain.market_data import MarketDataConnector

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "avconnect.connectors"

_REGISTRY: dict[str, type[MarketDataConnector]] = {}
_AUTO_REGISTERED = False


def _discover_entry_points() -> list[EntryPoint]:
    return list(entry_points(group=ENTRY_POINT_GROUP))


def _auto_register() -> None:
    """Load connectors advertised under the entry point group, once."""
    global _AUTO_REGISTERED
    if _AUTO_REGISTERED:
        return
    _AUTO_REGISTERED = True

    for ep in _discover_entry_points():
        if ep.name in _REGISTRY:
            continue
        try:
            _REGISTRY[ep.name] = ep.load()
            logger.info("Auto-registered connector '%s' from entry point", ep.name)
        except (ImportError, AttributeError) as e:
            logger.warning(f"Failed to load connector '{ep.name}' from entry point: {e}")


def register(name: str, cls: type[MarketDataConnector]) -> None:
    """
    Register a connector class under the given name.

    Args:
        name: Unique connector identifier (e.g. "alphavantage")
        cls: Class implementing MarketDataConnector

    Raises:
        ValueError: If ``cls`` does not implement MarketDataConnector
    """
    if not isinstance(cls, type) or not issubclass(cls, MarketDataConnector):
        raise ValueError(f"Connector class {cls} must implement MarketDataConnector")

    _REGISTRY[name] = cls
    logger.debug(f"Registered connector '{name}': {cls}")


def get(name: str) -> type[MarketDataConnector]:
    """
    Get a connector class by name.

    Raises:
        KeyError: If no connector is registered under ``name``
    """
    _auto_register()

    if name not in _REGISTRY:
        available = sorted(_REGISTRY)
        raise KeyError(f"Connector '{name}' not found. Available connectors: {available}")

    return _REGISTRY[name]


def list_connectors() -> list[str]:
    _auto_register()
    return list(_REGISTRY.keys())


def is_registered(name: str) -> bool:
    _auto_register()
    return name in _REGISTRY


def clear_registry() -> None:
    """Clear the registry and allow entry points to be discovered again (mainly for tests)."""
    global _AUTO_REGISTERED
    _REGISTRY.clear()
    _AUTO_REGISTERED = False


def connector(name: str):
    """
    Decorator to register a connector class.

    Usage:
        @connector("myvendor")
        class MyVendorConnector(MarketDataConnector):
            ...
    """

    def decorator(cls: type[MarketDataConnector]) -> type[MarketDataConnector]:
        register(name, cls)
        return cls

    return decorator


__all__ = [
    "ENTRY_POINT_GROUP",
    "register",
    "get",
    "list_connectors",
    "is_registered",
    "clear_registry",
    "connector",
]
