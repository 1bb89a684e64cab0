# SPDX-License-Identifier: Apache-2.0
"""Connector settings loaded from the environment."""

from .providers import AlphaVantageSettings

__all__ = ["AlphaVantageSettings"]
