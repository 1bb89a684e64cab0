# SPDX-License-Identifier: Apache-2.0
"""Fake collaborators for connector tests."""

from __future__ import annotations

from .transport import FakeAlphaVantageTransport, TransportCall

__all__ = ["FakeAlphaVantageTransport", "TransportCall"]
