from __future__ import annotations

# SPDX-License-Identifier: Apache-2.0
import abc

from .vendor import RAPIDAPI_HOST


class AuthStrategy(abc.ABC):
    """Base class for authentication strategies."""

    @abc.abstractmethod
    def apply(self, headers: dict[str, str], params: dict[str, str]) -> None:
        """Add auth information to request headers or params."""
        ...

    @property
    @abc.abstractmethod
    def secret(self) -> str:
        """The credential, so callers can scrub it from messages."""
        ...


class ApiKeyAuth(AuthStrategy):
    """Native Alpha Vantage key passed as the ``apikey`` query parameter."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def apply(self, headers: dict[str, str], params: dict[str, str]) -> None:
        params["apikey"] = self.api_key

    @property
    def secret(self) -> str:
        return self.api_key


class RapidApiAuth(AuthStrategy):
    """RapidAPI key sent in headers alongside the RapidAPI host."""

    def __init__(self, api_key: str, host: str = RAPIDAPI_HOST) -> None:
        self.api_key = api_key
        self.host = host

    def apply(self, headers: dict[str, str], params: dict[str, str]) -> None:
        headers["X-RapidAPI-Key"] = self.api_key
        headers["X-RapidAPI-Host"] = self.host

    @property
    def secret(self) -> str:
        return self.api_key


__all__ = ["AuthStrategy", "ApiKeyAuth", "RapidApiAuth"]
