# SPDX-License-Identifier: Apache-2.0
"""Provider settings for avconnect.

Pydantic BaseSettings classes that load vendor credentials from environment
variables (and an optional ``.env`` file) with type validation.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlphaVantageSettings(BaseSettings):
    """Alpha Vantage API settings.

    Alpha Vantage can be reached directly with a native API key or through
    RapidAPI with a RapidAPI key. At least one of the two is required; the
    native key wins when both are present.

    Environment Variables:
        ALPHAVANTAGE_API_KEY: Native API key from alphavantage.co
        ALPHAVANTAGE_RAPIDAPI_KEY: RapidAPI key subscribed to Alpha Vantage
        ALPHAVANTAGE_BASE_URL: Override for the native API base URL
        ALPHAVANTAGE_RAPIDAPI_HOST: Override for the RapidAPI host
        ALPHAVANTAGE_TIMEOUT: Request timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        None, alias="ALPHAVANTAGE_API_KEY", description="Alpha Vantage API key"
    )
    rapidapi_key: Optional[str] = Field(
        None, alias="ALPHAVANTAGE_RAPIDAPI_KEY", description="RapidAPI key for Alpha Vantage"
    )
    base_url: str = Field(
        default="https://www.alphavantage.co",
        alias="ALPHAVANTAGE_BASE_URL",
        description="Alpha Vantage API base URL",
    )
    rapidapi_host: str = Field(
        default="alpha-vantage.p.rapidapi.com",
        alias="ALPHAVANTAGE_RAPIDAPI_HOST",
        description="RapidAPI host serving Alpha Vantage",
    )
    timeout: float = Field(
        default=30.0, alias="ALPHAVANTAGE_TIMEOUT", description="Request timeout in seconds"
    )

    @model_validator(mode="after")
    def _require_a_key(self) -> AlphaVantageSettings:
        if not self.api_key and not self.rapidapi_key:
            raise ValueError(
                "Set ALPHAVANTAGE_API_KEY or ALPHAVANTAGE_RAPIDAPI_KEY to use Alpha Vantage"
            )
        return self

    @property
    def uses_rapidapi(self) -> bool:
        return not self.api_key and bool(self.rapidapi_key)
