# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from pydantic import BaseModel, Field

from .vendor import DEFAULT_BASE_URL, USER_AGENT


class ClientConfig(BaseModel):
    """Configuration for the Alpha Vantage HTTP client."""

    api_key: str = Field(..., min_length=1, description="Alpha Vantage or RapidAPI key")
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = USER_AGENT


__all__ = ["ClientConfig"]
