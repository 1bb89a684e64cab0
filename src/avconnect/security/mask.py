# SPDX-License-Identifier: Apache-2.0
"""Masking utilities for API keys."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

SECRET_PARAM_NAMES = frozenset({"apikey", "x-rapidapi-key"})


def mask(value: Optional[str], show: int = 4) -> str:
    """Mask a secret string, keeping only its last `show` characters.

    Examples:
        >>> mask("ABCD1234EFGH")
        '********EFGH'
        >>> mask("short")
        '***'
        >>> mask(None)
        '***'
    """
    if not value or len(value) <= show + 2:
        return "***"

    if show == 0:
        return "*" * len(value)

    return "*" * (len(value) - show) + value[-show:]


def safe_for_log(msg: str, *secrets: Optional[str]) -> str:
    """Replace every occurrence of each secret in `msg` with its masked form.

    Examples:
        >>> safe_for_log("GET /query?apikey=ABCD1234EFGH failed", "ABCD1234EFGH")
        'GET /query?apikey=********EFGH failed'
    """
    for secret in secrets:
        if secret:
            msg = msg.replace(secret, mask(secret))
    return msg


def mask_params(
    params: Mapping[str, Any], names: Iterable[str] = SECRET_PARAM_NAMES
) -> dict[str, Any]:
    """Return a copy of request params/headers with credential values masked."""
    lowered = {n.lower() for n in names}
    return {k: mask(str(v)) if k.lower() in lowered else v for k, v in params.items()}
