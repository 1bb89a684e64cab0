# SPDX-License-Identifier: Apache-2.0
"""Helpers for keeping credentials out of logs and error messages."""

from .mask import mask, mask_params, safe_for_log

__all__ = ["mask", "mask_params", "safe_for_log"]
