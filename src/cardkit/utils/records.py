#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/utils/records.py
"""Helpers for persisted node records."""

from __future__ import annotations

from typing import Any

from cardkit.constants import BASE64_SENTINEL


def is_data_url(value: Any) -> bool:
    """Return whether ``value`` is an inline ``data:`` URL."""
    return isinstance(value, str) and value.startswith("data:")


def replace_data_url(value: Any) -> Any:
    """Replace an inline ``data:`` URL with the base64 sentinel; other values pass through."""
    return BASE64_SENTINEL if is_data_url(value) else value
