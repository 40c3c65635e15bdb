#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/utils/formatting.py
"""Value formatting helpers for card templates.

File sizes, media durations, compact counts, colours and dates are shown in
card markup in fixed English formats.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from cardkit.utils.images import round_half_up

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
_COMPACT_UNITS = ((1_000_000_000_000, "T"), (1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K"))
_DIGITS_RE = re.compile(r"\d+")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def size_to_bytes(size: Optional[str]) -> int:
    """Convert a ``"<number> <unit>"`` size such as ``"2 MB"`` to bytes.

    Unknown units yield 0.
    """
    if not size:
        return 0
    parts = size.split(" ")
    try:
        number = float(parts[0])
    except ValueError:
        return 0
    unit = parts[1] if len(parts) > 1 else None
    if unit not in _SIZE_UNITS:
        return 0
    return round_half_up(number * math.pow(1024, _SIZE_UNITS.index(unit)))


def bytes_to_size(size_bytes: Optional[int | float | str]) -> str:
    """Convert a byte count to a rounded human-readable size such as ``"2 MB"``.

    Numeric strings are accepted; zero, empty and unparsable sizes give ``"0 Byte"``.
    """
    try:
        size_bytes = float(size_bytes) if size_bytes else 0
    except (TypeError, ValueError):
        size_bytes = 0
    if not size_bytes or size_bytes < 0:
        return "0 Byte"
    index = int(math.floor(math.log(size_bytes) / math.log(1024)))
    index = max(0, min(index, len(_SIZE_UNITS) - 1))
    return f"{round_half_up(size_bytes / math.pow(1024, index))} {_SIZE_UNITS[index]}"


def format_duration(duration: Optional[int | float] = 200) -> str:
    """Format seconds as ``m:ss``."""
    if duration is None:
        duration = 200
    minutes = int(math.floor(duration / 60))
    seconds = int(math.floor(duration - minutes * 60))
    return f"{minutes}:{seconds:02d}"


def format_compact_number(value: Optional[int | float]) -> str:
    """Format a count in compact English notation with at most one decimal (``1234`` -> ``"1.2K"``)."""
    if value is None:
        return "0"
    number = Decimal(str(value))
    sign = "-" if number < 0 else ""
    number = abs(number)
    for threshold, suffix in _COMPACT_UNITS:
        if number >= threshold:
            scaled = (number / threshold).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
            return f"{sign}{_strip_decimal(scaled)}{suffix}"
    return f"{sign}{_strip_decimal(number.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))}"


def _strip_decimal(value: Decimal) -> str:
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def rgb_to_hex(rgb: Optional[str]) -> Optional[str]:
    """Convert ``rgb(r, g, b)`` to ``#rrggbb``; ``"transparent"`` passes through, junk yields None."""
    if rgb == "transparent":
        return rgb
    if not rgb:
        return None
    components = _DIGITS_RE.findall(rgb)
    if len(components) < 3:
        return None
    red, green, blue = (int(component, 10) for component in components[:3])
    return f"#{red:02x}{green:02x}{blue:02x}"


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z``; None when unparsable."""
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_short_date(value: Optional[str]) -> str:
    """Format an ISO timestamp as ``5 Jan 2024``."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return ""
    return f"{parsed.day} {_MONTHS[parsed.month - 1]} {parsed.year}"


def format_medium_date(value: Optional[str]) -> str:
    """Format an ISO timestamp as ``Jan 5, 2024``."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return ""
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_simple_time(value: Optional[str]) -> str:
    """Format an ISO timestamp as ``2:05 PM``."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return ""
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return f"{hour}:{parsed.minute:02d} {meridiem}"


def js_divide(numerator: Optional[int | float], denominator: Optional[int | float]) -> float:
    """Divide with browser semantics: missing operands give NaN, zero denominators give infinity or NaN."""
    if numerator is None or denominator is None:
        return math.nan
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.inf if numerator > 0 else -math.inf
    return numerator / denominator


def js_round(value: Optional[int | float]) -> int | float:
    """Round half up, passing NaN and infinities through."""
    if value is None or math.isnan(value) or math.isinf(value):
        return math.nan if value is None else value
    return round_half_up(value)


def format_js_number(value: Any) -> str:
    """Format a number the way it appears when interpolated into markup.

    Integral floats drop their fraction, NaN and infinities use their
    browser spellings and None becomes ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
