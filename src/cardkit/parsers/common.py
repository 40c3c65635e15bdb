#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/common.py
"""Element readers shared by several card parsers."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.utils.dom import get_int_attribute, inner_html
from cardkit.utils.html import clean_basic_html

_DIMENSIONS_RE = re.compile(r"^(\d*)x(\d*)$", re.IGNORECASE)


def read_caption_from_element(element: Tag, selector: str = "figcaption") -> Optional[str]:
    """Return the cleaned inner HTML of every ``selector`` match, joined with ``" / "``.

    Returns None when nothing matches.
    """
    caption: Optional[str] = None
    for figcaption in element.select(selector):
        clean_html = clean_basic_html(inner_html(figcaption)) or ""
        caption = f"{caption} / {clean_html}" if caption else clean_html
    return caption


def _parse_int(value: Any) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def read_image_attributes_from_element(element: Tag) -> dict[str, Any]:
    """Read ``src``, dimensions, ``alt``, ``title`` and a wrapping link from an image element.

    Dimensions fall back from ``width``/``height`` to ``data-width``/
    ``data-height`` and then to a ``data-image-dimensions="WxH"`` attribute.
    """
    attrs: dict[str, Any] = {}
    if element.get("src"):
        attrs["src"] = element["src"]

    width = get_int_attribute(element, "width")
    height = get_int_attribute(element, "height")
    if width:
        attrs["width"] = width
    elif element.get("data-width"):
        attrs["width"] = _parse_int(element["data-width"])
    if height:
        attrs["height"] = height
    elif element.get("data-height"):
        attrs["height"] = _parse_int(element["data-height"])

    dimensions = element.get("data-image-dimensions")
    if not width and not height and dimensions:
        match = _DIMENSIONS_RE.match(str(dimensions))
        if match:
            attrs["width"] = _parse_int(match.group(1))
            attrs["height"] = _parse_int(match.group(2))

    if element.get("alt"):
        attrs["alt"] = element["alt"]
    if element.get("title"):
        attrs["title"] = element["title"]

    parent = element.parent
    if isinstance(parent, Tag) and parent.name == "a":
        href = parent.get("href")
        if href != attrs.get("src"):
            attrs["href"] = href
    return attrs


def parse_duration(text: Optional[str]) -> Optional[int]:
    """Parse ``m:ss`` (or bare minutes) into seconds; None when the text is not a duration."""
    if not text:
        return None
    minutes, _, seconds = text.strip().partition(":")
    try:
        return int(minutes) * 60 + int(seconds or 0)
    except ValueError:
        return None
