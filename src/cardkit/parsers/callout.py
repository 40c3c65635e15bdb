#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/callout.py
"""Import rules for callout cards."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import class_name, has_class, inner_html

_COLOR_TAG_RE = re.compile(r"kg-callout-card-(\w+)")


def get_color_tag(element: Tag) -> Optional[str]:
    """Return the color from a ``kg-callout-card-<color>`` class."""
    match = _COLOR_TAG_RE.search(class_name(element))
    return match.group(1) if match else None


def parse_callout_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-callout-card``."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-callout-card"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            text_node = dom_node.select_one(".kg-callout-text")
            emoji_node = dom_node.select_one(".kg-callout-emoji")
            payload = {
                "calloutText": inner_html(text_node).strip() if text_node is not None else "",
                "calloutEmoji": inner_html(emoji_node).strip() if emoji_node is not None else "",
                "backgroundColor": get_color_tag(dom_node),
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"div": div}
