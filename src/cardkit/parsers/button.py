#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/button.py
"""Import rules for button cards."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import class_name, has_class, text_content

_ALIGNMENT_RE = re.compile(r"kg-align-(left|center)")


def parse_button_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-button-card``."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-button-card"):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            button = dom_node.select_one(".kg-btn")
            if button is None:
                return None
            alignment = _ALIGNMENT_RE.search(class_name(dom_node))
            payload = {
                "buttonText": text_content(button),
                "alignment": alignment.group(1) if alignment else None,
                "buttonUrl": button.get("href"),
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"div": div}
