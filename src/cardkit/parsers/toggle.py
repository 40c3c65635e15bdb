#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/toggle.py
"""Import rules for toggle cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import has_class, text_content


def parse_toggle_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-toggle-card``; heading and content are read as text."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-toggle-card"):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            heading = dom_node.select_one(".kg-toggle-heading-text")
            content = dom_node.select_one(".kg-toggle-content")
            if heading is None or content is None:
                return None
            return ConversionResult(node_class({"heading": text_content(heading), "content": text_content(content)}))

        return DomConversion(conversion, priority=1)

    return {"div": div}
