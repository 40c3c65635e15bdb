#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/collection.py
"""Import rules for collection cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import get_int_attribute, has_class, text_content


def get_columns(element: Tag) -> Optional[int]:
    for columns in (1, 2, 3, 4):
        if has_class(element, f"columns-{columns}"):
            return columns
    return None


def parse_collection_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-collection-card``."""

    def conversion(dom_node: Tag) -> ConversionResult:
        layout = "list" if has_class(dom_node, "kg-collection-card-list") else "grid"
        title = dom_node.select_one(".kg-collection-card-title")
        payload = {
            "collection": dom_node.get("data-kg-collection-slug"),
            "postCount": get_int_attribute(dom_node, "data-kg-collection-limit"),
            "layout": layout,
            # list cards switched back to grid show three columns
            "columns": 3 if layout == "list" else get_columns(dom_node),
            "header": text_content(title) if title is not None else "",
        }
        return ConversionResult(node_class(payload))

    def div(element: Tag) -> Optional[DomConversion]:
        if has_class(element, "kg-collection-card"):
            return DomConversion(conversion, priority=1)
        return None

    return {"div": div}
