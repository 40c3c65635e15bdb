#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/file.py
"""Import rules for file cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import has_class, text_content
from cardkit.utils.formatting import size_to_bytes


def parse_file_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-file-card``; the human-readable size is converted back to bytes."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-file-card"):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            link = dom_node.find("a")
            if link is None:
                return None

            def read(selector: str) -> str:
                found = dom_node.select_one(selector)
                return text_content(found) if found is not None else ""

            payload = {
                "src": link.get("href"),
                "fileTitle": read(".kg-file-card-title"),
                "fileCaption": read(".kg-file-card-caption"),
                "fileName": read(".kg-file-card-filename"),
                "fileSize": size_to_bytes(read(".kg-file-card-filesize")),
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"div": div}
