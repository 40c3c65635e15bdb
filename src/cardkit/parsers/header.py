#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/header.py
"""Import rules for header cards of both versions."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import has_class, text_content


def _read_text(element: Optional[Tag]) -> str:
    return text_content(element) if element is not None else ""


def _read_button(element: Optional[Tag]) -> dict[str, Any]:
    if element is None:
        return {"buttonEnabled": False, "buttonUrl": "", "buttonText": ""}
    return {"buttonEnabled": True, "buttonUrl": element.get("href"), "buttonText": text_content(element)}


def convert_header_v1(node_class: Any, dom_node: Tag) -> ConversionResult:
    payload = {
        "size": "large" if has_class(dom_node, "kg-size-large") else "small",
        "style": "image" if has_class(dom_node, "kg-style-image") else "text",
        "backgroundImageSrc": dom_node.get("data-kg-background-image"),
        "header": _read_text(dom_node.select_one(".kg-header-card-header")),
        "subheader": _read_text(dom_node.select_one(".kg-header-card-subheader")),
        **_read_button(dom_node.select_one(".kg-header-card-button")),
        "version": 1,
    }
    return ConversionResult(node_class(payload))


def convert_header_v2(node_class: Any, dom_node: Tag) -> ConversionResult:
    header = dom_node.select_one(".kg-header-card-heading")
    button = dom_node.select_one(".kg-header-card-button")
    image = dom_node.select_one(".kg-header-card-image")
    background_image_src = image.get("src") if image is not None else None
    payload = {
        "backgroundColor": "accent" if has_class(dom_node, "kg-style-accent") else dom_node.get("data-background-color"),
        "buttonColor": (button.get("data-button-color") if button is not None else None) or "",
        "alignment": "center" if has_class(dom_node, "kg-align-center") else "",
        "backgroundImageSrc": background_image_src,
        "layout": "split" if background_image_src else "",
        "textColor": (header.get("data-text-color") if header is not None else None) or "",
        "header": _read_text(header),
        "subheader": _read_text(dom_node.select_one(".kg-header-card-subheading")),
        **_read_button(button),
        "buttonTextColor": (button.get("data-button-text-color") if button is not None else None) or "",
        "version": 2,
    }
    return ConversionResult(node_class(payload))


def parse_header_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-header-card``; ``kg-v2`` selects the version 2 reader."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-header-card"):
            return None
        if has_class(element, "kg-v2"):
            return DomConversion(lambda dom_node: convert_header_v2(node_class, dom_node), priority=1)
        return DomConversion(lambda dom_node: convert_header_v1(node_class, dom_node), priority=1)

    return {"div": div}
