#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/signup.py
"""Import rules for signup form cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import get_style_property, has_class, text_content
from cardkit.utils.formatting import rgb_to_hex


def get_layout(element: Tag) -> str:
    for layout in ("split", "full", "wide"):
        if has_class(element, f"kg-layout-{layout}"):
            return layout
    return "regular"


def to_hex_color(value: str) -> Optional[str]:
    """Normalize an inline style colour to hex; hex values pass through."""
    if value.startswith("#"):
        return value
    return rgb_to_hex(value)


def _text(element: Optional[Tag]) -> str:
    return text_content(element) if element is not None else ""


def parse_signup_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div[data-lexical-signup-form]``."""

    def conversion(dom_node: Tag) -> ConversionResult:
        button = dom_node.select_one(".kg-signup-card-button")
        success = dom_node.select_one(".kg-signup-card-success")
        text = dom_node.select_one(".kg-signup-card-text")
        image = dom_node.select_one(".kg-signup-card-image")

        is_accent_background = has_class(dom_node, "kg-style-accent")
        is_accent_button = button is not None and has_class(button, "kg-style-accent")
        background_color = get_style_property(dom_node, "background-color")
        button_color = get_style_property(button, "background-color")

        payload = {
            "layout": get_layout(dom_node),
            "buttonText": _text(dom_node.select_one(".kg-signup-card-button-default")).strip() or "Subscribe",
            "header": _text(dom_node.find("h2")),
            "subheader": _text(dom_node.find("h3")),
            "disclaimer": _text(dom_node.find("p")),
            "backgroundImageSrc": image.get("src") if image is not None else None,
            "backgroundSize": "contain" if has_class(dom_node, "kg-content-wide") else "cover",
            "backgroundColor": "accent" if is_accent_background else to_hex_color(background_color) or "#ffffff",
            "buttonColor": "accent" if is_accent_button else to_hex_color(button_color) or "#ffffff",
            "textColor": to_hex_color(get_style_property(success, "color")) or "#ffffff",
            "buttonTextColor": to_hex_color(get_style_property(button, "color")) or "#000000",
            "alignment": "center" if text is not None and has_class(text, "kg-align-center") else "left",
            "successMessage": _text(success).strip(),
            "labels": [str(field.get("value") or "") for field in dom_node.select("input[data-members-label]")],
            "swapped": has_class(dom_node, "kg-swapped"),
        }
        return ConversionResult(node_class(payload))

    def div(element: Tag) -> Optional[DomConversion]:
        if element.get("data-lexical-signup-form") == "":
            return DomConversion(conversion, priority=1)
        return None

    return {"div": div}
