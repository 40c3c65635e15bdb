#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/image.py
"""Import rules for image cards."""

from __future__ import annotations

import re
from typing import Any

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import read_caption_from_element, read_image_attributes_from_element
from cardkit.utils.dom import class_name

_KG_WIDTH_RE = re.compile(r"kg-width-(wide|full)")
_GRAF_LAYOUT_RE = re.compile(r"graf--layout(FillWidth|OutsetCenter)")


def parse_image_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for bare ``<img>`` and ``<figure>`` with an image.

    The figure rule runs at priority 0 so that more specific figure cards
    (galleries, code blocks, embeds) claim their figures first.
    """

    def img(element: Tag) -> DomConversion:
        def conversion(dom_node: Tag) -> ConversionResult | None:
            if dom_node.name != "img":
                return None
            attrs = read_image_attributes_from_element(dom_node)
            return ConversionResult(node_class(_payload(attrs)))

        return DomConversion(conversion, priority=1)

    def figure(element: Tag) -> DomConversion | None:
        img_element = element.find("img")
        if img_element is None:
            return None

        def conversion(dom_node: Tag) -> ConversionResult | None:
            payload = read_image_attributes_from_element(img_element)
            classes = class_name(dom_node)
            kg_class = _KG_WIDTH_RE.search(classes)
            graf_class = _GRAF_LAYOUT_RE.search(classes)
            if kg_class:
                payload["cardWidth"] = kg_class.group(1)
            elif graf_class:
                payload["cardWidth"] = "full" if graf_class.group(1) == "FillWidth" else "wide"
            payload["caption"] = read_caption_from_element(dom_node)
            return ConversionResult(node_class(_payload(payload)))

        return DomConversion(conversion, priority=0)

    return {"img": img, "figure": figure}


def _payload(attrs: dict[str, Any]) -> dict[str, Any]:
    keys = ("alt", "src", "title", "width", "height", "caption", "cardWidth", "href")
    return {key: attrs.get(key) for key in keys}
