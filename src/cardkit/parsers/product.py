#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/product.py
"""Import rules for product cards."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import read_caption_from_element
from cardkit.utils.dom import get_int_attribute, has_class, text_content

_WHITESPACE_RE = re.compile(r"\s+")


def get_button_text(element: Tag) -> str:
    """Return the button's text with whitespace collapsed."""
    return _WHITESPACE_RE.sub(" ", text_content(element)).strip()


def parse_product_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-product-card``.

    The card declines when it has no title, description, image or link.
    """

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-product-card"):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            title = read_caption_from_element(dom_node, ".kg-product-card-title")
            description = read_caption_from_element(dom_node, ".kg-product-card-description")
            payload: dict[str, Any] = {
                "productButtonEnabled": False,
                "productRatingEnabled": False,
                "productTitle": title,
                "productDescription": description,
            }

            img = dom_node.select_one(".kg-product-card-image")
            if img is not None and img.get("src"):
                payload["productImageSrc"] = img["src"]
                if img.get("width"):
                    payload["productImageWidth"] = get_int_attribute(img, "width")
                if img.get("height"):
                    payload["productImageHeight"] = get_int_attribute(img, "height")

            stars = len(dom_node.select(".kg-product-card-rating-active"))
            if stars:
                payload["productRatingEnabled"] = True
                payload["productStarRating"] = stars

            button = dom_node.find("a")
            if button is not None:
                button_url = button.get("href")
                button_text = get_button_text(button)
                if button_url and button_text:
                    payload["productButtonEnabled"] = True
                    payload["productButton"] = button_text
                    payload["productUrl"] = button_url

            if not title and not description and img is None and button is None:
                return None
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"div": div}
