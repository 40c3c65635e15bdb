#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/gallery.py
"""Import rules for gallery cards.

Three source shapes normalize to the same ``{images, caption}`` payload:

- native ``figure.kg-gallery-card`` markup
- Medium "graf" galleries, split over consecutive ``div[data-paragraph-count]``
  siblings that are merged into one gallery
- Squarespace galleries, where each image appears twice and the real
  ``src`` must be recovered from ``data-src`` next to a ``<noscript>`` copy
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import read_caption_from_element, read_image_attributes_from_element
from cardkit.utils.dom import class_name, has_class, next_element_sibling

logger = logging.getLogger(__name__)

_FILE_NAME_RE = re.compile(r"[^/]*$")


def read_gallery_image_attributes_from_element(element: Tag, index: int) -> dict[str, Any]:
    """Read an image's attributes plus its file name and row (three images per row)."""
    image = read_image_attributes_from_element(element)
    image["fileName"] = _FILE_NAME_RE.search(element.get("src") or "").group(0)
    image["row"] = index // 3
    return image


def _read_images(imgs: list[Tag]) -> list[dict[str, Any]]:
    return [read_gallery_image_attributes_from_element(img, index) for index, img in enumerate(imgs)]


def is_graf_gallery(element: Any) -> bool:
    return (
        isinstance(element, Tag)
        and element.name == "div"
        and bool(element.get("data-paragraph-count"))
        and element.find("img") is not None
    )


def is_sqs_gallery(element: Tag) -> bool:
    classes = class_name(element)
    return element.name == "div" and "sqs-gallery-container" in classes and "summary-" not in classes


def _previous_element_sibling(element: Tag) -> Optional[Tag]:
    sibling = element.previous_sibling
    while sibling is not None and not isinstance(sibling, Tag):
        sibling = sibling.previous_sibling
    return sibling


def parse_gallery_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for native, Medium and Squarespace galleries."""

    def figure(element: Tag) -> Optional[DomConversion]:
        if not has_class(element, "kg-gallery-card"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            payload = {
                "images": _read_images(dom_node.find_all("img")),
                "caption": read_caption_from_element(dom_node),
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    def graf_conversion(dom_node: Tag) -> ConversionResult:
        caption = read_caption_from_element(dom_node)
        imgs = list(dom_node.find_all("img"))
        next_node = next_element_sibling(dom_node)
        while is_graf_gallery(next_node):
            current = next_node
            imgs.extend(current.find_all("img"))
            current_caption = read_caption_from_element(current)
            if current_caption:
                caption = f"{caption} / {current_caption}"
            next_node = next_element_sibling(current)
            # merged siblings are removed so they are not imported again
            current.extract()
        return ConversionResult(node_class({"caption": caption, "images": _read_images(imgs)}))

    def sqs_conversion(dom_node: Tag) -> ConversionResult:
        imgs = []
        for img in dom_node.select("img.thumb-image"):
            if not img.get("src"):
                previous = _previous_element_sibling(img)
                if previous is None or previous.name != "noscript" or previous.find("img") is None:
                    logger.debug("Skipping Squarespace gallery image without a source")
                    continue
                img["src"] = img.get("data-src")
                previous.extract()
            imgs.append(img)
        payload = {
            "images": _read_images(imgs),
            "caption": read_caption_from_element(dom_node, ".meta-title"),
        }
        return ConversionResult(node_class(payload))

    def div(element: Tag) -> Optional[DomConversion]:
        if is_graf_gallery(element):
            return DomConversion(graf_conversion, priority=1)
        if is_sqs_gallery(element):
            return DomConversion(sqs_conversion, priority=1)
        return None

    return {"figure": figure, "div": div}
