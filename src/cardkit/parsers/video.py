#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/video.py
"""Import rules for video cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import parse_duration, read_caption_from_element
from cardkit.utils.dom import get_int_attribute, has_class, inner_html


def get_card_width(element: Tag) -> str:
    """Return the card width encoded in an element's ``kg-width-*`` class."""
    if has_class(element, "kg-width-full"):
        return "full"
    if has_class(element, "kg-width-wide"):
        return "wide"
    return "regular"

def parse_video_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``figure.kg-video-card``."""

    def figure(element: Tag) -> Optional[DomConversion]:
        if element.name != "figure" or not has_class(element, "kg-video-card"):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            video = dom_node.select_one(".kg-video-container video")
            if video is None or not video.get("src"):
                return None
            payload: dict[str, Any] = {
                "src": video["src"],
                "loop": video.has_attr("loop"),
                "cardWidth": get_card_width(video),
            }
            duration_node = dom_node.select_one(".kg-video-duration")
            duration = parse_duration(inner_html(duration_node).strip()) if duration_node is not None else None
            if duration is not None:
                payload["duration"] = duration
            if dom_node.get("data-kg-thumbnail"):
                payload["thumbnailSrc"] = dom_node["data-kg-thumbnail"]
            if dom_node.get("data-kg-custom-thumbnail"):
                payload["customThumbnailSrc"] = dom_node["data-kg-custom-thumbnail"]
            caption = read_caption_from_element(dom_node)
            if caption:
                payload["caption"] = caption
            width = get_int_attribute(video, "width")
            height = get_int_attribute(video, "height")
            if width:
                payload["width"] = width
            if height:
                payload["height"] = height
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"figure": figure}
