#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/audio.py
"""Import rules for audio cards."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import parse_duration
from cardkit.utils.dom import has_class, inner_html


def parse_audio_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for ``div.kg-audio-card``."""

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not has_class(element, "kg-audio-card"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            title_node = dom_node.select_one(".kg-audio-title")
            audio = dom_node.select_one(".kg-audio-player-container audio")
            duration_node = dom_node.select_one(".kg-audio-duration")
            thumbnail = dom_node.select_one(".kg-audio-thumbnail")

            payload: dict[str, Any] = {
                "src": audio.get("src") if audio is not None else None,
                "title": inner_html(title_node).strip() if title_node is not None else None,
            }
            if thumbnail is not None and thumbnail.get("src"):
                payload["thumbnailSrc"] = thumbnail["src"]
            if duration_node is not None:
                duration = parse_duration(inner_html(duration_node))
                if duration is not None:
                    payload["duration"] = duration
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"div": div}
