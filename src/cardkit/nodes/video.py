#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/video.py
"""Video card node."""

from __future__ import annotations

from typing import Any, Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.video import parse_video_node
from cardkit.renderers.video import render_video_node
from cardkit.utils.formatting import format_duration
from cardkit.utils.records import replace_data_url


class VideoNode(
    CardNode,
    node_type="video",
    properties=(
        PropertyDescriptor("src", "", url_type="url"),
        PropertyDescriptor("caption", "", url_type="html", word_count=True),
        PropertyDescriptor("fileName", ""),
        PropertyDescriptor("mimeType", ""),
        PropertyDescriptor("width", None),
        PropertyDescriptor("height", None),
        PropertyDescriptor("duration", 0),
        PropertyDescriptor("thumbnailSrc", "", url_type="url"),
        PropertyDescriptor("customThumbnailSrc", "", url_type="url"),
        PropertyDescriptor("thumbnailWidth", None),
        PropertyDescriptor("thumbnailHeight", None),
        PropertyDescriptor("cardWidth", "regular"),
        PropertyDescriptor("loop", False),
    ),
):
    """An uploaded video with thumbnail, duration and playback options."""

    src: str
    caption: str
    fileName: str
    mimeType: str
    width: Optional[int]
    height: Optional[int]
    duration: float
    thumbnailSrc: str
    customThumbnailSrc: str
    thumbnailWidth: Optional[int]
    thumbnailHeight: Optional[int]
    cardWidth: str
    loop: bool

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record["src"] = replace_data_url(self.src)
        return record

    @classmethod
    def import_dom(cls):
        return parse_video_node(cls)

    def export_dom(self, options):
        return render_video_node(self, options)

    @property
    def formatted_duration(self) -> str:
        """The duration as ``m:ss``."""
        return format_duration(self.duration or 0)
