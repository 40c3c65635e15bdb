#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/image.py
"""Image card node."""

from __future__ import annotations

from typing import Any, Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.image import parse_image_node
from cardkit.renderers.image import render_image_node
from cardkit.utils.records import replace_data_url


class ImageNode(
    CardNode,
    node_type="image",
    properties=(
        PropertyDescriptor("src", "", url_type="url"),
        PropertyDescriptor("caption", "", url_type="html", word_count=True),
        PropertyDescriptor("title", ""),
        PropertyDescriptor("alt", ""),
        PropertyDescriptor("cardWidth", "regular"),
        PropertyDescriptor("width", None),
        PropertyDescriptor("height", None),
        PropertyDescriptor("href", "", url_type="url"),
        PropertyDescriptor("floatDirection", "none"),
    ),
):
    """A single image with optional caption, link and layout width."""

    src: str
    caption: str
    title: str
    alt: str
    cardWidth: str
    width: Optional[int]
    height: Optional[int]
    href: str
    floatDirection: str

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record["src"] = replace_data_url(self.src)
        return record

    @classmethod
    def import_dom(cls):
        return parse_image_node(cls)

    def export_dom(self, options):
        return render_image_node(self, options)

    def has_edit_mode(self) -> bool:
        return False
