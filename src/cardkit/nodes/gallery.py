#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/gallery.py
"""Gallery card node."""

from __future__ import annotations

from typing import Any

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.gallery import parse_gallery_node
from cardkit.renderers.gallery import render_gallery_node


class GalleryNode(
    CardNode,
    node_type="gallery",
    properties=(
        PropertyDescriptor("images", []),
        PropertyDescriptor("caption", "", word_count=True),
    ),
):
    """A grid of images laid out in rows of up to three.

    Each image is a mapping with ``src``, ``width``, ``height``,
    ``fileName`` and ``row``, and optionally ``alt``, ``title``, ``href``
    and ``caption``.
    """

    images: list[dict[str, Any]]
    caption: str

    @classmethod
    def url_transform_map(cls) -> dict[str, Any]:
        return {"caption": "html", "images": {"src": "url", "caption": "html"}}

    @classmethod
    def import_dom(cls):
        return parse_gallery_node(cls)

    def export_dom(self, options):
        return render_gallery_node(self, options)

    def has_edit_mode(self) -> bool:
        return False
