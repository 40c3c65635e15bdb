#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/embed.py
"""Embed card node."""

from __future__ import annotations

from typing import Any

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.embed import parse_embed_node
from cardkit.renderers.embed import render_embed_node


class EmbedNode(
    CardNode,
    node_type="embed",
    properties=(
        PropertyDescriptor("url", "", url_type="url"),
        PropertyDescriptor("embedType", ""),
        PropertyDescriptor("html", ""),
        PropertyDescriptor("metadata", {}),
        PropertyDescriptor("caption", "", word_count=True),
    ),
):
    """Third-party content embedded through its oEmbed markup.

    ``metadata`` holds the oEmbed response, including ``tweet_data`` for
    tweets and ``thumbnail_url``/``thumbnail_width``/``thumbnail_height``
    for videos.
    """

    url: str
    embedType: str
    html: str
    metadata: dict[str, Any]
    caption: str

    @classmethod
    def import_dom(cls):
        return parse_embed_node(cls)

    def export_dom(self, options):
        return render_embed_node(self, options)

    def is_empty(self) -> bool:
        return not self.url and not self.html
