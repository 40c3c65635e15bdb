#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/html_card.py
"""HTML card node."""

from __future__ import annotations

from typing import Any

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.html_card import parse_html_node
from cardkit.renderers.html_card import render_html_node


class HtmlNode(
    CardNode,
    node_type="html",
    has_visibility=True,
    properties=(PropertyDescriptor("html", "", url_type="html", word_count=True),),
):
    """Raw HTML passed through to the output."""

    html: str
    visibility: dict[str, Any]

    @classmethod
    def import_dom(cls):
        return parse_html_node(cls)

    def export_dom(self, options):
        return render_html_node(self, options)

    def is_empty(self) -> bool:
        return not self.html
