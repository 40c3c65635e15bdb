#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/toggle.py
"""Toggle card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.toggle import parse_toggle_node
from cardkit.renderers.toggle import render_toggle_node


class ToggleNode(
    CardNode,
    node_type="toggle",
    properties=(
        PropertyDescriptor("heading", "", url_type="html", word_count=True),
        PropertyDescriptor("content", "", url_type="html", word_count=True),
    ),
):
    """A heading that expands to reveal its content."""

    heading: str
    content: str

    @classmethod
    def import_dom(cls):
        return parse_toggle_node(cls)

    def export_dom(self, options):
        return render_toggle_node(self, options)
