#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/button.py
"""Button card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.button import parse_button_node
from cardkit.renderers.button import render_button_node


class ButtonNode(
    CardNode,
    node_type="button",
    properties=(
        PropertyDescriptor("buttonText", ""),
        PropertyDescriptor("alignment", "center"),
        PropertyDescriptor("buttonUrl", "", url_type="url"),
    ),
):
    """A single link styled as a button."""

    buttonText: str
    alignment: str
    buttonUrl: str

    @classmethod
    def import_dom(cls):
        return parse_button_node(cls)

    def export_dom(self, options):
        return render_button_node(self, options)
