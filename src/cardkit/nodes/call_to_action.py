#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/call_to_action.py
"""Call-to-action card node."""

from __future__ import annotations

from typing import Any

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.renderers.call_to_action import render_call_to_action_node


class CallToActionNode(
    CardNode,
    node_type="call-to-action",
    has_visibility=True,
    properties=(
        PropertyDescriptor("layout", "minimal"),
        PropertyDescriptor("textValue", "", word_count=True),
        PropertyDescriptor("showButton", False),
        PropertyDescriptor("buttonText", ""),
        PropertyDescriptor("buttonUrl", ""),
        PropertyDescriptor("buttonColor", ""),
        PropertyDescriptor("buttonTextColor", ""),
        PropertyDescriptor("hasSponsorLabel", True),
        PropertyDescriptor("backgroundColor", "grey"),
        PropertyDescriptor("hasImage", False),
        PropertyDescriptor("imageUrl", ""),
    ),
):
    """A promotional block with optional image, button and sponsor label."""

    layout: str
    textValue: str
    showButton: bool
    buttonText: str
    buttonUrl: str
    buttonColor: str
    buttonTextColor: str
    hasSponsorLabel: bool
    backgroundColor: str
    hasImage: bool
    imageUrl: str
    visibility: dict[str, Any]

    def export_dom(self, options):
        return render_call_to_action_node(self, options)
