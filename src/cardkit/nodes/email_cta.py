#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/email_cta.py
"""Email call-to-action node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.renderers.email_cta import render_email_cta_node


class EmailCtaNode(
    CardNode,
    node_type="email-cta",
    properties=(
        PropertyDescriptor("alignment", "left"),
        PropertyDescriptor("buttonText", ""),
        PropertyDescriptor("buttonUrl", "", url_type="url"),
        PropertyDescriptor("html", "", url_type="html"),
        PropertyDescriptor("segment", "status:free"),
        PropertyDescriptor("showButton", False),
        PropertyDescriptor("showDividers", True),
    ),
):
    """Email-only content with an optional button, shown to one member segment."""

    alignment: str
    buttonText: str
    buttonUrl: str
    html: str
    segment: str
    showButton: bool
    showDividers: bool

    def export_dom(self, options):
        return render_email_cta_node(self, options)
