#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/email.py
"""Email-only content node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.renderers.email import render_email_node


class EmailNode(CardNode, node_type="email", properties=(PropertyDescriptor("html", "", url_type="html"),)):
    """HTML that only appears in the email version of a post."""

    html: str

    def export_dom(self, options):
        return render_email_node(self, options)
