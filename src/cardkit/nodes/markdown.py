#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/markdown.py
"""Markdown card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.renderers.markdown import render_markdown_node


class MarkdownNode(
    CardNode,
    node_type="markdown",
    properties=(PropertyDescriptor("markdown", "", url_type="markdown", word_count=True),),
):
    """Raw markdown rendered to HTML on export."""

    markdown: str

    def export_dom(self, options):
        return render_markdown_node(self, options)

    def is_empty(self) -> bool:
        return not self.markdown
