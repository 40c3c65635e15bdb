#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/codeblock.py
"""Code block card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.codeblock import parse_code_block_node
from cardkit.renderers.codeblock import render_code_block_node


class CodeBlockNode(
    CardNode,
    node_type="codeblock",
    properties=(
        PropertyDescriptor("code", "", word_count=True),
        PropertyDescriptor("language", ""),
        PropertyDescriptor("caption", "", url_type="html", word_count=True),
    ),
):
    """Preformatted source code with an optional language and caption."""

    code: str
    language: str
    caption: str

    @classmethod
    def import_dom(cls):
        return parse_code_block_node(cls)

    def export_dom(self, options):
        return render_code_block_node(self, options)

    def is_empty(self) -> bool:
        return not self.code
