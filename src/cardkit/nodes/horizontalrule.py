#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/horizontalrule.py
"""Horizontal rule card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode
from cardkit.parsers.horizontalrule import parse_horizontal_rule_node
from cardkit.renderers.horizontalrule import render_horizontal_rule_node


class HorizontalRuleNode(CardNode, node_type="horizontalrule", properties=()):
    """A thematic break."""

    @classmethod
    def import_dom(cls):
        return parse_horizontal_rule_node(cls)

    def export_dom(self, options):
        return render_horizontal_rule_node(self, options)

    def get_text_content(self) -> str:
        return "---\n\n"

    def has_edit_mode(self) -> bool:
        return False
