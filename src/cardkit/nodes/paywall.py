#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/paywall.py
"""Paywall marker node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode
from cardkit.parsers.paywall import parse_paywall_node
from cardkit.renderers.paywall import render_paywall_node


class PaywallNode(CardNode, node_type="paywall", properties=()):
    """Marks where free content ends and members-only content begins."""

    @classmethod
    def import_dom(cls):
        return parse_paywall_node(cls)

    def export_dom(self, options):
        return render_paywall_node(self, options)
