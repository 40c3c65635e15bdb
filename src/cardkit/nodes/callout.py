#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/callout.py
"""Callout card node."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from cardkit.constants import DEFAULT_CALLOUT_EMOJI
from cardkit.nodes.base import CardNode, PropertyDescriptor, new_key
from cardkit.parsers.callout import parse_callout_node
from cardkit.renderers.callout import render_callout_node


class CalloutNode(
    CardNode,
    node_type="callout",
    properties=(
        PropertyDescriptor("calloutText", "", word_count=True),
        PropertyDescriptor("calloutEmoji", DEFAULT_CALLOUT_EMOJI),
        PropertyDescriptor("backgroundColor", "blue"),
    ),
):
    """A highlighted block of inline text with an optional emoji.

    Unlike other cards an explicitly empty emoji is kept, so a callout can
    be saved without one; only a missing emoji falls back to the default.
    """

    calloutText: str
    calloutEmoji: str
    backgroundColor: str

    def __init__(self, data: Optional[Mapping[str, Any]] = None, key: Optional[str] = None):
        data = data or {}
        self.key = key or new_key()
        self.calloutText = data.get("calloutText") or ""
        emoji = data.get("calloutEmoji")
        self.calloutEmoji = DEFAULT_CALLOUT_EMOJI if emoji is None else emoji
        self.backgroundColor = data.get("backgroundColor") or "blue"

    @classmethod
    def import_dom(cls):
        return parse_callout_node(cls)

    def export_dom(self, options):
        return render_callout_node(self, options)
