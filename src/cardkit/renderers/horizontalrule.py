#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/horizontalrule.py
"""Horizontal rule renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput
from cardkit.utils.dom import create_document, new_element


def render_horizontal_rule_node(node: Any, options: Any) -> RenderOutput:
    document = create_document(options)
    return RenderOutput(new_element(document, "hr"))
