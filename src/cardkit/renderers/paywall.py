#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/paywall.py
"""Paywall marker renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput
from cardkit.utils.dom import create_document, new_element, set_inner_html


def render_paywall_node(node: Any, options: Any) -> RenderOutput:
    """Render the ``<!--members-only-->`` marker as inner markup, with no wrapping element."""
    document = create_document(options)
    element = new_element(document, "div")
    set_inner_html(element, "<!--members-only-->")
    return RenderOutput(element, "inner")
