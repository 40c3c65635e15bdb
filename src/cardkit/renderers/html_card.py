#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/html_card.py
"""HTML card renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, new_element
from cardkit.visibility import render_with_visibility


def render_html_node(node: Any, options: Any) -> RenderOutput:
    """Render raw HTML between ``kg-card-begin``/``kg-card-end`` comments.

    The markup is returned as a raw value so it reaches the output without
    being re-parsed, then passed through the node's visibility.
    """
    if not node.html:
        return empty_container(options)

    document = create_document(options)
    wrapped_html = f"\n<!--kg-card-begin: html-->\n{node.html}\n<!--kg-card-end: html-->\n"
    textarea = new_element(document, "textarea", text=wrapped_html)
    output = RenderOutput(textarea, "value")

    feature = getattr(options, "feature", None) or {}
    if feature.get("contentVisibility") or node.visibility is not None:
        return render_with_visibility(output, node.visibility, options)
    return output
