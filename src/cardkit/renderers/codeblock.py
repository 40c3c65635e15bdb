#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/codeblock.py
"""Code block card renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, new_element, set_inner_html


def render_code_block_node(node: Any, options: Any) -> RenderOutput:
    """Render ``<pre><code>``, wrapped in ``figure.kg-code-card`` when captioned."""
    if not node.code or not str(node.code).strip():
        return empty_container(options)

    document = create_document(options)
    pre = new_element(document, "pre")
    code = new_element(document, "code", {"class": f"language-{node.language}"} if node.language else None)
    code.string = node.code
    pre.append(code)

    if not node.caption:
        return RenderOutput(pre)

    figure = new_element(document, "figure", {"class": "kg-card kg-code-card"})
    figure.append(pre)
    figcaption = new_element(document, "figcaption")
    set_inner_html(figcaption, node.caption)
    figure.append(figcaption)
    return RenderOutput(figure)
