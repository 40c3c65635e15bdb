#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/toggle.py
"""Toggle card renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, template_output, text_value


def card_template(node: Any) -> str:
    return f"""
        <div class="kg-card kg-toggle-card" data-kg-toggle-state="close">
            <div class="kg-toggle-heading">
                <h4 class="kg-toggle-heading-text">{text_value(node.heading)}</h4>
                <button class="kg-toggle-card-icon" aria-label="Expand toggle to read content">
                    <svg id="Regular" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
                        <path class="cls-1" d="M23.25,7.311,12.53,18.03a.749.749,0,0,1-1.06,0L.75,7.311"></path>
                    </svg>
                </button>
            </div>
            <div class="kg-toggle-content">{text_value(node.content)}</div>
        </div>
        """


def email_card_template(node: Any) -> str:
    # email clients cannot toggle, so the content is always expanded
    return f"""
        <div style="background: transparent;
        border: 1px solid rgba(124, 139, 154, 0.25); border-radius: 4px; padding: 20px; margin-bottom: 1.5em;">
            <h4 style="font-size: 1.375rem; font-weight: 600; margin-bottom: 8px; margin-top:0px">{text_value(node.heading)}</h4>
            <div style="font-size: 1rem; line-height: 1.5; margin-bottom: -1.5em;">{text_value(node.content)}</div>
        </div>
        """


def render_toggle_node(node: Any, options: Any) -> RenderOutput:
    """Render a collapsible toggle card."""
    html = email_card_template(node) if options.target == "email" else card_template(node)
    return template_output(html, options)
