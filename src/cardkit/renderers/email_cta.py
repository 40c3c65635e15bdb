#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/email_cta.py
"""Email call-to-action renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, inner_html, new_element, set_inner_html
from cardkit.utils.html import (
    escape_html,
    remove_code_wrappers_from_helpers,
    remove_spaces,
    wrap_replacement_strings,
)


def _clean_email_html(html: str) -> str:
    return wrap_replacement_strings(remove_code_wrappers_from_helpers(remove_spaces(html)))


def render_email_cta_node(node: Any, options: Any) -> RenderOutput:
    """Render an email call-to-action for a member segment.

    Nothing is rendered for the web, or when there is neither content nor a
    complete button.
    """
    has_button = bool(node.showButton and node.buttonText and node.buttonUrl)
    if (not node.html and not has_button) or options.target != "email":
        return empty_container(options)

    document = create_document(options)
    element = new_element(document, "div")
    if node.segment:
        element["data-gh-segment"] = node.segment
    if node.alignment == "center":
        element["class"] = "align-center"
    if node.showDividers:
        element.append(new_element(document, "hr"))

    set_inner_html(element, inner_html(element) + _clean_email_html(node.html or ""))

    if has_button:
        # the trailing <p> keeps a line break when no dividers are shown
        button_template = f"""
            <div class="btn btn-accent">
                <table border="0" cellspacing="0" cellpadding="0" align="{escape_html(node.alignment)}">
                    <tbody>
                        <tr>
                            <td align="center">
                                <a href="{escape_html(node.buttonUrl)}">{escape_html(node.buttonText)}</a>
                            </td>
                        </tr>
                    </tbody>
                </table>
            </div>
            <p></p>
        """
        set_inner_html(element, inner_html(element) + _clean_email_html(button_template))

    if node.showDividers:
        element.append(new_element(document, "hr"))
    return RenderOutput(element)
