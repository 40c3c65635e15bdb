#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/email.py
"""Email-only content renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, new_element, set_inner_html
from cardkit.utils.html import remove_code_wrappers_from_helpers, remove_spaces, wrap_replacement_strings


def render_email_node(node: Any, options: Any) -> RenderOutput:
    """Render email-only HTML; nothing is rendered for the web.

    Whitespace is collapsed, ``<code>`` wrappers around ``{helper}``
    replacement strings are removed and the replacement strings are wrapped
    in ``%%`` so the mailer can substitute them.
    """
    if not node.html or options.target != "email":
        return empty_container(options)

    cleaned = wrap_replacement_strings(remove_code_wrappers_from_helpers(remove_spaces(node.html)))
    element = new_element(create_document(options), "div")
    set_inner_html(element, cleaned)
    return RenderOutput(element, "inner")
