#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/call_to_action.py
"""Call-to-action card renderer."""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput, template_output, text_value
from cardkit.visibility import render_with_visibility


def cta_card_template(dataset: dict[str, Any]) -> str:
    """Return the web markup for a call-to-action card."""
    background_accent = "kg-style-accent" if dataset["backgroundColor"] == "accent" else ""
    button_accent = "kg-style-accent" if dataset["buttonColor"] == "accent" else ""
    button_style = f"background-color: {dataset['buttonColor']};" if dataset["buttonColor"] != "accent" else ""
    image = f'<img src="{dataset["imageUrl"]}" alt="CTA Image">' if dataset["hasImage"] else ""
    button = ""
    if dataset["showButton"]:
        button = f"""
                <a href="{dataset['buttonUrl']}" class="kg-cta-button {button_accent}"
                   style="{button_style} color: {dataset['buttonTextColor']};">
                    {dataset['buttonText']}
                </a>
            """
    sponsor = ""
    if dataset["hasSponsorLabel"]:
        sponsor = """
                <div class="kg-sponsor-label">
                    Sponsored
                </div>
            """
    return f"""
        <div class="cta-card {background_accent}" data-layout="{dataset['layout']}" style="background-color: {dataset['backgroundColor']};">
            {image}
            <div>
                {dataset['textValue']}
            </div>
            {button}
            {sponsor}
        </div>
    """


def email_cta_template(dataset: dict[str, Any]) -> str:
    """Return the email markup for a call-to-action card."""
    button_style = f"background-color: {dataset['buttonColor']};" if dataset["buttonColor"] != "accent" else ""
    background_style = f"background-color: {dataset['backgroundColor']};"
    image = (
        f'<img src="{dataset["imageUrl"]}" alt="CTA Image" style="max-width: 100%; border-radius: 4px;">'
        if dataset["hasImage"]
        else ""
    )
    button = ""
    if dataset["showButton"]:
        button = f"""
                <a href="{dataset['buttonUrl']}" class="cta-button"
                   style="display: inline-block; margin-top: 12px; padding: 10px 16px;
                          {button_style} color: {dataset['buttonTextColor']}; text-decoration: none;
                          border-radius: 4px;">
                    {dataset['buttonText']}
                </a>
            """
    sponsor = ""
    if dataset["hasSponsorLabel"]:
        sponsor = """
                <div class="sponsor-label" style="margin-top: 8px; font-size: 12px; color: #888;">
                    Sponsored
                </div>
            """
    return f"""
        <div class="cta-card-email" style="{background_style} padding: 16px; text-align: center; border-radius: 8px;">
            {image}
            <div class="cta-text" style="margin-top: 12px; color: {dataset['textColor']};">
                {dataset['textValue']}
            </div>
            {button}
            {sponsor}
        </div>
    """


def render_call_to_action_node(node: Any, options: Any) -> RenderOutput:
    """Render a call-to-action card and apply the node's visibility."""
    dataset = {
        name: text_value(getattr(node, name, None))
        for name in (
            "layout",
            "textValue",
            "buttonText",
            "buttonUrl",
            "buttonColor",
            "buttonTextColor",
            "backgroundColor",
            "imageUrl",
            "textColor",
        )
    }
    dataset.update(showButton=node.showButton, hasSponsorLabel=node.hasSponsorLabel, hasImage=node.hasImage)

    if options.target == "email":
        output = template_output(email_cta_template(dataset), options)
    else:
        output = template_output(cta_card_template(dataset), options)
    return render_with_visibility(output, node.visibility, options)
