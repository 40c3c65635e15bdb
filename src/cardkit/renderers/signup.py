#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/signup.py
"""Signup form card renderer.

The card is a members signup form. It is rendered hidden (``display: none``)
and revealed by the theme's member scripts, and it is never rendered in
email.
"""

from __future__ import annotations

from typing import Any

from cardkit.renderers.base import RenderOutput
from cardkit.utils.dom import create_document, first_element_child, new_element, set_inner_html

DEFAULT_BUTTON_TEXT = "Subscribe"
DEFAULT_SUCCESS_MESSAGE = "Thanks! Now check your email to confirm."

LOADING_ICON = """<svg xmlns="http://www.w3.org/2000/svg" height="24" width="24" viewBox="0 0 24 24">
        <g stroke-linecap="round" stroke-width="2" fill="currentColor" stroke="none" stroke-linejoin="round" class="nc-icon-wrapper">
            <g class="nc-loop-dots-4-24-icon-o">
                <circle cx="4" cy="12" r="3"></circle>
                <circle cx="12" cy="12" r="3"></circle>
                <circle cx="20" cy="12" r="3"></circle>
            </g>
            <style data-cap="butt">
                .nc-loop-dots-4-24-icon-o{--animation-duration:0.8s}
                .nc-loop-dots-4-24-icon-o *{opacity:.4;transform:scale(.75);animation:nc-loop-dots-4-anim var(--animation-duration) infinite}
                .nc-loop-dots-4-24-icon-o :nth-child(1){transform-origin:4px 12px;animation-delay:-.3s;animation-delay:calc(var(--animation-duration)/-2.666)}
                .nc-loop-dots-4-24-icon-o :nth-child(2){transform-origin:12px 12px;animation-delay:-.15s;animation-delay:calc(var(--animation-duration)/-5.333)}
                .nc-loop-dots-4-24-icon-o :nth-child(3){transform-origin:20px 12px}
                @keyframes nc-loop-dots-4-anim{0%,100%{opacity:.4;transform:scale(.75)}50%{opacity:1;transform:scale(1)}}
            </style>
        </g>
    </svg>"""


def get_card_classes(node: Any) -> list[str]:
    """Return the card classes for the node's layout."""
    classes = ["kg-card kg-signup-card"]
    split = node.layout == "split"
    if node.layout and not split:
        classes.append(f"kg-width-{node.layout}")
    if split:
        classes.append("kg-layout-split kg-width-full")
    if node.swapped and split:
        classes.append("kg-swapped")
    if node.layout == "full":
        classes.append("kg-content-wide")
    if split and node.backgroundSize == "contain":
        classes.append("kg-content-wide")
    return classes


def get_accent_class(node: Any) -> str:
    """Return the accent class; a background image suppresses it except in the split layout."""
    if node.backgroundColor != "accent":
        return ""
    if node.layout == "split" or not node.backgroundImageSrc:
        return "kg-style-accent"
    return ""


def card_template(node: Any) -> str:
    """Return the web markup for a signup card."""
    card_classes = " ".join(get_card_classes(node))
    background_accent = get_accent_class(node)
    button_accent = "kg-style-accent" if node.buttonColor == "accent" else ""
    button_style = f"background-color: {node.buttonColor};" if node.buttonColor != "accent" else ""
    alignment = "kg-align-center" if node.alignment == "center" else ""
    background_style = (
        f"background-color: {node.backgroundColor}"
        if node.backgroundColor != "accent" and (not node.backgroundImageSrc or node.layout == "split")
        else ""
    )
    text_style = f'style="color: {node.textColor};"' if node.textColor else ""
    img_template = (
        f"""
        <picture><img class="kg-signup-card-image" src="{node.backgroundImageSrc}" alt="" /></picture>
    """
        if node.backgroundImageSrc
        else ""
    )
    labels = "\n".join(f'<input data-members-label type="hidden" value="{label}" />' for label in node.labels)
    form_template = f"""
        <form class="kg-signup-card-form" data-members-form="signup">
            {labels}
            <div class="kg-signup-card-fields">
                <input class="kg-signup-card-input" id="email" data-members-email="" type="email" required="true" placeholder="Your email" />
                <button class="kg-signup-card-button {button_accent}" style="{button_style}color: {node.buttonTextColor};" type="submit">
                    <span class="kg-signup-card-button-default">{node.buttonText or DEFAULT_BUTTON_TEXT}</span>
                    <span class="kg-signup-card-button-loading">{LOADING_ICON}</span>
                </button>
            </div>
            <div class="kg-signup-card-success" {text_style}>
                {node.successMessage or DEFAULT_SUCCESS_MESSAGE}
            </div>
            <div class="kg-signup-card-error" {text_style} data-members-error></div>
        </form>
        """
    return f"""
        <div class="{card_classes} {background_accent}" data-lexical-signup-form style="{background_style}; display: none;">
            {img_template if node.layout != "split" else ""}
            <div class="kg-signup-card-content">
                {img_template if node.layout == "split" else ""}
                <div class="kg-signup-card-text {alignment}">
                    <h2 class="kg-signup-card-heading" {text_style}>{node.header}</h2>
                    <p class="kg-signup-card-subheading" {text_style}>{node.subheader}</p>
                    {form_template}
                    <p class="kg-signup-card-disclaimer" {text_style}>{node.disclaimer}</p>
                </div>
            </div>
        </div>
        """


def render_signup_node(node: Any, options: Any) -> RenderOutput:
    """Render a signup card; email gets an empty ``<div>``.

    Empty header, subheader and disclaimer elements are removed.
    """
    document = create_document(options)
    if options.target == "email":
        return RenderOutput(new_element(document, "div"))

    wrapper = new_element(document, "div")
    set_inner_html(wrapper, card_template(node).strip())
    for value, selector in (
        (node.header, ".kg-signup-card-heading"),
        (node.subheader, ".kg-signup-card-subheading"),
        (node.disclaimer, ".kg-signup-card-disclaimer"),
    ):
        if value == "":
            element = wrapper.select_one(selector)
            if element is not None:
                element.decompose()
    return RenderOutput(first_element_child(wrapper))
