#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/header.py
"""Header card renderers.

Header cards carry their own ``version`` property: version 1 cards use the
original size/style design and version 2 cards the layout/color design.
Both versions stay renderable.
"""

from __future__ import annotations

import re
from typing import Any

from cardkit.renderers.base import RenderOutput, empty_container, template_output, text_value
from cardkit.utils.dom import create_document, new_element, set_inner_html
from cardkit.utils.html import slugify
from cardkit.utils.images import get_srcset_attribute

_TRAILING_BREAKS_RE = re.compile(r"(<br>)+$")


def render_header_node(node: Any, options: Any) -> RenderOutput:
    """Render a header card with the renderer matching its version."""
    if node.version == 1:
        return render_header_node_v1(node, options)
    return render_header_node_v2(node, options)


def render_header_node_v1(node: Any, options: Any) -> RenderOutput:
    """Render a version 1 header; it is empty without header, subheader or a complete button."""
    button_complete = bool(node.buttonEnabled and node.buttonUrl and node.buttonText)
    if not node.header and not node.subheader and not button_complete:
        return empty_container(options)

    document = create_document(options)
    has_subheader = bool(node.subheader) and bool(_TRAILING_BREAKS_RE.sub("", node.subheader).strip())
    background_style = f"background-image: url({text_value(node.backgroundImageSrc)})" if node.style == "image" else ""

    div = new_element(
        document,
        "div",
        {
            "class": f"kg-card kg-header-card kg-width-full kg-size-{node.size} kg-style-{node.style}",
            "data-kg-background-image": text_value(node.backgroundImageSrc),
            "style": background_style,
        },
    )
    if node.header:
        header = new_element(document, "h2", {"class": "kg-header-card-header", "id": slugify(node.header)})
        set_inner_html(header, node.header)
        div.append(header)
    if has_subheader:
        subheader = new_element(document, "h3", {"class": "kg-header-card-subheader", "id": slugify(node.subheader)})
        set_inner_html(subheader, node.subheader)
        div.append(subheader)
    if button_complete:
        div.append(
            new_element(document, "a", {"class": "kg-header-card-button", "href": node.buttonUrl}, text=node.buttonText)
        )
    return RenderOutput(div)


def get_card_classes(node: Any) -> list[str]:
    """Return the classes of a version 2 header card."""
    classes = ["kg-card kg-header-card kg-v2"]
    if node.layout and node.layout != "split":
        classes.append(f"kg-width-{node.layout}")
    if node.layout == "split":
        classes.append("kg-layout-split kg-width-full")
    if node.swapped and node.layout == "split":
        classes.append("kg-swapped")
    if node.layout == "full":
        classes.append("kg-content-wide")
    if node.layout == "split" and node.backgroundSize == "contain":
        classes.append("kg-content-wide")
    return classes


def _has_button(node: Any) -> bool:
    return bool(node.buttonEnabled and node.buttonUrl and str(node.buttonUrl).strip())


def card_template(node: Any, options: Any) -> str:
    """Return the web markup for a version 2 header card."""
    card_classes = " ".join(get_card_classes(node))
    background_accent = "kg-style-accent" if node.backgroundColor == "accent" else ""
    button_accent = "kg-style-accent" if node.buttonColor == "accent" else ""
    button_style = f"background-color: {node.buttonColor};" if node.buttonColor != "accent" else ""
    alignment = "kg-align-center" if node.alignment == "center" else ""
    background_style = ""
    if node.backgroundColor != "accent" and (not node.backgroundImageSrc or node.layout == "split"):
        background_style = f"background-color: {node.backgroundColor}"

    image = ""
    if node.backgroundImageSrc:
        srcset_value = get_srcset_attribute(node.backgroundImageSrc, node.backgroundImageWidth, options)
        srcset = f'srcset="{srcset_value}"' if srcset_value else ""
        image = f"""
            <picture><img class="kg-header-card-image" src="{node.backgroundImageSrc}" {srcset} loading="lazy" alt="" /></picture>
        """

    text_color = text_value(node.textColor)
    header = ""
    if node.header:
        header = (
            f'<h2 id="{slugify(node.header)}" class="kg-header-card-heading" style="color: {text_color};" '
            f'data-text-color="{text_color}">{node.header}</h2>'
        )
    subheader = ""
    if node.subheader:
        subheader = (
            f'<p id="{slugify(node.subheader)}" class="kg-header-card-subheading" style="color: {text_color};" '
            f'data-text-color="{text_color}">{node.subheader}</p>'
        )
    button = ""
    if _has_button(node):
        button_text_color = text_value(node.buttonTextColor)
        button = (
            f'<a href="{node.buttonUrl}" class="kg-header-card-button {button_accent}" '
            f'style="{button_style}color: {button_text_color};" data-button-color="{text_value(node.buttonColor)}" '
            f'data-button-text-color="{button_text_color}">{text_value(node.buttonText)}</a>'
        )
    wrapper_style = f'style="{background_style};"' if background_style else ""
    return f"""
        <div class="{card_classes} {background_accent}" {wrapper_style} data-background-color="{text_value(node.backgroundColor)}">
            {image if node.layout != 'split' else ''}
            <div class="kg-header-card-content">
                {image if node.layout == 'split' else ''}
                <div class="kg-header-card-text {alignment}">
                    {header}
                    {subheader}
                    {button}
                </div>
            </div>
        </div>
        """


def email_template(node: Any) -> str:
    """Return the email markup for a version 2 header card, using the accent color hex."""
    background_accent = f"background-color: {node.accentColor};" if node.backgroundColor == "accent" else ""
    button_accent = (
        f"background-color: {node.accentColor};" if node.buttonColor == "accent" else text_value(node.buttonColor)
    )
    button_style = f"background-color: {node.buttonColor};" if node.buttonColor != "accent" else ""
    alignment = "text-align: center;" if node.alignment == "center" else ""
    if node.backgroundImageSrc and node.layout != "split":
        background_style = (
            f"background-image: url({node.backgroundImageSrc}); background-size: cover; background-position: center center;"
        )
    else:
        background_style = f"background-color: {text_value(node.backgroundColor)};"
    background_size = "cover" if node.backgroundSize != "contain" else "40%"
    split_image_style = (
        f"background-image: url({text_value(node.backgroundImageSrc)}); background-size: {background_size}; "
        "background-position: center"
    )
    text_color = text_value(node.textColor)

    split_image = ""
    if node.layout == "split" and node.backgroundImageSrc:
        split_image = f"""
                <div class="kg-header-card-image" background="{node.backgroundImageSrc}" style="{split_image_style}"></div>
            """
    content_style = "padding-top: 0;" if node.layout == "split" and node.backgroundSize == "contain" else ""
    button = ""
    if _has_button(node):
        button = f"""
                    <a class="kg-header-card-button" href="{node.buttonUrl}" style="color: {text_value(node.buttonTextColor)}; {button_style} {button_accent}">{text_value(node.buttonText)}</a>
                """
    return f"""
        <div class="kg-header-card kg-v2" style="color:{text_color}; {alignment} {background_style} {background_accent}">
            {split_image}
            <div class="kg-header-card-content" style="{content_style}">
                <h2 class="kg-header-card-heading" style="color:{text_color};">{text_value(node.header)}</h2>
                <p class="kg-header-card-subheading" style="color:{text_color};">{text_value(node.subheader)}</p>
                {button}
            </div>
        </div>
    """


def render_header_node_v2(node: Any, options: Any) -> RenderOutput:
    """Render a version 2 header card."""
    if options.target == "email":
        return template_output(email_template(node), options)
    return template_output(card_template(node, options), options)
