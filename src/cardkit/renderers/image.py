#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/image.py
"""Image card renderer."""

from __future__ import annotations

import logging
from typing import Any

from cardkit.constants import (
    EMAIL_MAX_IMAGE_WIDTH,
    EMAIL_RETINA_MIN_WIDTH,
    SIZES_REGULAR_BREAKPOINT,
    SIZES_WIDE_BREAKPOINT,
)
from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, new_element, set_inner_html
from cardkit.utils.images import can_transform, get_retina_src, resize_image, set_srcset_attribute

logger = logging.getLogger(__name__)


def render_image_node(node: Any, options: Any) -> RenderOutput:
    """Render an image card as ``figure.kg-image-card``.

    Parameters
    ----------
    node : ImageNode
        The image card
    options : RenderOptions
        Render options

    Returns
    -------
    RenderOutput
        The figure element, or an empty container when there is no ``src``

    Notes
    -----
    Web output carries ``srcset``/``sizes`` for transformable images. Email
    output always has explicit dimensions capped at 600px, and local images
    are swapped for a larger size for high-density screens.

    """
    if not node.src or not str(node.src).strip():
        return empty_container(options)

    document = create_document(options)
    figure_classes = "kg-card kg-image-card"
    if node.cardWidth != "regular":
        figure_classes += f" kg-width-{node.cardWidth}"
    if node.floatDirection in ("left", "right"):
        figure_classes += f" kg-float-image kg-float-{node.floatDirection}"
    if node.caption:
        figure_classes += " kg-card-hascaption"
    figure = new_element(document, "figure", {"class": figure_classes})

    img = new_element(document, "img", {"src": node.src, "class": "kg-image", "alt": node.alt or "", "loading": "lazy"})
    if node.title:
        img["title"] = node.title
    if node.width and node.height:
        img["width"] = str(node.width)
        img["height"] = str(node.height)

    optimization = getattr(options, "image_optimization", None)
    default_max_width = optimization.default_max_width if optimization is not None else None
    if default_max_width and node.width and node.width > default_max_width and can_transform(node.src, options):
        resized = resize_image(node.width, node.height, desired_width=default_max_width)
        if resized:
            img["width"], img["height"] = str(resized[0]), str(resized[1])

    if options.target != "email":
        set_srcset_attribute(img, node.src, node.width, options)
        if img.get("srcset") and node.width and node.width >= SIZES_REGULAR_BREAKPOINT:
            if not node.cardWidth or node.cardWidth == "regular":
                img["sizes"] = f"(min-width: {SIZES_REGULAR_BREAKPOINT}px) {SIZES_REGULAR_BREAKPOINT}px"
            if node.cardWidth == "wide" and node.width >= SIZES_WIDE_BREAKPOINT:
                img["sizes"] = f"(min-width: {SIZES_WIDE_BREAKPOINT}px) {SIZES_WIDE_BREAKPOINT}px"

    if options.target == "email" and node.width and node.height:
        width, height = node.width, node.height
        if node.width >= EMAIL_MAX_IMAGE_WIDTH:
            width, height = resize_image(node.width, node.height, desired_width=EMAIL_MAX_IMAGE_WIDTH)
        img["width"], img["height"] = str(width), str(height)
        retina_src = get_retina_src(node.src, node.width, options, min_width=EMAIL_RETINA_MIN_WIDTH)
        if retina_src:
            img["src"] = retina_src

    if node.href:
        link = new_element(document, "a", {"href": node.href})
        link.append(img)
        figure.append(link)
    else:
        figure.append(img)

    if node.caption:
        figcaption = new_element(document, "figcaption")
        set_inner_html(figcaption, node.caption)
        figure.append(figcaption)

    return RenderOutput(figure)
