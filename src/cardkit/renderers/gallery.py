#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/gallery.py
"""Gallery card renderer."""

from __future__ import annotations

from typing import Any, Mapping

from cardkit.constants import (
    EMAIL_MAX_IMAGE_WIDTH,
    EMAIL_RETINA_MIN_WIDTH,
    SIZES_REGULAR_BREAKPOINT,
    SIZES_WIDE_BREAKPOINT,
)
from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import add_class, create_document, new_element, set_inner_html
from cardkit.utils.images import (
    can_transform,
    get_retina_src,
    is_unsplash_image,
    resize_image,
    set_srcset_attribute,
    set_url_query_param,
)

MAX_IMAGES_PER_ROW = 3


def is_valid_image(image: Mapping[str, Any]) -> bool:
    """Return whether a gallery image has everything needed to render it."""
    return bool(image.get("fileName") and image.get("src") and image.get("width") and image.get("height"))


def build_structure(images: list[Mapping[str, Any]]) -> list[list[Mapping[str, Any]]]:
    """Group images into rows by their ``row`` index.

    When the last row would hold a single image, the second-to-last image
    moves down to join it so no row is left with one image.
    """
    rows: dict[int, list[Mapping[str, Any]]] = {}
    count = len(images)
    for index, image in enumerate(images):
        row = int(image.get("row") or 0)
        if count > 1 and count % MAX_IMAGES_PER_ROW == 1 and index == count - 2:
            row += 1
        rows.setdefault(row, []).append(image)
    return [rows[row] for row in sorted(rows)]


def render_gallery_node(node: Any, options: Any) -> RenderOutput:
    """Render a gallery as ``figure.kg-gallery-card`` with rows of images.

    Web images get ``srcset``/``sizes``. Email images are capped at 600px and
    swapped for larger local or Unsplash sizes for high-density screens.
    """
    valid_images = [image for image in node.images or [] if is_valid_image(image)]
    if not valid_images:
        return empty_container(options)

    document = create_document(options)
    figure_class = "kg-card kg-gallery-card kg-width-wide"
    figure = new_element(document, "figure", {"class": figure_class})
    container = new_element(document, "div", {"class": "kg-gallery-container"})
    figure.append(container)

    optimization = getattr(options, "image_optimization", None)
    default_max_width = optimization.default_max_width if optimization is not None else None

    rows = build_structure(valid_images)
    for row in rows:
        row_div = new_element(document, "div", {"class": "kg-gallery-row"})
        for image in row:
            src, width, height = image["src"], image["width"], image["height"]
            image_div = new_element(document, "div", {"class": "kg-gallery-image"})
            img = new_element(
                document,
                "img",
                {"src": src, "width": str(width), "height": str(height), "loading": "lazy", "alt": image.get("alt") or ""},
            )
            if image.get("title"):
                img["title"] = image["title"]

            # resized dimensions keep third-party gallery scripts consistent
            if default_max_width and width > default_max_width and can_transform(src, options):
                resized = resize_image(width, height, desired_width=default_max_width)
                if resized:
                    img["width"], img["height"] = str(resized[0]), str(resized[1])

            if options.target != "email":
                set_srcset_attribute(img, src, width, options)
                if img.get("srcset") and width >= SIZES_REGULAR_BREAKPOINT:
                    if len(rows) == 1 and len(row) == 1 and width >= SIZES_WIDE_BREAKPOINT:
                        img["sizes"] = f"(min-width: {SIZES_WIDE_BREAKPOINT}px) {SIZES_WIDE_BREAKPOINT}px"
                    else:
                        img["sizes"] = f"(min-width: {SIZES_REGULAR_BREAKPOINT}px) {SIZES_REGULAR_BREAKPOINT}px"
            else:
                if width > EMAIL_MAX_IMAGE_WIDTH:
                    resized = resize_image(width, height, desired_width=EMAIL_MAX_IMAGE_WIDTH)
                    if resized:
                        img["width"], img["height"] = str(resized[0]), str(resized[1])
                retina_src = get_retina_src(src, width, options, min_width=EMAIL_RETINA_MIN_WIDTH)
                if retina_src:
                    img["src"] = retina_src
                if is_unsplash_image(src):
                    img["src"] = set_url_query_param(src, "w", EMAIL_RETINA_MIN_WIDTH)

            if image.get("href"):
                link = new_element(document, "a", {"href": image["href"]})
                link.append(img)
                image_div.append(link)
            else:
                image_div.append(img)
            row_div.append(image_div)
        container.append(row_div)

    if node.caption:
        figcaption = new_element(document, "figcaption")
        set_inner_html(figcaption, node.caption)
        figure.append(figcaption)
        add_class(figure, "kg-card-hascaption")
    return RenderOutput(figure)
