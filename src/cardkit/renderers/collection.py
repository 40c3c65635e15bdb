#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/collection.py
"""Collection card renderer.

Collections list posts fetched before rendering. The posts are looked up in
``options.render_data`` by node key; without them the card renders empty.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, first_element_child, new_element, set_inner_html
from cardkit.utils.formatting import format_short_date

logger = logging.getLogger(__name__)


def render_collection_node(node: Any, options: Any) -> RenderOutput:
    """Render a collection card from pre-fetched posts."""
    posts = (options.render_data or {}).get(node.key)
    if posts is None:
        logger.debug("No render data for collection %s; rendering empty", node.key)
        return empty_container(options)

    wrapper = new_element(create_document(options), "div")
    set_inner_html(wrapper, card_template(node, posts).strip())
    return RenderOutput(first_element_child(wrapper))


def get_feed_class(layout: str, columns: Any) -> str:
    feed_class = "kg-collection-card-feed"
    feed_class += " kg-collection-card-list" if layout == "list" else " kg-collection-card-grid"
    if layout == "grid" and columns in (1, 2, 3, 4):
        feed_class += f" columns-{columns}"
    return feed_class


def card_template(node: Any, posts: list[Mapping[str, Any]]) -> str:
    """Return the web markup for a collection card."""
    header = f'<h4 class="kg-collection-card-title">{node.header}</h4>' if node.header else ""
    post_markup = "".join(post_template(post, node.layout, node.columns) for post in posts)
    return f"""<div class="kg-card kg-collection-card kg-width-wide" data-kg-collection-slug="{node.collection}" data-kg-collection-limit="{node.postCount}">
            {header}
            <div class="{get_feed_class(node.layout, node.columns)}">
                {post_markup}
            </div>
        </div>"""


def post_template(post: Mapping[str, Any], layout: str, columns: Any) -> str:
    """Return the markup for one post in a collection."""
    title = post.get("title")
    excerpt = post.get("excerpt")
    image = post.get("feature_image")
    published_at = post.get("published_at")
    reading_time = post.get("reading_time") or 0

    image_class = " aspect-video" if layout == "grid" and columns in (1, 2) else " aspect-[3/2]"
    if image is None:
        image_class += " invisible"

    image_markup = (
        f"""<div class="kg-collection-card-img">
                        <img class="{image_class}" src="{image}" alt="{title}" />
                    </div>"""
        if image
        else ""
    )
    title_markup = f'<h2 class="kg-collection-card-post-title">{title}</h2>' if title else ""
    excerpt_markup = f'<p class="kg-collection-card-post-excerpt">{excerpt}</p>' if excerpt else ""
    date_markup = f"<p>{format_short_date(published_at)}</p>" if published_at else ""
    reading_markup = f"<p>&nbsp;&middot; {reading_time} min</p>" if reading_time > 0 else ""
    return f"""<a href="{post.get("url")}" class="kg-collection-card-post-wrapper">
            <div class="kg-collection-card-post">
                {image_markup}
                <div class="kg-collection-card-content">
                    {title_markup}
                    {excerpt_markup}
                    <div class="kg-collection-card-post-meta">
                        {date_markup}
                        {reading_markup}
                    </div>
                </div>
            </div>
        </a>"""
