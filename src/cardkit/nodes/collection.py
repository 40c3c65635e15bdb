#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/collection.py
"""Collection card node."""

from __future__ import annotations

import logging
from typing import Any, Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.collection import parse_collection_node
from cardkit.renderers.collection import render_collection_node

logger = logging.getLogger(__name__)


class CollectionNode(
    CardNode,
    node_type="collection",
    properties=(
        PropertyDescriptor("collection", "latest"),
        PropertyDescriptor("postCount", 3),
        PropertyDescriptor("layout", "grid"),
        PropertyDescriptor("columns", 3),
        PropertyDescriptor("header", "", word_count=True),
    ),
):
    """A feed of posts from a named collection.

    Posts are fetched in a separate async phase with :meth:`get_dynamic_data`
    and passed back to rendering through ``options.render_data``.
    """

    collection: str
    postCount: int
    layout: str
    columns: int
    header: str

    @classmethod
    def import_dom(cls):
        return parse_collection_node(cls)

    def export_dom(self, options):
        return render_collection_node(self, options)

    def has_dynamic_data(self) -> bool:
        return True

    async def get_dynamic_data(self, options: Any) -> Optional[dict[str, Any]]:
        """Fetch the collection's posts.

        Returns
        -------
        dict or None
            ``{"key": node key, "data": posts}``, or None when the options
            have no ``get_collection_posts`` callable

        """
        fetch = getattr(options, "get_collection_posts", None)
        if fetch is None:
            logger.debug("No get_collection_posts callable; skipping collection %s", self.collection)
            return None
        posts = await fetch(self.collection, self.postCount)
        return {"key": self.key, "data": posts}
