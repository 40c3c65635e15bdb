#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/bookmark.py
"""Bookmark card node."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor, new_key
from cardkit.parsers.bookmark import parse_bookmark_node
from cardkit.renderers.bookmark import render_bookmark_node

METADATA_FIELDS = ("icon", "title", "description", "author", "publisher", "thumbnail")


class BookmarkNode(
    CardNode,
    node_type="bookmark",
    properties=(
        PropertyDescriptor("title", "", word_count=True),
        PropertyDescriptor("description", "", word_count=True),
        PropertyDescriptor("url", "", url_type="url", word_count=True),
        PropertyDescriptor("caption", "", word_count=True),
        PropertyDescriptor("author", ""),
        PropertyDescriptor("publisher", ""),
        PropertyDescriptor("icon", "", url_type="url", url_path="metadata.icon"),
        PropertyDescriptor("thumbnail", "", url_type="url", url_path="metadata.thumbnail"),
    ),
):
    """A rich link preview.

    The dataset and record nest the link metadata under ``metadata``:
    ``{"url", "metadata": {"icon", "title", ...}, "caption"}``.
    """

    title: str
    description: str
    url: str
    caption: str
    author: str
    publisher: str
    icon: str
    thumbnail: str

    def __init__(self, data: Optional[Mapping[str, Any]] = None, key: Optional[str] = None):
        data = data or {}
        self.key = key or new_key()
        metadata = data.get("metadata") or {}
        self.url = data.get("url") or ""
        for name in METADATA_FIELDS:
            setattr(self, name, metadata.get(name) or "")
        self.caption = data.get("caption") or ""

    def get_dataset(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "metadata": {name: getattr(self, name) for name in METADATA_FIELDS},
            "caption": self.caption,
        }

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "BookmarkNode":
        return cls({"url": record.get("url"), "metadata": record.get("metadata"), "caption": record.get("caption")})

    def export_json(self) -> dict[str, Any]:
        return {"type": self.node_type, "version": self.version, **self.get_dataset()}

    @classmethod
    def import_dom(cls):
        return parse_bookmark_node(cls)

    def export_dom(self, options):
        return render_bookmark_node(self, options)

    def is_empty(self) -> bool:
        return not self.url
