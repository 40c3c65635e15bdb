#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/file.py
"""File card node."""

from __future__ import annotations

from typing import Any

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.file import parse_file_node
from cardkit.renderers.file import render_file_node
from cardkit.utils.formatting import bytes_to_size
from cardkit.utils.records import replace_data_url


class FileNode(
    CardNode,
    node_type="file",
    properties=(
        PropertyDescriptor("src", "", url_type="url"),
        PropertyDescriptor("fileTitle", "", word_count=True),
        PropertyDescriptor("fileCaption", "", word_count=True),
        PropertyDescriptor("fileName", ""),
        PropertyDescriptor("fileSize", ""),
    ),
):
    """A downloadable file with title, caption and size."""

    src: str
    fileTitle: str
    fileCaption: str
    fileName: str
    fileSize: Any

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record["src"] = replace_data_url(self.src)
        return record

    @classmethod
    def import_dom(cls):
        return parse_file_node(cls)

    def export_dom(self, options):
        return render_file_node(self, options)

    @property
    def formatted_file_size(self) -> str:
        """The file size as a rounded human-readable string."""
        return bytes_to_size(self.fileSize or 0)
