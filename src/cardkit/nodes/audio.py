#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/audio.py
"""Audio card node."""

from __future__ import annotations

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.audio import parse_audio_node
from cardkit.renderers.audio import render_audio_node


class AudioNode(
    CardNode,
    node_type="audio",
    properties=(
        PropertyDescriptor("duration", 0),
        PropertyDescriptor("mimeType", ""),
        PropertyDescriptor("src", "", url_type="url"),
        PropertyDescriptor("title", ""),
        PropertyDescriptor("thumbnailSrc", ""),
    ),
):
    """An uploaded audio file with title and optional thumbnail."""

    duration: float
    mimeType: str
    src: str
    title: str
    thumbnailSrc: str

    @classmethod
    def import_dom(cls):
        return parse_audio_node(cls)

    def export_dom(self, options):
        return render_audio_node(self, options)
