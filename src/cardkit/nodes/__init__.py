#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Node types of a cardkit document.

``DEFAULT_NODES`` lists every node type in registration order. The order
breaks ties between import rules of equal priority for the same tag.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from cardkit.nodes.audio import AudioNode
from cardkit.nodes.base import CardNode, PropertyDescriptor, define_node_type
from cardkit.nodes.bookmark import BookmarkNode
from cardkit.nodes.button import ButtonNode
from cardkit.nodes.call_to_action import CallToActionNode
from cardkit.nodes.callout import CalloutNode
from cardkit.nodes.codeblock import CodeBlockNode
from cardkit.nodes.collection import CollectionNode
from cardkit.nodes.elements import (
    AsideNode,
    ElementNode,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ParagraphNode,
    QuoteNode,
    RootNode,
    TextNode,
)
from cardkit.nodes.email import EmailNode
from cardkit.nodes.email_cta import EmailCtaNode
from cardkit.nodes.embed import EmbedNode
from cardkit.nodes.file import FileNode
from cardkit.nodes.gallery import GalleryNode
from cardkit.nodes.header import HeaderNode
from cardkit.nodes.horizontalrule import HorizontalRuleNode
from cardkit.nodes.html_card import HtmlNode
from cardkit.nodes.image import ImageNode
from cardkit.nodes.markdown import MarkdownNode
from cardkit.nodes.paywall import PaywallNode
from cardkit.nodes.product import ProductNode
from cardkit.nodes.signup import SignupNode
from cardkit.nodes.toggle import ToggleNode
from cardkit.nodes.video import VideoNode

DEFAULT_NODES: tuple[type, ...] = (
    TextNode,
    LineBreakNode,
    LinkNode,
    ParagraphNode,
    HeadingNode,
    QuoteNode,
    CodeBlockNode,
    ImageNode,
    MarkdownNode,
    VideoNode,
    AudioNode,
    CalloutNode,
    CallToActionNode,
    AsideNode,
    HorizontalRuleNode,
    HtmlNode,
    FileNode,
    ToggleNode,
    ButtonNode,
    HeaderNode,
    BookmarkNode,
    PaywallNode,
    ProductNode,
    EmbedNode,
    EmailNode,
    GalleryNode,
    EmailCtaNode,
    SignupNode,
    CollectionNode,
)


def build_node_map(nodes: Optional[Iterable[type]] = None) -> dict[str, type]:
    """Return ``{type tag: node class}`` for ``nodes`` (default: ``DEFAULT_NODES``).

    ``RootNode`` is always included. Plain ``text`` records load as
    ``TextNode``.
    """
    node_map: dict[str, Any] = {RootNode.node_type: RootNode}
    for node_class in nodes if nodes is not None else DEFAULT_NODES:
        node_map[node_class.node_type] = node_class
    if TextNode in node_map.values():
        node_map.setdefault("text", TextNode)
    return node_map


__all__ = [
    "DEFAULT_NODES",
    "AsideNode",
    "AudioNode",
    "BookmarkNode",
    "ButtonNode",
    "CallToActionNode",
    "CalloutNode",
    "CardNode",
    "CodeBlockNode",
    "CollectionNode",
    "ElementNode",
    "EmailCtaNode",
    "EmailNode",
    "EmbedNode",
    "FileNode",
    "GalleryNode",
    "HeaderNode",
    "HeadingNode",
    "HorizontalRuleNode",
    "HtmlNode",
    "ImageNode",
    "LineBreakNode",
    "LinkNode",
    "MarkdownNode",
    "ParagraphNode",
    "PaywallNode",
    "ProductNode",
    "PropertyDescriptor",
    "QuoteNode",
    "RootNode",
    "SignupNode",
    "TextNode",
    "ToggleNode",
    "VideoNode",
    "build_node_map",
    "define_node_type",
]
