#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/elements.py
"""Generic element nodes surrounding the cards in a document.

Cards are leaf blocks. Everything else in a document is built from these
element nodes:

Block-level nodes hold inline children:
    - ParagraphNode, HeadingNode, QuoteNode, AsideNode

Inline nodes make up the text runs rendered by the inline text renderer:
    - TextNode (a run of text with a format bitset)
    - LineBreakNode
    - LinkNode (holds its own inline children)

Records use the same ``{type, version, ...}`` shape as cards, with element
nodes adding a ``children`` list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Optional

from cardkit.constants import TEXT_FORMATS
from cardkit.nodes.base import new_key
from cardkit.parsers.elements import (
    parse_aside_node,
    parse_heading_node,
    parse_linebreak_node,
    parse_link_node,
    parse_paragraph_node,
    parse_quote_node,
    parse_text_node,
)
from cardkit.renderers.elements import (
    render_aside_node,
    render_heading_node,
    render_paragraph_node,
    render_quote_node,
)


@dataclass
class TextNode:
    """A run of text with a format bitset.

    Parameters
    ----------
    text : str
        The run's text
    format : int, default=0
        Bitwise OR of the ``IS_*`` format flags

    """

    node_type: ClassVar[str] = "extended-text"
    version: ClassVar[int] = 1

    text: str = ""
    format: int = 0
    style: str = ""
    mode: str = "normal"
    detail: int = 0
    key: str = field(default_factory=new_key, compare=False, repr=False)

    @classmethod
    def get_type(cls) -> str:
        return cls.node_type

    def has_format(self, name: str) -> bool:
        """Return whether the named format (e.g. ``"bold"``) is set."""
        return bool(self.format & TEXT_FORMATS[name])

    def toggle_format(self, name: str) -> "TextNode":
        self.format ^= TEXT_FORMATS[name]
        return self

    def is_inline(self) -> bool:
        return True

    def is_simple_text(self) -> bool:
        return self.mode == "normal"

    def get_text_content(self) -> str:
        return self.text

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "TextNode":
        return cls(
            text=record.get("text") or "",
            format=int(record.get("format") or 0),
            style=record.get("style") or "",
            mode=record.get("mode") or "normal",
            detail=int(record.get("detail") or 0),
        )

    def export_json(self) -> dict[str, Any]:
        return {
            "detail": self.detail,
            "format": self.format,
            "mode": self.mode,
            "style": self.style,
            "text": self.text,
            "type": self.node_type,
            "version": self.version,
        }

    @classmethod
    def import_dom(cls):
        return parse_text_node(cls)


@dataclass
class LineBreakNode:
    """A hard line break inside inline content."""

    node_type: ClassVar[str] = "linebreak"
    version: ClassVar[int] = 1

    key: str = field(default_factory=new_key, compare=False, repr=False)

    @classmethod
    def get_type(cls) -> str:
        return cls.node_type

    def is_inline(self) -> bool:
        return True

    def get_text_content(self) -> str:
        return "\n"

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "LineBreakNode":
        return cls()

    def export_json(self) -> dict[str, Any]:
        return {"type": self.node_type, "version": self.version}

    @classmethod
    def import_dom(cls):
        return parse_linebreak_node(cls)


@dataclass
class ElementNode:
    """Base class for nodes holding an ordered list of children.

    Parameters
    ----------
    children : list, default=[]
        Child nodes; inline nodes for every element type defined here
    direction : str, optional
        Text direction, ``"ltr"`` or ``"rtl"``
    format : str, default=""
        Block alignment format
    indent : int, default=0
        Indentation level

    """

    node_type: ClassVar[str] = ""
    version: ClassVar[int] = 1

    children: list[Any] = field(default_factory=list)
    direction: Optional[str] = None
    format: str = ""
    indent: int = 0
    key: str = field(default_factory=new_key, compare=False, repr=False)

    @classmethod
    def get_type(cls) -> str:
        return cls.node_type

    def append(self, *nodes: Any) -> "ElementNode":
        self.children.extend(nodes)
        return self

    def is_inline(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return not self.children

    def get_text_content(self) -> str:
        return "".join(child.get_text_content() for child in self.children)

    @classmethod
    def _element_fields(cls, record: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "direction": record.get("direction"),
            "format": record.get("format") or "",
            "indent": int(record.get("indent") or 0),
        }

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "ElementNode":
        """Create the node from a record; children are attached by the caller."""
        return cls(**cls._element_fields(record))

    def export_json(self) -> dict[str, Any]:
        return {
            "children": [child.export_json() for child in self.children],
            "direction": self.direction,
            "format": self.format,
            "indent": self.indent,
            "type": self.node_type,
            "version": self.version,
        }


@dataclass
class LinkNode(ElementNode):
    """An inline hyperlink wrapping its own inline children."""

    node_type: ClassVar[str] = "link"

    url: str = ""
    rel: Optional[str] = None
    target: Optional[str] = None
    title: Optional[str] = None

    def is_inline(self) -> bool:
        return True

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "LinkNode":
        return cls(
            url=record.get("url") or "",
            rel=record.get("rel"),
            target=record.get("target"),
            title=record.get("title"),
            **cls._element_fields(record),
        )

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record.update({"rel": self.rel, "target": self.target, "title": self.title, "url": self.url})
        return record

    @classmethod
    def import_dom(cls):
        return parse_link_node(cls)


@dataclass
class ParagraphNode(ElementNode):
    node_type: ClassVar[str] = "paragraph"

    @classmethod
    def import_dom(cls):
        return parse_paragraph_node(cls)

    def export_dom(self, options):
        return render_paragraph_node(self, options)


@dataclass
class HeadingNode(ElementNode):
    """A heading; ``tag`` is one of ``h1`` to ``h6``."""

    node_type: ClassVar[str] = "extended-heading"

    tag: str = "h1"

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "HeadingNode":
        return cls(tag=record.get("tag") or "h1", **cls._element_fields(record))

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record["tag"] = self.tag
        return record

    @classmethod
    def import_dom(cls):
        return parse_heading_node(cls)

    def export_dom(self, options):
        return render_heading_node(self, options)


@dataclass
class QuoteNode(ElementNode):
    node_type: ClassVar[str] = "extended-quote"

    @classmethod
    def import_dom(cls):
        return parse_quote_node(cls, LineBreakNode)

    def export_dom(self, options):
        return render_quote_node(self, options)


@dataclass
class AsideNode(ElementNode):
    """A pull quote, written as ``blockquote.kg-blockquote-alt``."""

    node_type: ClassVar[str] = "aside"

    @classmethod
    def url_transform_map(cls) -> dict[str, Any]:
        return {}

    @classmethod
    def import_dom(cls):
        return parse_aside_node(cls, LineBreakNode)

    def export_dom(self, options):
        return render_aside_node(self, options)


@dataclass
class RootNode(ElementNode):
    """The document root; its children are the top-level blocks and cards."""

    node_type: ClassVar[str] = "root"

    def get_text_content(self) -> str:
        return "\n\n".join(child.get_text_content() for child in self.children)

