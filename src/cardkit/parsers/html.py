#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/html.py
"""HTML to document importer.

This module walks an HTML fragment with BeautifulSoup and builds a document
tree of cards and element nodes. Every element is offered to the matchers
registered for its tag (see :mod:`cardkit.parsers.base`); elements no rule
claims are unwrapped and their children imported in their place.

Tree building follows the host-walker contract of the node types:

- a claimed element becomes a node; element nodes receive the nodes built
  from the element's children, cards ignore them
- ``for_child`` hooks of every enclosing conversion are applied to each node
  built beneath it (inline formats are applied this way)
- an ``after`` hook may rewrite the children before they are attached
- conversions may remove following siblings from the tree; the walk reads
  the next sibling only after a conversion has run

Inline nodes left at the top level are wrapped in paragraphs, and blocks
nested inside paragraphs or other blocks are lifted out beside them.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable, Optional

from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag
from bs4.exceptions import FeatureNotFound

from cardkit.exceptions import ParsingError
from cardkit.nodes import DEFAULT_NODES
from cardkit.nodes.elements import ElementNode, ParagraphNode, RootNode, TextNode
from cardkit.options.parse import ImportOptions
from cardkit.parsers.base import ConversionRegistry

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"[\t\n\r\f ]+")

SKIPPED_TAGS = frozenset({"script", "style", "head", "title", "meta", "link", "template"})
PREFORMATTED_TAGS = frozenset({"pre", "textarea"})

ForChildHook = Callable[[Any, Any], Any]


def _is_inline(node: Any) -> bool:
    return bool(getattr(node, "is_inline", lambda: False)())


def _is_preformatted(text: NavigableString) -> bool:
    return any(parent.name in PREFORMATTED_TAGS for parent in text.parents if isinstance(parent, Tag))


class HtmlImporter:
    """Import HTML fragments into documents.

    Parameters
    ----------
    options : ImportOptions, optional
        Import options
    nodes : iterable of type, optional
        Node classes whose import rules are registered, in order. Defaults to
        ``DEFAULT_NODES``.

    Examples
    --------
        >>> importer = HtmlImporter()
        >>> root = importer.parse('<p>Hello <strong>world</strong></p><hr>')
        >>> [child.node_type for child in root.children]
        ['paragraph', 'horizontalrule']

    """

    def __init__(self, options: Optional[ImportOptions] = None, nodes: Optional[Iterable[type]] = None):
        self.options = options or ImportOptions()
        self.registry = ConversionRegistry()
        self.registry.register_all(nodes if nodes is not None else DEFAULT_NODES)

    def parse(self, html: str) -> RootNode:
        """Parse an HTML fragment into a document root.

        Parameters
        ----------
        html : str
            The HTML fragment

        Returns
        -------
        RootNode
            Document root holding the imported blocks and cards

        Raises
        ------
        ParsingError
            If the configured tree builder is not installed, or, in strict
            mode, if the input is not a string or produces no nodes

        """
        if not isinstance(html, str):
            if self.options.strict:
                raise ParsingError(f"Expected an HTML string, got {type(html).__name__}")
            logger.warning("Ignoring non-string HTML input of type %s", type(html).__name__)
            return RootNode()

        try:
            soup = BeautifulSoup(html, self.options.parser)
        except FeatureNotFound as e:
            raise ParsingError(f"HTML tree builder not available: {self.options.parser}", original_error=e) from e

        body = soup.find("body")
        container = body if isinstance(body, Tag) else soup
        children = self._convert_children(container, [], None)
        root = RootNode(children=self._wrap_inline_runs(children))

        if self.options.strict and not root.children and html.strip():
            raise ParsingError("HTML input produced no document nodes")
        logger.debug("Imported %d top-level nodes", len(root.children))
        return root

    def _convert_children(self, dom_node: Tag, hooks: list[ForChildHook], parent: Any) -> list[Any]:
        nodes: list[Any] = []
        child = next(iter(dom_node.contents), None)
        while child is not None:
            nodes.extend(self._convert(child, hooks, parent))
            # conversions may extract following siblings, so read this afterwards
            child = child.next_sibling
        return self._drop_whitespace_between_blocks(nodes)

    @staticmethod
    def _drop_whitespace_between_blocks(nodes: list[Any]) -> list[Any]:
        """Drop whitespace-only text that sits next to a block (source formatting)."""
        kept: list[Any] = []
        for index, node in enumerate(nodes):
            if isinstance(node, TextNode) and not node.text.strip():
                previous = nodes[index - 1] if index > 0 else None
                following = nodes[index + 1] if index + 1 < len(nodes) else None
                if any(sibling is not None and not _is_inline(sibling) for sibling in (previous, following)):
                    continue
            kept.append(node)
        return kept

    def _convert(self, dom_node: Any, hooks: list[ForChildHook], parent: Any) -> list[Any]:
        if isinstance(dom_node, (CData, Declaration, Doctype, ProcessingInstruction)):
            return []

        if isinstance(dom_node, NavigableString) and not isinstance(dom_node, Comment):
            node = self._convert_text(dom_node)
            return [self._apply_hooks(node, hooks, parent)] if node is not None else []

        if isinstance(dom_node, Tag) and dom_node.name in SKIPPED_TAGS:
            return []

        result = self.registry.convert(dom_node)
        node = result.node if result is not None else None
        if node is not None:
            node = self._apply_hooks(node, hooks, parent)

        if not isinstance(dom_node, Tag):
            return [node] if node is not None else []

        # cards are leaves; their markup has been read by the conversion
        if node is not None and not isinstance(node, ElementNode):
            return [node]

        child_hooks = hooks + [result.for_child] if result is not None and result.for_child else hooks
        children = self._convert_children(dom_node, child_hooks, node if node is not None else parent)
        if result is not None and result.after is not None:
            children = result.after(children)

        if node is None:
            return children
        return self._attach_children(node, children)

    @staticmethod
    def _apply_hooks(node: Any, hooks: list[ForChildHook], parent: Any) -> Any:
        for hook in hooks:
            node = hook(node, parent)
        return node

    @staticmethod
    def _convert_text(text: NavigableString) -> Optional[TextNode]:
        value = str(text)
        if not _is_preformatted(text):
            value = _WHITESPACE_RE.sub(" ", value)
        if not value:
            return None
        return TextNode(text=value)

    def _attach_children(self, node: ElementNode, children: list[Any]) -> list[Any]:
        """Attach children to ``node``, lifting out blocks that cannot nest inside it."""
        if all(_is_inline(child) for child in children):
            node.append(*self._trim_inline_run(children))
            return [node] if self._keep_element(node) else []

        produced: list[Any] = []
        run: list[Any] = []
        current = node
        for child in children:
            if _is_inline(child):
                run.append(child)
                continue
            if run or current is node:
                current.append(*self._trim_inline_run(run))
                if self._keep_element(current):
                    produced.append(current)
            run = []
            produced.append(child)
            current = type(node)(**self._clone_fields(node))
        current.append(*self._trim_inline_run(run))
        if run and self._keep_element(current):
            produced.append(current)
        return produced

    @staticmethod
    def _clone_fields(node: ElementNode) -> dict[str, Any]:
        fields = {"direction": node.direction, "format": node.format, "indent": node.indent}
        for name in ("tag", "url", "rel", "target", "title"):
            if hasattr(node, name):
                fields[name] = getattr(node, name)
        return fields

    def _keep_element(self, node: ElementNode) -> bool:
        if node.children:
            return True
        return isinstance(node, ParagraphNode) and self.options.keep_empty_paragraphs

    @staticmethod
    def _trim_inline_run(run: list[Any]) -> list[Any]:
        """Strip whitespace at the edges of a block's inline run and drop empty text."""
        nodes = list(run)
        if nodes and isinstance(nodes[0], TextNode):
            nodes[0].text = nodes[0].text.lstrip(" ")
        if nodes and isinstance(nodes[-1], TextNode):
            nodes[-1].text = nodes[-1].text.rstrip(" ")
        trimmed: list[Any] = []
        for node in nodes:
            if isinstance(node, TextNode):
                if not node.text:
                    continue
                previous = trimmed[-1] if trimmed else None
                if isinstance(previous, TextNode) and previous.text.endswith(" ") and node.text.startswith(" "):
                    node.text = node.text[1:]
                    if not node.text:
                        continue
            trimmed.append(node)
        return trimmed

    def _wrap_inline_runs(self, nodes: list[Any]) -> list[Any]:
        """Wrap runs of top-level inline nodes in paragraphs; whitespace-only runs are dropped."""
        blocks: list[Any] = []
        run: list[Any] = []

        def flush() -> None:
            content = self._trim_inline_run(run)
            if content:
                blocks.append(ParagraphNode(children=content))
            run.clear()

        for node in nodes:
            if _is_inline(node):
                run.append(node)
            else:
                flush()
                blocks.append(node)
        flush()
        return blocks


def html_to_root(html: str, options: Optional[ImportOptions] = None) -> RootNode:
    """Import ``html`` with the default node types."""
    return HtmlImporter(options).parse(html)
