#  Copyright (c) 2025 Tom Villani, Ph.D.
"""cardkit - a card node document model for rich content.

A cardkit document is a tree of generic blocks (paragraphs, headings,
quotes) and *cards*: declaratively defined node variants such as images,
videos, code blocks, callouts, bookmarks, galleries and signup forms. Every
node can be

- imported from an HTML fragment,
- exported to and loaded from a JSON record,
- rendered to HTML for the ``web`` or ``email`` target.

Cards with restricted visibility are wrapped in gated-block markers for the
web and segmented for email; :mod:`cardkit.gating` evaluates those markers
for a member.

Examples
--------
Import, serialize and render a document:

    >>> from cardkit import html_to_document, dump_document, load_document, document_to_html
    >>> root = html_to_document('<p>Hello <strong>world</strong></p><hr>')
    >>> root = load_document(dump_document(root))
    >>> document_to_html(root)
    '<p>Hello <strong>world</strong></p><hr>'

Render for email:

    >>> document_to_html(root, target="email", post_url="https://example.com/hello/")

"""

__version__ = "0.1.0"

from cardkit.api import document_to_html, document_to_html_async, dump_document, html_to_document, load_document
from cardkit.exceptions import (
    CardkitError,
    ConfigurationError,
    ParsingError,
    RenderingError,
    SerializationError,
    UnknownNodeTypeError,
    ValidationError,
)
from cardkit.gating import check_gated_block_access, strip_gated_blocks
from cardkit.logging_utils import configure_logging
from cardkit.nodes import DEFAULT_NODES, build_node_map
from cardkit.nodes.base import CardNode, PropertyDescriptor, define_node_type
from cardkit.options import ImageOptimization, ImportOptions, RenderOptions
from cardkit.parsers.html import HtmlImporter
from cardkit.renderers.base import RenderOutput
from cardkit.renderers.html import HtmlDocumentRenderer

__all__ = [
    "__version__",
    # API
    "html_to_document",
    "document_to_html",
    "document_to_html_async",
    "load_document",
    "dump_document",
    # Pipeline
    "HtmlImporter",
    "HtmlDocumentRenderer",
    "RenderOutput",
    # Nodes
    "CardNode",
    "PropertyDescriptor",
    "define_node_type",
    "DEFAULT_NODES",
    "build_node_map",
    # Options
    "ImportOptions",
    "RenderOptions",
    "ImageOptimization",
    # Gating
    "check_gated_block_access",
    "strip_gated_blocks",
    # Logging
    "configure_logging",
    # Exceptions
    "CardkitError",
    "ConfigurationError",
    "ValidationError",
    "ParsingError",
    "RenderingError",
    "SerializationError",
    "UnknownNodeTypeError",
]
