#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/api.py
"""High-level entry points for importing, serializing and rendering documents.

Options may be passed as pre-built option objects, as keyword arguments, or
both; keyword arguments override the fields of the given options object.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Iterable, Mapping, Optional, TypeVar, Union

from cardkit.exceptions import CardkitError, ParsingError
from cardkit.nodes.elements import RootNode
from cardkit.options.base import CloneFrozenMixin
from cardkit.options.parse import ImportOptions
from cardkit.options.render import RenderOptions
from cardkit.parsers.html import HtmlImporter
from cardkit.renderers.html import HtmlDocumentRenderer
from cardkit.serialization import dump_document as _dump_document
from cardkit.serialization import load_document as _load_document

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _resolve_options(options_class: type[OptionsT], options: Optional[OptionsT], **kwargs: Any) -> OptionsT:
    """Merge keyword arguments into an options object, skipping unknown names."""
    option_names = {field.name for field in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown {options_class.__name__} options: {missing}")
    if options is None:
        return options_class(**valid_kwargs)
    if valid_kwargs:
        return options.create_updated(**valid_kwargs)
    return options


def html_to_document(
    html: str,
    *,
    import_options: Optional[ImportOptions] = None,
    nodes: Optional[Iterable[type]] = None,
    **kwargs: Any,
) -> RootNode:
    """Import an HTML fragment into a document.

    Parameters
    ----------
    html : str
        HTML fragment
    import_options : ImportOptions, optional
        Pre-configured import options
    nodes : iterable of type, optional
        Node classes whose import rules are registered; defaults to every
        built-in node type
    kwargs : Any
        Individual import options overriding ``import_options``

    Returns
    -------
    RootNode
        The imported document

    Raises
    ------
    ParsingError
        If the import fails unexpectedly, or in strict mode for unusable input

    Examples
    --------
        >>> root = html_to_document('<figure class="kg-card kg-image-card"><img src="/a.jpg"></figure>')
        >>> root.children[0].node_type
        'image'

    """
    options = _resolve_options(ImportOptions, import_options, **kwargs)
    try:
        return HtmlImporter(options, nodes).parse(html)
    except CardkitError:
        raise
    except Exception as e:
        raise ParsingError(f"HTML import failed: {e!r}", original_error=e) from e


def document_to_html(
    root: RootNode,
    *,
    render_options: Optional[RenderOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a document to HTML without fetching dynamic data.

    Dynamic-data cards read pre-fetched data from ``render_data`` and render
    empty when it is missing.

    Examples
    --------
        >>> document_to_html(root, target="email", post_url="https://example.com/post/")
        '<p>Hello</p>...'

    """
    options = _resolve_options(RenderOptions, render_options, **kwargs)
    return HtmlDocumentRenderer(options).render(root)


async def document_to_html_async(
    root: RootNode,
    *,
    render_options: Optional[RenderOptions] = None,
    **kwargs: Any,
) -> str:
    """Fetch dynamic data for the document, then render it to HTML.

    Examples
    --------
        >>> async def get_posts(collection, count):
        ...     return [{"title": "Hello", "url": "/hello/"}][:count]
        >>> asyncio.run(document_to_html_async(root, get_collection_posts=get_posts))

    """
    options = _resolve_options(RenderOptions, render_options, **kwargs)
    return await HtmlDocumentRenderer(options).render_async(root)


def load_document(
    data: Union[str, bytes, Mapping[str, Any]],
    *,
    nodes: Optional[Iterable[type]] = None,
    strict_mode: bool = True,
) -> RootNode:
    """Load a document from its JSON form; see :func:`cardkit.serialization.load_document`."""
    return _load_document(data, nodes, strict_mode=strict_mode)


def dump_document(root: RootNode, indent: Optional[int] = None) -> str:
    """Serialize a document to JSON; see :func:`cardkit.serialization.dump_document`."""
    return _dump_document(root, indent=indent)
