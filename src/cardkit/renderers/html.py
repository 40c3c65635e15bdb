#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/html.py
"""Document to HTML renderer.

Rendering runs in two phases:

1. :meth:`HtmlDocumentRenderer.collect_dynamic_data` walks the document and
   awaits ``get_dynamic_data`` for every node reporting dynamic data. The
   results are keyed by node key.
2. :meth:`HtmlDocumentRenderer.render` walks the document synchronously and
   splices each node's :class:`~cardkit.renderers.base.RenderOutput` into the
   output according to its mode. Dynamic-data nodes read their pre-fetched
   data from ``options.render_data``.

:meth:`HtmlDocumentRenderer.render_async` runs both phases.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterator, Optional

from cardkit.exceptions import CardkitError, RenderingError
from cardkit.nodes.elements import ElementNode, RootNode
from cardkit.options.render import RenderOptions
from cardkit.renderers.base import get_render_content
from cardkit.renderers.text import render_inline_html

logger = logging.getLogger(__name__)


def _is_inline(node: Any) -> bool:
    return bool(getattr(node, "is_inline", lambda: False)())


def iter_nodes(node: Any) -> Iterator[Any]:
    """Yield ``node`` and its descendants in document order."""
    yield node
    if isinstance(node, ElementNode):
        for child in node.children:
            yield from iter_nodes(child)


class HtmlDocumentRenderer:
    """Render documents to HTML for the web or email target.

    Parameters
    ----------
    options : RenderOptions, optional
        Render options shared by every node renderer

    Examples
    --------
        >>> renderer = HtmlDocumentRenderer(RenderOptions(target="email"))
        >>> html = renderer.render(root)
        >>> html = asyncio.run(renderer.render_async(root))

    """

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()

    def render(self, root: RootNode) -> str:
        """Render the top-level blocks of ``root`` and join their markup.

        Runs of inline nodes left at the top level are rendered as inline
        markup without a wrapper.

        Raises
        ------
        RenderingError
            If a node renderer fails and ``options.fail_on_render_errors``
            is set

        """
        parts: list[str] = []
        inline_run: list[Any] = []
        for child in root.children:
            if _is_inline(child):
                inline_run.append(child)
                continue
            if inline_run:
                parts.append(render_inline_html(inline_run, self.options))
                inline_run = []
            parts.append(self.render_node(child))
        if inline_run:
            parts.append(render_inline_html(inline_run, self.options))
        return "".join(parts)

    def render_node(self, node: Any) -> str:
        """Render a single block or card node to markup."""
        try:
            output = node.export_dom(self.options)
            return get_render_content(output)
        except CardkitError:
            raise
        except Exception as e:
            node_type = node.get_type() if hasattr(node, "get_type") else type(node).__name__
            if self.options.fail_on_render_errors:
                raise RenderingError(
                    f"Failed to render {node_type} node: {e!r}", node_type=node_type, original_error=e
                ) from e
            logger.warning("Failed to render %s node, emitting empty output: %r", node_type, e)
            return ""

    async def collect_dynamic_data(self, root: RootNode) -> dict[str, Any]:
        """Fetch dynamic data for every node that declares it.

        Fetches run concurrently. A failed fetch is logged and leaves its node
        without data, so the node renders empty.

        Returns
        -------
        dict
            Node key to fetched data

        Raises
        ------
        RenderingError
            If a fetch fails and ``options.fail_on_render_errors`` is set

        """
        nodes = [node for node in iter_nodes(root) if getattr(node, "has_dynamic_data", lambda: False)()]
        if not nodes:
            return {}

        results = await asyncio.gather(
            *(node.get_dynamic_data(self.options) for node in nodes), return_exceptions=True
        )

        render_data: dict[str, Any] = {}
        for node, result in zip(nodes, results):
            if isinstance(result, BaseException):
                # cancellation and interpreter exits are not fetch failures
                if not isinstance(result, Exception):
                    raise result
                if self.options.fail_on_render_errors:
                    raise RenderingError(
                        f"Failed to fetch dynamic data for {node.get_type()} node: {result!r}",
                        node_type=node.get_type(),
                        original_error=result,
                    ) from result
                logger.warning("Dynamic data fetch failed for %s node %s: %r", node.get_type(), node.key, result)
                continue
            if result is None:
                continue
            render_data[result["key"]] = result["data"]
        logger.debug("Collected dynamic data for %d of %d nodes", len(render_data), len(nodes))
        return render_data

    async def render_async(self, root: RootNode) -> str:
        """Fetch dynamic data, then render ``root`` with it merged into ``render_data``."""
        fetched = await self.collect_dynamic_data(root)
        if fetched:
            options = self.options.create_updated(render_data={**self.options.render_data, **fetched})
            return HtmlDocumentRenderer(options).render(root)
        return self.render(root)
