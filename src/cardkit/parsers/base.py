#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/base.py
"""Tag-indexed conversion rules for importing HTML into nodes.

Each node class exposes ``import_dom()``, a map from tag name (``"#comment"``
for comments) to a *matcher*. A matcher receives a candidate element and
either declines with ``None`` or returns a :class:`DomConversion`: the
extraction function plus the priority used to order it against the other
rules claiming the same tag.

:class:`ConversionRegistry` gathers the matchers of every registered node
class. For a given element it evaluates only the matchers for that element's
tag, orders the accepted rules by descending priority (ties keep
registration order) and returns the first successful extraction. An
extraction that returns ``None`` declines as well, so the next rule gets its
turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Union

from bs4 import Comment, NavigableString, Tag

logger = logging.getLogger(__name__)

DomElement = Union[Tag, NavigableString]


@dataclass
class ConversionResult:
    """Output of a successful extraction.

    Parameters
    ----------
    node : Any
        The created node, or None when the element should be dropped
    after : callable, optional
        Post-processing hook receiving the nodes produced from the element's
        children and returning the nodes to keep
    for_child : callable, optional
        Hook applied to every node produced from the element's children

    """

    node: Any = None
    after: Optional[Callable[[list[Any]], list[Any]]] = None
    for_child: Optional[Callable[[Any, Any], Any]] = None


@dataclass
class DomConversion:
    """A conversion rule accepted by a matcher.

    Parameters
    ----------
    conversion : callable
        ``(element) -> ConversionResult | None``
    priority : int, default=0
        Ordering key among rules for the same tag; higher runs first

    """

    conversion: Callable[[DomElement], Optional[ConversionResult]]
    priority: int = 0


DomMatcher = Callable[[DomElement], Optional[DomConversion]]
DomConversionMap = dict[str, DomMatcher]


def tag_key(element: DomElement) -> Optional[str]:
    """Return the dispatch key of an element: its tag name or ``#comment``."""
    if isinstance(element, Comment):
        return "#comment"
    if isinstance(element, Tag):
        return element.name
    return None


@dataclass
class _RegisteredMatcher:
    matcher: DomMatcher
    source: str
    order: int


@dataclass
class ConversionRegistry:
    """Registry of tag-indexed matchers for a set of node classes."""

    _matchers: dict[str, list[_RegisteredMatcher]] = field(default_factory=dict)
    _count: int = 0

    def register(self, node_class: Any) -> None:
        """Register every matcher of ``node_class.import_dom()``."""
        for tag, matcher in node_class.import_dom().items():
            self.add(tag, matcher, source=getattr(node_class, "node_type", "") or node_class.__name__)

    def register_all(self, node_classes: Iterable[Any]) -> None:
        """Register several node classes in order."""
        for node_class in node_classes:
            self.register(node_class)

    def add(self, tag: str, matcher: DomMatcher, source: str = "") -> None:
        """Register a single matcher for ``tag``."""
        self._matchers.setdefault(tag.lower(), []).append(_RegisteredMatcher(matcher, source, self._count))
        self._count += 1

    def tags(self) -> list[str]:
        """Return the tags that have at least one matcher."""
        return sorted(self._matchers)

    def candidates(self, element: DomElement) -> list[DomConversion]:
        """Return the accepted rules for ``element`` in evaluation order."""
        key = tag_key(element)
        if key is None:
            return []
        accepted: list[tuple[int, int, DomConversion]] = []
        for registered in self._matchers.get(key, []):
            rule = registered.matcher(element)
            if rule is None:
                continue
            accepted.append((-rule.priority, registered.order, rule))
        accepted.sort(key=lambda item: (item[0], item[1]))
        return [rule for _, _, rule in accepted]

    def convert(self, element: DomElement) -> Optional[ConversionResult]:
        """Run the accepted rules for ``element`` until one extracts a result."""
        for rule in self.candidates(element):
            result = rule.conversion(element)
            if result is not None:
                return result
            logger.debug("Conversion for <%s> declined at priority %s", tag_key(element), rule.priority)
        return None
