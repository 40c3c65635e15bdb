#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/utils/dom.py
"""Document facility built on BeautifulSoup.

Renderers build their output with BeautifulSoup tags and parsers inspect
live BeautifulSoup elements. This module centralizes the few operations
both sides need that bs4 does not expose directly in browser terms:
inner/outer markup, assigning inner markup, class lists, and integer
attributes.

Serialization uses a formatter that writes void elements without a closing
slash, keeps attributes in insertion order and emits non-breaking spaces as
``&nbsp;``, matching how browsers serialize ``outerHTML``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

if TYPE_CHECKING:
    from cardkit.options.base import BaseRendererOptions


def _substitute_entities(value: str) -> str:
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


class _CardFormatter(HTMLFormatter):
    """HTML formatter that writes attributes in the order they were set."""

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return [
            (key, None if self.empty_attributes_are_booleans and value == "" else value)
            for key, value in tag.attrs.items()
        ]


CARD_FORMATTER = _CardFormatter(entity_substitution=_substitute_entities, void_element_close_prefix=None)


def create_document(options: Optional["BaseRendererOptions"] = None) -> BeautifulSoup:
    """Return a document used to create output elements.

    Parameters
    ----------
    options : BaseRendererOptions, optional
        Render options; ``options.create_document`` is used when set.

    Returns
    -------
    BeautifulSoup
        An empty document

    """
    factory: Optional[Callable[[], BeautifulSoup]] = getattr(options, "create_document", None)
    if factory is not None:
        return factory()
    return BeautifulSoup("", "html.parser")


def parse_fragment(html: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse an HTML fragment into a document whose top-level contents are the fragment nodes."""
    return BeautifulSoup(html or "", parser)


def outer_html(node: Tag | NavigableString) -> str:
    """Serialize a node including its own tag."""
    if isinstance(node, Comment):
        return f"<!--{node}-->"
    if isinstance(node, NavigableString):
        return _substitute_entities(str(node))
    return node.decode(formatter=CARD_FORMATTER)


def inner_html(tag: Tag) -> str:
    """Serialize the children of a tag."""
    return tag.decode_contents(formatter=CARD_FORMATTER)


def set_inner_html(tag: Tag, html: str) -> Tag:
    """Replace the children of ``tag`` with the nodes parsed from ``html``.

    Returns
    -------
    Tag
        The same tag, for chaining

    """
    tag.clear()
    fragment = parse_fragment(html)
    for child in list(fragment.contents):
        tag.append(child.extract())
    return tag


def element_from_html(html: str) -> Optional[Tag]:
    """Parse ``html`` and return its first element, detached from the fragment."""
    fragment = parse_fragment(html)
    element = first_element_child(fragment)
    if element is None:
        return None
    return element.extract()


def first_element_child(tag: Tag) -> Optional[Tag]:
    """Return the first child of ``tag`` that is an element."""
    for child in tag.children:
        if isinstance(child, Tag):
            return child
    return None


def element_children(tag: Tag) -> list[Tag]:
    """Return the element children of ``tag``."""
    return [child for child in tag.children if isinstance(child, Tag)]


def next_element_sibling(tag: Tag) -> Optional[Tag]:
    """Return the next sibling of ``tag`` that is an element."""
    sibling = tag.next_sibling
    while sibling is not None and not isinstance(sibling, Tag):
        sibling = sibling.next_sibling
    return sibling


def class_list(tag: Tag) -> list[str]:
    """Return the classes of ``tag`` whether parsed as a list or set as a string."""
    value = tag.get("class")
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def class_name(tag: Tag) -> str:
    """Return the class attribute of ``tag`` as a single string."""
    return " ".join(class_list(tag))


def has_class(tag: Tag, *names: str) -> bool:
    """Return whether ``tag`` has every class in ``names``."""
    classes = class_list(tag)
    return all(name in classes for name in names)


def add_class(tag: Tag, *names: str) -> None:
    """Append classes to ``tag`` keeping the existing order."""
    classes = class_list(tag)
    for name in names:
        if name not in classes:
            classes.append(name)
    tag["class"] = classes


def get_int_attribute(tag: Tag, name: str) -> Optional[int]:
    """Read an integer attribute, returning ``None`` when absent or not numeric."""
    value = tag.get(name)
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        try:
            return int(float(str(value).strip()))
        except ValueError:
            return None


def text_content(node: Tag | NavigableString | None) -> str:
    """Return the text of a node, the way ``textContent`` does."""
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return "" if isinstance(node, Comment) else str(node)
    return node.get_text()


def find_ancestor(tag: Tag, name: str) -> Optional[Tag]:
    """Return the closest ancestor (excluding ``tag``) with the given tag name."""
    parent = tag.parent
    while parent is not None:
        if parent.name == name:
            return parent
        parent = parent.parent
    return None


def new_element(document: BeautifulSoup, name: str, attrs: Optional[dict] = None, text: Optional[str] = None) -> Tag:
    """Create an element with optional attributes and text content.

    Attributes are assigned one by one after the tag exists so they serialize
    in the given order. A ``class`` string is stored as a list of classes, the
    way parsed elements carry it.
    """
    element = document.new_tag(name)
    for attr_name, value in (attrs or {}).items():
        if attr_name == "class" and isinstance(value, str) and value.strip():
            value = value.split()
        element[attr_name] = value
    if text is not None:
        element.string = text
    return element


def append_all(parent: Tag, children: Iterable[Tag | NavigableString]) -> Tag:
    """Append every child to ``parent`` and return ``parent``."""
    for child in children:
        parent.append(child)
    return parent


def style_declarations(tag: Tag) -> dict[str, str]:
    """Parse the inline ``style`` attribute of ``tag`` into ``{property: value}``.

    Property names are lowercased; later declarations override earlier ones.
    """
    declarations: dict[str, str] = {}
    for declaration in str(tag.get("style") or "").split(";"):
        name, separator, value = declaration.partition(":")
        if separator and name.strip():
            declarations[name.strip().lower()] = value.strip()
    return declarations


def get_style_property(tag: Optional[Tag], name: str) -> str:
    """Return one inline style property of ``tag``, or ``""`` when unset."""
    if tag is None:
        return ""
    return style_declarations(tag).get(name.lower(), "")
