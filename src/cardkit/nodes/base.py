#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/base.py
"""Schema-driven card node types.

Every card variant is a :class:`CardNode` subclass whose behaviour is driven
by a tuple of :class:`PropertyDescriptor` entries. The descriptors define:

- the constructor's default-filling rules
- the dataset and persisted record shapes
- the URL-rewrite map consumed by external URL rewriting
- which properties contribute to the word count

Variants are declared with class keywords::

    class ButtonNode(CardNode, node_type="button", properties=(
        PropertyDescriptor("buttonText", ""),
        PropertyDescriptor("alignment", "center"),
        PropertyDescriptor("buttonUrl", "", url_type="url"),
    )):
        buttonText: str
        alignment: str
        buttonUrl: str

or generated at runtime with :func:`define_node_type`. Both paths validate
the schema when the class is created and raise ``ConfigurationError`` for
bad definitions.

Constructor defaults
--------------------
Boolean defaults keep any explicitly provided value (including ``False``);
every other default replaces any *falsy* provided value, so ``0`` and ``""``
fall back to the default. Lists and dicts are truthy even when empty.
"""

from __future__ import annotations

import copy
import logging
import math
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Mapping, Optional

from cardkit.constants import URL_TYPES
from cardkit.exceptions import ConfigurationError
from cardkit.visibility import (
    build_default_visibility,
    is_visibility_active,
    migrate_old_visibility_format,
    uses_old_visibility_format,
)

if TYPE_CHECKING:
    from cardkit.options.render import RenderOptions
    from cardkit.parsers.base import DomConversionMap
    from cardkit.renderers.base import RenderOutput

logger = logging.getLogger(__name__)

_MISSING: Any = object()


@dataclass(frozen=True)
class PropertyDescriptor:
    """Static description of one card property.

    Parameters
    ----------
    name : str
        Property name, used verbatim as the dataset and record key
    default : Any
        Default value. Lists and dicts are deep-copied for every instance.
    url_type : {"url", "html", "markdown"}, optional
        Kind of URL content the property holds, for URL rewriting
    url_path : str, optional
        Dotted location of the URL in the exported record, when it differs
        from ``name`` (e.g. ``"metadata.icon"``)
    word_count : bool, default=False
        Whether the property's text counts toward the word count
    default_factory : callable, optional
        Builds the default for every access instead of ``default``

    """

    name: str = ""
    default: Any = _MISSING
    url_type: Optional[str] = None
    url_path: Optional[str] = None
    word_count: Any = False
    default_factory: Optional[Callable[[], Any]] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PropertyDescriptor":
        """Build a descriptor from a ``{"name", "default", ...}`` mapping."""
        return cls(
            name=mapping.get("name", ""),
            default=mapping.get("default", _MISSING),
            url_type=mapping.get("urlType", mapping.get("url_type")),
            url_path=mapping.get("urlPath", mapping.get("url_path")),
            word_count=mapping.get("wordCount", mapping.get("word_count", False)),
        )

    @property
    def has_default(self) -> bool:
        """Return whether a default value or factory was given."""
        return self.default is not _MISSING or self.default_factory is not None

    def get_default(self) -> Any:
        """Return a fresh default value."""
        if self.default_factory is not None:
            return self.default_factory()
        if isinstance(self.default, (list, dict)):
            return copy.deepcopy(self.default)
        return self.default

    @property
    def is_boolean(self) -> bool:
        """Return whether the default is a boolean, which selects ``??`` filling."""
        return isinstance(self.default, bool)


VISIBILITY_PROPERTY = PropertyDescriptor("visibility", None, default_factory=build_default_visibility)


def is_truthy(value: Any) -> bool:
    """Return whether ``value`` is truthy under the record format's rules.

    ``None``, ``False``, ``0``, NaN and ``""`` are falsy; containers are
    always truthy, even when empty.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def validate_node_type(node_type: str, properties: Iterable[PropertyDescriptor]) -> None:
    """Validate a node type schema.

    Raises
    ------
    ConfigurationError
        If ``node_type`` is empty, a property lacks a name or a default,
        ``url_type`` is not a known kind, or ``word_count`` is not boolean.

    """
    if not node_type:
        raise ConfigurationError('A unique "node_type" should be provided', parameter_name="node_type")
    for prop in properties:
        if not prop.name or not prop.has_default:
            raise ConfigurationError(
                'Properties should have both "name" and "default" attributes.',
                parameter_name="properties",
                parameter_value=prop,
            )
        if prop.url_type and prop.url_type not in URL_TYPES:
            raise ConfigurationError(
                '"url_type" should be either "url", "html" or "markdown"',
                parameter_name=prop.name,
                parameter_value=prop.url_type,
            )
        if not isinstance(prop.word_count, bool):
            raise ConfigurationError(
                '"word_count" should be of boolean type.', parameter_name=prop.name, parameter_value=prop.word_count
            )


def new_key() -> str:
    """Return a new opaque node key."""
    return uuid.uuid4().hex


def read_text_content(value: Any) -> str:
    """Return the word-count text of a property value.

    Strings are used as-is, numbers are stringified and nested content
    (anything with ``get_text_content()``) contributes its own text.
    """
    if not is_truthy(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    getter = getattr(value, "get_text_content", None)
    if callable(getter):
        return getter()
    return ""


class CardNode:
    """Base class for all card node variants.

    Subclasses declare their schema with the ``node_type``, ``properties``,
    ``version`` and ``has_visibility`` class keywords.

    Parameters
    ----------
    data : Mapping, optional
        Dataset of property values; missing or falsy values are filled from
        the property defaults
    key : str, optional
        Node key; a new one is generated when omitted

    """

    node_type: ClassVar[str] = ""
    version: ClassVar[int] = 1
    properties: ClassVar[tuple[PropertyDescriptor, ...]] = ()
    has_visibility: ClassVar[bool] = False

    key: str

    def __init_subclass__(
        cls,
        node_type: Optional[str] = None,
        properties: Optional[Iterable[PropertyDescriptor | Mapping[str, Any]]] = None,
        version: Optional[int] = None,
        has_visibility: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if node_type is None and properties is None:
            # plain subclass of an existing variant; inherits its schema
            return

        descriptors = tuple(
            prop if isinstance(prop, PropertyDescriptor) else PropertyDescriptor.from_mapping(prop)
            for prop in (properties if properties is not None else cls.properties)
        )
        resolved_type = node_type if node_type is not None else cls.node_type
        validate_node_type(resolved_type, descriptors)

        cls.node_type = resolved_type
        if version is not None:
            cls.version = version
        if has_visibility is not None:
            cls.has_visibility = has_visibility
        if cls.has_visibility and not any(prop.name == "visibility" for prop in descriptors):
            descriptors = descriptors + (VISIBILITY_PROPERTY,)
        cls.properties = descriptors

    def __init__(self, data: Optional[Mapping[str, Any]] = None, key: Optional[str] = None):
        data = data or {}
        self.key = key or new_key()
        for prop in self.properties:
            value = data.get(prop.name)
            if prop.is_boolean:
                value = prop.get_default() if value is None else value
            elif not is_truthy(value):
                value = prop.get_default()
            setattr(self, prop.name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"

    @classmethod
    def get_type(cls) -> str:
        """Return the variant's unique type tag."""
        return cls.node_type

    @classmethod
    def clone(cls, node: "CardNode") -> "CardNode":
        """Return a copy of ``node`` with a shallow copy of its dataset and the same key."""
        return cls(node.get_dataset(), key=node.key)

    @classmethod
    def get_property_defaults(cls) -> dict[str, Any]:
        """Return ``{name: default}`` for every property."""
        return {prop.name: prop.get_default() for prop in cls.properties}

    @classmethod
    def url_transform_map(cls) -> dict[str, Any]:
        """Return the URL-rewrite map keyed by ``url_path`` or property name."""
        return {(prop.url_path or prop.name): prop.url_type for prop in cls.properties if prop.url_type}

    def get_dataset(self) -> dict[str, Any]:
        """Return the current property values."""
        return {prop.name: getattr(self, prop.name) for prop in self.properties}

    @classmethod
    def import_json(cls, record: Mapping[str, Any]) -> "CardNode":
        """Create a node from a persisted record.

        A legacy-shaped ``visibility`` descriptor in ``record`` is migrated in
        place before its properties are read.
        """
        visibility = record.get("visibility")
        if isinstance(visibility, dict) and uses_old_visibility_format(visibility):
            migrate_old_visibility_format(visibility)
        return cls({prop.name: record.get(prop.name) for prop in cls.properties})

    def export_json(self) -> dict[str, Any]:
        """Return the persisted record ``{type, version, **properties}``."""
        record: dict[str, Any] = {"type": self.node_type, "version": self.version}
        for prop in self.properties:
            record[prop.name] = getattr(self, prop.name)
        return record

    def has_dynamic_data(self) -> bool:
        """Return whether rendering needs data fetched in a separate phase."""
        return False

    def has_edit_mode(self) -> bool:
        """Return whether the card has an edit mode in an editor."""
        return True

    def is_empty(self) -> bool:
        """Return whether the card has no meaningful content."""
        return False

    def is_inline(self) -> bool:
        """Cards are top-level blocks."""
        return False

    def get_text_content(self) -> str:
        """Return the text of word-counted properties, newline-joined and followed by a blank line."""
        parts = [read_text_content(getattr(self, prop.name)) for prop in self.properties if prop.word_count]
        text = "\n".join(part for part in parts if part)
        return f"{text}\n\n" if text else ""

    def get_is_visibility_active(self) -> bool:
        """Return whether the node's visibility differs from fully open.

        Always False for variants without a visibility property.
        """
        if not any(prop.name == "visibility" for prop in self.properties):
            return False
        visibility = getattr(self, "visibility", None)
        if not isinstance(visibility, dict):
            return False
        return is_visibility_active(visibility)

    @classmethod
    def import_dom(cls) -> "DomConversionMap":
        """Return the tag name to conversion matcher map for this variant."""
        return {}

    def export_dom(self, options: "RenderOptions") -> "RenderOutput":
        """Render the node for ``options.target``."""
        raise NotImplementedError(f"{type(self).__name__} does not implement export_dom")


def define_node_type(
    node_type: str,
    properties: Iterable[PropertyDescriptor | Mapping[str, Any]] = (),
    version: int = 1,
    has_visibility: bool = False,
    *,
    name: Optional[str] = None,
    base: type[CardNode] = CardNode,
    namespace: Optional[Mapping[str, Any]] = None,
) -> type[CardNode]:
    """Generate a card node type from a property schema.

    Parameters
    ----------
    node_type : str
        Unique type tag
    properties : iterable
        ``PropertyDescriptor`` instances or ``{"name", "default", "urlType",
        "urlPath", "wordCount"}`` mappings
    version : int, default=1
        Record schema version
    has_visibility : bool, default=False
        Append a ``visibility`` property with a fresh default descriptor
    name : str, optional
        Class name; derived from ``node_type`` when omitted
    base : type, default=CardNode
        Base class for the generated type
    namespace : Mapping, optional
        Extra class attributes and methods

    Returns
    -------
    type[CardNode]
        The generated node class

    Raises
    ------
    ConfigurationError
        If the schema is invalid

    Examples
    --------
        >>> Note = define_node_type("note", [{"name": "text", "default": "", "wordCount": True}])
        >>> Note({"text": "hello"}).get_text_content()
        'hello\\n\\n'

    """
    class_name = name or "".join(part.capitalize() for part in str(node_type).replace("_", "-").split("-")) + "Node"
    return type(
        class_name,
        (base,),
        dict(namespace or {}),
        node_type=node_type,
        properties=list(properties),
        version=version,
        has_visibility=has_visibility,
    )
