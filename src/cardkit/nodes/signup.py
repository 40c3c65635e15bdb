#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/signup.py
"""Signup form card node."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from cardkit.exceptions import ValidationError
from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.signup import parse_signup_node
from cardkit.renderers.signup import render_signup_node

DEFAULT_SUCCESS_MESSAGE = "Email sent! Check your inbox to complete your signup."


class SignupNode(
    CardNode,
    node_type="signup",
    properties=(
        PropertyDescriptor("alignment", "left"),
        PropertyDescriptor("backgroundColor", "#F0F0F0"),
        PropertyDescriptor("backgroundImageSrc", ""),
        PropertyDescriptor("backgroundSize", "cover"),
        PropertyDescriptor("textColor", ""),
        PropertyDescriptor("buttonColor", "accent"),
        PropertyDescriptor("buttonTextColor", "#FFFFFF"),
        PropertyDescriptor("buttonText", "Subscribe"),
        PropertyDescriptor("disclaimer", "", word_count=True),
        PropertyDescriptor("header", "", word_count=True),
        PropertyDescriptor("labels", []),
        PropertyDescriptor("layout", "wide"),
        PropertyDescriptor("subheader", "", word_count=True),
        PropertyDescriptor("successMessage", DEFAULT_SUCCESS_MESSAGE),
        PropertyDescriptor("swapped", False),
    ),
):
    """A members signup form with optional background image and member labels.

    Notes
    -----
    With a transparent background the text colour is left empty so it
    inherits from the page, unless a background image (outside the split
    layout) covers the card. Otherwise a missing text colour is black.
    """

    alignment: str
    backgroundColor: str
    backgroundImageSrc: str
    backgroundSize: str
    textColor: str
    buttonColor: str
    buttonTextColor: str
    buttonText: str
    disclaimer: str
    header: str
    labels: list[str]
    layout: str
    subheader: str
    successMessage: str
    swapped: bool

    def __init__(self, data: Optional[Mapping[str, Any]] = None, key: Optional[str] = None):
        super().__init__(data, key=key)
        data = data or {}
        if data.get("backgroundColor") == "transparent" and (
            data.get("layout") == "split" or not data.get("backgroundImageSrc")
        ):
            self.textColor = ""
        else:
            self.textColor = data.get("textColor") or "#000000"

    @classmethod
    def import_dom(cls):
        return parse_signup_node(cls)

    def export_dom(self, options):
        return render_signup_node(self, options)

    def set_labels(self, labels: Any) -> None:
        """Replace the member labels.

        Raises
        ------
        ValidationError
            If ``labels`` is not a list of strings.

        """
        if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
            raise ValidationError(
                "Invalid argument: Expected an array of strings.", parameter_name="labels", parameter_value=labels
            )
        self.labels = labels

    def add_label(self, label: str) -> None:
        self.labels.append(label)

    def remove_label(self, label: str) -> None:
        self.labels = [existing for existing in self.labels if existing != label]
