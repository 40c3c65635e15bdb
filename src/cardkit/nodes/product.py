#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/product.py
"""Product card node."""

from __future__ import annotations

from typing import Any, Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.product import parse_product_node
from cardkit.renderers.product import render_product_node
from cardkit.utils.records import replace_data_url


class ProductNode(
    CardNode,
    node_type="product",
    properties=(
        PropertyDescriptor("productImageSrc", "", url_type="url"),
        PropertyDescriptor("productImageWidth", None),
        PropertyDescriptor("productImageHeight", None),
        PropertyDescriptor("productTitle", "", url_type="html", word_count=True),
        PropertyDescriptor("productDescription", "", url_type="html", word_count=True),
        PropertyDescriptor("productRatingEnabled", False),
        PropertyDescriptor("productStarRating", 5),
        PropertyDescriptor("productButtonEnabled", False),
        PropertyDescriptor("productButton", ""),
        PropertyDescriptor("productUrl", ""),
    ),
):
    """A product recommendation with image, rating and call-to-action button."""

    productImageSrc: str
    productImageWidth: Optional[int]
    productImageHeight: Optional[int]
    productTitle: str
    productDescription: str
    productRatingEnabled: bool
    productStarRating: int
    productButtonEnabled: bool
    productButton: str
    productUrl: str

    def export_json(self) -> dict[str, Any]:
        record = super().export_json()
        record["productImageSrc"] = replace_data_url(self.productImageSrc)
        return record

    @classmethod
    def import_dom(cls):
        return parse_product_node(cls)

    def export_dom(self, options):
        return render_product_node(self, options)

    def is_empty(self) -> bool:
        button_filled = self.productButtonEnabled and self.productUrl and self.productButton
        return (
            not self.productTitle
            and not self.productDescription
            and not button_filled
            and not self.productImageSrc
            and not self.productRatingEnabled
        )
