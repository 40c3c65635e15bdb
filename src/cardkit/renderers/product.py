#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/product.py
"""Product card renderer."""

from __future__ import annotations

from typing import Any

from cardkit.constants import EMAIL_PRODUCT_IMAGE_WIDTH
from cardkit.renderers.base import RenderOutput, empty_container, template_output, text_value
from cardkit.utils.images import resize_image

STAR_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M12.729,1.2l3.346,6.629,6.44.638a.805.805,'
    "0,0,1,.5,1.374l-5.3,5.253,1.965,7.138a.813.813,0,0,1-1.151.935L12,19.934,5.48,23.163a.813.813,0,0,1-1.151-.935L6."
    "294,15.09.99,9.837a.805.805,0,0,1,.5-1.374l6.44-.638L11.271,1.2A.819.819,0,0,1,12.729,1.2Z\"/></svg>"
)
STAR_ACTIVE_CLASS = "kg-product-card-rating-active"


def _number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def render_product_node(node: Any, options: Any) -> RenderOutput:
    """Render a product card with optional image, star rating and button."""
    if node.is_empty():
        return empty_container(options)

    data = dict(node.get_dataset())
    rating = _number(node.productStarRating)
    for index in range(1, 6):
        data[f"star{index}"] = STAR_ACTIVE_CLASS if rating >= index else ""

    html = email_card_template(data) if options.target == "email" else card_template(data)
    return template_output(html, options)


def card_template(data: dict[str, Any]) -> str:
    """Return the web markup for a product card."""
    image = ""
    if data["productImageSrc"]:
        width = f'width="{data["productImageWidth"]}"' if data["productImageWidth"] else ""
        height = f'height="{data["productImageHeight"]}"' if data["productImageHeight"] else ""
        image = f'<img src="{data["productImageSrc"]}" {width} {height} class="kg-product-card-image" loading="lazy" />'
    rating = ""
    if data["productRatingEnabled"]:
        stars = "\n".join(
            f'                        <span class="{data[f"star{index}"]} kg-product-card-rating-star">{STAR_ICON}</span>'
            for index in range(1, 6)
        )
        rating = f"""
                    <div class="kg-product-card-rating">
{stars}
                    </div>
                """
    button = ""
    if data["productButtonEnabled"]:
        button = f"""
                    <a href="{text_value(data['productUrl'])}" class="kg-product-card-button kg-product-card-btn-accent" target="_blank" rel="noopener noreferrer"><span>{text_value(data['productButton'])}</span></a>
                """
    return f"""
        <div class="kg-card kg-product-card">
            <div class="kg-product-card-container">
                {image}
                <div class="kg-product-card-title-container">
                    <h4 class="kg-product-card-title">{text_value(data['productTitle'])}</h4>
                </div>
                {rating}

                <div class="kg-product-card-description">{text_value(data['productDescription'])}</div>
                {button}
            </div>
        </div>
    """


def email_card_template(data: dict[str, Any]) -> str:
    """Return the email markup for a product card; images are capped at 560px wide."""
    dimensions = None
    width, height = _number(data["productImageWidth"]), _number(data["productImageHeight"])
    if width and height:
        dimensions = (data["productImageWidth"], data["productImageHeight"])
        if width >= EMAIL_PRODUCT_IMAGE_WIDTH:
            dimensions = resize_image(width, height, desired_width=EMAIL_PRODUCT_IMAGE_WIDTH)

    image = ""
    if data["productImageSrc"]:
        width_attr = f'width="{dimensions[0]}"' if dimensions else ""
        height_attr = f'height="{dimensions[1]}"' if dimensions else ""
        image = f"""
                <tr>
                    <td align="center" style="padding-top:0; padding-bottom:0; margin-bottom:0; padding-bottom:0;">
                        <img src="{data['productImageSrc']}" {width_attr} {height_attr} style="display: block; width: 100%; height: auto; max-width: 100%; border: none; padding-bottom: 16px;" border="0"/>
                    </td>
                </tr>
            """
    rating = ""
    if data["productRatingEnabled"]:
        rating = f"""
                <tr style="padding-top:0; padding-bottom:0; margin-bottom:0; padding-bottom:0;">
                    <td valign="top">
                        <img src="https://static.ghost.org/v4.0.0/images/star-rating-{text_value(data['productStarRating'])}.png" style="border: none; width: 96px;" border="0" />
                    </td>
                </tr>
            """
    button = ""
    if data["productButtonEnabled"]:
        button = f"""
                <tr>
                    <td style="padding-top:0; padding-bottom:0; margin-bottom:0; padding-bottom:0;">
                        <div class="btn btn-accent" style="box-sizing: border-box;display: table;width: 100%;padding-top: 16px;">
                            <a href="{text_value(data['productUrl'])}" style="overflow-wrap: anywhere;border: solid 1px;border-radius: 5px;box-sizing: border-box;cursor: pointer;display: inline-block;font-size: 14px;font-weight: bold;margin: 0;padding: 0;text-decoration: none;color: #FFFFFF; width: 100%; text-align: center;"><span style="display: block;padding: 12px 25px;">{text_value(data['productButton'])}</span></a>
                        </div>
                    </td>
                </tr>
            """
    return f"""
         <table cellspacing="0" cellpadding="0" border="0" style="width:100%; padding:20px; border:1px solid #E9E9E9; border-radius: 5px; margin: 0 0 1.5em; width: 100%;">
            {image}
            <tr>
                <td valign="top">
                    <h4 style="font-size: 22px !important; margin-top: 0 !important; margin-bottom: 0 !important; font-weight: 700;">{text_value(data['productTitle'])}</h4>
                </td>
            </tr>
            {rating}
            <tr>
                <td style="padding-top:0; padding-bottom:0; margin-bottom:0; padding-bottom:0;">
                    <div style="padding-top: 8px; opacity: 0.7; font-size: 17px; line-height: 1.4; margin-bottom: -24px;">{text_value(data['productDescription'])}</div>
                </td>
            </tr>
            {button}
        </table>
        """
