#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/bookmark.py
"""Bookmark card renderer."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from cardkit.renderers.base import RenderOutput, empty_container
from cardkit.utils.dom import create_document, new_element, set_inner_html
from cardkit.utils.html import escape_html, truncate_html

DESCRIPTION_MAX_LENGTH = 120
DESCRIPTION_MAX_LENGTH_MOBILE = 90


def render_bookmark_node(node: Any, options: Any) -> RenderOutput:
    """Render a link preview card; bookmarks without a URL render empty."""
    if not node.url or not str(node.url).strip():
        return empty_container(options)

    document = create_document(options)
    if options.target == "email":
        return email_template(node, document)
    return frontend_template(node, document)


def email_template(node: Any, document: BeautifulSoup) -> RenderOutput:
    """Render the email bookmark: a figure for most clients plus an Outlook table.

    The returned element is a wrapper ``div`` because the markup is a pair of
    conditional comment blocks rather than a single element.
    """
    title = escape_html(node.title)
    publisher = escape_html(node.publisher)
    author = escape_html(node.author)
    description = truncate_html(node.description, DESCRIPTION_MAX_LENGTH, DESCRIPTION_MAX_LENGTH_MOBILE)
    icon = node.icon
    url = node.url
    thumbnail = node.thumbnail
    caption = node.caption

    icon_html = f'<img class="kg-bookmark-icon" src="{icon}" alt="">' if icon else ""
    publisher_html = f'<span class="kg-bookmark-author" src="{publisher}">{publisher}</span>' if publisher else ""
    author_html = f'<span class="kg-bookmark-publisher" src="{author}">{author}</span>' if author else ""
    thumbnail_html = ""
    if thumbnail:
        thumbnail_html = f"""<div class="kg-bookmark-thumbnail" style="background-image: url('{thumbnail}')">
                        <img src="{thumbnail}" alt="" onerror="this.style.display='none'"></div>"""
    caption_html = f"<figcaption>{caption}</figcaption>" if caption else ""
    outlook_icon = ""
    if icon:
        outlook_icon = f"""
                                                <td valign="middle" class="kg-bookmark-icon--outlook" style="padding-right: 8px; font-size: 0; line-height: 1.5em;">
                                                    <a href="{url}" style="text-decoration: none; color: #15212A;">
                                                        <img src="{icon}" width="22" height="22" alt=" ">
                                                    </a>
                                                </td>
                                            """
    byline_separator = "&nbsp;&#x2022;&nbsp;" if author else ""

    html = f"""
        <!--[if !mso !vml]-->
            <figure class="kg-card kg-bookmark-card {'kg-card-hascaption' if caption else ''}">
                <a class="kg-bookmark-container" href="{url}">
                    <div class="kg-bookmark-content">
                        <div class="kg-bookmark-title">{title}</div>
                        <div class="kg-bookmark-description">{description}</div>
                        <div class="kg-bookmark-metadata">
                            {icon_html}
                            {publisher_html}
                            {author_html}
                        </div>
                    </div>
                    {thumbnail_html}
                </a>
                {caption_html}
            </figure>
        <!--[endif]-->
        <!--[if vml]>
            <table class="kg-card kg-bookmark-card--outlook" style="margin: 0; padding: 0; width: 100%; border: 1px solid #e5eff5; background: #ffffff; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, 'Open Sans', 'Helvetica Neue', sans-serif; border-collapse: collapse; border-spacing: 0;" width="100%">
                <tr>
                    <td width="100%" style="padding: 20px;">
                        <table style="margin: 0; padding: 0; border-collapse: collapse; border-spacing: 0;">
                            <tr>
                                <td class="kg-bookmark-title--outlook">
                                    <a href="{url}" style="text-decoration: none; color: #15212A; font-size: 15px; line-height: 1.5em; font-weight: 600;">
                                        {title}
                                    </a>
                                </td>
                            </tr>
                            <tr>
                                <td>
                                    <div class="kg-bookmark-description--outlook">
                                        <a href="{url}" style="text-decoration: none; margin-top: 12px; color: #738a94; font-size: 13px; line-height: 1.5em; font-weight: 400;">
                                            {description}
                                        </a>
                                    </div>
                                </td>
                            </tr>
                            <tr>
                                <td class="kg-bookmark-metadata--outlook" style="padding-top: 14px; color: #15212A; font-size: 13px; font-weight: 400; line-height: 1.5em;">
                                    <table style="margin: 0; padding: 0; border-collapse: collapse; border-spacing: 0;">
                                        <tr>
                                            {outlook_icon}
                                            <td valign="middle" class="kg-bookmark-byline--outlook">
                                                <a href="{url}" style="text-decoration: none; color: #15212A;">
                                                    {publisher}
                                                    {byline_separator}
                                                    {author}
                                                </a>
                                            </td>
                                        </tr>
                                    </table>
                                </td>
                            </tr>
                        </table>
                    </td>
                </tr>
            </table>
            <div class="kg-bookmark-spacer--outlook" style="height: 1.5em;">&nbsp;</div>
        <![endif]-->"""
    element = new_element(document, "div")
    set_inner_html(element, html)
    return RenderOutput(element)


def frontend_template(node: Any, document: BeautifulSoup) -> RenderOutput:
    """Build the web bookmark figure."""
    card_class = "kg-card kg-bookmark-card"
    if node.caption:
        card_class += " kg-card-hascaption"
    figure = new_element(document, "figure", {"class": card_class})

    container = new_element(document, "a", {"class": "kg-bookmark-container", "href": node.url})
    figure.append(container)
    content = new_element(document, "div", {"class": "kg-bookmark-content"})
    container.append(content)
    content.append(new_element(document, "div", {"class": "kg-bookmark-title"}, text=node.title or ""))
    content.append(new_element(document, "div", {"class": "kg-bookmark-description"}, text=node.description or ""))

    metadata = new_element(document, "div", {"class": "kg-bookmark-metadata"})
    content.append(metadata)
    if node.icon:
        metadata.append(new_element(document, "img", {"class": "kg-bookmark-icon", "src": node.icon, "alt": ""}))
    # author and publisher classes are swapped for theme compatibility
    if node.publisher:
        metadata.append(new_element(document, "span", {"class": "kg-bookmark-author"}, text=node.publisher))
    if node.author:
        metadata.append(new_element(document, "span", {"class": "kg-bookmark-publisher"}, text=node.author))

    if node.thumbnail:
        thumbnail_div = new_element(document, "div", {"class": "kg-bookmark-thumbnail"})
        container.append(thumbnail_div)
        thumbnail_div.append(
            new_element(
                document, "img", {"src": node.thumbnail, "alt": "", "onerror": "this.style.display = 'none'"}
            )
        )

    if node.caption:
        figcaption = new_element(document, "figcaption")
        set_inner_html(figcaption, node.caption)
        figure.append(figcaption)
    return RenderOutput(figure)
