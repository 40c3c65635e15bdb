#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/file.py
"""File card renderer."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from cardkit.renderers.base import RenderOutput, empty_container, template_output
from cardkit.utils.dom import create_document, new_element
from cardkit.utils.formatting import bytes_to_size
from cardkit.utils.html import escape_html

DOWNLOAD_ICON_URL = "https://static.ghost.org/v4.0.0/images/download-icon-darkmode.png"
_ICON_STYLE = ".a{fill:none;stroke:currentColor;stroke-linecap:round;stroke-linejoin:round;stroke-width:1.5px;}"


def render_file_node(node: Any, options: Any) -> RenderOutput:
    """Render a downloadable file card; files without a ``src`` render empty."""
    if not node.src or not str(node.src).strip():
        return empty_container(options)

    if options.target == "email":
        return email_template(node, options)
    return card_template(node, create_document(options))


def email_template(node: Any, options: Any) -> RenderOutput:
    """Render the email file card as a table linking to the post."""
    if not node.fileTitle and not node.fileCaption:
        icon_style = "margin-top: 6px; height: 20px; width: 20px; max-width: 20px; padding-top: 4px; padding-bottom: 4px;"
    else:
        icon_style = "margin-top: 6px; height: 24px; width: 24px; max-width: 24px;"
    post_url = escape_html(options.post_url)

    title = ""
    if node.fileTitle:
        title = f"""
                                <table cellspacing="0" cellpadding="0" border="0" width="100%"><tr><td>
                                    <a href="{post_url}" class="kg-file-title">{escape_html(node.fileTitle)}</a>
                                </td></tr></table>
                                """
    caption = ""
    if node.fileCaption:
        caption = f"""
                                <table cellspacing="0" cellpadding="0" border="0" width="100%"><tr><td>
                                    <a href="{post_url}" class="kg-file-description">{escape_html(node.fileCaption)}</a>
                                </td></tr></table>
                                """
    html = f"""
        <table cellspacing="0" cellpadding="4" border="0" class="kg-file-card" width="100%">
            <tr>
                <td>
                    <table cellspacing="0" cellpadding="0" border="0" width="100%">
                        <tr>
                            <td valign="middle" style="vertical-align: middle;">
                                {title}
                                {caption}
                                <table cellspacing="0" cellpadding="0" border="0" width="100%"><tr><td>
                                    <a href="{post_url}" class="kg-file-meta"><span class="kg-file-name">{escape_html(node.fileName)}</span> &bull; {bytes_to_size(node.fileSize)}</a>
                                </td></tr></table>
                            </td>
                            <td width="80" valign="middle" class="kg-file-thumbnail">
                                <a href="{post_url}" style="display: block; top: 0; right: 0; bottom: 0; left: 0;">
                                    <img src="{DOWNLOAD_ICON_URL}" style="{escape_html(icon_style)}">
                                </a>
                            </td>
                        </tr>
                    </table>
                </td>
            </tr>
        </table>
    """
    return template_output(html, options)


def card_template(node: Any, document: BeautifulSoup) -> RenderOutput:
    """Build the web file card: a download link with name, size and an icon."""
    card = new_element(document, "div", {"class": "kg-card kg-file-card"})
    container = new_element(
        document, "a", {"class": "kg-file-card-container", "href": node.src, "title": "Download", "download": ""}
    )

    contents = new_element(document, "div", {"class": "kg-file-card-contents"})
    contents.append(new_element(document, "div", {"class": "kg-file-card-title"}, text=node.fileTitle or ""))
    contents.append(new_element(document, "div", {"class": "kg-file-card-caption"}, text=node.fileCaption or ""))
    metadata = new_element(document, "div", {"class": "kg-file-card-metadata"})
    metadata.append(new_element(document, "div", {"class": "kg-file-card-filename"}, text=node.fileName or ""))
    metadata.append(
        new_element(document, "div", {"class": "kg-file-card-filesize"}, text=node.formatted_file_size or "")
    )
    contents.append(metadata)
    container.append(contents)

    icon = new_element(document, "div", {"class": "kg-file-card-icon"})
    svg = new_element(document, "svg", {"viewBox": "0 0 24 24"})
    defs = new_element(document, "defs")
    defs.append(new_element(document, "style", text=_ICON_STYLE))
    svg.append(defs)
    svg.append(new_element(document, "title", text="download-circle"))
    svg.append(new_element(document, "polyline", {"class": "a", "points": "8.25 14.25 12 18 15.75 14.25"}))
    svg.append(new_element(document, "line", {"class": "a", "x1": "12", "y1": "6.75", "x2": "12", "y2": "18"}))
    svg.append(new_element(document, "circle", {"class": "a", "cx": "12", "cy": "12", "r": "11.25"}))
    icon.append(svg)
    container.append(icon)

    card.append(container)
    return RenderOutput(card)
