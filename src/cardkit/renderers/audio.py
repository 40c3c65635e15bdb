#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/audio.py
"""Audio card renderer."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, Tag

from cardkit.renderers.base import RenderOutput, empty_container, template_output, text_value
from cardkit.utils.dom import create_document, new_element, set_inner_html
from cardkit.utils.formatting import format_duration, format_js_number
from cardkit.utils.html import escape_html

AUDIO_FILE_ICON_URL = "https://static.ghost.org/v4.0.0/images/audio-file-icon.png"

_PLACEHOLDER_PATHS = (
    "M7.5 15.33a.75.75 0 1 0 0 1.5.75.75 0 0 0 0-1.5Zm-2.25.75a2.25 2.25 0 1 1 4.5 0 2.25 2.25 0 0 1-4.5 0ZM15 "
    "13.83a.75.75 0 1 0 0 1.5.75.75 0 0 0 0-1.5Zm-2.25.75a2.25 2.25 0 1 1 4.5 0 2.25 2.25 0 0 1-4.5 0Z",
    "M14.486 6.81A2.25 2.25 0 0 1 17.25 9v5.579a.75.75 0 0 1-1.5 0v-5.58a.75.75 0 0 0-.932-.727.755.755 0 0 "
    "1-.059.013l-4.465.744a.75.75 0 0 0-.544.72v6.33a.75.75 0 0 1-1.5 0v-6.33a2.25 2.25 0 0 1 1.763-2.194l4.473-.746Z",
    "M3 1.5a.75.75 0 0 0-.75.75v19.5a.75.75 0 0 0 .75.75h18a.75.75 0 0 0 .75-.75V5.133a.75.75 0 0 "
    "0-.225-.535l-.002-.002-3-2.883A.75.75 0 0 0 18 1.5H3ZM1.409.659A2.25 2.25 0 0 1 3 0h15a2.25 2.25 0 0 1 "
    "1.568.637l.003.002 3 2.883a2.25 2.25 0 0 1 .679 1.61V21.75A2.25 2.25 0 0 1 21 24H3a2.25 2.25 0 0 "
    "1-2.25-2.25V2.25c0-.597.237-1.169.659-1.591Z",
)
_PLAY_PATH = (
    "M23.14 10.608 2.253.164A1.559 1.559 0 0 0 0 1.557v20.887a1.558 1.558 0 0 0 2.253 1.392L23.14 "
    "13.393a1.557 1.557 0 0 0 0-2.785Z"
)
_UNMUTE_PATH = (
    "M15.189 2.021a9.728 9.728 0 0 0-7.924 4.85.249.249 0 0 1-.221.133H5.25a3 3 0 0 0-3 3v2a3 3 0 0 0 3 "
    "3h1.794a.249.249 0 0 1 .221.133 9.73 9.73 0 0 0 7.924 4.85h.06a1 1 0 0 0 1-1V3.02a1 1 0 0 0-1.06-.998Z"
)
_MUTE_PATH = (
    "M16.177 4.3a.248.248 0 0 0 .073-.176v-1.1a1 1 0 0 0-1.061-1 9.728 9.728 0 0 0-7.924 4.85.249.249 0 0 "
    "1-.221.133H5.25a3 3 0 0 0-3 3v2a3 3 0 0 0 3 3h.114a.251.251 0 0 0 .177-.073ZM23.707 1.706A1 1 0 0 0 "
    "22.293.292l-22 22a1 1 0 0 0 0 1.414l.009.009a1 1 0 0 0 1.405-.009l6.63-6.631A.251.251 0 0 1 8.515 "
    "17a.245.245 0 0 1 .177.075 10.081 10.081 0 0 0 6.5 2.92 1 1 0 0 0 1.061-1V9.266a.247.247 0 0 1 .073-.176Z"
)


def get_thumbnail_class(node: Any) -> str:
    """Return the classes of the thumbnail image, hidden when there is no thumbnail."""
    return "kg-audio-thumbnail" if node.thumbnailSrc else "kg-audio-thumbnail kg-audio-hide"


def get_empty_thumbnail_class(node: Any) -> str:
    """Return the classes of the placeholder icon, hidden when there is a thumbnail."""
    return "kg-audio-thumbnail placeholder kg-audio-hide" if node.thumbnailSrc else "kg-audio-thumbnail placeholder"


def render_audio_node(node: Any, options: Any) -> RenderOutput:
    """Render an audio card: a full player on the web, a linked summary table in email."""
    if not node.src or not str(node.src).strip():
        return empty_container(options)

    thumbnail_class = get_thumbnail_class(node)
    empty_thumbnail_class = get_empty_thumbnail_class(node)
    if options.target == "email":
        return email_template(node, options, thumbnail_class, empty_thumbnail_class)
    return frontend_template(node, create_document(options), thumbnail_class, empty_thumbnail_class)


def _svg(document: BeautifulSoup, attrs: dict[str, str], *children: Tag) -> Tag:
    svg = new_element(document, "svg", attrs)
    for child in children:
        svg.append(child)
    return svg


def _button(document: BeautifulSoup, class_: str, label: str, icon: Tag) -> Tag:
    button = new_element(document, "button", {"class": class_, "aria-label": label})
    button.append(icon)
    return button


def frontend_template(node: Any, document: BeautifulSoup, thumbnail_class: str, empty_thumbnail_class: str) -> RenderOutput:
    """Build the web audio player card."""
    card = new_element(document, "div", {"class": "kg-card kg-audio-card"})
    card.append(
        new_element(
            document, "img", {"src": text_value(node.thumbnailSrc), "alt": "audio-thumbnail", "class": thumbnail_class}
        )
    )

    placeholder = new_element(document, "div", {"class": empty_thumbnail_class})
    paths = [
        new_element(document, "path", {"fill-rule": "evenodd", "clip-rule": "evenodd", "d": d})
        for d in _PLACEHOLDER_PATHS
    ]
    placeholder.append(_svg(document, {"width": "24", "height": "24", "fill": "none"}, *paths))
    card.append(placeholder)

    container = new_element(document, "div", {"class": "kg-audio-player-container"})
    container.append(new_element(document, "audio", {"src": node.src, "preload": "metadata"}))
    container.append(new_element(document, "div", {"class": "kg-audio-title"}, text=text_value(node.title)))

    player = new_element(document, "div", {"class": "kg-audio-player"})
    view_box = {"viewBox": "0 0 24 24"}
    player.append(
        _button(
            document,
            "kg-audio-play-icon",
            "Play audio",
            _svg(document, view_box, new_element(document, "path", {"d": _PLAY_PATH})),
        )
    )
    pause_bars = [
        new_element(document, "rect", {"x": x, "y": "1", "width": "7", "height": "22", "rx": "1.5", "ry": "1.5"})
        for x in ("3", "14")
    ]
    player.append(
        _button(document, "kg-audio-pause-icon kg-audio-hide", "Pause audio", _svg(document, view_box, *pause_bars))
    )
    player.append(new_element(document, "span", {"class": "kg-audio-current-time"}, text="0:00"))

    total_time = new_element(document, "div", {"class": "kg-audio-time"}, text="/")
    total_time.append(
        new_element(document, "span", {"class": "kg-audio-duration"}, text=format_js_number(node.duration))
    )
    player.append(total_time)
    player.append(
        new_element(document, "input", {"type": "range", "class": "kg-audio-seek-slider", "max": "100", "value": "0"})
    )

    playback_rate = new_element(
        document, "button", {"class": "kg-audio-playback-rate", "aria-label": "Adjust playback speed"}
    )
    set_inner_html(playback_rate, "1&#215;")
    player.append(playback_rate)

    player.append(
        _button(
            document,
            "kg-audio-unmute-icon",
            "Unmute",
            _svg(document, view_box, new_element(document, "path", {"d": _UNMUTE_PATH})),
        )
    )
    player.append(
        _button(
            document,
            "kg-audio-mute-icon kg-audio-hide",
            "Mute",
            _svg(document, view_box, new_element(document, "path", {"d": _MUTE_PATH})),
        )
    )
    player.append(
        new_element(
            document, "input", {"type": "range", "class": "kg-audio-volume-slider", "max": "100", "value": "100"}
        )
    )

    container.append(player)
    card.append(container)
    return RenderOutput(card)


def email_template(node: Any, options: Any, thumbnail_class: str, empty_thumbnail_class: str) -> RenderOutput:
    """Render the email audio card as a table linking to the post."""
    post_url = text_value(options.post_url)
    if node.thumbnailSrc:
        thumbnail = (
            f'<img src="{node.thumbnailSrc}" class="{thumbnail_class}" '
            'style="width: 60px; height: 60px; object-fit: cover; border: 0; border-radius: 2px;">'
        )
    else:
        thumbnail = (
            f'<img src="{AUDIO_FILE_ICON_URL}" class="{empty_thumbnail_class}" '
            'style="width: 24px; height: 24px; padding: 18px; border-radius: 2px;">'
        )
    title = escape_html(text_value(node.title))
    duration = format_duration(node.duration if node.duration is not None else 200)
    html = f"""
        <table cellspacing="0" cellpadding="0" border="0" class="kg-audio-card">
                <tr>
                    <td>
                        <table cellspacing="0" cellpadding="0" border="0" width="100%">
                            <tr>
                                <td width="60">
                                    <a href="{post_url}" style="display: block; width: 60px; height: 60px; padding-top: 4px; padding-right: 16px; padding-bottom: 4px; padding-left: 4px; border-radius: 2px;">
                                        {thumbnail}
                                    </a>
                                </td>
                                <td style="position: relative; vertical-align: center;" valign="middle">
                                    <a href="{post_url}" style="position: absolute; display: block; top: 0; right: 0; bottom: 0; left: 0;"></a>
                                    <table cellspacing="0" cellpadding="0" border="0" width="100%">
                                        <tr>
                                            <td>
                                                <a href="{post_url}" class="kg-audio-title">{title}</a>
                                            </td>
                                        </tr>
                                        <tr>
                                            <td>
                                                <table cellspacing="0" cellpadding="0" border="0" width="100%">
                                                    <tr>
                                                        <td width="24" style="vertical-align: middle;" valign="middle">
                                                            <a href="{post_url}" class="kg-audio-play-button"></a>
                                                        </td>
                                                        <td style="vertical-align: middle;" valign="middle">
                                                            <a href="{post_url}" class="kg-audio-duration">{duration}<span class="kg-audio-link"> • Click to play audio</span></a>
                                                        </td>
                                                    </tr>
                                                </table>
                                            </td>
                                        </tr>
                                    </table>
                                </td>
                            </tr>
                        </table>
                    </td>
                </tr>
            </table>
            """
    return template_output(html, options)
