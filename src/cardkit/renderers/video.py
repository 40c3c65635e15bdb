#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/video.py
"""Video card renderer.

The web template embeds a video.js player sized by the video's aspect
ratio. Email clients cannot play video, so the email template shows the
thumbnail with a play button linking to the post, plus a VML fallback for
Outlook.
"""

from __future__ import annotations

from typing import Any, Optional

from cardkit.constants import EMAIL_MAX_IMAGE_WIDTH
from cardkit.renderers.base import RenderOutput, empty_container, template_output, text_value
from cardkit.utils.formatting import format_js_number, js_divide, js_round

VIDEO_TYPES: dict[str, str] = {
    "mp4": "video/mp4",
    "m4v": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
    "ogv": "video/ogg",
    # mov is served as mp4: quicktime does not autoplay everywhere
    "mov": "video/mp4",
    "mpeg": "video/mpeg",
    "mpg": "video/mpeg",
    "avi": "video/x-msvideo",
    "wmv": "video/x-ms-wmv",
    "flv": "video/x-flv",
    "3gp": "video/3gpp",
    "3g2": "video/3gpp2",
}


def get_video_type(filename: Optional[str]) -> Optional[str]:
    """Return the MIME type for a video URL from its extension.

    Extensions are matched by containment so storage suffixes such as
    ``.mp4-1`` still resolve.
    """
    if not filename:
        return None
    extension = filename.split(".")[-1].lower()
    for key, mime_type in VIDEO_TYPES.items():
        if key in extension:
            return mime_type
    return None


def get_card_classes(node: Any) -> list[str]:
    """Return the figure classes for a video card."""
    classes = ["kg-card kg-video-card"]
    if node.cardWidth:
        classes.append(f"kg-width-{node.cardWidth}")
    if node.caption:
        classes.append("kg-card-hascaption")
    return classes


def render_video_node(node: Any, options: Any) -> RenderOutput:
    """Render a video card for the web or email target."""
    if not node.src or not str(node.src).strip():
        return empty_container(options)

    card_classes = " ".join(get_card_classes(node))
    if options.target == "email":
        html = email_card_template(node, options, card_classes)
    else:
        html = card_template(node, card_classes)
    return template_output(html, options)


def card_template(node: Any, card_classes: str) -> str:
    """Return the web markup for a video card."""
    width = format_js_number(node.width)
    height = format_js_number(node.height)
    autoplay_attr = "loop autoplay muted" if node.loop else ""
    poster_spacer_src = f"https://img.spacergif.org/v1/{width}x{height}/0a/spacer.png"
    thumbnail_src = node.customThumbnailSrc or node.thumbnailSrc
    video_type = get_video_type(node.src) or "video/mp4"
    max_dimension = format_js_number(max(node.width or 0, node.height or 0))
    aspect_ratio = format_js_number(js_divide(node.width, node.height))
    container_style = f"width:100%; max-width:{max_dimension}px; aspect-ratio: {aspect_ratio}; margin: '0 auto'"
    caption = f"<figcaption>{node.caption}</figcaption>" if node.caption else ""
    return f"""
        <figure class="{card_classes}" data-kg-thumbnail="{text_value(node.thumbnailSrc)}" data-kg-custom-thumbnail="{text_value(node.customThumbnailSrc)}">
            <div class="kg-video-container data-vjs-player" style="{container_style}">
                <video
                    controls
                    responsive
                    controlsList="nodownload"
                    class="video-js vjs-big-play-centered vjs-paused"
                    poster="{poster_spacer_src}"
                    width="{width}"
                    height="{height}"
                    {autoplay_attr}
                    playsinline
                    preload="auto"
                    style="background: transparent url('{text_value(thumbnail_src)}') 50% 50% / cover no-repeat; width:100%; height:100%;"
                    data-setup='{{"fluid": true}}'
                >
                <source src="{node.src}" type="{video_type}"></source>
                <p class="vjs-no-js">
                    To view this video please enable JavaScript, and consider upgrading to a
                    web browser that
                    <a href="https://videojs.com/html5-video-support/" target="_blank">
                        supports HTML5 video
                    </a>
                </p>
                </video>

            </div>
            {caption}
        </figure>
    """


def email_card_template(node: Any, options: Any, card_classes: str) -> str:
    """Return the email markup for a video card: a linked thumbnail with a play button."""
    thumbnail_src = text_value(node.customThumbnailSrc or node.thumbnailSrc)
    post_url = text_value(options.post_url)
    max_width = EMAIL_MAX_IMAGE_WIDTH
    aspect_ratio = js_divide(node.width, node.height)
    spacer_width = js_round(max_width / 4)
    spacer_height = js_round(js_divide(max_width, aspect_ratio))
    poster_spacer_src = (
        f"https://img.spacergif.org/v1/{format_js_number(spacer_width)}x{format_js_number(spacer_height)}/0a/spacer.png"
    )
    circle_left = js_round(max_width / 2 - 39)
    circle_top = js_round(spacer_height / 2 - 39)
    play_left = js_round(max_width / 2 - 11)
    play_top = js_round(spacer_height / 2 - 17)
    height = format_js_number(spacer_height)
    caption = f"<figcaption>{node.caption}</figcaption>" if node.caption else ""
    return f"""
         <figure class="{card_classes}">
            <!--[if !mso !vml]-->
            <a class="kg-video-preview" href="{post_url}" aria-label="Play video" style="mso-hide: all">
                <table
                    cellpadding="0"
                    cellspacing="0"
                    border="0"
                    width="100%"
                    background="{thumbnail_src}"
                    role="presentation"
                    style="background: url('{thumbnail_src}') left top / cover; mso-hide: all"
                >
                    <tr style="mso-hide: all">
                        <td width="25%" style="visibility: hidden; mso-hide: all">
                            <img src="{poster_spacer_src}" alt="" width="100%" border="0" style="display:block; height: auto; opacity: 0; visibility: hidden; mso-hide: all;">
                        </td>
                        <td width="50%" align="center" valign="middle" style="vertical-align: middle; mso-hide: all;">
                            <div class="kg-video-play-button" style="mso-hide: all"><div style="mso-hide: all"></div></div>
                        </td>
                        <td width="25%" style="mso-hide: all">&nbsp;</td>
                    </tr>
                </table>
            </a>
            <!--[endif]-->

            <!--[if vml]>
            <v:group xmlns:v="urn:schemas-microsoft-com:vml" xmlns:w="urn:schemas-microsoft-com:office:word" coordsize="{max_width},{height}" coordorigin="0,0" href="{post_url}" style="width:{max_width}px;height:{height}px;">
                <v:rect fill="t" stroked="f" style="position:absolute;width:{max_width};height:{height};"><v:fill src="{thumbnail_src}" type="frame"/></v:rect>
                <v:oval fill="t" strokecolor="white" strokeweight="4px" style="position:absolute;left:{format_js_number(circle_left)};top:{format_js_number(circle_top)};width:78;height:78"><v:fill color="black" opacity="30%" /></v:oval>
                <v:shape coordsize="24,32" path="m,l,32,24,16,xe" fillcolor="white" stroked="f" style="position:absolute;left:{format_js_number(play_left)};top:{format_js_number(play_top)};width:30;height:34;" />
            </v:group>
            <![endif]-->

            {caption}
        </figure>
        """
