#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/embed.py
"""Embed card renderer.

Embeds render their stored oEmbed markup inside ``figure.kg-embed-card``.
Two email cases are special: tweets with stored tweet data become a static
table, and videos with a thumbnail become a linked preview image, since
email clients do not run embed scripts or iframes.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bs4 import BeautifulSoup, Tag

from cardkit.constants import EMAIL_MAX_IMAGE_WIDTH
from cardkit.renderers.base import RenderOutput, empty_container, text_value
from cardkit.utils.dom import add_class, create_document, new_element, set_inner_html
from cardkit.utils.formatting import (
    format_compact_number,
    format_js_number,
    format_medium_date,
    format_simple_time,
    js_divide,
    js_round,
)

TWITTER_LOGO_URL = "https://static.ghost.org/v4.0.0/images/twitter-logo-small.png"


def render_embed_node(node: Any, options: Any) -> RenderOutput:
    """Render an embed card; twitter embeds take the tweet path."""
    document = create_document(options)
    if node.embedType == "twitter":
        return render_twitter(node, document, options)
    return render_template(node, document, options)


def _finish_figure(figure: Tag, node: Any, document: BeautifulSoup) -> RenderOutput:
    if node.caption:
        figcaption = new_element(document, "figcaption")
        set_inner_html(figcaption, node.caption)
        figure.append(figcaption)
        add_class(figure, "kg-card-hascaption")
    return RenderOutput(figure)


def _new_figure(document: BeautifulSoup) -> Tag:
    return new_element(document, "figure", {"class": "kg-card kg-embed-card"})


def render_twitter(node: Any, document: BeautifulSoup, options: Any) -> RenderOutput:
    """Render a tweet embed, as a static table in email when tweet data is available."""
    figure = _new_figure(document)
    metadata = node.metadata or {}
    tweet_data = metadata.get("tweet_data") if isinstance(metadata, Mapping) else None
    html = node.html or ""
    if tweet_data and options.target == "email":
        html = tweet_email_template(tweet_data)
    set_inner_html(figure, html.strip())
    return _finish_figure(figure, node, document)


def _slice(content: list[str], start: int, end: Optional[int] = None) -> str:
    return "".join(content[start:end]).replace("\n", "<br>")


def format_tweet_content(tweet_data: Mapping[str, Any]) -> str:
    """Return the tweet text with mentions, hashtags and links highlighted.

    Entity offsets index code points, with inclusive ``end`` positions.
    Media links (``pic.twitter.com``) are dropped from the text.
    """
    entities_data = tweet_data.get("entities") or {}
    mentions = entities_data.get("mentions") or []
    urls = entities_data.get("urls") or []
    hashtags = entities_data.get("hashtags") or []
    entities = sorted([*mentions, *urls, *hashtags], key=lambda entity: entity.get("start", 0))

    content = list(tweet_data.get("text") or "")
    parts: list[tuple[str, str]] = []
    last = 0
    for entity in entities:
        start, end = entity.get("start", 0), entity.get("end", 0)
        kind = "text"
        data = _slice(content, start, end + 1)
        if entity.get("url"):
            display_url = entity.get("display_url")
            if not display_url or display_url.startswith("pic.twitter.com"):
                kind = "img_url"
            else:
                kind = "url"
                data = data.replace(entity["url"], display_url, 1)
        if entity.get("username"):
            kind = "mention"
        if entity.get("tag"):
            kind = "hashtag"
        parts.append(("text", _slice(content, last, start)))
        parts.append((kind, data))
        last = end + 1
    parts.append(("text", _slice(content, last)))

    rendered = []
    for kind, data in parts:
        if kind == "text":
            rendered.append(data)
        elif kind in ("mention", "hashtag"):
            rendered.append(f'<span style="color: #1DA1F2;">{data}</span>')
        elif kind == "url":
            rendered.append(f'<span style="color: #1DA1F2; word-break: break-all;">{data}</span>')
    return "".join(rendered)


def tweet_email_template(tweet_data: Mapping[str, Any]) -> str:
    """Return the email table for a tweet."""
    tweet_id = text_value(tweet_data.get("id"))
    tweet_url = f"https://twitter.com/twitter/status/{tweet_id}"
    metrics = tweet_data.get("public_metrics") or {}
    retweet_count = format_compact_number(metrics.get("retweet_count"))
    like_count = format_compact_number(metrics.get("like_count"))
    author = next(
        (user for user in tweet_data.get("users") or [] if user.get("id") == tweet_data.get("author_id")),
        None,
    )
    tweet_time = format_simple_time(tweet_data.get("created_at"))
    tweet_date = format_medium_date(tweet_data.get("created_at"))
    tweet_content = format_tweet_content(tweet_data)

    attachments = tweet_data.get("attachments") or {}
    has_image_or_video = bool(attachments.get("media_keys"))
    has_poll = bool(attachments.get("poll_ids"))
    tweet_image_url = None
    if has_image_or_video:
        media = ((tweet_data.get("includes") or {}).get("media") or [{}])[0]
        tweet_image_url = media.get("preview_image_url") or media.get("url")

    author_row = ""
    if author:
        avatar = ""
        if author.get("profile_image_url"):
            avatar = f"""<td width="48" style="width: 48px;">
                                    <a href="{tweet_url}" class="kg-twitter-link" style="padding-left: 16px; padding-top: 16px;"><img src="{author['profile_image_url']}" style="max-width: 512px; border: none; width: 48px; height: 48px; border-radius: 999px;" border="0"></a>
                                </td>"""
        name = ""
        if author.get("name"):
            name = f"""
                                <td style="line-height: 1.3em; width: 100%;">
                                    <a href="{tweet_url}" class="kg-twitter-link" style="font-size: 15px !important; font-weight: 600; width: 100%; padding-top: 20px; padding-bottom: 18px;">{author['name']} <br> <span style="color: #ABB4BE; font-size: 14px; font-weight: 500;">@{text_value(author.get('username'))}</span></a>
                                </td>"""
        author_row = f"""
                            <tr>
                                {avatar}
                                {name}
                                <td align="right" width="24" style="width: 24px;">
                                    <a href="{tweet_url}" class="kg-twitter-link" style="padding-right: 16px; padding-top: 20px; width: 24px; height: 38px;"><img src="{TWITTER_LOGO_URL}" width="24" border="0"></a>
                                </td>
                            </tr>
                        """
    poll = '<br><span style="color: #1DA1F2;">View poll &rarr;</span>' if has_poll else ""
    media_row = ""
    if has_image_or_video:
        media_row = f"""<tr>
                            <td colspan="3" align="center" style="width: 100%;">
                                <a href="{tweet_url}" style="display: block; padding-top: 0; padding-left: 16px; padding-right: 16px; padding-bottom: 0;"><img src="{text_value(tweet_image_url)}" style="width: 100%; border: 1px solid #E9E9E9; max-width: 528px; border-radius: 10px;" border="0"></a>
                            </td>
                        </tr>"""
    return f"""
        <table cellspacing="0" cellpadding="0" border="0" class="kg-twitter-card">
            <tr>
                <td>
                    <table cellspacing="0" cellpadding="0" border="0" width="100%">
                        {author_row}
                        <tr>
                            <td colspan="3">
                                <a href="{tweet_url}" class="kg-twitter-link" style="font-size: 15px; line-height: 1.4em; padding-top: 8px; padding-left: 16px; padding-right: 16px; padding-bottom: 16px;">{tweet_content}
                                {poll}
                                </a>
                            </td>
                        </tr>
                        {media_row}
                        <tr>
                            <td colspan="3" style="width: 100%;">
                                <table cellspacing="0" cellpadding="0" border="0" width="100%">
                                    <tr>
                                        <td>
                                        <a href="{tweet_url}" class="kg-twitter-link" style="padding-top: 4px; padding-right: 16px; padding-bottom: 12px; padding-left: 16px;"><span style="color: #838383;">{tweet_time} &bull; {tweet_date}</span></a>
                                        </td>
                                    </tr>
                                </table>
                            </td>
                        </tr>
                        <tr>
                            <td colspan="3" style="width: 100%;">
                                <table cellspacing="0" cellpadding="0" border="0" width="100%" style="border-top: 1px solid #E9E9E9;">
                                    <tr>
                                        <td>
                                            <a href="{tweet_url}" class="kg-twitter-link" style="padding-top: 12px; padding-right: 16px; padding-bottom: 12px; padding-left: 16px;">
                                                <span style="font-weight: 600;">{like_count}</span> <span style="color: #838383;">likes &bull;</span>
                                                <span style="font-weight: 600;">{retweet_count}</span> <span style="color: #838383;">retweets</span>
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
        """


def video_email_template(url: str, metadata: Mapping[str, Any]) -> str:
    """Return the linked thumbnail preview used for video embeds in email."""
    max_width = EMAIL_MAX_IMAGE_WIDTH
    thumbnail_url = metadata.get("thumbnail_url")
    aspect_ratio = js_divide(metadata.get("thumbnail_width"), metadata.get("thumbnail_height"))
    spacer_width = format_js_number(js_round(max_width / 4))
    spacer_height_value = js_round(js_divide(max_width, aspect_ratio))
    spacer_height = format_js_number(spacer_height_value)
    circle_left = format_js_number(js_round(max_width / 2 - 39))
    circle_top = format_js_number(js_round(spacer_height_value / 2 - 39))
    play_left = format_js_number(js_round(max_width / 2 - 11))
    play_top = format_js_number(js_round(spacer_height_value / 2 - 17))
    return f"""
            <!--[if !mso !vml]-->
            <a class="kg-video-preview" href="{url}" aria-label="Play video" style="mso-hide: all">
                <table cellpadding="0" cellspacing="0" border="0" width="100%" background="{thumbnail_url}" role="presentation" style="background: url('{thumbnail_url}') left top / cover; mso-hide: all">
                    <tr style="mso-hide: all">
                        <td width="25%" style="visibility: hidden; mso-hide: all">
                            <img src="https://img.spacergif.org/v1/{spacer_width}x{spacer_height}/0a/spacer.png" alt="" width="100%" border="0" style="display:block; height: auto; opacity: 0; visibility: hidden; mso-hide: all;">
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
            <v:group xmlns:v="urn:schemas-microsoft-com:vml" xmlns:w="urn:schemas-microsoft-com:office:word" coordsize="{max_width},{spacer_height}" coordorigin="0,0" href="{url}" style="width:{max_width}px;height:{spacer_height}px;">
                <v:rect fill="t" stroked="f" style="position:absolute;width:{max_width};height:{spacer_height};"><v:fill src="{thumbnail_url}" type="frame"/></v:rect>
                <v:oval fill="t" strokecolor="white" strokeweight="4px" style="position:absolute;left:{circle_left};top:{circle_top};width:78;height:78"><v:fill color="black" opacity="30%" /></v:oval>
                <v:shape coordsize="24,32" path="m,l,32,24,16,xe" fillcolor="white" stroked="f" style="position:absolute;left:{play_left};top:{play_top};width:30;height:34;" />
            </v:group>
            <![endif]-->
        """


def render_template(node: Any, document: BeautifulSoup, options: Any) -> RenderOutput:
    """Render a generic embed; empty embeds render an empty container."""
    if node.is_empty():
        return empty_container(options)

    metadata = node.metadata if isinstance(node.metadata, Mapping) else {}
    figure = _new_figure(document)
    if options.target == "email" and node.embedType == "video" and metadata.get("thumbnail_url"):
        set_inner_html(figure, video_email_template(text_value(node.url), metadata).strip())
    else:
        set_inner_html(figure, node.html or "")
    return _finish_figure(figure, node, document)
