"""Assemble plain-text pages: post headers, the about block and the footer."""

from __future__ import annotations

from typing import Sequence

from .config import BeautifyMode, RenderConfig, SiteConfig
from .content import Post
from .render import render_plain_text
from .text.layout import center, format_about_bar, format_header_bar
from .text.typography import beautify, normalize_sentence_spacing
from .text.wrap import wrap

HIDDEN_TITLE_PREFIX = "~"
HIDDEN_TITLE = "* * *"
POST_GAP = "\n\n\n\n"


def render_post(post: Post, config: RenderConfig, *, hide_selected: bool = True) -> str:
    """Header bar followed by the rendered body."""
    title = post.display_title(
        hide_selected=hide_selected,
        beautify=config.beautify is not BeautifyMode.OFF,
    )
    if title.startswith(HIDDEN_TITLE_PREFIX):
        title = HIDDEN_TITLE
    if config.beautify_content:
        title = beautify(title)

    header = format_header_bar(title, post.category, post.date_display(config.shorten_date), config)
    return header + "\n\n\n" + render_plain_text(post.content, config)


def render_posts(posts: Sequence[Post], site: SiteConfig, config: RenderConfig) -> str:
    return POST_GAP.join(render_post(post, config, hide_selected=site.hide_selected) for post in posts)


def render_about(site: SiteConfig, config: RenderConfig) -> str:
    """The about header and text shown on the home page."""
    mobile = config.mobile_narrowed
    author = site.author
    header = format_about_bar(
        "" if mobile else "About",
        author.name,
        "" if mobile else author.location,
        config,
    )

    lines: list[str] = []
    for paragraph in author.about_for(mobile).split("\n"):
        if not mobile:
            paragraph = normalize_sentence_spacing(paragraph.rstrip())
        lines.append(wrap(paragraph, config.line_width, config.prefix_length).rstrip())

    text = POST_GAP + header + "\n\n\n" + "\n".join(lines) + "\n"
    if site.show_separator:
        indent = config.prefix_length if mobile else 0
        rule = " " * indent + "—" * (config.line_width - indent)
        return text + "\n\n\n" + rule + "\n\n\n\n\n"
    return text + POST_GAP


def render_footer(site: SiteConfig, config: RenderConfig, years: str) -> str:
    """Centered copyright line and optional "Powered by" credit."""
    text = POST_GAP if site.show_powered_by else "\n\n\n"
    if not site.show_copyright:
        return text

    text += center(f"Copyright (c) {years} {site.author.information}", config.line_width)
    if site.show_powered_by:
        text += "\n\n" + center(f"Powered by Weblog v{site.version}", config.line_width)
    return text + "\n\n\n"


def render_home(site: SiteConfig, config: RenderConfig, posts: Sequence[Post], years: str) -> str:
    return render_about(site, config) + render_posts(posts, site, config) + render_footer(site, config, years)


def render_full_post(post: Post, site: SiteConfig, config: RenderConfig) -> str:
    """A single post page with its own footer."""
    return (
        POST_GAP
        + render_post(post, config, hide_selected=site.hide_selected)
        + render_footer(site, config, str(post.date.year))
    )
