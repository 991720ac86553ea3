"""RSS and sitemap documents for the weblog."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime as format_rfc2822
from html import escape
from pathlib import Path
from typing import Sequence

from .config import SiteConfig
from .content import Post, SlugError, most_recent_date, slugify
from .render import render_rss_fragment
from .text.typography import beautify

logger = logging.getLogger(__name__)

ABOUT_PARAGRAPH_RE = re.compile(r"\n{3,}")
FEED_NAME = "feed.xml"
SITEMAP_NAME = "sitemap.xml"


def render_rss(site: SiteConfig, posts: Sequence[Post], *, category: str = "") -> str:
    """Render an RSS 2.0 document with one item per post."""
    config = site.render
    updated = most_recent_date(posts) or datetime.now(timezone.utc)
    title_suffix = f" — {category[:1].upper()}{category[1:]}" if category else ""
    feed_href = f"{site.url}/rss/"
    if category:
        feed_href += f"{slugify(category)}/"
    description = ABOUT_PARAGRAPH_RE.split(site.author.about)[0]

    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
        "  <channel>",
        f"    <title>{escape(site.author.name + title_suffix)}</title>",
        f"    <link>{escape(site.url)}/</link>",
        f'    <atom:link href="{escape(feed_href)}" rel="self" type="application/rss+xml" />',
        f"    <description>{escape(description)}</description>",
        "    <language>en</language>",
        f"    <generator>Weblog v{escape(site.version)}</generator>",
        f"    <lastBuildDate>{_format_rfc2822(updated)}</lastBuildDate>",
    ]

    for post in posts:
        try:
            url = f"{site.url}/{post.slug}/"
        except SlugError:
            logger.warning("Skipping post without a usable slug: %s", post.path)
            continue
        title = post.display_title(hide_selected=site.hide_selected)
        if config.beautify_rss:
            title = beautify(title)
        body = render_rss_fragment(post.content, config, inline_markup=True)
        parts.extend(
            [
                "    <item>",
                f"      <title>{escape(title)}</title>",
                f"      <guid>{escape(url)}</guid>",
                f"      <link>{escape(url)}</link>",
                f"      <pubDate>{_format_rfc2822(post.date)}</pubDate>",
                f"      <category>{escape(post.category)}</category>",
                f"      <description>{escape(body)}</description>",
                "    </item>",
            ]
        )

    parts.extend(["  </channel>", "</rss>"])
    return "\n".join(parts) + "\n"


def render_sitemap(site: SiteConfig, posts: Sequence[Post]) -> str:
    """Render a sitemap listing the home page and every post."""
    updated = most_recent_date(posts) or datetime.now(timezone.utc)
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        *_sitemap_url(f"{site.url}/", updated, changefreq="daily"),
    ]
    for post in posts:
        try:
            parts.extend(_sitemap_url(f"{site.url}/{post.slug}/", post.date, changefreq="weekly"))
        except SlugError:
            logger.warning("Skipping post without a usable slug: %s", post.path)
    parts.append("</urlset>")
    return "\n".join(parts) + "\n"


def _sitemap_url(loc: str, lastmod: datetime, *, changefreq: str) -> list[str]:
    return [
        "  <url>",
        f"    <loc>{escape(loc)}</loc>",
        f"    <lastmod>{lastmod.strftime('%Y-%m-%d')}</lastmod>",
        "    <priority>1.0</priority>",
        f"    <changefreq>{changefreq}</changefreq>",
        "  </url>",
    ]


def write_feeds(
    site: SiteConfig,
    posts: Sequence[Post],
    destination: Path,
    *,
    category: str = "",
) -> list[Path]:
    """Write ``feed.xml`` and ``sitemap.xml`` into ``destination``."""
    destination.mkdir(parents=True, exist_ok=True)
    rss_path = destination / FEED_NAME
    sitemap_path = destination / SITEMAP_NAME

    rss_path.write_text(render_rss(site, posts, category=category), encoding="utf-8")
    sitemap_path.write_text(render_sitemap(site, posts), encoding="utf-8")
    logger.debug("Wrote %s and %s", rss_path, sitemap_path)
    return [rss_path, sitemap_path]


def _format_rfc2822(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_rfc2822(value)
