"""Renderers turning post bodies into plain text or HTML."""

from .html import HtmlRenderer, render_rss_fragment
from .plain import PlainTextRenderer, render_plain_text

__all__ = ["HtmlRenderer", "PlainTextRenderer", "render_plain_text", "render_rss_fragment"]
