"""HTML fragments for RSS item descriptions."""

from __future__ import annotations

import re
from html import escape

from ..blocks import Asterism, Block, Heading, ListBlock, Paragraph, Quote, Separator, scan_lines
from ..config import RenderConfig
from ..text.layout import trim_blank_edges
from ..text.typography import ASTERISM, beautify

CODE_SPAN_RE = re.compile(r"`([^`]*)`")
QUOTED_LINK_RE = re.compile(r"^([ \t]*)>[ \t]*((?:https?://)?[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}\S*)[ \t]*$", re.MULTILINE)
LINK_RE = re.compile(
    r"(?<![\w.@/-])"
    r"((?:https?://\S+)|(?:[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}(?:/\S*)?))"
)
SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
TRAILING_PUNCTUATION = ".,;:!?)"
DEFAULT_LINK_SCHEME = "https://"

ASCII_PUNCTUATION = str.maketrans({"“": '"', "”": '"', "‘": "'", "’": "'", "—": "-"})


class HtmlRenderer:
    """Render post bodies as escaped HTML, one paragraph per source line.

    With ``inline_markup`` enabled, backtick spans become ``<code>`` and bare
    URLs or domain names become links. When ``config`` enables RSS
    beautification the text is typeset first.
    """

    def __init__(self, config: RenderConfig | None = None, *, inline_markup: bool = False) -> None:
        self._config = config
        self._inline_markup = inline_markup

    def render(self, body: str) -> str:
        if self._inline_markup:
            body = QUOTED_LINK_RE.sub(r"\1\2", body)
        return "".join(self.render_block(block) for block in scan_lines(body))

    def render_block(self, block: Block) -> str:
        if isinstance(block, Heading):
            return f"<h{block.level}>{self._inline(block.text)}</h{block.level}>"
        if isinstance(block, Quote):
            lines = trim_blank_edges(block.lines)
            return "<blockquote>" + "<br />".join(self._inline(line) for line in lines) + "</blockquote>"
        if isinstance(block, ListBlock):
            tag = "ol" if block.ordered else "ul"
            items = "".join(
                "<li>" + "<br />".join(self._inline(text) for text in (item.text, *item.continuation)) + "</li>"
                for item in block.items
            )
            return f"<{tag}>{items}</{tag}>"
        if isinstance(block, Paragraph):
            return "<p>" + "<br />".join(self._inline(line) for line in block.text.split("\n")) + "</p>"
        if isinstance(block, Asterism):
            return f"<p>{ASTERISM if self._beautify else '* * *'}</p>"
        if isinstance(block, Separator):
            return "<hr />"
        raise TypeError(f"Unsupported block: {block!r}")

    @property
    def _beautify(self) -> bool:
        return self._config is not None and self._config.beautify_rss

    def _inline(self, text: str) -> str:
        if self._beautify:
            text = beautify(text)
        if not self._inline_markup:
            return escape(text)

        parts = CODE_SPAN_RE.split(text)
        rendered: list[str] = []
        for index, part in enumerate(parts):
            if index % 2:
                rendered.append(f"<code>{escape(part.translate(ASCII_PUNCTUATION))}</code>")
            else:
                rendered.append(linkify(part))
        return "".join(rendered)


def linkify(text: str) -> str:
    """Escape ``text`` and wrap URLs and domain names in anchors."""
    pieces: list[str] = []
    last = 0
    for match in LINK_RE.finditer(text):
        url = match.group(1)
        trailing = ""
        while url and url[-1] in TRAILING_PUNCTUATION:
            trailing = url[-1] + trailing
            url = url[:-1]
        href = url if SCHEME_RE.match(url) else DEFAULT_LINK_SCHEME + url
        pieces.append(escape(text[last : match.start()]))
        pieces.append(f'<a href="{escape(href)}">{escape(url)}</a>')
        pieces.append(escape(trailing))
        last = match.end()
    pieces.append(escape(text[last:]))
    return "".join(pieces)


def render_rss_fragment(
    body: str,
    config: RenderConfig | None = None,
    *,
    inline_markup: bool = False,
) -> str:
    """Render a raw post body as an HTML fragment for an RSS description."""
    return HtmlRenderer(config, inline_markup=inline_markup).render(body)
