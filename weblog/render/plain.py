"""Plain-text rendering of post bodies."""

from __future__ import annotations

from ..blocks import Asterism, Block, Heading, ListBlock, Paragraph, Quote, Separator, parse_blocks
from ..config import RenderConfig
from ..text.layout import (
    SEPARATOR_RULE,
    bullet_prefix,
    center,
    center_lines,
    format_list_item,
    format_quote_block,
    format_single_quote,
    ordered_prefix,
)
from ..text.typography import ASTERISM, beautify
from ..text.wrap import wrap

PLAIN_ASTERISM = "* * *"


class PlainTextRenderer:
    """Render post bodies as fixed-width plain text."""

    def __init__(self, config: RenderConfig) -> None:
        self._config = config

    def render(self, body: str) -> str:
        """Render ``body``; blocks are separated by one blank line."""
        parts = [self.render_block(block) for block in parse_blocks(body, self._config)]
        text = "\n\n".join(part for part in parts if part.strip()).rstrip()
        if not text:
            return ""
        return text + "\n\n"

    def render_block(self, block: Block) -> str:
        if isinstance(block, Heading):
            return self._render_heading(block)
        if isinstance(block, Quote):
            return self._render_quote(block)
        if isinstance(block, ListBlock):
            return self._render_list(block)
        if isinstance(block, Paragraph):
            return self._render_paragraph(block)
        if isinstance(block, Asterism):
            symbol = ASTERISM if self._config.beautify_content else PLAIN_ASTERISM
            return center(symbol, self._config.line_width)
        if isinstance(block, Separator):
            return center(SEPARATOR_RULE, self._config.line_width)
        raise TypeError(f"Unsupported block: {block!r}")

    def _typeset(self, text: str) -> str:
        if self._config.beautify_content:
            return beautify(text)
        return text

    def _render_heading(self, heading: Heading) -> str:
        text = self._typeset(heading.text)
        width = self._config.line_width
        if len(text) > width:
            return center_lines(wrap(text, width), width)
        return center(text, width)

    def _render_quote(self, quote: Quote) -> str:
        if quote.is_single_line:
            return format_single_quote(self._typeset(quote.text), self._config)
        return format_quote_block([self._typeset(line) for line in quote.lines], self._config)

    def _render_list(self, block: ListBlock) -> str:
        rows: list[str] = []
        for item in block.items:
            if block.ordered and item.number is not None:
                prefix = ordered_prefix(item.number, block.total_count)
            else:
                prefix = bullet_prefix(item.marker, self._config)
            rows.append(
                format_list_item(
                    self._typeset(item.text),
                    prefix,
                    self._config,
                    continuation=[self._typeset(line) for line in item.continuation],
                )
            )
        return "\n".join(rows)

    def _render_paragraph(self, paragraph: Paragraph) -> str:
        config = self._config
        return "\n".join(
            wrap(self._typeset(line), config.line_width, config.prefix_length).rstrip()
            for line in paragraph.text.split("\n")
        )


def render_plain_text(body: str, config: RenderConfig) -> str:
    """Render a raw post body as plain text."""
    return PlainTextRenderer(config).render(body)
