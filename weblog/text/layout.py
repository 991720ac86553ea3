"""Fixed-width layout helpers: centering, header bars, quotes and list items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from rich.cells import cell_len

from .typography import capitalize
from .wrap import wrap

if TYPE_CHECKING:
    from ..config import RenderConfig

HEADER_FIELD_WIDTH = 20
TITLE_WRAP_LIMIT = 32
QUOTE_MAX_WIDTH = 56
QUOTE_MAX_WIDTH_NARROW = 30
QUOTE_BAR = "|  "
BULLET = "•"
SEPARATOR_RULE = "—" * 5


def center(text: str, width: int, bias: int = 0) -> str:
    """Left-pad ``text`` so it sits in the middle of ``width`` columns.

    Text wider than ``width`` is returned unchanged.
    """
    padding = (width - cell_len(text)) // 2
    if padding < 0:
        return text
    return " " * (padding + bias) + text


def center_lines(text: str, width: int) -> str:
    return "\n".join(center(line, width) for line in text.split("\n"))


def format_header_bar(title: str, category: str, date: str, config: "RenderConfig") -> str:
    """Lay out ``category | title | date`` across the full line width.

    Category and date occupy fixed 20-column fields on either side; the
    title is centered in whatever remains. Long titles wrap onto extra rows
    that keep the title column and leave the side fields blank.
    """
    show_category = config.show_category and bool(category)
    show_date = config.show_date and bool(date)
    category_width = HEADER_FIELD_WIDTH if show_category else 0
    date_width = HEADER_FIELD_WIDTH if show_date else 0
    title_width = max(config.line_width - category_width - date_width, 1)
    bias = 2 if config.mobile_narrowed and title_width % 2 else 0

    title_lines = [title]
    if len(title) > TITLE_WRAP_LIMIT:
        title_lines = wrap(title, min(TITLE_WRAP_LIMIT, title_width)).split("\n")

    rows: list[str] = []
    for index, text in enumerate(title_lines):
        first = index == 0
        left = category.ljust(category_width) if first and show_category else " " * category_width
        right = date.rjust(date_width) if first and show_date else ""
        rows.append((left + _center_field(text, title_width, bias) + right).rstrip())

    return capitalize("\n".join(rows), config)


def _center_field(text: str, width: int, bias: int) -> str:
    size = cell_len(text)
    left = max((width - size) // 2, 0)
    right = max(width - size - left, 0)
    return " " * (left + bias) + text + " " * right


def format_about_bar(left: str, middle: str, right: str, config: "RenderConfig") -> str:
    """Place ``left`` and ``right`` flush with the margins and ``middle`` centered."""
    left = capitalize(left, config)
    middle = capitalize(middle, config)
    right = capitalize(right, config)
    width = config.line_width

    space_left = max((width - len(middle)) // 2, 0)
    space_right = width - space_left - len(middle)
    if config.mobile_narrowed and len(middle) % 2:
        space_left += 1

    return (
        left
        + " " * max(space_left - len(left), 0)
        + middle
        + " " * max(space_right - len(right), 0)
        + right
    ).rstrip()


def format_single_quote(text: str, config: "RenderConfig") -> str:
    """Center a one-line quote between curly quote marks."""
    quoted = f"“{text.strip()}”"
    limit = QUOTE_MAX_WIDTH_NARROW if config.mobile_narrowed else QUOTE_MAX_WIDTH
    limit = min(limit, config.line_width)
    if len(quoted) <= limit:
        return center(quoted, config.line_width)
    return center_lines(wrap(quoted, limit), config.line_width)


def format_quote_block(lines: Sequence[str], config: "RenderConfig") -> str:
    """Render quote lines as an indented block behind a vertical bar."""
    prefix = " " * config.prefix_length + QUOTE_BAR
    width = config.line_width - config.prefix_length - len(QUOTE_BAR) - 1
    rows: list[str] = []
    for line in trim_blank_edges(lines):
        for wrapped in wrap(line.strip(), width).split("\n"):
            rows.append((prefix + wrapped).rstrip())
    return "\n".join(rows)


def trim_blank_edges(lines: Sequence[str]) -> list[str]:
    trimmed = list(lines)
    while trimmed and not trimmed[0].strip():
        trimmed.pop(0)
    while trimmed and not trimmed[-1].strip():
        trimmed.pop()
    return trimmed


def ordered_prefix(number: int, total_count: int) -> str:
    """Numeral prefix padded so items of one list line up."""
    padding = max(_digits(total_count) - _digits(number) + 2, 1)
    return f"{number}." + " " * padding


def bullet_prefix(marker: str, config: "RenderConfig") -> str:
    symbol = BULLET if config.beautify_content else marker
    return symbol + "  "


def format_list_item(
    text: str,
    prefix: str,
    config: "RenderConfig",
    continuation: Iterable[str] = (),
) -> str:
    """Wrap a list item so that follow-on lines hang under the item text."""
    indent = config.prefix_length + len(prefix)
    head = " " * config.prefix_length + prefix
    body = wrap(text.strip(), config.line_width, indent)
    rows = [(head + body[indent:]).rstrip()]
    for extra in continuation:
        rows.append(wrap(extra.strip(), config.line_width, indent).rstrip())
    return "\n".join(rows)


def _digits(number: int) -> int:
    return len(str(abs(number)))
