"""Greedy line wrapping for fixed-width output."""

from __future__ import annotations

import re

from rich.cells import cell_len

# Ordinary space, tab and the Unicode space separators that allow a break.
# No-break spaces (U+00A0, U+2007, U+202F) never break.
BREAKABLE_SPACES = " \t\u1680\u2000-\u2006\u2008-\u200a\u205f\u3000"
SPACE_RUN_RE = re.compile(f"([{BREAKABLE_SPACES}]+)")
SENTENCE_BREAK_RE = re.compile(r"\.[ \t]*\n[ \t]+")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into words and the space runs between them."""
    return [token for token in SPACE_RUN_RE.split(text) if token]


def is_space(token: str) -> bool:
    return SPACE_RUN_RE.fullmatch(token) is not None


def wrap(text: str, width: int, indent: int = 0) -> str:
    """Wrap ``text`` to ``width`` columns with every line indented by ``indent`` spaces.

    Widths are measured in terminal cells, so wide CJK characters count
    twice. Words that do not fit move to the next line. A hyphenated word
    may be broken after one of its hyphens; a word longer than the usable
    width is cut into width-sized chunks. Empty input yields the bare indent.
    """
    prefix = " " * max(indent, 0)
    usable = max(width - len(prefix), 1)
    width = len(prefix) + usable

    lines: list[str] = []
    line = prefix
    wrapped = False

    def flush() -> None:
        nonlocal line, wrapped
        if line.strip():
            lines.append(line.rstrip())
        line = prefix
        wrapped = True

    for token in tokenize(text):
        if is_space(token):
            if cell_len(line) + cell_len(token) > width:
                flush()
            elif not (wrapped and not line.strip()):
                line += token
            continue

        size = cell_len(token)
        if cell_len(line) + size <= width:
            line += token
            wrapped = False
        elif "-" in token[1:-1] and size <= usable:
            split = _split_at_hyphen(token, width - cell_len(line))
            if split is not None:
                head, token = split
                line += head
            flush()
            line += token
            wrapped = False
        elif size > usable:
            flush()
            chunks = _chop(token, usable)
            for chunk in chunks[:-1]:
                lines.append(prefix + chunk)
            line = prefix + chunks[-1]
            wrapped = False
        else:
            flush()
            line += token
            wrapped = False

    if line.strip() or not lines:
        lines.append(line.rstrip() or prefix)

    return SENTENCE_BREAK_RE.sub(".\n" + prefix, "\n".join(lines))


def _split_at_hyphen(token: str, room: int) -> tuple[str, str] | None:
    """Return the longest ``head-``/``tail`` split whose head fits in ``room``."""
    for index in range(len(token) - 2, 0, -1):
        if token[index] == "-" and cell_len(token[: index + 1]) <= room:
            return token[: index + 1], token[index + 1 :]
    return None


def _chop(token: str, width: int) -> list[str]:
    """Cut ``token`` into pieces of at most ``width`` cells."""
    chunks: list[str] = []
    current = ""
    size = 0
    for char in token:
        char_width = cell_len(char)
        if current and size + char_width > width:
            chunks.append(current)
            current, size = "", 0
        current += char
        size += char_width
    chunks.append(current)
    return chunks
