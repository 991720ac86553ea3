"""Split raw post bodies into typed blocks.

Two scans share one block taxonomy and one line classifier:

* :func:`parse_blocks` works on blank-line separated chunks and feeds the
  plain-text renderer.
* :func:`scan_lines` walks single lines and feeds the RSS renderer, where a
  paragraph is one source line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from .text.typography import normalize_sentence_spacing

if TYPE_CHECKING:
    from .config import RenderConfig

BLANK_LINES_RE = re.compile(r"\n[ \t]*\n\s*")
HEADING_RE = re.compile(r"^(#+)\s*(.*)$")
STRICT_HEADING_RE = re.compile(r"^(#+)\s+(.*)$")
ORDERED_ITEM_RE = re.compile(r"^(\d+)\.\s+(.*)$")
BULLET_ITEM_RE = re.compile(r"^([*-])\s+(.*)$")

ASTERISM_LITERALS = frozenset({"***", "* * *"})
SEPARATOR_LITERAL = "---"
MAX_HEADING_LEVEL = 6


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True, slots=True)
class Quote:
    lines: tuple[str, ...]

    @property
    def is_single_line(self) -> bool:
        return sum(1 for line in self.lines if line.strip()) == 1

    @property
    def text(self) -> str:
        return next((line for line in self.lines if line.strip()), "")


@dataclass(frozen=True, slots=True)
class ListItem:
    """One list entry; ``marker`` is the source marker (``"3."``, ``"-"`` or ``"*"``)."""

    marker: str
    text: str
    continuation: tuple[str, ...] = ()

    @property
    def number(self) -> int | None:
        if self.marker.endswith("."):
            return int(self.marker[:-1])
        return None


@dataclass(frozen=True, slots=True)
class ListBlock:
    ordered: bool
    items: tuple[ListItem, ...]

    @property
    def total_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str


@dataclass(frozen=True, slots=True)
class Asterism:
    pass


@dataclass(frozen=True, slots=True)
class Separator:
    pass


Block = Union[Heading, Quote, ListBlock, Paragraph, Asterism, Separator]


class LineKind(Enum):
    BLANK = "blank"
    HEADING = "heading"
    QUOTE = "quote"
    ORDERED = "ordered"
    BULLET = "bullet"
    ASTERISM = "asterism"
    SEPARATOR = "separator"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Line:
    """A classified source line with its marker removed."""

    kind: LineKind
    text: str
    marker: str = ""
    level: int = 0


def classify_line(raw: str, *, strict_heading: bool = False) -> Line:
    """Classify one source line by its leading marker.

    Asterism and separator literals are left to the callers, which know
    whether the line stands alone.
    """
    line = raw.strip()
    if not line:
        return Line(LineKind.BLANK, "")

    heading = (STRICT_HEADING_RE if strict_heading else HEADING_RE).match(line)
    if heading:
        level = min(len(heading.group(1)), MAX_HEADING_LEVEL)
        return Line(LineKind.HEADING, heading.group(2).strip(), marker=heading.group(1), level=level)
    if line.startswith(">"):
        return Line(LineKind.QUOTE, line[1:].strip(), marker=">")

    ordered = ORDERED_ITEM_RE.match(line)
    if ordered:
        return Line(LineKind.ORDERED, ordered.group(2).strip(), marker=f"{int(ordered.group(1))}.")
    bullet = BULLET_ITEM_RE.match(line)
    if bullet:
        return Line(LineKind.BULLET, bullet.group(2).strip(), marker=bullet.group(1))
    return Line(LineKind.TEXT, line)


def split_chunks(body: str) -> list[str]:
    """Split a body on runs of blank lines."""
    text = body.replace("\r\n", "\n").replace("\r", "\n").strip("\n")
    return [chunk for chunk in BLANK_LINES_RE.split(text) if chunk.strip()]


def parse_blocks(body: str, config: "RenderConfig | None" = None) -> list[Block]:
    """Parse ``body`` into blocks, one blank-line separated chunk at a time.

    Sentence spacing is normalized per chunk unless the layout is narrowed
    for mobile clients.
    """
    normalize = config is None or not config.mobile_narrowed
    blocks: list[Block] = []
    for chunk in split_chunks(body):
        if normalize:
            chunk = normalize_sentence_spacing(chunk)
        lines = [line for line in chunk.split("\n") if line.strip()]
        blocks.extend(_parse_chunk(lines))
    return blocks


def _parse_chunk(lines: list[str]) -> list[Block]:
    blocks: list[Block] = []
    while lines:
        stripped = "\n".join(line.strip() for line in lines)
        if stripped in ASTERISM_LITERALS:
            blocks.append(Asterism())
            break
        if stripped == SEPARATOR_LITERAL:
            blocks.append(Separator())
            break

        first = classify_line(lines[0])
        if first.kind is LineKind.HEADING:
            blocks.append(Heading(level=first.level, text=first.text))
            lines = lines[1:]
        elif first.kind is LineKind.QUOTE:
            count = _quote_run_length(lines)
            blocks.append(Quote(lines=tuple(classify_line(line).text for line in lines[:count])))
            lines = lines[count:]
        elif first.kind in (LineKind.ORDERED, LineKind.BULLET):
            block, count = _consume_list(lines)
            blocks.append(block)
            lines = lines[count:]
        else:
            blocks.append(Paragraph(text="\n".join(line.strip() for line in lines)))
            break
    return blocks


def _quote_run_length(lines: list[str]) -> int:
    count = 0
    for line in lines:
        if not line.lstrip().startswith(">"):
            break
        count += 1
    return count


def _consume_list(lines: list[str]) -> tuple[ListBlock, int]:
    """Collect one same-family list run; plain lines continue the last item."""
    family = classify_line(lines[0]).kind
    items: list[ListItem] = []
    consumed = 0
    for raw in lines:
        line = classify_line(raw)
        if line.kind is family:
            items.append(ListItem(marker=line.marker, text=line.text))
        elif line.kind in (LineKind.ORDERED, LineKind.BULLET):
            break
        else:
            last = items[-1]
            items[-1] = ListItem(
                marker=last.marker,
                text=last.text,
                continuation=(*last.continuation, raw.strip()),
            )
        consumed += 1
    return ListBlock(ordered=family is LineKind.ORDERED, items=tuple(items)), consumed


class _ScanState(Enum):
    NONE = "none"
    IN_QUOTE = "in_quote"
    IN_LIST = "in_list"


@dataclass(slots=True)
class _LineScanner:
    """State machine behind :func:`scan_lines`."""

    blocks: list[Block] = field(default_factory=list)
    state: _ScanState = _ScanState.NONE
    family: LineKind | None = None
    pending: list[Line] = field(default_factory=list)

    def feed(self, line: Line) -> None:
        if line.kind is LineKind.QUOTE:
            if self.state is not _ScanState.IN_QUOTE:
                self.flush()
                self.state = _ScanState.IN_QUOTE
            self.pending.append(line)
            return
        if line.kind in (LineKind.ORDERED, LineKind.BULLET):
            if self.state is not _ScanState.IN_LIST or self.family is not line.kind:
                self.flush()
                self.state = _ScanState.IN_LIST
                self.family = line.kind
            self.pending.append(line)
            return

        self.flush()
        if line.kind is LineKind.HEADING:
            self.blocks.append(Heading(level=line.level, text=line.text))
        elif line.kind is LineKind.ASTERISM:
            self.blocks.append(Asterism())
        elif line.kind is LineKind.SEPARATOR:
            self.blocks.append(Separator())
        elif line.kind is LineKind.TEXT:
            self.blocks.append(Paragraph(text=line.text))

    def flush(self) -> None:
        if self.state is _ScanState.IN_QUOTE:
            self.blocks.append(Quote(lines=tuple(line.text for line in self.pending)))
        elif self.state is _ScanState.IN_LIST:
            items = tuple(ListItem(marker=line.marker, text=line.text) for line in self.pending)
            self.blocks.append(ListBlock(ordered=self.family is LineKind.ORDERED, items=items))
        self.state = _ScanState.NONE
        self.family = None
        self.pending = []


def _classify_scanned(raw: str) -> Line:
    line = raw.strip()
    if line in ASTERISM_LITERALS:
        return Line(LineKind.ASTERISM, line)
    if line == SEPARATOR_LITERAL:
        return Line(LineKind.SEPARATOR, line)
    return classify_line(raw, strict_heading=True)


def scan_lines(body: str) -> list[Block]:
    """Parse ``body`` line by line; every plain line becomes its own paragraph."""
    scanner = _LineScanner()
    for raw in body.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        scanner.feed(_classify_scanned(raw))
    scanner.flush()
    return scanner.blocks
