"""Typographic substitutions applied to post text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import RenderConfig

QUOTED_SPAN_RE = re.compile(r'"([^"]*)"')
SENTENCE_SPACING_RE = re.compile(r"(\.{3}|[.!?])([\"'”’»)]?)[ \t]+")

ASTERISM = "⁂"
EM_DASH = "—"


def beautify(text: str) -> str:
    """Curl quotes, substitute dashes and asterisms.

    The substitutions run in a fixed order: quote spans are curled before
    the apostrophe pass so that double quotes never turn into apostrophes.
    """
    text = QUOTED_SPAN_RE.sub(r"“\1”", text)
    text = text.replace(" - ", f" {EM_DASH} ")
    text = text.replace(" -", f" {EM_DASH}")
    text = text.replace("'", "’")
    text = text.replace("***", ASTERISM).replace("* * *", ASTERISM)

    lines = text.split("\n")
    return "\n".join(EM_DASH + line[1:] if line.startswith("-") else line for line in lines)


def capitalize(text: str, config: "RenderConfig") -> str:
    """Upper-case titles when the configuration asks for it."""
    if config.capitalize_titles:
        return text.upper()
    return text


def normalize_sentence_spacing(text: str) -> str:
    """Leave exactly one space after sentence-ending punctuation."""
    return SENTENCE_SPACING_RE.sub(r"\1\2 ", text)
