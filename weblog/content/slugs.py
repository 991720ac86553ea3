"""URL slugs for post titles."""

from __future__ import annotations

import re
import unicodedata

CYRILLIC_TRANSLITERATION = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d",
    "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i",
    "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "sch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
}  # fmt: skip

QUOTES_RE = re.compile(r"[\"'‘’“”«»]")
NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


class SlugError(ValueError):
    """Raised when a title yields no usable slug."""


def slugify(title: str) -> str:
    """Convert a post title into a URL-safe slug."""
    text = title.lstrip(".").lower()
    text = "".join(CYRILLIC_TRANSLITERATION.get(char, char) for char in text)
    text = QUOTES_RE.sub("", text)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = NON_SLUG_RE.sub("-", text).strip("-")
    if not text:
        raise SlugError(f"Failed to generate a valid slug from title: {title!r}")
    return text


def sanitize_slug(slug: str) -> str:
    """Drop a trailing ``.txt`` extension and slashes from a requested slug."""
    slug = slug.strip().strip("/")
    if slug.endswith(".txt"):
        slug = slug[: -len(".txt")]
    return slug
