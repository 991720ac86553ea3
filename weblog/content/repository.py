"""Load posts from the weblog directory of ``.txt`` files."""

from __future__ import annotations

import logging
import unicodedata
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Iterator, Literal, Sequence

from .models import Post
from .slugs import SlugError, sanitize_slug

logger = logging.getLogger(__name__)

POST_SUFFIX = ".txt"
DRAFTS_DIR = "drafts"
MISC_CATEGORY = "Misc"

DatePrecision = Literal["year", "month", "day"]


class PostNotFoundError(LookupError):
    """Raised when no post matches a requested slug."""


def load_post(path: Path, root: Path) -> Post:
    """Build a post from a file below ``root``."""
    relative = path.relative_to(root)
    parts = relative.parts
    category = _capitalize_first(parts[0].lstrip(".")) if len(parts) > 1 else MISC_CATEGORY

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Unable to read post %s: %s", path, exc)
        content = ""

    return Post(
        title=path.stem,
        date=datetime.fromtimestamp(path.stat().st_mtime).astimezone(),
        category=category,
        content=content,
        path=path,
        is_draft=DRAFTS_DIR in parts[:-1],
        is_hidden=any(part.startswith(".") for part in parts),
    )


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class PostRepository:
    """Read-only access to the posts stored under a directory."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)
        if not self._directory.is_dir():
            raise NotADirectoryError(f"Weblog directory not found: {self._directory}")

    @property
    def directory(self) -> Path:
        return self._directory

    def iter_posts(self) -> Iterator[Post]:
        """Yield every post on disk, including drafts and hidden posts."""
        for path in sorted(self._directory.rglob(f"*{POST_SUFFIX}")):
            if path.is_file():
                yield load_post(path, self._directory)

    def all_posts(self) -> list[Post]:
        """Published posts, newest first."""
        return sort_posts(post for post in self.iter_posts() if _is_listed(post))

    def selected_posts(self) -> list[Post]:
        return [post for post in self.all_posts() if post.is_selected]

    def by_category(self, category: str) -> list[Post]:
        """Posts in ``category``; ``misc`` also matches posts outside any category."""
        wanted = category.strip().lower()
        return [post for post in self.all_posts() if post.category.lower() == wanted]

    def by_date(self, day: date, precision: DatePrecision = "day") -> list[Post]:
        return filter_by_date(self.all_posts(), day, precision)

    def find_by_slug(self, slug: str, *, drafts: bool = False) -> Post:
        """Return the post whose slug matches; hidden posts are addressable."""
        wanted = sanitize_slug(slug)
        for post in self.iter_posts():
            if post.is_draft is not drafts:
                continue
            try:
                if post.slug == wanted:
                    return post
            except SlugError:
                logger.warning("Skipping post with unusable title: %s", post.path)
        raise PostNotFoundError(slug)

    def search(self, query: str) -> list[Post]:
        needle = fold_text(query.strip())
        if not needle:
            return []
        return [
            post
            for post in self.all_posts()
            if needle in fold_text(post.clean_title) or needle in fold_text(post.content)
        ]

    def year_range(self) -> str:
        return year_range(self.all_posts())


def _is_listed(post: Post) -> bool:
    return not post.is_draft and not post.is_hidden


def fold_text(text: str) -> str:
    """Case- and accent-insensitive form of ``text`` used for searching."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char)).casefold()


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    return sorted(posts, key=lambda post: post.date, reverse=True)


def filter_by_date(posts: Iterable[Post], day: date, precision: DatePrecision = "day") -> list[Post]:
    """Keep posts published in the same year, month or day as ``day``."""
    selected: list[Post] = []
    for post in posts:
        posted = post.date.date()
        if posted.year != day.year:
            continue
        if precision in ("month", "day") and posted.month != day.month:
            continue
        if precision == "day" and posted.day != day.day:
            continue
        selected.append(post)
    return selected


def parse_date_path(value: str) -> tuple[date, DatePrecision] | None:
    """Parse ``yyyy``, ``yyyy/mm`` or ``yyyy/mm/dd`` into a date and its precision."""
    parts = value.strip().strip("/").split("/")
    if not 1 <= len(parts) <= 3 or not all(part.isdigit() for part in parts):
        return None
    if len(parts[0]) != 4 or not 1900 <= int(parts[0]) <= 2100:
        return None

    precision: DatePrecision = ("year", "month", "day")[len(parts) - 1]
    numbers = [int(part) for part in parts] + [1] * (3 - len(parts))
    try:
        return date(*numbers), precision
    except ValueError:
        return None


def year_range(posts: Sequence[Post]) -> str:
    """``"2021-2024"`` for posts spanning years, a single year otherwise."""
    if not posts:
        return str(datetime.now().year)
    years = [post.date.year for post in posts]
    first, last = min(years), max(years)
    return str(first) if first == last else f"{first}-{last}"


def most_recent_date(posts: Sequence[Post]) -> datetime | None:
    if not posts:
        return None
    return max(post.date for post in posts)
