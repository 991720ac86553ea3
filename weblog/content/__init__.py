"""Posts, slugs and the on-disk post repository."""

from .models import Post
from .repository import (
    PostNotFoundError,
    PostRepository,
    filter_by_date,
    load_post,
    most_recent_date,
    parse_date_path,
    sort_posts,
    year_range,
)
from .slugs import SlugError, sanitize_slug, slugify

__all__ = [
    "Post",
    "PostNotFoundError",
    "PostRepository",
    "SlugError",
    "filter_by_date",
    "load_post",
    "most_recent_date",
    "parse_date_path",
    "sanitize_slug",
    "slugify",
    "sort_posts",
    "year_range",
]
