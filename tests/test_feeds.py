from datetime import datetime, timezone
from pathlib import Path

from weblog.config import AuthorConfig, RenderConfig, SiteConfig
from weblog.content import Post
from weblog.feeds import render_rss, render_sitemap, write_feeds


def _site() -> SiteConfig:
    return SiteConfig(
        url="https://example.com/",
        version="1.0",
        author=AuthorConfig(name="Ann", about="About me.\n\n\n\nMore about me."),
        render=RenderConfig(beautify="RSS"),
    )


def _posts() -> list[Post]:
    return [
        Post(
            title="Hello World",
            date=datetime(2024, 3, 7, 9, 30, tzinfo=timezone.utc),
            category="Notes",
            content="> quoted\nsee example.com",
        ),
        Post(
            title="It's here",
            date=datetime(2024, 1, 2, tzinfo=timezone.utc),
            content="Plain.",
        ),
    ]


def test_render_rss_channel() -> None:
    rss = render_rss(_site(), _posts())
    assert rss.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<title>Ann</title>" in rss
    assert "<link>https://example.com/</link>" in rss
    assert "<description>About me.</description>" in rss
    assert "<generator>Weblog v1.0</generator>" in rss
    assert "<lastBuildDate>Thu, 07 Mar 2024 09:30:00 +0000</lastBuildDate>" in rss
    assert 'href="https://example.com/rss/"' in rss


def test_render_rss_items() -> None:
    rss = render_rss(_site(), _posts())
    assert rss.count("<item>") == 2
    assert "<guid>https://example.com/hello-world/</guid>" in rss
    assert "<category>Notes</category>" in rss
    assert "<title>It’s here</title>" in rss
    assert "&lt;blockquote&gt;quoted&lt;/blockquote&gt;" in rss
    assert "&lt;a href=&quot;https://example.com&quot;&gt;example.com&lt;/a&gt;" in rss


def test_render_rss_category_feed() -> None:
    rss = render_rss(_site(), _posts()[:1], category="notes")
    assert "<title>Ann — Notes</title>" in rss
    assert 'href="https://example.com/rss/notes/"' in rss


def test_render_rss_skips_posts_without_slug() -> None:
    posts = [Post(title="!!!", date=datetime(2024, 1, 1, tzinfo=timezone.utc))]
    assert "<item>" not in render_rss(_site(), posts)


def test_render_sitemap() -> None:
    sitemap = render_sitemap(_site(), _posts())
    assert "<loc>https://example.com/</loc>" in sitemap
    assert "<loc>https://example.com/hello-world/</loc>" in sitemap
    assert "<loc>https://example.com/its-here/</loc>" in sitemap
    assert "<lastmod>2024-03-07</lastmod>" in sitemap


def test_write_feeds(tmp_path: Path) -> None:
    paths = write_feeds(_site(), _posts(), tmp_path / "out")
    assert [path.name for path in paths] == ["feed.xml", "sitemap.xml"]
    assert all(path.exists() for path in paths)
    assert "<rss" in paths[0].read_text(encoding="utf-8")
