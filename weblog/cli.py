"""CLI entrypoints for rendering weblog posts."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from .config import BeautifyMode, RenderConfig, SiteConfig, config_for_user_agent, load_config
from .content import (
    Post,
    PostNotFoundError,
    PostRepository,
    filter_by_date,
    parse_date_path,
    year_range,
)
from .feeds import write_feeds
from .pages import render_full_post, render_home
from .render import render_plain_text, render_rss_fragment

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="Render plain-text weblog posts for terminals and feeds.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file."),
]
UserAgentOption = Annotated[
    str | None,
    typer.Option("--user-agent", "-u", help="Lay out for this client; mobile agents get a narrow page."),
]


@app.command()
def render(
    path: Annotated[Path, typer.Argument(..., help="Plain-text file to render.")],
    config_path: ConfigPathOption = "weblog.yml",
    width: Annotated[int | None, typer.Option("--width", "-w", help="Override the line width.")] = None,
    prefix: Annotated[int | None, typer.Option("--prefix", help="Override the body indent.")] = None,
    beautify: Annotated[
        BeautifyMode | None,
        typer.Option("--beautify", "-b", help="Override the beautify mode.", case_sensitive=False),
    ] = None,
    mobile: Annotated[bool, typer.Option("--mobile", help="Use the narrow mobile layout.")] = False,
    user_agent: UserAgentOption = None,
    html: Annotated[bool, typer.Option("--html", help="Emit the RSS HTML fragment instead.")] = False,
) -> None:
    """Render a single file without the surrounding page."""
    try:
        body = path.read_text(encoding="utf-8")
    except OSError as exc:
        err_console.print(f"[bold red]Cannot read[/]: {path} ({exc})")
        raise typer.Exit(code=1) from exc

    config = _render_config(config_path, width=width, prefix=prefix, beautify=beautify)
    if mobile:
        config = config.narrowed()
    config = config_for_user_agent(config, user_agent)

    if html:
        typer.echo(render_rss_fragment(body, config))
    else:
        typer.echo(render_plain_text(body, config), nl=False)


@app.command()
def post(
    slug: Annotated[str, typer.Argument(..., help="Slug of the post to show.")],
    config_path: ConfigPathOption = "weblog.yml",
    draft: Annotated[bool, typer.Option("--draft", help="Look the slug up among drafts.")] = False,
    user_agent: UserAgentOption = None,
) -> None:
    """Render one post page with its header and footer."""
    site = _load(config_path)
    repository = _repository(site)
    try:
        found = repository.find_by_slug(slug, drafts=draft)
    except PostNotFoundError as exc:
        err_console.print(f"[bold red]Not found[/]: no post with slug '{slug}'.")
        raise typer.Exit(code=1) from exc

    config = config_for_user_agent(site.render, user_agent)
    typer.echo(render_full_post(found, site, config), nl=False)


@app.command()
def home(
    config_path: ConfigPathOption = "weblog.yml",
    user_agent: UserAgentOption = None,
) -> None:
    """Render the home page: about block, every post and the footer."""
    site = _load(config_path)
    repository = _repository(site)
    posts = repository.all_posts()
    config = config_for_user_agent(site.render, user_agent)
    typer.echo(render_home(site, config, posts, year_range(posts)), nl=False)


@app.command("list")
def list_posts(
    config_path: ConfigPathOption = "weblog.yml",
    category: Annotated[str | None, typer.Option("--category", help="Only posts in this category.")] = None,
    date: Annotated[str | None, typer.Option("--date", help="Only posts from yyyy, yyyy/mm or yyyy/mm/dd.")] = None,
    search: Annotated[str | None, typer.Option("--search", "-s", help="Only posts containing this text.")] = None,
    selected: Annotated[bool, typer.Option("--selected", help="Only selected posts.")] = False,
) -> None:
    """List published posts, newest first."""
    site = _load(config_path)
    repository = _repository(site)

    posts: list[Post]
    if search:
        posts = repository.search(search)
    elif category:
        posts = repository.by_category(category)
    elif selected:
        posts = repository.selected_posts()
    else:
        posts = repository.all_posts()

    if date:
        parsed = parse_date_path(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date: {date}", param_hint="--date")
        posts = filter_by_date(posts, *parsed)

    if not posts:
        console.print("[bold yellow]No posts[/]: nothing matches the given filters.")
        raise typer.Exit(code=1)

    table = Table(title=f"{len(posts)} post(s)")
    table.add_column("Date")
    table.add_column("Category")
    table.add_column("Title")
    table.add_column("Slug")
    for item in posts:
        table.add_row(item.date_display(shorten=True), item.category, item.clean_title, item.slug)
    console.print(table)


@app.command()
def feed(
    config_path: ConfigPathOption = "weblog.yml",
    output: Annotated[Path, typer.Option("--output", "-o", help="Directory for feed.xml and sitemap.xml.")] = Path("."),
    category: Annotated[str, typer.Option("--category", help="Restrict the RSS feed to one category.")] = "",
) -> None:
    """Write the RSS feed and the sitemap."""
    site = _load(config_path)
    repository = _repository(site)
    posts = repository.by_category(category) if category else repository.all_posts()

    paths = write_feeds(site, posts, output, category=category)
    locations = ", ".join(_display_path(path) for path in paths)
    console.print(f"[bold green]Feeds[/]: {len(posts)} post(s) written to {locations}")


def _render_config(
    config_path: str,
    *,
    width: int | None,
    prefix: int | None,
    beautify: BeautifyMode | None,
) -> RenderConfig:
    path = Path(config_path)
    base = _load(config_path).render if path.exists() else RenderConfig()
    overrides = {
        key: value
        for key, value in (("line_width", width), ("prefix_length", prefix), ("beautify", beautify))
        if value is not None
    }
    if not overrides:
        return base
    try:
        return RenderConfig.model_validate({**base.model_dump(), **overrides})
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load(path: str) -> SiteConfig:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _repository(site: SiteConfig) -> PostRepository:
    try:
        return PostRepository(site.weblog_dir)
    except NotADirectoryError as exc:
        err_console.print(f"[bold red]Missing weblog directory[/]: {site.weblog_dir}")
        raise typer.Exit(code=1) from exc


def _display_path(path: Path) -> str:
    try:
        return path.resolve().relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
