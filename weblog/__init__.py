"""Weblog text engine: plain-text and RSS rendering of plain-text posts."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib


def _read_local_project_version() -> str:
    """Read the project version from pyproject.toml when the package is uninstalled."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return "0.0.0"
    return data.get("project", {}).get("version", "0.0.0")


try:
    __version__ = load_pkg_version("weblog-text")
except PackageNotFoundError:
    __version__ = _read_local_project_version()

from .config import BeautifyMode, RenderConfig, SiteConfig, load_config  # noqa: E402
from .render import render_plain_text, render_rss_fragment  # noqa: E402

__all__ = [
    "BeautifyMode",
    "RenderConfig",
    "SiteConfig",
    "__version__",
    "load_config",
    "render_plain_text",
    "render_rss_fragment",
]
