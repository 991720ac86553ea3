"""Configuration models and loading for the weblog renderer."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "weblog.yml"

MOBILE_AGENT_RE = re.compile(
    r"Android|iPhone|iPad|iPod|webOS|BlackBerry|IEMobile|Opera Mini",
    re.IGNORECASE,
)

RENDER_KEYS = (
    "line_width",
    "prefix_length",
    "beautify",
    "capitalize_titles",
    "show_category",
    "show_date",
    "shorten_date",
)
AUTHOR_KEYS = {
    "author_name": "name",
    "author_email": "email",
    "author_location": "location",
    "about_text": "about",
    "about_text_alt": "about_alt",
}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


class BeautifyMode(str, Enum):
    """Where typographic substitutions are applied."""

    OFF = "Off"
    ALL = "All"
    CONTENT = "Content"
    RSS = "RSS"

    @property
    def beautifies_content(self) -> bool:
        return self in (BeautifyMode.ALL, BeautifyMode.CONTENT)

    @property
    def beautifies_rss(self) -> bool:
        return self in (BeautifyMode.ALL, BeautifyMode.RSS)


class RenderConfig(BaseModel):
    """Immutable layout settings consumed by every renderer."""

    model_config = ConfigDict(frozen=True)

    line_width: int = Field(default=72, ge=1, description="Total columns available per line.")
    prefix_length: int = Field(default=3, ge=0, description="Left indent for body text.")
    beautify: BeautifyMode = Field(default=BeautifyMode.OFF)
    capitalize_titles: bool = Field(default=False)
    mobile_narrowed: bool = Field(
        default=False,
        description="Set when the layout was narrowed for a mobile client.",
    )
    show_category: bool = Field(default=True)
    show_date: bool = Field(default=True)
    shorten_date: bool = Field(default=False)

    @field_validator("beautify", mode="before")
    def _parse_beautify(cls, value: Any) -> Any:
        # YAML reads a bare `off` as a boolean.
        if value is None or value is False:
            return BeautifyMode.OFF
        if value is True:
            return BeautifyMode.ALL
        if isinstance(value, str):
            lookup = {mode.value.lower(): mode for mode in BeautifyMode}
            mode = lookup.get(value.strip().lower())
            if mode is None:
                raise ValueError(f"beautify must be one of {', '.join(lookup)}")
            return mode
        return value

    @model_validator(mode="after")
    def _check_prefix_fits(self) -> "RenderConfig":
        if self.prefix_length >= self.line_width:
            raise ValueError("prefix_length must be smaller than line_width")
        return self

    @property
    def beautify_content(self) -> bool:
        return self.beautify.beautifies_content

    @property
    def beautify_rss(self) -> bool:
        return self.beautify.beautifies_rss

    def narrowed(self) -> "RenderConfig":
        """Return the layout used for mobile clients."""
        if self.mobile_narrowed:
            return self
        width = self.line_width // 2 + 6
        data = self.model_dump()
        data.update(
            line_width=width,
            prefix_length=min(self.prefix_length, width - 1),
            mobile_narrowed=True,
            show_category=False,
            show_date=False,
        )
        return RenderConfig.model_validate(data)


class AuthorConfig(BaseModel):
    """Author details shown in the about block, footer and feeds."""

    name: str = Field(default="Unknown")
    email: str = Field(default="no-reply@example.com")
    location: str = Field(default="")
    about: str = Field(default="")
    about_alt: str | None = Field(
        default=None,
        description="Alternative about text served to mobile clients.",
    )

    @field_validator("about", "about_alt", mode="before")
    def _expand_newlines(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.replace("\\n", "\n")
        return value

    @property
    def information(self) -> str:
        return self.email or self.name

    def about_for(self, mobile: bool) -> str:
        if mobile and self.about_alt is not None:
            return self.about_alt
        return self.about


class SiteConfig(BaseModel):
    """Site-wide settings loaded from ``weblog.yml``."""

    url: str = Field(default="http://localhost")
    weblog_dir: Path = Field(default=Path("weblog"))
    version: str = Field(default_factory=lambda: _package_version())
    author: AuthorConfig = Field(default_factory=AuthorConfig)
    show_powered_by: bool = Field(default=True)
    show_copyright: bool = Field(default=True)
    show_separator: bool = Field(default=False)
    hide_selected: bool = Field(default=True)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @field_validator("weblog_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("url")
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "SiteConfig":
        """Build a site config from the flat key layout used by ``weblog.yml``."""
        values = dict(data)
        render = {key: values.pop(key) for key in RENDER_KEYS if key in values}
        author = {field: values.pop(key) for key, field in AUTHOR_KEYS.items() if key in values}
        domain = values.pop("domain", None)
        if domain and "url" not in values:
            values["url"] = f"https://{str(domain).strip('/')}"
        if render:
            values["render"] = {**values.get("render", {}), **render}
        if author:
            values["author"] = {**values.get("author", {}), **author}
        return cls(**values)


def load_config(path: str | Path) -> SiteConfig:
    """Load ``weblog.yml`` and resolve the weblog directory against its location.

    ``path`` may name the file itself or a directory containing it.
    """
    candidate = Path(path)
    if candidate.is_dir():
        candidate = candidate / DEFAULT_CONFIG_NAME
    if not candidate.exists():
        raise FileNotFoundError(candidate)

    with candidate.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {candidate}: {exc}") from exc

    if isinstance(data, dict) and isinstance(data.get("weblog"), dict):
        data = data["weblog"]
    if not isinstance(data, dict):
        raise ConfigError(f"{candidate} must define a mapping at its root")

    try:
        cfg = SiteConfig.from_mapping(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc

    if not cfg.weblog_dir.is_absolute():
        cfg.weblog_dir = (candidate.parent.resolve() / cfg.weblog_dir).resolve()
    if not cfg.weblog_dir.is_dir():
        logger.warning("Weblog directory %s does not exist.", cfg.weblog_dir)
    logger.debug("Loaded configuration from %s", candidate)
    return cfg


def is_mobile_user_agent(user_agent: str | None) -> bool:
    """Return True when the user agent names a known mobile device."""
    if not user_agent:
        return False
    return MOBILE_AGENT_RE.search(user_agent) is not None


def config_for_user_agent(config: RenderConfig, user_agent: str | None) -> RenderConfig:
    """Narrow ``config`` when the request comes from a mobile device."""
    if is_mobile_user_agent(user_agent):
        return config.narrowed()
    return config


def _package_version() -> str:
    from . import __version__

    return __version__
