"""Typed representation of a weblog post."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .slugs import slugify

SELECTED_PREFIX = "*"
SELECTED_MARK = "★"
PLAIN_SELECTED_MARK = "*"


class Post(BaseModel):
    """A post read from the weblog directory."""

    title: str = Field(description="Raw title taken from the file name.")
    date: datetime = Field(description="Publication timestamp (file modification time).")
    category: str = Field(default="Misc")
    content: str = Field(default="", description="Raw post body.")
    path: Path | None = Field(default=None, description="Source file, when loaded from disk.")
    is_draft: bool = Field(default=False)
    is_hidden: bool = Field(default=False)

    @field_validator("category")
    def _strip_hidden_marker(cls, value: str) -> str:
        return value.lstrip(".")

    @property
    def is_selected(self) -> bool:
        return self.title.startswith(SELECTED_PREFIX)

    @property
    def clean_title(self) -> str:
        return self.title.lstrip("*.")

    @property
    def slug(self) -> str:
        return slugify(self.clean_title)

    def display_title(self, *, hide_selected: bool = True, beautify: bool = False) -> str:
        """Title as shown to readers, optionally flagged as selected."""
        title = self.clean_title
        if self.is_selected and not hide_selected:
            title += f" {SELECTED_MARK if beautify else PLAIN_SELECTED_MARK}"
        return title

    def date_display(self, shorten: bool = False) -> str:
        """Format the date as ``7 March 2024`` or, shortened, ``7 Mar 2024``."""
        month = self.date.strftime("%b" if shorten else "%B")
        return f"{self.date.day} {month} {self.date.year}"
