"""Pure string helpers: typography, wrapping and fixed-width layout."""

from .layout import center
from .typography import beautify, capitalize, normalize_sentence_spacing
from .wrap import wrap

__all__ = ["beautify", "capitalize", "center", "normalize_sentence_spacing", "wrap"]
