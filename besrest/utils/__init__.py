"""Utility subpackage for the besrest client."""

from .files import sanitize_txt, save_text
from .timestamps import parse_bes_modtime

__all__ = [
    "sanitize_txt",
    "save_text",
    "parse_bes_modtime",
]
