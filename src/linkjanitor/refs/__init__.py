"""Autogenerated link reference definitions for Markdown compatibility."""

from .locate import locate_block
from .render import BEGIN_SENTINEL, END_SENTINEL, render_block
from .resolve import resolve_links
from .sync import insertion_point, synchronize

__all__ = [
    "BEGIN_SENTINEL",
    "END_SENTINEL",
    "insertion_point",
    "locate_block",
    "render_block",
    "resolve_links",
    "synchronize",
]
