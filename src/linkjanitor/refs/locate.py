"""Locate the autogenerated reference block inside a note."""

from ..core.model import Range
from ..core.positions import iter_lines, line_range
from .render import BEGIN_SENTINEL, END_SENTINEL


def locate_block(text: str) -> Range | None:
    """Find the sentinel-delimited block in ``text``.

    The first end line closes the block opened by the nearest begin line
    above it, so a stray unterminated begin never swallows the prose that
    follows it. The range covers both sentinel lines but not the end line's
    line ending. Without such a pair there is no block.
    """
    begin = None
    for line in iter_lines(text):
        if line.content == BEGIN_SENTINEL:
            begin = line
        elif line.content == END_SENTINEL and begin is not None:
            return line_range(begin, line)
    return None
