"""Line/column/offset arithmetic over raw note text.

Offsets always count every line ending at its real length, so the same
``(line, column)`` pair maps to different offsets in a ``"\\n"`` note and in
its ``"\\r\\n"`` twin.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .model import Position, Range

_EOL_RE = re.compile(r"\r\n|\n")


@dataclass(frozen=True)
class Line:
    number: int  # 1-based
    start: int  # offset of the first character
    content: str  # without the line ending
    ending: str  # "", "\n" or "\r\n"

    @property
    def end(self) -> int:
        """Offset just past the last content character."""
        return self.start + len(self.content)

    @property
    def next_start(self) -> int:
        return self.end + len(self.ending)


def iter_lines(text: str) -> Iterator[Line]:
    """Yield every line of ``text``, including the trailing segment after the
    last line ending (which is empty when the text ends with one)."""
    pos = 0
    number = 1
    for m in _EOL_RE.finditer(text):
        yield Line(number, pos, text[pos : m.start()], m.group())
        pos = m.end()
        number += 1
    yield Line(number, pos, text[pos:], "")


def detect_eol(text: str, default: str = "\n") -> str:
    m = _EOL_RE.search(text)
    return m.group() if m else default


def position_at(text: str, offset: int) -> Position:
    """Position of ``offset`` in ``text``; offsets are clamped to the text.

    An offset inside a line ending (between ``\\r`` and ``\\n``) stays on the
    line that ending terminates.
    """
    offset = max(0, min(offset, len(text)))
    for line in iter_lines(text):
        if offset < line.next_start or not line.ending:
            return Position(line.number, offset - line.start + 1, offset)
    raise AssertionError("iter_lines always yields a final line")


def position_of(text: str, line: int, column: int) -> Position:
    """Position for a 1-based ``(line, column)`` pair.

    Lines past the end clamp to the last line; columns clamp to the line's
    content plus one (the insertion point after its last character).
    """
    last = None
    for current in iter_lines(text):
        last = current
        if current.number >= max(line, 1):
            break
    assert last is not None
    column = max(1, min(column, len(last.content) + 1))
    return Position(last.number, column, last.start + column - 1)


def line_range(first: Line, last: Line) -> Range:
    """Range from column 1 of ``first`` to the end of ``last``'s content."""
    return Range(
        Position(first.number, 1, first.start),
        Position(last.number, len(last.content) + 1, last.end),
    )


def scale_offset(position: Position, eol: str) -> Position:
    """Re-derive the offset of a position measured on ``"\\n"`` text for text
    that uses ``eol`` between lines instead."""
    rows = position.line - 1
    return Position(
        position.line,
        position.column,
        position.offset - rows + rows * len(eol),
    )
