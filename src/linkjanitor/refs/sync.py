"""Compute the single edit that brings a note's reference block in sync."""

import logging

from ..core.model import Note, Position, Range, TextEdit
from ..core.ports import GraphQuery
from ..core.positions import iter_lines
from .locate import locate_block
from .render import render_block
from .resolve import resolve_links

log = logging.getLogger(__name__)


def insertion_point(text: str) -> Position:
    """Where a new block goes: column 1 of the line after the last line with
    content, or the end of the text if that line has no line ending."""
    point = Position(1, 1, 0)
    for line in iter_lines(text):
        if not line.content.strip():
            continue
        if line.ending:
            point = Position(line.number + 1, 1, line.next_start)
        else:
            point = Position(line.number, len(line.content) + 1, line.end)
    return point


def synchronize(
    note: Note,
    graph: GraphQuery,
    include_unresolved: bool = False,
) -> TextEdit | None:
    """Return the edit that syncs the note's reference block, or None.

    Pure: reads the note and queries the graph, never raises on malformed
    text and never writes anything.
    """
    block = render_block(resolve_links(note, graph, include_unresolved), note.eol)
    existing = locate_block(note.raw)

    if existing is None:
        if not block:
            return None
        start = insertion_point(note.raw)
        padding = note.eol if start.column == 1 else note.eol * 2
        log.debug("%s: inserting reference block at line %d", note.id, start.line)
        return TextEdit(Range(start, start), padding + block)

    current = note.raw[existing.start.offset : existing.end.offset]
    if current == block:
        return None
    if not block:
        log.debug("%s: removing reference block", note.id)
    else:
        log.debug("%s: replacing reference block", note.id)
    return TextEdit(existing, block)
