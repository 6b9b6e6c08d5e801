"""Insert a title heading into notes that have none."""

import re

from .core.model import Note, Range, TextEdit
from .core.positions import iter_lines, position_at

_WORD_SPLIT_RE = re.compile(r"[-_\s]+")


def heading_from_slug(slug: str) -> str:
    """
    Examples:
        >>> heading_from_slug("file-without-title")
        'File Without Title'
    """
    words = [w for w in _WORD_SPLIT_RE.split(slug) if w]
    if not words:
        return slug
    return " ".join(w[:1].upper() + w[1:] for w in words)


def generate_heading(note: Note) -> TextEdit | None:
    """Edit adding ``# <Title From Slug>`` at the top of the body, or None
    when the note already has a title.

    The body starts where the frontmatter codec stopped, so the heading
    always lands below whatever it recognised as frontmatter.
    """
    if note.title:
        return None

    start = position_at(note.raw, note.body_start)
    heading = f"# {heading_from_slug(note.slug)}"

    if start.column != 1:
        # frontmatter closes on the last line, without a line ending
        prefix = note.eol
        blank_follows = False
    else:
        prefix = ""
        following = next(line for line in iter_lines(note.raw) if line.number == start.line)
        blank_follows = bool(following.ending) and not following.content.strip()

    suffix = note.eol if blank_follows else note.eol * 2
    return TextEdit(Range(start, start), prefix + heading + suffix)
