from __future__ import annotations
from dataclasses import dataclass

NoteId = str


@dataclass(frozen=True)
class Position:
    line: int  # 1-based
    column: int  # 1-based
    offset: int  # 0-based character index into the raw text


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position  # exclusive

    @property
    def is_empty(self) -> bool:
        return self.start.offset == self.end.offset


@dataclass(frozen=True)
class TextEdit:
    range: Range
    new_text: str


@dataclass(frozen=True)
class LinkReference:
    slug: str
    title: str


@dataclass(frozen=True)
class Note:
    id: NoteId  # relative path without ".md"
    slug: str  # filename stem, not guaranteed unique
    raw: str
    eol: str = "\n"
    title: str | None = None
    links: tuple[str, ...] = ()
    body_start: int = 0  # offset just past any frontmatter

    @property
    def display_title(self) -> str:
        return self.title or self.slug
