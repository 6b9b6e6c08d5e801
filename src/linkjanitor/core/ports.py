from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from .model import Note, NoteId


class StorageStrategy(Protocol):
    """
    Directory tree of Markdown files; ids are relative paths without ".md".
    """

    def read_raw(self, id: NoteId) -> str | None:
        pass

    def write_raw(self, id: NoteId, contents: str) -> None:
        pass

    def list_all_ids(self) -> Iterable[NoteId]:
        pass


class FrontmatterCodec(Protocol):
    """
    Split optional frontmatter from the body without enforcing schema.
    """

    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        pass


class ParserStrategy(Protocol):
    """
    Build an immutable Note snapshot from raw text. The raw text is kept
    verbatim; every offset computed later indexes into it.
    """

    def parse(self, text: str, id: NoteId) -> Note:
        pass


class GraphQuery(Protocol):
    """
    Read-only slug lookup. Zero, one or several notes may share a slug;
    callers take the first by convention.
    """

    def lookup_by_slug(self, slug: str) -> Sequence[Note]:
        pass
