import logging
from collections import defaultdict

from ..core.model import Note
from ..core.ports import GraphQuery
from ..core.vault import Vault

log = logging.getLogger(__name__)


class InMemoryGraph(GraphQuery):
    """Slug index over every note in a vault; safe to rebuild at any time.

    Lookups only read the index built by the last ``rebuild``, so a run over
    the workspace sees one consistent snapshot.
    """

    def __init__(self, vault: Vault | None = None):
        self.vault = vault
        self._notes: dict[str, Note] = {}
        self._by_slug: dict[str, list[Note]] = defaultdict(list)

    @classmethod
    def from_notes(cls, notes) -> "InMemoryGraph":
        graph = cls()
        graph._load(notes)
        return graph

    def rebuild(self) -> None:
        if self.vault is None:
            return
        notes = []
        for nid in self.vault.list_ids():
            note = self.vault.get(nid)
            if note is not None:
                notes.append(note)
        self._load(notes)
        log.debug("graph rebuilt with %d notes", len(self._notes))

    def _load(self, notes) -> None:
        self._notes.clear()
        self._by_slug.clear()
        for note in sorted(notes, key=lambda n: n.id):
            self._notes[note.id] = note
            self._by_slug[note.slug].append(note)

    def lookup_by_slug(self, slug: str) -> list[Note]:
        return list(self._by_slug.get(slug, ()))

    def get(self, id: str) -> Note | None:
        return self._notes.get(id)

    def notes(self) -> list[Note]:
        return list(self._notes.values())

