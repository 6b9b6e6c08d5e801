from collections.abc import Iterable

from .model import Note, NoteId
from .ports import ParserStrategy, StorageStrategy


class Vault:
    def __init__(self, storage: StorageStrategy, parser: ParserStrategy):
        self.storage = storage
        self.parser = parser

    def get(self, id: NoteId) -> Note | None:
        raw = self.storage.read_raw(id)
        if raw is None:
            return None
        return self.parser.parse(raw, id)

    def write(self, id: NoteId, contents: str) -> None:
        self.storage.write_raw(id, contents)

    def list_ids(self) -> Iterable[NoteId]:
        return self.storage.list_all_ids()
