from collections.abc import Iterable
from pathlib import Path

from ..core.ports import StorageStrategy


class FsStorage(StorageStrategy):
    """Markdown files anywhere under ``root``; hidden directories are skipped.

    Files are read and written with ``newline=""`` so CRLF notes keep their
    line endings byte for byte.
    """

    def __init__(self, root: Path):
        self.root = root

    def _path(self, id: str) -> Path:
        return self.root / f"{id}.md"

    def read_raw(self, id: str) -> str | None:
        p = self._path(id)
        if not p.exists():
            return None
        with open(p, encoding="utf-8", newline="") as f:
            return f.read()

    def write_raw(self, id: str, contents: str) -> None:
        p = self._path(id)
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = p.with_suffix(".md.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8", newline="") as f:
                f.write(contents)
            tmp_path.replace(p)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def list_all_ids(self) -> Iterable[str]:
        if not self.root.exists():
            return []
        ids = []
        for p in self.root.rglob("*.md"):
            rel = p.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            ids.append(rel.with_suffix("").as_posix())
        return sorted(ids)
