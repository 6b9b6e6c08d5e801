"""Shared fixtures: the six-note scaffold vault in both line-ending styles."""

import shutil
from pathlib import Path

import pytest

from linkjanitor.adapters.fs_storage import FsStorage
from linkjanitor.adapters.graph_index import InMemoryGraph
from linkjanitor.adapters.markdown_parser import MarkdownParser
from linkjanitor.core.vault import Vault

SCAFFOLD = Path(__file__).parent / "scaffold"


def copy_scaffold(dest: Path, eol: str) -> Path:
    """Copy the scaffold into dest, rewriting every line ending to eol."""
    shutil.copytree(SCAFFOLD, dest)
    for path in dest.rglob("*.md"):
        text = path.read_bytes().decode("utf-8").replace("\r\n", "\n")
        path.write_bytes(text.replace("\n", eol).encode("utf-8"))
    return dest


def build_vault(root: Path) -> Vault:
    return Vault(FsStorage(root), MarkdownParser())


@pytest.fixture(params=["\n", "\r\n"], ids=["lf", "crlf"])
def eol(request):
    return request.param


@pytest.fixture
def scaffold_vault(tmp_path, eol):
    return build_vault(copy_scaffold(tmp_path / "vault", eol))


@pytest.fixture
def scaffold_graph(scaffold_vault):
    graph = InMemoryGraph(scaffold_vault)
    graph.rebuild()
    return graph
