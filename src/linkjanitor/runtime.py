"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_storage import FsStorage
from .adapters.graph_index import InMemoryGraph
from .adapters.markdown_parser import MarkdownParser
from .adapters.yaml_codec import YamlFrontmatter
from .config import JanitorConfig, load_config
from .core.vault import Vault


@dataclass
class Runtime:
    """Container for all wired components."""
    vault: Vault
    graph: InMemoryGraph
    config: JanitorConfig


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """Build and wire all components for a vault."""
    config = load_config(config_path=config_path, vault_path=vault_path)

    if vault_path is None:
        vault_path = config.vault.root

    storage = FsStorage(vault_path)
    parser = MarkdownParser(YamlFrontmatter())
    vault = Vault(storage, parser)
    graph = InMemoryGraph(vault)

    return Runtime(vault=vault, graph=graph, config=config)
