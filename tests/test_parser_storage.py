"""Tests for the note snapshot collaborators: parser, storage, graph."""

import tempfile
from pathlib import Path

from linkjanitor.adapters.fs_storage import FsStorage
from linkjanitor.adapters.graph_index import InMemoryGraph
from linkjanitor.adapters.markdown_parser import MarkdownParser, extract_links, extract_title
from linkjanitor.adapters.yaml_codec import YamlFrontmatter
from linkjanitor.core.vault import Vault


def test_extract_links_order_and_dedup():
    text = "[[b]] and [[a|Alias]] then [[b#Heading]] and ![[c#^label]]"
    assert extract_links(text) == ["b", "a", "c"]


def test_extract_links_skips_code():
    text = """Real [[one]].

```markdown
[[fenced]]
```

Inline `[[inline]]` code and [[two]].
"""
    assert extract_links(text) == ["one", "two"]


def test_extract_links_ignores_empty_targets():
    assert extract_links("[[]] [[ | x]] [[ok]]") == ["ok"]


def test_extract_title_first_h1_outside_fence():
    text = "```\n# not a title\n```\n## Sub\n# Real Title #\n# Second\n"
    assert extract_title(text) == "Real Title"


def test_parser_builds_snapshot():
    text = "---\r\ntitle: From Meta\r\n---\r\n# Heading\r\n[[x]]\r\n"
    note = MarkdownParser().parse(text, "folder/my-note")
    assert note.id == "folder/my-note"
    assert note.slug == "my-note"
    assert note.title == "From Meta"
    assert note.eol == "\r\n"
    assert note.links == ("x",)
    assert note.raw == text


def test_parser_without_title():
    note = MarkdownParser().parse("just text [[x]]", "plain")
    assert note.title is None
    assert note.display_title == "plain"
    assert note.eol == "\n"


def test_invalid_frontmatter_is_ignored():
    meta, body = YamlFrontmatter().decode("---\nkey: [unclosed\n---\nbody\n")
    assert meta == {}
    assert body.startswith("---")


def test_fs_storage_preserves_crlf():
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = FsStorage(Path(tmpdir))
        storage.write_raw("sub/note", "a\r\nb\r\n")
        assert (Path(tmpdir) / "sub" / "note.md").read_bytes() == b"a\r\nb\r\n"
        assert storage.read_raw("sub/note") == "a\r\nb\r\n"
        assert storage.read_raw("missing") is None


def test_fs_storage_lists_recursively_and_skips_hidden():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "a").mkdir()
        (root / ".trash").mkdir()
        (root / "top.md").write_text("x")
        (root / "a" / "inner.md").write_text("x")
        (root / ".trash" / "old.md").write_text("x")
        (root / "notes.txt").write_text("x")
        assert list(FsStorage(root).list_all_ids()) == ["a/inner", "top"]


def test_graph_lookup_orders_duplicate_slugs():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "x").mkdir()
        (root / "dup.md").write_text("# Root Dup\n[[target]]\n")
        (root / "x" / "dup.md").write_text("# Nested Dup\n")
        (root / "target.md").write_text("# Target\n")

        graph = InMemoryGraph(Vault(FsStorage(root), MarkdownParser()))
        graph.rebuild()

        assert [n.id for n in graph.lookup_by_slug("dup")] == ["dup", "x/dup"]
        assert graph.lookup_by_slug("nothing") == []
        assert graph.get("target").title == "Target"
        assert len(graph.notes()) == 3


def test_extract_links_stray_backtick_stays_in_its_paragraph():
    text = "a `tick\n\nSee [[alpha]].\n\nanother `tick\n"
    assert extract_links(text) == ["alpha"]


def test_extract_links_code_span_across_single_newline():
    assert extract_links("`code\n[[hidden]]` and [[shown]]\n") == ["shown"]


def test_extract_links_skips_reference_block():
    text = (
        "[[kept]]\n\n"
        '[//begin]: # "Autogenerated link references for markdown compatibility"\n'
        '[kept]: kept "Title with [[inner]]"\n'
        '[//end]: # "Autogenerated link references"\n'
    )
    assert extract_links(text) == ["kept"]


def test_parser_records_body_start():
    text = "\n---\ntags: [x]\n---\nBody.\n"
    note = MarkdownParser().parse(text, "n")
    assert text[note.body_start :] == "Body.\n"
    assert MarkdownParser().parse("Body.\n", "n").body_start == 0
