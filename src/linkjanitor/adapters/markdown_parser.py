import re
from pathlib import PurePosixPath

from ..core.model import Note
from ..core.ports import FrontmatterCodec, ParserStrategy
from ..core.positions import detect_eol
from ..refs.locate import locate_block
from .yaml_codec import YamlFrontmatter

LINK_RE = re.compile(r"!?\[\[(.*?)\]\]")
HEADING_RE = re.compile(r"^#\s+(.+?)\s*#*\s*$")
FENCE_RE = re.compile(r"^\s*(```|~~~)")
INLINE_CODE_RE = re.compile(r"(`+).*?\1", re.DOTALL)
PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t]*\n")


def _target_slug(spec: str) -> str:
    # Handles: slug | slug|Title | slug#heading | slug#^label
    core = spec.split("|", 1)[0]
    core = core.split("#", 1)[0]
    return core.strip()


def _prose_lines(text: str):
    """Yield lines that are outside fenced code blocks."""
    in_fence = False
    fence = ""
    for line in text.splitlines():
        m = FENCE_RE.match(line)
        if m:
            if not in_fence:
                in_fence, fence = True, m.group(1)
                continue
            if m.group(1) == fence:
                in_fence = False
                continue
        if not in_fence:
            yield line


def extract_links(text: str) -> list[str]:
    """Outgoing link targets in first-appearance order, each listed once.

    The autogenerated reference block is not part of the prose; titles
    rendered into it never count as links.
    """
    block = locate_block(text)
    if block is not None:
        text = text[: block.start.offset] + text[block.end.offset :]

    # code spans never cross a blank line
    paragraphs = PARAGRAPH_BREAK_RE.split("\n".join(_prose_lines(text)))
    prose = "\n\n".join(INLINE_CODE_RE.sub("", p) for p in paragraphs)

    targets: list[str] = []
    for m in LINK_RE.finditer(prose):
        slug = _target_slug(m.group(1))
        if slug and slug not in targets:
            targets.append(slug)
    return targets


def extract_title(text: str) -> str | None:
    for line in _prose_lines(text):
        m = HEADING_RE.match(line)
        if m:
            return m.group(1)
    return None


class MarkdownParser(ParserStrategy):
    def __init__(self, frontmatter: FrontmatterCodec | None = None):
        self.frontmatter = frontmatter or YamlFrontmatter()

    def parse(self, text: str, id: str) -> Note:
        meta, body = self.frontmatter.decode(text)
        title = meta.get("title")
        if not isinstance(title, str) or not title.strip():
            title = extract_title(body)
        return Note(
            id=id,
            slug=PurePosixPath(id).name,
            raw=text,
            eol=detect_eol(text),
            title=title.strip() if title else None,
            links=tuple(extract_links(body)),
            body_start=len(text) - len(body),
        )
