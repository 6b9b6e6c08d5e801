"""Rendering of the autogenerated link reference block."""

from collections.abc import Sequence

from ..core.model import LinkReference

BEGIN_SENTINEL = '[//begin]: # "Autogenerated link references for markdown compatibility"'
END_SENTINEL = '[//end]: # "Autogenerated link references"'


def render_definition(ref: LinkReference) -> str:
    """Render one ``[slug]: slug "title"`` reference definition."""
    title = ref.title.replace('"', '\\"')
    return f'[{ref.slug}]: {ref.slug} "{title}"'


def render_block(references: Sequence[LinkReference], eol: str) -> str:
    """Render the whole block joined with the note's own ``eol``.

    Returns an empty string when there is nothing to reference, meaning no
    block should exist. The result never ends with a line ending.
    """
    if not references:
        return ""
    lines = [BEGIN_SENTINEL]
    lines.extend(render_definition(ref) for ref in references)
    lines.append(END_SENTINEL)
    return eol.join(lines)
