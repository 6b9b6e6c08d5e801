"""Materialize TextEdits into text."""

from collections.abc import Sequence

from .core.model import TextEdit


class OverlappingEditsError(ValueError):
    pass


def apply_edit(text: str, edit: TextEdit) -> str:
    start = edit.range.start.offset
    end = edit.range.end.offset
    return text[:start] + edit.new_text + text[end:]


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """Apply several edits computed against the same ``text``.

    Edits run from the end of the text backwards so earlier offsets stay
    valid. When two edits start at the same offset, the one listed first ends
    up first in the result.
    """
    ordered = sorted(
        enumerate(edits),
        key=lambda item: (item[1].range.start.offset, item[0]),
        reverse=True,
    )
    result = text
    boundary = len(text)
    for _, edit in ordered:
        if edit.range.end.offset > boundary:
            raise OverlappingEditsError(
                f"edit at offset {edit.range.start.offset} overlaps a later edit"
            )
        result = apply_edit(result, edit)
        boundary = edit.range.start.offset
    return result
