"""Workspace-wide janitor run: compute, apply and write edits per note."""

import logging
from dataclasses import dataclass, field

from .adapters.graph_index import InMemoryGraph
from .core.model import Note, NoteId, TextEdit
from .core.vault import Vault
from .edits import apply_edits
from .headings import generate_heading
from .refs import synchronize

log = logging.getLogger(__name__)


@dataclass
class JanitorOptions:
    include_unresolved: bool = False
    headings: bool = False
    dry_run: bool = True


@dataclass
class NoteChange:
    note_id: NoteId
    edits: list[TextEdit] = field(default_factory=list)
    changes: list[str] = field(default_factory=list)  # "heading", "references"
    new_text: str = ""


def plan_note(note: Note, graph: InMemoryGraph, options: JanitorOptions) -> NoteChange | None:
    """Edits for one note, all computed against its current text."""
    change = NoteChange(note_id=note.id)

    if options.headings:
        heading = generate_heading(note)
        if heading is not None:
            change.edits.append(heading)
            change.changes.append("heading")

    refs = synchronize(note, graph, options.include_unresolved)
    if refs is not None:
        change.edits.append(refs)
        change.changes.append("references")

    if not change.edits:
        return None
    change.new_text = apply_edits(note.raw, change.edits)
    return change


def run_janitor(
    vault: Vault,
    graph: InMemoryGraph,
    options: JanitorOptions | None = None,
) -> list[NoteChange]:
    """Plan (and unless dry_run, write) edits for every note in the vault.

    The graph is rebuilt once up front; notes written during the run do not
    feed back into it.
    """
    if options is None:
        options = JanitorOptions()

    graph.rebuild()
    changed: list[NoteChange] = []
    for note in graph.notes():
        change = plan_note(note, graph, options)
        if change is None:
            continue
        changed.append(change)
        if options.dry_run:
            log.info("%s: would update %s", note.id, ", ".join(change.changes))
        else:
            vault.write(note.id, change.new_text)
            log.info("%s: updated %s", note.id, ", ".join(change.changes))
    return changed
