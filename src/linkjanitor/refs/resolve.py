import logging

from ..core.model import LinkReference, Note
from ..core.ports import GraphQuery

log = logging.getLogger(__name__)


def resolve_links(
    note: Note,
    graph: GraphQuery,
    include_unresolved: bool = False,
) -> list[LinkReference]:
    """Resolve the note's outgoing targets into reference lines.

    Order follows first appearance in the note. A target the graph cannot
    find is dropped, or rendered with its raw slug as the title when
    ``include_unresolved`` is set. When several notes share a slug the first
    match wins.
    """
    refs: list[LinkReference] = []
    seen: set[str] = set()
    for slug in note.links:
        if slug in seen:
            continue
        seen.add(slug)

        matches = graph.lookup_by_slug(slug)
        if matches:
            target = matches[0]
            if len(matches) > 1:
                log.debug(
                    "%s: slug %r matches %d notes, using %s",
                    note.id, slug, len(matches), target.id,
                )
            refs.append(LinkReference(slug=slug, title=target.display_title))
        elif include_unresolved:
            refs.append(LinkReference(slug=slug, title=slug))
        else:
            log.debug("%s: dropping unresolved link %r", note.id, slug)
    return refs
