"""CLI for linkjanitor - keeps link reference blocks in sync across a vault."""

import argparse
import json
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from ._logging import configure_logging
from .core.model import Position, TextEdit
from .janitor import JanitorOptions, run_janitor
from .refs import synchronize
from .runtime import build_runtime


def _position_dict(pos: Position) -> dict[str, int]:
    return {"line": pos.line, "column": pos.column, "offset": pos.offset}


def _edit_dict(edit: TextEdit) -> dict[str, Any]:
    return {
        "range": {
            "start": _position_dict(edit.range.start),
            "end": _position_dict(edit.range.end),
        },
        "newText": edit.new_text,
    }


def _options(args: argparse.Namespace, rt: Any, dry_run: bool) -> JanitorOptions:
    return JanitorOptions(
        include_unresolved=args.include_unresolved or rt.config.references.include_unresolved,
        headings=getattr(args, "headings", False) or rt.config.headings.enabled,
        dry_run=dry_run,
    )


def _print_changes(args: argparse.Namespace, changes: list, verb: str) -> None:
    if args.json:
        output = [
            {
                "note_id": c.note_id,
                "changes": c.changes,
                "edits": [_edit_dict(e) for e in c.edits],
            }
            for c in changes
        ]
        print(json.dumps(output, indent=2))
    elif not args.quiet:
        for c in changes:
            print(f"{c.note_id}: {', '.join(c.changes)}")
        print(f"{len(changes)} note(s) {verb}")


def cmd_check(args: argparse.Namespace, rt: Any) -> int:
    """Report notes whose reference block is out of date."""
    changes = run_janitor(rt.vault, rt.graph, _options(args, rt, dry_run=True))
    _print_changes(args, changes, "out of date")
    return 1 if changes else 0


def cmd_fix(args: argparse.Namespace, rt: Any) -> int:
    """Rewrite out-of-date notes in place."""
    changes = run_janitor(rt.vault, rt.graph, _options(args, rt, dry_run=False))
    _print_changes(args, changes, "updated")
    return 0


def cmd_show(args: argparse.Namespace, rt: Any) -> int:
    """Print the edit that would sync one note."""
    rt.graph.rebuild()
    note = rt.graph.get(args.note)
    if note is None:
        matches = rt.graph.lookup_by_slug(args.note)
        note = matches[0] if matches else None
    if note is None:
        print(f"Note {args.note} not found", file=sys.stderr)
        return 1

    include_unresolved = args.include_unresolved or rt.config.references.include_unresolved
    edit = synchronize(note, rt.graph, include_unresolved)

    if args.json:
        print(json.dumps(_edit_dict(edit) if edit else None, indent=2))
    elif edit is None:
        print(f"{note.id}: up to date")
    else:
        start, end = edit.range.start, edit.range.end
        print(f"{note.id}: {start.line}:{start.column}-{end.line}:{end.column}")
        print(edit.new_text)
    return 0


def _version_string() -> str:
    return (
        f"linkjanitor {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.system().lower()}"
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="linkjanitor", description="Sync Markdown link reference definitions"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/janitor.toml, vault/janitor.toml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to vault directory (overrides config)",
    )
    parser.add_argument(
        "--include-unresolved",
        dest="include_unresolved",
        action="store_true",
        help="Keep reference lines for links to notes that do not exist",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    parser_check = subparsers.add_parser(
        "check", help="List notes whose reference block is out of date"
    )
    parser_check.add_argument(
        "--headings", action="store_true", help="Also report missing title headings"
    )

    parser_fix = subparsers.add_parser("fix", help="Update reference blocks in place")
    parser_fix.add_argument(
        "--headings", action="store_true", help="Also insert missing title headings"
    )

    parser_show = subparsers.add_parser("show", help="Print the edit for one note")
    parser_show.add_argument("note", help="Note id or slug")

    args = parser.parse_args(argv)

    handlers = {
        "check": cmd_check,
        "fix": cmd_fix,
        "show": cmd_show,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        rt = build_runtime(vault_path=args.vault, config_path=args.config)
        configure_logging(rt.config.logging.level)
        exit_code = handler(args, rt)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
