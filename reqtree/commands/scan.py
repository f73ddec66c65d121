"""``reqtree scan`` - list every narrative found under a requirements root."""
from __future__ import annotations

import json
from pathlib import Path

from backend.app.requirements.path_levels import PathLevelResolver
from backend.app.requirements.reader import NarrativeReader
from backend.app.requirements.tree import collect_narratives
from reqtree.commands.options import add_settings_arguments, settings_from_args


def register(subparsers) -> None:
    p = subparsers.add_parser("scan", help="Walk a requirements tree and list its narratives")
    p.add_argument("root", nargs="?", default=None, help="Requirements root (default: configured root)")
    p.add_argument("--json", action="store_true", help="Print narratives as a JSON array")
    p.add_argument("--no-standalone", action="store_true", help="Skip .story/.feature files")
    add_settings_arguments(p)
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        settings = settings_from_args(args, root=args.root)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    root = Path(settings.root_directory).expanduser()
    if not root.is_dir():
        print(f"ERROR: Requirements root not found: {root}")
        return 1

    reader = NarrativeReader(PathLevelResolver(str(root.absolute()), settings.requirement_types))
    found = collect_narratives(
        root,
        reader,
        settings.baseline_level,
        include_standalone_files=not args.no_standalone,
    )

    if args.json:
        print(json.dumps([d.narrative.model_dump(mode="json") for d in found], indent=2))
        return 0

    if not found:
        print(f"No narratives found in {root}")
        return 0
    for d in found:
        print(f"{d.narrative.type}\t{d.narrative.title or ''}\t{d.path}")
    return 0
