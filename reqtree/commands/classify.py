"""``reqtree classify`` - resolve the requirement type of a single file."""
from __future__ import annotations

from pathlib import Path

from backend.app.requirements.locator import NarrativeLocator
from backend.app.requirements.path_levels import PathLevelResolver
from reqtree.commands.options import add_settings_arguments, settings_from_args


def register(subparsers) -> None:
    p = subparsers.add_parser("classify", help="Resolve the requirement type of one file")
    p.add_argument("path", help="File path (need not exist)")
    p.add_argument("--root", type=str, default=None, help="Requirements root (default: configured root)")
    role = p.add_mutually_exclusive_group()
    role.add_argument("--narrative", dest="narrative", action="store_const", const=True, help="Treat the file as a directory narrative")
    role.add_argument("--leaf", dest="narrative", action="store_const", const=False, help="Treat the file as a leaf requirement")
    p.set_defaults(narrative=None)
    add_settings_arguments(p)
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        settings = settings_from_args(args, root=args.root)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    resolver = PathLevelResolver(settings.root_directory, settings.requirement_types)
    if args.narrative is None:
        classification = NarrativeLocator(resolver).classify_standalone_file(Path(args.path))
        if classification is not None:
            print(f"{classification.kind.value}\t{classification.default_type or '-'}")
            return 0

    print(resolver.resolve_type(args.path, settings.baseline_level, args.narrative))
    return 0
