"""`reqtree types` - show the effective requirement type list."""
from __future__ import annotations

from reqtree.commands.options import add_settings_arguments, settings_from_args


def register(subparsers) -> None:
    p = subparsers.add_parser("types", help="Show effective requirement types, broadest first")
    add_settings_arguments(p)
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        settings = settings_from_args(args)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    for name in settings.requirement_types:
        print(name)
    return 0
