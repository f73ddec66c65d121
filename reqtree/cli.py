"""reqtree – unified CLI dispatcher.

All subcommands live in ``reqtree/commands/*.py`` and expose a
``register(subparsers)`` function that adds themselves to argparse.
"""
from __future__ import annotations

import argparse
import logging
import sys

from reqtree.commands.registry import register_all


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="reqtree",
        description="reqtree - requirement narratives from a directory tree",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    sub = parser.add_subparsers(dest="command")

    register_all(sub)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(0)

    # Each command stores a ``func`` on the namespace
    rc = args.func(args)
    sys.exit(rc or 0)
