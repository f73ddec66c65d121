"""Subcommands known to `reqtree`, in the order they appear in `--help`."""
from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Iterable

COMMAND_MODULES: tuple[str, ...] = (
    "classify",
    "scan",
    "show_types",
)


def iter_command_modules() -> Iterable[ModuleType]:
    """Import each subcommand module listed in COMMAND_MODULES."""
    for name in COMMAND_MODULES:
        yield import_module(f"reqtree.commands.{name}")


def register_all(subparsers) -> None:
    """Call `register(subparsers)` on every command module."""
    for module in iter_command_modules():
        module.register(subparsers)
