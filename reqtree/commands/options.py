"""Settings flags shared by commands that build a NarrativeReader."""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from shared.requirements_settings import (
    RequirementsSettings,
    load_requirements_settings,
    parse_level,
    parse_requirement_types,
)


def add_settings_arguments(p) -> None:
    p.add_argument("--config", type=str, default=None, help="YAML config (default: $REQUIREMENTS_CONFIG or ./requirements.yaml)")
    p.add_argument("--types", type=str, default=None, help="Comma-separated requirement types, broadest first")
    p.add_argument("--level", type=str, default=None, help="Baseline requirements level (default: 0)")


def settings_from_args(args, root: str | None = None) -> RequirementsSettings:
    config_path = Path(args.config).expanduser() if args.config else None
    settings = load_requirements_settings(config_path=config_path)
    if root:
        settings = replace(settings, root_directory=root)
    if args.types:
        settings = replace(settings, requirement_types=parse_requirement_types(args.types, fallback=settings.requirement_types))
    if args.level is not None:
        settings = replace(settings, baseline_level=parse_level(args.level))
    return settings
