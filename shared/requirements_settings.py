"""Requirements configuration parsing used by the reader and CLI entrypoints."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from shared.config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_REQUIREMENT_TYPES,
    DEFAULT_REQUIREMENTS_LEVEL,
    DEFAULT_REQUIREMENTS_ROOT,
)


@dataclass(frozen=True)
class RequirementsSettings:
    """Root directory, type taxonomy and level offset for one requirements tree."""

    root_directory: str
    requirement_types: tuple[str, ...]
    baseline_level: int = 0


def parse_requirement_types(raw: Any, fallback: tuple[str, ...] = DEFAULT_REQUIREMENT_TYPES) -> tuple[str, ...]:
    """Accept a comma-separated string or a list; blank entries are dropped."""
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = [str(i) for i in raw if i is not None]
    else:
        items = []
    types = tuple(t.strip() for t in items if t and t.strip())
    if types:
        return types
    return tuple(fallback)


def parse_level(raw: Any, default: int = DEFAULT_REQUIREMENTS_LEVEL) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValueError(f"Requirements level must be an integer, got {raw!r}") from None


def load_config_file(path: Path) -> dict[str, Any]:
    """Read the optional YAML config. A missing file is an empty config."""
    if not path.exists() or not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Requirements config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_requirements_settings(
    environ: Mapping[str, str] | None = None,
    config_path: Path | None = None,
) -> RequirementsSettings:
    env = os.environ if environ is None else environ
    if config_path is None:
        raw_path = env.get("REQUIREMENTS_CONFIG", "").strip()
        config_path = Path(raw_path).expanduser() if raw_path else DEFAULT_CONFIG_FILE
    file_cfg = load_config_file(config_path)

    root = env.get("REQUIREMENTS_ROOT", "").strip() or str(file_cfg.get("root_directory") or "").strip()
    file_types = parse_requirement_types(file_cfg.get("requirement_types"))
    return RequirementsSettings(
        root_directory=root or DEFAULT_REQUIREMENTS_ROOT,
        requirement_types=parse_requirement_types(env.get("REQUIREMENT_TYPES", ""), fallback=file_types),
        baseline_level=parse_level(env.get("REQUIREMENTS_LEVEL"), default=parse_level(file_cfg.get("level"))),
    )
