"""Shared configuration constants for requirement narrative discovery."""
from __future__ import annotations

import os
from pathlib import Path


def _env_flag(name: str, default: bool = False) -> bool:
    """Read boolean env flag."""
    val = os.environ.get(name, "").strip().lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


# Requirement taxonomy, broadest first. Override: REQUIREMENT_TYPES="epic,feature,story"
DEFAULT_REQUIREMENT_TYPES: tuple[str, ...] = ("capability", "feature", "story")

# Requirements tree root (Cucumber layout). JBehave projects usually point this at src/test/resources/stories
DEFAULT_REQUIREMENTS_ROOT = "src/test/resources/features"

# Depth offset when requirements do not start at the root itself
DEFAULT_REQUIREMENTS_LEVEL = 0

# Optional YAML file holding root_directory / requirement_types / level, relative to the working dir
DEFAULT_CONFIG_FILE = Path("requirements.yaml")

# Walk also loads .story/.feature files, not only directory narratives
SCAN_INCLUDE_STANDALONE_FILES = _env_flag("REQUIREMENTS_SCAN_STANDALONE", default=True)
