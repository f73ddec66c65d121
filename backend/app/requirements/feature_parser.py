"""Feature-level narrative extraction from Gherkin ``.feature`` files.

Only the ``Feature:`` title and the free-text description beneath it are read;
scenarios and steps are left to the test runner.
"""
from __future__ import annotations

import logging
from pathlib import Path

from backend.app.requirements.models import Narrative

logger = logging.getLogger(__name__)

FEATURE_TYPE = "feature"
FEATURE_KEYWORD = "feature:"
DESCRIPTION_STOP_KEYWORDS: tuple[str, ...] = (
    "background:",
    "scenario:",
    "scenario outline:",
    "scenario template:",
    "example:",
    "examples:",
    "rule:",
)


def _is_comment(stripped: str) -> bool:
    return stripped.startswith("#")


def _is_tag(stripped: str) -> bool:
    return stripped.startswith("@")


def parse_feature_narrative(path: Path) -> Narrative | None:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        logger.warning("Feature read failed %s: %s", path, e)
        return None

    lines = raw.splitlines()
    feature_idx = None
    for idx, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or _is_comment(stripped) or _is_tag(stripped):
            continue
        if stripped.lower().startswith(FEATURE_KEYWORD):
            feature_idx = idx
        break
    if feature_idx is None:
        logger.debug("No Feature: line in %s", path)
        return None

    title = lines[feature_idx].strip()[len(FEATURE_KEYWORD):].strip()
    description: list[str] = []
    for line in lines[feature_idx + 1:]:
        stripped = line.strip()
        if _is_tag(stripped) or stripped.lower().startswith(DESCRIPTION_STOP_KEYWORDS):
            break
        if _is_comment(stripped):
            continue
        description.append(stripped)

    return Narrative(
        title=title or None,
        type=FEATURE_TYPE,
        text="\n".join(description).strip(),
        path=str(path),
    )
