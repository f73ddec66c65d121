"""Default narrative loader for narrative/readme/overview and JBehave .story files.

Layout understood::

    Meta:                      (optional JBehave meta block, skipped)
    @tag value
    Capability: Billing        (title; a "<Type>:" prefix overrides the default type)
    Narrative:                 (optional keyword line, skipped)
    In order to ...            (description, up to the first Scenario:)
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from backend.app.requirements.models import Narrative
from backend.app.requirements.path_levels import is_narrative_marker

logger = logging.getLogger(__name__)

_TYPED_TITLE_RE = re.compile(r"^([A-Za-z][\w-]*)\s*:\s*(.+)$")
_MARKDOWN_HEADING_RE = re.compile(r"^#+\s*")
NARRATIVE_KEYWORD = "narrative:"
META_KEYWORD = "meta:"
SCENARIO_KEYWORD = "scenario:"
# Keyword lines that never carry a title
STRUCTURAL_PREFIXES: frozenset[str] = frozenset({"narrative", "scenario", "givenstories", "lifecycle", "examples"})


def humanize(name: str) -> str:
    words = re.sub(r"[_\-.]+", " ", name).strip()
    return words[:1].upper() + words[1:] if words else ""


def default_title(path: Path) -> str:
    if is_narrative_marker(path.name):
        return humanize(path.parent.name)
    return humanize(path.stem)


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8-sig")
    except OSError as e:
        logger.warning("Narrative read failed %s: %s", path, e)
        return None


def _skip_preamble(lines: list[str]) -> list[str]:
    idx = 0
    while idx < len(lines) and not lines[idx].strip():
        idx += 1
    if idx < len(lines) and lines[idx].strip().lower() == META_KEYWORD:
        idx += 1
        while idx < len(lines) and (not lines[idx].strip() or lines[idx].strip().startswith("@")):
            idx += 1
    return lines[idx:]


def split_title(line: str, default_type: str) -> tuple[str | None, str]:
    """Return (title, type) for a title line."""
    stripped = _MARKDOWN_HEADING_RE.sub("", line.strip()).strip()
    if not stripped or stripped.lower() == NARRATIVE_KEYWORD:
        return None, default_type
    match = _TYPED_TITLE_RE.match(stripped)
    if match:
        prefix = match.group(1).lower()
        if prefix in STRUCTURAL_PREFIXES:
            return None, default_type
        return match.group(2).strip(), prefix
    return stripped, default_type


def load_narrative(path: Path, default_type: str) -> Narrative | None:
    path = Path(path)
    raw = _read_text(path)
    if raw is None:
        return None

    lines = _skip_preamble(raw.splitlines())
    title: str | None = None
    requirement_type = default_type
    if lines:
        title, requirement_type = split_title(lines[0], default_type)
        if title is not None:
            lines = lines[1:]

    body: list[str] = []
    for line in lines:
        keyword = line.strip().lower()
        if keyword.startswith(SCENARIO_KEYWORD):
            break
        if keyword.startswith(NARRATIVE_KEYWORD):
            remainder = line.strip()[len(NARRATIVE_KEYWORD):].strip()
            if remainder:
                body.append(remainder)
            continue
        body.append(line.rstrip())

    return Narrative(
        title=title or default_title(path),
        type=requirement_type,
        text="\n".join(body).strip(),
        path=str(path),
    )
