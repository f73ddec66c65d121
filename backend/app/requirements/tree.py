from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from backend.app.requirements.locator import file_kind
from backend.app.requirements.reader import NarrativeReader
from backend.app.requirements.types import DiscoveredNarrative, NarrativeFileKind
from shared.config import SCAN_INCLUDE_STANDALONE_FILES

logger = logging.getLogger(__name__)

STANDALONE_KINDS = (NarrativeFileKind.STORY_FILE, NarrativeFileKind.FEATURE_FILE)


def iter_requirement_dirs(root: Path, _seen: set[Path] | None = None) -> Iterator[Path]:
    """Yield ``root`` and every sub-directory, parents before children, siblings by name.

    A directory whose resolved location was already yielded is skipped, so
    symlinks pointing back up the tree are visited at most once.
    """
    seen = set() if _seen is None else _seen
    real = root.resolve()
    if real in seen:
        logger.debug("Skipping already visited directory %s -> %s", root, real)
        return
    seen.add(real)
    yield root
    for child in sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name.lower()):
        yield from iter_requirement_dirs(child, seen)


def collect_narratives(
    root: Path,
    reader: NarrativeReader,
    baseline_level: int = 0,
    *,
    include_standalone_files: bool = SCAN_INCLUDE_STANDALONE_FILES,
) -> list[DiscoveredNarrative]:
    root = Path(root)
    if not root.exists() or not root.is_dir():
        logger.warning("Requirements root not found: %s", root)
        return []

    found: list[DiscoveredNarrative] = []
    for directory in iter_requirement_dirs(root):
        narrative = reader.load_from(directory, baseline_level)
        if narrative is not None:
            found.append(DiscoveredNarrative(path=Path(narrative.path), narrative=narrative))
        if not include_standalone_files:
            continue
        for fp in reader.list_entries(directory) or ():
            if file_kind(fp.name) not in STANDALONE_KINDS or not fp.is_file():
                continue
            narrative = reader.load_from_story_file(fp)
            if narrative is not None:
                found.append(DiscoveredNarrative(path=fp, narrative=narrative))

    logger.info("Collected %d narratives under %s", len(found), root)
    return found
