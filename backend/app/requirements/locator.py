"""Locate narrative files in requirement directories and classify standalone files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from backend.app.requirements.path_levels import PathLevelResolver
from backend.app.requirements.types import (
    LocatedNarrativeFile,
    NarrativeFileKind,
    StandaloneFileClassification,
)

logger = logging.getLogger(__name__)

NARRATIVE_FILENAMES: frozenset[str] = frozenset(
    {"narrative.txt", "narrative.md", "readme.md", "overview.txt", "overview.md"}
)
STORY_SUFFIX = ".story"
FEATURE_SUFFIX = ".feature"
STORY_TYPE = "story"

ListEntries = Callable[[Path], Sequence[Path]]


def is_recognized_narrative_filename(name: str) -> bool:
    return name.lower() in NARRATIVE_FILENAMES


def file_kind(name: str) -> NarrativeFileKind:
    if is_recognized_narrative_filename(name):
        return NarrativeFileKind.DIRECTORY_NARRATIVE
    if name.endswith(STORY_SUFFIX):
        return NarrativeFileKind.STORY_FILE
    if name.endswith(FEATURE_SUFFIX):
        return NarrativeFileKind.FEATURE_FILE
    return NarrativeFileKind.UNRECOGNIZED


def list_directory(directory: Path) -> list[Path]:
    """Immediate entries of ``directory``; empty when it is missing or not a directory."""
    if not directory.exists() or not directory.is_dir():
        return []
    return sorted(directory.iterdir(), key=lambda p: p.name)


@dataclass(frozen=True)
class NarrativeLocator:
    resolver: PathLevelResolver
    list_entries: ListEntries = field(default=list_directory)

    def find_in_directory(self, directory: Path, baseline_level: int = 0) -> LocatedNarrativeFile | None:
        entries = self.list_entries(Path(directory)) or ()
        matches = [entry for entry in entries if is_recognized_narrative_filename(Path(entry).name)]
        if not matches:
            logger.debug("No narrative file in %s", directory)
            return None
        narrative_file = Path(matches[0])
        requirement_type = self.resolver.resolve_type(
            narrative_file.absolute(),
            baseline_level,
            is_directory_narrative=True,
        )
        return LocatedNarrativeFile(path=narrative_file, requirement_type=requirement_type)

    def classify_standalone_file(self, file: Path) -> StandaloneFileClassification | None:
        file = Path(file)
        kind = file_kind(file.name)
        if kind == NarrativeFileKind.STORY_FILE:
            return StandaloneFileClassification(path=file, kind=kind, default_type=STORY_TYPE)
        if kind == NarrativeFileKind.FEATURE_FILE:
            return StandaloneFileClassification(path=file, kind=kind)
        return None
