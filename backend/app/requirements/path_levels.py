"""Requirement-type resolution from a file's position under the requirements root.

The root is located inside the candidate path as literal text. When the
configured root cannot be found (different separators, symlinked checkouts,
relative configuration) the conventional ``/stories/`` and ``/features/``
folders act as implicit roots, and failing those the whole path is treated
as relative.

Resolution is pure text arithmetic: no filesystem access, no shared state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from typing import Iterable

logger = logging.getLogger(__name__)

BACKSLASH = "\\"
FORWARD_SLASH = "/"
IMPLICIT_ROOT_SEGMENTS: tuple[str, ...] = ("/stories/", "/features/")

DIRECTORY_NARRATIVE_NAMES: frozenset[str] = frozenset({"readme.md", "readme.txt", "overview.txt", "overview.md"})
DIRECTORY_NARRATIVE_SUFFIXES: tuple[str, ...] = ("narrative.txt", "narrative.md")


def normalized(path: str | PathLike[str]) -> str:
    return str(path).replace(BACKSLASH, FORWARD_SLASH)


def file_name(path: str | PathLike[str]) -> str:
    return normalized(path).rstrip(FORWARD_SLASH).rsplit(FORWARD_SLASH, 1)[-1]


def is_narrative_marker(name: str) -> bool:
    """True for files describing their directory (readme, overview, *narrative.txt/md)."""
    lowered = name.lower()
    return lowered in DIRECTORY_NARRATIVE_NAMES or lowered.endswith(DIRECTORY_NARRATIVE_SUFFIXES)


def path_elements(relative_path: str) -> list[str]:
    return [segment for segment in relative_path.split(FORWARD_SLASH) if segment]


def find_root_anchor(normalized_path: str, normalized_root: str) -> tuple[int, int]:
    """Return (start, end) of the root inside the path, or (0, 0) when no anchor matches."""
    for anchor in (normalized_root, *IMPLICIT_ROOT_SEGMENTS):
        start = normalized_path.find(anchor)
        if start >= 0:
            return start, start + len(anchor)
    return 0, 0


def calculate_requirements_level(requirements_level: int, directory_count: int) -> int:
    return requirements_level + directory_count - 1


def calculate_narrative_level(requirements_level: int, directory_count: int) -> int:
    # A narrative describes its directory, one level above a leaf story in that directory
    feature_level = requirements_level + directory_count - 1
    return feature_level - 1 if feature_level > 0 else feature_level


@dataclass(frozen=True)
class PathLevelResolver:
    """Maps file paths to requirement types for one (root, type list) pair."""

    root_directory: str
    requirement_types: tuple[str, ...]

    def __post_init__(self) -> None:
        types = tuple(self.requirement_types)
        if not types:
            raise ValueError("requirement_types must contain at least one type")
        object.__setattr__(self, "requirement_types", types)
        object.__setattr__(self, "root_directory", str(self.root_directory))

    def with_requirement_types(self, requirement_types: Iterable[str]) -> "PathLevelResolver":
        return PathLevelResolver(self.root_directory, tuple(requirement_types))

    def directory_count(self, candidate_path: str | PathLike[str]) -> int:
        """Directories between the root and the file, excluding the file name."""
        normalized_path = normalized(candidate_path)
        _, root_end = find_root_anchor(normalized_path, normalized(self.root_directory))
        return len(path_elements(normalized_path[root_end:])) - 1

    def level_for(
        self,
        candidate_path: str | PathLike[str],
        baseline_level: int = 0,
        is_directory_narrative: bool | None = None,
    ) -> int:
        if is_directory_narrative is None:
            is_directory_narrative = is_narrative_marker(file_name(candidate_path))
        count = self.directory_count(candidate_path)
        if is_directory_narrative:
            return calculate_narrative_level(baseline_level, count)
        return calculate_requirements_level(baseline_level, count)

    def type_for_level(self, level: int) -> str:
        last = len(self.requirement_types) - 1
        return self.requirement_types[min(max(level, 0), last)]

    def resolve_type(
        self,
        candidate_path: str | PathLike[str],
        baseline_level: int = 0,
        is_directory_narrative: bool | None = None,
    ) -> str:
        level = self.level_for(candidate_path, baseline_level, is_directory_narrative)
        requirement_type = self.type_for_level(level)
        logger.debug("Resolved %s at level %d -> %s", candidate_path, level, requirement_type)
        return requirement_type
