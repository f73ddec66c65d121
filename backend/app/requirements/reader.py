"""Load narratives from a requirements directory tree.

A narrative is a text file describing a requirement (capability, feature, epic
or whatever terms the project uses). The directory structure organizes
capabilities into features and so on; leaf directories hold story or feature
files. At each level a ``narrative.txt`` (or readme/overview) file provides
the description, and its requirement type comes from its depth below the
root.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable

from backend.app.requirements.feature_parser import parse_feature_narrative
from backend.app.requirements.loader import load_narrative
from backend.app.requirements.locator import ListEntries, NarrativeLocator, list_directory
from backend.app.requirements.models import Narrative
from backend.app.requirements.path_levels import PathLevelResolver
from backend.app.requirements.types import NarrativeFileKind
from shared.requirements_settings import RequirementsSettings, load_requirements_settings

LoadNarrative = Callable[[Path, str], "Narrative | None"]
ParseFeature = Callable[[Path], "Narrative | None"]


@dataclass(frozen=True)
class NarrativeReader:
    resolver: PathLevelResolver
    loader: LoadNarrative = field(default=load_narrative)
    feature_parser: ParseFeature = field(default=parse_feature_narrative)
    list_entries: ListEntries = field(default=list_directory)

    @classmethod
    def for_root_directory(
        cls,
        root_directory: str | Path,
        settings: RequirementsSettings | None = None,
    ) -> "NarrativeReader":
        settings = settings or load_requirements_settings()
        return cls(PathLevelResolver(str(root_directory), settings.requirement_types))

    @property
    def root_directory(self) -> str:
        return self.resolver.root_directory

    @property
    def requirement_types(self) -> tuple[str, ...]:
        return self.resolver.requirement_types

    @property
    def locator(self) -> NarrativeLocator:
        return NarrativeLocator(self.resolver, self.list_entries)

    def with_requirement_types(self, requirement_types: Iterable[str]) -> "NarrativeReader":
        return replace(self, resolver=self.resolver.with_requirement_types(requirement_types))

    def load_from(self, directory: Path, requirements_level: int = 0) -> Narrative | None:
        located = self.locator.find_in_directory(Path(directory), requirements_level)
        if located is None:
            return None
        return self.loader(located.path, located.requirement_type)

    def load_from_story_file(self, story_file: Path) -> Narrative | None:
        classification = self.locator.classify_standalone_file(Path(story_file))
        if classification is None:
            return None
        if classification.kind == NarrativeFileKind.FEATURE_FILE:
            return self.feature_parser(classification.path)
        return self.loader(classification.path, classification.default_type)
