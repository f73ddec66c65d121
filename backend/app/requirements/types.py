from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from backend.app.requirements.models import Narrative


class NarrativeFileKind(str, Enum):
    DIRECTORY_NARRATIVE = "directory_narrative"
    STORY_FILE = "story_file"
    FEATURE_FILE = "feature_file"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class LocatedNarrativeFile:
    path: Path
    requirement_type: str


@dataclass(frozen=True)
class StandaloneFileClassification:
    path: Path
    kind: NarrativeFileKind
    default_type: str | None = None


@dataclass(frozen=True)
class DiscoveredNarrative:
    path: Path
    narrative: Narrative
