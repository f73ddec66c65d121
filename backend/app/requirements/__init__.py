from backend.app.requirements.locator import NarrativeLocator, is_recognized_narrative_filename
from backend.app.requirements.models import Narrative
from backend.app.requirements.path_levels import PathLevelResolver, is_narrative_marker
from backend.app.requirements.reader import NarrativeReader
from backend.app.requirements.tree import collect_narratives
from backend.app.requirements.types import (
    DiscoveredNarrative,
    LocatedNarrativeFile,
    NarrativeFileKind,
    StandaloneFileClassification,
)

__all__ = [
    "DiscoveredNarrative",
    "LocatedNarrativeFile",
    "Narrative",
    "NarrativeFileKind",
    "NarrativeLocator",
    "NarrativeReader",
    "PathLevelResolver",
    "StandaloneFileClassification",
    "collect_narratives",
    "is_narrative_marker",
    "is_recognized_narrative_filename",
]
