"""Loaded narrative: the description attached to a requirement node or leaf file."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Narrative(BaseModel):
    """Title and body read from a narrative, story or feature file."""
    title: str | None = None
    type: str = Field(..., description="Requirement type, e.g. capability / feature / story")
    text: str = ""
    path: str = Field(..., description="Source file the narrative was read from")