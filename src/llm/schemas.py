from __future__ import annotations
from typing import List, Literal
from pydantic import BaseModel, Field

Priority = Literal["high", "medium", "low"]

DEFAULT_ACCEPTANCE_CRITERIA = "Acceptance criteria not specified"


class GeneratedTask(BaseModel):
    title: str
    description: str = ""
    priority: Priority = "medium"
    effort: str = "2 days"
    acceptance_criteria: List[str] = Field(
        default_factory=lambda: [DEFAULT_ACCEPTANCE_CRITERIA], min_length=1
    )


class GeneratedFeature(BaseModel):
    title: str
    description: str = ""
    tasks: List[GeneratedTask] = Field(default_factory=list)


class GeneratedEpic(BaseModel):
    title: str
    description: str = ""
    features: List[GeneratedFeature] = Field(default_factory=list)


class StoryMapResult(BaseModel):
    """Canonical shape every provider (live or mock) has to produce."""

    title: str
    description: str
    epics: List[GeneratedEpic] = Field(default_factory=list)
