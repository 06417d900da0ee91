from __future__ import annotations

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from llm.schemas import Priority


class _TreeNode(BaseModel):
    # Python side stays snake_case, JSON side matches the presentation layer.
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""


class StoryTask(_TreeNode):
    type: Literal["task"] = "task"
    status: Literal["todo"] = "todo"
    priority: Priority = "medium"
    estimated_effort: str = Field(..., alias="estimatedEffort")
    acceptance_criteria: List[str] = Field(..., alias="acceptanceCriteria", min_length=1)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class Feature(_TreeNode):
    order: int = Field(..., ge=0)
    tasks: List[StoryTask] = Field(default_factory=list)


class Epic(_TreeNode):
    order: int = Field(..., ge=0)
    features: List[Feature] = Field(default_factory=list)


class StoryMap(_TreeNode):
    """Addressable story map tree handed to presentation and export."""

    epics: List[Epic] = Field(default_factory=list)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    def iter_ids(self):
        yield self.id
        for epic in self.epics:
            yield epic.id
            for feature in epic.features:
                yield feature.id
                for task in feature.tasks:
                    yield task.id
