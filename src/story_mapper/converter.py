from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from llm.schemas import GeneratedEpic, GeneratedFeature, GeneratedTask, StoryMapResult
from story_mapper.models import Epic, Feature, StoryMap, StoryTask


def _new_id() -> str:
    return uuid.uuid4().hex


def _convert_task(task: GeneratedTask, now: datetime) -> StoryTask:
    return StoryTask(
        id=_new_id(),
        title=task.title,
        description=task.description,
        priority=task.priority,
        estimated_effort=task.effort,
        acceptance_criteria=list(task.acceptance_criteria),
        created_at=now,
        updated_at=now,
    )


def _convert_feature(feature: GeneratedFeature, order: int, now: datetime) -> Feature:
    return Feature(
        id=_new_id(),
        title=feature.title,
        description=feature.description,
        order=order,
        tasks=[_convert_task(t, now) for t in feature.tasks],
    )


def _convert_epic(epic: GeneratedEpic, order: int, now: datetime) -> Epic:
    return Epic(
        id=_new_id(),
        title=epic.title,
        description=epic.description,
        order=order,
        features=[_convert_feature(f, i, now) for i, f in enumerate(epic.features)],
    )


def to_internal_tree(result: StoryMapResult, now: Optional[datetime] = None) -> StoryMap:
    """Give a generated story map ids, ordering, status defaults and timestamps.

    One timestamp is taken per conversion so createdAt == updatedAt everywhere.
    """
    now = now or datetime.now(timezone.utc)
    return StoryMap(
        id=_new_id(),
        title=result.title,
        description=result.description,
        epics=[_convert_epic(e, i, now) for i, e in enumerate(result.epics)],
        created_at=now,
        updated_at=now,
    )
