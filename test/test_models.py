from datetime import datetime

import pytest

from llm.schemas import GeneratedTask, StoryMapResult
from story_mapper.models import StoryTask


def test_generated_task_defaults():
    t = GeneratedTask(title="Test")
    assert t.priority == "medium"
    assert t.effort == "2 days"
    assert t.acceptance_criteria == ["Acceptance criteria not specified"]


def test_generated_task_rejects_unknown_priority():
    with pytest.raises(Exception):
        GeneratedTask(title="Bad", priority="urgent")


def test_generated_task_rejects_empty_acceptance_criteria():
    with pytest.raises(Exception):
        GeneratedTask(title="Bad", acceptance_criteria=[])


def test_story_map_result_defaults():
    r = StoryMapResult(title="T", description="D")
    assert r.epics == []


def test_story_task_accepts_aliases():
    now = datetime(2026, 1, 1, 9, 0)
    t = StoryTask(
        id="abc",
        title="X",
        estimatedEffort="1 day",
        acceptanceCriteria=["works"],
        createdAt=now,
        updatedAt=now,
    )
    assert t.estimated_effort == "1 day"
    assert t.type == "task"
    assert t.status == "todo"
