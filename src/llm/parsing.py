from __future__ import annotations
import json
import re
from typing import Any

from llm.errors import ProviderError, ValidationError
from llm.schemas import (
    DEFAULT_ACCEPTANCE_CRITERIA,
    GeneratedEpic,
    GeneratedFeature,
    GeneratedTask,
    StoryMapResult,
)

PRIORITIES = {"high", "medium", "low"}

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def extract_json_object(text: str) -> dict:
    """Pull the JSON object out of a model reply.

    Models like to wrap the object in prose or markdown fences. We first try the
    whole (unfenced) reply, then the first '{' from which a complete object decodes.
    """
    if not isinstance(text, str) or not text.strip():
        raise ProviderError("Empty response from provider")

    candidate = text.strip()
    fenced = _FENCE_RE.match(candidate)
    if fenced:
        candidate = fenced.group(1)

    try:
        whole = json.loads(candidate)
        if isinstance(whole, dict):
            return whole
    except ValueError:
        pass

    decoder = json.JSONDecoder()
    start = candidate.find("{")
    while start != -1:
        try:
            obj, _end = decoder.raw_decode(candidate, start)
            if isinstance(obj, dict):
                return obj
        except ValueError:
            pass
        start = candidate.find("{", start + 1)

    raise ProviderError("No valid JSON object found in provider response")


def validate_story_map_payload(payload: Any) -> dict:
    """Reject payloads that do not even resemble a story map."""
    if not isinstance(payload, dict):
        raise ValidationError("Story map payload must be a JSON object")
    if not payload.get("title") or not payload.get("description"):
        raise ValidationError("Story map payload is missing title or description")
    if not isinstance(payload.get("epics"), list):
        raise ValidationError("Story map payload has no epics list")
    return payload


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _text(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return value
    return str(value)


def _priority(value: Any) -> str:
    if isinstance(value, str) and value.strip().lower() in PRIORITIES:
        return value.strip().lower()
    return "medium"


def _acceptance_criteria(value: Any) -> list[str]:
    criteria = [_text(c, "") for c in _as_list(value)]
    criteria = [c for c in criteria if c.strip()]
    return criteria or [DEFAULT_ACCEPTANCE_CRITERIA]


def _normalize_task(raw: Any) -> GeneratedTask:
    task = _as_dict(raw)
    return GeneratedTask(
        title=_text(task.get("title"), "Untitled Task"),
        description=_text(task.get("description"), ""),
        priority=_priority(task.get("priority")),
        effort=_text(task.get("effort"), "2 days"),
        acceptance_criteria=_acceptance_criteria(task.get("acceptance_criteria")),
    )


def _normalize_feature(raw: Any) -> GeneratedFeature:
    feature = _as_dict(raw)
    return GeneratedFeature(
        title=_text(feature.get("title"), "Untitled Feature"),
        description=_text(feature.get("description"), ""),
        tasks=[_normalize_task(t) for t in _as_list(feature.get("tasks"))],
    )


def _normalize_epic(raw: Any) -> GeneratedEpic:
    epic = _as_dict(raw)
    return GeneratedEpic(
        title=_text(epic.get("title"), "Untitled Epic"),
        description=_text(epic.get("description"), ""),
        features=[_normalize_feature(f) for f in _as_list(epic.get("features"))],
    )


def normalize_story_map(payload: Any) -> StoryMapResult:
    """Fill every missing field with its default. Never raises on parsed JSON."""
    data = _as_dict(payload)
    return StoryMapResult(
        title=_text(data.get("title"), ""),
        description=_text(data.get("description"), ""),
        epics=[_normalize_epic(e) for e in _as_list(data.get("epics"))],
    )


def parse_story_map_reply(text: str) -> StoryMapResult:
    """Reply text -> validated, normalized story map."""
    payload = extract_json_object(text)
    validate_story_map_payload(payload)
    return normalize_story_map(payload)
