from fastapi import Request

from api.backend import StoryMapOrchestrator


def get_orchestrator(request: Request) -> StoryMapOrchestrator:
    return request.app.state.orchestrator
