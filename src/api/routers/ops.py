from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api.backend import StoryMapOrchestrator
from api.dependencies import get_orchestrator

router = APIRouter()


@router.get("/health")
async def health_check(
    orchestrator: StoryMapOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "providers": {p.id: p.configured for p in orchestrator.list_providers()},
    }


@router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus scrape endpoint.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
