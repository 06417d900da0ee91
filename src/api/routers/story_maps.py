import logging
import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.backend import ProviderKind, StoryMapOrchestrator
from api.dependencies import get_orchestrator
from api.metrics import REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS
from story_mapper.models import StoryMap

router = APIRouter()
logger = logging.getLogger(__name__)


class StoryMapRequest(BaseModel):
    product_description: str = Field(..., min_length=1)
    provider: ProviderKind = ProviderKind.MOCK


@router.post("/story-maps", response_model=StoryMap)
async def create_story_map(
    payload: StoryMapRequest,
    orchestrator: StoryMapOrchestrator = Depends(get_orchestrator),
) -> StoryMap:
    start = time.time()
    logger.info(
        f"Story map requested via {payload.provider.value}: {payload.product_description[:50]}..."
    )

    story_map = await orchestrator.generate_internal_story_map(
        payload.product_description, payload.provider
    )
    logger.info(f"Story map {story_map.id} generated with {len(story_map.epics)} epics")

    # Prometheus (best-effort)
    try:
        REQUESTS_TOTAL.labels(endpoint="/story-maps", status="ok").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/story-maps").observe(time.time() - start)
    except Exception:
        pass

    return story_map


@router.get("/providers")
async def list_providers(
    orchestrator: StoryMapOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Provider availability for the selection control."""
    return {
        "providers": [
            {"id": p.id, "displayName": p.display_name, "configured": p.configured}
            for p in orchestrator.list_providers()
        ]
    }
