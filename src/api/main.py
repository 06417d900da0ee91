import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.backend import build_orchestrator
from api.routers import ops, story_maps


def _log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


# Logging configuration
logging.basicConfig(
    level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One orchestrator per process, shared by every request.
    app.state.orchestrator = build_orchestrator()
    configured = [p.id for p in app.state.orchestrator.list_providers() if p.configured]
    logger.info(f"Story map orchestrator ready (configured providers: {', '.join(configured)})")
    yield


app = FastAPI(title="Story Mapper", lifespan=lifespan)
app.include_router(story_maps.router)
app.include_router(ops.router)
